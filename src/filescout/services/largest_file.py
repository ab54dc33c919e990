# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from pathlib import Path
from typing import Optional, Union

from ..ports.filesystem import FilesystemPort
from .directory_walker import DirectoryWalker
from .max_selector import MaxResult, select_max


def largest_file(
    walker: DirectoryWalker, fs: FilesystemPort, root: Union[str, Path]
) -> Optional[MaxResult[Path]]:
    """
    Find the biggest file under `root` by size in bytes.

    Returns None when the tree holds no readable files. A file that cannot be
    stat'ed raises FilesystemError rather than being skipped.
    """
    files: list[Path] = []
    walker.walk(root, files.append)
    return select_max(files, lambda p: fs.stat(p)["size"])
