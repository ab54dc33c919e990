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

from abc import ABC, abstractmethod
from pathlib import Path


class FilesystemPort(ABC):
    """Abstract interface for filesystem access."""

    @abstractmethod
    def list_files(self, directory: Path) -> list[Path]:
        """
        Return the regular files directly inside `directory` (non-recursive).
        Raises FilesystemError if the directory cannot be listed.
        """
        raise NotImplementedError

    @abstractmethod
    def list_directories(self, directory: Path) -> list[Path]:
        """
        Return the immediate subdirectories of `directory`.
        Raises FilesystemError if the directory cannot be listed.
        """
        raise NotImplementedError

    @abstractmethod
    def stat(self, path: Path) -> dict:
        """Return metadata (path, size, mtime_ns) for a given path."""
        raise NotImplementedError
