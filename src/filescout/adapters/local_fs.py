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

import os
from pathlib import Path

from ..domain.errors import FilesystemError
from ..ports.filesystem import FilesystemPort


class LocalFS(FilesystemPort):
    """
    Local filesystem adapter built on os.scandir.

    Entries come back in whatever order the OS lists them unless `sort=True`,
    in which case they are ordered by name. Directory symlinks are not
    descended; symlinks to regular files count as files.
    """

    def __init__(self, *, sort: bool = False) -> None:
        self._sort = bool(sort)

    def _entries(self, directory: Path) -> list[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise FilesystemError(directory, e.strerror or str(e)) from e
        if self._sort:
            entries.sort(key=lambda e: e.name)
        return entries

    def list_files(self, directory: Path) -> list[Path]:
        directory = Path(directory)
        files = []
        for entry in self._entries(directory):
            try:
                if entry.is_file():
                    files.append(directory / entry.name)
            except OSError:
                # entry vanished or is unreadable between listing and check
                continue
        return files

    def list_directories(self, directory: Path) -> list[Path]:
        directory = Path(directory)
        dirs = []
        for entry in self._entries(directory):
            try:
                if entry.is_dir(follow_symlinks=False):
                    dirs.append(directory / entry.name)
            except OSError:
                continue
        return dirs

    def stat(self, path: Path) -> dict:
        try:
            st = Path(path).stat()
        except OSError as e:
            raise FilesystemError(path, e.strerror or str(e)) from e
        return {
            "path": str(path),
            "size": st.st_size,
            "mtime_ns": getattr(st, "st_mtime_ns", int(st.st_mtime * 1e9)),
        }
