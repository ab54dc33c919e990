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

import logging
from pathlib import Path
from typing import Optional, Union

from ..domain.errors import FilesystemError
from ..domain.walk import FileCallback, WalkAction, WalkResult, WalkState
from ..ports.filesystem import FilesystemPort
from ..ports.reporter import ErrorReporterPort

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """
    Depth-first walk over a directory tree, calling back once per regular file.

    Order:
      - a directory's files are reported before any of its subdirectories
      - subdirectories are visited in listing order, each fully before the next

    The callback may return WalkAction.CANCEL to stop the whole walk, not just
    the current directory. A directory that cannot be listed is handed to the
    reporter and its subtree skipped; siblings are still visited.

    Note:
      * Uses an explicit stack, so very deep trees don't hit the recursion limit.
      * No state survives between walk() calls.
    """

    def __init__(
        self,
        fs: FilesystemPort,
        reporter: ErrorReporterPort,
        *,
        on_file_found: Optional[FileCallback] = None,
    ) -> None:
        self._fs = fs
        self._reporter = reporter
        self._on_file_found = on_file_found

    def walk(
        self,
        root: Union[str, Path],
        on_file_found: Optional[FileCallback] = None,
    ) -> WalkResult:
        """
        Walk the tree rooted at `root`.

        `on_file_found` overrides the callback given at construction. With no
        callback at all the walk still runs and only counts files.

        Returns:
            WalkResult with the final state (DONE or CANCELLED), the number of
            files handed to the callback and the directories that failed.
        """
        callback = on_file_found or self._on_file_found
        result = WalkResult()
        pending: list[Path] = [Path(root)]

        while pending:
            directory = pending.pop()
            logger.debug("DirectoryWalker.walk: entering %s", directory)

            try:
                files = self._fs.list_files(directory)
            except FilesystemError as e:
                self._failed(result, directory, e)
                continue

            for path in files:
                result.files_visited += 1
                action = callback(path) if callback is not None else None
                if action is WalkAction.CANCEL:
                    logger.info("Search cancelled by file handler at %s", path)
                    result.state = WalkState.CANCELLED
                    return result

            try:
                subdirs = self._fs.list_directories(directory)
            except FilesystemError as e:
                self._failed(result, directory, e)
                continue

            # Reversed so the first listed subdirectory is popped first.
            pending.extend(reversed(subdirs))

        result.state = WalkState.DONE
        return result

    def _failed(self, result: WalkResult, directory: Path, error: FilesystemError) -> None:
        result.failed_directories.append(directory)
        self._reporter.report(directory, error)
