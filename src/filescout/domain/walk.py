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

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional


class WalkAction(Enum):
    """What a file callback wants the walker to do next."""

    CONTINUE = "continue"
    CANCEL = "cancel"


class WalkState(Enum):
    RUNNING = "running"
    CANCELLED = "cancelled"
    DONE = "done"


# A callback returning None is read as CONTINUE.
FileCallback = Callable[[Path], Optional[WalkAction]]


@dataclass
class WalkResult:
    """
    Outcome of one DirectoryWalker.walk() call.

    `failed_directories` lists every directory whose listing failed and whose
    subtree was therefore skipped.
    """

    state: WalkState = WalkState.RUNNING
    files_visited: int = 0
    failed_directories: list[Path] = field(default_factory=list)

    @property
    def cancelled(self) -> bool:
        return self.state is WalkState.CANCELLED
