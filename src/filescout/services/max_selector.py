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

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class MaxResult(Generic[T]):
    """The winning item and the score it won with."""

    item: T
    score: float


def select_max(items: Iterable[T], score: Callable[[T], float]) -> Optional[MaxResult[T]]:
    """
    Return the item with the highest score, or None if `items` is empty.

    Items are scored exactly once each, left to right. A later item only
    replaces the current best when its score is strictly greater, so ties go to
    the earliest item. Exceptions raised by `score` propagate unchanged.
    """
    best: Optional[MaxResult[T]] = None
    for item in items:
        value = score(item)
        if best is None or value > best.score:
            best = MaxResult(item, value)
    return best
