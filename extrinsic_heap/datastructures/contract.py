from __future__ import annotations
from typing import Optional, Protocol, TypeVar

T = TypeVar("T")


class ExtrinsicPQ(Protocol[T]):
    """A min-priority-queue whose priorities are supplied alongside the items."""

    def insert(self, item: T, priority: float) -> None: ...

    def peek(self) -> Optional[T]: ...

    def remove_min(self) -> Optional[T]: ...

    def size(self) -> int: ...

    def change_priority(self, item: T, priority: float) -> None: ...
