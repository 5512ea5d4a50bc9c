from __future__ import annotations
import logging
import math
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..errors import HeapIndexError
from .slot_buffer import SlotBuffer

T = TypeVar("T")

logger = logging.getLogger(__name__)


class _Slot(Generic[T]):
    """One heap entry: an item, its priority and its current buffer position."""

    __slots__ = ("item", "priority", "index")

    def __init__(self, item: T, priority: float, index: int) -> None:
        self.item = item
        self.priority = priority
        self.index = index

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{self.item!r}, {self.priority!r}"


class ArrayHeap(Generic[T]):
    """A binary min-heap of items ordered by separately supplied priorities.

    Items need not be comparable; only their priorities are ordered. Items
    are matched with ``==`` by `change_priority`, and equal items may be
    stored more than once.

    Layout
    ------
    • The buffer is 1-indexed: position 0 is always empty, so the children of
      position i live at 2i and 2i + 1 and its parent at i // 2.
    • Positions 1..size hold the live slots; everything after is empty.
    • Capacity doubles when an insert would fill the buffer and never shrinks.
    """

    __slots__ = ("_slots", "_size")

    # Initial buffer length, including the unused position 0.
    _INITIAL_CAPACITY = 16

    def __init__(
        self,
        it: Optional[Iterable[Tuple[T, float]]] = None,
        capacity: Optional[int] = None,
    ) -> None:
        if capacity is None:
            capacity = self._INITIAL_CAPACITY
        if capacity < 2:
            raise ValueError("capacity must be >= 2")

        pairs = [(item, self._coerce_priority(p)) for item, p in it] if it is not None else []
        while capacity < len(pairs) + 1:
            capacity *= 2

        self._slots: SlotBuffer[_Slot[T]] = SlotBuffer(capacity)
        self._size: int = 0

        if pairs:
            for i, (item, priority) in enumerate(pairs, start=1):
                self._slots[i] = _Slot(item, priority, i)
            self._size = len(pairs)
            self._heapify()  # Bulk build in O(n) instead of repeated inserts

    # -----------------------------
    # Index arithmetic
    # -----------------------------
    @staticmethod
    def _left(i: int) -> int:
        return 2 * i

    @staticmethod
    def _right(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def _parent(i: int) -> int:
        return i // 2

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _coerce_priority(priority: float) -> float:
        p = float(priority)
        if math.isnan(p):
            raise ValueError("priority must not be NaN")
        return p

    def _in_bounds(self, i: int) -> bool:
        """True iff i addresses a live slot (1..size); position 0 never does."""
        return 1 <= i <= self._size

    def _slot_at(self, i: int) -> Optional[_Slot[T]]:
        """Return the slot at i, or None when i is out of bounds."""
        if not self._in_bounds(i):
            return None
        return self._slots[i]

    def _swap(self, i: int, j: int) -> None:
        slots = self._slots
        a, b = slots[i], slots[j]
        slots[i], slots[j] = b, a
        a.index, b.index = j, i

    def _smaller_of(self, i: int, j: int) -> int:
        """Return whichever of i and j holds the smaller priority.

        An out-of-bounds position never wins. On a tie, j is returned.
        """
        a = self._slot_at(i)
        b = self._slot_at(j)
        if a is None and b is None:
            raise HeapIndexError(f"both positions {i} and {j} are out of bounds")
        if a is None:
            return j
        if b is None:
            return i
        return i if a.priority < b.priority else j

    def _validate_sink_swim_arg(self, i: int) -> None:
        if i < 1:
            raise HeapIndexError("cannot sink or swim position 0 or less")
        if i > self._size:
            raise HeapIndexError("cannot sink or swim a position past the current size")
        if self._slots[i] is None:
            raise HeapIndexError("cannot sink or swim an empty position")

    def _swim(self, i: int) -> None:
        """Move the slot at i up while it is strictly smaller than its parent."""
        self._validate_sink_swim_arg(i)
        while i > 1:
            parent = self._parent(i)
            if self._smaller_of(i, parent) != i:
                break
            self._swap(i, parent)
            i = parent

    def _sink(self, i: int) -> None:
        """Move the slot at i down while its smaller child is strictly smaller."""
        self._validate_sink_swim_arg(i)
        slots = self._slots
        while self._in_bounds(self._left(i)):
            child = self._smaller_of(self._left(i), self._right(i))
            if not slots[child].priority < slots[i].priority:
                break
            self._swap(i, child)
            i = child

    def _heapify(self) -> None:
        """Restore heap order over the whole live region in O(n) time."""
        for i in range(self._size // 2, 0, -1):
            self._sink(i)

    def _grow(self) -> None:
        new_capacity = self._slots.capacity * 2
        logger.debug("growing heap buffer %d -> %d", self._slots.capacity, new_capacity)
        self._slots.resize(new_capacity)

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, item: T, priority: float) -> None:
        """Add item with the given priority (O(log n))."""
        p = self._coerce_priority(priority)
        if self._size + 1 == self._slots.capacity:
            self._grow()
        self._size += 1
        self._slots[self._size] = _Slot(item, p, self._size)
        self._swim(self._size)

    def peek(self) -> Optional[T]:
        """Return the item with the smallest priority, or None when empty (O(1))."""
        root = self._slot_at(1)
        return root.item if root is not None else None

    def peek_priority(self) -> Optional[float]:
        """Return the smallest priority, or None when empty (O(1))."""
        root = self._slot_at(1)
        return root.priority if root is not None else None

    def remove_min(self) -> Optional[T]:
        """Remove and return the item with the smallest priority (O(log n)).

        Returns None when the heap is empty.
        """
        if self._size == 0:
            return None
        root = self._slots[1]
        self._swap(1, self._size)
        self._slots.clear(self._size)
        self._size -= 1
        if self._size:
            self._sink(1)
        return root.item

    def size(self) -> int:
        """Number of live items (O(1))."""
        return self._size

    def change_priority(self, item: T, priority: float) -> None:
        """Set the priority of every stored item equal to `item`.

        Each match is resettled on its own: it sinks when its priority went
        up and swims otherwise. Matches are collected before any of them
        moves, and each is located through its tracked position, so none is
        skipped or handled twice. Nothing happens when no item matches.
        """
        p = self._coerce_priority(priority)
        matches = [slot for slot in self._live_slots() if slot.item == item]
        for slot in matches:
            old = slot.priority
            slot.priority = p
            if p > old:
                self._sink(slot.index)
            else:
                self._swim(slot.index)
        logger.debug("change_priority(%r, %s) updated %d slot(s)", item, p, len(matches))

    @property
    def capacity(self) -> int:
        """Current buffer length, including the unused position 0."""
        return self._slots.capacity

    def _live_slots(self) -> Iterator[_Slot[T]]:
        for i in range(1, self._size + 1):
            yield self._slots[i]

    def to_list(self) -> List[Tuple[T, float]]:
        """Return (item, priority) pairs in buffer order."""
        return list(self)

    def __contains__(self, item: object) -> bool:
        return any(slot.item == item for slot in self._live_slots())

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __iter__(self) -> Iterator[Tuple[T, float]]:
        # Buffer (heap) order, not sorted order
        for slot in self._live_slots():
            yield (slot.item, slot.priority)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ArrayHeap({self.to_list()!r})"
