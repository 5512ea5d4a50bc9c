from __future__ import annotations
import ctypes
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class SlotBuffer(Generic[T]):
    """A fixed-length buffer of object references with explicit growth.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Every position starts out as `None`; `None` marks an empty slot.
    • Growth is explicit via `resize()`; the buffer never shrinks.
    • Indices are plain offsets in [0, capacity); negatives are rejected.
    """

    __slots__ = ("_buf", "_capacity")

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._buf = self._make_array(capacity)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a ctypes py_object array of `capacity` positions, all None."""
        buf = (capacity * ctypes.py_object)()
        # Unset py_object entries raise ValueError on read, so fill them.
        for i in range(capacity):
            buf[i] = None
        return buf

    def _check_index(self, idx: int) -> int:
        if idx < 0 or idx >= self._capacity:
            raise IndexError(f"slot index {idx} out of range [0, {self._capacity})")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        """Number of positions, occupied or not."""
        return self._capacity

    def resize(self, new_capacity: int) -> None:
        """Grow to `new_capacity`, copying every position into a new buffer.

        The old buffer stays in place until the copy is complete.

        Raises:
            ValueError: if `new_capacity` is smaller than the current capacity.
        """
        if new_capacity < self._capacity:
            raise ValueError("new capacity must be >= current capacity")

        new_buf = self._make_array(new_capacity)
        for i in range(self._capacity):
            new_buf[i] = self._buf[i]

        self._buf = new_buf
        self._capacity = new_capacity

    def clear(self, idx: int) -> None:
        """Empty the slot at `idx` so it holds no reference."""
        self._buf[self._check_index(idx)] = None

    def __getitem__(self, idx: int) -> Optional[T]:
        return self._buf[self._check_index(idx)]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: Optional[T]) -> None:
        self._buf[self._check_index(idx)] = value

    def __len__(self) -> int:
        return self._capacity

    def __iter__(self) -> Iterator[Optional[T]]:
        """Yield every position in order, empty ones as None."""
        for i in range(self._capacity):
            yield self._buf[i]  # type: ignore[misc]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SlotBuffer({list(self)!r})"
