"""Exception types raised by the heap package.

Empty-queue reads are not errors: ``peek`` and ``remove_min`` return ``None``.
The types below signal programming errors inside the heap itself.
"""


class ExtrinsicHeapError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class HeapIndexError(ExtrinsicHeapError, IndexError):
    """A heap primitive was called on an out-of-bounds or empty position."""
