from .slot_buffer import SlotBuffer
from .array_heap import ArrayHeap
from .contract import ExtrinsicPQ

__all__ = [
    "SlotBuffer",
    "ArrayHeap",
    "ExtrinsicPQ",
]
