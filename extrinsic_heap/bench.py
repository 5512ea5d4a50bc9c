"""
Timing and space benchmark for ArrayHeap.

Each operation is run on random inputs whose size doubles per step, and the
mean/standard deviation of wall time plus an estimate of memory held by the
heap are written to a CSV file.

Usage:
    python -m extrinsic_heap.cli bench --output heap_bench.csv
"""

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Tuple

from .datastructures import ArrayHeap

logger = logging.getLogger(__name__)

Pairs = List[Tuple[int, float]]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int) -> Pairs:
    """Generate (item, priority) pairs with random priorities."""
    return [(i, random.uniform(0, 1000000)) for i in range(size)]


def measure_operation_time(operation: Callable[[Pairs], ArrayHeap], input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_space(heap: ArrayHeap) -> int:
    """Estimate bytes held by the heap: object, buffer, slots and their contents."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._slots) + sys.getsizeof(heap._slots._buf)
    for slot in heap._live_slots():
        total += sys.getsizeof(slot) + sys.getsizeof(slot.item) + sys.getsizeof(slot.priority)
    return total


def measure_space_efficiency(operation: Callable[[Pairs], ArrayHeap], input_size: int, iterations: int = 3) -> float:
    """Return average memory used by the heap after the operation (bytes)."""
    sizes = []
    for _ in range(iterations):
        heap = operation(generate_random_pairs(input_size))
        sizes.append(measure_space(heap))
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def run_insert(data: Pairs) -> ArrayHeap:
    heap: ArrayHeap[int] = ArrayHeap()
    for item, priority in data:
        heap.insert(item, priority)
    return heap


def run_remove_min(data: Pairs) -> ArrayHeap:
    heap = run_insert(data)
    while heap.size() > 0:
        heap.remove_min()
    return heap


def run_peek(data: Pairs) -> ArrayHeap:
    heap = run_insert(data)
    for _ in range(min(3, len(data))):
        heap.peek()
    return heap


def run_change_priority(data: Pairs) -> ArrayHeap:
    heap = run_insert(data)
    for item, _ in data[:3]:
        heap.change_priority(item, random.uniform(0, 1000000))
    return heap


OPERATIONS: Dict[str, Callable[[Pairs], ArrayHeap]] = {
    "insert": run_insert,
    "remove_min": run_remove_min,
    "peek": run_peek,
    "change_priority": run_change_priority,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 12, iterations: int = 5) -> int:
    """Run exponential performance tests for ArrayHeap operations.

    Returns the number of result rows written.
    """
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)"
        ])

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                avg_space = measure_space_efficiency(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                rows += 1
                logger.info("%-15s | size=%-8d | avg=%.3f ms | std=%.3f ms | space=%.0f bytes",
                            op_name, size, avg_time, std_time, avg_space)

    return rows
