"""
Extrinsic Heap Command-Line Interface (CLI)

Exposes the heap through subcommands:
- drain: load (item, priority) rows from CSV, apply priority changes and
  print the extraction order
- bench: run the timing/space benchmark and write a CSV report

Usage examples:
    python -m extrinsic_heap.cli drain --path tasks.csv
    python -m extrinsic_heap.cli drain --path tasks.csv --change backup=0.5 --change deploy=9
    python -m extrinsic_heap.cli bench --output heap_bench.csv --base-input 100 --steps 8
"""

import argparse
import csv
import logging
import sys

from .datastructures import ArrayHeap
from . import bench

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Parsing helpers
# -------------------------------------------------------------------
def parse_change(text):
    """Split an ``ITEM=PRIORITY`` argument into (item, float priority)."""
    item, sep, priority = text.rpartition("=")
    if not sep or not item:
        raise ValueError(f"expected ITEM=PRIORITY, got {text!r}")
    try:
        return item, float(priority)
    except ValueError:
        raise ValueError(f"priority for {item!r} is not a number: {priority!r}") from None


def load_heap(path):
    """Build a heap from ``item,priority`` CSV rows.

    A first row whose priority column is not numeric is treated as a header.
    Blank lines are skipped.
    """
    heap = ArrayHeap()
    with open(path, "r", newline="", encoding="utf-8") as f:
        for lineno, row in enumerate(csv.reader(f), start=1):
            if not row:
                continue
            if len(row) != 2:
                raise ValueError(f"{path}:{lineno}: expected 2 columns, got {len(row)}")
            item, priority = row[0].strip(), row[1].strip()
            try:
                heap.insert(item, float(priority))
            except ValueError:
                if lineno == 1:
                    logger.debug("treating first row of %s as a header", path)
                    continue
                raise ValueError(f"{path}:{lineno}: invalid priority {priority!r}") from None
    return heap


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_drain(args):
    """Print items in extraction order after applying priority changes."""
    heap = load_heap(args.path)
    for item, priority in args.change:
        if item not in heap:
            logger.warning("no item %r in heap; change ignored", item)
        heap.change_priority(item, priority)

    if not heap:
        print("Heap is empty.")
        return

    rank = 1
    while heap:
        priority = heap.peek_priority()
        item = heap.remove_min()
        print(f"  {rank}. {item} ({priority:g})")
        rank += 1


def cmd_bench(args):
    """Run the benchmark and write the CSV report."""
    rows = bench.run_benchmarks(
        args.output,
        base_input=args.base_input,
        steps=args.steps,
        iterations=args.iterations,
    )
    print(f"Benchmark completed. {rows} rows saved to {args.output}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m extrinsic_heap.cli", description="Extrinsic priority heap CLI")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("drain", help="Drain a CSV of item,priority rows in priority order")
    s.add_argument("--path", required=True)
    s.add_argument("--change", action="append", default=[], metavar="ITEM=PRIORITY",
                   help="Change the priority of every matching item (repeatable)")
    s.set_defaults(func=cmd_drain)

    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--output", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=12)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m extrinsic_heap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "drain":
            args.change = [parse_change(c) for c in args.change]
        args.func(args)
    except (ValueError, OSError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
