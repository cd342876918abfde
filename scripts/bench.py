#!/usr/bin/env python3
"""Benchmark single-call and bulk extraction for both word widths.

Usage (from the repo root):
    python scripts/bench.py              # default: 3 iterations, 1M outputs
    python scripts/bench.py -n 5         # 5 iterations
    python scripts/bench.py -c 100000    # 100k outputs per run
"""

import argparse
import statistics
import sys
import time
from pathlib import Path

# Add repo root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from twister.generator import MT19937, MT19937_64  # noqa: E402


def _time_runs(fn, iterations: int) -> list[float]:
    times_ms = []
    for _ in range(iterations):
        start = time.perf_counter()
        fn()
        times_ms.append((time.perf_counter() - start) * 1000)
    return times_ms


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark Mersenne Twister extraction"
    )
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=3,
        help="Number of iterations (default: 3)",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=int,
        default=1_000_000,
        help="Outputs drawn per run (default: 1000000)",
    )
    args = parser.parse_args()

    print(f"Benchmark: {args.count} outputs, {args.iterations} iterations")
    print()

    for cls in (MT19937, MT19937_64):
        rng = cls([0x123, 0x234, 0x345, 0x456])

        def single():
            for _ in range(args.count):
                rng.next_raw()

        def bulk():
            rng.random_raw(args.count)

        for label, fn in (("next_raw", single), ("random_raw", bulk)):
            times_ms = _time_runs(fn, args.iterations)
            median = statistics.median(times_ms)
            rate = args.count / (median / 1000) / 1e6
            print(
                f"  {cls.__name__:<11} {label:<11}"
                f" median {median:9.1f} ms  ({rate:7.2f} M/s)"
            )


if __name__ == "__main__":
    main()
