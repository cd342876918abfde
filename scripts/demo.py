#!/usr/bin/env python3
"""Print the reference driver's output: 1000 integers, then 1000 reals.

Seeds with the key array {0x123, 0x234, 0x345, 0x456} and prints five
values per line, the same layout the reference C drivers use, so the
output can be diffed against ``mt19937ar.out``.

Usage (from the repo root):
    python scripts/demo.py              # 32-bit (MT19937)
    python scripts/demo.py --bits 64    # 64-bit (MT19937-64)
    python scripts/demo.py -n 10        # 10 values of each kind
"""

import argparse
import sys
from pathlib import Path

# Add repo root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from twister_cmp.driver import demo_generator, render_driver_output  # noqa: E402


def main():
    parser = argparse.ArgumentParser(
        description="Print reference Mersenne Twister output"
    )
    parser.add_argument(
        "--bits",
        type=int,
        choices=[32, 64],
        default=32,
        help="Word width (default: 32)",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=1000,
        help="Number of values of each kind (default: 1000)",
    )
    args = parser.parse_args()

    rng = demo_generator(args.bits)
    sys.stdout.write(render_driver_output(rng, args.count))


if __name__ == "__main__":
    main()
