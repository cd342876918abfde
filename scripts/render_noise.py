#!/usr/bin/env python3
"""Render generator output bits as a PNG noise image.

Usage (from the repo root):
    python scripts/render_noise.py noise.png                   # 32-bit, default seed
    python scripts/render_noise.py noise.png --bits 64 --size 1024
    python scripts/render_noise.py noise.png --key 0x123 0x234 0x345 0x456
"""

import argparse
import sys
from pathlib import Path

# Add repo root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from twister.generator import MT19937, MT19937_64  # noqa: E402
from twister_viz.noise_png import (  # noqa: E402
    noise_metadata,
    render_bits,
    save_noise_png,
)


def main():
    parser = argparse.ArgumentParser(
        description="Render Mersenne Twister output as a noise PNG"
    )
    parser.add_argument("output", help="Path of the PNG to write")
    parser.add_argument(
        "--bits",
        type=int,
        choices=[32, 64],
        default=32,
        help="Word width (default: 32)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=512,
        help="Image width and height in pixels (default: 512)",
    )
    seed_group = parser.add_mutually_exclusive_group()
    seed_group.add_argument(
        "--seed", type=lambda s: int(s, 0), help="Scalar seed"
    )
    seed_group.add_argument(
        "--key",
        type=lambda s: int(s, 0),
        nargs="+",
        help="Seed key array (e.g. 0x123 0x234)",
    )
    args = parser.parse_args()

    seed = args.key if args.key is not None else args.seed
    cls = MT19937 if args.bits == 32 else MT19937_64
    rng = cls(seed)

    img = render_bits(rng, args.size, args.size)
    meta = noise_metadata(args.bits, seed, args.size, args.size)
    save_noise_png(img, meta, args.output)
    print(f"Wrote {args.size}x{args.size} noise image to {args.output}")


if __name__ == "__main__":
    main()
