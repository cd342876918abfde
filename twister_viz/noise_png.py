"""Render generator output as a bit-noise image and save it as PNG.

Each pixel is one output bit (white = 1), taken from consecutive raw
outputs most significant bit first and filled row by row. A healthy
generator gives featureless noise; a broken twist or tempering step tends
to show up as stripes or lattice patterns long before a statistical test
would flag it.

Saved PNGs carry the generator configuration (word width, seed, image
size) as JSON in a PNG tEXt chunk (key: ``twister_noise``), so an image
can be regenerated from the file alone.

Used by ``scripts/render_noise.py``.
"""

from __future__ import annotations

import json

import numpy as np
from PIL import Image
from PIL.PngImagePlugin import PngInfo

from twister.generator import MersenneTwister

METADATA_KEY = "twister_noise"


def render_bits(rng: MersenneTwister, width: int, height: int) -> Image.Image:
    """Draw ``width * height`` bits from ``rng`` into a grayscale image.

    Consumes ceil(width * height / W) raw outputs.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    num_bits = width * height
    word_bits = rng.params.word_bits
    words = rng.random_raw(-(-num_bits // word_bits))
    big_endian = words.astype(words.dtype.newbyteorder(">"))
    bits = np.unpackbits(big_endian.view(np.uint8))[:num_bits]
    pixels = (bits * 255).astype(np.uint8).reshape(height, width)
    return Image.fromarray(pixels)


def noise_metadata(
    word_bits: int, seed: int | list[int] | None, width: int, height: int
) -> dict:
    return {
        "word_bits": word_bits,
        "seed": seed,
        "width": width,
        "height": height,
    }


def save_noise_png(img: Image.Image, metadata: dict, path: str) -> None:
    """Save a noise image with its metadata embedded as a PNG tEXt chunk."""
    info = PngInfo()
    info.add_text(METADATA_KEY, json.dumps(metadata))
    img.save(path, pnginfo=info)


def load_noise_metadata(path: str) -> dict:
    """Load the generator metadata from a noise PNG.

    Raises ValueError if the PNG does not contain noise metadata.
    """
    with Image.open(path) as img:
        text_data = getattr(img, "text", None)
        if not text_data or METADATA_KEY not in text_data:
            raise ValueError(
                f"PNG file does not contain noise metadata (missing '{METADATA_KEY}' chunk)"
            )
        return json.loads(text_data[METADATA_KEY])
