"""Constant sets for the two Mersenne Twister word widths.

Each width is one frozen ``TwisterParams`` instance. The generator in
``generator.py`` is a single implementation parameterized by these; nothing
here is computed at runtime.

  * ``MT32``: MT19937, 624 words of 32 bits.
  * ``MT64``: MT19937-64, 312 words of 64 bits.

Both must match the reference C programs bit for bit. Changing any value
here changes every output stream, so ``twister_cmp/`` will fail loudly.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class TwisterParams:
    word_bits: int
    n: int
    m: int
    matrix_a: int
    upper_mask: int
    lower_mask: int

    # Seeding recurrence multipliers
    init_mult: int
    array_mult_key: int
    array_mult_mix: int
    array_base_seed: int
    default_seed: int

    # Tempering: y ^= (y >> u) & d; y ^= (y << s) & b; y ^= (y << t) & c; y ^= y >> l
    temper_u: int
    temper_d: int
    temper_s: int
    temper_b: int
    temper_t: int
    temper_c: int
    temper_l: int

    # Right shift applied to a raw word before mapping it to a real
    real_shift: int
    open_shift: int

    dtype: type = np.uint32

    @property
    def mask(self) -> int:
        return (1 << self.word_bits) - 1

    @property
    def top_bit(self) -> int:
        return 1 << (self.word_bits - 1)

    @property
    def closed_scale(self) -> float:
        return 1.0 / float((1 << (self.word_bits - self.real_shift)) - 1)

    @property
    def halfopen_scale(self) -> float:
        return 1.0 / float(1 << (self.word_bits - self.real_shift))

    @property
    def open_scale(self) -> float:
        return 1.0 / float(1 << (self.word_bits - self.open_shift))


MT32 = TwisterParams(
    word_bits=32,
    n=624,
    m=397,
    matrix_a=0x9908B0DF,
    upper_mask=0x80000000,
    lower_mask=0x7FFFFFFF,
    init_mult=1812433253,
    array_mult_key=1664525,
    array_mult_mix=1566083941,
    array_base_seed=19650218,
    default_seed=5489,
    temper_u=11,
    temper_d=0xFFFFFFFF,
    temper_s=7,
    temper_b=0x9D2C5680,
    temper_t=15,
    temper_c=0xEFC60000,
    temper_l=18,
    # 32-bit reals keep every output bit
    real_shift=0,
    open_shift=0,
    dtype=np.uint32,
)

MT64 = TwisterParams(
    word_bits=64,
    n=312,
    m=156,
    matrix_a=0xB5026F5AA96619E9,
    # Most significant 33 bits / least significant 31 bits
    upper_mask=0xFFFFFFFF80000000,
    lower_mask=0x7FFFFFFF,
    init_mult=6364136223846793005,
    array_mult_key=3935559000370003845,
    array_mult_mix=2862933555777941757,
    array_base_seed=19650218,
    default_seed=5489,
    temper_u=29,
    temper_d=0x5555555555555555,
    temper_s=17,
    temper_b=0x71D67FFFEDA60000,
    temper_t=37,
    temper_c=0xFFF7EEE000000000,
    temper_l=43,
    real_shift=11,
    open_shift=12,
    dtype=np.uint64,
)

PARAMS_BY_BITS = {32: MT32, 64: MT64}


def params_for_bits(word_bits: int) -> TwisterParams:
    """Look up the constant set for a word width (32 or 64)."""
    try:
        return PARAMS_BY_BITS[word_bits]
    except KeyError:
        raise ValueError(
            f"Unsupported word width: {word_bits} (expected 32 or 64)"
        ) from None
