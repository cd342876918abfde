"""Mersenne Twister (MT19937 / MT19937-64) pseudorandom number generators."""

from .generator import (
    INTERVALS,
    MT19937,
    MT19937_64,
    MersenneTwister,
    TwisterState,
)
from .params import MT32, MT64, TwisterParams, params_for_bits

__all__ = [
    "INTERVALS",
    "MT19937",
    "MT19937_64",
    "MT32",
    "MT64",
    "MersenneTwister",
    "TwisterParams",
    "TwisterState",
    "params_for_bits",
]
