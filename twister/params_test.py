"""Tests for the per-width constant sets."""

import dataclasses

import numpy as np
import pytest

from .params import MT32, MT64, params_for_bits


@pytest.mark.parametrize("params", [MT32, MT64], ids=["mt32", "mt64"])
def test_masks_partition_word(params):
    assert params.upper_mask & params.lower_mask == 0
    assert params.upper_mask | params.lower_mask == params.mask


@pytest.mark.parametrize("params", [MT32, MT64], ids=["mt32", "mt64"])
def test_constants_fit_word(params):
    for value in (
        params.matrix_a,
        params.init_mult,
        params.array_mult_key,
        params.array_mult_mix,
        params.temper_b,
        params.temper_c,
        params.temper_d,
    ):
        assert 0 <= value <= params.mask
    assert np.dtype(params.dtype).itemsize * 8 == params.word_bits


def test_state_sizes():
    # Both hold 19937 bits of state (plus unused low bits of word 0)
    assert MT32.n * 32 - 31 == 19937
    assert MT64.n * 64 - 31 == 19937
    assert 1 <= MT32.m < MT32.n
    assert 1 <= MT64.m < MT64.n


def test_params_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        MT32.n = 1  # type: ignore[misc]


def test_params_for_bits():
    assert params_for_bits(32) is MT32
    assert params_for_bits(64) is MT64
    with pytest.raises(ValueError, match="Unsupported word width"):
        params_for_bits(16)
