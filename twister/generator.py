"""Mersenne Twister pseudorandom number generator.

One implementation, instantiated per word width by a ``TwisterParams``
constant set (``params.py``):

  * ``MT19937``: 32-bit words, N=624.
  * ``MT19937_64``: 64-bit words, N=312.

A generator owns a fixed-width numpy word vector (``words``), a ``cursor``
counting how many words of the current batch have been read, and an
``initialized`` flag. Seeding fills ``words`` and parks the cursor at N, so
the first read always twists. Every read after that tempers one word and
advances the cursor; when the cursor reaches N the next read regenerates all
N words in place (the "twist") and resets the cursor to 0.

Reading before any seeding is allowed: the twist notices ``initialized`` is
false and seeds with the width's default seed (5489) first. This is the only
place a read seeds implicitly.

**Arithmetic:** ``words`` is a ``uint32``/``uint64`` array, so the twist and
tempering (both vectorized over the batch) wrap modulo 2^W natively. The two
seeding recurrences are inherently sequential; they run on Python ints with
an explicit ``& mask`` after every step and only the masked results are
stored.

**Determinism:** outputs must match the reference C programs bit for bit.
Reordering the twist ranges or changing when the cursor advances breaks
that silently; run ``twister_cmp/`` after any behavioral change.

Generators are not thread-safe. Use one instance per thread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from .params import MT32, MT64, TwisterParams

INTERVALS = ("closed", "halfopen", "open")

Seed = Optional[Union[int, Sequence[int]]]


@dataclass(frozen=True)
class TwisterState:
    """Detached snapshot of a generator, for ``getstate``/``setstate``."""

    word_bits: int
    words: tuple[int, ...]
    cursor: int
    initialized: bool


class MersenneTwister:
    def __init__(self, params: TwisterParams, seed: Seed = None) -> None:
        self.params = params
        self.words = np.zeros(params.n, dtype=params.dtype)
        self.cursor: int = params.n
        self.initialized: bool = False
        # Tempered copy of ``words``, rebuilt by every twist
        self._tempered = np.zeros(params.n, dtype=params.dtype)

        dt = params.dtype
        self._one = dt(1)
        self._upper = dt(params.upper_mask)
        self._lower = dt(params.lower_mask)
        self._matrix_a = dt(params.matrix_a)
        self._temper_consts = (
            dt(params.temper_u),
            dt(params.temper_d),
            dt(params.temper_s),
            dt(params.temper_b),
            dt(params.temper_t),
            dt(params.temper_c),
            dt(params.temper_l),
        )

        if seed is None:
            return
        if isinstance(seed, (int, np.integer)):
            self.seed_scalar(int(seed))
        else:
            self.seed_array(seed)

    # -- Seeding --------------------------------------------------------

    def _scalar_words(self, seed: int) -> list[int]:
        p = self.params
        mask = p.mask
        shift = p.word_bits - 2
        prev = int(seed) & mask
        words = [prev]
        for i in range(1, p.n):
            prev = (p.init_mult * (prev ^ (prev >> shift)) + i) & mask
            words.append(prev)
        return words

    def _store(self, words: list[int]) -> None:
        self.words[:] = np.array(words, dtype=self.params.dtype)
        self.cursor = self.params.n
        self.initialized = True

    def seed_scalar(self, seed: int) -> None:
        """Seed from a single integer. Any value is accepted, including 0;
        bits above the word width are dropped."""
        self._store(self._scalar_words(seed))

    def seed_array(self, keys: Sequence[int]) -> None:
        """Seed from a sequence of integers (the recommended seeding path).

        Keys are reduced modulo 2^W. An empty sequence seeds as ``[0]``,
        the same as CPython's ``random.seed(0)`` does for MT19937.
        """
        p = self.params
        n, mask = p.n, p.mask
        shift = p.word_bits - 2
        key = [int(k) & mask for k in keys] or [0]
        key_len = len(key)

        mt = self._scalar_words(p.array_base_seed)
        i, j = 1, 0
        for _ in range(max(n, key_len)):
            prev = mt[i - 1]
            mt[i] = (
                (mt[i] ^ ((prev ^ (prev >> shift)) * p.array_mult_key))
                + key[j]
                + j
            ) & mask
            i += 1
            j += 1
            if i >= n:
                mt[0] = mt[n - 1]
                i = 1
            if j >= key_len:
                j = 0

        for _ in range(n - 1):
            prev = mt[i - 1]
            mt[i] = (
                (mt[i] ^ ((prev ^ (prev >> shift)) * p.array_mult_mix)) - i
            ) & mask
            i += 1
            if i >= n:
                mt[0] = mt[n - 1]
                i = 1

        # MSB set: the state can never be the all-zero fixed point
        mt[0] = p.top_bit
        self._store(mt)

    # -- Twist ------------------------------------------------------------

    def _twist(self) -> None:
        p = self.params
        if not self.initialized:
            self.seed_scalar(p.default_seed)

        mt = self.words
        n, m = p.n, p.m
        one, upper, lower, a = (
            self._one,
            self._upper,
            self._lower,
            self._matrix_a,
        )

        # Word i reads word (i + M) mod N. For i < N - M that word is still
        # old; past that it was already rewritten earlier in this twist. A
        # chunk no longer than N - M never reads a word it writes itself.
        span = n - m
        for start in range(0, n - 1, span):
            stop = min(start + span, n - 1)
            y = (mt[start:stop] & upper) | (mt[start + 1 : stop + 1] & lower)
            src = (start + m) % n
            mt[start:stop] = (
                mt[src : src + (stop - start)] ^ (y >> one) ^ ((y & one) * a)
            )

        # Last word wraps around to the freshly rewritten word 0
        y = (mt[n - 1 :] & upper) | (mt[:1] & lower)
        mt[n - 1 :] = mt[m - 1 : m] ^ (y >> one) ^ ((y & one) * a)

        self._tempered = self._temper(mt)
        self.cursor = 0

    def _temper(self, words: np.ndarray) -> np.ndarray:
        u, d, s, b, t, c, l = self._temper_consts
        y = words ^ ((words >> u) & d)
        y ^= (y << s) & b
        y ^= (y << t) & c
        y ^= y >> l
        return y

    # -- Output -----------------------------------------------------------

    def next_raw(self) -> int:
        """Uniform integer in [0, 2^W - 1]."""
        if self.cursor >= self.params.n:
            self._twist()
        value = int(self._tempered[self.cursor])
        self.cursor += 1
        return value

    def next_signed(self) -> int:
        """Uniform integer in [0, 2^(W-1) - 1]."""
        return self.next_raw() >> 1

    def next_real_closed01(self) -> float:
        """Uniform float in [0, 1]."""
        p = self.params
        return (self.next_raw() >> p.real_shift) * p.closed_scale

    def next_real_halfopen01(self) -> float:
        """Uniform float in [0, 1)."""
        p = self.params
        return (self.next_raw() >> p.real_shift) * p.halfopen_scale

    def next_real_open01(self) -> float:
        """Uniform float in (0, 1)."""
        p = self.params
        return ((self.next_raw() >> p.open_shift) + 0.5) * p.open_scale

    # -- Bulk output ------------------------------------------------------

    def random_raw(self, size: int) -> np.ndarray:
        """Return ``size`` raw outputs as a uint32/uint64 array.

        Consumes exactly ``size`` words and yields the same values as
        ``size`` calls to ``next_raw``.
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        n = self.params.n
        out = np.empty(size, dtype=self.params.dtype)
        filled = 0
        while filled < size:
            if self.cursor >= n:
                self._twist()
            take = min(size - filled, n - self.cursor)
            out[filled : filled + take] = self._tempered[
                self.cursor : self.cursor + take
            ]
            self.cursor += take
            filled += take
        return out

    def random_real(self, size: int, interval: str = "halfopen") -> np.ndarray:
        """Return ``size`` floats mapped like the matching ``next_real_*``.

        ``interval`` is one of ``"closed"`` [0, 1], ``"halfopen"`` [0, 1)
        or ``"open"`` (0, 1).
        """
        if interval not in INTERVALS:
            raise ValueError(
                f"Unknown interval {interval!r}; expected one of {INTERVALS}"
            )
        p = self.params
        raw = self.random_raw(size)
        if interval == "open":
            shifted = (raw >> p.dtype(p.open_shift)).astype(np.float64)
            return (shifted + 0.5) * p.open_scale
        shifted = (raw >> p.dtype(p.real_shift)).astype(np.float64)
        if interval == "closed":
            return shifted * p.closed_scale
        return shifted * p.halfopen_scale

    # -- State snapshot ---------------------------------------------------

    def getstate(self) -> TwisterState:
        return TwisterState(
            word_bits=self.params.word_bits,
            words=tuple(self.words.tolist()),
            cursor=self.cursor,
            initialized=self.initialized,
        )

    def setstate(self, state: TwisterState) -> None:
        """Restore a snapshot taken by ``getstate``.

        Raises ValueError if the snapshot does not fit this generator.
        """
        p = self.params
        if state.word_bits != p.word_bits:
            raise ValueError(
                f"State is for {state.word_bits}-bit words, "
                f"generator uses {p.word_bits}-bit words"
            )
        if len(state.words) != p.n:
            raise ValueError(
                f"State has {len(state.words)} words, expected {p.n}"
            )
        if not 0 <= state.cursor <= p.n:
            raise ValueError(
                f"State cursor {state.cursor} outside [0, {p.n}]"
            )
        if any(w < 0 or w > p.mask for w in state.words):
            raise ValueError(
                f"State words must fit in {p.word_bits} unsigned bits"
            )
        self.words[:] = np.array(state.words, dtype=p.dtype)
        self._tempered = self._temper(self.words)
        self.cursor = state.cursor
        self.initialized = state.initialized


class MT19937(MersenneTwister):
    """32-bit Mersenne Twister (mt19937ar)."""

    def __init__(self, seed: Seed = None) -> None:
        super().__init__(MT32, seed)

    def next_real_res53(self) -> float:
        """Uniform float in [0, 1) with 53-bit resolution. Consumes two words."""
        a = self.next_raw() >> 5
        b = self.next_raw() >> 6
        return (a * 67108864.0 + b) * (1.0 / 9007199254740992.0)


class MT19937_64(MersenneTwister):
    """64-bit Mersenne Twister (mt19937-64)."""

    def __init__(self, seed: Seed = None) -> None:
        super().__init__(MT64, seed)
