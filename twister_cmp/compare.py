"""Parity checks between this generator and independent MT19937 sources.

Validates that ``twister`` produces the same numeric stream as:

  * CPython's ``random.Random``: MT19937 seeded through ``init_by_array``.
    ``getrandbits(32)`` is one raw output and ``random()`` is the 53-bit
    real built from two outputs.
  * numpy's legacy ``RandomState``: MT19937 seeded with ``init_genrand``
    for an int seed and ``init_by_array`` for an array seed.
    ``random_sample()`` is the same 53-bit real.
  * Outputs of the reference C programs: ``mt19937ar.out``,
    ``mt19937-64.out`` and a run of the 64-bit driver with the
    {0x123, 0x234, 0x345, 0x456} key. Also the 10000th-output values the
    C++ standard requires of ``mt19937`` / ``mt19937_64`` with the default seed.

There is no independent 64-bit implementation available in Python, so the
64-bit variant is only checked against reference C output.
"""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass, field
from typing import Optional, Union

import numpy as np

from twister.generator import MT19937, MT19937_64, MersenneTwister

SeedArg = Optional[Union[int, list[int]]]


def keys_to_cpython_seed(keys: list[int]) -> int:
    """Pack 32-bit keys into the int that makes CPython seed with them.

    CPython splits ``abs(seed)`` into little-endian 32-bit words and drops
    leading zero words, so a key list ending in 0 (other than ``[0]``)
    cannot be expressed.
    """
    if len(keys) > 1 and keys[-1] == 0:
        raise ValueError(
            f"Key list {keys} ends in 0; CPython would seed with a shorter key"
        )
    seed = 0
    for i, k in enumerate(keys):
        if not 0 <= k <= 0xFFFFFFFF:
            raise ValueError(f"Key {k} does not fit in 32 bits")
        seed |= k << (32 * i)
    return seed


def make_generator(word_bits: int, seed: SeedArg) -> MersenneTwister:
    if word_bits == 32:
        return MT19937(seed)
    return MT19937_64(seed)


# -- Our side -------------------------------------------------------


def draw(rng: MersenneTwister, output: str, count: int) -> list:
    """Draw ``count`` values of one output form from a generator."""
    if output == "raw":
        return [rng.next_raw() for _ in range(count)]
    if output == "res53":
        if not isinstance(rng, MT19937):
            raise ValueError("res53 output is only defined for MT19937")
        return [rng.next_real_res53() for _ in range(count)]
    if output == "halfopen8":
        # Formatted like the reference driver prints genrand_real2()
        return [f"{rng.next_real_halfopen01():10.8f}" for _ in range(count)]
    raise ValueError(f"Unknown output form: {output}")


# -- Oracles --------------------------------------------------------


def cpython_oracle(seed: SeedArg, output: str, count: int, skip: int) -> list:
    if not isinstance(seed, list):
        raise ValueError("CPython seeds MT19937 through a key array only")
    ref = random.Random(keys_to_cpython_seed(seed))
    for _ in range(skip):
        ref.getrandbits(32)
    if output == "raw":
        return [ref.getrandbits(32) for _ in range(count)]
    if output == "res53":
        return [ref.random() for _ in range(count)]
    raise ValueError(f"CPython oracle cannot produce {output!r}")


def numpy_oracle(seed: SeedArg, output: str, count: int, skip: int) -> list:
    if output != "res53":
        raise ValueError(f"numpy oracle cannot produce {output!r}")
    if skip % 2:
        raise ValueError("numpy oracle can only skip whole res53 draws")
    rs = np.random.RandomState(seed)
    if skip:
        rs.random_sample(skip // 2)
    return rs.random_sample(count).tolist()


@dataclass
class CompareScenario:
    """One parity scenario: a seed, an output form and where truth comes from."""

    name: str
    word_bits: int
    seed: SeedArg
    output: str
    count: int
    oracle: str
    skip: int = 0
    # Published values, for oracle == "published"
    expected: list = field(default_factory=list)

    def make_generator(self) -> MersenneTwister:
        rng = make_generator(self.word_bits, self.seed)
        for _ in range(self.skip):
            rng.next_raw()
        return rng

    def reference(self) -> list:
        if self.oracle == "cpython":
            return cpython_oracle(self.seed, self.output, self.count, self.skip)
        if self.oracle == "numpy":
            return numpy_oracle(self.seed, self.output, self.count, self.skip)
        if self.oracle == "published":
            return list(self.expected)
        raise ValueError(f"Unknown oracle: {self.oracle}")


DEMO_KEY = [0x123, 0x234, 0x345, 0x456]
DEMO_KEY_64 = [0x12345, 0x23456, 0x34567, 0x45678]

TEST_SCENARIOS = [
    CompareScenario(
        name="mt32_demo_key_published",
        word_bits=32,
        seed=DEMO_KEY,
        output="raw",
        count=5,
        oracle="published",
        expected=[1067595299, 955945823, 477289528, 4107218783, 4228976476],
    ),
    CompareScenario(
        name="mt32_demo_key_real2_published",
        word_bits=32,
        seed=DEMO_KEY,
        output="halfopen8",
        count=5,
        oracle="published",
        skip=1000,
        expected=[
            "0.76275443",
            "0.99000644",
            "0.98670464",
            "0.10143112",
            "0.27933125",
        ],
    ),
    CompareScenario(
        name="mt32_demo_key_cpython_raw",
        word_bits=32,
        seed=DEMO_KEY,
        output="raw",
        count=2000,
        oracle="cpython",
    ),
    CompareScenario(
        name="mt32_demo_key_cpython_res53",
        word_bits=32,
        seed=DEMO_KEY,
        output="res53",
        count=1000,
        oracle="cpython",
        skip=7,
    ),
    CompareScenario(
        name="mt32_single_zero_key_cpython",
        word_bits=32,
        seed=[0],
        output="raw",
        count=700,
        oracle="cpython",
    ),
    CompareScenario(
        name="mt32_long_key_cpython",
        word_bits=32,
        seed=[(i * 2654435761) & 0xFFFFFFFF for i in range(1, 701)],
        output="raw",
        count=1300,
        oracle="cpython",
    ),
    CompareScenario(
        name="mt32_scalar_seed_numpy",
        word_bits=32,
        seed=20260118,
        output="res53",
        count=1000,
        oracle="numpy",
    ),
    CompareScenario(
        name="mt32_scalar_seed_zero_numpy",
        word_bits=32,
        seed=0,
        output="res53",
        count=700,
        oracle="numpy",
        skip=2,
    ),
    CompareScenario(
        name="mt32_demo_key_numpy",
        word_bits=32,
        seed=DEMO_KEY,
        output="res53",
        count=1000,
        oracle="numpy",
    ),
    CompareScenario(
        name="mt32_default_seed_10000th",
        word_bits=32,
        seed=5489,
        output="raw",
        count=1,
        oracle="published",
        skip=9999,
        expected=[4123659995],
    ),
    CompareScenario(
        name="mt64_demo_key_reference_run",
        word_bits=64,
        seed=DEMO_KEY,
        output="raw",
        count=5,
        oracle="published",
        expected=[
            9027872530071317244,
            13644139849866289569,
            10560868692402432962,
            1591281994801066323,
            13998033785539530497,
        ],
    ),
    CompareScenario(
        name="mt64_demo_key_real2_reference_run",
        word_bits=64,
        seed=DEMO_KEY,
        output="halfopen8",
        count=5,
        oracle="published",
        skip=1000,
        expected=[
            "0.99295836",
            "0.76691132",
            "0.57045197",
            "0.48981243",
            "0.28255123",
        ],
    ),
    CompareScenario(
        name="mt64_published_key",
        word_bits=64,
        seed=DEMO_KEY_64,
        output="raw",
        count=5,
        oracle="published",
        expected=[
            7266447313870364031,
            4946485549665804864,
            16945909448695747420,
            16394063075524226720,
            4873882236456199058,
        ],
    ),
    CompareScenario(
        name="mt64_default_seed_first",
        word_bits=64,
        seed=None,
        output="raw",
        count=1,
        oracle="published",
        expected=[14514284786278117030],
    ),
    CompareScenario(
        name="mt64_default_seed_10000th",
        word_bits=64,
        seed=5489,
        output="raw",
        count=1,
        oracle="published",
        skip=9999,
        expected=[9981545732273789042],
    ),
]


def compare_streams(ours: list, theirs: list) -> tuple[bool, list[str]]:
    """Compare two output streams position by position.

    Returns (match: bool, diffs: list of error messages). Only the first
    few mismatches are listed.
    """
    diffs = []
    if len(ours) != len(theirs):
        diffs.append(f"Length: {len(ours)} vs {len(theirs)}")
    for i, (a, b) in enumerate(zip(ours, theirs)):
        if a != b:
            diffs.append(f"Output {i}: {a} vs {b}")
            if len(diffs) >= 5:
                diffs.append("(further differences omitted)")
                break
    return len(diffs) == 0, diffs


@dataclass
class ComparisonTiming:
    """Timing breakdown for a single comparison run."""

    ours_secs: float
    oracle_secs: float

    @property
    def total_secs(self) -> float:
        return self.ours_secs + self.oracle_secs


def run_comparison(
    scenario: CompareScenario,
    verbose: bool = False,
) -> tuple[bool, list[str], ComparisonTiming | None]:
    """Draw from both sides of a scenario and compare.

    Returns:
        (success: bool, diffs: list of error messages, timing or None on error)
    """
    diffs = []

    try:
        t0 = time.perf_counter()
        rng = scenario.make_generator()
        ours = draw(rng, scenario.output, scenario.count)
        ours_secs = time.perf_counter() - t0
    except Exception as e:
        diffs.append(f"twister failed: {e}")
        return False, diffs, None

    try:
        t0 = time.perf_counter()
        theirs = scenario.reference()
        oracle_secs = time.perf_counter() - t0
    except Exception as e:
        diffs.append(f"{scenario.oracle} oracle failed: {e}")
        return False, diffs, None

    timing = ComparisonTiming(ours_secs=ours_secs, oracle_secs=oracle_secs)

    match, stream_diffs = compare_streams(ours, theirs)
    if not match:
        diffs.extend(stream_diffs)

    if verbose and diffs:
        print("\nDifferences found:")
        for diff in diffs:
            print(f"  - {diff}")

    return len(diffs) == 0, diffs, timing


def _format_result(
    name: str,
    success: bool,
    diffs: list[str],
    timing: ComparisonTiming | None,
    verbose: bool,
) -> str:
    status = "PASS" if success else "FAIL"
    line = f"[{status}] {name}"
    if timing:
        line += f" ({timing.total_secs * 1000:.1f} ms)"
    if success or verbose:
        return line
    lines = [line]
    for diff in diffs:
        lines.append(f"    {diff}")
    return "\n".join(lines)


def select_scenarios(
    name: Optional[str] = None,
    word_bits: Optional[int] = None,
) -> list[CompareScenario]:
    scenarios = list(TEST_SCENARIOS)
    if name:
        scenarios = [s for s in scenarios if s.name == name]
    if word_bits:
        scenarios = [s for s in scenarios if s.word_bits == word_bits]
    return scenarios


def main():
    """CLI entry point with pytest-compatible exit codes."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Compare twister outputs against reference MT19937 sources"
    )
    parser.add_argument(
        "--scenario",
        type=str,
        help="Run specific scenario by name",
    )
    parser.add_argument(
        "--bits",
        type=int,
        choices=[32, 64],
        help="Only run scenarios for this word width",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print detailed comparison output",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop on first failure",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List scenario names and exit",
    )
    args = parser.parse_args()

    if args.list:
        for s in TEST_SCENARIOS:
            print(f"{s.name}  ({s.word_bits}-bit, {s.oracle})")
        return 0

    scenarios = select_scenarios(args.scenario, args.bits)
    if not scenarios:
        print(f"Scenario '{args.scenario}' not found")
        return 1

    passed = 0
    failed = 0
    total_time = 0.0
    for scenario in scenarios:
        success, diffs, timing = run_comparison(scenario, args.verbose)
        print(
            _format_result(scenario.name, success, diffs, timing, args.verbose)
        )
        if timing:
            total_time += timing.total_secs
        if success:
            passed += 1
        else:
            failed += 1
            if args.fail_fast:
                print(f"\n{passed} passed, {failed} failed (stopped early)")
                return 1

    print(f"\n{passed} passed, {failed} failed ({total_time:.2f}s total)")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
