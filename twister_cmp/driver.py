"""Text output of the reference driver programs.

The reference drivers seed with the key {0x123, 0x234, 0x345, 0x456}, print
a block of raw integers and then a block of half-open reals. Every value is
followed by one space and a newline follows every fifth value only, so a
block whose length is not a multiple of five ends mid-line. The second
header starts with a newline of its own.

``render_driver_output`` reproduces that text byte for byte, so it can be
diffed against ``mt19937ar.out`` or a run of the 64-bit driver.
"""

from __future__ import annotations

from twister.generator import MT19937, MT19937_64, MersenneTwister

DEMO_KEY = [0x123, 0x234, 0x345, 0x456]

# word_bits -> (integer function name, real function name, integer width)
DRIVER_LAYOUT = {
    32: ("genrand_int32", "genrand_real2", 10),
    64: ("genrand64_int64", "genrand64_real2", 20),
}


def format_block(values: list[str], per_line: int = 5) -> str:
    parts = []
    for i, value in enumerate(values):
        parts.append(value + " ")
        if i % per_line == per_line - 1:
            parts.append("\n")
    return "".join(parts)


def render_driver_output(
    rng: MersenneTwister, count: int = 1000
) -> str:
    """Draw ``count`` integers then ``count`` reals and lay them out as text."""
    int_name, real_name, int_width = DRIVER_LAYOUT[rng.params.word_bits]
    ints = [f"{rng.next_raw():{int_width}d}" for _ in range(count)]
    reals = [f"{rng.next_real_halfopen01():10.8f}" for _ in range(count)]
    return (
        f"{count} outputs of {int_name}()\n"
        + format_block(ints)
        + f"\n{count} outputs of {real_name}()\n"
        + format_block(reals)
    )


def demo_generator(word_bits: int) -> MersenneTwister:
    if word_bits == 32:
        return MT19937(DEMO_KEY)
    return MT19937_64(DEMO_KEY)
