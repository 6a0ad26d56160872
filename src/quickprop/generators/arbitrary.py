"""
Generators for primitive values.

Size-bounded generators grow with the size parameter, so small sizes give
small values; ``int32s`` ignores the size and covers the full 32-bit range.
"""

from quickprop.generators.combinators import choose, list_of
from quickprop.generators.core import Gen, lift, sized

#: Inclusive bounds of a signed 32-bit integer
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

#: Granularity of ``floats``: values are multiples of 1 / FLOAT_RESOLUTION
FLOAT_RESOLUTION: int = 1_000_000

#: Printable ASCII range used by ``characters``
PRINTABLE_MIN: int = 0x20
PRINTABLE_MAX: int = 0x7E


def booleans() -> Gen[bool]:
    return lift(bool, choose(0, 1))


def int32s() -> Gen[int]:
    """Uniform signed 32-bit integer."""
    return choose(INT32_MIN, INT32_MAX)


def integers() -> Gen[int]:
    """Integer uniform in ``[-size, size]``."""
    return sized(lambda s: choose(-s, s))


def naturals() -> Gen[int]:
    """Integer uniform in ``[0, size]``."""
    return sized(lambda s: choose(0, s))


def floats() -> Gen[float]:
    """Float in ``[-size, size]`` on a grid of ``1 / FLOAT_RESOLUTION``."""
    return sized(
        lambda s: lift(
            lambda n: n / FLOAT_RESOLUTION,
            choose(-s * FLOAT_RESOLUTION, s * FLOAT_RESOLUTION),
        )
    )


def characters() -> Gen[str]:
    """Printable ASCII character."""
    return lift(chr, choose(PRINTABLE_MIN, PRINTABLE_MAX))


def text() -> Gen[str]:
    """String of printable ASCII characters, length in ``[0, size]``."""
    return lift("".join, list_of(characters()))
