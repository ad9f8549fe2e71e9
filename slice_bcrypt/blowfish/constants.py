"""
Blowfish Initial State
======================
The initial P-array and S-boxes are the hexadecimal digits of the
fractional part of pi: P[0] = 0x243F6A88, P[1] = 0x85A308D3, ...,
continuing straight into S-box 0, 1, 2 and 3.

The digits are computed once per process, at import, with Machin's
formula instead of being spelled out as a 1042-word table.
"""

from functools import lru_cache
from typing import Tuple

P_WORDS = 18
S_BOXES = 4
S_WORDS = 256
TOTAL_WORDS = P_WORDS + S_BOXES * S_WORDS

_GUARD_BITS = 64


def _arccot(x: int, unity: int) -> int:
    """arccot(x) scaled by `unity`, using the alternating Taylor series."""
    total = power = unity // x
    x_squared = x * x
    n = 3
    sign = -1
    while True:
        power //= x_squared
        term = power // n
        if not term:
            break
        total += sign * term
        sign = -sign
        n += 2
    return total


def pi_fraction_words(count: int) -> Tuple[int, ...]:
    """
    Return the first `count` 32-bit words of the fractional part of pi.

    Args:
        count: Number of words

    Returns:
        Tuple of big-endian 32-bit words
    """
    bits = 32 * count
    unity = 1 << (bits + _GUARD_BITS)
    pi = 4 * (4 * _arccot(5, unity) - _arccot(239, unity))
    fraction = (pi >> _GUARD_BITS) & ((1 << bits) - 1)
    return tuple(
        (fraction >> (bits - 32 * (i + 1))) & 0xFFFFFFFF
        for i in range(count)
    )


@lru_cache(maxsize=1)
def initial_state() -> Tuple[Tuple[int, ...], Tuple[Tuple[int, ...], ...]]:
    """Get the cached (P-array, S-boxes) initial values."""
    words = pi_fraction_words(TOTAL_WORDS)
    p = words[:P_WORDS]
    s = tuple(
        words[P_WORDS + i * S_WORDS:P_WORDS + (i + 1) * S_WORDS]
        for i in range(S_BOXES)
    )
    return p, s


# Computed at import, never inside a job's setup resumption
initial_state()
