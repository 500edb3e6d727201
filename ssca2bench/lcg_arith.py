"""48-bit modular arithmetic used by the 48-bit linear congruential generator."""

from __future__ import annotations

MASK48 = (1 << 48) - 1

# Multipliers selectable by parameter index.
MULTIPLIERS: tuple[int, ...] = (
    0x2875A2E7B175,
    0x5DEECE66D,
    0x3EAC44605265,
    0x1EE1429CC9F5,
    0x275B38EB4BBD,
    0x739A9CB08605,
    0x3228D7CC25F5,
)

# a^n and (a^n - 1)/(a - 1) modulo 2^48 with n = 10^6, per multiplier.
_JUMP_POWERS: tuple[int, ...] = (
    0xDADF0AC00001,
    0xFEFD7A400001,
    0x6417B5C00001,
    0xCF9F72C00001,
    0xBDF07B400001,
    0xF33747C00001,
    0xCBE632C00001,
)

_JUMP_ADDENDS: tuple[int, ...] = (
    0xA42C22700000,
    0xFA858CB00000,
    0x0D0C4EF00000,
    0x11BDBE700000,
    0xC3CC8E300000,
    0xB0F0E9F00000,
    0x6407DE700000,
)


def bit_reverse(n: int) -> int:
    """Reverse the low 31 bits of ``n``."""
    rev = 0
    for position in range(30, -1, -1):
        rev |= (n & 1) << position
        n >>= 1
    return rev


def add48(a: int, b: int) -> int:
    """Return ``a + b`` modulo 2^48."""
    return (a + b) & MASK48


def mul48(a: int, b: int) -> int:
    """Return ``a * b`` modulo 2^48."""
    return (a * b) & MASK48


def advance_seed(seed: int, param: int, prime: int) -> int:
    """Jump a 48-bit LCG state ahead by 10^6 steps.

    The generator is ``x -> a*x + prime (mod 2^48)`` where ``a`` is the
    multiplier selected by ``param``.
    """
    if not 0 <= param < len(MULTIPLIERS):
        raise ValueError(f"multiplier parameter {param} not acceptable")
    return add48(
        mul48(seed, _JUMP_POWERS[param]),
        mul48(prime, _JUMP_ADDENDS[param]),
    )