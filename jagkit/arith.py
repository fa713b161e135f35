"""32-bit integer division and remainder as done by the runtime library.

Operands are taken as 32-bit C ``long`` or ``unsigned long`` values:
wider Python integers are reduced to 32 bits first, and results wrap
the same way. A zero divisor does not trap; every routine returns 0
for it.
"""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000


def _unsigned(value: int) -> int:
    return value & _MASK


def _signed(value: int) -> int:
    value &= _MASK
    return value - (1 << 32) if value & _SIGN else value


def _magnitude(value: int) -> int:
    # |value| as the unsigned result of negating a 32-bit long.
    return _unsigned(-value) if value < 0 else value


def ldivu(z: int, n: int) -> int:
    """Unsigned 32-bit quotient of ``z`` by ``n``; 0 when ``n`` is zero."""
    z, n = _unsigned(z), _unsigned(n)
    if not n:
        return 0
    return z // n


def lmodu(z: int, n: int) -> int:
    """Unsigned 32-bit remainder of ``z`` by ``n``; 0 when ``n`` is zero."""
    z, n = _unsigned(z), _unsigned(n)
    if not n:
        return 0
    return z % n


def ldivs(z: int, n: int) -> int:
    """Signed 32-bit quotient, truncated toward zero; 0 when ``n`` is zero.

    The one quotient that does not fit, ``-2**31 / -1``, wraps to ``-2**31``.
    """
    z, n = _signed(z), _signed(n)
    if not n:
        return 0
    quotient = _magnitude(z) // _magnitude(n)
    negative = (z < 0) != (n < 0)
    return _signed(-quotient if negative else quotient)


def lmods(z: int, n: int) -> int:
    """Signed 32-bit remainder with the sign of ``z``; 0 when ``n`` is zero."""
    z, n = _signed(z), _signed(n)
    if not n:
        return 0
    remainder = _magnitude(z) % _magnitude(n)
    return _signed(-remainder if z < 0 else remainder)