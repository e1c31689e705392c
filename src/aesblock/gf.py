"""
GF(2^8) arithmetic with the AES reduction polynomial x^8 + x^4 + x^3 + x + 1.

The cipher pipeline only ever calls ``gmul`` with the multiplicands found in
the MixColumns matrices, all of which are served from precomputed tables.
``xtime`` and ``gf_multiply`` compute products directly and are used to
verify those tables.
"""

from .errors import InvariantViolation
from .tables import GMUL_TABLES

REDUCTION_POLY = 0x11B


def gmul(n: int, m: int) -> int:
    """
    Multiply byte ``m`` by the fixed multiplicand ``n`` via table lookup.

    Args:
        n: Multiplicand from the diffusion matrices (1, 2, 3, 9, 11, 13, 14)
        m: Byte value 0..255

    Returns:
        n * m in GF(2^8)

    Raises:
        InvariantViolation: If n has no table or m is not a byte
    """
    if not 0 <= m <= 0xFF:
        raise InvariantViolation(f"Index m={m} out of range for GF(2^8) table")
    if n == 1:
        return m
    table = GMUL_TABLES.get(n)
    if table is None:
        raise InvariantViolation(f"Unsupported GF(2^8) multiplicand: {n}")
    return table[m]


def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ REDUCTION_POLY) & 0xFF if a & 0x80 else (a << 1) & 0xFF


def gf_multiply(a: int, b: int) -> int:
    """Shift-and-add multiplication of two bytes in GF(2^8)."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result
