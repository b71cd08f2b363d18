"""Arithmetic in GF(2^128) modulo x^128 + x^7 + x^2 + x + 1.

A field element is a 16-byte block read as a big-endian integer. Bit 127
holds the coefficient of x^127 and bit 0 the constant term.
"""

from __future__ import annotations

BLOCK_SIZE = 16

_POLY = (1 << 128) | 0x87


def _to_int(block: bytes) -> int:
    block = bytes(block)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return int.from_bytes(block, "big")


def _clmul(a: int, b: int) -> int:
    """Carry-less product of two polynomials over GF(2)."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        b >>= 1
    return result


def _reduce(value: int) -> int:
    """Reduce a polynomial of degree below 255 modulo the field polynomial."""
    while (length := value.bit_length()) > 128:
        value ^= _POLY << (length - 129)
    return value


class Element:
    """Accumulator for a sum of products in GF(2^128)."""

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value = 0

    def __repr__(self) -> str:
        return f"Element({self.to_bytes().hex()})"

    def mul_sum(self, a: bytes, b: bytes) -> None:
        """Add the product ``a * b`` to the accumulated value."""
        self._value ^= _reduce(_clmul(_to_int(a), _to_int(b)))

    def to_bytes(self) -> bytes:
        """The accumulated value as a 16-byte big-endian block."""
        return self._value.to_bytes(BLOCK_SIZE, "big")