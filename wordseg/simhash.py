"""Simhash fingerprints of weighted 64-bit hashes and their comparison."""

from __future__ import annotations

from collections.abc import Iterable

BITS_LENGTH = 64
_MASK = (1 << BITS_LENGTH) - 1


def fingerprint(hashed_weights: Iterable[tuple[int, float]]) -> int:
    """Combine (hash, weight) pairs into one 64-bit simhash."""
    totals = [0.0] * BITS_LENGTH
    for value, weight in hashed_weights:
        for bit in range(BITS_LENGTH):
            totals[bit] += weight if (value >> bit) & 1 else -weight
    result = 0
    for bit, total in enumerate(totals):
        if total > 0.0:
            result |= 1 << bit
    return result


def hamming_distance(lhs: int, rhs: int) -> int:
    """Number of differing bits between two 64-bit values."""
    return ((lhs ^ rhs) & _MASK).bit_count()


def is_equal(lhs: int, rhs: int, n: int = 3) -> bool:
    """Whether two fingerprints differ in at most *n* bits."""
    return hamming_distance(lhs, rhs) <= n


def to_binary_string(value: int) -> str:
    """The 64-bit value as 64 characters of '0' and '1'."""
    return format(value & _MASK, f"0{BITS_LENGTH}b")


def binary_string_to_int(bits: str) -> int:
    """Read a string of bits; any character other than '1' counts as 0."""
    result = 0
    for ch in bits:
        result = ((result << 1) | (ch == "1")) & _MASK
    return result