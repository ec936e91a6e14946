"""The first DES substitution box."""

from __future__ import annotations

__all__ = ["S1", "s1_output"]

S1: tuple[tuple[int, ...], ...] = (
    (14, 4, 13, 1, 2, 15, 11, 8, 3, 10, 6, 12, 5, 9, 0, 7),
    (0, 15, 7, 4, 14, 2, 13, 1, 10, 6, 12, 11, 9, 5, 3, 8),
    (4, 1, 14, 8, 13, 6, 2, 11, 15, 12, 9, 7, 3, 10, 5, 0),
    (15, 12, 8, 2, 4, 9, 1, 7, 5, 11, 3, 14, 10, 0, 6, 13),
)


def s1_output(value: int) -> int:
    """Map a 6-bit value through S1: outer bits pick the row, inner four the column."""
    if not 0 <= value <= 63:
        raise ValueError("input must be a number between 0 and 63")
    row = ((value & 0x20) >> 4) | (value & 0x1)
    col = (value >> 1) & 0xF
    return S1[row][col]