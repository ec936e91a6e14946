"""Rail fence transposition cipher."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["rail_fence_encrypt", "rail_fence_decrypt"]


def _rails(length: int, key: int) -> Iterator[int]:
    """Yield the rail of each position along the zigzag."""
    if key < 1:
        raise ValueError("key must be at least 1")
    if key == 1:
        yield from (0 for _ in range(length))
        return
    row, step = 0, 1
    for _ in range(length):
        yield row
        if row == 0:
            step = 1
        elif row == key - 1:
            step = -1
        row += step


def _reading_order(length: int, key: int) -> list[int]:
    rails = list(_rails(length, key))
    return sorted(range(length), key=rails.__getitem__)


def rail_fence_encrypt(text: str, key: int) -> str:
    """Write text in a zigzag over key rails and read it off rail by rail."""
    return "".join(text[i] for i in _reading_order(len(text), key))


def rail_fence_decrypt(cipher: str, key: int) -> str:
    """Undo rail_fence_encrypt with the same number of rails."""
    plain = [""] * len(cipher)
    for position, ch in zip(_reading_order(len(cipher), key), cipher):
        plain[position] = ch
    return "".join(plain)