"""Shift and Vigenère ciphers over ASCII letters and digits."""

from __future__ import annotations

__all__ = [
    "caesar_encrypt",
    "caesar_decrypt",
    "vigenere_encrypt",
    "vigenere_decrypt",
]

_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = _LOWER.upper()
_DIGITS = "0123456789"


def _shift_char(ch: str, shift: int) -> str:
    for alphabet in (_LOWER, _UPPER, _DIGITS):
        index = alphabet.find(ch)
        if index >= 0:
            return alphabet[(index + shift) % len(alphabet)]
    return ch


def caesar_encrypt(text: str, key: int) -> str:
    """Shift letters (mod 26) and digits (mod 10) forward by key; keep everything else."""
    return "".join(_shift_char(ch, key) for ch in text)


def caesar_decrypt(text: str, key: int) -> str:
    """Undo caesar_encrypt with the same key."""
    return "".join(_shift_char(ch, -key) for ch in text)


def _key_shifts(key: str) -> list[int]:
    if not key:
        raise ValueError("key must not be empty")
    shifts = []
    for ch in key:
        index = _LOWER.find(ch.lower())
        if len(ch) != 1 or index < 0 or not ch.isascii():
            raise ValueError("key must contain only ASCII letters")
        shifts.append(index)
    return shifts


def _vigenere(text: str, key: str, sign: int) -> str:
    shifts = _key_shifts(key)
    out = []
    position = 0
    for ch in text:
        if ch in _LOWER or ch in _UPPER:
            out.append(_shift_char(ch, sign * shifts[position]))
            position = (position + 1) % len(shifts)
        else:
            out.append(ch)
    return "".join(out)


def vigenere_encrypt(plaintext: str, key: str) -> str:
    """Encrypt letters with a repeating alphabetic key; other characters pass through."""
    return _vigenere(plaintext, key, 1)


def vigenere_decrypt(ciphertext: str, key: str) -> str:
    """Undo vigenere_encrypt with the same key."""
    return _vigenere(ciphertext, key, -1)