"""Hill cipher with a 2x2 key matrix over the 26 upper-case letters."""

from __future__ import annotations

from collections.abc import Sequence

from cryptolab.numtheory import modular_inverse

__all__ = ["HillCipher", "MOD"]

MOD = 26
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

Matrix = tuple[tuple[int, int], tuple[int, int]]


def _apply(matrix: Matrix, text: str) -> str:
    if len(text) % 2:
        raise ValueError("text must have an even number of letters")
    if any(ch not in _UPPER for ch in text):
        raise ValueError("text must contain only upper-case letters A-Z")
    (a, b), (c, d) = matrix
    out = []
    for first, second in zip(text[0::2], text[1::2]):
        x, y = _UPPER.index(first), _UPPER.index(second)
        out.append(_UPPER[(a * x + b * y) % MOD])
        out.append(_UPPER[(c * x + d * y) % MOD])
    return "".join(out)


class HillCipher:
    """Encrypts letter pairs by multiplying them with a 2x2 key modulo 26."""

    def __init__(self, key: Sequence[Sequence[int]]) -> None:
        rows = [tuple(row) for row in key]
        if len(rows) != 2 or any(len(row) != 2 for row in rows):
            raise ValueError("key must be a 2x2 matrix")
        if not all(isinstance(v, int) for row in rows for v in row):
            raise ValueError("key entries must be integers")
        self.key: Matrix = ((rows[0][0], rows[0][1]), (rows[1][0], rows[1][1]))

    def inverse_key(self) -> Matrix:
        """Return the inverse key modulo 26; raise NoInverseError if there is none."""
        (a, b), (c, d) = self.key
        det_inv = modular_inverse((a * d - b * c) % MOD, MOD)
        return (
            ((d * det_inv) % MOD, (-b * det_inv) % MOD),
            ((-c * det_inv) % MOD, (a * det_inv) % MOD),
        )

    def encrypt(self, plaintext: str) -> str:
        """Encrypt an even-length string of upper-case letters."""
        return _apply(self.key, plaintext)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt with the inverse key."""
        return _apply(self.inverse_key(), ciphertext)