"""Playfair digraph cipher on a 5x5 square with i and j merged."""

from __future__ import annotations

__all__ = ["PlayfairCipher"]

SIZE = 5
_ALPHABET = "abcdefghiklmnopqrstuvwxyz"


def _letters(text: str) -> list[str]:
    """Lower-case ASCII letters of text, with j folded into i."""
    lowered = (ch.lower() for ch in text if ch.isascii() and ch.isalpha())
    return ["i" if ch == "j" else ch for ch in lowered]


class PlayfairCipher:
    """A Playfair cipher keyed by a word or phrase."""

    def __init__(self, key: str) -> None:
        order = list(dict.fromkeys([*_letters(key), *_ALPHABET]))
        self.matrix: tuple[tuple[str, ...], ...] = tuple(
            tuple(order[start : start + SIZE]) for start in range(0, SIZE * SIZE, SIZE)
        )
        self._positions = {ch: divmod(index, SIZE) for index, ch in enumerate(order)}

    def prepare_text(self, text: str) -> str:
        """Keep letters, lower-case them, split doubled letters with x and pad to even length."""
        out: list[str] = []
        for ch in _letters(text):
            if out and out[-1] == ch:
                out.append("x")
            out.append(ch)
        if len(out) % 2:
            out.append("x")
        return "".join(out)

    def _transform(self, text: str, shift: int) -> str:
        out = []
        for first, second in zip(text[0::2], text[1::2]):
            row1, col1 = self._positions[first]
            row2, col2 = self._positions[second]
            if row1 == row2:
                out.append(self.matrix[row1][(col1 + shift) % SIZE])
                out.append(self.matrix[row2][(col2 + shift) % SIZE])
            elif col1 == col2:
                out.append(self.matrix[(row1 + shift) % SIZE][col1])
                out.append(self.matrix[(row2 + shift) % SIZE][col2])
            else:
                out.append(self.matrix[row1][col2])
                out.append(self.matrix[row2][col1])
        return "".join(out)

    def encrypt(self, text: str) -> str:
        """Prepare text and encrypt it digraph by digraph."""
        return self._transform(self.prepare_text(text), 1)

    def decrypt(self, text: str) -> str:
        """Decrypt a ciphertext of an even number of letters."""
        normalised = "".join("i" if ch == "j" else ch for ch in text.lower())
        if len(normalised) % 2:
            raise ValueError("ciphertext must have an even number of letters")
        if any(ch not in self._positions for ch in normalised):
            raise ValueError("ciphertext must contain only letters")
        return self._transform(normalised, -1)