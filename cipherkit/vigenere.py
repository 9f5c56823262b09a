"""Vigenère cipher and the repeating-key Vernam variant."""

from __future__ import annotations

from itertools import cycle

ALPHABET_SIZE = 26


def _upper_letters(text: str) -> str:
    """Keep only ASCII letters, upper-cased."""
    return "".join(ch.upper() for ch in text if ch.isascii() and ch.isalpha())


class Vigenere:
    """Vigenère cipher keyed by the letters of *key*; other characters are dropped."""

    def __init__(self, key: str) -> None:
        self.key = _upper_letters(key)
        if not self.key:
            raise ValueError("key must contain at least one letter")

    def _apply(self, text: str, sign: int) -> str:
        letters = _upper_letters(text)
        return "".join(
            chr((ord(c) - ord("A") + sign * (ord(k) - ord("A"))) % ALPHABET_SIZE + ord("A"))
            for c, k in zip(letters, cycle(self.key))
        )

    def encrypt(self, text: str) -> str:
        """Encrypt the letters of *text*, returning upper-case ciphertext."""
        return self._apply(text, 1)

    def decrypt(self, text: str) -> str:
        """Decrypt the letters of *text*, returning upper-case plaintext."""
        return self._apply(text, -1)


def vernam_encrypt(message: str, key: str) -> str:
    """Add the repeated *key* to *message* letter by letter modulo 26.

    Both are expected to be upper-case letters.
    """
    if not key:
        raise ValueError("key must not be empty")
    return "".join(
        chr((ord(k) - ord("A") + ord(m) - ord("A")) % ALPHABET_SIZE + ord("A"))
        for m, k in zip(message, cycle(key))
    )