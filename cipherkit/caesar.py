"""Caesar shift cipher over the lowercase alphabet, plus a raw code-point shift."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

ALPHABET_SIZE = 26
DEFAULT_KEY = 3


def char_shift(text: str, offset: int) -> str:
    """Shift the code point of every character in *text* by *offset*.

    Raises ValueError if a shifted code point falls outside the Unicode range.
    """
    return "".join(chr(ord(ch) + offset) for ch in text)


def _shift_letter(ch: str, key: int) -> str:
    if "a" <= ch <= "z":
        return chr((ord(ch) - ord("a") + key) % ALPHABET_SIZE + ord("a"))
    return ch


def caesar_encrypt(text: str, key: int) -> str:
    """Shift each lowercase letter forward by *key*; other characters are kept."""
    return "".join(_shift_letter(ch, key) for ch in text)


def caesar_decrypt(text: str, key: int) -> str:
    """Undo :func:`caesar_encrypt` with the same *key*."""
    return caesar_encrypt(text, -key)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Caesar cipher over a-z.")
    parser.add_argument("text", nargs="?", help="message (read from stdin if omitted)")
    parser.add_argument("-k", "--key", type=int, default=DEFAULT_KEY)
    args = parser.parse_args(argv)

    text = args.text if args.text is not None else sys.stdin.readline().rstrip("\n")
    encrypted = caesar_encrypt(text, args.key)
    print(text)
    print(f"Encrypted message : {encrypted}")
    print(f"Decrypt message : {caesar_decrypt(encrypted, args.key)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())