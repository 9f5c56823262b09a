"""Playfair digraph cipher over a 5x5 key square."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import chain
from string import ascii_lowercase

SIZE = 5
DEFAULT_OMIT = "j"
FILLER = "x"
FILLER_AFTER_X = "z"

# Letters that stand in for the one left out of the square.
_STAND_INS = {"j": "i"}


def _letters(text: str) -> str:
    """Lowercase ASCII letters of *text*; everything else is dropped."""
    return "".join(ch for ch in text.lower() if ch in ascii_lowercase)


@dataclass(frozen=True)
class KeySquare:
    """A 5x5 Playfair square holding every letter but *omit*."""

    rows: tuple[str, ...]
    omit: str = DEFAULT_OMIT
    _positions: dict[str, tuple[int, int]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if len(self.rows) != SIZE or any(len(row) != SIZE for row in self.rows):
            raise ValueError(f"key square must be {SIZE}x{SIZE}")
        positions = {
            letter: (r, c)
            for r, row in enumerate(self.rows)
            for c, letter in enumerate(row)
        }
        if len(positions) != SIZE * SIZE:
            raise ValueError("key square letters must be unique")
        if self.omit in positions:
            raise ValueError(f"omitted letter {self.omit!r} is in the square")
        object.__setattr__(self, "_positions", positions)

    @classmethod
    def from_key(cls, key: str, omit: str = DEFAULT_OMIT) -> KeySquare:
        """Fill the square with the distinct letters of *key*, then the rest of a-z."""
        omit = omit.lower()
        if len(omit) != 1 or omit not in ascii_lowercase:
            raise ValueError("omit must be a single letter")
        order = dict.fromkeys(
            ch for ch in chain(_letters(key), ascii_lowercase) if ch != omit
        )
        flat = "".join(order)
        return cls(
            rows=tuple(flat[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)),
            omit=omit,
        )

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows)

    def _stand_in(self, letter: str) -> str:
        letter = letter.lower()
        if letter == self.omit:
            try:
                return _STAND_INS[letter]
            except KeyError:
                raise ValueError(f"letter {letter!r} is not in the key square") from None
        return letter

    def locate(self, letter: str) -> tuple[int, int]:
        """Row and column of *letter*; the omitted letter maps to its stand-in."""
        try:
            return self._positions[self._stand_in(letter)]
        except KeyError:
            raise ValueError(f"letter {letter!r} is not in the key square") from None

    def _shift_pair(self, first: str, second: str, step: int) -> tuple[str, str]:
        r1, c1 = self.locate(first)
        r2, c2 = self.locate(second)
        if r1 == r2:
            return (
                self.rows[r1][(c1 + step) % SIZE],
                self.rows[r2][(c2 + step) % SIZE],
            )
        if c1 == c2:
            return (
                self.rows[(r1 + step) % SIZE][c1],
                self.rows[(r2 + step) % SIZE][c2],
            )
        return self.rows[r1][c2], self.rows[r2][c1]

    def encrypt_pair(self, first: str, second: str) -> tuple[str, str]:
        """Encrypt one digraph: shift right in a row, down in a column, else swap columns."""
        return self._shift_pair(first, second, 1)

    def decrypt_pair(self, first: str, second: str) -> tuple[str, str]:
        """Decrypt one digraph produced by :meth:`encrypt_pair`."""
        return self._shift_pair(first, second, -1)


def _filler_for(letter: str) -> str:
    return FILLER_AFTER_X if letter == FILLER else FILLER


def prepare_digraphs(text: str) -> list[tuple[str, str]]:
    """Split the letters of *text* into pairs.

    A doubled letter is split by a filler ('x', or 'z' after an 'x'), and a
    lone final letter is padded the same way.
    """
    letters = _letters(text)
    pairs: list[tuple[str, str]] = []
    i = 0
    while i < len(letters):
        first = letters[i]
        second = letters[i + 1] if i + 1 < len(letters) else None
        if second is None or second == first:
            pairs.append((first, _filler_for(first)))
            i += 1
        else:
            pairs.append((first, second))
            i += 2
    return pairs


def encrypt(plaintext: str, key: str) -> str:
    """Encrypt *plaintext* with the square built from *key*; output is lowercase."""
    square = KeySquare.from_key(key)
    text = "".join(square._stand_in(ch) for ch in _letters(plaintext))
    return "".join(
        "".join(square.encrypt_pair(a, b)) for a, b in prepare_digraphs(text)
    )


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt *ciphertext*; fillers inserted on encryption are left in place."""
    square = KeySquare.from_key(key)
    letters = _letters(ciphertext)
    if len(letters) % 2:
        raise ValueError("ciphertext must hold an even number of letters")
    pairs = zip(letters[::2], letters[1::2])
    return "".join("".join(square.decrypt_pair(a, b)) for a, b in pairs)


def remove_fillers(text: str) -> str:
    """Drop every 'x' that sits between two equal letters."""
    if len(text) < 3:
        return text
    middle = (
        ch
        for prev, ch, nxt in zip(text, text[1:], text[2:])
        if not (ch == FILLER and prev == nxt)
    )
    return text[0] + "".join(middle) + text[-1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Playfair cipher.")
    parser.add_argument("key", help="keyword for the key square")
    parser.add_argument("text", nargs="?", help="message (read from stdin if omitted)")
    parser.add_argument("-d", "--decrypt", action="store_true")
    parser.add_argument(
        "--strip-fillers",
        action="store_true",
        help="after decrypting, drop 'x' fillers between doubled letters",
    )
    parser.add_argument("--show-square", action="store_true")
    args = parser.parse_args(argv)

    text = args.text if args.text is not None else sys.stdin.readline().rstrip("\n")
    if args.show_square:
        print(KeySquare.from_key(args.key))
    try:
        if args.decrypt:
            result = decrypt(text, args.key)
            if args.strip_fillers:
                result = remove_fillers(result)
        else:
            result = encrypt(text, args.key)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())