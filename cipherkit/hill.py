"""Hill cipher with a 3x3 key matrix modulo 26."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

SIZE = 3
MODULUS = 26
DEFAULT_PAD = "X"

Matrix = tuple[tuple[int, ...], ...]


def _letter_index(ch: str) -> int:
    if not (ch.isascii() and ch.isalpha()):
        raise ValueError(f"not a letter: {ch!r}")
    return ord(ch.lower()) - ord("a")


def _indices(text: str) -> list[int]:
    return [_letter_index(ch) for ch in text]


def _blocks(values: list[int]) -> Iterable[tuple[int, ...]]:
    if len(values) % SIZE:
        raise ValueError(f"text length must be a multiple of {SIZE}")
    return zip(*[iter(values)] * SIZE)


def _check_matrix(matrix: Sequence[Sequence[int]]) -> Matrix:
    rows = tuple(tuple(int(v) for v in row) for row in matrix)
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"key matrix must be {SIZE}x{SIZE}")
    return rows


def parse_key(key: str) -> Matrix:
    """Turn the first nine letters of *key* (spaces ignored) into a row-major matrix."""
    values = _indices(key.replace(" ", "")[: SIZE * SIZE])
    if len(values) < SIZE * SIZE:
        raise ValueError(f"key needs {SIZE * SIZE} letters")
    return tuple(tuple(values[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))


def _minor(matrix: Matrix, row: int, col: int) -> int:
    a, b, c, d = (
        matrix[r][k] for r in range(SIZE) if r != row for k in range(SIZE) if k != col
    )
    return a * d - b * c


def inverse_matrix_mod26(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Inverse of a 3x3 matrix modulo 26; raises ValueError if none exists."""
    m = _check_matrix(matrix)
    det = sum((-1) ** j * m[0][j] * _minor(m, 0, j) for j in range(SIZE)) % MODULUS
    det_inverse = next((i for i in range(1, MODULUS) if det * i % MODULUS == 1), None)
    if det_inverse is None:
        raise ValueError("key matrix is not invertible modulo 26")
    cofactors = [
        [(-1) ** (i + j) * _minor(m, i, j) % MODULUS for j in range(SIZE)]
        for i in range(SIZE)
    ]
    return tuple(
        tuple(cofactors[j][i] * det_inverse % MODULUS for j in range(SIZE))
        for i in range(SIZE)
    )


def _row_transform(text: str, matrix: Matrix) -> str:
    """Multiply each 3-letter row vector by *matrix*; output is lowercase."""
    out = []
    for block in _blocks(_indices(text.replace(" ", ""))):
        for j in range(SIZE):
            total = sum(block[k] * matrix[k][j] for k in range(SIZE))
            out.append(chr(total % MODULUS + ord("a")))
    return "".join(out)


def encrypt(plaintext: str, key: str) -> str:
    """Encrypt *plaintext* with the letter key; spaces are removed."""
    return _row_transform(plaintext, parse_key(key))


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt *ciphertext* with the letter key used to encrypt it."""
    return _row_transform(ciphertext, inverse_matrix_mod26(parse_key(key)))


def encrypt_columns(
    plaintext: str, matrix: Sequence[Sequence[int]], pad: str | None = DEFAULT_PAD
) -> str:
    """Multiply *matrix* by each 3-letter column vector; output is uppercase.

    A short final block is filled with *pad*; with ``pad=None`` it is an error.
    """
    m = _check_matrix(matrix)
    if pad is not None:
        _letter_index(pad)
        plaintext += pad * (-len(plaintext) % SIZE)
    out = []
    for block in _blocks(_indices(plaintext)):
        for row in m:
            total = sum(coeff * value for coeff, value in zip(row, block))
            out.append(chr(total % MODULUS + ord("A")))
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Hill cipher: reads the text and the 9-letter key from stdin."
    )
    parser.add_argument("-d", "--decrypt", action="store_true")
    args = parser.parse_args(argv)

    text = sys.stdin.readline().rstrip("\n")
    key = sys.stdin.readline().rstrip("\n")
    try:
        result = decrypt(text, key) if args.decrypt else encrypt(text, key)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())