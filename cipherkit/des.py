"""DES block cipher on hexadecimal strings, with a round-by-round trace."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

DEFAULT_PLAINTEXT = "123456ABCD132536"
DEFAULT_KEY = "AABB09182736CCDD"

BLOCK_HEX_DIGITS = 16
ROUNDS = 16
ROUND_KEY_BITS = 48

_HEX_DIGITS = "0123456789ABCDEF"

INITIAL_PERM = (
    58, 50, 42, 34, 26, 18, 10, 2, 60, 52, 44, 36, 28, 20, 12, 4,
    62, 54, 46, 38, 30, 22, 14, 6, 64, 56, 48, 40, 32, 24, 16, 8,
    57, 49, 41, 33, 25, 17, 9, 1, 59, 51, 43, 35, 27, 19, 11, 3,
    61, 53, 45, 37, 29, 21, 13, 5, 63, 55, 47, 39, 31, 23, 15, 7,
)

FINAL_PERM = (
    40, 8, 48, 16, 56, 24, 64, 32, 39, 7, 47, 15, 55, 23, 63, 31,
    38, 6, 46, 14, 54, 22, 62, 30, 37, 5, 45, 13, 53, 21, 61, 29,
    36, 4, 44, 12, 52, 20, 60, 28, 35, 3, 43, 11, 51, 19, 59, 27,
    34, 2, 42, 10, 50, 18, 58, 26, 33, 1, 41, 9, 49, 17, 57, 25,
)

EXPANSION = (
    32, 1, 2, 3, 4, 5, 4, 5, 6, 7, 8, 9,
    8, 9, 10, 11, 12, 13, 12, 13, 14, 15, 16, 17,
    16, 17, 18, 19, 20, 21, 20, 21, 22, 23, 24, 25,
    24, 25, 26, 27, 28, 29, 28, 29, 30, 31, 32, 1,
)

STRAIGHT_PERM = (
    16, 7, 20, 21, 29, 12, 28, 17, 1, 15, 23, 26, 5, 18, 31, 10,
    2, 8, 24, 14, 32, 27, 3, 9, 19, 13, 30, 6, 22, 11, 4, 25,
)

PARITY_DROP = (
    57, 49, 41, 33, 25, 17, 9, 1, 58, 50, 42, 34, 26, 18,
    10, 2, 59, 51, 43, 35, 27, 19, 11, 3, 60, 52, 44, 36,
    63, 55, 47, 39, 31, 23, 15, 7, 62, 54, 46, 38, 30, 22,
    14, 6, 61, 53, 45, 37, 29, 21, 13, 5, 28, 20, 12, 4,
)

SHIFT_SCHEDULE = (1, 1, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 1)

KEY_COMPRESSION = (
    14, 17, 11, 24, 1, 5, 3, 28, 15, 6, 21, 10,
    23, 19, 12, 4, 26, 8, 16, 7, 27, 20, 13, 2,
    41, 52, 31, 37, 47, 55, 30, 40, 51, 45, 33, 48,
    44, 49, 39, 56, 34, 53, 46, 42, 50, 36, 29, 32,
)

# Eight S-boxes, each 4 rows of 16 entries, stored row-major.
S_BOXES = (
    (14, 4, 13, 1, 2, 15, 11, 8, 3, 10, 6, 12, 5, 9, 0, 7,
     0, 15, 7, 4, 14, 2, 13, 1, 10, 6, 12, 11, 9, 5, 3, 8,
     4, 1, 14, 8, 13, 6, 2, 11, 15, 12, 9, 7, 3, 10, 5, 0,
     15, 12, 8, 2, 4, 9, 1, 7, 5, 11, 3, 14, 10, 0, 6, 13),
    (15, 1, 8, 14, 6, 11, 3, 4, 9, 7, 2, 13, 12, 0, 5, 10,
     3, 13, 4, 7, 15, 2, 8, 14, 12, 0, 1, 10, 6, 9, 11, 5,
     0, 14, 7, 11, 10, 4, 13, 1, 5, 8, 12, 6, 9, 3, 2, 15,
     13, 8, 10, 1, 3, 15, 4, 2, 11, 6, 7, 12, 0, 5, 14, 9),
    (10, 0, 9, 14, 6, 3, 15, 5, 1, 13, 12, 7, 11, 4, 2, 8,
     13, 7, 0, 9, 3, 4, 6, 10, 2, 8, 5, 14, 12, 11, 15, 1,
     13, 6, 4, 9, 8, 15, 3, 0, 11, 1, 2, 12, 5, 10, 14, 7,
     1, 10, 13, 0, 6, 9, 8, 7, 4, 15, 14, 3, 11, 5, 2, 12),
    (7, 13, 14, 3, 0, 6, 9, 10, 1, 2, 8, 5, 11, 12, 4, 15,
     13, 8, 11, 5, 6, 15, 0, 3, 4, 7, 2, 12, 1, 10, 14, 9,
     10, 6, 9, 0, 12, 11, 7, 13, 15, 1, 3, 14, 5, 2, 8, 4,
     3, 15, 0, 6, 10, 1, 13, 8, 9, 4, 5, 11, 12, 7, 2, 14),
    (2, 12, 4, 1, 7, 10, 11, 6, 8, 5, 3, 15, 13, 0, 14, 9,
     14, 11, 2, 12, 4, 7, 13, 1, 5, 0, 15, 10, 3, 9, 8, 6,
     4, 2, 1, 11, 10, 13, 7, 8, 15, 9, 12, 5, 6, 3, 0, 14,
     11, 8, 12, 7, 1, 14, 2, 13, 6, 15, 0, 9, 10, 4, 5, 3),
    (12, 1, 10, 15, 9, 2, 6, 8, 0, 13, 3, 4, 14, 7, 5, 11,
     10, 15, 4, 2, 7, 12, 9, 5, 6, 1, 13, 14, 0, 11, 3, 8,
     9, 14, 15, 5, 2, 8, 12, 3, 7, 0, 4, 10, 1, 13, 11, 6,
     4, 3, 2, 12, 9, 5, 15, 10, 11, 14, 1, 7, 6, 0, 8, 13),
    (4, 11, 2, 14, 15, 0, 8, 13, 3, 12, 9, 7, 5, 10, 6, 1,
     13, 0, 11, 7, 4, 9, 1, 10, 14, 3, 5, 12, 2, 15, 8, 6,
     1, 4, 11, 13, 12, 3, 7, 14, 10, 15, 6, 8, 0, 5, 9, 2,
     6, 11, 13, 8, 1, 4, 10, 7, 9, 5, 0, 15, 14, 2, 3, 12),
    (13, 2, 8, 4, 6, 15, 11, 1, 10, 9, 3, 14, 5, 0, 12, 7,
     1, 15, 13, 8, 10, 3, 7, 4, 12, 5, 6, 11, 0, 14, 9, 2,
     7, 11, 4, 1, 9, 12, 14, 2, 0, 6, 10, 13, 15, 3, 5, 8,
     2, 1, 14, 7, 4, 10, 8, 13, 15, 12, 9, 0, 3, 5, 6, 11),
)

Trace = Callable[[str], None]


def hex_to_bin(text: str) -> str:
    """Expand each hexadecimal digit of *text* into four bits."""
    try:
        return "".join(f"{_HEX_DIGITS.index(ch):04b}" for ch in text.upper())
    except ValueError:
        raise ValueError(f"not a hexadecimal string: {text!r}") from None


def bin_to_hex(bits: str) -> str:
    """Pack a bit string, four bits per digit, into upper-case hexadecimal."""
    if len(bits) % 4 or any(b not in "01" for b in bits):
        raise ValueError("bit string must be 0/1 digits in groups of four")
    return "".join(
        _HEX_DIGITS[int(bits[i:i + 4], 2)] for i in range(0, len(bits), 4)
    )


def permute(bits: str, table: Sequence[int]) -> str:
    """Pick characters of *bits* by the 1-based positions in *table*."""
    return "".join(bits[position - 1] for position in table)


def shift_left(bits: str, shifts: int) -> str:
    """Rotate *bits* left by *shifts* positions."""
    if not bits:
        return bits
    shifts %= len(bits)
    return bits[shifts:] + bits[:shifts]


def xor_bits(a: str, b: str) -> str:
    """Bitwise exclusive-or of two equally long bit strings."""
    if len(a) != len(b):
        raise ValueError("bit strings must have the same length")
    return "".join("0" if x == y else "1" for x, y in zip(a, b))


def _check_hex(text: str, digits: int, what: str) -> str:
    bits = hex_to_bin(text)
    if len(bits) != digits * 4:
        raise ValueError(f"{what} must be {digits} hexadecimal digits")
    return bits


def generate_round_keys(key: str) -> list[str]:
    """Derive the sixteen 48-bit round keys from a 16-digit hexadecimal key."""
    bits = permute(_check_hex(key, BLOCK_HEX_DIGITS, "key"), PARITY_DROP)
    left, right = bits[:28], bits[28:]
    round_keys = []
    for shifts in SHIFT_SCHEDULE:
        left = shift_left(left, shifts)
        right = shift_left(right, shifts)
        round_keys.append(permute(left + right, KEY_COMPRESSION))
    return round_keys


def _substitute(bits: str) -> str:
    out = []
    for box, chunk in zip(S_BOXES, (bits[i:i + 6] for i in range(0, 48, 6))):
        row = int(chunk[0] + chunk[5], 2)
        col = int(chunk[1:5], 2)
        out.append(f"{box[row * 16 + col]:04b}")
    return "".join(out)


def _crypt(block: str, round_keys: Sequence[str], trace: Trace | None = None) -> str:
    if len(round_keys) != ROUNDS or any(
        len(k) != ROUND_KEY_BITS or set(k) - {"0", "1"} for k in round_keys
    ):
        raise ValueError(f"need {ROUNDS} round keys of {ROUND_KEY_BITS} bits")
    bits = permute(_check_hex(block, BLOCK_HEX_DIGITS, "block"), INITIAL_PERM)
    left, right = bits[:32], bits[32:]
    if trace:
        trace(f"After initial permutation: {bin_to_hex(bits)}")
        trace(f"After splitting: L0={bin_to_hex(left)} R0={bin_to_hex(right)}")
        trace("")
    for number, round_key in enumerate(round_keys, start=1):
        mixed = xor_bits(round_key, permute(right, EXPANSION))
        left = xor_bits(permute(_substitute(mixed), STRAIGHT_PERM), left)
        if number != ROUNDS:
            left, right = right, left
        if trace:
            trace(
                f"Round {number} {bin_to_hex(left)} {bin_to_hex(right)} "
                f"{bin_to_hex(round_key)}"
            )
    return bin_to_hex(permute(left + right, FINAL_PERM))


def encrypt_block(block: str, round_keys: Sequence[str]) -> str:
    """Encrypt a 16-digit hexadecimal block; returns upper-case hexadecimal."""
    return _crypt(block, round_keys)


def decrypt_block(block: str, round_keys: Sequence[str]) -> str:
    """Decrypt a block encrypted with the same *round_keys*."""
    return _crypt(block, list(reversed(round_keys)))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="DES encryption with a round trace.")
    parser.add_argument("-p", "--plaintext", default=DEFAULT_PLAINTEXT)
    parser.add_argument("-k", "--key", default=DEFAULT_KEY)
    parser.add_argument(
        "--round-keys", action="store_true", help="only print the round keys in binary"
    )
    args = parser.parse_args(argv)

    try:
        round_keys = generate_round_keys(args.key)
        if args.round_keys:
            for number, round_key in enumerate(round_keys, start=1):
                print(f"Round : {number} {round_key}")
            return 0
        print("\nEncryption:\n")
        cipher = _crypt(args.plaintext, round_keys, print)
        print(f"\nCipher Text: {cipher}")
        print("\nDecryption\n")
        plain = _crypt(cipher, list(reversed(round_keys)), print)
        print(f"\nPlain Text: {plain}")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())