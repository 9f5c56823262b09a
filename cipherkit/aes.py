"""AES block cipher (128, 192 and 256-bit keys) and a zero-padded string encryptor."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from cipherkit.aes_key import SBOX, expand_key

BLOCK_SIZE = 16
MAX_LINE = 1023

DEFAULT_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")

INV_SBOX = bytes(SBOX.index(value) for value in range(256))

_KEY_SIZE_CHOICES = {1: 16, 2: 24, 3: 32}

_MIX = ((2, 3, 1, 1), (1, 2, 3, 1), (1, 1, 2, 3), (3, 1, 1, 2))
_INV_MIX = ((14, 11, 13, 9), (9, 14, 11, 13), (13, 9, 14, 11), (11, 13, 9, 14))


def _check_byte(value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError("value must be a byte in [0, 255]")


def xtime(value: int) -> int:
    """Multiply *value* by {02} in GF(2^8) modulo the AES polynomial."""
    _check_byte(value)
    return ((value << 1) ^ (0x1B if value & 0x80 else 0)) & 0xFF


def gf_mul(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) modulo x^8 + x^4 + x^3 + x + 1."""
    _check_byte(a)
    _check_byte(b)
    product = 0
    for _ in range(8):
        if b & 1:
            product ^= a
        a = xtime(a)
        b >>= 1
    return product


def _shift_rows(state: bytes, direction: int) -> bytes:
    # State is column-major: byte (row r, column c) sits at index c * 4 + r.
    return bytes(
        state[((c + direction * r) % 4) * 4 + r] for c in range(4) for r in range(4)
    )


def _mix_columns(state: bytes, matrix: tuple[tuple[int, ...], ...]) -> bytes:
    out = bytearray()
    for c in range(4):
        column = state[c * 4:c * 4 + 4]
        for row in matrix:
            value = 0
            for coeff, byte in zip(row, column):
                value ^= gf_mul(coeff, byte)
            out.append(value)
    return bytes(out)


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


class AES:
    """AES cipher bound to one 16-, 24- or 32-byte key."""

    def __init__(self, key: bytes | Sequence[int]) -> None:
        words = expand_key(key)
        self.rounds = len(words) // 4 - 1
        self._round_keys = [
            b"".join(w.to_bytes(4, "big") for w in words[r * 4:r * 4 + 4])
            for r in range(self.rounds + 1)
        ]

    @staticmethod
    def _check_block(block: bytes | Sequence[int]) -> bytes:
        data = bytes(block)
        if len(data) != BLOCK_SIZE:
            raise ValueError(f"block must be {BLOCK_SIZE} bytes long")
        return data

    def encrypt_block(self, block: bytes | Sequence[int]) -> bytes:
        """Encrypt one 16-byte block."""
        state = _xor(self._check_block(block), self._round_keys[0])
        for round_key in self._round_keys[1:-1]:
            state = _shift_rows(bytes(SBOX[b] for b in state), 1)
            state = _xor(_mix_columns(state, _MIX), round_key)
        state = _shift_rows(bytes(SBOX[b] for b in state), 1)
        return _xor(state, self._round_keys[-1])

    def decrypt_block(self, block: bytes | Sequence[int]) -> bytes:
        """Decrypt one 16-byte block produced by :meth:`encrypt_block`."""
        state = _xor(self._check_block(block), self._round_keys[-1])
        for round_key in reversed(self._round_keys[1:-1]):
            state = bytes(INV_SBOX[b] for b in _shift_rows(state, -1))
            state = _mix_columns(_xor(state, round_key), _INV_MIX)
        state = bytes(INV_SBOX[b] for b in _shift_rows(state, -1))
        return _xor(state, self._round_keys[0])


def encrypt_string(text: str | bytes, key: bytes | Sequence[int]) -> bytes:
    """Encrypt *text* block by block, zero-padding the last block.

    A string is encoded as UTF-8; empty input gives empty output.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    cipher = AES(key)
    return b"".join(
        cipher.encrypt_block(data[i:i + BLOCK_SIZE].ljust(BLOCK_SIZE, b"\0"))
        for i in range(0, len(data), BLOCK_SIZE)
    )


def _key_length(choice: str) -> int:
    try:
        number = int(choice)
    except ValueError:
        number = 0
    return _KEY_SIZE_CHOICES.get(number, 16)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Encrypt one line from stdin with AES and print the bytes."
    )
    parser.add_argument("keysize", help="1=128, 2=192, 3=256")
    args = parser.parse_args(argv)

    key = DEFAULT_KEY.ljust(_key_length(args.keysize), b"\0")
    line = sys.stdin.readline().encode("utf-8")[:MAX_LINE]
    cipher = encrypt_string(line, key)
    sys.stdout.write("".join(f"{b} " for b in cipher) + "\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())