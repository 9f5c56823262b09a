"""AES key schedule on 32-bit words, for 128-, 192- and 256-bit keys."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

WORD_MASK = 0xFFFFFFFF

DEFAULT_KEY = bytes(
    [0x24, 0x75, 0xA2, 0xB3, 0x34, 0x75, 0x56, 0x88,
     0x31, 0xE2, 0x12, 0x00, 0x13, 0xAA, 0x54, 0x87]
)

SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)

_KEY_WORDS = {16: 4, 24: 6, 32: 8}


def _check_word(word: int) -> None:
    if not 0 <= word <= WORD_MASK:
        raise ValueError("word must be an unsigned 32-bit integer")


def rot_word(word: int) -> int:
    """Rotate the four bytes of *word* left by one byte."""
    _check_word(word)
    return ((word << 8) | (word >> 24)) & WORD_MASK


def sub_word(word: int) -> int:
    """Replace every byte of *word* by its S-box entry."""
    _check_word(word)
    return int.from_bytes(bytes(SBOX[b] for b in word.to_bytes(4, "big")), "big")


def expand_key(key: bytes | Sequence[int]) -> list[int]:
    """Expand a 16-, 24- or 32-byte key into 4 * (rounds + 1) words."""
    key = bytes(key)
    nk = _KEY_WORDS.get(len(key))
    if nk is None:
        raise ValueError("key must be 16, 24 or 32 bytes long")
    total = 4 * (nk + 6 + 1)
    words = [int.from_bytes(key[i:i + 4], "big") for i in range(0, len(key), 4)]
    for i in range(nk, total):
        temp = words[i - 1]
        if i % nk == 0:
            temp = sub_word(rot_word(temp)) ^ (RCON[i // nk - 1] << 24)
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)
        words.append(words[i - nk] ^ temp)
    return words


def hex_to_binary(text: str) -> str:
    """Expand each hexadecimal digit of *text* (either case) into four bits."""
    try:
        return "".join(f"{int(ch, 16):04b}" for ch in text)
    except ValueError:
        raise ValueError(f"invalid hexadecimal digit in {text!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the AES key schedule.")
    parser.add_argument(
        "-k", "--key", default=DEFAULT_KEY.hex(), help="key as hexadecimal digits"
    )
    parser.add_argument(
        "--binary", action="store_true", help="also print the key in binary"
    )
    args = parser.parse_args(argv)

    try:
        key = bytes.fromhex(args.key)
        words = expand_key(key)
        binary = hex_to_binary(args.key.replace(" ", ""))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("KEY IS: " + " ".join(f"{b:x}" for b in key))
    if args.binary:
        print(f"Equivalent Binary Value: {binary}")
    for index, word in enumerate(words):
        print(f"w[{index}] = {word:x}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())