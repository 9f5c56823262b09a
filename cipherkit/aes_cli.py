"""Encrypt a file with AES block by block, zero-padding the last block."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import BinaryIO

from cipherkit.aes import AES, BLOCK_SIZE
from cipherkit.aes_key import expand_key

KEY_SIZES = (128, 192, 256)

Block = tuple[bytes, bytes]


def _read_block(source: BinaryIO) -> bytes:
    """Read up to one block, retrying short reads until the stream ends."""
    data = b""
    while len(data) < BLOCK_SIZE:
        chunk = source.read(BLOCK_SIZE - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _blocks(source: BinaryIO, cipher: AES) -> Iterator[Block]:
    first = True
    while True:
        chunk = _read_block(source)
        if not chunk and not first:
            return
        first = False
        plain = chunk.ljust(BLOCK_SIZE, b"\0")
        yield plain, cipher.encrypt_block(plain)
        if len(chunk) < BLOCK_SIZE:
            return


def encrypt_stream(source: BinaryIO, key: bytes | str | Sequence[int]) -> Iterator[Block]:
    """Encrypt a binary stream, yielding ``(plaintext_block, ciphertext_block)`` pairs.

    The key (16, 24 or 32 bytes; a string is UTF-8 encoded) fixes the AES
    variant. The last block is zero-padded, and an empty stream still yields
    one all-zero block. A bad key raises ValueError at once.
    """
    key_bytes = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    cipher = AES(key_bytes)
    return _blocks(source, cipher)


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        raise ValueError("unexpected end of input") from None


def _ask_key_size() -> int:
    while True:
        answer = _ask("Enter AES key size (Only 128 or 192 or 256) : ").strip()
        try:
            size = int(answer)
        except ValueError:
            continue
        if size in KEY_SIZES:
            return size


def _ints(data: bytes) -> str:
    return "".join(f"{b} " for b in data)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Encrypt a file with AES; missing options are asked for."
    )
    parser.add_argument("-s", "--key-size", type=int, choices=KEY_SIZES)
    parser.add_argument("-k", "--key", help="key characters (one word)")
    parser.add_argument("-i", "--input", help="plaintext file")
    parser.add_argument("-o", "--output", help="ciphertext file to write")
    parser.add_argument(
        "--show-key", action="store_true", help="print the expanded round key bytes"
    )
    args = parser.parse_args(argv)

    print("*** AES encryption System ***")
    try:
        key_size = args.key_size if args.key_size is not None else _ask_key_size()
        key_length = key_size // 8
        key_text = args.key
        if key_text is None:
            key_text = _ask(f"Enter AES KEY ({key_length} characters) : ")
        words = key_text.split()
        key = (words[0] if words else "").encode("utf-8")[:key_length]
        if len(key) < key_length:
            raise ValueError(f"key must have {key_length} characters")
        input_name = args.input or _ask("Enter plaintext file name => ").strip()
        output_name = args.output or _ask(
            "Enter Ciphertext file name to write out cipher => "
        ).strip()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.show_key:
        round_key = b"".join(w.to_bytes(4, "big") for w in expand_key(key))
        print("RoundKey : " + _ints(round_key))

    try:
        source = open(input_name, "rb")
    except OSError:
        print("Open file Error...")
        return 1

    with source, open(output_name, "wb") as sink:
        print("---------------------------------------------")
        for number, (plain, cipher) in enumerate(encrypt_stream(source, key)):
            sink.write(cipher)
            print(f"Block {number}(128 bits) - plaintext.txt(Int format) : {_ints(plain)}")
            print(f"Block {number}(128 bits) - Cipher(Int format) : {_ints(cipher)}")

    print("------------------------------------------------")
    print("Encryption process complete !! ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())