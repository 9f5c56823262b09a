"""AES-128 with every intermediate state recorded, round by round."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from cipherkit.aes import INV_SBOX, gf_mul
from cipherkit.aes_key import RCON, SBOX, rot_word, sub_word

BLOCK_SIZE = 16
ROUNDS = 10

DEFAULT_ENCRYPT_BLOCK = bytes.fromhex("00112233445566778899aabbccddeeff")
DEFAULT_ENCRYPT_KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
DEFAULT_DECRYPT_BLOCK = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")
DEFAULT_DECRYPT_KEY = bytes.fromhex("13111d7fe3944a17f307a78b4d2b30c5")

_MIX = ((2, 3, 1, 1), (1, 2, 3, 1), (1, 1, 2, 3), (3, 1, 1, 2))
_INV_MIX = ((14, 11, 13, 9), (9, 14, 11, 13), (13, 9, 14, 11), (11, 13, 9, 14))


class Stage(Enum):
    """What a trace step records."""

    INPUT = "input"
    INPUT_KEY = "input key"
    START = "start"
    SBOX = "sbox"
    SHIFTROW = "shiftrow"
    MIXCOL = "mixcol"
    KEY = "key"
    ADD_ROUND_KEY = "add round key"


@dataclass(frozen=True)
class TraceStep:
    """One recorded state: the stage, its round number and the 16 bytes."""

    stage: Stage
    data: bytes
    round: int | None = None

    def __str__(self) -> str:
        if self.stage is Stage.INPUT:
            prefix = "the input number is: "
        elif self.stage is Stage.INPUT_KEY:
            prefix = "the input key is: "
        elif self.stage is Stage.ADD_ROUND_KEY:
            prefix = f"the {self.round} add round key number is: "
        else:
            prefix = f"the {self.round} round {self.stage.value} number is: "
        return prefix + "".join(f"{b:x} " for b in self.data)


def _check(data: bytes | Sequence[int], what: str) -> bytes:
    result = bytes(data)
    if len(result) != BLOCK_SIZE:
        raise ValueError(f"{what} must be {BLOCK_SIZE} bytes long")
    return result


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _shift_rows(state: bytes, direction: int) -> bytes:
    # Column-major: byte (row r, column c) sits at index c * 4 + r.
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


def _words(key: bytes) -> list[int]:
    return [int.from_bytes(key[i:i + 4], "big") for i in range(0, BLOCK_SIZE, 4)]


def _join(words: list[int]) -> bytes:
    return b"".join(w.to_bytes(4, "big") for w in words)


def _next_round_key(key: bytes, index: int) -> bytes:
    w0, w1, w2, w3 = _words(key)
    w0 ^= sub_word(rot_word(w3)) ^ (RCON[index] << 24)
    w1 ^= w0
    w2 ^= w1
    w3 ^= w2
    return _join([w0, w1, w2, w3])


def _previous_round_key(key: bytes, index: int) -> bytes:
    w0, w1, w2, w3 = _words(key)
    w3 ^= w2
    w2 ^= w1
    w1 ^= w0
    w0 ^= sub_word(rot_word(w3)) ^ (RCON[index] << 24)
    return _join([w0, w1, w2, w3])


def trace_encrypt(
    block: bytes | Sequence[int], key: bytes | Sequence[int]
) -> list[TraceStep]:
    """Encrypt one block with a 16-byte key, recording every step.

    The last step holds the ciphertext; the last KEY step holds the final round key.
    """
    state = _check(block, "block")
    round_key = _check(key, "key")
    steps = [TraceStep(Stage.INPUT, state), TraceStep(Stage.INPUT_KEY, round_key)]
    state = _xor(state, round_key)
    steps.append(TraceStep(Stage.START, state, 1))
    for number in range(1, ROUNDS + 1):
        state = bytes(SBOX[b] for b in state)
        steps.append(TraceStep(Stage.SBOX, state, number))
        state = _shift_rows(state, 1)
        steps.append(TraceStep(Stage.SHIFTROW, state, number))
        if number != ROUNDS:
            state = _mix_columns(state, _MIX)
            steps.append(TraceStep(Stage.MIXCOL, state, number))
        round_key = _next_round_key(round_key, number - 1)
        steps.append(TraceStep(Stage.KEY, round_key, number))
        state = _xor(state, round_key)
        steps.append(TraceStep(Stage.START, state, number + 1))
    return steps


def trace_decrypt(
    block: bytes | Sequence[int], key: bytes | Sequence[int]
) -> list[TraceStep]:
    """Decrypt one block given the final (tenth) round key, recording every step.

    The last step holds the plaintext; the last KEY step holds the original key.
    """
    state = _check(block, "block")
    round_key = _check(key, "key")
    steps = [TraceStep(Stage.INPUT, state), TraceStep(Stage.INPUT_KEY, round_key)]
    state = _xor(state, round_key)
    steps.append(TraceStep(Stage.START, state, 1))
    for j in range(ROUNDS, 0, -1):
        number = ROUNDS + 1 - j
        state = _shift_rows(state, -1)
        steps.append(TraceStep(Stage.SHIFTROW, state, number))
        state = bytes(INV_SBOX[b] for b in state)
        steps.append(TraceStep(Stage.SBOX, state, number))
        round_key = _previous_round_key(round_key, j - 1)
        steps.append(TraceStep(Stage.KEY, round_key, number))
        state = _xor(state, round_key)
        steps.append(TraceStep(Stage.ADD_ROUND_KEY, state, number))
        if j >= 2:
            state = _mix_columns(state, _INV_MIX)
            steps.append(TraceStep(Stage.START, state, number))
    return steps


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trace AES-128 round by round.")
    parser.add_argument(
        "mode", nargs="?", help="1 to encrypt, 0 to decrypt (asked for if omitted)"
    )
    parser.add_argument("-b", "--block", help="block as hexadecimal digits")
    parser.add_argument(
        "-k", "--key", help="key as hexadecimal digits (final round key to decrypt)"
    )
    args = parser.parse_args(argv)

    mode = args.mode
    if mode is None:
        print("encryption enter 1, decryption enter 0: ")
        mode = sys.stdin.readline().strip()
    if mode not in ("0", "1"):
        print(f"error: unknown mode {mode!r}", file=sys.stderr)
        return 1
    encrypting = mode == "1"
    try:
        block = (
            bytes.fromhex(args.block)
            if args.block
            else (DEFAULT_ENCRYPT_BLOCK if encrypting else DEFAULT_DECRYPT_BLOCK)
        )
        key = (
            bytes.fromhex(args.key)
            if args.key
            else (DEFAULT_ENCRYPT_KEY if encrypting else DEFAULT_DECRYPT_KEY)
        )
        steps = (trace_encrypt if encrypting else trace_decrypt)(block, key)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for step in steps:
        print(step)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())