"""Textbook RSA with small primes."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_P = 3
DEFAULT_Q = 7
DEFAULT_MESSAGE = 12


@dataclass(frozen=True)
class KeyPair:
    """Modulus with public exponent *e* and private exponent *d*."""

    n: int
    e: int
    d: int


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; *b* must be non-zero."""
    while True:
        remainder = a % b
        if remainder == 0:
            return b
        a, b = b, remainder


def public_exponent(phi: int) -> int:
    """Smallest e >= 2 below *phi* that is coprime to it (or max(2, phi) if none)."""
    return next((e for e in range(2, phi) if gcd(e, phi) == 1), max(2, phi))


def generate_keypair(p: int, q: int) -> KeyPair:
    """Build a key pair from the primes *p* and *q*."""
    if p < 2 or q < 2:
        raise ValueError("p and q must be primes of at least 2")
    phi = (p - 1) * (q - 1)
    e = public_exponent(phi)
    try:
        d = pow(e, -1, phi)
    except ValueError as exc:
        raise ValueError(f"no private exponent exists for phi={phi}") from exc
    return KeyPair(n=p * q, e=e, d=d)


def _check_range(value: int, key: KeyPair) -> None:
    if not 0 <= value < key.n:
        raise ValueError(f"value must lie in [0, {key.n})")


def encrypt(message: int, key: KeyPair) -> int:
    """Return ``message ** e mod n``."""
    _check_range(message, key)
    return pow(message, key.e, key.n)


def decrypt(ciphertext: int, key: KeyPair) -> int:
    """Return ``ciphertext ** d mod n``."""
    _check_range(ciphertext, key)
    return pow(ciphertext, key.d, key.n)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Textbook RSA demonstration.")
    parser.add_argument("-p", type=int, default=DEFAULT_P)
    parser.add_argument("-q", type=int, default=DEFAULT_Q)
    parser.add_argument("-m", "--message", type=int, default=DEFAULT_MESSAGE)
    args = parser.parse_args(argv)

    key = generate_keypair(args.p, args.q)
    ciphertext = encrypt(args.message, key)
    print(f"Message data = {args.message}")
    print(f"Encrypted data = {ciphertext}")
    print(f"Original Message Sent = {decrypt(ciphertext, key)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())