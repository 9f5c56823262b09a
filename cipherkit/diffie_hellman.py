"""Diffie-Hellman key agreement over a small prime modulus."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

DEFAULT_GENERATOR = 7
DEFAULT_MODULUS = 11
DEFAULT_ALICE_SECRET = 3
DEFAULT_BOB_SECRET = 6


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus``; an exponent of zero gives 1."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def public_key(generator: int, secret: int, modulus: int) -> int:
    """The value a party publishes: ``generator ** secret mod modulus``."""
    return power_mod(generator, secret, modulus)


def shared_secret(other_public: int, secret: int, modulus: int) -> int:
    """The key a party derives from the other party's public value."""
    return power_mod(other_public, secret, modulus)


def exchange(
    generator: int, modulus: int, alice_secret: int, bob_secret: int
) -> tuple[int, int]:
    """Run both sides of the exchange; return the keys Alice and Bob derive."""
    alice_public = public_key(generator, alice_secret, modulus)
    bob_public = public_key(generator, bob_secret, modulus)
    return (
        shared_secret(bob_public, alice_secret, modulus),
        shared_secret(alice_public, bob_secret, modulus),
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Diffie-Hellman key exchange.")
    parser.add_argument("-g", "--generator", type=int, default=DEFAULT_GENERATOR)
    parser.add_argument("-n", "--modulus", type=int, default=DEFAULT_MODULUS)
    parser.add_argument("-x", "--alice", type=int, default=DEFAULT_ALICE_SECRET)
    parser.add_argument("-y", "--bob", type=int, default=DEFAULT_BOB_SECRET)
    args = parser.parse_args(argv)

    k1, k2 = exchange(args.generator, args.modulus, args.alice, args.bob)
    print(k1, k2)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())