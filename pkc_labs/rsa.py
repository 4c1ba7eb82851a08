"""Textbook RSA over two small primes.

Derives ``d`` from ``(p, q, e)``, encrypts one integer message and decrypts
it again. No padding, no key storage.
"""

from __future__ import annotations

import argparse
from typing import Iterable, Optional

from .constants import RSA_E, RSA_MESSAGE, RSA_P, RSA_Q
from .dataclass import KeyPair
from .errors import InvalidArgument, PKCError
from .modular import gcd, mod_inverse, modpow


def totient(p: int, q: int) -> int:
    return (p - 1) * (q - 1)


def generate_keypair(p: int, q: int, e: int, method: str = "euclid") -> KeyPair:
    if p == q:
        raise InvalidArgument("p and q must be distinct primes")
    if e < 2:
        raise InvalidArgument(f"Public exponent must be at least 2, got {e}")

    phi = totient(p, q)
    d = mod_inverse(e, phi, method=method)
    return KeyPair(n=p * q, e=e, d=d, totient=phi)


def _check_block(value: int, n: int) -> None:
    if not 0 <= value < n:
        raise InvalidArgument(f"Value {value} must lie in [0, {n})")


def encrypt(m: int, e: int, n: int) -> int:
    _check_block(m, n)
    return modpow(m, e, n)


def decrypt(c: int, d: int, n: int) -> int:
    _check_block(c, n)
    return modpow(c, d, n)


def run_demo(p: int, q: int, e: int, message: int, method: str = "euclid") -> bool:
    keys = generate_keypair(p, q, e, method=method)
    ciphertext = encrypt(message, keys.e, keys.n)
    recovered = decrypt(ciphertext, keys.d, keys.n)

    print(f"n             = {keys.n}")
    print(f"totient       = {keys.totient}")
    print(f"e             = {keys.e}")
    print(f"d             = {keys.d}")
    print(f"g             = {gcd(keys.e, keys.totient)}")
    print(f"e*d mod φ(n)  = {keys.e * keys.d % keys.totient}")
    print(f"M             = {message}")
    print(f"C = M^e mod n = {ciphertext}")
    print(f"M'            = {recovered}")
    print(f"M == M'       ? {'YES' if recovered == message else 'NO'}")
    return recovered == message


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Textbook RSA encrypt/decrypt walkthrough.")
    parser.add_argument("-p", type=int, default=RSA_P, help=f"First prime (default: {RSA_P}).")
    parser.add_argument("-q", type=int, default=RSA_Q, help=f"Second prime (default: {RSA_Q}).")
    parser.add_argument("-e", type=int, default=RSA_E, help=f"Public exponent (default: {RSA_E}).")
    parser.add_argument(
        "--message",
        type=int,
        default=RSA_MESSAGE,
        help=f"Integer message, smaller than p*q (default: {RSA_MESSAGE}).",
    )
    parser.add_argument(
        "--method",
        choices=("euclid", "scan"),
        default="euclid",
        help="How to invert e modulo the totient (default: euclid).",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        ok = run_demo(args.p, args.q, args.e, args.message, method=args.method)
    except PKCError as exc:
        raise SystemExit(f"{type(exc).__name__}: {exc}") from exc
    return 0 if ok else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
