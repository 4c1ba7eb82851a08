"""Diffie-Hellman over a safe prime ``P = 2r + 1``.

The factors of ``P - 1`` are known up front (2 and ``r``), so the primitive
root test is two exponentiations per candidate and ``P`` can be far larger
than anything trial division could factor.
"""

from __future__ import annotations

import argparse
import random
from typing import Iterable, Optional

from .constants import GEN_START_MIN, PRIVATE_A, PRIVATE_B, PRP_REPS, SAFE_BITS_MIN, SAFE_DIGITS_MIN
from .dataclass import Exchange, ExchangeConfig, SafePrime
from .dh import exchange, print_exchange
from .errors import PKCError
from .generator import find_generator_safe_prime, timed
from .primes import generate_safe_prime, safe_prime_from


def run_safe(config: ExchangeConfig, prime: int | None = None) -> tuple[SafePrime, Exchange]:
    rng = random.Random(config.seed)
    if prime is None:
        safe = generate_safe_prime(
            config.min_digits,
            min_bits=config.min_bits,
            rounds=config.rounds,
            rng=rng,
            max_attempts=config.max_attempts,
        )
    else:
        safe = safe_prime_from(prime, rounds=config.rounds, rng=rng)

    alpha, seconds = timed(
        find_generator_safe_prime,
        safe.p,
        safe.r,
        start=config.generator_floor,
        max_candidates=config.max_candidates,
    )
    return safe, exchange(safe.p, alpha, config.private_a, config.private_b, seconds=seconds)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Diffie-Hellman key exchange over a generated safe prime."
    )
    parser.add_argument(
        "--digits",
        type=int,
        default=SAFE_DIGITS_MIN,
        help=f"Minimum decimal digits of P (default: {SAFE_DIGITS_MIN}).",
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=SAFE_BITS_MIN,
        help=f"Minimum bit length of P (default: {SAFE_BITS_MIN}).",
    )
    parser.add_argument("--prime", type=int, help="Use this safe prime instead of generating one.")
    parser.add_argument(
        "--start",
        type=int,
        default=GEN_START_MIN,
        help=f"Smallest generator candidate (default: {GEN_START_MIN}).",
    )
    parser.add_argument("--xa", type=int, default=PRIVATE_A, help=f"Private key of A (default: {PRIVATE_A}).")
    parser.add_argument("--xb", type=int, default=PRIVATE_B, help=f"Private key of B (default: {PRIVATE_B}).")
    parser.add_argument(
        "--rounds",
        type=int,
        default=PRP_REPS,
        help=f"Miller-Rabin rounds (default: {PRP_REPS}).",
    )
    parser.add_argument("--max-candidates", type=int, help="Give up after this many generator candidates.")
    parser.add_argument("--max-attempts", type=int, help="Give up after this many safe-prime samples.")
    parser.add_argument("--seed", type=int, help="Seed for prime sampling and primality witnesses.")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = ExchangeConfig(
        min_digits=args.digits,
        min_bits=args.bits,
        private_a=args.xa,
        private_b=args.xb,
        generator_floor=args.start,
        rounds=args.rounds,
        max_candidates=args.max_candidates,
        max_attempts=args.max_attempts,
        seed=args.seed,
    )
    try:
        safe, result = run_safe(config, prime=args.prime)
    except PKCError as exc:
        raise SystemExit(f"{type(exc).__name__}: {exc}") from exc

    print(f"P (prime, {safe.digits} digits) = {safe.p}")
    print(f"r ((P-1)/2, prime)   = {safe.r}")
    print(f"alpha (generator)    = {result.alpha}")
    print(f"Primitive root search time: {result.seconds:.6f} s")
    print_exchange(result)
    return 0 if result.keys_match else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
