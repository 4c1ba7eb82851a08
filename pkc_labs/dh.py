"""Diffie-Hellman over a fixed prime with the generic primitive-root test.

``p - 1`` is factored by trial division to find the exponents the generator
test needs. That works for the demo prime but does not scale; see
:mod:`pkc_labs.dh_safe` for the safe-prime variant that avoids factoring.
"""

from __future__ import annotations

import argparse
import random
from typing import Iterable, Optional

from .constants import DH_PRIME, DH_THRESHOLD, PRIVATE_A, PRIVATE_B, PRP_REPS
from .dataclass import Exchange, ExchangeConfig
from .errors import InvalidArgument, PKCError
from .factor import distinct_prime_factors
from .generator import find_generator, timed
from .modular import modpow
from .primes import require_probable_prime


def exchange(p: int, alpha: int, xa: int, xb: int, seconds: float = 0.0) -> Exchange:
    if xa < 1 or xb < 1:
        raise InvalidArgument("Private exponents must be positive")

    ya = modpow(alpha, xa, p)
    yb = modpow(alpha, xb, p)
    sa = modpow(yb, xa, p)
    sb = modpow(ya, xb, p)
    return Exchange(p=p, alpha=alpha, xa=xa, xb=xb, ya=ya, yb=yb, sa=sa, sb=sb, seconds=seconds)


def print_exchange(result: Exchange) -> None:
    print(f"XA         = {result.xa}")
    print(f"XB         = {result.xb}")
    print(f"YA         = {result.ya}")
    print(f"YB         = {result.yb}")
    print(f"S_A        = {result.sa}")
    print(f"S_B        = {result.sb}")
    print(f"Keys match? {'YES' if result.keys_match else 'NO'}")


def run_generic(p: int, config: ExchangeConfig) -> Exchange:
    require_probable_prime(p, config.rounds, random.Random(config.seed))
    factors = distinct_prime_factors(p - 1)
    alpha, seconds = timed(
        find_generator,
        p,
        factors,
        start=config.generator_floor,
        max_candidates=config.max_candidates,
    )
    return exchange(p, alpha, config.private_a, config.private_b, seconds=seconds)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Diffie-Hellman key exchange; primitive root found by factoring p - 1."
    )
    parser.add_argument("--prime", type=int, default=DH_PRIME, help="Prime modulus P.")
    parser.add_argument(
        "--threshold",
        type=int,
        default=DH_THRESHOLD,
        help=f"Generator search starts at threshold + 1 (default: {DH_THRESHOLD}).",
    )
    parser.add_argument("--xa", type=int, default=PRIVATE_A, help=f"Private key of A (default: {PRIVATE_A}).")
    parser.add_argument("--xb", type=int, default=PRIVATE_B, help=f"Private key of B (default: {PRIVATE_B}).")
    parser.add_argument(
        "--rounds",
        type=int,
        default=PRP_REPS,
        help=f"Miller-Rabin rounds for the primality check (default: {PRP_REPS}).",
    )
    parser.add_argument("--max-candidates", type=int, help="Give up after this many generator candidates.")
    parser.add_argument("--seed", type=int, help="Seed for the primality witnesses.")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = ExchangeConfig(
        private_a=args.xa,
        private_b=args.xb,
        generator_floor=args.threshold + 1,
        rounds=args.rounds,
        max_candidates=args.max_candidates,
        seed=args.seed,
    )
    try:
        result = run_generic(args.prime, config)
    except PKCError as exc:
        raise SystemExit(f"{type(exc).__name__}: {exc}") from exc

    print(f"P (prime)  = {result.p}")
    print(f"alpha (g)  = {result.alpha}")
    print(f"Primitive root search time: {result.seconds:.6f} s")
    print_exchange(result)
    return 0 if result.keys_match else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
