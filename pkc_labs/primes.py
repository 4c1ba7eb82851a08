"""Primality and safe-prime generation on top of sympy.

Python integers carry the arithmetic; sympy supplies the pieces GMP gave the
C programs: ``nextprime`` and the Miller-Rabin kernel. Every random choice is
drawn from a ``random.Random`` the caller may seed.
"""

from __future__ import annotations

import random

from sympy import nextprime
from sympy.ntheory.primetest import mr

from .constants import LOG2_10, PRP_REPS, SAFE_BITS_MIN
from .dataclass import SafePrime
from .errors import InvalidArgument, NotPrime, SearchExhausted
from .modular import decimal_digits


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def is_probable_prime(n: int, rounds: int = PRP_REPS, rng: random.Random | None = None) -> bool:
    """Miller-Rabin with ``rounds`` random witnesses."""

    if rounds < 1:
        raise InvalidArgument(f"Need at least one Miller-Rabin round, got {rounds}")
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    rng = _rng(rng)
    bases = [rng.randrange(2, n - 1) for _ in range(rounds)]
    return bool(mr(n, bases))


def require_probable_prime(n: int, rounds: int = PRP_REPS, rng: random.Random | None = None) -> int:
    if not is_probable_prime(n, rounds, rng):
        raise NotPrime(f"{n} is not prime")
    return n


def next_prime(n: int) -> int:
    """Smallest prime strictly greater than ``n``."""
    return int(nextprime(n))


# digits * log2(10), rounded
def digits_to_bits(digits: int) -> int:
    return max(3, int(digits * LOG2_10 + 0.5))


def generate_safe_prime(
    min_digits: int,
    min_bits: int = SAFE_BITS_MIN,
    rounds: int = PRP_REPS,
    rng: random.Random | None = None,
    max_attempts: int | None = None,
) -> SafePrime:
    """Sample ``P = 2r + 1`` until ``P`` is prime and has ``min_digits`` digits.

    Each attempt draws ``bits - 1`` random bits with the top one forced, moves
    to the next prime ``r`` and tests ``P``. Safe primes have positive density,
    so the loop ends in practice; ``max_attempts`` turns it into a bounded
    search that raises ``SearchExhausted``.
    """

    if min_digits < 1:
        raise InvalidArgument(f"min_digits must be positive, got {min_digits}")
    if min_bits < 1:
        raise InvalidArgument(f"min_bits must be positive, got {min_bits}")
    if rounds < 1:
        raise InvalidArgument(f"rounds must be positive, got {rounds}")
    if max_attempts is not None and max_attempts < 1:
        raise InvalidArgument(f"max_attempts must be positive, got {max_attempts}")

    rng = _rng(rng)
    bits = max(digits_to_bits(min_digits), min_bits)

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = rng.getrandbits(bits - 1)
        candidate |= 1 << (bits - 2)
        r = next_prime(candidate)

        p = 2 * r + 1
        if is_probable_prime(p, rounds, rng) and decimal_digits(p) >= min_digits:
            return SafePrime(p=p, r=r)

    raise SearchExhausted(f"No safe prime with {min_digits} digits after {attempts} attempts")


def safe_prime_from(p: int, rounds: int = PRP_REPS, rng: random.Random | None = None) -> SafePrime:
    """Check that a caller-supplied ``p`` is a safe prime and split it."""

    rng = _rng(rng)
    if not is_probable_prime(p, rounds, rng):
        raise NotPrime(f"{p} is not prime")
    if (p - 1) % 2 != 0:
        raise InvalidArgument(f"{p} is not of the form 2r + 1")

    r = (p - 1) // 2
    if not is_probable_prime(r, rounds, rng):
        raise NotPrime(f"(P - 1) / 2 = {r} is not prime; {p} is not a safe prime")
    return SafePrime(p=p, r=r)
