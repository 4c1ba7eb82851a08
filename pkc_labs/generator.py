"""Primitive-root search modulo a prime.

``g`` generates the multiplicative group mod ``p`` exactly when
``g ** ((p - 1) / q) % p != 1`` for every distinct prime ``q`` dividing
``p - 1``. The generic test needs the full factorisation of ``p - 1``; for a
safe prime ``p = 2r + 1`` the factors are just 2 and ``r``, so each candidate
costs two exponentiations no matter how large ``p`` is.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable, TypeVar

from .errors import InvalidArgument, SearchExhausted
from .modular import modpow

T = TypeVar("T")


def is_generator(g: int, p: int, factors: Iterable[int]) -> bool:
    p_minus_1 = p - 1
    for q in factors:
        if modpow(g, p_minus_1 // q, p) == 1:
            return False
    return True


def is_generator_safe_prime(g: int, p: int, r: int) -> bool:
    p_minus_1 = p - 1
    if modpow(g, p_minus_1 // 2, p) == 1:
        return False
    if modpow(g, p_minus_1 // r, p) == 1:
        return False
    return True


def _scan(p: int, start: int, accept: Callable[[int], bool], max_candidates: int | None) -> int:
    if p < 3:
        raise InvalidArgument(f"Modulus must be an odd prime, got {p}")
    if start < 2:
        raise InvalidArgument(f"Search must start at 2 or above, got {start}")
    if max_candidates is not None and max_candidates < 1:
        raise InvalidArgument(f"max_candidates must be positive, got {max_candidates}")

    candidate = start
    tried = 0
    while max_candidates is None or tried < max_candidates:
        tried += 1
        # multiples of p are not units
        if candidate % p != 0 and accept(candidate):
            return candidate
        candidate += 1

    raise SearchExhausted(f"No primitive root mod {p} in [{start}, {candidate})")


def find_generator(p: int, factors: Iterable[int], start: int = 2, max_candidates: int | None = None) -> int:
    """Smallest ``g >= start`` passing the generic test for the factors of ``p - 1``.

    ``p`` must be prime; otherwise the scan may never stop or return a
    non-generator.
    """

    factors = list(factors)
    return _scan(p, start, lambda g: is_generator(g, p, factors), max_candidates)


def find_generator_safe_prime(p: int, r: int, start: int = 2, max_candidates: int | None = None) -> int:
    """Same contract as :func:`find_generator` for a safe prime ``p = 2r + 1``."""

    if p != 2 * r + 1:
        raise InvalidArgument(f"{p} is not 2 * {r} + 1")
    return _scan(p, start, lambda g: is_generator_safe_prime(g, p, r), max_candidates)


def timed(func: Callable[..., T], *args, **kwargs) -> tuple[T, float]:
    """Call ``func`` and return its result with the elapsed wall-clock seconds."""

    t0 = time.perf_counter()
    result = func(*args, **kwargs)
    return result, time.perf_counter() - t0
