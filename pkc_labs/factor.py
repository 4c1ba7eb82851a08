from .constants import FactorSet
from .errors import InvalidArgument


def distinct_prime_factors(n: int) -> FactorSet:
    """Distinct prime factors of ``n`` in ascending order, by trial division.

    Multiplicities are not tracked: each prime is divided out completely as
    soon as it is found. The loop stops once ``i * i`` exceeds what is left,
    and a leftover greater than one is itself prime. Fine for demo-sized
    numbers, hopeless for a ``p - 1`` with two large prime factors.
    """

    if n < 1:
        raise InvalidArgument(f"Cannot factor {n}: expected a positive integer")

    factors: FactorSet = []
    if n % 2 == 0:
        factors.append(2)
        while n % 2 == 0:
            n //= 2

    i = 3
    while i * i <= n:
        if n % i == 0:
            factors.append(i)
            while n % i == 0:
                n //= i
        i += 2

    if n > 1:
        factors.append(n)
    return factors
