"""Textbook RSA and Diffie-Hellman demos over a small number-theory engine."""

from .errors import InvalidArgument, NoInverseExists, NotPrime, PKCError, SearchExhausted
from .factor import distinct_prime_factors
from .generator import find_generator, find_generator_safe_prime, is_generator, is_generator_safe_prime
from .modular import extended_gcd, mod_inverse, modpow
from .primes import generate_safe_prime, is_probable_prime, safe_prime_from

__all__ = [
    "InvalidArgument",
    "NoInverseExists",
    "NotPrime",
    "PKCError",
    "SearchExhausted",
    "distinct_prime_factors",
    "extended_gcd",
    "find_generator",
    "find_generator_safe_prime",
    "generate_safe_prime",
    "is_generator",
    "is_generator_safe_prime",
    "is_probable_prime",
    "mod_inverse",
    "modpow",
    "safe_prime_from",
]
