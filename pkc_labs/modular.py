from .errors import InvalidArgument, NoInverseExists


def modpow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by square-and-multiply."""

    if modulus <= 0:
        raise InvalidArgument(f"Modulus must be positive, got {modulus}")
    if exponent < 0:
        raise InvalidArgument(f"Exponent must be non-negative, got {exponent}")

    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a * x + b * y == g == gcd(a, b)``."""

    if a < 0 or b < 0:
        raise InvalidArgument("extended_gcd expects non-negative integers")

    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def gcd(a: int, b: int) -> int:
    return extended_gcd(a, b)[0]


def decimal_digits(n: int) -> int:
    return len(str(abs(n)))


def _inverse_euclid(e: int, modulus: int) -> int:
    g, x, _ = extended_gcd(e, modulus)
    if g != 1:
        raise NoInverseExists(f"{e} has no inverse modulo {modulus} (gcd = {g})")
    return x % modulus


def _inverse_scan(e: int, modulus: int) -> int:
    # O(modulus): only sensible for toy RSA moduli
    for d in range(1, modulus):
        if (e * d) % modulus == 1:
            return d
    raise NoInverseExists(f"{e} has no inverse modulo {modulus} (gcd = {gcd(e, modulus)})")


_INVERSE_METHODS = {
    "euclid": _inverse_euclid,
    "scan": _inverse_scan,
}


def mod_inverse(e: int, modulus: int, method: str = "euclid") -> int:
    """Return ``d`` with ``0 < d < modulus`` and ``e * d % modulus == 1``.

    ``method`` selects the extended Euclidean algorithm (``"euclid"``) or the
    brute-force scan over every residue (``"scan"``). Both return the same
    value; the scan exists for the small RSA walkthrough.
    """

    if modulus <= 1:
        raise InvalidArgument(f"Modulus must be greater than 1, got {modulus}")
    try:
        inverse = _INVERSE_METHODS[method]
    except KeyError as exc:
        raise InvalidArgument(f"Unknown inverse method {method!r}") from exc
    return inverse(e % modulus, modulus)
