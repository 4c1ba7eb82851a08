class PKCError(Exception):
    """Base class for failures raised by the number-theory engine."""


class InvalidArgument(PKCError, ValueError):
    pass


class NoInverseExists(PKCError, ValueError):
    pass


class NotPrime(PKCError, ValueError):
    pass


class SearchExhausted(PKCError, RuntimeError):
    """An opt-in iteration cap ran out before the search succeeded."""
