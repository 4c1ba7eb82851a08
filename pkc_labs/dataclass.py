from dataclasses import dataclass

from .constants import GEN_START_MIN, PRIVATE_A, PRIVATE_B, PRP_REPS, SAFE_BITS_MIN, SAFE_DIGITS_MIN
from .modular import decimal_digits


@dataclass(frozen=True)
class KeyPair:
    n: int
    e: int
    d: int
    totient: int

    @property
    def public_key(self) -> tuple[int, int]:
        return self.e, self.n

    @property
    def private_key(self) -> tuple[int, int]:
        return self.d, self.n


@dataclass(frozen=True)
class SafePrime:
    p: int
    r: int

    @property
    def digits(self) -> int:
        return decimal_digits(self.p)

    @property
    def bits(self) -> int:
        return self.p.bit_length()


@dataclass
class ExchangeConfig:
    min_digits: int = SAFE_DIGITS_MIN
    min_bits: int = SAFE_BITS_MIN
    private_a: int = PRIVATE_A
    private_b: int = PRIVATE_B
    generator_floor: int = GEN_START_MIN
    rounds: int = PRP_REPS
    max_candidates: int | None = None
    max_attempts: int | None = None
    seed: int | None = None


@dataclass(frozen=True)
class Exchange:
    p: int
    alpha: int
    xa: int
    xb: int
    ya: int
    yb: int
    sa: int
    sb: int
    seconds: float = 0.0

    @property
    def keys_match(self) -> bool:
        return self.sa == self.sb


@dataclass(frozen=True)
class TimingSummary:
    label: str
    runs: int
    mean: float
    median: float
    stdev: float
    best: float
