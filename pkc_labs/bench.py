"""Time the generic and the safe-prime primitive-root strategies side by side.

The generic strategy pays for trial-division factoring of ``p - 1`` on every
run; the safe-prime strategy already knows the factors. Keep ``--digits``
small: factoring cost grows with the square root of ``r``.
"""

from __future__ import annotations

import argparse
import random
from typing import Callable, Iterable, Optional, Sequence

import numpy as np

from .constants import BENCH_DIGITS, BENCH_REPEATS, GEN_START_MIN, PRP_REPS
from .dataclass import SafePrime, TimingSummary
from .errors import InvalidArgument, PKCError
from .factor import distinct_prime_factors
from .generator import find_generator, find_generator_safe_prime, timed
from .primes import generate_safe_prime, safe_prime_from


def summarize(label: str, samples: Sequence[float]) -> TimingSummary:
    if len(samples) == 0:
        raise InvalidArgument("Need at least one timing sample")
    data = np.asarray(samples, dtype=np.float64)
    return TimingSummary(
        label=label,
        runs=int(data.size),
        mean=float(np.mean(data)),
        median=float(np.median(data)),
        stdev=float(np.std(data)),
        best=float(np.min(data)),
    )


def _generic(safe: SafePrime, start: int) -> int:
    return find_generator(safe.p, distinct_prime_factors(safe.p - 1), start=start)


def _safe(safe: SafePrime, start: int) -> int:
    return find_generator_safe_prime(safe.p, safe.r, start=start)


STRATEGIES: dict[str, Callable[[SafePrime, int], int]] = {
    "generic (factor p-1)": _generic,
    "safe prime {2, r}": _safe,
}


def compare_strategies(safe: SafePrime, start: int, repeats: int) -> list[tuple[TimingSummary, int]]:
    """Run every strategy ``repeats`` times; return its summary and generator."""

    if repeats < 1:
        raise InvalidArgument(f"repeats must be positive, got {repeats}")

    results = []
    for label, strategy in STRATEGIES.items():
        samples = []
        alpha = None
        for _ in range(repeats):
            alpha, seconds = timed(strategy, safe, start)
            samples.append(seconds)
        results.append((summarize(label, samples), alpha))
    return results


def format_summary(summary: TimingSummary) -> str:
    return (
        f"{summary.label:<22} runs={summary.runs} mean={summary.mean:.6f}s "
        f"median={summary.median:.6f}s stdev={summary.stdev:.6f}s best={summary.best:.6f}s"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare primitive-root search strategies.")
    parser.add_argument(
        "--digits",
        type=int,
        default=BENCH_DIGITS,
        help=f"Decimal digits of the generated safe prime (default: {BENCH_DIGITS}).",
    )
    parser.add_argument("--prime", type=int, help="Benchmark this safe prime instead of generating one.")
    parser.add_argument(
        "--start",
        type=int,
        default=GEN_START_MIN,
        help=f"Smallest generator candidate (default: {GEN_START_MIN}).",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=BENCH_REPEATS,
        help=f"Runs per strategy (default: {BENCH_REPEATS}).",
    )
    parser.add_argument("--seed", type=int, help="Seed for prime sampling.")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    rng = random.Random(args.seed)
    try:
        if args.prime is None:
            safe = generate_safe_prime(args.digits, min_bits=1, rounds=PRP_REPS, rng=rng)
        else:
            safe = safe_prime_from(args.prime, rng=rng)
        results = compare_strategies(safe, args.start, args.repeats)
    except PKCError as exc:
        raise SystemExit(f"{type(exc).__name__}: {exc}") from exc

    print(f"P ({safe.digits} digits) = {safe.p}")
    print(f"r                = {safe.r}")
    for summary, alpha in results:
        print(f"{format_summary(summary)} alpha={alpha}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
