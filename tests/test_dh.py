import random

import pytest
from sympy import isprime, n_order, primitive_root

from pkc_labs import dh, dh_safe
from pkc_labs.constants import DH_PRIME, DH_THRESHOLD
from pkc_labs.dataclass import ExchangeConfig
from pkc_labs.errors import InvalidArgument, NotPrime
from pkc_labs.factor import distinct_prime_factors
from pkc_labs.generator import is_generator
from pkc_labs.primes import is_probable_prime


def test_small_prime_exchange():
    result = dh.exchange(23, 5, 6, 15)
    assert result.ya == 8
    assert result.yb == 19
    assert result.sa == result.sb == 2
    assert result.keys_match


def test_exchange_rejects_non_positive_secret():
    with pytest.raises(InvalidArgument):
        dh.exchange(23, 5, 0, 15)


def test_generic_run_finds_smallest_root():
    result = dh.run_generic(23, ExchangeConfig(private_a=6, private_b=15, generator_floor=2, seed=0))
    assert result.alpha == 5
    assert (result.ya, result.yb) == (8, 19)
    assert result.keys_match
    assert result.seconds >= 0.0


def test_generic_run_respects_threshold():
    result = dh.run_generic(1019, ExchangeConfig(generator_floor=16, seed=0))
    assert result.alpha >= 16
    assert n_order(result.alpha, 1019) == 1018
    assert all(n_order(g, 1019) != 1018 for g in range(16, result.alpha))
    assert result.keys_match


def test_generic_run_rejects_composite_modulus():
    with pytest.raises(NotPrime):
        dh.run_generic(21, ExchangeConfig(generator_floor=2, seed=0))


def test_generic_cli(capsys):
    assert dh.main(["--prime", "23", "--threshold", "1", "--xa", "6", "--xb", "15", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "P (prime)  = 23" in out
    assert "alpha (g)  = 5" in out
    assert "YA         = 8" in out
    assert "YB         = 19" in out
    assert "Primitive root search time:" in out
    assert "Keys match? YES" in out


def test_generic_cli_reports_failure_kind(capsys):
    with pytest.raises(SystemExit) as excinfo:
        dh.main(["--prime", "25", "--seed", "1"])
    assert str(excinfo.value.code).startswith("NotPrime")
    assert capsys.readouterr().out == ""


def test_safe_run_generates_safe_prime():
    config = ExchangeConfig(min_digits=12, min_bits=8, seed=3)
    safe, result = dh_safe.run_safe(config)

    assert safe.p == 2 * safe.r + 1
    assert safe.digits >= 12
    assert isprime(safe.p) and isprime(safe.r)
    assert result.p == safe.p
    assert result.alpha >= 100
    assert is_generator(result.alpha, safe.p, [2, safe.r])
    assert n_order(result.alpha, safe.p) == safe.p - 1
    assert (result.xa, result.xb) == (51015, 51016)
    assert result.keys_match


def test_safe_run_is_reproducible_with_seed():
    config = ExchangeConfig(min_digits=12, min_bits=8, seed=42)
    first, _ = dh_safe.run_safe(config)
    second, _ = dh_safe.run_safe(config)
    assert first == second


def test_safe_run_with_given_prime():
    config = ExchangeConfig(generator_floor=2, private_a=6, private_b=15, seed=0)
    safe, result = dh_safe.run_safe(config, prime=23)
    assert safe.r == 11
    assert result.alpha == 5
    assert result.sa == result.sb == 2


def test_safe_run_rejects_unsafe_prime():
    with pytest.raises(NotPrime):
        dh_safe.run_safe(ExchangeConfig(seed=0), prime=1013)


def test_safe_cli_generates(capsys):
    assert dh_safe.main(["--digits", "12", "--bits", "8", "--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert "P (prime, " in out
    assert "r ((P-1)/2, prime)" in out
    assert "Keys match? YES" in out


def test_safe_cli_with_prime(capsys):
    assert dh_safe.main(["--prime", "1019", "--start", "2", "--seed", "0"]) == 0
    out = capsys.readouterr().out
    assert "P (prime, 4 digits) = 1019" in out
    assert "r ((P-1)/2, prime)   = 509" in out
    assert f"alpha (generator)    = {primitive_root(1019)}" in out


def test_safe_cli_reports_failure_kind(capsys):
    with pytest.raises(SystemExit) as excinfo:
        dh_safe.main(["--prime", "1013", "--seed", "0"])
    assert str(excinfo.value.code).startswith("NotPrime")
    assert capsys.readouterr().out == ""


def test_safe_cli_attempt_cap(monkeypatch):
    monkeypatch.setattr("pkc_labs.primes.is_probable_prime", lambda n, rounds, rng: False)
    with pytest.raises(SystemExit) as excinfo:
        dh_safe.main(["--digits", "12", "--bits", "8", "--max-attempts", "2", "--seed", "0"])
    assert str(excinfo.value.code).startswith("SearchExhausted")


def test_default_config_matches_reference_values():
    config = ExchangeConfig()
    assert config.min_digits == 51
    assert config.min_bits == 130
    assert config.generator_floor == 100
    assert config.rounds == 30
    assert config.max_candidates is None and config.max_attempts is None


def test_default_prime_is_prime_with_smooth_order():
    assert is_probable_prime(DH_PRIME, rounds=30, rng=random.Random(0))
    assert len(str(DH_PRIME)) == 30
    factors = distinct_prime_factors(DH_PRIME - 1)
    assert all(q < 10**4 for q in factors)


def test_generic_run_with_defaults():
    result = dh.run_generic(DH_PRIME, ExchangeConfig(generator_floor=DH_THRESHOLD + 1, seed=1))
    assert result.alpha > DH_THRESHOLD
    assert n_order(result.alpha, DH_PRIME) == DH_PRIME - 1
    assert result.keys_match


def test_generic_cli_defaults(capsys):
    assert dh.main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert f"P (prime)  = {DH_PRIME}" in out
    assert "Keys match? YES" in out
