import math
from fractions import Fraction as StdFraction

import pytest
from hypothesis import given, strategies as st

from labkit.fraction import Fraction
from labkit.longint import LongInt

EPS = Fraction(1, 10**9)

ints = st.integers(min_value=-10**6, max_value=10**6)
nonzero = ints.filter(lambda v: v != 0)


def _std(f: Fraction) -> StdFraction:
    return StdFraction(int(f.numerator), int(f.denominator))


def test_str_format():
    assert str(Fraction(3, 4)) == "3/4"
    assert str(Fraction(3, -4)) == "-3/4"
    assert str(Fraction()) == "0/1"


@given(ints, nonzero)
def test_reduced_like_stdlib(n, d):
    f = Fraction(n, d)
    s = StdFraction(n, d)
    assert int(f.numerator) == s.numerator
    assert int(f.denominator) == s.denominator
    assert str(f) == f"{s.numerator}/{s.denominator}"


def test_longint_parts():
    assert Fraction(LongInt(6), LongInt(-9)) == Fraction(-6, 9)


@given(ints, nonzero, ints, nonzero)
def test_arithmetic_matches_stdlib(a, b, c, d):
    x, y = Fraction(a, b), Fraction(c, d)
    sx, sy = StdFraction(a, b), StdFraction(c, d)
    assert _std(x + y) == sx + sy
    assert _std(x - y) == sx - sy
    assert _std(x * y) == sx * sy
    if c != 0:
        assert _std(x / y) == sx / sy


@given(ints, nonzero, ints, nonzero)
def test_ordering_matches_stdlib(a, b, c, d):
    x, y = Fraction(a, b), Fraction(c, d)
    sx, sy = StdFraction(a, b), StdFraction(c, d)
    assert (x < y) == (sx < sy)
    assert (x <= y) == (sx <= sy)
    assert (x > y) == (sx > sy)
    assert (x >= y) == (sx >= sy)
    assert (x == y) == (sx == sy)


@given(ints, nonzero)
def test_hash_consistent_with_equality(n, d):
    assert hash(Fraction(n, d)) == hash(Fraction(n * 3, d * 3))


@given(ints, nonzero)
def test_from_string_round_trip(n, d):
    f = Fraction(n, d)
    assert Fraction.from_string(str(f)) == f


def test_from_string_errors():
    with pytest.raises(ValueError):
        Fraction.from_string("12")
    with pytest.raises(ValueError):
        Fraction.from_string("   ")
    with pytest.raises(ZeroDivisionError):
        Fraction.from_string("1/0")


def test_zero_denominator_and_division():
    with pytest.raises(ZeroDivisionError):
        Fraction(1, 0)
    with pytest.raises(ZeroDivisionError):
        Fraction(1, 2) / Fraction(0)


@given(ints, nonzero, st.integers(min_value=0, max_value=6))
def test_power(n, d, exp):
    assert _std(Fraction(n, d).power(exp)) == StdFraction(n, d) ** exp


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        Fraction(2).power(-1)


@pytest.mark.parametrize("value,n", [(2, 2), (27, 3), (5, 4)])
def test_root(value, n):
    r = Fraction(value).root(n, EPS)
    assert abs(float(r) - value ** (1 / n)) < 1e-8


def test_root_special_cases():
    assert Fraction(0).root(3, EPS) == Fraction(0)
    with pytest.raises(ValueError):
        Fraction(2).root(0, EPS)
    with pytest.raises(ValueError):
        Fraction(-4).root(2, EPS)


@pytest.mark.parametrize("num,den", [(1, 1), (1, 3), (2, 1), (10, 1), (7, 2)])
def test_ln(num, den):
    result = Fraction(num, den).ln(EPS)
    assert abs(float(result) - math.log(num / den)) < 1e-7


def test_ln_one_is_zero():
    assert Fraction(1).ln(EPS) == Fraction(0)


def test_log2_and_log10():
    eps = Fraction(1, 10**7)
    assert abs(float(Fraction(8).log2(eps)) - 3.0) < 1e-5
    assert abs(float(Fraction(100).log10(eps)) - 2.0) < 1e-5


def test_log_domain_errors():
    with pytest.raises(ValueError):
        Fraction(0).ln(EPS)
    with pytest.raises(ValueError):
        Fraction(-1).log10(EPS)
    with pytest.raises(ValueError):
        Fraction(-3).log2(EPS)


@pytest.mark.parametrize("num,den", [(1, 2), (-1, 3), (1, 1), (3, 2)])
def test_sin_cos(num, den):
    x = Fraction(num, den)
    assert abs(float(x.sin(EPS)) - math.sin(num / den)) < 1e-8
    assert abs(float(x.cos(EPS)) - math.cos(num / den)) < 1e-8
    identity = x.sin(EPS) ** 1 * x.sin(EPS) + x.cos(EPS) * x.cos(EPS) if False else (
        x.sin(EPS) * x.sin(EPS) + x.cos(EPS) * x.cos(EPS)
    )
    assert abs(float(identity) - 1.0) < 1e-8


def test_derived_trig():
    x = Fraction(1, 2)
    assert abs(float(x.tg(EPS)) - math.tan(0.5)) < 1e-8
    assert abs(float(x.ctg(EPS)) - 1 / math.tan(0.5)) < 1e-8
    assert abs(float(x.sec(EPS)) - 1 / math.cos(0.5)) < 1e-8
    assert abs(float(x.cosec(EPS)) - 1 / math.sin(0.5)) < 1e-8


def test_trig_at_zero():
    zero = Fraction(0)
    assert zero.sin(EPS) == zero
    assert zero.tg(EPS) == zero
    with pytest.raises(ValueError):
        zero.ctg(EPS)
    with pytest.raises(ValueError):
        zero.cosec(EPS)


@pytest.mark.parametrize("num,den", [(1, 2), (-1, 3), (0, 1)])
def test_arctg(num, den):
    result = Fraction(num, den).arctg(EPS)
    assert abs(float(result) - math.atan(num / den)) < 1e-8


@pytest.mark.parametrize("num,den", [(1, 2), (-1, 3), (0, 1)])
def test_arcsin(num, den):
    result = Fraction(num, den).arcsin(EPS)
    assert abs(float(result) - math.asin(num / den)) < 1e-8


def test_inverse_trig_domain():
    with pytest.raises(ValueError):
        Fraction(2).arctg(EPS)
    with pytest.raises(ValueError):
        Fraction(-3, 2).arcsin(EPS)