import io
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from labkit.complex_number import ComplexNumber, main

A = ComplexNumber(3, 4)
B = ComplexNumber(1, -2)


def test_str_format():
    assert str(A) == "(3+4i)"
    assert str(B) == "(1-2i)"


def test_sample_arithmetic():
    assert str(A + B) == "(4+2i)"
    assert str(A - B) == "(2+6i)"
    assert str(A * B) == "(11-2i)"
    assert str(A / B) == "(-1+2i)"


def test_abs():
    assert A.abs() == pytest.approx(5.0)
    assert abs(A) == A.abs()


def test_arg_of_axes():
    assert ComplexNumber(0, 1).arg() == pytest.approx(math.pi / 2)
    assert ComplexNumber(-1, 0).arg() == pytest.approx(math.pi)


def test_arg_of_zero_rejected():
    with pytest.raises(ValueError):
        ComplexNumber().arg()


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        A / ComplexNumber(0, 0)


def test_unary_operators():
    assert -A == ComplexNumber(-3, -4)
    assert +A == A


def test_mixed_with_real_numbers():
    assert A + 1 == ComplexNumber(4, 4)
    assert 2 * A == ComplexNumber(6, 8)
    assert 1 - A == ComplexNumber(-2, -4)


def test_parse_with_spaces_and_signs():
    assert ComplexNumber.parse(" ( 1 - 2 i ) ") == ComplexNumber(1, -2)
    assert ComplexNumber.parse("(1--2i)") == ComplexNumber(1, 2)
    assert ComplexNumber.parse("(-1.5+2.5i)") == ComplexNumber(-1.5, 2.5)


@pytest.mark.parametrize("text", ["1+2i", "(1+2)", "(1*2i)", "(a+bi)", "(1+2i"])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        ComplexNumber.parse(text)


ints = st.integers(min_value=-99999, max_value=99999)


@given(ints, ints)
def test_str_parse_round_trip(re_part, im_part):
    number = ComplexNumber(re_part, im_part)
    assert ComplexNumber.parse(str(number)) == number


@given(ints, ints, ints, ints)
def test_multiply_then_divide(ar, ai, br, bi):
    a = ComplexNumber(ar, ai)
    b = ComplexNumber(br, bi)
    if br == 0 and bi == 0:
        with pytest.raises(ZeroDivisionError):
            a / b
    else:
        back = (a * b) / b
        assert back.real == pytest.approx(a.real, abs=1e-6)
        assert back.imag == pytest.approx(a.imag, abs=1e-6)


@given(ints, ints)
def test_add_negation_gives_zero(re_part, im_part):
    number = ComplexNumber(re_part, im_part)
    assert number + (-number) == ComplexNumber(0, 0)


def test_main_echoes_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(1+2i)\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "a + b = (4+2i)" in out
    assert "a * b = (11-2i)" in out
    assert "|a| = 5" in out
    assert "You entered: (1+2i)" in out


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("garbage\n"))
    assert main([]) == 1
    assert "Error" in capsys.readouterr().err