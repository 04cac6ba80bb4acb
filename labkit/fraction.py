"""Exact rational numbers over LongInt with series-based elementary functions."""

from __future__ import annotations

from typing import Union

from labkit.longint import LongInt

Operand = Union["Fraction", LongInt, int]


def _to_longint(value: object) -> LongInt:
    if isinstance(value, LongInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return LongInt(value)
    raise TypeError(f"cannot use {type(value).__name__} as a fraction part")


def _gcd(a: LongInt, b: LongInt) -> LongInt:
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


class Fraction:
    """A rational number kept in lowest terms with a positive denominator."""

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: LongInt | int = 0, denominator: LongInt | int = 1) -> None:
        num = _to_longint(numerator)
        den = _to_longint(denominator)
        if den == 0:
            raise ZeroDivisionError("fraction with a zero denominator")
        if den < 0:
            num, den = -num, -den
        common = _gcd(num, den)
        if common != 1:
            num = num // common
            den = den // common
        self._num = num
        self._den = den

    @property
    def numerator(self) -> LongInt:
        """Numerator; carries the sign."""
        return self._num

    @property
    def denominator(self) -> LongInt:
        """Denominator; always positive."""
        return self._den

    @classmethod
    def from_string(cls, text: str) -> Fraction:
        """Parse the first whitespace-separated token of ``text`` as ``num/den``."""
        tokens = text.split()
        if not tokens:
            raise ValueError("invalid fraction format: empty input")
        token = tokens[0]
        if "/" not in token:
            raise ValueError("invalid fraction format: missing '/'")
        num_text, den_text = token.split("/", 1)
        den = LongInt.from_string(den_text, 10)
        if den == 0:
            raise ZeroDivisionError("fraction with a zero denominator")
        return cls(LongInt.from_string(num_text, 10), den)

    @staticmethod
    def _coerce(value: object) -> Fraction | None:
        if isinstance(value, Fraction):
            return value
        if isinstance(value, LongInt) or (
            isinstance(value, int) and not isinstance(value, bool)
        ):
            return Fraction(value)
        return None

    @classmethod
    def _require(cls, value: object) -> Fraction:
        result = cls._coerce(value)
        if result is None:
            raise TypeError(f"expected a Fraction, got {type(value).__name__}")
        return result

    def __add__(self, other: Operand) -> Fraction:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fraction(self._num * rhs._den + rhs._num * self._den, self._den * rhs._den)

    def __radd__(self, other: Operand) -> Fraction:
        return self.__add__(other)

    def __sub__(self, other: Operand) -> Fraction:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fraction(self._num * rhs._den - rhs._num * self._den, self._den * rhs._den)

    def __rsub__(self, other: Operand) -> Fraction:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Operand) -> Fraction:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fraction(self._num * rhs._num, self._den * rhs._den)

    def __rmul__(self, other: Operand) -> Fraction:
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> Fraction:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._num == 0:
            raise ZeroDivisionError("fraction division by zero")
        return Fraction(self._num * rhs._den, self._den * rhs._num)

    def __rtruediv__(self, other: Operand) -> Fraction:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> Fraction:
        return Fraction(-self._num, self._den)

    def __pos__(self) -> Fraction:
        return self

    def __abs__(self) -> Fraction:
        return Fraction(abs(self._num), self._den)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._num == rhs._num and self._den == rhs._den

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._num * rhs._den < rhs._num * self._den

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._num * rhs._den <= rhs._num * self._den

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._num * rhs._den > rhs._num * self._den

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._num * rhs._den >= rhs._num * self._den

    def __hash__(self) -> int:
        if self._den == 1:
            return hash(int(self._num))
        return hash((int(self._num), int(self._den)))

    def __float__(self) -> float:
        return int(self._num) / int(self._den)

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Fraction({self._num}, {self._den})"

    def power(self, exp: int) -> Fraction:
        """Raise to a non-negative integer power by repeated squaring."""
        if exp < 0:
            raise ValueError("exponent must not be negative")
        result = Fraction(1)
        base = self
        while exp > 0:
            if exp & 1:
                result *= base
            base *= base
            exp >>= 1
        return result

    def root(self, n: int, eps: Operand) -> Fraction:
        """Return the ``n``-th root by Newton's method, to within ``eps``."""
        eps = self._require(eps)
        if n <= 0:
            raise ValueError("root degree must be positive")
        if self._num == 0:
            return Fraction(0)
        if self < 0:
            raise ValueError("root of a negative number")
        y = Fraction(1)
        while True:
            new_y = (y * (n - 1) + self / y.power(n - 1)) / n
            if abs(new_y - y) <= eps:
                return new_y
            y = new_y

    def ln_small(self, eps: Operand) -> Fraction:
        """Natural logarithm by the series 2 * atanh((x - 1) / (x + 1))."""
        eps = self._require(eps)
        t = (self - 1) / (self + 1)
        t_squared = t * t
        t_pow = t
        total = t
        k = 1
        while True:
            t_pow = t_pow * t_squared
            term = t_pow / (2 * k + 1)
            total += term
            if abs(term) <= eps:
                break
            k += 1
        return total * 2

    def ln(self, eps: Operand) -> Fraction:
        """Natural logarithm; the argument is first scaled into (1, 2]."""
        eps = self._require(eps)
        if self <= 0:
            raise ValueError("ln is defined only for positive numbers")
        two = Fraction(2)
        x = self
        shift = 0
        while x > two:
            x /= two
            shift += 1
        while x <= 1:
            x *= two
            shift -= 1
        return x.ln_small(eps) + two.ln_small(eps) * shift

    def log2(self, eps: Operand) -> Fraction:
        """Base-2 logarithm."""
        eps = self._require(eps)
        return self.ln(eps) / Fraction(2).ln_small(eps)

    def log10(self, eps: Operand) -> Fraction:
        """Base-10 logarithm."""
        eps = self._require(eps)
        if self <= 0:
            raise ValueError("log10 is defined only for positive numbers")
        return self.ln(eps) / Fraction(10).ln_small(eps)

    def _alternating_series(self, first: Fraction, offset: int, eps: Fraction) -> Fraction:
        x_squared = self * self
        term = first
        total = term
        n = 0
        while True:
            divisor = (2 * n + offset) * (2 * n + offset + 1)
            term = -(term * x_squared) / divisor
            total += term
            if abs(term) <= eps:
                break
            n += 1
        return total

    def sin(self, eps: Operand) -> Fraction:
        """Sine by its Taylor series."""
        return self._alternating_series(self, 2, self._require(eps))

    def cos(self, eps: Operand) -> Fraction:
        """Cosine by its Taylor series."""
        return self._alternating_series(Fraction(1), 1, self._require(eps))

    def tg(self, eps: Operand) -> Fraction:
        """Tangent; undefined where the cosine is zero."""
        s = self.sin(eps)
        c = self.cos(eps)
        if c == 0:
            raise ValueError("tangent is undefined: cos(x) = 0")
        return s / c

    def ctg(self, eps: Operand) -> Fraction:
        """Cotangent; undefined where the sine is zero."""
        s = self.sin(eps)
        if s == 0:
            raise ValueError("cotangent is undefined: sin(x) = 0")
        return self.cos(eps) / s

    def sec(self, eps: Operand) -> Fraction:
        """Secant; undefined where the cosine is zero."""
        c = self.cos(eps)
        if c == 0:
            raise ValueError("secant is undefined: cos(x) = 0")
        return Fraction(1) / c

    def cosec(self, eps: Operand) -> Fraction:
        """Cosecant; undefined where the sine is zero."""
        s = self.sin(eps)
        if s == 0:
            raise ValueError("cosecant is undefined: sin(x) = 0")
        return Fraction(1) / s

    def arctg(self, eps: Operand) -> Fraction:
        """Arctangent by its Taylor series, for |x| <= 1."""
        eps = self._require(eps)
        if abs(self) > 1:
            raise ValueError("arctg is supported only for |x| <= 1")
        x_squared = self * self
        term = self
        total = term
        n = 0
        while True:
            term = -(term * x_squared * (2 * n + 1)) / (2 * n + 3)
            total += term
            if abs(term) <= eps:
                break
            n += 1
        return total

    def arcsin(self, eps: Operand) -> Fraction:
        """Arcsine by its Taylor series, for |x| <= 1."""
        eps = self._require(eps)
        if abs(self) > 1:
            raise ValueError("arcsin is defined only for |x| <= 1")
        x_squared = self * self
        power_term = self
        total = self
        fact_2n = LongInt(1)
        fact_n = LongInt(1)
        n = 0
        while True:
            fact_2n = fact_2n * (2 * n + 1) * (2 * n + 2)
            fact_n = fact_n * (n + 1)
            n += 1
            coefficient = Fraction(fact_2n, LongInt(4) ** n * fact_n * fact_n * (2 * n + 1)) \
                if False else Fraction(fact_2n, (LongInt(1) << (2 * n)) * fact_n * fact_n * (2 * n + 1))
            power_term = power_term * x_squared
            term = coefficient * power_term
            total += term
            if abs(term) <= eps:
                break
        return total