"""Complex numbers with arithmetic, modulus, argument and text parsing."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from typing import Union

_EPSILON = 1e-10

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_PATTERN = re.compile(
    rf"\s*\(\s*({_NUMBER})\s*([+-])\s*({_NUMBER})\s*i\s*\)\s*"
)

Operand = Union["ComplexNumber", int, float]


@dataclass(frozen=True)
class ComplexNumber:
    """A complex number with a real and an imaginary part."""

    real: float = 0.0
    imag: float = 0.0

    @staticmethod
    def _coerce(value: object) -> ComplexNumber | None:
        if isinstance(value, ComplexNumber):
            return value
        if isinstance(value, (int, float)):
            return ComplexNumber(float(value), 0.0)
        return None

    def __add__(self, other: Operand) -> ComplexNumber:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ComplexNumber(self.real + rhs.real, self.imag + rhs.imag)

    def __radd__(self, other: Operand) -> ComplexNumber:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: Operand) -> ComplexNumber:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ComplexNumber(self.real - rhs.real, self.imag - rhs.imag)

    def __rsub__(self, other: Operand) -> ComplexNumber:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Operand) -> ComplexNumber:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ComplexNumber(
            self.real * rhs.real - self.imag * rhs.imag,
            self.real * rhs.imag + self.imag * rhs.real,
        )

    def __rmul__(self, other: Operand) -> ComplexNumber:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: Operand) -> ComplexNumber:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        denominator = rhs.real * rhs.real + rhs.imag * rhs.imag
        if abs(denominator) < _EPSILON:
            raise ZeroDivisionError("division by zero")
        return ComplexNumber(
            (self.real * rhs.real + self.imag * rhs.imag) / denominator,
            (self.imag * rhs.real - self.real * rhs.imag) / denominator,
        )

    def __rtruediv__(self, other: Operand) -> ComplexNumber:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> ComplexNumber:
        return ComplexNumber(-self.real, -self.imag)

    def __pos__(self) -> ComplexNumber:
        return self

    def abs(self) -> float:
        """Return the modulus."""
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    def __abs__(self) -> float:
        return self.abs()

    def arg(self) -> float:
        """Return the argument in radians; undefined for zero."""
        if abs(self.real) < _EPSILON and abs(self.imag) < _EPSILON:
            raise ValueError("the argument of zero is undefined")
        return math.atan2(self.imag, self.real)

    def __str__(self) -> str:
        sign = "+" if self.imag >= 0 else ""
        return f"({self.real:g}{sign}{self.imag:g}i)"

    @classmethod
    def parse(cls, text: str) -> ComplexNumber:
        """Parse text of the form ``(re+imi)`` or ``(re-imi)``."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not a complex number: {text!r}")
        real_text, sign, imag_text = match.groups()
        imag = float(imag_text)
        if sign == "-":
            imag = -imag
        return cls(float(real_text), imag)


def main(argv: list[str] | None = None) -> int:
    """Show the arithmetic on two sample numbers, then echo one read from stdin."""
    a = ComplexNumber(3, 4)
    b = ComplexNumber(1, -2)

    print(f"a = {a}")
    print(f"b = {b}\n")
    print(f"a + b = {a + b}")
    print(f"a - b = {a - b}")
    print(f"a * b = {a * b}")
    print(f"a / b = {a / b}")
    print(f"|a| = {a.abs():g}")
    print(f"arg(a) = {a.arg():g} rad")

    print("Enter a complex number as (re+imi): ", end="", flush=True)
    line = sys.stdin.readline()
    try:
        entered = ComplexNumber.parse(line)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"You entered: {entered}")
    return 0


if __name__ == "__main__":
    sys.exit(main())