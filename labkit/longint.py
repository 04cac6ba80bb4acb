"""Arbitrary-precision signed integers stored as sign and magnitude."""

from __future__ import annotations

from typing import Union

_LIMB_BITS = 32
_LIMB_MASK = (1 << _LIMB_BITS) - 1

Operand = Union["LongInt", int]


def _limb_count(magnitude: int) -> int:
    """Number of 32-bit limbs holding ``magnitude``; zero takes one limb."""
    return max(1, -(-magnitude.bit_length() // _LIMB_BITS))


def _char_value(char: str) -> int:
    """Value of a digit character; characters that are not digits count as 0."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    return 0


class LongInt:
    """A signed integer of unbounded size.

    Arithmetic and comparison behave as for ordinary integers, with division
    truncating toward zero.  Bitwise operations act on the magnitude, split
    into 32-bit limbs, and extend a negative operand with all-ones limbs.
    """

    __slots__ = ("_sign", "_magnitude")

    def __init__(self, value: Operand = 0) -> None:
        if isinstance(value, LongInt):
            self._sign = value._sign
            self._magnitude = value._magnitude
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot make a LongInt from {type(value).__name__}")
        self._sign = -1 if value < 0 else 1
        self._magnitude = abs(value)

    @classmethod
    def _from_parts(cls, sign: int, magnitude: int) -> LongInt:
        result = cls.__new__(cls)
        result._sign = -1 if sign < 0 and magnitude else 1
        result._magnitude = magnitude
        return result

    @classmethod
    def from_string(cls, text: str, base: int = 10) -> LongInt:
        """Parse ``text`` in ``base``; a leading ``-`` makes it negative.

        Digits may be ``0-9``, ``A-F`` or ``a-f``; any other character
        counts as the digit 0.
        """
        negative = text.startswith("-")
        if negative:
            text = text[1:]
        magnitude = 0
        for char in text:
            magnitude = magnitude * base + _char_value(char)
        return cls._from_parts(-1 if negative else 1, magnitude)

    @staticmethod
    def _coerce(value: object) -> LongInt | None:
        if isinstance(value, LongInt):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return LongInt(value)
        return None

    @property
    def _value(self) -> int:
        return self._sign * self._magnitude

    def __add__(self, other: Operand) -> LongInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return LongInt(self._value + rhs._value)

    def __radd__(self, other: Operand) -> LongInt:
        return self.__add__(other)

    def __sub__(self, other: Operand) -> LongInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return LongInt(self._value - rhs._value)

    def __rsub__(self, other: Operand) -> LongInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Operand) -> LongInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_parts(
            self._sign * rhs._sign, self._magnitude * rhs._magnitude
        )

    def __rmul__(self, other: Operand) -> LongInt:
        return self.__mul__(other)

    def __divmod__(self, other: Operand) -> tuple[LongInt, LongInt]:
        """Quotient truncated toward zero and remainder with the dividend's sign."""
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._magnitude == 0:
            raise ZeroDivisionError("LongInt division by zero")
        quotient, remainder = divmod(self._magnitude, rhs._magnitude)
        return (
            self._from_parts(self._sign * rhs._sign, quotient),
            self._from_parts(self._sign, remainder),
        )

    def __floordiv__(self, other: Operand) -> LongInt:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: Operand) -> LongInt:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __neg__(self) -> LongInt:
        return self._from_parts(-self._sign, self._magnitude)

    def __pos__(self) -> LongInt:
        return self

    def __abs__(self) -> LongInt:
        return self._from_parts(1, self._magnitude)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs._value

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs._value

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value <= rhs._value

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value > rhs._value

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value >= rhs._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._magnitude != 0

    def __invert__(self) -> LongInt:
        """Flip every bit of the magnitude's limbs, keeping the sign."""
        width = _limb_count(self._magnitude) * _LIMB_BITS
        flipped = self._magnitude ^ ((1 << width) - 1)
        return self._from_parts(self._sign, flipped)

    def _extended(self, limbs: int) -> int:
        """Magnitude widened to ``limbs`` limbs, negative values padded with ones."""
        own = _limb_count(self._magnitude)
        if self._sign > 0 or limbs <= own:
            return self._magnitude
        padding = ((1 << (limbs * _LIMB_BITS)) - 1) ^ ((1 << (own * _LIMB_BITS)) - 1)
        return self._magnitude | padding

    def _bitwise(self, other: object, combine) -> LongInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        limbs = max(_limb_count(self._magnitude), _limb_count(rhs._magnitude))
        return self._from_parts(1, combine(self._extended(limbs), rhs._extended(limbs)))

    def __and__(self, other: Operand) -> LongInt:
        return self._bitwise(other, lambda a, b: a & b)

    def __rand__(self, other: Operand) -> LongInt:
        return self.__and__(other)

    def __or__(self, other: Operand) -> LongInt:
        return self._bitwise(other, lambda a, b: a | b)

    def __ror__(self, other: Operand) -> LongInt:
        return self.__or__(other)

    def __xor__(self, other: Operand) -> LongInt:
        return self._bitwise(other, lambda a, b: a ^ b)

    def __rxor__(self, other: Operand) -> LongInt:
        return self.__xor__(other)

    def __lshift__(self, shift: int) -> LongInt:
        """Shift the magnitude left, keeping the sign."""
        if shift < 0:
            raise ValueError("negative shift count")
        return self._from_parts(self._sign, self._magnitude << shift)

    def __rshift__(self, shift: int) -> LongInt:
        """Shift the magnitude right, keeping the sign."""
        if shift < 0:
            raise ValueError("negative shift count")
        return self._from_parts(self._sign, self._magnitude >> shift)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"LongInt({self._value})"