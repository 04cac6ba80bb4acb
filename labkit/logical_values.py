"""A 32-bit vector of logical values with bitwise logic operations."""

from __future__ import annotations

from dataclasses import dataclass

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


@dataclass(frozen=True)
class LogicalValuesArray:
    """Thirty-two logical values packed into an unsigned integer."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value & _MASK)

    def inversion(self) -> LogicalValuesArray:
        """Bitwise negation."""
        return LogicalValuesArray(~self.value)

    def conjunction(self, other: LogicalValuesArray) -> LogicalValuesArray:
        """Bitwise AND."""
        return LogicalValuesArray(self.value & other.value)

    def disjunction(self, other: LogicalValuesArray) -> LogicalValuesArray:
        """Bitwise OR."""
        return LogicalValuesArray(self.value | other.value)

    def implication(self, other: LogicalValuesArray) -> LogicalValuesArray:
        """Bitwise implication: NOT self OR other."""
        return self.inversion().disjunction(other)

    def coimplication(self, other: LogicalValuesArray) -> LogicalValuesArray:
        """Bitwise converse implication: self OR NOT other."""
        return self.disjunction(other.inversion())

    def xor(self, other: LogicalValuesArray) -> LogicalValuesArray:
        """Bitwise exclusive OR."""
        return LogicalValuesArray(self.value ^ other.value)

    def equivalence(self, other: LogicalValuesArray) -> LogicalValuesArray:
        """Bitwise equivalence: both set or both clear."""
        both = self.conjunction(other)
        neither = self.inversion().conjunction(other.inversion())
        return both.disjunction(neither)

    def pierce_arrow(self) -> LogicalValuesArray:
        """NOR of this vector with an all-zero vector."""
        return self.disjunction(LogicalValuesArray()).inversion()

    def sheffer_stroke(self) -> LogicalValuesArray:
        """NAND of this vector with an all-zero vector."""
        return self.conjunction(LogicalValuesArray()).inversion()

    @staticmethod
    def equals(a: LogicalValuesArray, b: LogicalValuesArray) -> bool:
        """Return whether two vectors hold the same bits."""
        return a.value == b.value

    def get_bit(self, pos: int) -> bool:
        """Return the bit at position ``pos``, counting from the least significant."""
        if pos < 0:
            raise IndexError("bit position must not be negative")
        return bool((self.value >> pos) & 1)

    def __getitem__(self, pos: int) -> bool:
        return self.get_bit(pos)

    def to_binary_string(self) -> str:
        """Return all 32 bits, most significant first."""
        return format(self.value, f"0{_WIDTH}b")