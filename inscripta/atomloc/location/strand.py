from enum import Enum
from typing import Union

from inscripta.atomloc.exc import InvalidStrandError


class Strand(int, Enum):
    PLUS = 1
    MINUS = -1
    UNSTRANDED = 0

    def __str__(self):
        return str(self.to_symbol())

    @staticmethod
    def from_symbol(value: str):
        """Converts string representation of a strand to a Strand"""
        if value == "+":
            return Strand.PLUS
        if value == "-":
            return Strand.MINUS
        if value == ".":
            return Strand.UNSTRANDED
        raise ValueError("{} is not a valid string representation of a strand".format(value))

    def to_symbol(self) -> str:
        if self == Strand.PLUS:
            return "+"
        if self == Strand.MINUS:
            return "-"
        return "."

    @staticmethod
    def from_int(value: int):
        """Converts integer representation of a strand to a Strand"""
        return Strand(value)  # Raises ValueError for invalid int

    @staticmethod
    def coerce(value) -> "Strand":
        """Converts any accepted strand input (a Strand, -1/0/1, or one of ``+``, ``-``, ``.``) to a Strand.

        Raises InvalidStrandError for everything else, including None and booleans.
        """
        if isinstance(value, Strand):
            return value
        if value is None or isinstance(value, bool):
            raise InvalidStrandError(value)
        try:
            if isinstance(value, str):
                return Strand.from_symbol(value)
            return Strand.from_int(value)
        except (ValueError, TypeError):
            raise InvalidStrandError(value) from None

    def reverse(self):
        """Returns the opposite of this Strand"""
        if self == Strand.PLUS:
            return Strand.MINUS
        if self == Strand.MINUS:
            return Strand.PLUS
        return Strand.UNSTRANDED

    def relative_to(self, other: "Strand") -> "Strand":
        """Returns the orientation of this strand relative to the given other strand.
        Note: this operator is commutative.
        """
        return Strand(self.value * Strand.coerce(other).value)

    def assert_directional(self):
        """Raises InvalidStrandError if this Strand does not have a defined direction (plus or minus)"""
        if self not in [Strand.PLUS, Strand.MINUS]:
            raise InvalidStrandError(self, "Strand {} does not have a defined direction".format(str(self)))


StrandInputType = Union[Strand, int, str]
