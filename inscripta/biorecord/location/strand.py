from enum import Enum


class Strand(Enum):
    """Strand an interval reads on. The value is the sign carried by a resolved interval's frame."""

    PLUS = 1
    MINUS = -1

    def __str__(self):
        return self.to_symbol()

    @staticmethod
    def from_complement(complement: bool) -> "Strand":
        return Strand.MINUS if complement else Strand.PLUS

    def to_symbol(self) -> str:
        return "+" if self == Strand.PLUS else "-"
