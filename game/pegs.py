from __future__ import annotations

from enum import Enum


class CodeColor(Enum):
    """Code peg colors, in palette order."""

    RED = "R"
    BLUE = "B"
    GREEN = "G"
    YELLOW = "Y"
    PURPLE = "P"
    ORANGE = "O"
    CYAN = "C"
    MAGENTA = "M"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "CodeColor":
        """
        Look up a color by its one-letter symbol (case-insensitive).

        Raises:
            ValueError: If the symbol names no color.
        """
        return cls(symbol.strip().upper())


class KeyPeg(Enum):
    """Feedback markers."""

    EXACT = "BK"  # black peg: correct color, correct position
    PARTIAL = "W"  # white peg: correct color, wrong position


# The full palette, first entries are used for smaller color counts
PALETTE = tuple(CodeColor)
