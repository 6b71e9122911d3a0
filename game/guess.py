from .errors import InvalidGuessError, LengthMismatchError, SessionStateError
from .pegs import CodeColor
from .ruleset import GameConfig


class Guess:
    """
        Represents the guess row the player is filling in.
    Attributes:
        slots (list[CodeColor]): The colors placed so far, left to right.
        config (GameConfig): The config for validation."""

    def __init__(self, sequence=None, config=None):
        """
        Initialize a Guess instance.
        Args:
            sequence (Iterable[CodeColor] | None): Colors to place right away.
            config (GameConfig, optional): The config for validation.
            Defaults to the classic rules.
        """

        self.config = config or GameConfig()
        self.slots = []

        for color in sequence or ():
            self.place(color)

    @classmethod
    def from_pattern(cls, pattern, config=None):
        """
        Build a complete row from a full pattern.

        Raises:
            LengthMismatchError: If the pattern does not fill the row exactly.
            InvalidGuessError: If a color is not in play.
        """
        config = config or GameConfig()
        pattern = tuple(pattern)
        if len(pattern) != config.slot_count:
            raise LengthMismatchError(
                f"Guess length must be {config.slot_count}, "
                f"but got {len(pattern)}."
            )
        return cls(pattern, config=config)

    @property
    def cursor(self):
        """Index of the next slot to fill."""
        return len(self.slots)

    @property
    def free_slots(self):
        return self.config.slot_count - len(self.slots)

    @property
    def is_complete(self):
        return len(self.slots) == self.config.slot_count

    def place(self, color):
        """
        Put a color into the next free slot.

        Raises:
            SessionStateError: If the row is full.
            InvalidGuessError: If the color is not in play.
        """
        if self.is_complete:
            raise SessionStateError("Row is full. Confirm or go back.")
        if not isinstance(color, CodeColor) or color not in self.config.colors:
            allowed = ", ".join(c.symbol for c in self.config.colors)
            raise InvalidGuessError(f"Invalid color '{color}'. Allowed: {allowed}.")
        self.slots.append(color)

    def back(self):
        """
        Clear the last filled slot and return its color.

        Raises:
            SessionStateError: If the row is empty.
        """
        if not self.slots:
            raise SessionStateError("Row is empty, nothing to take back.")
        return self.slots.pop()

    def get_guess(self):
        """
        Return the stored guess.

        Returns:
            tuple[CodeColor, ...]: The guess sequence."""
        return tuple(self.slots)
