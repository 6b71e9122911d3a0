# Exceptions raised by the game core


class ConfigError(ValueError):
    """Invalid slot, color or row counts."""


class LengthMismatchError(ValueError):
    """Guess and hidden pattern have different lengths."""


class InvalidGuessError(ValueError):
    """Guess uses a color outside the active palette."""


class SessionStateError(RuntimeError):
    """Operation is not allowed in the current phase of the game."""
