# Configuration: slots, colors, rows, repeating colors, display.
from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError
from .pegs import PALETTE

DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "slot_count": 4,  # Number of holes per row
    "color_count": 6,  # Colors in play (first entries of the palette)
    "allow_repeats": False,  # Can the hidden pattern repeat a color?
    "num_rows": 6,  # Number of guesses per game
    "limits": {  # Ranges offered by the settings command
        "slot_count": (3, 6),
        "color_count": (2, 8),
    },
    "display": {
        "emoji_map": {  # For CLI rendering
            "R": "🔴",
            "B": "🔵",
            "G": "🟢",
            "Y": "🟡",
            "P": "🟣",
            "O": "🟠",
            "C": "🩵",
            "M": "🩷",
            "BK": "⚫",
            "W": "⚪",
        }
    },
}


@dataclass(frozen=True)
class GameConfig:
    slot_count: int = DEFAULT_RULES["slot_count"]
    color_count: int = DEFAULT_RULES["color_count"]
    allow_repeats: bool = DEFAULT_RULES["allow_repeats"]
    num_rows: int = DEFAULT_RULES["num_rows"]
    # True when configure() had to turn repeats on
    repeats_forced: bool = False

    @property
    def colors(self):
        """The colors in play for this config."""
        return PALETTE[: self.color_count]


def validate_counts(slot_count: int, color_count: int) -> None:
    """
    Check slot and color counts against the palette.

    Raises:
        ConfigError: If a count is out of range.
    """
    if slot_count < 1:
        raise ConfigError(f"Slot count must be at least 1, but got {slot_count}.")
    if color_count < 1:
        raise ConfigError(
            f"Color count must be at least 1, but got {color_count}."
        )
    if color_count > len(PALETTE):
        raise ConfigError(
            f"Color count must be at most {len(PALETTE)}, but got {color_count}."
        )


def configure(
    slot_count: int = DEFAULT_RULES["slot_count"],
    color_count: int = DEFAULT_RULES["color_count"],
    allow_repeats: bool = DEFAULT_RULES["allow_repeats"],
    num_rows: int = DEFAULT_RULES["num_rows"],
) -> GameConfig:
    """
    Validate a game configuration.

    A pattern without repeats needs at least as many colors as slots. When
    that does not hold, repeats are switched on and the returned config has
    repeats_forced set.

    Args:
        slot_count (int): Holes per row.
        color_count (int): Colors in play.
        allow_repeats (bool): Whether the hidden pattern may repeat colors.
        num_rows (int): Guesses per game.

    Returns:
        GameConfig: The validated config.

    Raises:
        ConfigError: If a count is out of range.
    """
    validate_counts(slot_count, color_count)
    if num_rows < 1:
        raise ConfigError(f"Row count must be at least 1, but got {num_rows}.")

    forced = False
    if not allow_repeats and color_count < slot_count:
        allow_repeats = True
        forced = True

    return GameConfig(
        slot_count=slot_count,
        color_count=color_count,
        allow_repeats=allow_repeats,
        num_rows=num_rows,
        repeats_forced=forced,
    )
