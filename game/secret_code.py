import random

from .errors import ConfigError
from .pegs import PALETTE
from .ruleset import GameConfig, validate_counts
from .scoring import score


def generate_pattern(
    slot_count: int,
    color_count: int,
    allow_repeats: bool,
    rng: random.Random | None = None,
) -> tuple:
    """
    Draw a random hidden pattern from the first `color_count` palette colors.

    Args:
        slot_count (int): Length of the pattern.
        color_count (int): Number of palette colors in play.
        allow_repeats (bool): If False, every color appears at most once.
        rng (random.Random, optional): Random source. A fresh one is created
        for each call when omitted.

    Returns:
        tuple[CodeColor, ...]: The generated pattern.

    Raises:
        ConfigError: If the counts are invalid, or repeats are disallowed
        with fewer colors than slots.
    """

    validate_counts(slot_count, color_count)
    if not allow_repeats and color_count < slot_count:
        raise ConfigError(
            f"Cannot fill {slot_count} slots from {color_count} colors "
            "without repeating colors."
        )

    rng = rng or random.Random()
    colors = PALETTE[:color_count]

    # Independent draws, duplicates allowed.
    if allow_repeats:
        return tuple(rng.choices(colors, k=slot_count))

    # Draw without replacement; the draw range always matches the pool size.
    pool = list(colors)
    pattern = []
    for _ in range(slot_count):
        index = rng.randrange(len(pool))
        pattern.append(pool.pop(index))
    return tuple(pattern)


class Code:
    """
        Represents the hidden pattern of a Mastermind game.
    Attributes:
        sequence (tuple[CodeColor, ...]): The hidden colors.
        config (GameConfig): The config the pattern was built for."""

    def __init__(self, sequence, config=None):
        """
        Initialize a Code instance.

        Args:
            sequence (Iterable[CodeColor]): The hidden colors.
            config (GameConfig or None): The game config. Defaults to the
            classic rules.
        """

        self.config = config or GameConfig()
        self.sequence = tuple(sequence)

    @classmethod
    def generate_random(cls, config=None, rng=None):
        """
        Generate a random hidden pattern according to the config.

        Args:
            config (GameConfig or None): The game config.
            rng (random.Random or None): Random source.

        Returns:
            Code: The new hidden pattern.
        """

        config = config or GameConfig()
        sequence = generate_pattern(
            config.slot_count, config.color_count, config.allow_repeats, rng
        )
        return cls(sequence, config=config)

    def compare_with(self, guess):
        """
        Score a guess against this hidden pattern.

        Args:
            guess (Sequence[CodeColor]): The guessed colors.

        Returns:
            tuple[KeyPeg, ...]: EXACT markers followed by PARTIAL markers.
        """

        return score(guess, self.sequence)

    def as_string(self):
        """
        Return a string representation of the code (e.g. 'RBGY').
        Returns:
            str: The code as a string.
        """
        return "".join(c.symbol for c in self.sequence) if self.sequence else "EMPTY"

    def __len__(self):
        return len(self.sequence)

    def __eq__(self, other):
        """
        Check equality between this Code and another object.

        Args:
            other (Code, tuple or list): A Code instance or a sequence of
            colors to compare against.

        Returns:
            bool: True if the sequences are equal, False otherwise.
        """

        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, (list, tuple)):
            return self.sequence == tuple(other)
        return False
