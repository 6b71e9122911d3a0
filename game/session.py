from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import SessionStateError
from .guess import Guess
from .pegs import CodeColor, KeyPeg
from .ruleset import GameConfig, configure
from .scoring import is_solved
from .secret_code import Code


class Phase(Enum):
    AWAITING_INPUT = "awaiting_input"
    ROW_COMPLETE = "row_complete"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Row:
    """A scored guess row."""

    guess: tuple[CodeColor, ...]
    feedback: tuple[KeyPeg, ...]


class GameSession:
    """Holds the hidden pattern, the active guess row, and win/loss state."""

    def __init__(self, config: GameConfig | None = None, hidden: Code | None = None):
        """Initialize a session; a hidden pattern is generated if none is given."""
        self.config = config or GameConfig()
        self.hidden = hidden if hidden is not None else Code.generate_random(self.config)
        self.history: list[Row] = []
        self.active = Guess(config=self.config)
        self.current_row = 0
        self.finished = False
        self.won = False

    @property
    def current_col(self) -> int:
        return self.active.cursor

    @property
    def phase(self) -> Phase:
        if self.finished:
            return Phase.WON if self.won else Phase.LOST
        if self.active.is_complete:
            return Phase.ROW_COMPLETE
        return Phase.AWAITING_INPUT

    def _require_running(self):
        if self.finished:
            raise SessionStateError("The game is over. Start a new game.")

    def place_color(self, color: CodeColor) -> None:
        """Fill the next slot of the current row."""
        self._require_running()
        self.active.place(color)

    def back(self) -> CodeColor:
        """Clear the last filled slot of the current row."""
        self._require_running()
        return self.active.back()

    def confirm(self) -> tuple[KeyPeg, ...]:
        """
        Score the completed row and move on to the next one.

        Returns:
            tuple[KeyPeg, ...]: The feedback for the row.

        Raises:
            SessionStateError: If the game is over or the row is incomplete.
        """
        self._require_running()
        if not self.active.is_complete:
            raise SessionStateError(
                f"Fill all {self.config.slot_count} slots before confirming."
            )

        feedback = self.hidden.compare_with(self.active.get_guess())
        self.history.append(Row(self.active.get_guess(), feedback))
        self.current_row += 1

        # Validate win/lose
        if is_solved(feedback, self.config.slot_count):
            self.finished = True
            self.won = True
        elif self.current_row == self.config.num_rows:
            self.finished = True

        self.active = Guess(config=self.config)
        return feedback

    def remaining_attempts(self) -> int:
        """Return how many guesses are left."""
        return max(0, self.config.num_rows - self.current_row)

    def get_feedback_history(self):
        """Return the full history of guesses and feedback."""
        return [(row.guess, row.feedback) for row in self.history]

    def reveal_code(self) -> tuple[CodeColor, ...]:
        """Return the hidden pattern; only allowed once the game is over."""
        if not self.finished:
            raise SessionStateError("The hidden pattern stays hidden until the game is over.")
        return self.hidden.sequence


def start_game(config: GameConfig | None = None, rng=None) -> GameSession:
    """Start a new game, drawing the hidden pattern from `rng`."""
    config = config or configure()
    return GameSession(config, hidden=Code.generate_random(config, rng=rng))


def submit_guess(session: GameSession, guess_pattern):
    """
    Submit a full guess pattern for the current row.

    Any partially filled row is discarded first.

    Returns:
        tuple: (feedback, session)

    Raises:
        LengthMismatchError: If the pattern does not match the slot count.
        InvalidGuessError: If a color is not in play.
        SessionStateError: If the game is over.
    """
    session._require_running()
    session.active = Guess.from_pattern(guess_pattern, config=session.config)
    feedback = session.confirm()
    return feedback, session


def is_finished(session: GameSession) -> bool:
    return session.finished


def did_win(session: GameSession) -> bool:
    return session.won


def reveal_hidden_pattern(session: GameSession):
    return session.reveal_code()
