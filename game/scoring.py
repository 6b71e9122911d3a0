"""
Mastermind scoring for a single (guess, hidden) pair.

Conventions:
  - KeyPeg.EXACT   : black peg = correct color in the correct position
  - KeyPeg.PARTIAL : white peg = correct color in a wrong position

Feedback is ordered by discovery, not by slot: every EXACT marker comes
first, then every PARTIAL marker.

Algorithm (two-pass):
  1) First pass emits EXACT for each position where the colors agree and
     counts the hidden colors left over.
  2) Second pass walks the leftover guess colors in order and emits PARTIAL
     only while that color still has a leftover count in the hidden pattern.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence, Tuple

from .errors import LengthMismatchError
from .pegs import CodeColor, KeyPeg

Pattern = Tuple[CodeColor, ...]
Feedback = Tuple[KeyPeg, ...]


def score(guess: Sequence[CodeColor], hidden: Sequence[CodeColor]) -> Feedback:
    """
    Compute Mastermind feedback for `guess` against `hidden`.

    Returns:
      tuple of KeyPeg, EXACT markers first, then PARTIAL markers

    Raises:
      LengthMismatchError: if the two patterns differ in length

    Examples:
      score([R, R, B, Y], [R, B, G, R]) -> (EXACT, PARTIAL, PARTIAL)
      score([R, B, R, G], [R, R, B, G]) -> (EXACT, EXACT, PARTIAL, PARTIAL)
    """
    if len(guess) != len(hidden):
        raise LengthMismatchError(
            f"Guess length must be {len(hidden)}, but got {len(guess)}."
        )

    exact = []
    leftover_guess = []
    remaining = Counter()

    # Pass 1: exact matches; everything else stays in play for pass 2
    for g, h in zip(guess, hidden):
        if g == h:
            exact.append(KeyPeg.EXACT)
        else:
            leftover_guess.append(g)
            remaining[h] += 1

    # Pass 2: each hidden color can satisfy at most one partial match
    partial = []
    for g in leftover_guess:
        if remaining[g] > 0:
            partial.append(KeyPeg.PARTIAL)
            remaining[g] -= 1

    return tuple(exact + partial)


def exact_count(feedback: Sequence[KeyPeg]) -> int:
    return sum(1 for peg in feedback if peg is KeyPeg.EXACT)


def partial_count(feedback: Sequence[KeyPeg]) -> int:
    return sum(1 for peg in feedback if peg is KeyPeg.PARTIAL)


def feedback_counts(feedback: Sequence[KeyPeg]) -> tuple[int, int]:
    """Return feedback as (black_pegs, white_pegs)."""
    return (exact_count(feedback), partial_count(feedback))


def is_solved(feedback: Sequence[KeyPeg], slot_count: int) -> bool:
    """True when every slot was an exact match."""
    return exact_count(feedback) == slot_count
