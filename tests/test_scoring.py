import random

import pytest
from game.errors import LengthMismatchError
from game.pegs import CodeColor, KeyPeg
from game.scoring import score, exact_count, partial_count, feedback_counts, is_solved

R, B, G, Y, P, O = (CodeColor.RED, CodeColor.BLUE, CodeColor.GREEN,
                    CodeColor.YELLOW, CodeColor.PURPLE, CodeColor.ORANGE)
X, W = KeyPeg.EXACT, KeyPeg.PARTIAL

# --- golden tests (duplicates + ordering) ---
@pytest.mark.parametrize("guess,hidden,expected", [
    ([R, R, B, Y], [R, B, G, R], (X, W, W)),
    ([R, B, R, G], [R, R, B, G], (X, X, W, W)),
    ([R, G, B, Y], [R, G, B, Y], (X, X, X, X)),
    ([P, O, P, O], [R, G, B, Y], ()),
    ([B, R, Y, G], [R, B, G, Y], (W, W, W, W)),
    ([R, R, R, R], [R, B, B, B], (X,)),
    ([B, R, R, R], [R, B, B, B], (W, W)),
    ([G, G, R, R], [R, R, G, B], (W, W, W)),
    ([Y, R, Y, B], [R, Y, B, Y], (W, W, W, W)),
])
def test_score_golden(guess, hidden, expected):
    assert score(guess, hidden) == expected

def test_exact_markers_come_first():
    fb = score([B, R, G, Y], [R, B, G, Y])
    assert fb == (X, X, W, W)

def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        score([R, G, B], [R, G, B, Y])
    with pytest.raises(ValueError):
        score([R, G, B, Y, P], (R, G, B, Y))

def test_score_is_idempotent_and_pure():
    guess = [R, R, B, Y]
    hidden = [R, B, G, R]
    first = score(guess, hidden)
    assert score(guess, hidden) == first
    assert guess == [R, R, B, Y] and hidden == [R, B, G, R]

def test_exact_count_matches_positional_equality():
    rng = random.Random(7)
    colors = [R, B, G, Y, P, O]
    for _ in range(300):
        guess = rng.choices(colors, k=5)
        hidden = rng.choices(colors, k=5)
        fb = score(guess, hidden)
        assert exact_count(fb) == sum(g == h for g, h in zip(guess, hidden))
        # total never exceeds the multiset intersection
        overlap = sum(min(guess.count(c), hidden.count(c)) for c in colors)
        assert len(fb) == overlap

def test_feedback_helpers():
    fb = (X, X, W)
    assert exact_count(fb) == 2
    assert partial_count(fb) == 1
    assert feedback_counts(fb) == (2, 1)
    assert is_solved((X, X, X, X), 4) is True
    # length == slot count but not all exact is not a win
    assert is_solved((X, X, W, W), 4) is False
    assert is_solved((), 4) is False
