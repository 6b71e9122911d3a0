import pytest
from game.errors import InvalidGuessError
from game.pegs import CodeColor
from game.ruleset import configure
from game.secret_code import Code
from game.session import GameSession, submit_guess
import ui.cli as cli

R, B, G, Y = CodeColor.RED, CodeColor.BLUE, CodeColor.GREEN, CodeColor.YELLOW


def test_parse_guess():
    config = configure()
    assert cli.parse_guess("rb gy", config) == [R, B, G, Y]
    with pytest.raises(InvalidGuessError):
        cli.parse_guess("RBGZ", config)
    # magenta exists but is not in play with six colors
    with pytest.raises(InvalidGuessError):
        cli.parse_guess("RBGM", config)

def test_parse_settings():
    config = cli.parse_settings(["5", "4", "8", "no"])
    assert (config.slot_count, config.color_count, config.num_rows) == (5, 4, 8)
    assert config.repeats_forced is True
    with pytest.raises(ValueError):
        cli.parse_settings(["7", "6", "6", "no"])
    with pytest.raises(ValueError):
        cli.parse_settings(["4", "6", "6", "maybe"])
    with pytest.raises(ValueError):
        cli.parse_settings(["4", "6"])

def test_render_board_shows_history_and_active_row():
    config = configure()
    session = GameSession(config, hidden=Code([R, B, G, Y], config))
    submit_guess(session, [R, G, B, CodeColor.ORANGE])
    session.place_color(Y)
    board = cli.render_board(session)
    lines = board.splitlines()
    # border, scored row, border, active row, border
    assert len(lines) == 5
    assert "⚫" in lines[1] and lines[1].count("⚪") == 2
    assert "🟡" in lines[3]

def test_gameloop_win(monkeypatch, capsys):
    config = configure()
    monkeypatch.setattr(
        cli, "start_game",
        lambda cfg, rng=None: GameSession(cfg, hidden=Code([R, B, G, Y], cfg)),
    )
    inputs = iter(["RB", "back", "B", "GY", "confirm", "exit"])
    cli.gameloop(config, read=lambda prompt: next(inputs))
    out = capsys.readouterr().out
    assert "Congratulations! You WON!" in out
    assert "The secret code was: RBGY" in out

def test_gameloop_reports_bad_input(monkeypatch, capsys):
    config = configure()
    monkeypatch.setattr(
        cli, "start_game",
        lambda cfg, rng=None: GameSession(cfg, hidden=Code([R, B, G, Y], cfg)),
    )
    inputs = iter(["XYZ", "back", "settings 9 9 9 no", "exit"])
    cli.gameloop(config, read=lambda prompt: next(inputs))
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Invalid settings" in out
    assert "=== Game Over ===" in out

def _fixed_game(monkeypatch):
    monkeypatch.setattr(
        cli, "start_game",
        lambda cfg, rng=None: GameSession(cfg, hidden=Code([R, B, G, Y, R, B][:cfg.slot_count], cfg)),
    )
    sessions = []
    original = cli.render_board
    monkeypatch.setattr(cli, "render_board", lambda s: sessions.append(s) or original(s))
    return sessions

def test_gameloop_rejects_overlong_input_completely(monkeypatch, capsys):
    sessions = _fixed_game(monkeypatch)
    inputs = iter(["RBGYR", "", "R", "exit"])
    cli.gameloop(configure(), read=lambda prompt: next(inputs))
    out = capsys.readouterr().out
    assert "Only 4 free slots left in this row." in out
    session = sessions[-1]
    # nothing from the rejected line was placed or scored
    assert (session.current_row, session.current_col) == (0, 1)
    assert "Black:" not in out

def test_gameloop_full_row_waits_for_confirm(monkeypatch, capsys):
    sessions = _fixed_game(monkeypatch)
    inputs = iter(["RBGO", "back", "Y", "", "exit"])
    cli.gameloop(configure(), read=lambda prompt: next(inputs))
    out = capsys.readouterr().out
    assert out.count("Black:") == 1
    assert "Black: 4  White: 0" in out
    assert "Congratulations! You WON!" in out
    assert sessions[-1].history[0].guess == (R, B, G, Y)

def test_gameloop_confirm_on_incomplete_row(monkeypatch, capsys):
    sessions = _fixed_game(monkeypatch)
    inputs = iter(["RB", "confirm", "", "exit"])
    cli.gameloop(configure(), read=lambda prompt: next(inputs))
    out = capsys.readouterr().out
    assert "Invalid input: Fill all 4 slots before confirming." in out
    assert sessions[-1].current_row == 0
    assert sessions[-1].current_col == 2

def test_gameloop_settings_apply_to_next_game(monkeypatch, capsys):
    sessions = _fixed_game(monkeypatch)
    inputs = iter(["settings 5 8 6 no", "R", "new", "R", "exit"])
    cli.gameloop(configure(), read=lambda prompt: next(inputs))
    out = capsys.readouterr().out
    assert "only take effect once you start a new game" in out
    running, fresh = sessions
    assert running.config.slot_count == 4
    assert fresh.config.slot_count == 5
    assert fresh.config.color_count == 8
    assert "Slots: 5\tColors: 8" in out

def test_check_limits():
    cli.check_limits(3, 2)
    cli.check_limits(6, 8)
    with pytest.raises(ValueError):
        cli.check_limits(12, 6)
    with pytest.raises(ValueError):
        cli.check_limits(4, 1)
