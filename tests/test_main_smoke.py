import main


def test_main_rejects_bad_settings(capsys):
    assert main.main(["--colors", "12"]) == 2
    assert "Invalid settings" in capsys.readouterr().out

def test_main_runs_gameloop(monkeypatch, capsys):
    seen = {}
    monkeypatch.setattr(main, "gameloop", lambda config: seen.setdefault("config", config))
    assert main.main(["--slots", "5", "--colors", "4"]) == 0
    assert seen["config"].repeats_forced is True
    assert "repeating colors turned on" in capsys.readouterr().out

def test_main_applies_menu_limits(monkeypatch, capsys):
    monkeypatch.setattr(main, "gameloop", lambda config: None)
    assert main.main(["--slots", "12"]) == 2
    assert "slot_count must be between 3 and 6" in capsys.readouterr().out
