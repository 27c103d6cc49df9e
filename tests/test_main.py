import sys

import pytest

import galaxy_main


def test_list_presets_prints_menu(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["galaxy_main.py", "--list-presets"])
    galaxy_main.main()

    out = capsys.readouterr().out
    assert "GALAXY PRESETS" in out
    assert "milky_way" in out


def test_unknown_preset_is_rejected(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["galaxy_main.py", "--preset", "andromeda"])
    with pytest.raises(SystemExit) as exc:
        galaxy_main.main()

    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_help_exits_cleanly(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["galaxy_main.py", "--help"])
    with pytest.raises(SystemExit) as exc:
        galaxy_main.main()

    assert exc.value.code == 0
    assert "--list-presets" in capsys.readouterr().out
