from unittest import mock

import pygame
import pytest

from smokefx.main import main


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2


def test_runs_until_quit_event(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    missing = tmp_path / "missing-font.ttf"
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        result = main(["--font", str(missing)])
    assert result == 0
    assert pygame.display.get_init() is False
    assert "missing-font.ttf" in capsys.readouterr().err