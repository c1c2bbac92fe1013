import logging
from pathlib import Path

import pytest

import theme
from settings import Settings, truthy
from storage import DEFAULT_TODO_FILE


def test_defaults():
    settings = Settings.from_env({})
    assert settings.todo_file == DEFAULT_TODO_FILE == Path("todos.json")
    assert settings.log_level == logging.WARNING


def test_env_overrides(tmp_path):
    settings = Settings.from_env({
        "TODO_FILE": str(tmp_path / "mine.json"),
        "TODO_LOG_LEVEL": "debug",
    })
    assert settings.todo_file == tmp_path / "mine.json"
    assert settings.log_level == logging.DEBUG


def test_unknown_log_level_falls_back():
    assert Settings.from_env({"TODO_LOG_LEVEL": "chatty"}).log_level == logging.WARNING


@pytest.mark.parametrize("value,expected", [
    (None, False), ("1", True), ("yes", True), ("off", False), ("0", False), ("", False),
])
def test_truthy(value, expected):
    assert truthy(value) is expected


def test_palette_value(monkeypatch):
    monkeypatch.setenv("TODO_COLOR_DONE", "00ff00")
    assert theme.palette_value("TODO_COLOR_DONE", "#111111") == "#00ff00"
    monkeypatch.setenv("TODO_COLOR_DONE", "green")
    assert theme.palette_value("TODO_COLOR_DONE", "#111111") == "#111111"
    monkeypatch.delenv("TODO_COLOR_DONE")
    assert theme.palette_value("TODO_COLOR_DONE", "#111111") == "#111111"
