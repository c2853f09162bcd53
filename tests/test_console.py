# tests/test_console.py

from __future__ import annotations

import pytest

from task_tracker.cli.console import run_console_loop


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> list[str]:
    remaining = list(lines)

    def fake_input(prompt: str = "") -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return remaining


@pytest.mark.parametrize("word", ["exit", "quit", "/exit", "QUIT"])
def test_exit_words_with_or_without_slash(state, monkeypatch, capsys, word: str) -> None:
    remaining = _feed(monkeypatch, [word, "/whoami"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Unknown command" not in out
    assert remaining == ["/whoami"]


def test_plain_words_are_treated_as_commands(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["login 1", "whoami"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Welcome, Alice." in out
    assert "1. Alice" in out
