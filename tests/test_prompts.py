"""Tests for the interactive API-key prompt (cli/prompts.py).

questionary is mocked or hidden; no test reads from a real terminal.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from cx_cli.cli.prompts import prompt_api_key
from cx_cli.exceptions import EnvironmentError, UsageError


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def _fake_questionary(answer: str | None) -> MagicMock:
    fake = MagicMock()
    fake.password.return_value.ask.return_value = answer
    return fake


class TestPromptApiKey:
    def test_returns_stripped_answer(self) -> None:
        fake = _fake_questionary("  XI0123456789abcdef  ")
        with patch("cx_cli.cli.prompts._import_questionary", return_value=fake):
            assert prompt_api_key("example.com") == "XI0123456789abcdef"
        fake.password.assert_called_once()
        assert "example.com" in fake.password.call_args.args[0]

    @pytest.mark.parametrize("answer", [None, "", "   "])
    def test_cancelled_or_empty_raises(self, answer: str | None) -> None:
        with patch(
            "cx_cli.cli.prompts._import_questionary",
            return_value=_fake_questionary(answer),
        ):
            with pytest.raises(UsageError, match="No API key entered") as exc_info:
                prompt_api_key("example.com")
        assert exc_info.value.hint is not None

    def test_missing_questionary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_questionary(monkeypatch)
        with pytest.raises(EnvironmentError, match="questionary is not installed"):
            prompt_api_key("example.com")
