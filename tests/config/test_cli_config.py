from __future__ import annotations

import logging

import pytest

from entitydiff.config import ConfigurationError, env_int, get_cli_config, optional_env_var
from entitydiff.config.cli import DEFAULT_JSON_INDENT, JSON_INDENT_VAR, LOG_LEVEL_VAR


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
    monkeypatch.delenv(JSON_INDENT_VAR, raising=False)


def test_cli_config_defaults() -> None:
    config = get_cli_config()

    assert config.log_level == logging.INFO
    assert config.json_indent == DEFAULT_JSON_INDENT


def test_cli_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_VAR, " debug ")
    monkeypatch.setenv(JSON_INDENT_VAR, "0")

    config = get_cli_config()

    assert config.log_level == logging.DEBUG
    assert config.json_indent == 0


def test_cli_config_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_VAR, "chatty")

    with pytest.raises(ConfigurationError) as exc:
        get_cli_config()

    assert exc.value.variable == LOG_LEVEL_VAR
    assert "chatty" in str(exc.value)


@pytest.mark.parametrize("raw", ["two", "-1"])
def test_cli_config_rejects_invalid_indent(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv(JSON_INDENT_VAR, raw)

    with pytest.raises(ConfigurationError):
        get_cli_config()


def test_blank_values_count_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    assert optional_env_var("EXAMPLE_VAR") is None
    assert env_int("EXAMPLE_VAR", default=7) == 7
