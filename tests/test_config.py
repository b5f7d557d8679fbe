from __future__ import annotations

import pytest

from guardclause import InvalidArgumentError
from guardclause.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GUARDCLAUSE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GUARDCLAUSE_EXPOSE_VALUES", raising=False)
    settings = Settings.from_env()
    assert settings.log_level == "INFO"
    assert settings.expose_values is False


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_settings_expose_values_truthy(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("GUARDCLAUSE_EXPOSE_VALUES", raw)
    assert Settings.from_env().expose_values is True


def test_settings_reads_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUARDCLAUSE_LOG_LEVEL", " debug ")
    monkeypatch.setenv("GUARDCLAUSE_EXPOSE_VALUES", "no")
    settings = Settings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.expose_values is False


def test_blank_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUARDCLAUSE_LOG_LEVEL", "   ")
    assert Settings.from_env().log_level == "INFO"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUARDCLAUSE_LOG_LEVEL", "verbose")
    with pytest.raises(InvalidArgumentError) as info:
        Settings.from_env()
    assert info.value.parameter_name == "log_level"
