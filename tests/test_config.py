from __future__ import annotations

import pytest

from chartink_aggregator.config import AppSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "HOST", "CHARTINK_BASE_URL", "CHARTINK_TIMEOUT", "CHARTINK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings.from_env(load_env_file=False)

    assert settings.port == 5000
    assert settings.home_url == "https://chartink.com/"
    assert settings.process_url == "https://chartink.com/screener/process"
    assert settings.user_agent == "Mozilla/5.0"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CHARTINK_BASE_URL", "http://localhost:9000/")
    monkeypatch.setenv("CHARTINK_TIMEOUT", "5")
    monkeypatch.setenv("CHARTINK_LOG_LEVEL", "debug")

    settings = AppSettings.from_env(load_env_file=False)

    assert settings.port == 8080
    assert settings.timeout == 5.0
    assert settings.log_level == "DEBUG"
    assert settings.home_url == "http://localhost:9000/"
    assert settings.process_url == "http://localhost:9000/screener/process"


def test_invalid_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValueError, match="PORT"):
        AppSettings.from_env(load_env_file=False)


@pytest.mark.parametrize(("raw", "expected"), [("warn", "WARNING"), ("debug", "DEBUG"), ("", "INFO")])
def test_log_level_is_canonicalised(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
) -> None:
    monkeypatch.setenv("CHARTINK_LOG_LEVEL", raw)
    assert AppSettings.from_env(load_env_file=False).log_level == expected


@pytest.mark.parametrize("raw", ["loud", "notset"])
def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("CHARTINK_LOG_LEVEL", raw)
    with pytest.raises(ValueError, match="CHARTINK_LOG_LEVEL"):
        AppSettings.from_env(load_env_file=False)
