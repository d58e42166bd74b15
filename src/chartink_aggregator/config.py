"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number, got {raw!r}"
        raise ValueError(msg) from exc



def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int) or level == logging.NOTSET:
        msg = f"{name} must be a logging level name, got {raw!r}"
        raise ValueError(msg)
    # Canonicalise aliases such as WARN to the name uvicorn accepts.
    return logging.getLevelName(level)


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 5000
    base_url: str = "https://chartink.com"
    timeout: float = 30.0
    user_agent: str = "Mozilla/5.0"
    log_level: str = "INFO"

    @property
    def home_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/"

    @property
    def process_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/screener/process"

    @classmethod
    def from_env(cls, *, load_env_file: bool = True) -> AppSettings:
        if load_env_file:
            load_dotenv()
        return cls(
            environment=os.getenv("CHARTINK_ENV", cls.environment),
            host=os.getenv("HOST", cls.host),
            port=_env_int("PORT", cls.port),
            base_url=os.getenv("CHARTINK_BASE_URL", cls.base_url),
            timeout=_env_float("CHARTINK_TIMEOUT", cls.timeout),
            user_agent=os.getenv("CHARTINK_USER_AGENT", cls.user_agent),
            log_level=_env_log_level("CHARTINK_LOG_LEVEL", cls.log_level),
        )


__all__ = ["AppSettings"]
