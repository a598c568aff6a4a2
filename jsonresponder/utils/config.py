"""Runtime configuration helpers for the responder server."""
from __future__ import annotations

import os
from typing import Final

from dotenv import load_dotenv

# Load .env file from project root (if it exists)
load_dotenv()


def _parse_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    return value in {"1", "true", "yes", "on"}


def _parse_int(value: str | None, *, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _parse_str(value: str | None, *, default: str) -> str:
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_bool(name: str, *, default: bool = False) -> bool:
    return _parse_bool(os.getenv(name), default=default)


def _env_int(name: str, *, default: int) -> int:
    return _parse_int(os.getenv(name), default=default)


def _env_str(name: str, *, default: str) -> str:
    return _parse_str(os.getenv(name), default=default)


HOST: Final[str] = _env_str("JSONRESPONDER_HOST", default="127.0.0.1")
PORT: Final[int] = _env_int("JSONRESPONDER_PORT", default=8080)
DEBUG: Final[bool] = _env_bool("JSONRESPONDER_DEBUG", default=False)
LOG_LEVEL: Final[str] = _env_str("JSONRESPONDER_LOG_LEVEL", default="INFO").upper()


__all__ = ["DEBUG", "HOST", "LOG_LEVEL", "PORT"]
