from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List

DEFAULT_TODO_QUOTA = 10


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - TODO_QUOTA: max number of todos a non-pro user may hold (default: 10)
    - LOG_LEVEL: logging level name, e.g. 'DEBUG' or 'INFO' (default: INFO)
    - HOST: bind address when run as a script (default: 0.0.0.0)
    - PORT: bind port when run as a script (default: 3333)
    """

    cors_allow_origins: List[str]
    todo_quota: int
    log_level: str
    host: str
    port: int


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_positive_int(value: str, default: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        # Star will be handled in main via allow_origins=["*"]
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    origins = _parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*"))
    quota = _parse_positive_int(_get_env("TODO_QUOTA", str(DEFAULT_TODO_QUOTA)), DEFAULT_TODO_QUOTA)
    log_level = _parse_log_level(_get_env("LOG_LEVEL", "INFO"))
    host = _get_env("HOST", "0.0.0.0").strip()
    port = _parse_positive_int(_get_env("PORT", "3333"), 3333)

    return Settings(
        cors_allow_origins=origins,
        todo_quota=quota,
        log_level=log_level,
        host=host,
        port=port,
    )
