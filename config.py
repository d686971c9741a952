"""Settings loaded from environment variables.

One Settings object for the whole app; nothing is required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

DEFAULT_PORT = 3000


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


@dataclass(frozen=True, slots=True)
class Settings:
    host: str
    port: int
    database_url: str
    log_level: str
    cors_origins: List[str]

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            host=_env("HOST", "0.0.0.0"),
            port=_env_int("PORT", DEFAULT_PORT),
            database_url=_env("DATABASE_URL", "sqlite:///./todo.db"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            cors_origins=_env_list(
                "CORS_ORIGINS",
                [
                    "http://localhost",
                    f"http://localhost:{DEFAULT_PORT}",
                ],
            ),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
