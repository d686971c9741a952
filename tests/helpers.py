# tests/helpers.py

from __future__ import annotations

from dataclasses import replace

from config import Settings


def make_settings(database_url: str) -> Settings:
    """Environment settings with the database swapped for a test file."""
    return replace(Settings.from_env(), database_url=database_url)
