# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from database import init_db
from main import create_app

from .helpers import make_settings


@pytest.fixture()
def app(tmp_path: Path):
    """Application bound to a fresh SQLite file for this test."""
    application = create_app(make_settings(f"sqlite:///{tmp_path / 'todo.db'}"))
    init_db(application.state.engine)
    yield application
    application.state.engine.dispose()

@pytest.fixture()
def session_factory(app: FastAPI):
    return app.state.SessionLocal

@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)

@pytest.fixture()
def broken_client(tmp_path: Path):
    """
    Client whose storage cannot be opened.

    The database file lives in a directory that does not exist, so every
    connection attempt fails inside SQLite.
    """
    application = create_app(make_settings(f"sqlite:///{tmp_path / 'missing' / 'todo.db'}"))
    yield TestClient(application)
    application.state.engine.dispose()
