"""Pytest fixtures: a throwaway SQLite database per test and a wired-up client."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.config import Settings, get_settings
from app.db.engine import get_engine
from app.db.schema import ensure_schema
from app.main import app


@pytest.fixture
def engine(tmp_path) -> Generator[Engine, None, None]:
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.sqlite'}",
        connect_args={"check_same_thread": False},
        future=True,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def schema(engine) -> Engine:
    """Engine whose database already has the tables, but no unique index."""
    with engine.begin() as conn:
        ensure_schema(conn)
    return engine


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="development", database_url="sqlite://")


@pytest.fixture
def test_client(engine, settings) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
