"""Shared fixtures: one SQLite file per test, app dependencies overridden."""

import os
from pathlib import Path

# Pas d'echo SQL ni de .env de dev pendant les tests
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import Settings, get_settings
from app.db.session import get_session
from app.main import app


@pytest.fixture()
def engine(tmp_path: Path) -> Engine:
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine: Engine) -> Session:
    with Session(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        ENV="test",
        NAME="Ferris",
        AGE=8,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        DATA_FILE=str(tmp_path / "data.txt"),
    )


@pytest.fixture()
def client(engine: Engine, test_settings: Settings) -> TestClient:
    def _get_session():
        with Session(engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"
