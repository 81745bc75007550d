import os
import random
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Ensure the backend packages are importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep app startup from creating a dev database file during tests.
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Register models for metadata creation in tests.
from dnd_web import models  # noqa: E402,F401
from dnd_web.db import get_rng, get_session  # noqa: E402
from dnd_web.main import app  # noqa: E402


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine):
    def _get_test_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_test_session
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.pop(get_session, None)
    app.dependency_overrides.pop(get_rng, None)
