import random

from sqlmodel import Session, SQLModel, create_engine

from dnd_web.core.config import get_settings
from dnd_web import models  # noqa: F401 - ensures models are registered with metadata

settings = get_settings()
# SQLite connections are shared across the request threadpool.
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
engine = create_engine(settings.database_url, echo=settings.debug, connect_args=connect_args)

_rng = random.Random(settings.generator_seed)


def init_db() -> None:
    """Create tables; called during startup."""
    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a session for dependency injection."""
    with Session(engine) as session:
        yield session


def get_rng() -> random.Random:
    """Process-wide random source for the generator; override in tests."""
    return _rng
