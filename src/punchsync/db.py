"""Engine singleton and table creation."""
from __future__ import annotations

from sqlmodel import SQLModel, create_engine

from punchsync.config import settings


def _make_engine():
    url = settings.database_url
    if url.startswith("sqlite:///"):
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return create_engine(url, echo=False, connect_args={"check_same_thread": False})
    return create_engine(url, echo=False)


engine = _make_engine()


def init_db() -> None:
    import punchsync.models  # noqa: F401   # registers table mappers
    SQLModel.metadata.create_all(engine)
