"""Shared test fixtures.

  use_test_engine  - redirects punchsync.db + UoW to a temp-file SQLite DB.
  client           - FastAPI TestClient wired to the test engine.
  make_shift       - builds NormalizedShift rows from raw punch values.
"""
import os
import pytest
from sqlmodel import SQLModel, create_engine


def pytest_configure(config):
    """Keep module-level engine creation away from the working tree.

    punchsync.db builds its engine at import time from settings; tests swap it
    for a temp-file engine via ``use_test_engine``.
    """
    os.environ.setdefault("DATABASE_URL", "sqlite://")
    os.environ.pop("OPENAI_API_KEY", None)


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch engine references to an isolated temp-file SQLite DB."""
    db_path = tmp_path / "test_punchsync.db"
    test_engine = create_engine(f"sqlite:///{db_path}", echo=False)

    import punchsync.models  # noqa: F401 register ORM mappers
    SQLModel.metadata.create_all(test_engine)

    monkeypatch.setattr("punchsync.db.engine", test_engine)
    monkeypatch.setattr("punchsync.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("punchsync.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def client(use_test_engine):
    """FastAPI TestClient backed by the isolated test engine."""
    from fastapi.testclient import TestClient
    from punchsync.api.app import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_shift():
    from punchsync.domain.models import RawPunchRow
    from punchsync.timesheet.normalize import normalize_row

    def _make(date, start="", end="", break_minutes=0, notes="", name="alex lu"):
        return normalize_row(RawPunchRow(
            employee_name=name, date=date, start=start, end=end,
            break_minutes=break_minutes, notes=notes,
        ))

    return _make
