"""Unit tests for the UnitOfWork context manager and preference repository."""
import pytest
from sqlmodel import Session, SQLModel, create_engine
from punchsync.infra.db.engine import register_sqlite_pragmas, sqlite_pragmas
from punchsync.infra.db.uow import UnitOfWork
from punchsync.infra.db.repositories.preference_repository import PreferenceRepository
from punchsync.api.schemas.preferences import PreferencesUpdate
from punchsync.models.preferences import Preference
from punchsync.services.preferences_service import PreferencesService


def test_commit_persists_record(use_test_engine):
    with UnitOfWork() as uow:
        PreferenceRepository(uow.session).upsert("employee_name", "alex lu")

    with Session(use_test_engine) as s:
        fetched = s.get(Preference, "employee_name")
        assert fetched is not None
        assert fetched.value == "alex lu"


def test_rollback_on_exception_reverts_record(use_test_engine):
    try:
        with UnitOfWork() as uow:
            PreferenceRepository(uow.session).upsert("hourly_rate", "196")
            raise ValueError("forced error")
    except ValueError:
        pass

    with Session(use_test_engine) as s:
        assert s.get(Preference, "hourly_rate") is None


def test_upsert_overwrites(use_test_engine):
    with UnitOfWork() as uow:
        repo = PreferenceRepository(uow.session)
        repo.upsert("source_url", "https://a.test")
        repo.upsert("source_url", "https://b.test")
        assert repo.get("source_url") == "https://b.test"
        assert repo.get_all() == {"source_url": "https://b.test"}
        assert repo.get("missing") is None


def test_hourly_rate_survives_reload_unchanged(use_test_engine):
    with UnitOfWork() as uow:
        saved = PreferencesService(uow).save(PreferencesUpdate(hourly_rate=12345.67))
    assert saved.hourly_rate == 12345.67

    with UnitOfWork() as uow:
        assert PreferencesService(uow).load().hourly_rate == 12345.67


def test_preferences_repository_shares_the_session(use_test_engine):
    with UnitOfWork() as uow:
        assert uow.preferences is uow.preferences
        uow.preferences.upsert("employee_name", "alex lu")
        assert uow.session.get(Preference, "employee_name").value == "alex lu"


def test_bind_overrides_module_engine(tmp_path):
    other = create_engine(f"sqlite:///{tmp_path / 'other.db'}")
    SQLModel.metadata.create_all(other)
    with UnitOfWork(bind=other) as uow:
        uow.preferences.upsert("source_url", "https://c.test")
    with Session(other) as s:
        assert s.get(Preference, "source_url").value == "https://c.test"
    other.dispose()


def test_inactive_unit_of_work_refuses_access():
    uow = UnitOfWork()
    with pytest.raises(RuntimeError):
        uow.preferences
    with pytest.raises(RuntimeError):
        uow.commit()


def test_file_database_runs_in_wal_mode(tmp_path):
    eng = create_engine(f"sqlite:///{tmp_path / 'wal.db'}")
    register_sqlite_pragmas(eng)
    with eng.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA journal_mode").scalar() == "wal"
        assert conn.exec_driver_sql("PRAGMA busy_timeout").scalar() == 5000
    eng.dispose()


def test_memory_database_skips_wal():
    assert sqlite_pragmas(False) == ["PRAGMA busy_timeout=5000"]
    assert "PRAGMA journal_mode=WAL" in sqlite_pragmas(True)
