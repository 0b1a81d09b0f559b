"""Unit of Work for preference reads and writes."""
from __future__ import annotations
from sqlalchemy.engine import Engine
from sqlmodel import Session
from punchsync.infra.db.engine import engine
from punchsync.infra.db.repositories.preference_repository import PreferenceRepository


class UnitOfWork:
    """One session per report run or preference edit.

    Commits on clean exit, rolls back on exception, always closes. The
    ``preferences`` repository is bound to the same session, so a report that
    remembers its name and rate lands in one transaction.
    """

    def __init__(self, bind: Engine | None = None) -> None:
        self._bind = bind
        self._session: Session | None = None
        self._preferences: PreferenceRepository | None = None

    def __enter__(self) -> "UnitOfWork":
        # module-level engine is read here, not at import, so tests can swap it
        self._session = Session(self._bind or engine)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        session = self._active()
        try:
            if exc_type is None:
                session.commit()
            else:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._preferences = None

    def _active(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use it as a context manager.")
        return self._session

    @property
    def session(self) -> Session:
        return self._active()

    @property
    def preferences(self) -> PreferenceRepository:
        if self._preferences is None:
            self._preferences = PreferenceRepository(self._active())
        return self._preferences

    def commit(self) -> None:
        """Make saved preferences visible before the operation finishes."""
        self._active().commit()
