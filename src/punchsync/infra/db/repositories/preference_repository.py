"""Repository for Preference records. No business logic; caller owns the transaction."""
from __future__ import annotations
from datetime import datetime, timezone
from sqlmodel import Session, select
from punchsync.models.preferences import Preference


class PreferenceRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get(self, key: str) -> str | None:
        pref = self._s.get(Preference, key)
        return pref.value if pref is not None else None

    def get_all(self) -> dict[str, str]:
        return {p.key: p.value for p in self._s.exec(select(Preference)).all()}

    def upsert(self, key: str, value: str) -> Preference:
        pref = self._s.get(Preference, key)
        if pref is None:
            pref = Preference(key=key, value=value)
        else:
            pref.value = value
            pref.updated_at = datetime.now(timezone.utc)
        self._s.add(pref)
        self._s.flush()
        return pref
