"""Saved user preferences (employee name, hourly rate, data source URL)."""
from __future__ import annotations
from punchsync.config import settings
from punchsync.infra.db.uow import UnitOfWork
from punchsync.api.schemas.preferences import PreferencesRead, PreferencesUpdate
from punchsync.models.preferences import PreferenceKey
from punchsync.timesheet.normalize import coerce_number


class PreferencesService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def load(self) -> PreferencesRead:
        stored = self._uow.preferences.get_all()
        rate = stored.get(PreferenceKey.HOURLY_RATE.value)
        return PreferencesRead(
            employee_name=stored.get(PreferenceKey.EMPLOYEE_NAME.value, settings.DEFAULT_EMPLOYEE_NAME),
            hourly_rate=coerce_number(rate) if rate is not None else settings.DEFAULT_HOURLY_RATE,
            source_url=stored.get(PreferenceKey.SOURCE_URL.value, ""),
        )

    def save(self, update: PreferencesUpdate) -> PreferencesRead:
        repo = self._uow.preferences
        if update.employee_name is not None:
            repo.upsert(PreferenceKey.EMPLOYEE_NAME.value, update.employee_name)
        if update.hourly_rate is not None:
            repo.upsert(PreferenceKey.HOURLY_RATE.value, repr(update.hourly_rate))
        if update.source_url is not None:
            repo.upsert(PreferenceKey.SOURCE_URL.value, update.source_url.strip())
        self._uow.commit()
        return self.load()
