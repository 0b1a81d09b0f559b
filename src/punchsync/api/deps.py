"""FastAPI dependencies."""
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from punchsync.infra.db.uow import UnitOfWork
from punchsync.services.preferences_service import PreferencesService
from punchsync.services.report_service import ReportService


def get_uow() -> Generator[UnitOfWork, None, None]:
    """Yield one UnitOfWork per request; commit/rollback in __exit__."""
    with UnitOfWork() as uow:
        yield uow


def get_preferences_service(uow: UnitOfWork = Depends(get_uow)) -> PreferencesService:
    return PreferencesService(uow)


def get_report_service(uow: UnitOfWork = Depends(get_uow)) -> ReportService:
    """Report service with the deployment's aggregation policy from settings."""
    return ReportService(uow)
