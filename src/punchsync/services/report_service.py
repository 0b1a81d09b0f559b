"""Report use-case service: source -> ingest -> monthly report."""
from __future__ import annotations
import logging
from typing import Any
from punchsync.config import settings
from punchsync.infra.db.uow import UnitOfWork
from punchsync.api.schemas.preferences import PreferencesUpdate
from punchsync.api.schemas.reports import ReportRequest, ReportResponse, ReportStatus
from punchsync.ingest.adapter import IngestResult, ingest_rows
from punchsync.ingest.fetch import fetch_payload
from punchsync.ingest.shapes import rows_from_delimited, rows_from_payload
from punchsync.services.preferences_service import PreferencesService
from punchsync.timesheet.aggregate import AggregationPolicy
from punchsync.timesheet.report import build_report, detected_employee_names, parse_month

logger = logging.getLogger(__name__)


def default_policy() -> AggregationPolicy:
    return AggregationPolicy(
        end_selection=settings.END_SELECTION,
        fallback=settings.END_TIME_FALLBACK,
        rounding=settings.ROUNDING_POLICY,
    )


def load_rows(request: ReportRequest) -> list[dict[str, Any]]:
    if request.source_url is not None:
        payload = fetch_payload(request.source_url, timeout=settings.FETCH_TIMEOUT_SECONDS)
        return rows_from_payload(payload)
    if request.delimited_text is not None:
        return rows_from_delimited(request.delimited_text)
    return rows_from_payload(request.payload)


class ReportService:
    def __init__(self, uow: UnitOfWork, policy: AggregationPolicy | None = None) -> None:
        self._uow = uow
        self._policy = policy or default_policy()

    def generate(self, request: ReportRequest) -> ReportResponse:
        prefs = PreferencesService(self._uow).load()
        employee_name = request.employee_name if request.employee_name is not None else prefs.employee_name
        hourly_rate = request.hourly_rate if request.hourly_rate is not None else prefs.hourly_rate

        ingested = ingest_rows(load_rows(request), day_first=settings.DATE_DAY_FIRST)
        response = self.build(ingested, employee_name, request.month, hourly_rate)

        if request.remember:
            PreferencesService(self._uow).save(PreferencesUpdate(
                employee_name=employee_name,
                hourly_rate=hourly_rate,
                source_url=request.source_url,
            ))
        return response

    def build(
        self, ingested: IngestResult, employee_name: str, month: str, hourly_rate: float,
    ) -> ReportResponse:
        year, month_num = parse_month(month)
        report = build_report(
            ingested.shifts, employee_name, year, month_num, hourly_rate, self._policy,
        )
        if report is None:
            logger.info(
                "No shifts for %r in %s (%d rows ingested)", employee_name, month, len(ingested.shifts),
            )
        return ReportResponse(
            status=ReportStatus.READY if report is not None else ReportStatus.NO_DATA,
            month=f"{year:04d}-{month_num:02d}",
            employee_name=employee_name,
            report=report,
            mapping=ingested.mapping,
            detected_names=detected_employee_names(ingested.shifts),
            row_count=len(ingested.shifts),
        )
