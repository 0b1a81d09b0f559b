"""Typed HTTP client for Streamlit pages.

Only imports from ``punchsync.api.schemas`` and the domain DTOs, never ORM or DB.
Instantiate via ``get_client()`` which caches per Streamlit session.
"""
from __future__ import annotations

from typing import Any

import httpx
import streamlit as st

from punchsync.api.schemas.preferences import PreferencesRead, PreferencesUpdate
from punchsync.api.schemas.reports import InsightResponse, ReportRequest, ReportResponse
from punchsync.domain.models import MonthlyReport


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}")


class PunchSyncClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(self, base_url: str | None = None, transport: httpx.BaseTransport | None = None) -> None:
        if base_url is None:
            from punchsync.config import settings
            base_url = settings.API_BASE_URL
        self._client = httpx.Client(base_url=base_url, timeout=60.0, transport=transport)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            detail: Any = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        raise APIError(resp.status_code, str(detail))

    # ------------------------------------------------------------------
    # Ops
    # ------------------------------------------------------------------

    def health(self) -> dict:
        resp = self._client.get("/health")
        self._raise_for_status(resp)
        return resp.json()

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------

    def get_preferences(self) -> PreferencesRead:
        resp = self._client.get("/preferences")
        self._raise_for_status(resp)
        return PreferencesRead.model_validate(resp.json())

    def save_preferences(self, payload: PreferencesUpdate) -> PreferencesRead:
        resp = self._client.put("/preferences", json=payload.model_dump(exclude_none=True))
        self._raise_for_status(resp)
        return PreferencesRead.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def generate_report(self, payload: ReportRequest) -> ReportResponse:
        resp = self._client.post("/reports", json=payload.model_dump(mode="json", exclude_none=True))
        self._raise_for_status(resp)
        return ReportResponse.model_validate(resp.json())

    def print_report(self, report: MonthlyReport, employee_name: str) -> str:
        resp = self._client.post(
            "/reports/print",
            json={"report": report.model_dump(mode="json"), "employee_name": employee_name},
        )
        self._raise_for_status(resp)
        return resp.text

    def report_insight(self, report: MonthlyReport) -> InsightResponse:
        resp = self._client.post("/reports/insight", json={"report": report.model_dump(mode="json")})
        self._raise_for_status(resp)
        return InsightResponse.model_validate(resp.json())


def get_client() -> PunchSyncClient:
    if "api_client" not in st.session_state:
        st.session_state["api_client"] = PunchSyncClient()
    return st.session_state["api_client"]
