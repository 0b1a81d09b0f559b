"""Monthly report endpoints."""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from punchsync.api.deps import get_report_service
from punchsync.api.schemas.reports import (
    InsightRequest, InsightResponse, PrintRequest, ReportRequest, ReportResponse,
)
from punchsync.render.printable import render_report_html
from punchsync.services.insight_service import InsightService
from punchsync.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("", response_model=ReportResponse)
def generate_report(
    payload: ReportRequest, service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    return service.generate(payload)


@router.post("/print", response_class=HTMLResponse)
def print_report(payload: PrintRequest) -> HTMLResponse:
    return HTMLResponse(render_report_html(payload.report, payload.employee_name, payload.issued_on))


@router.post("/insight", response_model=InsightResponse)
def report_insight(payload: InsightRequest) -> InsightResponse:
    text, generated = InsightService().generate(payload.report)
    return InsightResponse(text=text, generated=generated)
