"""Natural-language summary of a monthly report.

The insight is optional: without an API key, or when the model call fails,
a fixed message is returned instead of an error.
"""
from __future__ import annotations
import logging
from punchsync.config import settings
from punchsync.domain.models import MonthlyReport
from punchsync.llm.protocol import LLMClient, OpenAILLMClient

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "AI summary is unavailable; check the OPENAI_API_KEY setting."
EMPTY_MESSAGE = "No summary could be generated, please try again later."


def build_insight_prompt(report: MonthlyReport) -> str:
    lines = [
        f"- {s.date}: {s.total_hours}h ({s.notes or 'No notes'})" for s in report.shifts
    ]
    summary = (
        f"Month: {report.month}\n"
        f"Total Hours: {report.total_hours}\n"
        f"Hourly Rate: ${report.hourly_rate:.10g}\n"
        f"Total Pay: ${report.total_pay}\n\n"
        "Shift Data (Date, Hours, Notes):\n" + "\n".join(lines)
    )
    return (
        "Analyze this monthly timesheet data.\n"
        "1. Provide a brief, encouraging summary of the work month.\n"
        "2. Point out any patterns (e.g., lots of overtime, consistent schedule, or irregular hours).\n"
        "3. Draft a very short, polite email (2-3 sentences) the employee can send with this report "
        "to their manager.\n\n"
        "Keep the tone professional yet warm. Use Markdown for formatting.\n"
        f"Data:\n{summary}\n"
    )


class InsightService:
    def __init__(self, llm: LLMClient | None = None, model: str | None = None) -> None:
        self._llm = llm
        self._model = model or settings.OPENAI_MODEL_INSIGHT

    def _client(self) -> LLMClient | None:
        if self._llm is not None:
            return self._llm
        key = settings.OPENAI_API_KEY.get_secret_value() if settings.OPENAI_API_KEY else ""
        if not key:
            return None
        self._llm = OpenAILLMClient(api_key=key)
        return self._llm

    def generate(self, report: MonthlyReport) -> tuple[str, bool]:
        """Return ``(text, generated)``; ``generated`` is False for fallback messages."""
        client = self._client()
        if client is None:
            return UNAVAILABLE_MESSAGE, False
        try:
            text = client.chat_completions_create(
                model=self._model,
                messages=[{"role": "user", "content": build_insight_prompt(report)}],
            )
        except Exception:
            logger.exception("Insight generation failed")
            return UNAVAILABLE_MESSAGE, False
        if not text.strip():
            return EMPTY_MESSAGE, False
        return text, True
