from datetime import date
from punchsync.domain.models import DailyShift, MonthlyReport
from punchsync.render.printable import render_report_html


def _report(notes="closing <shift>"):
    return MonthlyReport(
        month="2024-03",
        hourly_rate=196,
        total_hours=8.5,
        total_pay=1666,
        shifts=(
            DailyShift(date="2024-03-05", start="09:00", end="18:00", break_minutes=30,
                       total_hours=8.5, notes=notes),
        ),
    )


def test_render_contains_summary_and_rows():
    html = render_report_html(_report(), "John Doe", issued_on=date(2024, 4, 1))
    assert html.startswith("<!DOCTYPE html>")
    assert "Doe John" in html
    assert "2024-04-01" in html
    assert "$1,666" in html
    assert "$196" in html
    assert html.count("8.50") == 3
    assert "<td class=\"time\">09:00</td>" in html


def test_render_escapes_user_text():
    html = render_report_html(_report(), "<b>x</b> y", issued_on=date(2024, 4, 1))
    assert "closing &lt;shift&gt;" in html
    assert "<b>x</b>" not in html
