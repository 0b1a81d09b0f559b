"""Printable A4 monthly attendance and salary report."""
from __future__ import annotations

from datetime import date
from html import escape

from punchsync.domain.models import MonthlyReport
from punchsync.timesheet.normalize import format_name

_STYLE = """
body { font-family: "Noto Sans TC", "Helvetica Neue", Arial, sans-serif; color: #000; margin: 0; }
.page { max-width: 210mm; min-height: 297mm; margin: 0 auto; padding: 32px; box-sizing: border-box; }
header { display: flex; justify-content: space-between; align-items: flex-end;
         border-bottom: 6px solid #000; padding-bottom: 16px; margin-bottom: 24px; }
h1 { font-size: 40px; margin: 0; }
.subtitle { font-weight: 700; letter-spacing: .1em; text-transform: uppercase; }
.cards { display: grid; grid-template-columns: repeat(4, 1fr); gap: 12px; margin-bottom: 28px; }
.card { border: 2px solid #000; border-radius: 8px; padding: 12px; background: #f9fafb; }
.card.pay { background: #000; color: #fff; }
.card .label { font-size: 10px; font-weight: 800; text-transform: uppercase; }
.card .value { font-size: 22px; font-weight: 900; }
table { width: 100%; border-collapse: collapse; border: 3px solid #000; font-size: 13px; }
th { background: #000; color: #fff; padding: 10px; text-align: left; }
td { border-top: 2px solid #000; padding: 10px; font-weight: 700; }
td.time { text-align: center; font-family: monospace; }
td.hours, th.hours { text-align: right; }
td.notes { font-size: 11px; font-style: italic; }
tfoot td { background: #f3f4f6; font-size: 16px; }
.signatures { display: grid; grid-template-columns: 1fr 1fr; gap: 80px; margin-top: 80px; padding: 0 40px; }
.signatures div { border-top: 3px solid #000; padding-top: 12px; text-align: center; font-weight: 800; }
footer { margin-top: 60px; text-align: center; font-size: 10px; letter-spacing: .4em; text-transform: uppercase; }
@media print { .page { padding: 0; max-width: none; } }
"""


def _hours(value: float) -> str:
    return f"{value:.2f}"


def render_report_html(report: MonthlyReport, employee_name: str, issued_on: date | None = None) -> str:
    """Return a standalone HTML document for printing *report*."""
    issued = (issued_on or date.today()).isoformat()
    rows = "\n".join(
        "<tr>"
        f"<td>{escape(s.date)}</td>"
        f'<td class="time">{escape(s.start)}</td>'
        f'<td class="time">{escape(s.end)}</td>'
        f'<td class="hours">{_hours(s.total_hours)}</td>'
        f'<td class="notes">{escape(s.notes)}</td>'
        "</tr>"
        for s in report.shifts
    )
    return f"""<!DOCTYPE html>
<html lang="zh-Hant">
<head>
<meta charset="utf-8">
<title>工作月報表 {escape(report.month)}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="page">
<header>
  <div>
    <h1>工作月報表</h1>
    <div class="subtitle">Monthly Attendance &amp; Salary Report</div>
  </div>
  <div>
    <div class="value">{escape(format_name(employee_name))}</div>
    <div>報表日期: {issued}</div>
  </div>
</header>
<section class="cards">
  <div class="card"><div class="label">結算月份</div><div class="value">{escape(report.month)}</div></div>
  <div class="card"><div class="label">當月總工時</div><div class="value">{_hours(report.total_hours)} HR</div></div>
  <div class="card"><div class="label">核定時薪</div><div class="value">${report.hourly_rate:.10g}</div></div>
  <div class="card pay"><div class="label">應付實發工資</div><div class="value">${report.total_pay:,}</div></div>
</section>
<table>
  <thead>
    <tr><th>日期</th><th>上班打卡</th><th>下班打卡</th><th class="hours">當日工時</th><th>工作備註</th></tr>
  </thead>
  <tbody>
{rows}
  </tbody>
  <tfoot>
    <tr><td colspan="3" class="hours">月總計 (Total Monthly Hours)</td>
    <td class="hours">{_hours(report.total_hours)}</td><td></td></tr>
  </tfoot>
</table>
<section class="signatures">
  <div>員工姓名<br><small>Employee Name</small></div>
  <div>主管審核簽章<br><small>Manager Approval</small></div>
</section>
<footer>Generated by punchsync</footer>
</div>
</body>
</html>
"""
