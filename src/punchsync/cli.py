import os
import sys
import json
import typer
from pathlib import Path
from punchsync.config import settings
from punchsync.logging import logger, get_run_id

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    punchsync: punch-clock rows to monthly timesheet reports.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check system configuration and environment health.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 punchsync Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Prefix: {sys.prefix}")
    print(f"  Run ID: {get_run_id()}")
    passed += 1

    # ── Check 2: Report policies ─────────────────────────────────────────────
    print("\n[Report Engine]")
    print(f"  ROUNDING_POLICY:             {settings.ROUNDING_POLICY.value}")
    print(f"  END_SELECTION:               {settings.END_SELECTION.value}")
    print(f"  END_TIME_FALLBACK:           {settings.END_TIME_FALLBACK.value}")
    print(f"  DATE_DAY_FIRST:              {settings.DATE_DAY_FIRST}")
    if settings.DEFAULT_HOURLY_RATE >= 0:
        print(f"  DEFAULT_HOURLY_RATE:         ✅ {settings.DEFAULT_HOURLY_RATE:.10g}")
        passed += 1
    else:
        print(f"  DEFAULT_HOURLY_RATE:         ❌ {settings.DEFAULT_HOURLY_RATE:.10g}")
        failures.append("DEFAULT_HOURLY_RATE is negative; fix it in .env")

    # ── Check 3: Optional AI summary ─────────────────────────────────────────
    print("\n[AI Summary]")
    api_key_ok = bool(
        settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.get_secret_value()
    )
    if api_key_ok:
        print(f"  OPENAI_API_KEY:              ✅ Set ({settings.OPENAI_MODEL_INSIGHT})")
    else:
        print("  OPENAI_API_KEY:              ⚠️  Not set (summaries disabled)")

    # ── Check 4: Data directory ──────────────────────────────────────────────
    print("\n[Data Directory]")
    data_dir = settings.data_dir
    if data_dir.exists() and data_dir.is_dir():
        if os.access(data_dir, os.W_OK):
            print(f"  {str(data_dir) + '/':<28} ✅ Found and writable: {data_dir.absolute()}")
            passed += 1
        else:
            print(f"  {str(data_dir) + '/':<28} ❌ Not writable: {data_dir.absolute()}")
            failures.append(f"{data_dir} is not writable; preferences cannot be saved")
    else:
        print(f"  {str(data_dir) + '/':<28} ❌ Missing: {data_dir.absolute()}")
        failures.append(f"{data_dir} not found; run `punchsync db init`")

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed, all good ✅")
        print()


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Create the preference tables."""
    from punchsync.db import init_db
    try:
        init_db()
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)


def _load_ingested(url: str | None, file: Path | None):
    """Fetch or read raw rows; falls back to the saved source URL."""
    from punchsync.domain.exceptions import PunchSyncError
    from punchsync.ingest.adapter import ingest_rows
    from punchsync.ingest.fetch import fetch_payload
    from punchsync.ingest.shapes import rows_from_delimited, rows_from_payload

    if url is None and file is None:
        url = _saved_preferences().source_url or None
    if url is None and file is None:
        print("❌ Provide --url or --file (no saved data source)")
        raise typer.Exit(code=1)

    try:
        if file is not None:
            text = file.read_text(encoding="utf-8-sig")
            if file.suffix.lower() == ".json":
                rows = rows_from_payload(json.loads(text))
            else:
                rows = rows_from_delimited(text)
        else:
            rows = rows_from_payload(fetch_payload(url, timeout=settings.FETCH_TIMEOUT_SECONDS))
    except (PunchSyncError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Loading data failed: {e}")
        print(f"❌ Failed to read data: {e}")
        raise typer.Exit(code=1)
    return ingest_rows(rows, day_first=settings.DATE_DAY_FIRST), url


def _saved_preferences():
    from punchsync.db import init_db
    from punchsync.infra.db.uow import UnitOfWork
    from punchsync.services.preferences_service import PreferencesService
    init_db()
    with UnitOfWork() as uow:
        return PreferencesService(uow).load()


def _print_mapping(mapping) -> None:
    print("Column mapping:")
    for role in ("name", "date", "start", "end", "break_minutes", "notes"):
        column = getattr(mapping, role) or "(not found)"
        how = mapping.matched_by.get(role, "-")
        print(f"  {role:<14} {column:<20} [{how}]")


@app.command("report")
def report(
    month: str = typer.Option(..., help="Target month, YYYY-MM"),
    url: str | None = typer.Option(None, help="JSON endpoint of the timesheet"),
    file: Path | None = typer.Option(None, exists=True, dir_okay=False, help="Local .json or delimited text file"),
    name: str | None = typer.Option(None, help="Employee name filter (empty matches everyone)"),
    rate: str | None = typer.Option(None, help="Hourly rate"),
    html: Path | None = typer.Option(None, help="Write a printable HTML report to this path"),
    remember: bool = typer.Option(False, help="Save name, rate and URL as preferences"),
):
    """Build the monthly report for one employee."""
    from punchsync.api.schemas.preferences import PreferencesUpdate
    from punchsync.infra.db.uow import UnitOfWork
    from punchsync.render.printable import render_report_html
    from punchsync.services.preferences_service import PreferencesService
    from punchsync.services.report_service import ReportService
    from punchsync.timesheet.normalize import coerce_number
    from punchsync.timesheet.report import parse_month

    try:
        parse_month(month)
    except ValueError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)

    prefs = _saved_preferences()
    employee = name if name is not None else prefs.employee_name
    hourly_rate = coerce_number(rate) if rate is not None else prefs.hourly_rate
    ingested, used_url = _load_ingested(url, file)

    with UnitOfWork() as uow:
        result = ReportService(uow).build(ingested, employee, month, hourly_rate)
        if remember:
            PreferencesService(uow).save(PreferencesUpdate(
                employee_name=employee, hourly_rate=hourly_rate, source_url=used_url,
            ))

    if result.report is None:
        print(f"\nNo records for {employee!r} in {result.month} ({result.row_count} rows read).\n")
        print("Detected employees:")
        for detected in result.detected_names or ["(none)"]:
            print(f"  - {detected}")
        print()
        _print_mapping(result.mapping)
        raise typer.Exit(code=2)

    rep = result.report
    print(f"\n{employee or '(all employees)'}: {rep.month}\n")
    print(f"  {'Date':<12}{'Start':>8}{'End':>8}{'Break':>7}{'Hours':>8}  Notes")
    for s in rep.shifts:
        print(f"  {s.date:<12}{s.start:>8}{s.end:>8}{s.break_minutes:>7}{s.total_hours:>8.2f}  {s.notes}")
    print(f"\n{'─' * 50}")
    print(f"Total hours: {rep.total_hours:.2f}")
    print(f"Hourly rate: {rep.hourly_rate:.10g}")
    print(f"Total pay:   {rep.total_pay:,}")

    if html is not None:
        html.write_text(render_report_html(rep, employee), encoding="utf-8")
        print(f"✅ Printable report written to {html}")


@app.command("names")
def names(
    url: str | None = typer.Option(None, help="JSON endpoint of the timesheet"),
    file: Path | None = typer.Option(None, exists=True, dir_okay=False, help="Local .json or delimited text file"),
):
    """List employee names found in the data and the detected columns."""
    from punchsync.timesheet.report import detected_employee_names

    ingested, _ = _load_ingested(url, file)
    found = detected_employee_names(ingested.shifts)
    print(f"Found {len(found)} employee name(s) in {len(ingested.shifts)} rows:")
    for i, n in enumerate(found, 1):
        print(f"{i}. {n}")
    print()
    _print_mapping(ingested.mapping)


prefs_app = typer.Typer(help="Saved preferences.")
app.add_typer(prefs_app, name="prefs")

@prefs_app.command("show")
def prefs_show():
    """Print the saved preferences."""
    prefs = _saved_preferences()
    print(f"employee_name: {prefs.employee_name}")
    print(f"hourly_rate:   {prefs.hourly_rate:.10g}")
    print(f"source_url:    {prefs.source_url}")

@prefs_app.command("set")
def prefs_set(
    name: str | None = typer.Option(None, help="Employee name"),
    rate: str | None = typer.Option(None, help="Hourly rate"),
    url: str | None = typer.Option(None, help="Data source URL"),
):
    """Update one or more saved preferences."""
    from punchsync.api.schemas.preferences import PreferencesUpdate
    from punchsync.db import init_db
    from punchsync.infra.db.uow import UnitOfWork
    from punchsync.services.preferences_service import PreferencesService

    if name is None and rate is None and url is None:
        print("❌ Nothing to update; pass --name, --rate or --url")
        raise typer.Exit(code=1)

    init_db()
    with UnitOfWork() as uow:
        saved = PreferencesService(uow).save(
            PreferencesUpdate(employee_name=name, hourly_rate=rate, source_url=url)
        )
    print(f"✅ Saved (employee_name={saved.employee_name!r}, hourly_rate={saved.hourly_rate:.10g})")

if __name__ == "__main__":
    app()
