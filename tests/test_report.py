import pytest
from punchsync.timesheet.aggregate import AggregationPolicy
from punchsync.timesheet.hours import RoundingPolicy
from punchsync.timesheet.report import (
    build_report, compute_pay, detected_employee_names, parse_month,
)


@pytest.fixture
def march_rows(make_shift):
    return [
        make_shift("2024-03-05", "09:00", "18:00", break_minutes=60, name="johndoe"),
        make_shift("2024-03-06", "09:00", "13:30", name="JohnDoe"),
        make_shift("2024-03-06", "14:00", "", name="John Doe"),
        make_shift("2024-04-01", "09:00", "18:00", name="johndoe"),
        make_shift("2024-03-05", "10:00", "19:00", name="Jane Roe"),
    ]


def test_name_filter_ignores_case_and_whitespace(march_rows):
    report = build_report(march_rows, "  John Doe  ", 2024, 3, 196)
    assert report is not None
    assert [s.date for s in report.shifts] == ["2024-03-05", "2024-03-06"]
    assert report.month == "2024-03"
    assert report.total_hours == 12.5
    assert report.total_pay == 2450


def test_empty_filter_matches_everyone(march_rows):
    report = build_report(march_rows, "", 2024, 3, 100)
    assert len(report.shifts) == 2
    # both employees' rows on 2024-03-05 merge into one day
    assert report.shifts[0].start == "09:00"


def test_no_match_returns_none(march_rows):
    assert build_report(march_rows, "nobody", 2024, 3, 196) is None
    assert build_report(march_rows, "john doe", 2023, 3, 196) is None
    assert build_report([], "", 2024, 3, 196) is None


def test_month_label_comes_from_request(march_rows):
    report = build_report(march_rows, "johndoe", 2024, 4, 196)
    assert report.month == "2024-04"


def test_pay_is_floored():
    assert compute_pay(10.256, 196) == 2010
    assert compute_pay(0.29, 100) == 29
    assert compute_pay(12.5, 196) == 2450


def test_total_hours_rounded_to_two_places(make_shift):
    rows = [make_shift(f"2024-03-{d:02d}", "09:00", "09:06") for d in (1, 2, 3)]
    report = build_report(rows, "", 2024, 3, 196)
    assert report.total_hours == 0.3
    assert report.total_pay == 58


def test_rate_fails_soft(make_shift):
    report = build_report([make_shift("2024-03-05", "09:00", "17:00")], "", 2024, 3, "abc")
    assert report.hourly_rate == 0.0
    assert report.total_pay == 0


def test_policy_is_passed_through(make_shift):
    rows = [make_shift("2024-03-05", "09:00", "16:20")]
    policy = AggregationPolicy(rounding=RoundingPolicy.HALF_HOUR_BUCKET)
    assert build_report(rows, "", 2024, 3, 100, policy).total_hours == 7.5


def test_detected_employee_names(make_shift):
    rows = [
        make_shift("2024-03-05", name="alex lu"),
        make_shift("2024-03-05", name=""),
        make_shift("2024-03-06", name="王小明"),
        make_shift("2024-03-07", name="alex lu"),
    ]
    assert detected_employee_names(rows) == ["alex lu", "王小明"]


def test_parse_month():
    assert parse_month("2024-03") == (2024, 3)
    assert parse_month("2024-3") == (2024, 3)
    with pytest.raises(ValueError):
        parse_month("2024-13")
    with pytest.raises(ValueError):
        parse_month("March")
