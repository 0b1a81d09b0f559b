import pytest
from punchsync.timesheet.hours import RoundingPolicy, apply_rounding, compute_hours, crosses_midnight
from punchsync.timesheet.normalize import NO_PUNCH


def test_regular_day_net_of_break():
    assert compute_hours("2024-03-05", "09:00", "18:00", 60) == 8.0


def test_overnight_shift_rolls_end_to_next_day():
    assert compute_hours("2024-03-05", "22:00", "06:00", 0) == 8.0
    assert crosses_midnight("2024-03-05", "22:00", "06:00")
    assert not crosses_midnight("2024-03-05", "09:00", "18:00")


def test_equal_start_and_end_is_a_full_day():
    assert compute_hours("2024-03-05", "09:00", "09:00", 0) == 24.0


def test_overnight_across_month_end():
    assert compute_hours("2024-02-29", "23:30", "01:15", 15) == 1.5


@pytest.mark.parametrize("start, end", [
    ("", "18:00"), ("09:00", ""), (NO_PUNCH, "18:00"), ("09:00", NO_PUNCH),
    ("25:00", "18:00"), ("ab:cd", "18:00"), ("9", "18:00"),
])
def test_missing_or_bad_times_give_zero(start, end):
    assert compute_hours("2024-03-05", start, end, 0) == 0.0


def test_bad_date_gives_zero():
    assert compute_hours("", "09:00", "18:00") == 0.0
    assert compute_hours("2024-02-30", "09:00", "18:00") == 0.0


def test_accepts_unnormalized_date():
    assert compute_hours("3/5/2024", "09:00", "17:00") == 8.0


def test_never_negative():
    assert compute_hours("2024-03-05", "09:00", "10:00", 600) == 0.0


def test_monotonic_in_elapsed_time():
    values = [compute_hours("2024-03-05", "09:00", f"{h:02d}:00", 30) for h in range(10, 24)]
    assert values == sorted(values)


def test_hundredth_rounding():
    assert compute_hours("2024-03-05", "09:00", "16:20") == 7.33
    assert compute_hours("2024-03-05", "09:00", "16:40") == 7.67


def test_whole_hour_rounding():
    assert compute_hours("2024-03-05", "09:00", "16:30", rounding=RoundingPolicy.WHOLE_HOUR) == 8.0
    assert compute_hours("2024-03-05", "09:00", "16:29", rounding=RoundingPolicy.WHOLE_HOUR) == 7.0


@pytest.mark.parametrize("end, expected", [
    ("17:10", 8.0), ("17:15", 8.0), ("17:16", 8.5), ("17:45", 8.5), ("17:46", 9.0),
])
def test_half_hour_bucket_rounding(end, expected):
    assert compute_hours("2024-03-05", "09:00", end, rounding=RoundingPolicy.HALF_HOUR_BUCKET) == expected


def test_rounding_is_half_up():
    assert apply_rounding(2.5, RoundingPolicy.WHOLE_HOUR) == 3.0
    assert apply_rounding(0.125, RoundingPolicy.HUNDREDTH) == 0.13
