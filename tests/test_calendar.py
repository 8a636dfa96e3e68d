from datetime import date, datetime
import pytest
from hrledger.domain.calendar import (
    as_date, count_weekdays, day_in_month, month_bounds, period_bounds, shift_month,
)


def test_count_weekdays_full_month():
    # March 2024: 1st is a Friday, 31 days.
    assert count_weekdays(date(2024, 3, 1), date(2024, 3, 31)) == 21


def test_count_weekdays_is_inclusive_on_both_ends():
    monday, friday = date(2024, 3, 4), date(2024, 3, 8)
    assert count_weekdays(monday, friday) == 5
    assert count_weekdays(monday, monday) == 1


def test_count_weekdays_weekend_only():
    assert count_weekdays(date(2024, 3, 2), date(2024, 3, 3)) == 0


def test_count_weekdays_reversed_range_is_zero():
    assert count_weekdays(date(2024, 3, 8), date(2024, 3, 4)) == 0


def test_count_weekdays_accepts_iso_strings_and_datetimes():
    assert count_weekdays("2024-03-04", datetime(2024, 3, 8, 17, 30)) == 5


def test_as_date_rejects_other_types():
    with pytest.raises(TypeError):
        as_date(20240304)


def test_as_date_rejects_malformed_string():
    with pytest.raises(ValueError):
        as_date("2024-13-01")


def test_month_bounds_handles_leap_february():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2023, 2) == (date(2023, 2, 1), date(2023, 2, 28))


def test_period_bounds_year_variant():
    assert period_bounds(2024) == (date(2024, 1, 1), date(2024, 12, 31))


def test_month_bounds_rejects_bad_month():
    with pytest.raises(ValueError):
        month_bounds(2024, 13)


@pytest.mark.parametrize("year, month, delta, expected", [
    (2024, 3, -1, (2024, 2)),
    (2024, 1, -1, (2023, 12)),
    (2024, 12, 1, (2025, 1)),
    (2024, 3, -5, (2023, 10)),
    (2024, 11, 2, (2025, 1)),
])
def test_shift_month(year, month, delta, expected):
    assert shift_month(year, month, delta) == expected


def test_day_in_month_clamps_to_month_length():
    assert day_in_month(2024, 2, 31) == date(2024, 2, 29)
    assert day_in_month(2024, 5, 12) == date(2024, 5, 12)
