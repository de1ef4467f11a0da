"""
Tests for epoch-day and calendar helpers.
"""

from datetime import date, datetime

from finplanlab.core.utils import (
    DEFAULT_BIRTH_YEAR,
    calculate_age,
    create_epoch_day,
    date_string_to_epoch_day,
    date_to_epoch_day,
    epoch_day_to_date,
    epoch_day_to_date_string,
    is_last_day_of_month,
    last_days_of_months_in_range,
    parse_date_string,
    slugify_name,
)


class TestEpochDays:
    """Conversions between epoch days and calendar dates."""

    def test_known_values(self):
        assert date_to_epoch_day(date(1970, 1, 1)) == 0
        assert date_to_epoch_day(date(1970, 1, 2)) == 1
        assert date_to_epoch_day(date(2024, 1, 1)) == 19723
        assert create_epoch_day(2024, 1, 1) == 19723

    def test_negative_days_before_epoch(self):
        assert date_to_epoch_day(date(1969, 12, 31)) == -1
        assert epoch_day_to_date(-1) == date(1969, 12, 31)

    def test_datetime_truncates_to_date(self):
        assert date_to_epoch_day(datetime(2024, 1, 1, 23, 59)) == 19723

    def test_back_to_date_and_string(self):
        assert epoch_day_to_date(19723) == date(2024, 1, 1)
        assert epoch_day_to_date_string(19723) == "2024-01-01"

    def test_parse_plain_and_timestamp_strings(self):
        assert parse_date_string("2024-03-05") == date(2024, 3, 5)
        assert parse_date_string("2024-03-05T00:00:00.000Z") == date(2024, 3, 5)
        assert parse_date_string(date(2024, 3, 5)) == date(2024, 3, 5)
        assert date_string_to_epoch_day("1970-01-11") == 10


class TestMonthEnds:
    """Month-end detection."""

    def test_is_last_day_of_month(self):
        assert is_last_day_of_month(create_epoch_day(2024, 1, 31))
        assert is_last_day_of_month(create_epoch_day(2024, 2, 29))
        assert not is_last_day_of_month(create_epoch_day(2024, 2, 28))
        assert is_last_day_of_month(create_epoch_day(2023, 2, 28))
        assert is_last_day_of_month(create_epoch_day(2024, 12, 31))

    def test_last_days_in_range(self):
        start = create_epoch_day(2024, 1, 15)
        end = create_epoch_day(2024, 3, 30)
        assert last_days_of_months_in_range(start, end) == [
            create_epoch_day(2024, 1, 31),
            create_epoch_day(2024, 2, 29),
        ]

    def test_range_bounds_are_inclusive(self):
        jan31 = create_epoch_day(2024, 1, 31)
        assert last_days_of_months_in_range(jan31, jan31) == [jan31]
        assert last_days_of_months_in_range(jan31 + 1, jan31) == []

    def test_first_year_from_epoch(self):
        ends = last_days_of_months_in_range(0, 365)
        assert len(ends) == 12
        assert ends[0] == 30
        assert ends[-1] == 364


class TestAgeAndNames:
    """Age and slug helpers."""

    def test_age_turns_on_birthday(self):
        assert calculate_age("1990-06-15", create_epoch_day(2025, 6, 14)) == 34
        assert calculate_age("1990-06-15", create_epoch_day(2025, 6, 15)) == 35

    def test_missing_birth_date_uses_default_year(self):
        today = create_epoch_day(2025, 3, 1)
        assert calculate_age(None, today) == 2025 - DEFAULT_BIRTH_YEAR
        assert calculate_age("", today) == 2025 - DEFAULT_BIRTH_YEAR

    def test_slugify_name(self):
        assert slugify_name("Main Checking") == "main_checking"
        assert slugify_name("  401(k) Plan ") == "401_k_plan"
