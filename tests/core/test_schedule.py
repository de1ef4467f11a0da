"""
Tests for recurrence rules.
"""

from datetime import date, datetime

import pytest
from finplanlab.core.errors import ConfigError, InvalidScheduleError
from finplanlab.core.schedule import Schedule, ScheduleType
from finplanlab.core.utils import create_epoch_day


class TestScheduleConstruction:
    """Validation performed when a schedule is built."""

    def test_monthly_requires_days_of_month(self):
        with pytest.raises(InvalidScheduleError, match="Days of month"):
            Schedule(ScheduleType.MONTHLY, date(2024, 1, 1))

    def test_weekly_requires_days_of_week(self):
        with pytest.raises(InvalidScheduleError, match="Days of week"):
            Schedule(ScheduleType.WEEKLY, date(2024, 1, 1), days_of_week=())

    def test_custom_requires_positive_interval(self):
        with pytest.raises(InvalidScheduleError, match="Interval"):
            Schedule(ScheduleType.CUSTOM, date(2024, 1, 1))
        with pytest.raises(InvalidScheduleError, match="Interval"):
            Schedule(ScheduleType.CUSTOM, date(2024, 1, 1), interval=0)

    def test_inverted_window_raises(self):
        with pytest.raises(InvalidScheduleError, match="before end date"):
            Schedule(ScheduleType.DAILY, date(2024, 2, 1), end_date=date(2024, 1, 1))

    def test_unknown_type_raises_config_error(self):
        with pytest.raises(ConfigError, match="Unknown schedule type"):
            Schedule("fortnightly", date(2024, 1, 1))

    def test_type_string_is_case_insensitive(self):
        rule = Schedule("Monthly", date(2024, 1, 1), days_of_month=[1])
        assert rule.type is ScheduleType.MONTHLY

    def test_days_are_sorted_deduplicated_and_filtered(self):
        rule = Schedule(
            ScheduleType.MONTHLY, date(2024, 1, 1), days_of_month=[15, 1, 15, 40]
        )
        assert rule.days_of_month == (1, 15)

    def test_days_outside_range_only_raises(self):
        with pytest.raises(InvalidScheduleError):
            Schedule(ScheduleType.WEEKLY, date(2024, 1, 1), days_of_week=[7, 9])

    def test_datetime_and_string_bounds_become_dates(self):
        rule = Schedule(
            ScheduleType.DAILY, datetime(2024, 1, 1, 9, 30), end_date=datetime(2024, 1, 3, 18)
        )
        assert type(rule.start_date) is date
        assert type(rule.end_date) is date
        assert rule.start_date == date(2024, 1, 1)
        assert len(rule.get_dates_in_range(date(2024, 1, 1), date(2024, 1, 5))) == 3

        rule = Schedule(ScheduleType.DAILY, "2024-01-01")
        assert rule.start_date == date(2024, 1, 1)


class TestScheduleDates:
    """Date generation for each rule type."""

    def test_once_inside_and_outside_window(self):
        rule = Schedule(ScheduleType.ONCE, date(2024, 3, 10))
        assert rule.get_dates_in_range(date(2024, 1, 1), date(2024, 12, 31)) == [
            date(2024, 3, 10)
        ]
        assert rule.get_dates_in_range(date(2024, 4, 1), date(2024, 12, 31)) == []

    def test_daily(self):
        rule = Schedule(ScheduleType.DAILY, date(2024, 1, 1))
        assert rule.get_dates_in_range(date(2024, 1, 30), date(2024, 2, 1)) == [
            date(2024, 1, 30),
            date(2024, 1, 31),
            date(2024, 2, 1),
        ]

    def test_weekly_uses_sunday_as_zero(self):
        rule = Schedule(ScheduleType.WEEKLY, date(2024, 1, 1), days_of_week=[0])
        # 2024-01-07 and 2024-01-14 are Sundays
        assert rule.get_dates_in_range(date(2024, 1, 1), date(2024, 1, 14)) == [
            date(2024, 1, 7),
            date(2024, 1, 14),
        ]

    def test_monthly_multiple_days(self):
        rule = Schedule(ScheduleType.MONTHLY, date(2024, 1, 1), days_of_month=[1, 15])
        assert rule.get_dates_in_range(date(2024, 2, 1), date(2024, 2, 29)) == [
            date(2024, 2, 1),
            date(2024, 2, 15),
        ]

    def test_monthly_skips_impossible_days_in_february(self):
        rule = Schedule(
            ScheduleType.MONTHLY, date(2023, 1, 1), days_of_month=[29, 30, 31]
        )
        assert rule.get_dates_in_range(date(2023, 2, 1), date(2023, 2, 28)) == []
        assert rule.get_dates_in_range(date(2024, 2, 1), date(2024, 2, 29)) == [
            date(2024, 2, 29)
        ]
        assert rule.get_dates_in_range(date(2024, 1, 1), date(2024, 3, 31)) == [
            date(2024, 1, 29),
            date(2024, 1, 30),
            date(2024, 1, 31),
            date(2024, 2, 29),
            date(2024, 3, 29),
            date(2024, 3, 30),
            date(2024, 3, 31),
        ]

    def test_yearly_skips_feb_29_in_common_years(self):
        rule = Schedule(ScheduleType.YEARLY, date(2024, 2, 29))
        assert rule.get_dates_in_range(date(2024, 1, 1), date(2028, 12, 31)) == [
            date(2024, 2, 29),
            date(2028, 2, 29),
        ]

    def test_custom_steps_from_clamped_start(self):
        rule = Schedule(ScheduleType.CUSTOM, date(2024, 1, 1), interval=10)
        assert rule.get_dates_in_range(date(2024, 1, 5), date(2024, 1, 31)) == [
            date(2024, 1, 5),
            date(2024, 1, 15),
            date(2024, 1, 25),
        ]

    def test_window_clamped_to_rule_bounds(self):
        rule = Schedule(
            ScheduleType.DAILY, date(2024, 1, 10), end_date=date(2024, 1, 12)
        )
        assert rule.get_dates_in_range(date(2024, 1, 1), date(2024, 12, 31)) == [
            date(2024, 1, 10),
            date(2024, 1, 11),
            date(2024, 1, 12),
        ]
        assert rule.get_dates_in_range(date(2024, 2, 1), date(2024, 2, 5)) == []

    def test_epoch_day_variant_and_occurs_on(self):
        rule = Schedule(ScheduleType.MONTHLY, date(2024, 1, 1), days_of_month=[15])
        start = create_epoch_day(2024, 1, 1)
        end = create_epoch_day(2024, 3, 1)
        assert rule.get_days_in_range(start, end) == [
            create_epoch_day(2024, 1, 15),
            create_epoch_day(2024, 2, 15),
        ]
        assert rule.get_days_in_range(end, start) == []
        assert rule.occurs_on(create_epoch_day(2024, 2, 15))
        assert not rule.occurs_on(create_epoch_day(2024, 2, 16))

    def test_occurs_on_counts_custom_interval_from_start(self):
        rule = Schedule(
            ScheduleType.CUSTOM, date(1970, 1, 1), end_date=date(1970, 2, 1), interval=14
        )
        assert rule.occurs_on(0)
        assert rule.occurs_on(14)
        assert rule.occurs_on(28)
        assert not rule.occurs_on(1)
        assert not rule.occurs_on(30)
        assert not rule.occurs_on(-14)
        # day 42 is on the interval but past end_date
        assert not rule.occurs_on(42)


class TestScheduleRecords:
    """Record conversion."""

    def test_from_dict_defaults_to_monthly(self):
        rule = Schedule.from_dict({"startDate": "2024-01-01", "daysOfMonth": [1]})
        assert rule.type is ScheduleType.MONTHLY

    def test_from_dict_accepts_timestamps(self):
        rule = Schedule.from_dict(
            {
                "type": "weekly",
                "daysOfWeek": [1, 3],
                "startDate": "2024-01-01T00:00:00.000Z",
                "endDate": "2024-06-30T00:00:00.000Z",
            }
        )
        assert rule.start_date == date(2024, 1, 1)
        assert rule.end_date == date(2024, 6, 30)

    def test_from_dict_requires_start_date(self):
        with pytest.raises(InvalidScheduleError, match="startDate"):
            Schedule.from_dict({"type": "daily"})

    def test_to_dict_omits_absent_parameters(self):
        rule = Schedule(ScheduleType.CUSTOM, date(2024, 1, 1), interval=14)
        assert rule.to_dict() == {
            "type": "custom",
            "startDate": "2024-01-01",
            "interval": 14,
        }
