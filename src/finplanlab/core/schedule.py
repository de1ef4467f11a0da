"""
Recurrence rules for recurring entity behavior.

A `Schedule` answers one question: which calendar dates inside a window match the
rule? It is used for debt payments and for income/expense occurrences.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

import numpy as np

from .errors import InvalidScheduleError
from .utils import date_to_epoch_day, epoch_day_to_date, parse_date_string


class ScheduleType(str, Enum):
    """Supported recurrence rule types."""

    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"


def _normalize_days(values, low: int, high: int) -> tuple[int, ...] | None:
    if values is None:
        return None
    return tuple(sorted({int(v) for v in values if low <= int(v) <= high}))


@dataclass(frozen=True)
class Schedule:
    """
    Immutable recurrence rule.

    Attributes:
        type: Rule type (see `ScheduleType`)
        start_date: First date the rule can match
        end_date: Last date the rule can match (None = open ended)
        days_of_month: Matching days for monthly rules (1..31)
        days_of_week: Matching weekdays for weekly rules (0=Sunday..6=Saturday)
        interval: Step in days for custom rules (>= 1)

    Raises:
        InvalidScheduleError: If per-type parameters are missing or the window is inverted

    Example:
        ```python
        from datetime import date
        from finplanlab.core.schedule import Schedule, ScheduleType

        payday = Schedule(ScheduleType.MONTHLY, date(2024, 1, 1), days_of_month=(1, 15))
        payday.get_dates_in_range(date(2024, 2, 1), date(2024, 2, 29))
        # [date(2024, 2, 1), date(2024, 2, 15)]
        ```
    """

    type: ScheduleType
    start_date: date
    end_date: date | None = None
    days_of_month: tuple[int, ...] | None = None
    days_of_week: tuple[int, ...] | None = None
    interval: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", parse_date_string(self.start_date))
        if self.end_date is not None:
            object.__setattr__(self, "end_date", parse_date_string(self.end_date))

        raw = self.type.value if isinstance(self.type, ScheduleType) else str(self.type)
        try:
            rule_type = ScheduleType(raw.lower())
        except ValueError as exc:
            raise InvalidScheduleError(f"Unknown schedule type: {self.type}") from exc
        object.__setattr__(self, "type", rule_type)

        days_of_month = _normalize_days(self.days_of_month, 1, 31)
        days_of_week = _normalize_days(self.days_of_week, 0, 6)
        object.__setattr__(self, "days_of_month", days_of_month)
        object.__setattr__(self, "days_of_week", days_of_week)

        if rule_type is ScheduleType.MONTHLY and not days_of_month:
            raise InvalidScheduleError("Days of month are required for monthly schedule")
        if rule_type is ScheduleType.WEEKLY and not days_of_week:
            raise InvalidScheduleError("Days of week are required for weekly schedule")

        if self.interval is not None:
            object.__setattr__(self, "interval", int(self.interval))
        if rule_type is ScheduleType.CUSTOM and (self.interval is None or self.interval < 1):
            raise InvalidScheduleError("Interval of at least 1 day is required for custom schedule")

        if self.end_date is not None and self.start_date > self.end_date:
            raise InvalidScheduleError("Start date must be before end date")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Schedule:
        """
        Build a schedule from its record form.

        Keys: ``type`` (default ``monthly``), ``daysOfMonth``, ``daysOfWeek``,
        ``interval``, ``startDate`` and ``endDate`` (ISO date or timestamp strings).
        """
        if "startDate" not in data or data["startDate"] is None:
            raise InvalidScheduleError("Schedule startDate is required")
        end = data.get("endDate")
        return cls(
            type=data.get("type") or ScheduleType.MONTHLY,
            start_date=parse_date_string(data["startDate"]),
            end_date=parse_date_string(end) if end else None,
            days_of_month=data.get("daysOfMonth"),
            days_of_week=data.get("daysOfWeek"),
            interval=data.get("interval"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Record form of the schedule; absent parameters are omitted."""
        out: dict[str, Any] = {
            "type": self.type.value,
            "startDate": self.start_date.isoformat(),
        }
        if self.days_of_month is not None:
            out["daysOfMonth"] = list(self.days_of_month)
        if self.days_of_week is not None:
            out["daysOfWeek"] = list(self.days_of_week)
        if self.interval is not None:
            out["interval"] = self.interval
        if self.end_date is not None:
            out["endDate"] = self.end_date.isoformat()
        return out

    def get_dates_in_range(self, start: date, end: date) -> list[date]:
        """
        Dates matching the rule inside ``[start, end]``.

        The window is clamped to the rule's own ``[start_date, end_date]``; an empty
        clamped window yields an empty list.
        """
        lo = max(self.start_date, start)
        hi = min(self.end_date, end) if self.end_date is not None else end
        if lo > hi:
            return []

        if self.type is ScheduleType.ONCE:
            return [self.start_date] if lo <= self.start_date <= hi else []

        if self.type is ScheduleType.YEARLY:
            dates = []
            for year in range(lo.year, hi.year + 1):
                try:
                    candidate = self.start_date.replace(year=year)
                except ValueError:
                    # Feb 29 in a non-leap year
                    continue
                if lo <= candidate <= hi:
                    dates.append(candidate)
            return dates

        days = np.arange(np.datetime64(lo, "D"), np.datetime64(hi, "D") + 1)

        if self.type is ScheduleType.DAILY:
            selected = days
        elif self.type is ScheduleType.WEEKLY:
            # 1970-01-01 was a Thursday (4 with Sunday = 0)
            weekday = (days.astype("int64") + 4) % 7
            selected = days[np.isin(weekday, self.days_of_week)]
        elif self.type is ScheduleType.MONTHLY:
            day_of_month = (days - days.astype("datetime64[M]")).astype("int64") + 1
            selected = days[np.isin(day_of_month, self.days_of_month)]
        else:
            selected = days[:: self.interval]

        return [d.item() for d in selected]

    def get_days_in_range(self, start_day: int, end_day: int) -> list[int]:
        """Epoch-day variant of `get_dates_in_range`."""
        if start_day > end_day:
            return []
        dates = self.get_dates_in_range(
            epoch_day_to_date(start_day), epoch_day_to_date(end_day)
        )
        return [date_to_epoch_day(d) for d in dates]

    def occurs_on(self, day: int) -> bool:
        """
        True when the rule matches the given epoch day.

        Custom rules count their interval from ``start_date`` here, not from the
        queried day.
        """
        if self.type is ScheduleType.CUSTOM:
            start = date_to_epoch_day(self.start_date)
            if day < start:
                return False
            if self.end_date is not None and day > date_to_epoch_day(self.end_date):
                return False
            return (day - start) % self.interval == 0
        return bool(self.get_days_in_range(day, day))
