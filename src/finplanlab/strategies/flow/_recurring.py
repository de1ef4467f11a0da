"""
Shared behavior for recurring income and expense flows.
"""

from __future__ import annotations

from collections.abc import Sequence

from finplanlab.core.entity import Entity
from finplanlab.core.interfaces import IEntityStrategy
from finplanlab.core.snapshot import Snapshot
from finplanlab.core.transaction import Transaction

from .._ledger_utils import effective_window

DAYS_PER_YEAR = 365.25


def grown_amount(base: float, growth_rate: float, elapsed_days: int) -> float:
    """``base`` grown continuously at an annual rate over ``elapsed_days``."""
    return base * (1 + growth_rate) ** (elapsed_days / DAYS_PER_YEAR)


class RecurringFlow(IEntityStrategy):
    """
    Base strategy for schedule-driven flows.

    Simulation days are the schedule's occurrences only; ledger days are not
    evaluated unless they coincide with an occurrence. On each occurrence the
    most recent ledger amount on or before the day is grown from that entry's
    day and emitted as a single delta against the counterparty entity.

    Subclasses define the counterparty and the sign.
    """

    sign: float = 1.0

    def counterparty(self, entity: Entity) -> str:
        raise NotImplementedError

    def get_simulation_days(
        self, entity: Entity, start_day: int, end_day: int
    ) -> list[int]:
        window = effective_window(entity, start_day, end_day)
        if window is None:
            return []
        lo, hi = window
        return sorted(set(entity.spec.schedule.get_days_in_range(lo, hi)))

    def simulate_day(
        self, entity: Entity, day: int, snapshots: Sequence[Snapshot]
    ) -> list[Transaction]:
        entry = entity.latest_ledger_entry(day)
        if entry is None:
            return []

        base = entry.amount or 0.0
        if base == 0:
            return []

        amount = grown_amount(base, entity.spec.growth_rate, day - entry.day)
        return [
            Transaction(
                day=day,
                target_entity_id=self.counterparty(entity),
                amount=self.sign * amount,
            )
        ]
