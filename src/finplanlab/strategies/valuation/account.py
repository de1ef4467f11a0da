"""
Interest-bearing account valuation strategy.
"""

from __future__ import annotations

from collections.abc import Sequence

from finplanlab.core.entity import Entity
from finplanlab.core.interfaces import IEntityStrategy
from finplanlab.core.snapshot import Snapshot
from finplanlab.core.transaction import Transaction
from finplanlab.core.utils import last_days_of_months_in_range

from .._ledger_utils import (
    current_value,
    effective_window,
    ledger_correction,
    ledger_days_in_range,
    sorted_unique,
)


class ValuationAccount(IEntityStrategy):
    """
    Account valuation strategy (kind: 'account').

    Models checking, savings or brokerage balances that compound monthly. The
    balance is set by ledger entries and grows on every month-end in between.

    Required Parameters (GrowthSpec):
        - growth_rate: Annual rate compounded monthly (e.g., 0.05 for 5%)

    Note:
        - A ledger entry always wins over growth on the same day (ledger precedence)
        - Growth is a delta of ``value * growth_rate / 12`` on each month-end
        - Zero balances and zero rates emit nothing
    """

    def get_simulation_days(
        self, entity: Entity, start_day: int, end_day: int
    ) -> list[int]:
        window = effective_window(entity, start_day, end_day)
        if window is None:
            return []
        lo, hi = window
        return sorted_unique(
            ledger_days_in_range(entity, lo, hi),
            last_days_of_months_in_range(lo, hi),
        )

    def simulate_day(
        self, entity: Entity, day: int, snapshots: Sequence[Snapshot]
    ) -> list[Transaction]:
        entry = entity.ledger_entry_for_day(day)
        if entry is not None:
            return [ledger_correction(entity, entry, day)]

        growth_rate = entity.spec.growth_rate
        value = current_value(snapshots)
        if growth_rate == 0 or value == 0:
            return []

        growth = value * (growth_rate / 12)
        return [Transaction(day=day, target_entity_id=entity.id, amount=growth)]
