"""
Share-priced holding valuation strategy.
"""

from __future__ import annotations

from collections.abc import Sequence

from finplanlab.core.entity import Entity
from finplanlab.core.interfaces import IEntityStrategy
from finplanlab.core.snapshot import Snapshot
from finplanlab.core.transaction import Transaction
from finplanlab.core.utils import last_days_of_months_in_range

from .._ledger_utils import (
    effective_window,
    latest_snapshot,
    ledger_correction,
    ledger_days_in_range,
    sorted_unique,
)


class ValuationHolding(IEntityStrategy):
    """
    Holding valuation strategy (kind: 'holding').

    Stocks, ETFs and mutual funds tracked as share quantity times share price.
    Ledger entries record lots (quantity and price); between them the share
    price compounds monthly.

    Required Parameters (HoldingSpec):
        - symbol: Ticker (display only)
        - growth_rate: Annual share price growth compounded monthly

    Note:
        Month-end growth is a correction carrying only ``share_price``; the
        amount and share quantity from the prior snapshot are left untouched.
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
        last = latest_snapshot(snapshots)
        if growth_rate == 0 or last is None or last.share_price <= 0:
            return []

        return [
            Transaction(
                day=day,
                target_entity_id=entity.id,
                share_price=last.share_price * (1 + growth_rate / 12),
                is_correction=True,
            )
        ]
