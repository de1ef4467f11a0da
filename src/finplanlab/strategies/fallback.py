"""
Fallback sink strategy.
"""

from __future__ import annotations

from collections.abc import Sequence

from finplanlab.core.entity import Entity
from finplanlab.core.interfaces import IEntityStrategy
from finplanlab.core.snapshot import Snapshot
from finplanlab.core.transaction import Transaction


class FallbackSink(IEntityStrategy):
    """
    Strategy for the synthetic "Cash" entity (kind: 'fallback').

    It only ever receives redirected transactions; it is never evaluated itself.
    """

    def get_simulation_days(
        self, entity: Entity, start_day: int, end_day: int
    ) -> list[int]:
        return []

    def simulate_day(
        self, entity: Entity, day: int, snapshots: Sequence[Snapshot]
    ) -> list[Transaction]:
        return []
