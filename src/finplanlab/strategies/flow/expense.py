"""
Recurring expense flow strategy with growth.
"""

from __future__ import annotations

from finplanlab.core.entity import Entity

from ._recurring import RecurringFlow


class FlowExpense(RecurringFlow):
    """
    Recurring expense flow strategy (kind: 'expense').

    Bills, spending, vacations. Each occurrence debits ``source_entity_id`` by
    the latest ledger amount grown at ``growth_rate`` (inflation).
    """

    sign = -1.0

    def counterparty(self, entity: Entity) -> str:
        return entity.spec.source_entity_id
