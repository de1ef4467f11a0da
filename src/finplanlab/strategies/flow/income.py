"""
Recurring income flow strategy with growth.
"""

from __future__ import annotations

from finplanlab.core.entity import Entity

from ._recurring import RecurringFlow


class FlowIncome(RecurringFlow):
    """
    Recurring income flow strategy (kind: 'income').

    Salary, social security, windfalls. Each occurrence credits
    ``target_entity_id`` with the latest ledger amount grown at ``growth_rate``.
    A once-schedule models a one-off windfall.
    """

    sign = 1.0

    def counterparty(self, entity: Entity) -> str:
        return entity.spec.target_entity_id
