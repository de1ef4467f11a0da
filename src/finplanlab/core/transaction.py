"""
Instructions to change an entity's value on a single day.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Transaction:
    """
    A value change for one target entity on one epoch day.

    Fields left as ``None`` are absent. A correction (``is_correction=True``)
    overrides only the present fields; a delta adds only the present fields to the
    target's last committed values.

    Attributes:
        day: Epoch day the change applies to
        target_entity_id: Entity whose history receives the change
        amount: Amount override or delta
        share_quantity: Share quantity override or delta
        share_price: Share price override or delta
        is_correction: Interpret values as overrides instead of deltas
    """

    day: int
    target_entity_id: str
    amount: float | None = None
    share_quantity: float | None = None
    share_price: float | None = None
    is_correction: bool = False

    def retarget(self, entity_id: str) -> Transaction:
        """Same change aimed at a different entity."""
        return replace(self, target_entity_id=entity_id)
