"""
Point-in-time value records produced by the simulation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Snapshot:
    """
    Value of one entity as of an epoch day.

    Snapshots are only ever produced by applying transactions; they are the sole
    authoritative history the simulation consults.

    Attributes:
        day: Epoch day the values apply from
        amount: Balance-style value
        share_quantity: Shares held (holding-style value)
        share_price: Price per share (holding-style value)
    """

    day: int
    amount: float = 0.0
    share_quantity: float = 0.0
    share_price: float = 0.0

    @property
    def value(self) -> float:
        """``amount`` when non-zero, otherwise ``share_quantity * share_price``."""
        if self.amount != 0:
            return self.amount
        return self.share_quantity * self.share_price
