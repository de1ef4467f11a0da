"""
Ledger entries: externally supplied manual value records for an entity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LedgerEntry:
    """
    A manual value record on a specific epoch day.

    Depending on the entity this is an opening balance, a correction, or a lot
    purchase (share quantity and price).

    Attributes:
        day: Epoch day of the entry
        amount: Dollar amount (balance-style entities, or base flow amount)
        share_quantity: Number of shares (holding-style entities)
        share_price: Price per share (holding-style entities)
        id: Optional identifier assigned by the persistence layer
    """

    day: int
    amount: float | None = None
    share_quantity: float | None = None
    share_price: float | None = None
    id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LedgerEntry:
        return cls(
            day=int(data["day"]),
            amount=data.get("amount"),
            share_quantity=data.get("shareQuantity"),
            share_price=data.get("sharePrice"),
            id=data.get("id"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"day": self.day}
        if self.id is not None:
            out["id"] = self.id
        if self.amount is not None:
            out["amount"] = self.amount
        if self.share_quantity is not None:
            out["shareQuantity"] = self.share_quantity
        if self.share_price is not None:
            out["sharePrice"] = self.share_price
        return out
