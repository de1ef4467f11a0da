"""
Shared utilities for entity strategies.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from finplanlab.core.entity import Entity
from finplanlab.core.ledger import LedgerEntry
from finplanlab.core.snapshot import Snapshot
from finplanlab.core.transaction import Transaction


def effective_window(
    entity: Entity, start_day: int, end_day: int
) -> tuple[int, int] | None:
    """
    Clamp a simulation window to the entity's ledger history.

    Returns None when the entity has no ledger or the clamped window is inverted.
    """
    earliest = entity.earliest_day
    if earliest is None:
        return None
    lo = max(start_day, earliest)
    if lo > end_day:
        return None
    return lo, end_day


def ledger_days_in_range(entity: Entity, start_day: int, end_day: int) -> list[int]:
    return [e.day for e in entity.ledger if start_day <= e.day <= end_day]


def sorted_unique(*groups: Iterable[int]) -> list[int]:
    """Merge day lists into one ascending, de-duplicated list."""
    days: set[int] = set()
    for group in groups:
        days.update(group)
    return sorted(days)


def ledger_correction(entity: Entity, entry: LedgerEntry, day: int) -> Transaction:
    """Correction copying a ledger entry's values verbatim onto the entity."""
    return Transaction(
        day=day,
        target_entity_id=entity.id,
        amount=entry.amount,
        share_quantity=entry.share_quantity,
        share_price=entry.share_price,
        is_correction=True,
    )


def latest_snapshot(snapshots: Sequence[Snapshot]) -> Snapshot | None:
    return snapshots[-1] if snapshots else None


def current_value(snapshots: Sequence[Snapshot]) -> float:
    """Value of the latest committed snapshot (0 when there is none)."""
    return snapshots[-1].value if snapshots else 0.0
