"""
Strategy interface protocols for FinPlanLab.
Defines the contract that every entity behavior must satisfy.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .snapshot import Snapshot
from .transaction import Transaction

if TYPE_CHECKING:
    # Only imported for type checking to avoid runtime cycles
    from .entity import Entity


@runtime_checkable
class IEntityStrategy(Protocol):
    """
    Contract for entity behaviors, selected by the entity's ``kind``.
    Responsibilities: decide which days an entity must be evaluated on, and which
    transactions it emits on each of those days.
    """

    def get_simulation_days(
        self, entity: Entity, start_day: int, end_day: int
    ) -> list[int]:
        """
        Ascending, de-duplicated epoch days within
        ``[max(start_day, entity.earliest_day), end_day]``.
        Empty when that window is inverted or the entity has no ledger.
        """
        ...

    def simulate_day(
        self, entity: Entity, day: int, snapshots: Sequence[Snapshot]
    ) -> list[Transaction]:
        """
        Transactions for ``day`` given the entity's own committed history.

        Must not mutate ``snapshots`` and must not read other entities' state.
        """
        ...


__all__ = ["IEntityStrategy"]
