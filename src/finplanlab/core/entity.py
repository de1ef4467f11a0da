"""
Entities: anything a user tracks in a plan and wants projected.

Behavior is determined by the ``kind`` discriminator, not by subclassing. Each kind
maps to one strategy object in `StrategyRegistry`; the entity itself is an
immutable value object holding identity, a ledger, and a kind-specific spec.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .errors import ConfigError
from .interfaces import IEntityStrategy
from .kinds import K
from .ledger import LedgerEntry
from .snapshot import Snapshot
from .specs import EntitySpec, FallbackSpec
from .transaction import Transaction

FALLBACK_ENTITY_ID = "__fallback__"

# Global registry mapping kind strings to strategy implementations
StrategyRegistry: dict[str, IEntityStrategy] = {}


@dataclass(frozen=True)
class Entity:
    """
    A financial entity with an ordered ledger of manual entries.

    Attributes:
        id: Unique, stable identifier within a plan
        name: Human-readable name
        kind: Behavior discriminator (see `finplanlab.core.kinds.K`)
        spec: Kind-specific parameters (see `finplanlab.core.specs`)
        template_key: Display-only template tag (e.g. 'savings', 'mortgage')
        parent_id: Optional parent for UI grouping; not used by the simulation
        ledger: Ledger entries ordered ascending by day

    Example:
        ```python
        from finplanlab import Entity, GrowthSpec, K, LedgerEntry

        savings = Entity(
            id="savings",
            name="Savings",
            kind=K.ACCOUNT,
            spec=GrowthSpec(growth_rate=0.04),
            template_key="savings",
            ledger=[LedgerEntry(day=19723, amount=10_000)],
        )
        ```
    """

    id: str
    name: str
    kind: str
    spec: EntitySpec
    template_key: str = ""
    parent_id: str | None = None
    ledger: tuple[LedgerEntry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", self.kind.lower())
        object.__setattr__(self, "ledger", tuple(self.ledger))

    @property
    def strategy(self) -> IEntityStrategy:
        """Strategy wired to this entity's kind."""
        try:
            return StrategyRegistry[self.kind]
        except KeyError:
            raise ConfigError(
                f"Entity '{self.id}' ({self.kind}) has no strategy configured"
            ) from None

    @property
    def is_fallback(self) -> bool:
        return self.kind == K.FALLBACK

    @property
    def earliest_day(self) -> int | None:
        """Day of the first ledger entry, or None for an empty ledger."""
        return self.ledger[0].day if self.ledger else None

    def ledger_entry_for_day(self, day: int) -> LedgerEntry | None:
        """The ledger entry recorded exactly on ``day``, if any."""
        for entry in self.ledger:
            if entry.day == day:
                return entry
        return None

    def latest_ledger_entry(self, day: int) -> LedgerEntry | None:
        """The most recent ledger entry on or before ``day``."""
        for entry in reversed(self.ledger):
            if entry.day <= day:
                return entry
        return None

    def get_simulation_days(self, start_day: int, end_day: int) -> list[int]:
        """Days within ``[start_day, end_day]`` on which this entity must be evaluated."""
        return self.strategy.get_simulation_days(self, start_day, end_day)

    def simulate_day(
        self, day: int, snapshots: Sequence[Snapshot]
    ) -> list[Transaction]:
        """Transactions this entity emits on ``day``."""
        return self.strategy.simulate_day(self, day, snapshots)

    def to_dict(self) -> dict[str, Any]:
        """Record form of the entity (see `finplanlab.core.serialization`)."""
        from .serialization import serialize_entity

        return serialize_entity(self)


def new_fallback_entity() -> Entity:
    """
    Create the synthetic "Cash" sink.

    Transactions whose target cannot be resolved are redirected here. It never
    emits transactions of its own and cannot be serialized.
    """
    return Entity(
        id=FALLBACK_ENTITY_ID,
        name="Cash",
        kind=K.FALLBACK,
        spec=FallbackSpec(),
        template_key="fallback",
    )
