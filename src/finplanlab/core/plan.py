"""
Plans: a person's scenario and the entities to project for it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

import pandas as pd

from .entity import Entity, new_fallback_entity
from .kinds import K
from .results import DataPointsByDay
from .serialization import deserialize_entities, serialize_entity
from .simulation import Simulation
from .utils import (
    calculate_age,
    date_to_epoch_day,
    parse_date_string,
    today_epoch_day,
)

DAYS_PER_YEAR_LOOKBACK = 365


@dataclass(frozen=True)
class PlanConfig:
    """Configuration options for plan projection."""

    years_past_retirement: int = 15
    min_projection_years: int = 1


@dataclass
class Plan:
    """
    Scenario information plus a collection of entities that can be simulated.

    The projection horizon runs until ``years_past_retirement`` years after the
    retirement age (never shorter than ``min_projection_years``). A fresh fallback
    entity is added on every simulation run.

    Attributes:
        id: Plan identifier
        name: Human-readable name
        birth_date: ``YYYY-MM-DD`` birth date of the plan owner
        retirement_age: Age at which the owner retires
        entities: Entities to project (without the fallback)
        today_day: Epoch day treated as "today" (defaults to the current date)
        config: Projection options

    Example:
        ```python
        plan = Plan.from_dict(record, today_day=create_epoch_day(2026, 1, 1))
        plan.simulate().get_net_worth_for_today()
        ```
    """

    id: str
    name: str
    birth_date: str
    retirement_age: int
    entities: list[Entity] = field(default_factory=list)
    today_day: int | None = None
    config: PlanConfig = field(default_factory=PlanConfig)
    _simulation: Simulation | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.today_day is None:
            self.today_day = today_epoch_day()

    @classmethod
    def from_dict(cls, data: dict[str, Any], today_day: int | None = None) -> Plan:
        """
        Create a Plan from a plan record with nested entity records.

        Keys: ``id``, ``name``, ``birthDate``, ``retirementAge``, ``entities``.
        """
        return cls(
            id=data["id"],
            name=data["name"],
            birth_date=data["birthDate"],
            retirement_age=int(data["retirementAge"]),
            entities=deserialize_entities(data.get("entities") or []),
            today_day=today_day,
        )

    def to_dict(self, include_entities: bool = False) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "birthDate": self.birth_date,
            "retirementAge": self.retirement_age,
        }
        if include_entities:
            out["entities"] = [serialize_entity(e) for e in self.entities]
        return out

    @property
    def projection_years(self) -> int:
        current_age = calculate_age(self.birth_date, self.today_day)
        target_age = self.retirement_age + self.config.years_past_retirement
        return max(self.config.min_projection_years, target_age - current_age)

    @property
    def simulation(self) -> Simulation | None:
        return self._simulation

    def simulate(self) -> Plan:
        """Run the projection once; later calls are no-ops. Chainable."""
        if self._simulation is None:
            self._simulation = Simulation(
                [new_fallback_entity(), *self.entities],
                self.projection_years,
                self.today_day,
            )
        return self

    def filter(self, active_entities: list[Entity]) -> Plan:
        """New, unsimulated plan keeping only the given entities."""
        active_ids = {e.id for e in active_entities}
        return Plan(
            id=self.id,
            name=self.name,
            birth_date=self.birth_date,
            retirement_age=self.retirement_age,
            entities=[e for e in self.entities if e.id in active_ids],
            today_day=self.today_day,
            config=self.config,
        )

    def with_updates(
        self,
        name: str | None = None,
        birth_date: str | None = None,
        retirement_age: int | None = None,
    ) -> Plan:
        """New, unsimulated plan with updated metadata."""
        return Plan(
            id=self.id,
            name=name if name is not None else self.name,
            birth_date=birth_date if birth_date is not None else self.birth_date,
            retirement_age=(
                retirement_age if retirement_age is not None else self.retirement_age
            ),
            entities=self.entities,
            today_day=self.today_day,
            config=self.config,
        )

    def get_simulation_start_day(self) -> int:
        return self._simulation.start_day if self._simulation else 0

    def get_simulation_end_day(self) -> int:
        return self._simulation.end_day if self._simulation else 0

    def get_data_points_for_all_years(self) -> DataPointsByDay:
        if self._simulation is None:
            return {}
        return self._simulation.get_data_points_for_all_years()

    def yearly(self) -> pd.DataFrame:
        """Year-end figures as a DataFrame (simulates on demand)."""
        return self.simulate()._simulation.yearly()

    def get_retirement_day(self) -> int:
        """Epoch day of the owner's birthday in the retirement year."""
        born = parse_date_string(self.birth_date)
        year = born.year + self.retirement_age
        try:
            retirement = born.replace(year=year)
        except ValueError:
            # Feb 29 birthday in a non-leap retirement year rolls to Mar 1
            retirement = date(year, 3, 1)
        return date_to_epoch_day(retirement)

    def get_assets_for_today(self) -> float:
        return self._query("get_assets", self.today_day)

    def get_assets_for_last_year(self) -> float:
        return self._query("get_assets", self.today_day - DAYS_PER_YEAR_LOOKBACK)

    def get_debt_for_today(self) -> float:
        return self._query("get_debt", self.today_day)

    def get_debt_for_last_year(self) -> float:
        return self._query("get_debt", self.today_day - DAYS_PER_YEAR_LOOKBACK)

    def get_net_worth_for_today(self) -> float:
        return self._query("get_net_worth", self.today_day)

    def get_net_worth_for_last_year(self) -> float:
        return self._query("get_net_worth", self.today_day - DAYS_PER_YEAR_LOOKBACK)

    def get_entity_value(self, entity: Entity) -> float:
        """Simulated value of an entity for today."""
        if self._simulation is None:
            return 0.0
        return self._simulation.get_entity_value_for_day(entity.id, self.today_day)

    def get_entity_display_value(self, entity_id: str) -> float:
        """
        Headline value for an entity.

        Income and expenses show their latest ledger amount (the per-occurrence
        figure); everything else shows today's simulated value.
        """
        entity = next((e for e in self.entities if e.id == entity_id), None)
        if entity is None:
            return 0.0

        if entity.kind in (K.INCOME, K.EXPENSE):
            if not entity.ledger:
                return 0.0
            return entity.ledger[-1].amount or 0.0

        return self.get_entity_value(entity)

    def _query(self, method: str, day: int) -> float:
        if self._simulation is None:
            return 0.0
        return getattr(self._simulation, method)(day)
