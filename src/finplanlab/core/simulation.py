"""
Simulation engine for replaying entity behavior over a day axis.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Iterable

import pandas as pd

from .entity import Entity
from .errors import ConfigError, TransactionOrderError
from .results import DataPoint, DataPointsByDay, data_points_to_frame, snapshots_to_frame
from .snapshot import Snapshot
from .transaction import Transaction
from .utils import create_epoch_day, epoch_day_to_date, today_epoch_day

logger = logging.getLogger(__name__)

DAYS_PER_PROJECTION_YEAR = 365


class Simulation:
    """
    Deterministic day-stepped projection over a set of entities.

    The whole replay runs eagerly inside the constructor:

    1. The window starts on the earliest first-ledger day across all entities (or
       ``today_day`` when no entity has history) and spans
       ``projection_years * 365`` days.
    2. Each entity is bucketed under every day it must be evaluated on.
    3. Days are visited in ascending order, and within a day entities are visited
       in the order they were supplied. Every transaction an entity emits is
       applied immediately, so later entities on the same day observe it.
    4. Transactions aimed at unknown entities are redirected to the fallback
       entity.

    After construction every method is a pure read.

    Attributes:
        start_day: First epoch day of the window
        end_day: Last epoch day of the window (inclusive)

    Raises:
        ConfigError: If the entity set does not contain exactly one fallback entity
        TransactionOrderError: If a transaction predates its target's history (bug)

    Example:
        ```python
        from finplanlab import Simulation, new_fallback_entity

        sim = Simulation([new_fallback_entity(), savings, salary], projection_years=30)
        sim.get_net_worth(sim.end_day)
        sim.yearly()  # DataFrame of Dec 31 figures
        ```
    """

    def __init__(
        self,
        entities: Iterable[Entity],
        projection_years: int,
        today_day: int | None = None,
    ):
        entities = list(entities)

        fallbacks = [e for e in entities if e.is_fallback]
        if len(fallbacks) != 1:
            raise ConfigError(
                f"Simulation requires exactly one fallback entity, got {len(fallbacks)}"
            )
        self._fallback = fallbacks[0]

        self._entities: dict[str, Entity] = {}
        self._snapshots: dict[str, list[Snapshot]] = {}
        for entity in entities:
            self._entities[entity.id] = entity
            self._snapshots[entity.id] = []
        self._data_points: DataPointsByDay | None = None

        first_days = [e.earliest_day for e in entities if e.earliest_day is not None]
        if first_days:
            self.start_day = min(first_days)
        else:
            self.start_day = today_day if today_day is not None else today_epoch_day()
        self.end_day = self.start_day + projection_years * DAYS_PER_PROJECTION_YEAR

        self._run()

    @property
    def entities(self) -> list[Entity]:
        return list(self._entities.values())

    @property
    def fallback_entity(self) -> Entity:
        return self._fallback

    def get_entity_value_for_day(self, entity_id: str, day: int) -> float:
        """
        Value of the latest snapshot at or before ``day``.

        Returns 0 for unknown entities and for days before the first snapshot.
        """
        snapshots = self._snapshots.get(entity_id)
        if not snapshots:
            return 0.0
        idx = bisect_right(snapshots, day, key=lambda s: s.day)
        if idx == 0:
            return 0.0
        return snapshots[idx - 1].value

    def get_assets(self, day: int) -> float:
        """Sum of all positive entity values on ``day``."""
        total = 0.0
        for entity_id in self._entities:
            value = self.get_entity_value_for_day(entity_id, day)
            if value > 0:
                total += value
        return total

    def get_debt(self, day: int) -> float:
        """Sum of the absolute values of all negative entity values on ``day``."""
        total = 0.0
        for entity_id in self._entities:
            value = self.get_entity_value_for_day(entity_id, day)
            if value < 0:
                total += abs(value)
        return total

    def get_net_worth(self, day: int) -> float:
        return self.get_assets(day) - self.get_debt(day)

    def get_data_points_for_all_years(self) -> DataPointsByDay:
        """
        Aggregates sampled on December 31 of every calendar year the window touches.

        The map is computed once and memoized.
        """
        if self._data_points is None:
            start_year = epoch_day_to_date(self.start_day).year
            end_year = epoch_day_to_date(self.end_day).year
            points: DataPointsByDay = {}
            for year in range(start_year, end_year + 1):
                last_day = create_epoch_day(year, 12, 31)
                assets = self.get_assets(last_day)
                debt = self.get_debt(last_day)
                points[last_day] = DataPoint(
                    assets=assets, debt=debt, net_worth=assets - debt
                )
            self._data_points = points
        return self._data_points

    def get_snapshots(self, entity_id: str) -> tuple[Snapshot, ...]:
        """Committed snapshot history of an entity (empty if unknown)."""
        return tuple(self._snapshots.get(entity_id, ()))

    def history(self, entity_id: str) -> pd.DataFrame:
        """Snapshot history of an entity as a DataFrame indexed by date."""
        return snapshots_to_frame(self.get_snapshots(entity_id))

    def yearly(self) -> pd.DataFrame:
        """Year-end data points as a DataFrame indexed by date."""
        return data_points_to_frame(self.get_data_points_for_all_years())

    def _run(self) -> None:
        entities_by_day: dict[int, list[Entity]] = {}
        for entity in self._entities.values():
            for day in entity.get_simulation_days(self.start_day, self.end_day):
                entities_by_day.setdefault(day, []).append(entity)

        logger.debug(
            "Simulating %d entities over days %d..%d (%d active days)",
            len(self._entities),
            self.start_day,
            self.end_day,
            len(entities_by_day),
        )

        for day in sorted(entities_by_day):
            for entity in entities_by_day[day]:
                for transaction in entity.simulate_day(day, self._snapshots[entity.id]):
                    self._apply_transaction(transaction)

    def _apply_transaction(self, transaction: Transaction) -> None:
        entity = self._entities.get(transaction.target_entity_id)
        if entity is None:
            logger.debug(
                "Redirecting transaction on day %d from unknown entity '%s' to fallback",
                transaction.day,
                transaction.target_entity_id,
            )
            entity = self._fallback
            transaction = transaction.retarget(entity.id)

        snapshots = self._snapshots[entity.id]
        last = snapshots[-1] if snapshots else None

        if last is not None and transaction.day < last.day:
            raise TransactionOrderError(
                f"Transaction applied out of order (latest snapshot day {last.day})",
                entity_id=entity.id,
                day=transaction.day,
            )

        amount = last.amount if last else 0.0
        share_quantity = last.share_quantity if last else 0.0
        share_price = last.share_price if last else 0.0

        if transaction.is_correction:
            if transaction.amount is not None:
                amount = transaction.amount
            if transaction.share_quantity is not None:
                share_quantity = transaction.share_quantity
            if transaction.share_price is not None:
                share_price = transaction.share_price
        else:
            amount += transaction.amount or 0.0
            share_quantity += transaction.share_quantity or 0.0
            share_price += transaction.share_price or 0.0

        snapshot = Snapshot(
            day=transaction.day,
            amount=amount,
            share_quantity=share_quantity,
            share_price=share_price,
        )

        if last is not None and last.day == transaction.day:
            snapshots[-1] = snapshot
        else:
            snapshots.append(snapshot)
