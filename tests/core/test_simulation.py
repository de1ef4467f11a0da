"""
Tests for the day-stepped simulation engine.
"""

from datetime import date

import pytest
from finplanlab import (
    FALLBACK_ENTITY_ID,
    ConfigError,
    Entity,
    GrowthSpec,
    IncomeSpec,
    K,
    LedgerEntry,
    Schedule,
    ScheduleType,
    Simulation,
    StrategyRegistry,
    Transaction,
    TransactionOrderError,
    new_fallback_entity,
)


def _account(entity_id, amount, growth_rate=0.0, day=0):
    return Entity(
        id=entity_id,
        name=entity_id.title(),
        kind=K.ACCOUNT,
        spec=GrowthSpec(growth_rate=growth_rate),
        ledger=[LedgerEntry(day=day, amount=amount)],
    )


def _income(entity_id, amount, target):
    return Entity(
        id=entity_id,
        name=entity_id.title(),
        kind=K.INCOME,
        spec=IncomeSpec(
            schedule=Schedule(ScheduleType.MONTHLY, date(1970, 1, 1), days_of_month=[1]),
            target_entity_id=target,
        ),
        ledger=[LedgerEntry(day=0, amount=amount)],
    )


def _simulate(*entities, years=1, today_day=0):
    return Simulation([new_fallback_entity(), *entities], years, today_day)


class TestSimulationWindow:
    """Start and end of the projection window."""

    def test_starts_on_earliest_ledger_day(self):
        sim = _simulate(_account("a", 100.0, day=40), _account("b", 100.0, day=10))
        assert sim.start_day == 10
        assert sim.end_day == 10 + 365

    def test_starts_today_without_history(self):
        sim = _simulate(years=2, today_day=100)
        assert sim.start_day == 100
        assert sim.end_day == 100 + 730

    def test_day_zero_is_a_valid_start(self):
        sim = _simulate(_account("a", 100.0, day=0), today_day=500)
        assert sim.start_day == 0


class TestSimulationSetup:
    """Construction-time validation."""

    def test_requires_fallback(self):
        with pytest.raises(ConfigError, match="exactly one fallback"):
            Simulation([_account("a", 1.0)], 1, 0)

    def test_rejects_two_fallbacks(self):
        with pytest.raises(ConfigError, match="exactly one fallback"):
            Simulation([new_fallback_entity(), new_fallback_entity()], 1, 0)

    def test_unregistered_kind(self):
        stray = Entity(id="x", name="X", kind="mystery", spec=GrowthSpec())
        with pytest.raises(ConfigError, match="no strategy configured"):
            _simulate(stray)


class TestSimulationQueries:
    """Point-in-time reads after the replay."""

    def test_single_account_scenario(self):
        sim = _simulate(_account("savings", 10_000.0, growth_rate=0.05))
        assert sim.get_entity_value_for_day("savings", 29) == pytest.approx(10_000.0)
        assert sim.get_assets(31) == pytest.approx(10_041.67, abs=0.01)
        assert sim.get_debt(31) == 0.0
        assert sim.get_net_worth(31) == pytest.approx(10_041.67, abs=0.01)

    def test_twelve_month_ends_compound(self):
        sim = _simulate(_account("savings", 10_000.0, growth_rate=0.05))
        assert sim.get_entity_value_for_day("savings", 364) == pytest.approx(
            10_511.62, abs=0.01
        )

    def test_zero_before_first_snapshot_and_unknown_entity(self):
        sim = _simulate(_account("a", 500.0, day=10))
        assert sim.get_entity_value_for_day("a", 9) == 0.0
        assert sim.get_entity_value_for_day("a", 10) == 500.0
        assert sim.get_entity_value_for_day("nope", 10) == 0.0

    def test_lookup_holds_last_value_between_snapshots(self):
        sim = _simulate(_account("a", 500.0, day=10))
        assert sim.get_entity_value_for_day("a", 10_000) == 500.0

    def test_assets_and_debt_split_by_sign(self):
        card = _account("card", -300.0)
        sim = _simulate(_account("cash", 1_000.0), card)
        assert sim.get_assets(0) == 1_000.0
        assert sim.get_debt(0) == 300.0
        assert sim.get_net_worth(0) == 700.0

    def test_yearly_data_points_memoized(self):
        sim = _simulate(_account("savings", 10_000.0, growth_rate=0.05))
        points = sim.get_data_points_for_all_years()
        assert sorted(points) == [364, 729]
        assert points[364].assets == pytest.approx(10_511.62, abs=0.01)
        assert points[364].net_worth == points[364].assets - points[364].debt
        assert sim.get_data_points_for_all_years() is points

    def test_history_and_yearly_frames(self):
        sim = _simulate(_account("savings", 10_000.0, growth_rate=0.05))
        history = sim.history("savings")
        assert list(history.columns) == [
            "day",
            "amount",
            "share_quantity",
            "share_price",
            "value",
        ]
        assert len(history) == 13
        yearly = sim.yearly()
        assert list(yearly.columns) == ["day", "assets", "debt", "net_worth"]
        assert yearly.index.name == "date"


class TestTransactionApplication:
    """Redirects, ordering and same-day replacement."""

    def test_unknown_target_goes_to_fallback(self):
        sim = _simulate(_income("salary", 1_000.0, target="missing"))
        assert sim.get_entity_value_for_day(FALLBACK_ENTITY_ID, 0) == 1_000.0
        assert sim.get_assets(0) == 1_000.0
        assert sim.fallback_entity.name == "Cash"

    def test_same_day_transactions_replace_snapshot(self):
        checking = _account("checking", 0.0)
        sim = _simulate(checking, _income("salary", 1_000.0, target="checking"))
        snapshots = sim.get_snapshots("checking")
        # First of every month, 1970-01-01 through 1971-01-01
        assert [s.day for s in snapshots] == [
            0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365
        ]
        assert snapshots[0].amount == 1_000.0

    def test_entity_order_matters_within_a_day(self):
        # The ledger correction runs after the income and overwrites it
        checking = _account("checking", 0.0)
        sim = _simulate(_income("salary", 1_000.0, target="checking"), checking)
        assert sim.get_entity_value_for_day("checking", 0) == 0.0
        assert sim.get_entity_value_for_day("checking", 31) == 1_000.0

    def test_backdated_transaction_aborts(self, monkeypatch):
        class Backdating:
            def get_simulation_days(self, entity, start_day, end_day):
                return [0, 10]

            def simulate_day(self, entity, day, snapshots):
                transactions = [Transaction(day=day, target_entity_id=entity.id, amount=1.0)]
                if day == 10:
                    transactions.append(
                        Transaction(day=5, target_entity_id=entity.id, amount=1.0)
                    )
                return transactions

        monkeypatch.setitem(StrategyRegistry, "backdating", Backdating())
        entity = Entity(
            id="odd",
            name="Odd",
            kind="backdating",
            spec=GrowthSpec(),
            ledger=[LedgerEntry(day=0, amount=1.0)],
        )
        with pytest.raises(TransactionOrderError) as exc_info:
            _simulate(entity)
        assert exc_info.value.entity_id == "odd"
        assert exc_info.value.day == 5
