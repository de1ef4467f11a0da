"""
Tests for month-end compounding balances (accounts and possessions).
"""

import pytest
from finplanlab import (
    Entity,
    GrowthSpec,
    K,
    LedgerEntry,
    Simulation,
    new_fallback_entity,
)
from finplanlab.strategies.valuation.account import ValuationAccount
from finplanlab.strategies.valuation.possession import ValuationPossession


def _balance(kind, amount, growth_rate, ledger=None):
    return Entity(
        id="e",
        name="E",
        kind=kind,
        spec=GrowthSpec(growth_rate=growth_rate),
        ledger=ledger or [LedgerEntry(day=0, amount=amount)],
    )


class TestValuationAccount:
    """Account valuation strategy."""

    def test_simulation_days_are_ledger_days_and_month_ends(self):
        entity = _balance(
            K.ACCOUNT,
            0,
            0.05,
            ledger=[LedgerEntry(day=5, amount=100.0), LedgerEntry(day=30, amount=90.0)],
        )
        days = ValuationAccount().get_simulation_days(entity, 0, 60)
        assert days == [5, 30, 58]

    def test_no_days_without_ledger_or_after_window(self):
        empty = Entity(id="e", name="E", kind=K.ACCOUNT, spec=GrowthSpec())
        assert ValuationAccount().get_simulation_days(empty, 0, 365) == []
        late = _balance(K.ACCOUNT, 10.0, 0.0, ledger=[LedgerEntry(day=400, amount=1.0)])
        assert ValuationAccount().get_simulation_days(late, 0, 365) == []

    def test_ledger_day_emits_correction(self):
        entity = _balance(K.ACCOUNT, 250.0, 0.05)
        (tx,) = ValuationAccount().simulate_day(entity, 0, [])
        assert tx.is_correction
        assert tx.amount == 250.0
        assert tx.target_entity_id == "e"

    def test_month_end_growth_delta(self):
        entity = _balance(K.ACCOUNT, 1_200.0, 0.12)
        sim = Simulation([new_fallback_entity(), entity], 1, 0)
        (tx,) = ValuationAccount().simulate_day(entity, 30, sim.get_snapshots("e")[:1])
        assert not tx.is_correction
        assert tx.amount == pytest.approx(12.0)

    def test_ledger_entry_wins_over_growth(self):
        entity = _balance(
            K.ACCOUNT,
            0,
            0.05,
            ledger=[LedgerEntry(day=0, amount=10_000.0), LedgerEntry(day=30, amount=5_000.0)],
        )
        sim = Simulation([new_fallback_entity(), entity], 1, 0)
        assert sim.get_entity_value_for_day("e", 30) == 5_000.0
        assert sim.get_entity_value_for_day("e", 58) == pytest.approx(5_000 * (1 + 0.05 / 12))

    def test_zero_balance_or_rate_emits_nothing(self):
        for amount, rate in [(0.0, 0.05), (1_000.0, 0.0)]:
            entity = _balance(K.ACCOUNT, amount, rate)
            sim = Simulation([new_fallback_entity(), entity], 1, 0)
            assert len(sim.get_snapshots("e")) == 1

    def test_negative_balance_grows_more_negative(self):
        entity = _balance(K.ACCOUNT, -1_200.0, 0.12)
        sim = Simulation([new_fallback_entity(), entity], 1, 0)
        assert sim.get_entity_value_for_day("e", 30) == pytest.approx(-1_212.0)


class TestValuationPossession:
    """Possession valuation strategy."""

    def test_is_registered_for_possessions(self):
        assert isinstance(_balance(K.POSSESSION, 1.0, 0.0).strategy, ValuationPossession)

    def test_appreciation(self):
        house = _balance(K.POSSESSION, 300_000.0, 0.03)
        sim = Simulation([new_fallback_entity(), house], 1, 0)
        assert sim.get_entity_value_for_day("e", 30) == pytest.approx(300_750.0)

    def test_depreciation(self):
        car = _balance(K.POSSESSION, 20_000.0, -0.12)
        sim = Simulation([new_fallback_entity(), car], 1, 0)
        assert sim.get_entity_value_for_day("e", 30) == pytest.approx(19_800.0)
        assert sim.get_entity_value_for_day("e", 58) == pytest.approx(19_602.0)
