"""
Tests for share-priced holdings.
"""

import pytest
from finplanlab import (
    Entity,
    HoldingSpec,
    K,
    LedgerEntry,
    Simulation,
    Snapshot,
    new_fallback_entity,
)
from finplanlab.strategies.valuation.holding import ValuationHolding


def _holding(growth_rate, ledger=None):
    return Entity(
        id="vti",
        name="VTI",
        kind=K.HOLDING,
        spec=HoldingSpec(symbol="VTI", growth_rate=growth_rate),
        ledger=ledger or [LedgerEntry(day=0, share_quantity=10.0, share_price=100.0)],
    )


class TestValuationHolding:
    """Holding valuation strategy."""

    def test_ledger_lot_sets_quantity_and_price(self):
        sim = Simulation([new_fallback_entity(), _holding(0.0)], 1, 0)
        (snap,) = sim.get_snapshots("vti")
        assert snap.share_quantity == 10.0
        assert snap.share_price == 100.0
        assert snap.value == 1_000.0

    def test_price_compounds_on_month_ends(self):
        sim = Simulation([new_fallback_entity(), _holding(0.12)], 1, 0)
        assert sim.get_entity_value_for_day("vti", 30) == pytest.approx(1_010.0)
        assert sim.get_entity_value_for_day("vti", 58) == pytest.approx(1_020.1)

    def test_growth_is_price_only_correction(self):
        entity = _holding(0.12)
        last = Snapshot(day=0, share_quantity=10.0, share_price=100.0)
        (tx,) = ValuationHolding().simulate_day(entity, 30, [last])
        assert tx.is_correction
        assert tx.share_price == pytest.approx(101.0)
        assert tx.share_quantity is None
        assert tx.amount is None

    def test_nothing_without_price_or_history(self):
        entity = _holding(0.12)
        assert ValuationHolding().simulate_day(entity, 30, []) == []
        unpriced = Snapshot(day=0, share_quantity=10.0, share_price=0.0)
        assert ValuationHolding().simulate_day(entity, 30, [unpriced]) == []

    def test_new_lot_overrides_growth(self):
        ledger = [
            LedgerEntry(day=0, share_quantity=10.0, share_price=100.0),
            LedgerEntry(day=40, share_quantity=20.0, share_price=50.0),
        ]
        sim = Simulation([new_fallback_entity(), _holding(0.12, ledger)], 1, 0)
        assert sim.get_entity_value_for_day("vti", 40) == pytest.approx(1_000.0)
        assert sim.get_entity_value_for_day("vti", 58) == pytest.approx(1_010.0)
