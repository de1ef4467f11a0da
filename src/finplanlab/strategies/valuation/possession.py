"""
Possession valuation strategy.
"""

from __future__ import annotations

from .account import ValuationAccount


class ValuationPossession(ValuationAccount):
    """
    Possession valuation strategy (kind: 'possession').

    Houses, vehicles and valuables. Values follow the ledger and appreciate (or,
    with a negative ``growth_rate``, depreciate) on month-ends exactly like an
    account balance.
    """
