"""
Valuation strategies for balance and holding entities.
"""

from .account import ValuationAccount
from .holding import ValuationHolding
from .possession import ValuationPossession

__all__ = [
    "ValuationAccount",
    "ValuationPossession",
    "ValuationHolding",
]
