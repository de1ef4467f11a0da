"""
Strategy implementations for FinPlanLab.

Strategies implement the actual behavior for each entity kind. The module
automatically registers all default strategies in the global registry, making
them available to entities with matching kind discriminators.

Strategy Categories:
- Valuation Strategies: balances and share-priced holdings that grow on month-ends
- Schedule Strategies: debts with scheduled payments and interest accrual
- Flow Strategies: recurring income and expenses
"""

from .fallback import FallbackSink
from .flow import FlowExpense, FlowIncome
from .registry import register_defaults
from .schedule import ScheduleDebt
from .valuation import ValuationAccount, ValuationHolding, ValuationPossession

# Register all default strategies when module is imported
register_defaults()

__all__ = [
    # Valuation strategies
    "ValuationAccount",
    "ValuationPossession",
    "ValuationHolding",
    # Schedule strategies
    "ScheduleDebt",
    # Flow strategies
    "FlowIncome",
    "FlowExpense",
    # Fallback
    "FallbackSink",
    # Registry
    "register_defaults",
]
