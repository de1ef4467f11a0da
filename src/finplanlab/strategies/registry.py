"""
Strategy registry setup for FinPlanLab.
"""

from finplanlab.core.entity import StrategyRegistry
from finplanlab.core.kinds import K

from .fallback import FallbackSink
from .flow.expense import FlowExpense
from .flow.income import FlowIncome
from .schedule.debt import ScheduleDebt
from .valuation.account import ValuationAccount
from .valuation.holding import ValuationHolding
from .valuation.possession import ValuationPossession


def register_defaults():
    """
    Register all default strategy implementations in the global registry.

    Registered Strategies:
        - 'account': Month-end compounding balance
        - 'possession': Month-end appreciating/depreciating value
        - 'holding': Share price compounding
        - 'debt': Scheduled payments and monthly interest
        - 'income': Recurring inflow with growth
        - 'expense': Recurring outflow with growth
        - 'fallback': Sink for unresolved transaction targets

    Note:
        This function is automatically called when the module is imported.
        Additional strategies can be registered by assigning into
        ``StrategyRegistry`` directly.
    """
    StrategyRegistry[K.ACCOUNT] = ValuationAccount()
    StrategyRegistry[K.POSSESSION] = ValuationPossession()
    StrategyRegistry[K.HOLDING] = ValuationHolding()

    StrategyRegistry[K.DEBT] = ScheduleDebt()

    StrategyRegistry[K.INCOME] = FlowIncome()
    StrategyRegistry[K.EXPENSE] = FlowExpense()

    StrategyRegistry[K.FALLBACK] = FallbackSink()
