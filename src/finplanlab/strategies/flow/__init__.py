"""
Flow strategies for income and expense entities.
"""

from .expense import FlowExpense
from .income import FlowIncome

__all__ = ["FlowIncome", "FlowExpense"]
