"""
Entity templates: display presets that pick a kind for common financial items.

Templates are display-only. An entity's ``template_key`` never changes how it is
simulated; the ``kind`` does.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .kinds import K


class EntityCategory(Enum):
    """Display grouping for templates."""

    DEBT = "debt"
    EXPENSE = "expense"
    INCOME = "income"
    INVESTMENT = "investment"


ENTITY_CATEGORY_SORT_ORDER = [
    EntityCategory.INCOME,
    EntityCategory.INVESTMENT,
    EntityCategory.DEBT,
    EntityCategory.EXPENSE,
]


@dataclass(frozen=True)
class EntityTemplate:
    key: str
    name: str
    category: EntityCategory
    kind: str


_TEMPLATES = [
    # Debt
    EntityTemplate("auto-loan", "Auto Loan", EntityCategory.DEBT, K.DEBT),
    EntityTemplate("credit-card", "Credit Card", EntityCategory.DEBT, K.DEBT),
    EntityTemplate("mortgage", "Mortgage", EntityCategory.DEBT, K.DEBT),
    EntityTemplate("student-loan", "Student Loan", EntityCategory.DEBT, K.DEBT),
    # Expense
    EntityTemplate("bills", "Bills", EntityCategory.EXPENSE, K.EXPENSE),
    EntityTemplate("medical", "Medical", EntityCategory.EXPENSE, K.EXPENSE),
    EntityTemplate("spending", "Spending", EntityCategory.EXPENSE, K.EXPENSE),
    EntityTemplate("vacation", "Vacation", EntityCategory.EXPENSE, K.EXPENSE),
    # Income
    EntityTemplate("job", "Job", EntityCategory.INCOME, K.INCOME),
    EntityTemplate("social-security", "Social Security", EntityCategory.INCOME, K.INCOME),
    EntityTemplate("windfall", "Windfall", EntityCategory.INCOME, K.INCOME),
    # Investment
    EntityTemplate("brokerage", "Brokerage Account", EntityCategory.INVESTMENT, K.ACCOUNT),
    EntityTemplate("checking", "Checking Account", EntityCategory.INVESTMENT, K.ACCOUNT),
    EntityTemplate("etf", "ETF", EntityCategory.INVESTMENT, K.HOLDING),
    EntityTemplate("house", "House", EntityCategory.INVESTMENT, K.POSSESSION),
    EntityTemplate("mutual-fund", "Mutual Fund", EntityCategory.INVESTMENT, K.HOLDING),
    EntityTemplate("savings", "Savings", EntityCategory.INVESTMENT, K.ACCOUNT),
    EntityTemplate("stock", "Stock", EntityCategory.INVESTMENT, K.HOLDING),
    EntityTemplate("valuable", "Valuable", EntityCategory.INVESTMENT, K.POSSESSION),
    EntityTemplate("vehicle", "Vehicle", EntityCategory.INVESTMENT, K.POSSESSION),
]


def get_entity_template(key: str) -> EntityTemplate | None:
    for template in _TEMPLATES:
        if template.key == key:
            return template
    return None


def get_templates_for_kind(kind: str) -> list[EntityTemplate]:
    return [t for t in _TEMPLATES if t.kind == kind.lower()]
