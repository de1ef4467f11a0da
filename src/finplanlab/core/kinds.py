"""
FinPlanLab Kind Constants (behavior-centric).
"""


class K:
    # === Balances that grow on month-ends ===
    ACCOUNT = "account"  # Checking, savings, brokerage cash
    POSSESSION = "possession"  # House, vehicle, valuables
    HOLDING = "holding"  # Stocks, ETFs, mutual funds (share priced)

    # === Obligations ===
    DEBT = "debt"  # Mortgages, loans, credit cards

    # === Recurring flows ===
    INCOME = "income"  # Salary, social security, windfalls
    EXPENSE = "expense"  # Bills, spending, vacations

    # === Synthetic ===
    FALLBACK = "fallback"  # Catch-all sink for unresolved transaction targets

    @classmethod
    def serializable_kinds(cls) -> list[str]:
        """Kinds that may appear in entity records."""
        return [
            cls.ACCOUNT,
            cls.DEBT,
            cls.EXPENSE,
            cls.HOLDING,
            cls.INCOME,
            cls.POSSESSION,
        ]

    @classmethod
    def all_kinds(cls) -> list[str]:
        """Enumerate all known kinds (for validation and docs)."""
        return [*cls.serializable_kinds(), cls.FALLBACK]
