#!/usr/bin/env python3
"""
Plan Projection Example

This example builds a small household plan in code and projects it forward:
- Checking and savings accounts with monthly compounding
- A salary paid twice a month into checking
- Rent drawn from checking
- A car loan paid down from checking with monthly interest
"""

import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from finplanlab import (
    DebtSpec,
    Entity,
    ExpenseSpec,
    GrowthSpec,
    IncomeSpec,
    K,
    LedgerEntry,
    Plan,
    Schedule,
    ScheduleType,
    create_epoch_day,
    epoch_day_to_date_string,
)


def create_household_plan() -> Plan:
    """Create a plan with accounts, flows and a loan."""
    start = create_epoch_day(2024, 1, 1)

    checking = Entity(
        id="checking",
        name="Checking Account",
        kind=K.ACCOUNT,
        spec=GrowthSpec(growth_rate=0.0),
        template_key="checking",
        ledger=[LedgerEntry(day=start, amount=3_000.0)],
    )

    savings = Entity(
        id="savings",
        name="Savings",
        kind=K.ACCOUNT,
        spec=GrowthSpec(growth_rate=0.04),  # 4% compounded monthly
        template_key="savings",
        ledger=[LedgerEntry(day=start, amount=12_000.0)],
    )

    salary = Entity(
        id="salary",
        name="Salary",
        kind=K.INCOME,
        spec=IncomeSpec(
            schedule=Schedule(
                ScheduleType.MONTHLY, date(2024, 1, 1), days_of_month=[1, 15]
            ),
            target_entity_id="checking",
            growth_rate=0.03,  # 3% raise per year
        ),
        template_key="job",
        ledger=[LedgerEntry(day=start, amount=2_400.0)],
    )

    rent = Entity(
        id="rent",
        name="Rent",
        kind=K.EXPENSE,
        spec=ExpenseSpec(
            schedule=Schedule(ScheduleType.MONTHLY, date(2024, 1, 1), days_of_month=[1]),
            source_entity_id="checking",
            growth_rate=0.02,
        ),
        template_key="bills",
        ledger=[LedgerEntry(day=start, amount=1_700.0)],
    )

    car_loan = Entity(
        id="car_loan",
        name="Car Loan",
        kind=K.DEBT,
        spec=DebtSpec(
            payment_schedule=Schedule(
                ScheduleType.MONTHLY, date(2024, 1, 10), days_of_month=[10]
            ),
            payment_source_entity_id="checking",
            interest_rate=0.065,
            payment_amount=420.0,
        ),
        template_key="auto-loan",
        ledger=[LedgerEntry(day=start, amount=-16_000.0)],
    )

    return Plan(
        id="household",
        name="Household Plan",
        birth_date="1988-09-01",
        retirement_age=67,
        entities=[checking, savings, salary, rent, car_loan],
        today_day=create_epoch_day(2025, 1, 1),
    )


def main():
    """Run the example."""
    plan = create_household_plan().simulate()

    print("=== Household Plan ===")
    print(f"Projection years: {plan.projection_years}")
    print(f"Retirement on:    {epoch_day_to_date_string(plan.get_retirement_day())}")
    print(f"Assets today:     {plan.get_assets_for_today():>12,.2f}")
    print(f"Debt today:       {plan.get_debt_for_today():>12,.2f}")
    print(f"Net worth today:  {plan.get_net_worth_for_today():>12,.2f}")
    print(f"Net worth 1y ago: {plan.get_net_worth_for_last_year():>12,.2f}")
    print()

    print("=== First five year-ends ===")
    print(plan.yearly().head(5).to_string())
    print()

    print("=== Car loan history (first six snapshots) ===")
    print(plan.simulation.history("car_loan").head(6).to_string())


if __name__ == "__main__":
    main()
