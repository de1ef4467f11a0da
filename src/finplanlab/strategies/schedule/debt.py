"""
Debt amortization strategy with scheduled payments and monthly interest.
"""

from __future__ import annotations

from collections.abc import Sequence

from finplanlab.core.entity import Entity
from finplanlab.core.interfaces import IEntityStrategy
from finplanlab.core.schedule import ScheduleType
from finplanlab.core.snapshot import Snapshot
from finplanlab.core.transaction import Transaction
from finplanlab.core.utils import (
    date_to_epoch_day,
    is_last_day_of_month,
    last_days_of_months_in_range,
)

from .._ledger_utils import (
    current_value,
    effective_window,
    ledger_correction,
    ledger_days_in_range,
    sorted_unique,
)


def _is_payment_day(entity: Entity, day: int) -> bool:
    """
    True when ``day`` is one of the payment days `get_simulation_days` produced.

    Payment days are generated over the window opened by the first ledger entry,
    so custom intervals step from there.
    """
    schedule = entity.spec.payment_schedule
    earliest = entity.earliest_day
    if earliest is None or day < earliest:
        return False
    if schedule.type is not ScheduleType.CUSTOM:
        return schedule.occurs_on(day)

    first = max(earliest, date_to_epoch_day(schedule.start_date))
    if day < first:
        return False
    if schedule.end_date is not None and day > date_to_epoch_day(schedule.end_date):
        return False
    return (day - first) % schedule.interval == 0


class ScheduleDebt(IEntityStrategy):
    """
    Debt schedule strategy (kind: 'debt').

    Mortgages, auto loans, student loans and credit cards. The outstanding balance
    is negative; ledger entries set it, scheduled payments move money from the
    payment source into the debt, and interest accrues on every month-end.

    Required Parameters (DebtSpec):
        - payment_schedule: Payment dates
        - payment_source_entity_id: Entity the payments are drawn from
        - interest_rate: Annual rate, accrued as ``|balance| * rate / 12``
        - payment_amount: Amount per scheduled payment

    Note:
        - Ledger entries override the balance and suppress payment/interest that day
        - Once a committed balance reaches >= 0 the debt is paid off and emits nothing
        - Payment and interest on the same day are both computed from the balance
          read before either is applied
        - A final payment larger than the balance is applied as-is (no clamping)
    """

    def get_simulation_days(
        self, entity: Entity, start_day: int, end_day: int
    ) -> list[int]:
        window = effective_window(entity, start_day, end_day)
        if window is None:
            return []
        lo, hi = window
        return sorted_unique(
            ledger_days_in_range(entity, lo, hi),
            last_days_of_months_in_range(lo, hi),
            entity.spec.payment_schedule.get_days_in_range(lo, hi),
        )

    def simulate_day(
        self, entity: Entity, day: int, snapshots: Sequence[Snapshot]
    ) -> list[Transaction]:
        entry = entity.ledger_entry_for_day(day)
        if entry is not None:
            return [ledger_correction(entity, entry, day)]

        spec = entity.spec
        balance = current_value(snapshots)
        if snapshots and balance >= 0:
            return []

        transactions: list[Transaction] = []

        if spec.payment_amount > 0 and _is_payment_day(entity, day):
            transactions.append(
                Transaction(
                    day=day,
                    target_entity_id=spec.payment_source_entity_id,
                    amount=-spec.payment_amount,
                )
            )
            transactions.append(
                Transaction(day=day, target_entity_id=entity.id, amount=spec.payment_amount)
            )

        if is_last_day_of_month(day) and spec.interest_rate != 0 and balance < 0:
            interest = abs(balance) * (spec.interest_rate / 12)
            transactions.append(
                Transaction(day=day, target_entity_id=entity.id, amount=-interest)
            )

        return transactions
