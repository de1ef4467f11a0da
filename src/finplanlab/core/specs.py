"""
Variant-specific parameters for each entity kind.

An entity's ``spec`` is exactly one of these frozen dataclasses; the entity's
``kind`` says which. Each spec converts to and from the ``data`` mapping of an
entity record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Union

from .kinds import K
from .schedule import Schedule, ScheduleType


def _default_schedule(default_start: date) -> Schedule:
    return Schedule(ScheduleType.MONTHLY, default_start, days_of_month=(1,))


def _schedule_from(raw: Any, default_start: date) -> Schedule:
    if isinstance(raw, Schedule):
        return raw
    if raw:
        return Schedule.from_dict(raw)
    return _default_schedule(default_start)


@dataclass(frozen=True)
class GrowthSpec:
    """
    Month-end compounding balance (kinds: 'account', 'possession').

    Parameters:
        - growth_rate: Annual rate compounded monthly (e.g., 0.05 for 5%); negative
          rates model depreciation
    """

    growth_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_start: date) -> GrowthSpec:
        return cls(growth_rate=float(data.get("growthRate") or 0.0))

    def to_dict(self) -> dict[str, Any]:
        return {"growthRate": self.growth_rate}


@dataclass(frozen=True)
class HoldingSpec:
    """
    Share-priced position (kind: 'holding').

    Parameters:
        - symbol: Ticker symbol (display only)
        - growth_rate: Annual share price growth compounded monthly
    """

    symbol: str = ""
    growth_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_start: date) -> HoldingSpec:
        return cls(
            symbol=data.get("symbol") or "",
            growth_rate=float(data.get("growthRate") or 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "growthRate": self.growth_rate}


@dataclass(frozen=True)
class IncomeSpec:
    """
    Recurring inflow (kind: 'income').

    Parameters:
        - schedule: When the income is received
        - target_entity_id: Entity credited on each occurrence
        - growth_rate: Annual growth applied continuously from the latest ledger entry
    """

    schedule: Schedule
    target_entity_id: str = ""
    growth_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_start: date) -> IncomeSpec:
        return cls(
            schedule=_schedule_from(data.get("schedule"), default_start),
            target_entity_id=data.get("targetEntityId") or "",
            growth_rate=float(data.get("growthRate") or 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "growthRate": self.growth_rate,
            "schedule": self.schedule.to_dict(),
            "targetEntityId": self.target_entity_id,
        }


@dataclass(frozen=True)
class ExpenseSpec:
    """
    Recurring outflow (kind: 'expense').

    Parameters:
        - schedule: When the expense is paid
        - source_entity_id: Entity debited on each occurrence
        - growth_rate: Annual growth applied continuously from the latest ledger entry
    """

    schedule: Schedule
    source_entity_id: str = ""
    growth_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_start: date) -> ExpenseSpec:
        return cls(
            schedule=_schedule_from(data.get("schedule"), default_start),
            source_entity_id=data.get("sourceEntityId") or "",
            growth_rate=float(data.get("growthRate") or 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "growthRate": self.growth_rate,
            "schedule": self.schedule.to_dict(),
            "sourceEntityId": self.source_entity_id,
        }


@dataclass(frozen=True)
class DebtSpec:
    """
    Amortizing obligation (kind: 'debt').

    Parameters:
        - payment_schedule: When scheduled payments are made
        - payment_source_entity_id: Entity the payments are drawn from
        - interest_rate: Annual rate, accrued monthly on month-ends
        - payment_amount: Amount paid on each scheduled payment date
    """

    payment_schedule: Schedule
    payment_source_entity_id: str = ""
    interest_rate: float = 0.0
    payment_amount: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_start: date) -> DebtSpec:
        return cls(
            payment_schedule=_schedule_from(data.get("paymentSchedule"), default_start),
            payment_source_entity_id=data.get("paymentSourceEntityId") or "",
            interest_rate=float(data.get("interestRate") or 0.0),
            payment_amount=float(data.get("paymentAmount") or 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "interestRate": self.interest_rate,
            "paymentAmount": self.payment_amount,
            "paymentSchedule": self.payment_schedule.to_dict(),
            "paymentSourceEntityId": self.payment_source_entity_id,
        }


@dataclass(frozen=True)
class FallbackSpec:
    """The fallback sink carries no parameters."""


EntitySpec = Union[GrowthSpec, HoldingSpec, IncomeSpec, ExpenseSpec, DebtSpec, FallbackSpec]

# Which spec type each serializable kind carries
SpecTypes: dict[str, type] = {
    K.ACCOUNT: GrowthSpec,
    K.POSSESSION: GrowthSpec,
    K.HOLDING: HoldingSpec,
    K.INCOME: IncomeSpec,
    K.EXPENSE: ExpenseSpec,
    K.DEBT: DebtSpec,
}
