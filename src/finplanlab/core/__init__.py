"""
Core module for FinPlanLab.

This module contains the value types, the simulation engine and the plan layer.
Strategies live in `finplanlab.strategies` and register themselves on import.
"""

from .catalog_loader import CatalogDefinition, CatalogError, load_catalog, load_plan
from .entity import FALLBACK_ENTITY_ID, Entity, StrategyRegistry, new_fallback_entity
from .errors import (
    ConfigError,
    InvalidScheduleError,
    SimulationInvariantError,
    TransactionOrderError,
    UnknownEntityTypeError,
)
from .interfaces import IEntityStrategy
from .kinds import K
from .ledger import LedgerEntry
from .plan import Plan, PlanConfig
from .results import DataPoint, DataPointsByDay, data_points_to_frame, snapshots_to_frame
from .schedule import Schedule, ScheduleType
from .serialization import deserialize_entities, deserialize_entity, serialize_entity
from .simulation import Simulation
from .snapshot import Snapshot
from .specs import (
    DebtSpec,
    EntitySpec,
    ExpenseSpec,
    FallbackSpec,
    GrowthSpec,
    HoldingSpec,
    IncomeSpec,
    SpecTypes,
)
from .templates import (
    ENTITY_CATEGORY_SORT_ORDER,
    EntityCategory,
    EntityTemplate,
    get_entity_template,
    get_templates_for_kind,
)
from .transaction import Transaction
from .utils import (
    calculate_age,
    create_epoch_day,
    date_string_to_epoch_day,
    date_to_epoch_day,
    epoch_day_to_date,
    epoch_day_to_date_string,
    is_last_day_of_month,
    last_days_of_months_in_range,
    slugify_name,
    today_epoch_day,
)

__all__ = [
    # Errors
    "ConfigError",
    "InvalidScheduleError",
    "UnknownEntityTypeError",
    "SimulationInvariantError",
    "TransactionOrderError",
    "CatalogError",
    # Kinds and registry
    "K",
    "IEntityStrategy",
    "StrategyRegistry",
    # Value types
    "Schedule",
    "ScheduleType",
    "LedgerEntry",
    "Snapshot",
    "Transaction",
    # Specs
    "EntitySpec",
    "GrowthSpec",
    "HoldingSpec",
    "IncomeSpec",
    "ExpenseSpec",
    "DebtSpec",
    "FallbackSpec",
    "SpecTypes",
    # Entities
    "Entity",
    "FALLBACK_ENTITY_ID",
    "new_fallback_entity",
    "deserialize_entity",
    "deserialize_entities",
    "serialize_entity",
    # Templates
    "EntityCategory",
    "EntityTemplate",
    "ENTITY_CATEGORY_SORT_ORDER",
    "get_entity_template",
    "get_templates_for_kind",
    # Engine and results
    "Simulation",
    "DataPoint",
    "DataPointsByDay",
    "data_points_to_frame",
    "snapshots_to_frame",
    # Plans and catalogs
    "Plan",
    "PlanConfig",
    "CatalogDefinition",
    "load_catalog",
    "load_plan",
    # Date utilities
    "calculate_age",
    "create_epoch_day",
    "date_string_to_epoch_day",
    "date_to_epoch_day",
    "epoch_day_to_date",
    "epoch_day_to_date_string",
    "is_last_day_of_month",
    "last_days_of_months_in_range",
    "slugify_name",
    "today_epoch_day",
]
