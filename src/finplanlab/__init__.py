"""
FinPlanLab - Ledger-Driven Financial Plan Projection

FinPlanLab projects a person's finances forward in time. Every tracked item
(bank accounts, possessions, share holdings, debts, income and expenses) is an
*entity* with a ledger of manually recorded values. A deterministic, day-stepped
simulation replays each entity's behavior from the earliest ledger entry to the
end of the projection horizon and answers point-in-time questions about value,
assets, debt and net worth.

Key Features:
- **Strategy Pattern**: Behaviors are determined by 'kind' discriminators, not inheritance
- **Ledger Precedence**: A manual entry always overrides simulated behavior on its day
- **Explicit Transfers**: Income, expenses and debt payments move money between entities
- **Safe Routing**: Transfers to unknown entities land in a synthetic "Cash" fallback
- **Deterministic**: Same inputs, same snapshots, every time
- **Rich Visualizations**: Optional Plotly charts for plan analysis

Architecture Overview:
- **Entity**: Immutable value object with kind, spec and ledger
- **Strategies**: One per kind, registered in `StrategyRegistry`
- **Schedule**: Recurrence rules for payments and flows
- **Simulation**: Day-stepped engine producing snapshots
- **Plan**: Person-level scenario with projection horizon and summary queries

Quick Start:
    ```python
    from finplanlab import Entity, GrowthSpec, K, LedgerEntry, Plan, create_epoch_day

    savings = Entity(
        id="savings", name="Savings", kind=K.ACCOUNT,
        spec=GrowthSpec(growth_rate=0.05),
        ledger=[LedgerEntry(day=create_epoch_day(2024, 1, 1), amount=10_000)],
    )
    plan = Plan(id="me", name="My Plan", birth_date="1990-01-01",
                retirement_age=65, entities=[savings],
                today_day=create_epoch_day(2025, 1, 1))
    plan.simulate().get_net_worth_for_today()
    ```
"""

# Version information
__version__ = "0.1.0"
__author__ = "FinPlanLab Team"
__description__ = "Ledger-Driven Financial Plan Projection"

# Import core components for easy access
import finplanlab.strategies

from .core import (
    ENTITY_CATEGORY_SORT_ORDER,
    FALLBACK_ENTITY_ID,
    CatalogDefinition,
    CatalogError,
    ConfigError,
    DataPoint,
    DebtSpec,
    Entity,
    EntityCategory,
    EntityTemplate,
    ExpenseSpec,
    FallbackSpec,
    GrowthSpec,
    HoldingSpec,
    IEntityStrategy,
    IncomeSpec,
    InvalidScheduleError,
    K,
    LedgerEntry,
    Plan,
    PlanConfig,
    Schedule,
    ScheduleType,
    Simulation,
    SimulationInvariantError,
    Snapshot,
    StrategyRegistry,
    Transaction,
    TransactionOrderError,
    UnknownEntityTypeError,
    create_epoch_day,
    date_string_to_epoch_day,
    date_to_epoch_day,
    deserialize_entities,
    deserialize_entity,
    epoch_day_to_date,
    epoch_day_to_date_string,
    get_entity_template,
    get_templates_for_kind,
    load_catalog,
    load_plan,
    new_fallback_entity,
    serialize_entity,
    today_epoch_day,
)

# Import chart functions (optional - requires plotly)
try:
    from .charts import (
        assets_vs_debt,
        entity_value_over_time,
        net_worth_vs_time,
        save_chart,
    )

    CHARTS_AVAILABLE = True
except ImportError:
    CHARTS_AVAILABLE = False

# Define what gets imported with "from finplanlab import *"
__all__ = [
    # Core classes
    "Entity",
    "Schedule",
    "ScheduleType",
    "LedgerEntry",
    "Snapshot",
    "Transaction",
    "Simulation",
    "DataPoint",
    "Plan",
    "PlanConfig",
    "K",
    # Specs
    "GrowthSpec",
    "HoldingSpec",
    "IncomeSpec",
    "ExpenseSpec",
    "DebtSpec",
    "FallbackSpec",
    # Strategy interface and registry
    "IEntityStrategy",
    "StrategyRegistry",
    # Fallback
    "FALLBACK_ENTITY_ID",
    "new_fallback_entity",
    # Serialization and catalogs
    "deserialize_entity",
    "deserialize_entities",
    "serialize_entity",
    "CatalogDefinition",
    "load_catalog",
    "load_plan",
    # Templates
    "EntityCategory",
    "EntityTemplate",
    "ENTITY_CATEGORY_SORT_ORDER",
    "get_entity_template",
    "get_templates_for_kind",
    # Errors
    "ConfigError",
    "InvalidScheduleError",
    "UnknownEntityTypeError",
    "SimulationInvariantError",
    "TransactionOrderError",
    "CatalogError",
    # Date utilities
    "create_epoch_day",
    "date_to_epoch_day",
    "date_string_to_epoch_day",
    "epoch_day_to_date",
    "epoch_day_to_date_string",
    "today_epoch_day",
    # Feature flags
    "CHARTS_AVAILABLE",
]

# Add chart functions to __all__ if available
if CHARTS_AVAILABLE:
    __all__.extend(
        [
            "net_worth_vs_time",
            "assets_vs_debt",
            "entity_value_over_time",
            "save_chart",
        ]
    )
