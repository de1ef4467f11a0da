"""
Error classes for FinPlanLab.

This module defines the exception hierarchy used throughout the projection engine.
Two families exist:

- **Configuration errors** (`ConfigError` and subclasses) are raised while building
  schedules, entities or a simulation from records. They point at bad input.
- **Invariant violations** (`SimulationInvariantError` and subclasses) are raised
  during replay when the engine's own ordering guarantees are broken. They point at
  a bug, never at user input, and abort the projection.
"""

from __future__ import annotations


class ConfigError(Exception):
    """
    Configuration error during plan, entity or simulation setup.

    **Common Causes:**
    - Missing required parameters for a schedule type
    - Unknown entity type in a serialized record
    - A simulation constructed without its fallback entity
    - An entity kind with no registered strategy

    **Example Usage:**
        ```python
        from finplanlab.core.errors import ConfigError
        from finplanlab.core.serialization import deserialize_entity

        try:
            entity = deserialize_entity(record)
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
    """

    pass


class InvalidScheduleError(ConfigError):
    """Raised when a recurrence rule is missing parameters or has an inverted window."""


class UnknownEntityTypeError(ConfigError):
    """Raised when a record's entity type does not match any known kind."""

    def __init__(self, entity_type: str):
        self.entity_type = entity_type
        super().__init__(f"Unknown entity type: {entity_type}")


class SimulationInvariantError(Exception):
    """
    Raised when the simulation replay detects an internal inconsistency.

    Attributes:
        entity_id: The entity whose history was being mutated (if known)
        day: The epoch day being applied (if known)
    """

    def __init__(
        self,
        message: str,
        entity_id: str | None = None,
        day: int | None = None,
    ):
        self.entity_id = entity_id
        self.day = day
        super().__init__(self._fmt(message))

    def _fmt(self, msg: str) -> str:
        """Format the error message with additional context."""
        parts = []
        if self.entity_id is not None:
            parts.append(f"entity_id: {self.entity_id}")
        if self.day is not None:
            parts.append(f"day: {self.day}")
        suffix = f" | {', '.join(parts)}" if parts else ""
        return f"[Simulation] {msg}{suffix}"


class TransactionOrderError(SimulationInvariantError):
    """Raised when a transaction is dated before the target's latest snapshot."""
