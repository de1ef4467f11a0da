"""
Schedule strategies for debt entities.
"""

from .debt import ScheduleDebt

__all__ = ["ScheduleDebt"]
