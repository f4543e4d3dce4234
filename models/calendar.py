"""
Production calendar models.

Lock state is never stored; it is recomputed from "today" on every call.
"""

from enum import Enum

from pydantic import Field

from models.base import FrozenSchema


class MonthState(str, Enum):
    """Lifecycle state of a production month relative to today."""

    FUTURE_OPEN = "future_open"
    CURRENT_OPEN = "current_open"        # Current month, before the cutoff day
    CURRENT_LOCKED = "current_locked"    # Current month, on/after the cutoff day
    PAST_LOCKED = "past_locked"          # Past month still inside the active window
    ARCHIVED = "archived"                # Older than the oldest active month


class MonthOption(FrozenSchema):
    """A production month as offered to dropdowns and dashboards."""

    value: str = Field(..., description="Month token (YYYY-MM)")
    label: str = Field(..., description="Display label (e.g. 'February 2026')")
    locked: bool = Field(..., description="Closed for new entries")
