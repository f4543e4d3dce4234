"""
Dashboard overview models.

Combines the production calendar (which months to show) with the monthly
stats (what to show for each).
"""

from typing import List

from pydantic import Field

from models.aggregation import MonthStats, ProductionSummary
from models.base import FrozenSchema
from models.calendar import MonthOption


class MonthOverview(FrozenSchema):
    """One dashboard card: the month and its headline stats."""

    month: MonthOption
    stats: MonthStats


class DashboardOverview(FrozenSchema):
    """Active and archived months with an overall summary of the active ones."""

    current_month: str
    active_months: List[MonthOverview] = Field(default_factory=list)
    archived_months: List[MonthOverview] = Field(default_factory=list)
    summary: ProductionSummary
