"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema, FrozenSchema
from models.production_request import ProductionRequest
from models.calendar import MonthState, MonthOption
from models.aggregation import (
    RowAllocation,
    ProductAggregate,
    CategorySummary,
    MarketplaceSummary,
    MissingDesiItem,
    MonthAggregate,
    MonthStats,
    ProductionSummary,
)
from models.dashboard import MonthOverview, DashboardOverview

__all__ = [
    # Base
    "BaseSchema",
    "FrozenSchema",

    # Requests
    "ProductionRequest",

    # Calendar
    "MonthState",
    "MonthOption",

    # Aggregation
    "RowAllocation",
    "ProductAggregate",
    "CategorySummary",
    "MarketplaceSummary",
    "MissingDesiItem",
    "MonthAggregate",
    "MonthStats",
    "ProductionSummary",

    # Dashboard
    "MonthOverview",
    "DashboardOverview",
]
