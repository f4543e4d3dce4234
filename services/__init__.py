"""
Business logic services.

Each service handles one domain area.
"""

from services.month_lifecycle_service import (
    MonthLifecycleService,
    get_month_lifecycle_service,
    CalendarPolicy,
)
from services.aggregation_service import AggregationService, get_aggregation_service
from services.dashboard_service import DashboardService, get_dashboard_service

__all__ = [
    "MonthLifecycleService",
    "get_month_lifecycle_service",
    "CalendarPolicy",
    "AggregationService",
    "get_aggregation_service",
    "DashboardService",
    "get_dashboard_service",
]
