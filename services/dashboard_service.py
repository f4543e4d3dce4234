"""
Dashboard overview.

Uses the production calendar to pick the months to show, then the
aggregation service for each month's numbers. The overall summary covers
the active months only.
"""

from datetime import date
from typing import Iterable, Optional

import structlog

from models.dashboard import DashboardOverview, MonthOverview
from models.production_request import ProductionRequest
from services.aggregation_service import (
    AggregationService,
    get_aggregation_service,
    get_month_stats,
)
from services.month_lifecycle_service import (
    MonthLifecycleService,
    get_month_lifecycle_service,
)
from utils.month_utils import get_current_month

logger = structlog.get_logger(__name__)


class DashboardService:
    """Active/archived month cards plus an overall production summary."""

    def __init__(
        self,
        lifecycle: Optional[MonthLifecycleService] = None,
        aggregation: Optional[AggregationService] = None,
    ):
        self.lifecycle = lifecycle or get_month_lifecycle_service()
        self.aggregation = aggregation or get_aggregation_service()

    def build_overview(
        self,
        rows: Iterable[ProductionRequest],
        today: date,
    ) -> DashboardOverview:
        """
        Build the dashboard for `today`.

        Args:
            rows: Request rows covering the active and archived months
                  (rows for other months are ignored)
            today: Reference date

        Returns:
            DashboardOverview with one card per active and archived month
        """
        active = self.lifecycle.active_months(today)
        archived = self.lifecycle.archived_months(today)
        months = [m.value for m in active] + [m.value for m in archived]

        # The calendar decides how many months are shown, not the stats limit
        stats = get_month_stats(rows, months, max_months=len(months))
        stats_by_month = {s.month: s for s in stats}

        active_cards = [MonthOverview(month=m, stats=stats_by_month[m.value]) for m in active]
        archived_cards = [MonthOverview(month=m, stats=stats_by_month[m.value]) for m in archived]

        overview = DashboardOverview(
            current_month=get_current_month(today),
            active_months=active_cards,
            archived_months=archived_cards,
            summary=self.aggregation.summarize(card.stats for card in active_cards),
        )

        logger.info(
            "dashboard_built",
            today=today.isoformat(),
            active=len(active_cards),
            archived=len(archived_cards),
            total_requests=overview.summary.total_requests,
        )
        return overview


# Singleton instance
_dashboard_service: Optional[DashboardService] = None


def get_dashboard_service() -> DashboardService:
    """Get or create DashboardService singleton instance."""
    global _dashboard_service
    if _dashboard_service is None:
        _dashboard_service = DashboardService()
    return _dashboard_service
