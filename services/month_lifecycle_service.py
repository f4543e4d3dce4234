"""
Production month lifecycle.

Decides which production months are open for new requests, which are
locked, which are shown as active and which are archived. Everything is a
pure function of the month token and an explicit "today"; there is no
stored lock flag anywhere.

Rules (default policy):
  - The current month closes for new entries on day 5 (inclusive).
  - Past months are always locked, future months always open.
  - Before the cutoff the active window is [current-2, current+2] (5 months),
    from the cutoff on it is [current-1, current+2] (4 months).
  - Archived months are the ones older than the oldest active month.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

import structlog

from config import Settings, get_settings
from models.calendar import MonthOption, MonthState
from utils.month_utils import (
    format_month_display,
    get_current_month,
    month_range,
    parse_month,
    shift_month,
)

logger = structlog.get_logger(__name__)

# Order book for the current month closes on this day
ENTRY_CUTOFF_DAY = 5


@dataclass(frozen=True)
class CalendarPolicy:
    """Tunable constants of the production calendar."""

    entry_cutoff_day: int = ENTRY_CUTOFF_DAY
    months_back_before_cutoff: int = 2
    months_back_after_cutoff: int = 1
    months_ahead: int = 2

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "CalendarPolicy":
        return cls(
            entry_cutoff_day=app_settings.entry_cutoff_day,
            months_back_before_cutoff=app_settings.active_months_back_before_cutoff,
            months_back_after_cutoff=app_settings.active_months_back_after_cutoff,
            months_ahead=app_settings.active_months_ahead,
        )


DEFAULT_POLICY = CalendarPolicy()


def is_past_cutoff(today: date, policy: CalendarPolicy = DEFAULT_POLICY) -> bool:
    """True once the current month's order book has closed."""
    return today.day >= policy.entry_cutoff_day


def is_month_locked(
    month: str,
    today: date,
    policy: CalendarPolicy = DEFAULT_POLICY,
) -> bool:
    """
    Check whether a month is closed for new entries.

    Args:
        month: Month token (YYYY-MM)
        today: Reference date
        policy: Calendar constants (cutoff day)

    Returns:
        True for past months, and for the current month from the cutoff day on

    Raises:
        InvalidMonthError: If month is not a valid token
    """
    parse_month(month)
    current = get_current_month(today)

    if month < current:
        return True
    if month == current:
        return is_past_cutoff(today, policy)
    return False


def _month_option(month: str, today: date, policy: CalendarPolicy) -> MonthOption:
    return MonthOption(
        value=month,
        label=format_month_display(month),
        locked=is_month_locked(month, today, policy),
    )


def get_active_months(
    today: date,
    policy: CalendarPolicy = DEFAULT_POLICY,
) -> List[MonthOption]:
    """
    Months shown for entry and browsing, oldest first.

    The window shrinks by one past month once the cutoff day is reached.
    """
    current = get_current_month(today)
    months_back = (
        policy.months_back_after_cutoff
        if is_past_cutoff(today, policy)
        else policy.months_back_before_cutoff
    )

    window = month_range(
        shift_month(current, -months_back),
        shift_month(current, policy.months_ahead),
    )
    return [_month_option(m, today, policy) for m in window]


def get_available_months_for_entry(
    today: date,
    policy: CalendarPolicy = DEFAULT_POLICY,
) -> List[MonthOption]:
    """Unlocked active months (entry dropdown)."""
    return [m for m in get_active_months(today, policy) if not m.locked]


def get_archived_months(
    today: date,
    max_count: int = 6,
    policy: CalendarPolicy = DEFAULT_POLICY,
) -> List[MonthOption]:
    """
    Months older than the oldest active month, most recent first.

    Args:
        today: Reference date
        max_count: Maximum months returned
        policy: Calendar constants

    Returns:
        Up to max_count locked months, newest first
    """
    oldest_active = get_active_months(today, policy)[0].value
    return [
        _month_option(shift_month(oldest_active, -offset), today, policy)
        for offset in range(1, max_count + 1)
    ]


def get_all_months_for_viewing(
    today: date,
    past_months: int = 12,
    future_months: int = 6,
    policy: CalendarPolicy = DEFAULT_POLICY,
) -> List[MonthOption]:
    """Past, current and future months for browsing, most recent first."""
    current = get_current_month(today)
    window = month_range(
        shift_month(current, -past_months),
        shift_month(current, future_months),
    )
    return [_month_option(m, today, policy) for m in reversed(window)]


def get_month_state(
    month: str,
    today: date,
    policy: CalendarPolicy = DEFAULT_POLICY,
) -> MonthState:
    """Classify a month into its lifecycle state."""
    parse_month(month)
    current = get_current_month(today)

    if month > current:
        return MonthState.FUTURE_OPEN
    if month == current:
        if is_past_cutoff(today, policy):
            return MonthState.CURRENT_LOCKED
        return MonthState.CURRENT_OPEN

    oldest_active = get_active_months(today, policy)[0].value
    if month < oldest_active:
        return MonthState.ARCHIVED
    return MonthState.PAST_LOCKED


class MonthLifecycleService:
    """
    Production calendar bound to the configured policy.

    Callers pass "today" explicitly so results are reproducible.
    """

    def __init__(self, app_settings: Optional[Settings] = None):
        app_settings = app_settings or get_settings()
        self.policy = CalendarPolicy.from_settings(app_settings)
        self.archived_months_max = app_settings.archived_months_max
        self.viewing_past_months = app_settings.viewing_past_months
        self.viewing_future_months = app_settings.viewing_future_months

    def is_locked(self, month: str, today: date) -> bool:
        return is_month_locked(month, today, self.policy)

    def active_months(self, today: date) -> List[MonthOption]:
        months = get_active_months(today, self.policy)
        logger.debug(
            "active_months_computed",
            today=today.isoformat(),
            first=months[0].value,
            last=months[-1].value,
            count=len(months),
        )
        return months

    def available_for_entry(self, today: date) -> List[MonthOption]:
        return get_available_months_for_entry(today, self.policy)

    def archived_months(self, today: date, max_count: Optional[int] = None) -> List[MonthOption]:
        if max_count is None:
            max_count = self.archived_months_max
        return get_archived_months(today, max_count, self.policy)

    def months_for_viewing(self, today: date) -> List[MonthOption]:
        return get_all_months_for_viewing(
            today,
            past_months=self.viewing_past_months,
            future_months=self.viewing_future_months,
            policy=self.policy,
        )

    def month_state(self, month: str, today: date) -> MonthState:
        return get_month_state(month, today, self.policy)


# Singleton instance
_month_lifecycle_service: Optional[MonthLifecycleService] = None


def get_month_lifecycle_service() -> MonthLifecycleService:
    """Get or create MonthLifecycleService singleton instance."""
    global _month_lifecycle_service
    if _month_lifecycle_service is None:
        _month_lifecycle_service = MonthLifecycleService()
    return _month_lifecycle_service
