"""
Shared helpers with no service dependencies.
"""

from utils.month_utils import (
    parse_month,
    is_valid_month,
    format_month,
    get_current_month,
    shift_month,
    month_range,
    format_month_display,
    get_month_name,
    get_year,
)

__all__ = [
    "parse_month",
    "is_valid_month",
    "format_month",
    "get_current_month",
    "shift_month",
    "month_range",
    "format_month_display",
    "get_month_name",
    "get_year",
]
