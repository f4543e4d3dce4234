"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,

    # Production months
    InvalidMonthError,

    # Stats
    MonthsRequiredError,
    TooManyMonthsError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",

    # Production months
    "InvalidMonthError",

    # Stats
    "MonthsRequiredError",
    "TooManyMonthsError",
]
