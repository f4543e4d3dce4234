"""
Custom exception classes for the application.

Every error carries a stable code so callers (route handlers, exporters)
can map it to a response without string matching.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "INVALID_MONTH")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


# ===================
# PRODUCTION MONTH ERRORS
# ===================

class InvalidMonthError(ValidationError):
    """Month token is not a valid YYYY-MM value."""

    def __init__(self, value: Any):
        super().__init__(
            code="INVALID_MONTH",
            message="Invalid month format. Expected YYYY-MM",
            details={"provided": value}
        )


# ===================
# STATS ERRORS
# ===================

class MonthsRequiredError(ValidationError):
    """No production months supplied for a stats query."""

    def __init__(self):
        super().__init__(
            code="MONTHS_REQUIRED",
            message="At least one production month (YYYY-MM) is required"
        )


class TooManyMonthsError(ValidationError):
    """Stats query asked for more months than allowed."""

    def __init__(self, requested: int, maximum: int):
        super().__init__(
            code="TOO_MANY_MONTHS",
            message=f"Maximum {maximum} months allowed per request",
            details={"requested": requested, "maximum": maximum}
        )
