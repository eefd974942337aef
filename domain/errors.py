"""
Error codes and typed failures for the indicator engine.

Every failure carries a stable code, the indicator that raised it and a
context dict, so callers can log or serialize it without parsing messages.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # Parse errors (3xx)
    PARSE_CSV = "E303"
    PARSE_DATE = "E304"
    PARSE_NUMBER = "E305"

    # Data errors (4xx)
    DATA_MISSING = "E401"
    DATA_INVALID = "E402"
    DATA_EMPTY = "E404"
    DATA_INSUFFICIENT = "E405"

    # Validation errors (5xx)
    VALIDATION_PARAM = "E502"
    VALIDATION_CONFIG = "E503"
    VALIDATION_LENGTH = "E504"

    UNKNOWN = "E999"


class IndicatorError(Exception):
    """
    Base exception for indicator failures.

    Raised before any output is produced; there are no partial results.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        indicator: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.code = code
        self.indicator = indicator
        self.context = context or {}

        parts = [f"[{code.value}]"]
        if indicator:
            parts.append(f"[{indicator}]")
        parts.append(message)

        self.message = message
        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "indicator": self.indicator,
            "context": self.context,
        }

    def with_context(self, **kwargs: Any) -> "IndicatorError":
        """Add additional context and return self for chaining."""
        self.context.update(kwargs)
        return self


class InsufficientDataError(IndicatorError):
    """Raised when a series is too short for the requested period(s)."""

    def __init__(self, indicator: str, required: int, actual: int):
        self.required = required
        self.actual = actual

        super().__init__(
            message=f"Not enough data points: need at least {required}, got {actual}",
            code=ErrorCode.DATA_INSUFFICIENT,
            indicator=indicator,
            context={"required": required, "actual": actual},
        )


class InvalidParameterError(IndicatorError):
    """Raised for a non-positive period or an inconsistent parameter set."""

    def __init__(
        self,
        indicator: str,
        parameter: str,
        value: Any = None,
        reason: str = "Invalid value",
        code: ErrorCode = ErrorCode.VALIDATION_PARAM,
    ):
        self.parameter = parameter
        self.value = value

        context: dict[str, Any] = {"parameter": parameter}
        if value is not None:
            context["value"] = str(value)[:50]

        super().__init__(
            message=f"{parameter}: {reason}",
            code=code,
            indicator=indicator,
            context=context,
        )

    @classmethod
    def length_mismatch(cls, indicator: str, lengths: dict[str, int]) -> "InvalidParameterError":
        """Create error for price columns of different lengths."""
        described = ", ".join(f"{name}={n}" for name, n in lengths.items())
        error = cls(
            indicator=indicator,
            parameter=", ".join(lengths),
            reason=f"must have same length ({described})",
            code=ErrorCode.VALIDATION_LENGTH,
        )
        error.context["lengths"] = dict(lengths)
        return error
