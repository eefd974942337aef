"""
Price source ports and error types.

This module defines the protocol for price source adapters
and the errors they raise while reading and validating bars.
"""

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

from domain import ErrorCode, OHLCBar


# ============================================================================
# Error Classes
# ============================================================================

class SourceError(Exception):
    """
    Base exception for price source failures.

    Provides structured error information for debugging and reporting.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        source: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        self.source = source
        self.context = context or {}
        self.cause = cause

        parts = [f"[{code.value}]"]
        if source:
            parts.append(f"[{source}]")
        parts.append(message)

        self.message = message
        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "source": self.source,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
        }

    def with_context(self, **kwargs: Any) -> "SourceError":
        """Add additional context and return self for chaining."""
        self.context.update(kwargs)
        return self


class ParseError(SourceError):
    """Raised when a cell or file cannot be parsed."""

    def __init__(
        self,
        source: str,
        format_type: str,
        reason: str,
        row: int | None = None,
        raw_content: str | None = None,
        cause: Exception | None = None,
    ):
        code_map = {
            "csv": ErrorCode.PARSE_CSV,
            "date": ErrorCode.PARSE_DATE,
            "number": ErrorCode.PARSE_NUMBER,
        }
        code = code_map.get(format_type, ErrorCode.UNKNOWN)

        context: dict[str, Any] = {"format": format_type}
        if row is not None:
            context["row"] = row
        if raw_content:
            context["raw_preview"] = raw_content[:200]

        location = f" (row {row})" if row is not None else ""
        super().__init__(
            message=f"Failed to parse {format_type}{location}: {reason}",
            code=code,
            source=source,
            context=context,
            cause=cause,
        )


class DataError(SourceError):
    """Raised when data is missing, empty, or violates bar invariants."""

    def __init__(
        self,
        source: str,
        reason: str,
        code: ErrorCode = ErrorCode.DATA_INVALID,
        field: str | None = None,
        row: int | None = None,
    ):
        context: dict[str, Any] = {"reason": reason}
        if field:
            context["field"] = field
        if row is not None:
            context["row"] = row

        super().__init__(
            message=reason,
            code=code,
            source=source,
            context=context,
        )

    @classmethod
    def missing(cls, source: str, field: str) -> "DataError":
        """Create error for missing required column."""
        return cls(
            source=source,
            reason=f"Missing required column: {field}",
            code=ErrorCode.DATA_MISSING,
            field=field,
        )

    @classmethod
    def empty(cls, source: str, description: str = "No data") -> "DataError":
        """Create error for empty input."""
        return cls(
            source=source,
            reason=description,
            code=ErrorCode.DATA_EMPTY,
        )

    @classmethod
    def invalid_bar(cls, source: str, row: int, bar: OHLCBar) -> "DataError":
        """Create error for a bar that violates OHLC invariants."""
        problems = "; ".join(bar.validation_errors())
        return cls(
            source=source,
            reason=f"Invalid bar at row {row}: {problems}",
            code=ErrorCode.DATA_INVALID,
            row=row,
        )


# ============================================================================
# Protocol
# ============================================================================

@runtime_checkable
class PriceSource(Protocol):
    """
    Protocol for price source adapters.

    Implementations must:
    - Return bars oldest first
    - Fail explicitly with ParseError/DataError, no silent fallbacks
    """

    @property
    def source_name(self) -> str:
        """Unique identifier for this price source."""
        ...

    @abstractmethod
    def load(self) -> list[OHLCBar]:
        """
        Load bars from the source.

        Raises:
            ParseError: If the input cannot be parsed
            DataError: If columns are missing or a bar is invalid
        """
        ...
