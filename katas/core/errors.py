"""Error Hierarchy: typed, categorized exceptions for every kata failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Range errors are ValueErrors, division by zero is a ZeroDivisionError,
      float overflow is an OverflowError, so callers can catch either the
      kata type or the builtin one
    - Password validation never raises: a failed password is a normal ValidationResult
    - to_response() produces the error envelope used by the dispatch service

Design Decisions:
    - Single hierarchy with KataError base: the dispatch service catches one type
    - ErrorContext as dataclass: rich context without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ARITHMETIC = "arithmetic"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    exercise: str | None = None
    value: Any = None
    debug_info: dict[str, Any] | None = None


class KataError(Exception):
    """Base exception for all kata errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "exercise": self.context.exercise,
                    "value": _printable(self.context.value),
                },
            }
        }


def _printable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)


# ─── Domain Errors ──────────────────────────────────────────────

class DomainRangeError(KataError, ValueError):
    """Input outside the documented domain of an exercise."""
    def __init__(
        self,
        message: str,
        value: Any = None,
        lower: int | None = None,
        upper: int | None = None,
        exercise: str | None = None,
        code: str = "DOMAIN_RANGE",
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ErrorContext(exercise=exercise, value=value),
        )
        self.value = value
        self.lower = lower
        self.upper = upper


class MalformedRomanNumeralError(DomainRangeError):
    """String that cannot be decoded as a Roman numeral."""
    def __init__(self, numeral: str, reason: str):
        super().__init__(
            f"Malformed Roman numeral {numeral!r}: {reason}",
            value=numeral, exercise="from_roman", code="MALFORMED_ROMAN",
        )
        self.reason = reason


class DivisionByZeroError(KataError, ZeroDivisionError):
    """Calculator division with a zero divisor."""
    def __init__(self, dividend: float):
        super().__init__(
            "Cannot divide by zero",
            "DIVISION_BY_ZERO", ErrorCategory.ARITHMETIC,
            ErrorSeverity.ERROR,
            ErrorContext(exercise="calculator", value=dividend),
        )
        self.dividend = dividend


class ArithmeticOverflowError(KataError, OverflowError):
    """Calculator operand or result too large to represent as a float."""
    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Result of {operation} is too large to represent: {reason}",
            "ARITHMETIC_OVERFLOW", ErrorCategory.ARITHMETIC,
            ErrorSeverity.ERROR,
            ErrorContext(exercise="calculator", debug_info={"operation": operation}),
        )
        self.operation = operation


class UnknownExerciseError(KataError, LookupError):
    """Requested exercise is not registered."""
    def __init__(self, name: str):
        super().__init__(
            f"Exercise '{name}' does not exist.",
            "UNKNOWN_EXERCISE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ErrorContext(exercise=name),
        )
        self.name = name
