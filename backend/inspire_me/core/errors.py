"""Error Hierarchy — typed, categorized exceptions for all Inspire Me failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope used by the global handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with InspireError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data kept apart from logging setup
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


NO_QUOTES_MESSAGE = (
    "No quotes found for this topic. Try a different one or generate random quotes!"
)


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    topic: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class InspireError(Exception):
    """Base exception for all Inspire Me errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "topic": self.context.topic,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmptyResultError(InspireError):
    """Selection produced zero quotes (only when the corpus is empty)."""
    def __init__(self, topic: str = "", context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.topic = topic
        ctx.user_message = ctx.user_message or NO_QUOTES_MESSAGE
        super().__init__(
            f"Selection for topic {topic!r} produced no quotes",
            "NO_QUOTES_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class CorpusIntegrityError(InspireError):
    """Quote corpus violates its invariants (unique ids, non-empty fields)."""
    def __init__(self, message: str, quote_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Corpus integrity violated at quote {quote_id!r}: {message}",
            "CORPUS_INTEGRITY", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.quote_id = quote_id
