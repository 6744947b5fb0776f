"""Error Hierarchy — typed, categorized exceptions for all golf-intel failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Upstream failures abort the handler; they are never converted into partial output
    - "No tournament" / "unknown player" are NOT errors — handlers return them as output
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with GolfIntelError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


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
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entrypoint: str | None = None
    upstream_path: str | None = None
    debug_info: dict[str, Any] | None = None


class GolfIntelError(Exception):
    """Base exception for all golf-intel errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entrypoint": self.context.entrypoint,
                    "upstream_path": self.context.upstream_path,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InputValidationError(GolfIntelError):
    """Entrypoint input failed schema validation."""
    def __init__(
        self, entrypoint: str, details: list[dict], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entrypoint = entrypoint
        super().__init__(
            f"Invalid input for entrypoint '{entrypoint}'",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class EntrypointNotFoundError(GolfIntelError):
    """No entrypoint registered under the requested key."""
    def __init__(self, key: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entrypoint = key
        super().__init__(
            f"Entrypoint '{key}' not found",
            "ENTRYPOINT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.key = key


# ─── Infrastructure Errors (500-level) ──────────────────────────

class UpstreamAPIError(GolfIntelError):
    """ESPN API call failed: non-2xx status, transport failure or unreadable body.

    status_code is None when no HTTP response was received.
    """
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UPSTREAM_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.status_code = status_code
