"""Error Hierarchy — typed, categorized exceptions for all SlackGate failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are never retried; upstream errors (500-level) are reported, not raised
    - to_response() produces the REST envelope; to_payload() produces the tool-result envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SlackGateError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
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
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    slack_method: str | None = None


class SlackGateError(Exception):
    """Base exception for all SlackGate errors."""

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
                    "tool_name": self.context.tool_name,
                    "slack_method": self.context.slack_method,
                },
            }
        }

    def to_payload(self) -> dict:
        """Convert to the flat tool-result error shape."""
        return {"error": self.message}


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidArgumentsError(SlackGateError):
    """Tool arguments missing or unusable."""
    def __init__(
        self, message: str, missing: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_ARGUMENTS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.missing = missing or []

    @classmethod
    def for_missing(
        cls, required: list[str], missing: list[str],
        context: ErrorContext | None = None,
    ) -> "InvalidArgumentsError":
        """Message names the tool's whole required set; missing keeps only the absent ones."""
        if len(required) == 1:
            return cls(
                f"Missing required argument: {required[0]}",
                missing=missing, context=context,
            )
        if len(required) == 2:
            listed = " and ".join(required)
        else:
            listed = f"{', '.join(required[:-1])}, and {required[-1]}"
        return cls(
            f"Missing required arguments: {listed}",
            missing=missing, context=context,
        )


class UnknownToolError(SlackGateError):
    """Tool name not present in the catalog."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown tool: {tool_name}",
            "UNKNOWN_TOOL", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.tool_name = tool_name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class UpstreamFailureError(SlackGateError):
    """Slack Web API call failed at the transport or decoding level."""
    def __init__(
        self, message: str, slack_method: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.slack_method = slack_method
        super().__init__(
            f"Slack API error ({slack_method}): {message}",
            "UPSTREAM_FAILURE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, 502,
        )
        self.slack_method = slack_method


class ConfigurationError(SlackGateError):
    """Required startup configuration is absent."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Please set {' and '.join(missing)} environment variable"
            f"{'s' if len(missing) > 1 else ''}",
            "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.missing = missing
