"""Exception hierarchy for httpdiff.

httpdiff keeps two kinds of failure strictly apart:

- Setup failures (a request cannot be built, sent, or its body read) are
  raised as SetupError subclasses. They are programmer errors in test code
  and are never turned into diff strings.
- Assertion mismatches are data. Comparators return them as diff strings;
  only the helpers in httpdiff.tools raise them, as DiffAssertionError.

All httpdiff errors inherit from HTTPDiffError and include:
- error_code: A unique ErrorCode enum for categorization
- context: ErrorContext with request/response details
- suggestions: List of actionable steps to resolve the issue

Example:
    try:
        response = must_send_request(request)
    except RequestSendError as e:
        print(e.format_verbose())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for httpdiff.

    Error codes are organized by category:
    - E1xx: Setup errors (building, sending, reading)
    - E2xx: Validation errors
    - E3xx: Assertion errors
    - E9xx: Unknown/internal errors
    """

    # Setup errors (E1xx)
    SETUP_FAILED = "E100"
    REQUEST_BUILD_FAILED = "E101"
    REQUEST_SEND_FAILED = "E102"
    BODY_READ_FAILED = "E103"

    # Validation errors (E2xx)
    VALIDATION_FAILED = "E201"
    INVALID_CONFIG = "E202"

    # Assertion errors (E3xx)
    DIFF_FOUND = "E301"

    # Unknown/internal errors (E9xx)
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if code_num < 200:
            return "setup"
        elif code_num < 300:
            return "validation"
        elif code_num < 400:
            return "assertion"
        else:
            return "unknown"


@dataclass
class ErrorContext:
    """Structured context for error logging and debugging.

    Attributes:
        request: HTTP request details (method, url)
        response: HTTP response details (status)
        extra: Additional context-specific information
        timestamp: When the error occurred
    """

    request: dict[str, Any] | None = None
    response: dict[str, Any] | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "request": self.request,
            "response": self.response,
            "extra": self.extra,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}


class HTTPDiffError(Exception):
    """Base exception for all httpdiff errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with execution details
        suggestions: List of actionable steps to resolve the issue
        recoverable: Whether the caller can reasonably continue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        recoverable: bool = True,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self.recoverable = recoverable
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
        ]

        if self.context.request:
            method = self.context.request.get("method", "?")
            url = self.context.request.get("url", "?")
            lines.append(f"Request: {method} {url}")

        if self.context.response:
            status = self.context.response.get("status", "?")
            lines.append(f"Response: HTTP {status}")

        if self.cause is not None:
            lines.append(f"Caused by: {type(self.cause).__name__}: {self.cause}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "recoverable": self.recoverable,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class SetupError(HTTPDiffError):
    """The test could not be set up.

    Raised when a request cannot be constructed, sent, or have its body
    read. These are never recoverable: the enclosing test must fail.
    """

    error_code = ErrorCode.SETUP_FAILED
    default_message = "Test setup failed"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("recoverable", False)
        super().__init__(message, **kwargs)


class RequestBuildError(SetupError):
    """An HTTP request could not be constructed."""

    error_code = ErrorCode.REQUEST_BUILD_FAILED
    default_message = "Failed to build HTTP request"
    default_suggestions = [
        "Check that the URL has a scheme and host (e.g. http://localhost:8000/path)",
        "Pass the body as str, bytes or an iterable of bytes",
    ]


class RequestSendError(SetupError):
    """An HTTP request could not be sent or got no response."""

    error_code = ErrorCode.REQUEST_SEND_FAILED
    default_message = "Failed to send HTTP request"
    default_suggestions = [
        "Verify the service under test is running",
        "Increase HTTPDIFF_TIMEOUT if the endpoint is slow",
    ]


class BodyReadError(SetupError):
    """A request or response body could not be read."""

    error_code = ErrorCode.BODY_READ_FAILED
    default_message = "Failed to read body"
    default_suggestions = [
        "Bodies can only be consumed once; pass a fresh request or response",
    ]


class ValidationError(HTTPDiffError):
    """A value failed validation."""

    error_code = ErrorCode.VALIDATION_FAILED
    default_message = "Validation failed"

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message, **kwargs)


class ConfigValidationError(ValidationError):
    """Configuration is invalid."""

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check httpdiff.yaml and HTTPDIFF_* environment variables",
    ]
