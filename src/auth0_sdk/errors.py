"""Error classes for the Auth0 Authentication API SDK.

Implements a structured error hierarchy with error codes so callers can
tell argument problems, API rejections and transport failures apart.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the SDK."""

    # Validation errors (2xxx)
    INVALID_ARGUMENT = "VAL_2001"
    INVALID_CONFIG = "VAL_2002"

    # Network errors (3xxx)
    NETWORK_ERROR = "NET_3001"
    TIMEOUT_ERROR = "NET_3002"
    MALFORMED_RESPONSE = "NET_3004"

    # API errors (4xxx)
    API_ERROR = "API_4000"
    RATE_LIMITED = "RATE_4001"


class Auth0Error(Exception):
    """Base error for the SDK with structured error information."""

    def __init__(
        self,
        message: str,
        code: ErrorCode | str,
        *,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if isinstance(code, str) else code.value
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidArgumentError(Auth0Error, ValueError):
    """A caller-supplied argument is missing or empty.

    Raised before any network interaction takes place.
    """

    def __init__(self, message: str, *, parameter: str | None = None) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_ARGUMENT,
            details={"parameter": parameter} if parameter else None,
        )
        self.parameter = parameter


class APIError(Auth0Error):
    """The Authentication API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error: str | None = None,
        description: str | None = None,
        body: Any = None,
        code: ErrorCode | str = ErrorCode.API_ERROR,
    ) -> None:
        details: dict[str, Any] = {}
        if error:
            details["error"] = error
        if description:
            details["error_description"] = description
        super().__init__(message, code, status_code=status_code, details=details)
        self.error = error
        self.description = description
        self.body = body


class RateLimitError(APIError):
    """Rate limit exceeded (HTTP 429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: int | None = None,
        limit: int | None = None,
        remaining: int | None = None,
        reset: int | None = None,
        error: str | None = None,
        description: str | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(
            message,
            status_code=429,
            error=error,
            description=description,
            body=body,
            code=ErrorCode.RATE_LIMITED,
        )
        if retry_after is not None:
            self.details["retry_after"] = retry_after
        self.retry_after = retry_after
        self.limit = limit
        self.remaining = remaining
        self.reset = reset


class NetworkError(Auth0Error):
    """Transport-level failure: connection refused, timeout, malformed response."""

    def __init__(
        self,
        message: str = "Network request failed",
        code: ErrorCode = ErrorCode.NETWORK_ERROR,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            details={"cause": str(cause)} if cause else None,
        )
        self.__cause__ = cause


class InvalidConfigError(Auth0Error):
    """Invalid SDK configuration outside of the required arguments."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_CONFIG,
            details={"field": field} if field else None,
        )
