"""Centralized error factory for the Auth0 SDK.

Turns httpx responses and transport exceptions into SDK errors with a
consistent structure.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from ..errors import (
    APIError,
    ErrorCode,
    NetworkError,
    RateLimitError,
)


def _int_header(response: httpx.Response, name: str) -> int | None:
    value = response.headers.get(name)
    if value is not None and value.strip().lstrip("-").isdigit():
        return int(value)
    return None


class ErrorFactory:
    """Centralized error creation with consistent structure."""

    @staticmethod
    def parse_body(response: httpx.Response) -> Any:
        """Decode the response body as JSON, falling back to raw text."""
        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return response.text

    @staticmethod
    def from_http_response(response: httpx.Response) -> APIError:
        """Create SDK error from a non-2xx HTTP response.

        Args:
            response: HTTP response object.

        Returns:
            APIError, or RateLimitError for 429.
        """
        status = response.status_code
        body = ErrorFactory.parse_body(response)

        error: str | None = None
        description: str | None = None
        if isinstance(body, dict):
            error = body.get("error") or body.get("code")
            description = (
                body.get("error_description")
                or body.get("description")
                or body.get("message")
            )
            if not isinstance(error, str):
                error = None
            if not isinstance(description, str):
                description = None
        elif isinstance(body, str) and body:
            description = body

        if status == 429:
            return RateLimitError(
                description or "Rate limit exceeded",
                retry_after=_int_header(response, "Retry-After"),
                limit=_int_header(response, "X-RateLimit-Limit"),
                remaining=_int_header(response, "X-RateLimit-Remaining"),
                reset=_int_header(response, "X-RateLimit-Reset"),
                error=error,
                description=description,
                body=body,
            )

        message = f"Request failed with status code {status}"
        if description:
            message = f"{message}: {description}"
        return APIError(
            message,
            status_code=status,
            error=error,
            description=description,
            body=body,
        )

    @staticmethod
    def from_transport_error(error: httpx.HTTPError) -> NetworkError:
        """Create SDK error from an httpx transport exception."""
        if isinstance(error, httpx.TimeoutException):
            return NetworkError(
                f"Request timed out: {error}",
                ErrorCode.TIMEOUT_ERROR,
                cause=error,
            )
        return NetworkError(f"Failed to execute request: {error}", cause=error)

    @staticmethod
    def malformed_response(error: Exception) -> NetworkError:
        """Create SDK error for a 2xx body that could not be decoded."""
        return NetworkError(
            f"Failed to parse response body: {error}",
            ErrorCode.MALFORMED_RESPONSE,
            cause=error,
        )
