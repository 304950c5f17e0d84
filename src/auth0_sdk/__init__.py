"""Auth0 Authentication API Python SDK."""

from .async_client import AsyncAuthAPI
from .client import AuthAPI
from .config import AuthAPIConfig, TelemetryConfig
from .core.request import (
    AsyncCustomRequest,
    AsyncVoidRequest,
    CustomRequest,
    VoidRequest,
)
from .core.url_builder import AuthorizeUrlBuilder, LogoutUrlBuilder, UrlBuilder
from .errors import (
    APIError,
    Auth0Error,
    ErrorCode,
    InvalidArgumentError,
    InvalidConfigError,
    NetworkError,
    RateLimitError,
)
from .models import UserInfo
from .telemetry import configure_telemetry

__all__ = [
    "AuthAPI",
    "AsyncAuthAPI",
    "AuthAPIConfig",
    "TelemetryConfig",
    "UrlBuilder",
    "AuthorizeUrlBuilder",
    "LogoutUrlBuilder",
    "CustomRequest",
    "VoidRequest",
    "AsyncCustomRequest",
    "AsyncVoidRequest",
    "UserInfo",
    "Auth0Error",
    "APIError",
    "RateLimitError",
    "NetworkError",
    "InvalidArgumentError",
    "InvalidConfigError",
    "ErrorCode",
    "configure_telemetry",
]

__version__ = "0.1.0"
