"""Core components for the Auth0 SDK.

URL builders and typed request execution shared between the sync and
async clients.
"""

from __future__ import annotations

from .errors import ErrorFactory
from .request import (
    AsyncCustomRequest,
    AsyncVoidRequest,
    BaseRequest,
    CustomRequest,
    VoidRequest,
)
from .url_builder import AuthorizeUrlBuilder, LogoutUrlBuilder, UrlBuilder
from .validation import assert_not_empty, assert_not_null

__all__ = [
    "ErrorFactory",
    "BaseRequest",
    "CustomRequest",
    "VoidRequest",
    "AsyncCustomRequest",
    "AsyncVoidRequest",
    "UrlBuilder",
    "AuthorizeUrlBuilder",
    "LogoutUrlBuilder",
    "assert_not_empty",
    "assert_not_null",
]
