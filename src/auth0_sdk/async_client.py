"""Async Auth0 Authentication API client.

Same operations as ``AuthAPI``; requests returned by ``user_info`` and
``reset_password`` are awaited with ``await request.execute()``.
"""

from __future__ import annotations

from typing import Any, Self

import httpx

from .client import CHANGE_PASSWORD_PATH, USERINFO_PATH
from .config import AuthAPIConfig, TelemetryConfig, normalize_domain
from .core.request import AsyncCustomRequest, AsyncVoidRequest
from .core.url_builder import AuthorizeUrlBuilder, LogoutUrlBuilder
from .core.validation import assert_not_empty, assert_not_null
from .http import create_async_http_client
from .models import ResetPasswordBody, UserInfo
from .telemetry import configure_telemetry


class AsyncAuthAPI:
    """Asynchronous client for the Auth0 Authentication API."""

    def __init__(
        self,
        domain: str,
        client_id: str,
        client_secret: str,
        *,
        timeout: float = 10.0,
        telemetry: TelemetryConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize async client.

        Raises:
            InvalidArgumentError: If a required argument is missing or empty.
        """
        assert_not_empty(domain, "domain")
        assert_not_empty(client_id, "client id")
        assert_not_empty(client_secret, "client secret")
        normalize_domain(domain)

        config = AuthAPIConfig(
            domain=domain,
            client_id=client_id,
            client_secret=client_secret,
            timeout=timeout,
            telemetry=telemetry or TelemetryConfig(),
        )
        self._setup(config, http_client)

    @classmethod
    def from_config(
        cls,
        config: AuthAPIConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> Self:
        """Create a client from an existing configuration."""
        assert_not_null(config, "config")
        api = cls.__new__(cls)
        api._setup(config, http_client)
        return api

    def _setup(
        self, config: AuthAPIConfig, http_client: httpx.AsyncClient | None
    ) -> None:
        configure_telemetry(config.telemetry)
        self.config = config
        self._owns_http = http_client is None
        self._http = http_client or create_async_http_client(config)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if it was created by the SDK."""
        if self._owns_http:
            await self._http.aclose()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def client_id(self) -> str:
        return self.config.client_id

    def set_logging_enabled(self, enabled: bool) -> None:
        """Same as ``AuthAPI.set_logging_enabled``; affects every client."""
        level = "DEBUG" if enabled else "WARNING"
        configure_telemetry(
            self.config.telemetry.model_copy(update={"log_level": level})
        )

    def authorize(self, connection: str, redirect_uri: str) -> AuthorizeUrlBuilder:
        assert_not_empty(connection, "connection")
        assert_not_empty(redirect_uri, "redirect uri")
        return AuthorizeUrlBuilder(
            self.base_url, self.client_id, connection, redirect_uri
        )

    def logout(self, return_to_url: str, include_client_id: bool) -> LogoutUrlBuilder:
        assert_not_empty(return_to_url, "return to url")
        return LogoutUrlBuilder(
            self.base_url, self.client_id, return_to_url, include_client_id
        )

    def user_info(self, access_token: str) -> AsyncCustomRequest[UserInfo]:
        assert_not_empty(access_token, "access token")
        request = AsyncCustomRequest(
            self._http, f"{self.base_url}{USERINFO_PATH}", "GET", UserInfo
        )
        request.add_header("Authorization", f"Bearer {access_token}")
        request.add_header("Content-Type", "application/json")
        return request

    def reset_password(self, email: str, connection: str) -> AsyncVoidRequest:
        assert_not_empty(email, "email")
        assert_not_empty(connection, "connection")
        request = AsyncVoidRequest(
            self._http, f"{self.base_url}{CHANGE_PASSWORD_PATH}", "POST"
        )
        request.add_header("Content-Type", "application/json")
        request.set_body(
            ResetPasswordBody(
                email=email, connection=connection, client_id=self.client_id
            )
        )
        return request
