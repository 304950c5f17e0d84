"""Auth0 Authentication API client (sync)."""

from __future__ import annotations

from typing import Any, Self

import httpx

from .config import AuthAPIConfig, TelemetryConfig, normalize_domain
from .core.request import CustomRequest, VoidRequest
from .core.url_builder import AuthorizeUrlBuilder, LogoutUrlBuilder
from .core.validation import assert_not_empty, assert_not_null
from .http import create_http_client
from .models import ResetPasswordBody, UserInfo
from .telemetry import configure_telemetry

USERINFO_PATH = "/userinfo"
CHANGE_PASSWORD_PATH = "/dbconnections/change_password"


class AuthAPI:
    """Synchronous client for the Auth0 Authentication API.

    Example:
        >>> api = AuthAPI("tenant.auth0.com", "client-id", "client-secret")
        >>> url = api.authorize("my-connection", "https://app/callback").build()
    """

    def __init__(
        self,
        domain: str,
        client_id: str,
        client_secret: str,
        *,
        timeout: float = 10.0,
        telemetry: TelemetryConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            domain: Tenant domain, with or without scheme (https is assumed).
            client_id: Application client id.
            client_secret: Application client secret.
            timeout: Request timeout in seconds.
            telemetry: Optional logging/tracing configuration, applied
                process-wide on construction.
            http_client: Optional httpx client; it is not closed by ``close()``.

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
        http_client: httpx.Client | None = None,
    ) -> Self:
        """Create a client from an existing configuration."""
        assert_not_null(config, "config")
        api = cls.__new__(cls)
        api._setup(config, http_client)
        return api

    def _setup(self, config: AuthAPIConfig, http_client: httpx.Client | None) -> None:
        configure_telemetry(config.telemetry)
        self.config = config
        self._owns_http = http_client is None
        self._http = http_client or create_http_client(config)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if it was created by the SDK."""
        if self._owns_http:
            self._http.close()

    @property
    def base_url(self) -> str:
        """Normalized base URL, e.g. ``https://tenant.auth0.com``."""
        return self.config.base_url

    @property
    def client_id(self) -> str:
        return self.config.client_id

    def set_logging_enabled(self, enabled: bool) -> None:
        """Switch request logging between DEBUG and WARNING.

        Telemetry state is process-wide, so this also changes the level for
        every other client (sync or async) in the process.
        """
        level = "DEBUG" if enabled else "WARNING"
        configure_telemetry(
            self.config.telemetry.model_copy(update={"log_level": level})
        )

    def authorize(self, connection: str, redirect_uri: str) -> AuthorizeUrlBuilder:
        """Create a builder for the ``/authorize`` URL.

        Args:
            connection: Connection to authenticate with.
            redirect_uri: Where Auth0 redirects after authentication.
        """
        assert_not_empty(connection, "connection")
        assert_not_empty(redirect_uri, "redirect uri")
        return AuthorizeUrlBuilder(
            self.base_url, self.client_id, connection, redirect_uri
        )

    def logout(self, return_to_url: str, include_client_id: bool) -> LogoutUrlBuilder:
        """Create a builder for the ``/v2/logout`` URL.

        Args:
            return_to_url: Where Auth0 redirects after logout.
            include_client_id: Whether to send the configured ``client_id``.
        """
        assert_not_empty(return_to_url, "return to url")
        return LogoutUrlBuilder(
            self.base_url, self.client_id, return_to_url, include_client_id
        )

    def user_info(self, access_token: str) -> CustomRequest[UserInfo]:
        """Create a request for the profile bound to ``access_token``."""
        assert_not_empty(access_token, "access token")
        request = CustomRequest(
            self._http, f"{self.base_url}{USERINFO_PATH}", "GET", UserInfo
        )
        request.add_header("Authorization", f"Bearer {access_token}")
        request.add_header("Content-Type", "application/json")
        return request

    def reset_password(self, email: str, connection: str) -> VoidRequest:
        """Create a request that sends a change-password email.

        Args:
            email: Email of the user.
            connection: Database connection the user belongs to.
        """
        assert_not_empty(email, "email")
        assert_not_empty(connection, "connection")
        request = VoidRequest(
            self._http, f"{self.base_url}{CHANGE_PASSWORD_PATH}", "POST"
        )
        request.add_header("Content-Type", "application/json")
        request.set_body(
            ResetPasswordBody(
                email=email, connection=connection, client_id=self.client_id
            )
        )
        return request
