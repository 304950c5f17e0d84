"""URL builders for the Auth0 authorize and logout endpoints.

Builders accumulate query parameters through chained setters and validate
that every required parameter is present in a single terminal ``build()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self
from urllib.parse import urlencode

from ..errors import InvalidArgumentError
from .validation import assert_not_empty

AUTHORIZE_PATH = "/authorize"
LOGOUT_PATH = "/v2/logout"


class UrlBuilder:
    """Generic builder appending validated query parameters to a base URL."""

    def __init__(
        self,
        base_url: str,
        path: str,
        required: Iterable[str] = (),
    ) -> None:
        """Initialize URL builder.

        Args:
            base_url: Absolute origin, e.g. ``https://tenant.auth0.com``.
            path: Endpoint path appended to the base URL.
            required: Parameter names that must be set before ``build()``.
        """
        self._base_url = base_url.rstrip("/")
        self._path = path
        self._required = tuple(required)
        self._parameters: dict[str, str] = {}

    @property
    def parameters(self) -> dict[str, str]:
        """Copy of the parameters set so far."""
        return dict(self._parameters)

    def with_parameter(self, name: str, value: str | bool | int | None) -> Self:
        """Set or overwrite a query parameter.

        A ``None`` value removes the parameter.
        """
        assert_not_empty(name, "name")
        if value is None:
            self._parameters.pop(name, None)
        elif isinstance(value, bool):
            self._parameters[name] = "true" if value else "false"
        else:
            self._parameters[name] = str(value)
        return self

    def build(self) -> str:
        """Validate required parameters and return the final URL.

        Raises:
            InvalidArgumentError: If a required parameter was never set.
        """
        for name in self._required:
            if name not in self._parameters:
                raise InvalidArgumentError(
                    f"Missing required parameter '{name}'",
                    parameter=name,
                )

        url = f"{self._base_url}{self._path}"
        if not self._parameters:
            return url
        return f"{url}?{urlencode(self._parameters)}"


class AuthorizeUrlBuilder(UrlBuilder):
    """Builder for ``/authorize`` URLs (authorization code flow)."""

    def __init__(
        self,
        base_url: str,
        client_id: str,
        connection: str,
        redirect_uri: str,
    ) -> None:
        assert_not_empty(connection, "connection")
        assert_not_empty(redirect_uri, "redirect uri")
        super().__init__(
            base_url,
            AUTHORIZE_PATH,
            required=("response_type", "client_id", "redirect_uri", "connection"),
        )
        self.with_parameter("response_type", "code")
        self.with_parameter("client_id", client_id)
        self.with_parameter("redirect_uri", redirect_uri)
        self.with_parameter("connection", connection)

    def with_connection(self, connection: str) -> Self:
        assert_not_empty(connection, "connection")
        return self.with_parameter("connection", connection)

    def with_redirect_url(self, redirect_uri: str) -> Self:
        assert_not_empty(redirect_uri, "redirect uri")
        return self.with_parameter("redirect_uri", redirect_uri)

    def with_response_type(self, response_type: str) -> Self:
        """Override the default ``code`` response type (e.g. ``token id_token``)."""
        assert_not_empty(response_type, "response type")
        return self.with_parameter("response_type", response_type)

    def with_state(self, state: str) -> Self:
        assert_not_empty(state, "state")
        return self.with_parameter("state", state)

    def with_scope(self, scope: str) -> Self:
        assert_not_empty(scope, "scope")
        return self.with_parameter("scope", scope)

    def with_audience(self, audience: str) -> Self:
        assert_not_empty(audience, "audience")
        return self.with_parameter("audience", audience)


class LogoutUrlBuilder(UrlBuilder):
    """Builder for ``/v2/logout`` URLs."""

    def __init__(
        self,
        base_url: str,
        client_id: str,
        return_to_url: str,
        include_client_id: bool,
    ) -> None:
        assert_not_empty(return_to_url, "return to url")
        super().__init__(base_url, LOGOUT_PATH, required=("returnTo",))
        self.with_parameter("returnTo", return_to_url)
        if include_client_id:
            self.with_parameter("client_id", client_id)

    def with_return_to_url(self, return_to_url: str) -> Self:
        assert_not_empty(return_to_url, "return to url")
        return self.with_parameter("returnTo", return_to_url)

    def use_federated(self, federated: bool) -> Self:
        """Also log the user out of the identity provider.

        The ``federated`` parameter is only sent when enabled.
        """
        if federated:
            return self.with_parameter("federated", "")
        return self.with_parameter("federated", None)
