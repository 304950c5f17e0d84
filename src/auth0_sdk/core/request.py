"""Typed request execution for the Auth0 SDK.

A request is created per call by the client, decorated with headers and an
optional JSON body, and executed once. The result type is chosen by the
caller through a pydantic-compatible ``response_type``; ``None`` marks a
void endpoint whose body is ignored.

Transport failures surface as NetworkError and non-2xx responses as
APIError. Nothing is retried at this layer.
"""

from __future__ import annotations

from typing import Any, Generic, Self, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import InvalidArgumentError
from ..http import redact_headers
from ..telemetry import get_logger, trace_operation
from .errors import ErrorFactory
from .validation import assert_not_empty

T = TypeVar("T")

SPAN_NAME = "auth0.request"


class BaseRequest(Generic[T]):
    """Request preparation and response decoding shared by sync and async."""

    def __init__(
        self,
        url: str,
        method: str,
        response_type: type[T] | None,
    ) -> None:
        assert_not_empty(url, "url")
        assert_not_empty(method, "method")
        self._url = url
        self._method = method.upper()
        self._response_type = response_type
        self._adapter: TypeAdapter[T] | None = (
            TypeAdapter(response_type) if response_type is not None else None
        )
        self._headers: dict[str, str] = {}
        self._body: Any = None
        self._parameters: dict[str, Any] = {}

    @property
    def _logger(self) -> Any:
        # Looked up per call so set_logging_enabled reaches pending requests
        return get_logger()

    @property
    def url(self) -> str:
        return self._url

    @property
    def method(self) -> str:
        return self._method

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def add_header(self, name: str, value: str) -> Self:
        """Add or replace a request header."""
        assert_not_empty(name, "name")
        assert_not_empty(value, "value")
        self._headers[name] = value
        return self

    def set_body(self, body: Any) -> Self:
        """Set a JSON-serializable body (pydantic models are dumped)."""
        if self._parameters:
            msg = "Cannot set a body on a request that already has body parameters"
            raise InvalidArgumentError(msg, parameter="body")
        self._body = body
        return self

    def add_parameter(self, name: str, value: Any) -> Self:
        """Add a single field to the JSON body."""
        assert_not_empty(name, "name")
        if self._body is not None:
            msg = "Cannot add body parameters to a request with an explicit body"
            raise InvalidArgumentError(msg, parameter=name)
        self._parameters[name] = value
        return self

    def _payload(self) -> Any:
        if self._body is not None:
            if isinstance(self._body, BaseModel):
                return self._body.model_dump(mode="json")
            return self._body
        if self._parameters:
            return dict(self._parameters)
        return None

    def _request_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headers": self._headers}
        payload = self._payload()
        if payload is not None:
            kwargs["json"] = payload
        return kwargs

    def _span_attributes(self) -> dict[str, Any]:
        return {"http.method": self._method, "http.url": self._url}

    def _log_request(self) -> None:
        self._logger.debug(
            "Executing request",
            method=self._method,
            url=self._url,
            headers=redact_headers(self._headers),
        )

    def _log_transport_error(self, error: httpx.HTTPError) -> None:
        self._logger.warning(
            "Request failed",
            method=self._method,
            url=self._url,
            error=str(error),
        )

    def _handle_response(self, response: httpx.Response) -> T | None:
        """Decode a response into the expected type or raise an SDK error."""
        self._logger.debug(
            "Received response",
            method=self._method,
            url=self._url,
            status_code=response.status_code,
        )

        if not response.is_success:
            error = ErrorFactory.from_http_response(response)
            self._logger.warning(
                "Request rejected",
                method=self._method,
                url=self._url,
                status_code=response.status_code,
                error=error.error,
            )
            raise error

        if self._adapter is None:
            return None

        try:
            return self._adapter.validate_json(response.content)
        except PydanticValidationError as e:
            raise ErrorFactory.malformed_response(e) from e


class CustomRequest(BaseRequest[T]):
    """Synchronous request returning a decoded ``T``."""

    def __init__(
        self,
        client: httpx.Client,
        url: str,
        method: str,
        response_type: type[T] | None,
    ) -> None:
        super().__init__(url, method, response_type)
        self._client = client

    def execute(self) -> T:
        """Execute the request, blocking until the response is received.

        Returns:
            Decoded response body, or None for void requests.

        Raises:
            APIError: On a non-2xx response.
            NetworkError: On transport failure or undecodable body.
        """
        with trace_operation(SPAN_NAME, attributes=self._span_attributes()) as span:
            self._log_request()
            try:
                response = self._client.request(
                    self._method, self._url, **self._request_kwargs()
                )
            except httpx.HTTPError as e:
                self._log_transport_error(e)
                raise ErrorFactory.from_transport_error(e) from e

            span.set_attribute("http.status_code", response.status_code)
            return self._handle_response(response)  # type: ignore[return-value]


class VoidRequest(CustomRequest[None]):
    """Synchronous request whose response body is ignored."""

    def __init__(self, client: httpx.Client, url: str, method: str) -> None:
        super().__init__(client, url, method, None)


class AsyncCustomRequest(BaseRequest[T]):
    """Asynchronous request returning a decoded ``T``."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        method: str,
        response_type: type[T] | None,
    ) -> None:
        super().__init__(url, method, response_type)
        self._client = client

    async def execute(self) -> T:
        """Execute the request, suspending only on network I/O.

        Returns:
            Decoded response body, or None for void requests.

        Raises:
            APIError: On a non-2xx response.
            NetworkError: On transport failure or undecodable body.
        """
        with trace_operation(SPAN_NAME, attributes=self._span_attributes()) as span:
            self._log_request()
            try:
                response = await self._client.request(
                    self._method, self._url, **self._request_kwargs()
                )
            except httpx.HTTPError as e:
                self._log_transport_error(e)
                raise ErrorFactory.from_transport_error(e) from e

            span.set_attribute("http.status_code", response.status_code)
            return self._handle_response(response)  # type: ignore[return-value]


class AsyncVoidRequest(AsyncCustomRequest[None]):
    """Asynchronous request whose response body is ignored."""

    def __init__(self, client: httpx.AsyncClient, url: str, method: str) -> None:
        super().__init__(client, url, method, None)
