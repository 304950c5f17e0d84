"""Property-based tests for ErrorFactory.

Error Mapping
- Every non-2xx status becomes an APIError carrying that status
- 429 always becomes a RateLimitError
- The decoded error payload is always preserved
- Transport failures always become NetworkError
"""

from __future__ import annotations

import httpx
from hypothesis import given, settings
from hypothesis import strategies as st

from auth0_sdk.core.errors import ErrorFactory
from auth0_sdk.errors import APIError, ErrorCode, NetworkError, RateLimitError

error_status_strategy = st.integers(min_value=400, max_value=599)
error_payload_strategy = st.fixed_dictionaries(
    {
        "error": st.text(min_size=1, max_size=32),
        "error_description": st.text(min_size=1, max_size=64),
    }
)


class TestFromHttpResponse:
    @given(status=error_status_strategy, payload=error_payload_strategy)
    @settings(max_examples=100)
    def test_status_and_payload_preserved(self, status: int, payload: dict) -> None:
        response = httpx.Response(status, json=payload)

        error = ErrorFactory.from_http_response(response)

        assert isinstance(error, APIError)
        assert error.status_code == status
        assert error.error == payload["error"]
        assert error.description == payload["error_description"]
        assert error.body == payload
        assert isinstance(error, RateLimitError) is (status == 429)

    @given(retry_after=st.integers(min_value=0, max_value=3600))
    @settings(max_examples=50)
    def test_retry_after_header(self, retry_after: int) -> None:
        response = httpx.Response(429, headers={"Retry-After": str(retry_after)})

        error = ErrorFactory.from_http_response(response)

        assert isinstance(error, RateLimitError)
        assert error.retry_after == retry_after
        assert error.code == ErrorCode.RATE_LIMITED

    @given(status=error_status_strategy, text=st.text(min_size=1, max_size=64))
    @settings(max_examples=50)
    def test_plain_text_body(self, status: int, text: str) -> None:
        response = httpx.Response(status, text=text)

        error = ErrorFactory.from_http_response(response)

        assert error.status_code == status
        assert isinstance(error, APIError)


class TestFromTransportError:
    @given(
        exc_type=st.sampled_from([
            httpx.ConnectError,
            httpx.ReadError,
            httpx.RemoteProtocolError,
            httpx.ConnectTimeout,
            httpx.ReadTimeout,
        ])
    )
    @settings(max_examples=20)
    def test_maps_to_network_error(self, exc_type: type[httpx.TransportError]) -> None:
        cause = exc_type("failure")

        error = ErrorFactory.from_transport_error(cause)

        assert isinstance(error, NetworkError)
        assert error.__cause__ is cause
        expected = (
            ErrorCode.TIMEOUT_ERROR
            if issubclass(exc_type, httpx.TimeoutException)
            else ErrorCode.NETWORK_ERROR
        )
        assert error.code == expected
