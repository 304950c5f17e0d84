"""Configuration for the Auth0 Authentication API SDK.

Uses Pydantic v2 for validation. The configuration is frozen after
construction so a single instance can be shared by concurrent calls.
"""

from __future__ import annotations

from typing import Annotated, Any, Self

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationInfo,
    field_validator,
)

from .core.validation import assert_not_empty
from .errors import InvalidArgumentError, InvalidConfigError

# Parameter names as they appear in error messages
_REQUIRED_FIELDS = {
    "domain": "domain",
    "client_id": "client id",
    "client_secret": "client secret",
}


def normalize_domain(domain: str) -> str:
    """Turn a bare host or a URL into an absolute base URL.

    A domain without a scheme gets ``https://``; an explicit ``http://`` or
    ``https://`` scheme is kept. The trailing slash is stripped.

    Raises:
        InvalidArgumentError: If the result cannot be parsed as a URL.
    """
    url = domain.strip()
    if not url.lower().startswith(("https://", "http://")):
        url = f"https://{url}"
    url = url.rstrip("/")

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        msg = "The domain had an invalid format and couldn't be parsed as an URL."
        raise InvalidArgumentError(msg, parameter="domain") from e
    if not parsed.host:
        msg = "The domain had an invalid format and couldn't be parsed as an URL."
        raise InvalidArgumentError(msg, parameter="domain")
    return url


class TelemetryConfig(BaseModel):
    """Logging and tracing configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    service_name: str = "auth0-sdk"
    trace_requests: bool = True
    log_level: str = "INFO"


class AuthAPIConfig(BaseModel):
    """Main configuration for the Authentication API client."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    # Required
    domain: str
    client_id: str
    client_secret: SecretStr

    # HTTP settings
    timeout: Annotated[float, Field(gt=0, le=300)] = 10.0
    connect_timeout: Annotated[float, Field(gt=0, le=60)] = 10.0

    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @field_validator("domain", "client_id", "client_secret", mode="before")
    @classmethod
    def validate_required(cls, v: Any, info: ValidationInfo) -> Any:
        """Reject missing or empty required values."""
        name = _REQUIRED_FIELDS[info.field_name]
        raw = v.get_secret_value() if isinstance(v, SecretStr) else v
        assert_not_empty(raw, name)
        return v

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Ensure the domain can be turned into a base URL."""
        normalize_domain(v)
        return v

    @property
    def base_url(self) -> str:
        """Get normalized base URL without trailing slash."""
        return normalize_domain(self.domain)

    def with_overrides(self, **kwargs: Any) -> Self:
        """Create new config with overridden values."""
        data = self.model_dump()
        data["client_secret"] = self.client_secret.get_secret_value()
        data.update(kwargs)
        return self.__class__(**data)

    @classmethod
    def from_env(cls, prefix: str = "AUTH0_") -> Self:
        """Create config from environment variables."""
        import os

        def get_env(key: str, default: Any = None) -> Any:
            return os.environ.get(f"{prefix}{key}", default)

        for key in ("DOMAIN", "CLIENT_ID", "CLIENT_SECRET"):
            if not get_env(key):
                msg = f"{prefix}{key} environment variable is required"
                raise InvalidConfigError(msg, field=key.lower())

        return cls(
            domain=get_env("DOMAIN"),
            client_id=get_env("CLIENT_ID"),
            client_secret=get_env("CLIENT_SECRET"),
            timeout=float(get_env("TIMEOUT", "10.0")),
        )
