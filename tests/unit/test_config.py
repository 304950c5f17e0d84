"""Unit tests for AuthAPIConfig and domain normalization."""

import httpx
import pytest
from pydantic import ValidationError

from auth0_sdk.config import AuthAPIConfig, TelemetryConfig, normalize_domain
from auth0_sdk.errors import InvalidArgumentError, InvalidConfigError

DOMAIN = "domain.auth0.com"
CLIENT_ID = "clientId"
CLIENT_SECRET = "clientSecret"


class TestNormalizeDomain:
    def test_bare_host_defaults_to_https(self) -> None:
        url = httpx.URL(normalize_domain("me.something.com"))

        assert url.scheme == "https"
        assert url.host == "me.something.com"

    def test_http_scheme_is_preserved(self) -> None:
        url = httpx.URL(normalize_domain("http://me.something.com"))

        assert url.scheme == "http"
        assert url.host == "me.something.com"

    def test_trailing_slash_stripped(self) -> None:
        assert normalize_domain("https://me.something.com/") == "https://me.something.com"

    def test_port_is_kept(self) -> None:
        assert normalize_domain("localhost:8080") == "https://localhost:8080"

    def test_unparseable_domain(self) -> None:
        with pytest.raises(InvalidArgumentError, match="invalid format"):
            normalize_domain("https://")


class TestAuthAPIConfig:
    def test_defaults(self, base_config: AuthAPIConfig) -> None:
        assert base_config.base_url == f"https://{DOMAIN}"
        assert base_config.client_id == CLIENT_ID
        assert base_config.client_secret.get_secret_value() == CLIENT_SECRET
        assert base_config.timeout == 10.0
        assert base_config.telemetry == TelemetryConfig()

    def test_secret_is_not_rendered(self, base_config: AuthAPIConfig) -> None:
        assert CLIENT_SECRET not in repr(base_config)

    @pytest.mark.parametrize(
        ("field", "name"),
        [
            ("domain", "domain"),
            ("client_id", "client id"),
            ("client_secret", "client secret"),
        ],
    )
    def test_required_fields_reject_none(self, field: str, name: str) -> None:
        values = {
            "domain": DOMAIN,
            "client_id": CLIENT_ID,
            "client_secret": CLIENT_SECRET,
        }
        values[field] = None

        with pytest.raises(ValidationError, match=f"'{name}' cannot be null!"):
            AuthAPIConfig(**values)

    def test_required_fields_reject_empty(self) -> None:
        with pytest.raises(ValidationError, match="'client id' cannot be empty!"):
            AuthAPIConfig(domain=DOMAIN, client_id="  ", client_secret=CLIENT_SECRET)

    def test_is_frozen(self, base_config: AuthAPIConfig) -> None:
        with pytest.raises(ValidationError):
            base_config.client_id = "other"  # type: ignore[misc]

    def test_timeout_bounds(self) -> None:
        with pytest.raises(ValidationError):
            AuthAPIConfig(
                domain=DOMAIN,
                client_id=CLIENT_ID,
                client_secret=CLIENT_SECRET,
                timeout=0,
            )

    def test_with_overrides(self, base_config: AuthAPIConfig) -> None:
        updated = base_config.with_overrides(domain="http://other.auth0.com")

        assert updated.base_url == "http://other.auth0.com"
        assert updated.client_secret.get_secret_value() == CLIENT_SECRET
        assert base_config.base_url == f"https://{DOMAIN}"


class TestFromEnv:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AUTH0_DOMAIN", DOMAIN)
        monkeypatch.setenv("AUTH0_CLIENT_ID", CLIENT_ID)
        monkeypatch.setenv("AUTH0_CLIENT_SECRET", CLIENT_SECRET)
        monkeypatch.setenv("AUTH0_TIMEOUT", "5")

        config = AuthAPIConfig.from_env()

        assert config.base_url == f"https://{DOMAIN}"
        assert config.client_id == CLIENT_ID
        assert config.timeout == 5.0

    def test_missing_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AUTH0_DOMAIN", DOMAIN)
        monkeypatch.delenv("AUTH0_CLIENT_ID", raising=False)
        monkeypatch.delenv("AUTH0_CLIENT_SECRET", raising=False)

        with pytest.raises(InvalidConfigError, match="AUTH0_CLIENT_ID"):
            AuthAPIConfig.from_env()
