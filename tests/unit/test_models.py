"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from auth0_sdk.models import ResetPasswordBody, UserInfo


class TestUserInfo:
    def test_keeps_every_key(self, sample_user_info: dict) -> None:
        info = UserInfo.model_validate(sample_user_info)

        assert info.values == sample_user_info
        assert list(info.values) == list(sample_user_info)
        assert len(info) == len(sample_user_info)

    def test_mapping_access(self) -> None:
        info = UserInfo.model_validate_json('{"sub": "auth0|1", "age": 3.5, "tags": []}')

        assert info["sub"] == "auth0|1"
        assert info.get("age") == 3.5
        assert info.get("missing", "default") == "default"
        assert "tags" in info
        assert "missing" not in info

    def test_iterates_like_a_mapping(self, sample_user_info: dict) -> None:
        info = UserInfo.model_validate(sample_user_info)

        assert list(info) == list(sample_user_info)
        assert dict(info) == sample_user_info
        assert list(info.keys()) == list(sample_user_info.keys())
        assert list(info.items()) == list(sample_user_info.items())

    def test_rejects_non_object(self) -> None:
        with pytest.raises(ValidationError):
            UserInfo.model_validate_json("[1, 2]")


class TestResetPasswordBody:
    def test_dump(self) -> None:
        body = ResetPasswordBody(email="me@auth0.com", connection="db", client_id="cid")

        assert body.model_dump(mode="json") == {
            "email": "me@auth0.com",
            "connection": "db",
            "client_id": "cid",
        }

    def test_rejects_empty_fields(self) -> None:
        with pytest.raises(ValidationError):
            ResetPasswordBody(email="", connection="db", client_id="cid")
