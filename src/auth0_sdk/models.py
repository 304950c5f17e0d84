"""Pydantic models for Auth0 Authentication API payloads."""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel


class UserInfo(RootModel[dict[str, Any]]):
    """Profile returned by ``GET /userinfo``.

    The provider does not fix the schema, so every top-level key of the JSON
    object is kept as decoded (strings, booleans, numbers, nested objects
    and arrays).
    """

    model_config = ConfigDict(frozen=True)

    @property
    def values(self) -> dict[str, Any]:
        """All claims of the profile, in payload order."""
        return self.root

    def get(self, key: str, default: Any = None) -> Any:
        return self.root.get(key, default)

    def keys(self) -> KeysView[str]:
        return self.root.keys()

    def items(self) -> ItemsView[str, Any]:
        return self.root.items()

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, key: str) -> Any:
        return self.root[key]

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __len__(self) -> int:
        return len(self.root)


class ResetPasswordBody(BaseModel):
    """Body of ``POST /dbconnections/change_password``."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=1)
    connection: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
