"""Argument guards shared by the client, builders and requests."""

from __future__ import annotations

from typing import Any

from ..errors import InvalidArgumentError


def assert_not_null(value: Any, name: str) -> None:
    """Raise InvalidArgumentError if value is None.

    Args:
        value: Value to check.
        name: Human readable parameter name used in the message.
    """
    if value is None:
        raise InvalidArgumentError(f"'{name}' cannot be null!", parameter=name)


def assert_not_empty(value: str | None, name: str) -> str:
    """Raise InvalidArgumentError if value is None or an empty string.

    Args:
        value: String to check.
        name: Human readable parameter name used in the message.

    Returns:
        The validated value.
    """
    assert_not_null(value, name)
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"'{name}' cannot be empty!", parameter=name)
    return value
