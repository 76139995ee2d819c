"""Argument checks used by component constructors.

Failures raise InvalidArgumentError before any state is assigned, so a
component that fails validation is never partially built.
"""

from __future__ import annotations

from typing import TypeVar

from kida_ajax.exceptions import ErrorCode, InvalidArgumentError

_T = TypeVar("_T")


def not_empty(value: str | None, name: str) -> str:
    """Return ``value`` if it holds at least one non-whitespace character.

    Args:
        value: The argument to check
        name: Argument name used in the error message

    Raises:
        InvalidArgumentError: If value is None, empty or whitespace only
    """
    if value is None or not str(value).strip():
        raise InvalidArgumentError(
            f"Argument '{name}' may not be empty.",
            name=name,
            code=ErrorCode.EMPTY_ARGUMENT,
        )
    return value


def not_none(value: _T | None, name: str) -> _T:
    """Return ``value`` unless it is None."""
    if value is None:
        raise InvalidArgumentError(
            f"Argument '{name}' may not be None.",
            name=name,
            code=ErrorCode.NULL_ARGUMENT,
        )
    return value
