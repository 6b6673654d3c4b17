"""Internal validation helpers shared by the core modules.

Centralizes argument checks so error messages stay consistent.
"""

from __future__ import annotations

import typing


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_callable(func: typing.Any, field_name: str) -> None:
    """Validate that a branch handler was supplied and can be called."""
    _require(
        condition=callable(func),
        message=f"must be callable, got {type(func).__name__}",
        field_name=field_name,
        exc=TypeError,
    )
