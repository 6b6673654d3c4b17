"""Wire shape of outcomes.

- ``Err(e)`` -> ``{"error": {"code": ..., "description": ...}}``. The kind is
  not emitted; a boundary layer reads it in-process to pick a status.
- ``Ok(UNIT)`` -> ``{}``. The error field is omitted, never ``null``.
- ``Ok(v)`` -> the JSON form of ``v`` itself, with no envelope.

Readers treat an absent ``error`` field and ``"error": null`` as the same.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from outcomes.core.dispatch import match
from outcomes.core.error import Error, ErrorKind
from outcomes.core.outcome import UNIT, Err, Ok, Unit
from outcomes.errors import WireFormatError

if TYPE_CHECKING:
    from outcomes.core.outcome import Outcome

_ANY = TypeAdapter(Any)


class ErrorBody(BaseModel):
    """Serialized form of an :class:`Error`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: str
    description: str


class UnitOutcomeBody(BaseModel):
    """Serialized wrapper of a value-less outcome."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    error: ErrorBody | None = None


def dump_error(error: Error) -> dict[str, str]:
    """Return the wire form of ``error``: ``code`` and ``description`` only."""
    return ErrorBody(code=error.code, description=error.description).model_dump()


def dump_outcome(outcome: Outcome[Any]) -> Any:
    """Return the JSON-compatible wire form of ``outcome``.

    Raises:
        WireFormatError: The success value has no JSON form.
    """
    return match(
        outcome,
        _dump_success,
        lambda error: UnitOutcomeBody(
            error=ErrorBody(code=error.code, description=error.description)
        ).model_dump(exclude_none=True),
    )


def dumps_outcome(outcome: Outcome[Any]) -> str:
    """Serialize ``outcome`` to JSON text."""
    return json.dumps(dump_outcome(outcome))


def load_error(
    payload: str | bytes | dict[str, Any], *, kind: ErrorKind
) -> Error | None:
    """Read the error of a serialized outcome wrapper.

    ``kind`` is not part of the wire shape, so the reader states it.
    Returns ``None`` when the error field is absent or ``null``.

    Raises:
        WireFormatError: The payload is not a valid outcome wrapper.
    """
    try:
        if isinstance(payload, (str, bytes)):
            body = UnitOutcomeBody.model_validate_json(payload)
        else:
            body = UnitOutcomeBody.model_validate(payload)
    except PydanticValidationError as e:
        raise WireFormatError(
            f"Malformed outcome payload: {e.error_count()} validation error(s)",
            hint="Expected an object with an optional 'error' of {code, description}.",
        ) from e
    if body.error is None:
        return None
    return Error(body.error.code, body.error.description, kind)


def load_unit_outcome(
    payload: str | bytes | dict[str, Any], *, kind: ErrorKind
) -> Outcome[Unit]:
    """Read a serialized value-less outcome back into ``Ok(UNIT)`` or ``Err``."""
    error = load_error(payload, kind=kind)
    if error is None:
        return Ok(UNIT)
    return Err(error)


def _dump_success(value: Any = UNIT) -> Any:
    if isinstance(value, Unit):
        return UnitOutcomeBody().model_dump(exclude_none=True)
    try:
        return _ANY.dump_python(value, mode="json")
    except PydanticSerializationError as e:
        raise WireFormatError(
            f"Cannot serialize success value of type {type(value).__name__}",
            hint="Return a pydantic model, dataclass or JSON-compatible value.",
        ) from e
