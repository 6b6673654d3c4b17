"""Boundary mapping from error kinds to transport status codes.

Producers say *what kind* of failure happened; this layer decides what a
transport should do about it. Problem payloads mirror the usual HTTP problem
details shape: ``title`` is the error description, ``detail`` its code.
"""

from __future__ import annotations

from http import HTTPStatus
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from outcomes.core.dispatch import match
from outcomes.core.error import Error, ErrorKind
from outcomes.wire import dump_outcome

if TYPE_CHECKING:
    from collections.abc import Mapping

    from outcomes.core.outcome import Outcome

log = logging.getLogger(__name__)

_STATUS_BY_KIND: Mapping[ErrorKind, HTTPStatus] = MappingProxyType(
    {
        ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
        ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
        ErrorKind.CONFLICT: HTTPStatus.CONFLICT,
        ErrorKind.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
        ErrorKind.FORBIDDEN: HTTPStatus.FORBIDDEN,
        ErrorKind.FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
    }
)


class ProblemDetails(BaseModel):
    """Problem payload sent for a failed outcome."""

    model_config = ConfigDict(frozen=True)

    status: int
    title: str
    detail: str


def status_for(kind: ErrorKind) -> HTTPStatus:
    """Return the transport status for ``kind``; unmapped kinds get 500."""
    return _STATUS_BY_KIND.get(kind, HTTPStatus.INTERNAL_SERVER_ERROR)


def problem_details(error: Error) -> ProblemDetails:
    """Build the problem payload for ``error``."""
    return ProblemDetails(
        status=int(status_for(error.kind)),
        title=error.description,
        detail=error.code,
    )


def to_response(
    outcome: Outcome[Any], *, success_status: int = HTTPStatus.OK
) -> tuple[int, Any]:
    """Turn an outcome into a ``(status, body)`` pair.

    A value-less success is ``204`` with no body; a valued success uses
    ``success_status`` and the value's wire form; a failure uses the mapped
    status and a problem payload.
    """

    def on_success(*value: Any) -> tuple[int, Any]:
        if not value:
            return int(HTTPStatus.NO_CONTENT), None
        return int(success_status), dump_outcome(outcome)

    def on_failure(error: Error) -> tuple[int, Any]:
        problem = problem_details(error)
        log.debug(
            "Mapped %s (%s) to status %d", error.code, error.kind.value, problem.status
        )
        return problem.status, problem.model_dump()

    return match(outcome, on_success, on_failure)
