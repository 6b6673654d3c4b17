"""Domain error values and their closed taxonomy.

An :class:`Error` names a failure: a stable ``code`` for programmatic
branching and logging, a human ``description``, and a :class:`ErrorKind`
that a boundary layer uses to decide presentation (see
:mod:`outcomes.boundary`). Errors are data, returned inside an ``Err``
outcome, and never raised.
"""

from __future__ import annotations

import dataclasses
import enum

from ._validation import _require


class ErrorKind(enum.Enum):
    """Closed set of failure categories."""

    FAILURE = "failure"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


@dataclasses.dataclass(frozen=True, slots=True)
class Error:
    """Immutable description of a failure.

    Build through the kind-specific factories, e.g.
    ``Error.not_found("Configurations.NotFound", "...")``. The constructor
    has no default ``kind`` so every error declares one explicitly.

    String content is not validated here; empty strings are accepted as-is.
    """

    code: str
    description: str
    kind: ErrorKind

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.kind, ErrorKind),
            message=f"must be an ErrorKind, got {type(self.kind).__name__}",
            exc=TypeError,
            field_name="kind",
        )

    @classmethod
    def failure(cls, code: str, description: str) -> Error:
        """Unexpected or unclassified failure (includes aborted work)."""
        return cls(code, description, ErrorKind.FAILURE)

    @classmethod
    def not_found(cls, code: str, description: str) -> Error:
        """The requested entity does not exist."""
        return cls(code, description, ErrorKind.NOT_FOUND)

    @classmethod
    def validation(cls, code: str, description: str) -> Error:
        """Input broke a business rule."""
        return cls(code, description, ErrorKind.VALIDATION)

    @classmethod
    def conflict(cls, code: str, description: str) -> Error:
        """The operation clashes with existing state."""
        return cls(code, description, ErrorKind.CONFLICT)

    @classmethod
    def unauthorized(cls, code: str, description: str) -> Error:
        """The caller is not authenticated."""
        return cls(code, description, ErrorKind.UNAUTHORIZED)

    @classmethod
    def forbidden(cls, code: str, description: str) -> Error:
        """The caller is authenticated but not allowed."""
        return cls(code, description, ErrorKind.FORBIDDEN)

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"
