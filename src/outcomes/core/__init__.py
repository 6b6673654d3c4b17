"""Core outcome types: errors, the outcome union, and match dispatch."""

from __future__ import annotations

from .dispatch import match
from .error import Error, ErrorKind
from .outcome import (
    UNIT,
    Err,
    Ok,
    Outcome,
    Unit,
    failure,
    into_outcome,
    into_unit_outcome,
    returns_outcome,
    returns_unit_outcome,
    success,
)

__all__ = [
    "UNIT",
    "Err",
    "Error",
    "ErrorKind",
    "Ok",
    "Outcome",
    "Unit",
    "failure",
    "into_outcome",
    "into_unit_outcome",
    "match",
    "returns_outcome",
    "returns_unit_outcome",
    "success",
]
