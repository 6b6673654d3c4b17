"""outcomes: typed success/failure results with a closed error taxonomy.

Public API:
    - Error / ErrorKind: failure values and their categories
    - Ok / Err / Outcome: the outcome union; success() / failure() build it
    - match(): exhaustive two-branch dispatch
    - into_outcome() / returns_outcome: lift bare values and errors
"""

from __future__ import annotations

import logging

from outcomes.core import (
    UNIT,
    Err,
    Error,
    ErrorKind,
    Ok,
    Outcome,
    Unit,
    failure,
    into_outcome,
    into_unit_outcome,
    match,
    returns_outcome,
    returns_unit_outcome,
    success,
)
from outcomes.errors import (
    ConfigurationError,
    InternalError,
    OutcomesError,
    ValueAccessError,
    WireFormatError,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("outcomes")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("outcomes").addHandler(logging.NullHandler())

__all__ = [
    "UNIT",
    "ConfigurationError",
    "Err",
    "Error",
    "ErrorKind",
    "InternalError",
    "Ok",
    "Outcome",
    "OutcomesError",
    "Unit",
    "ValueAccessError",
    "WireFormatError",
    "failure",
    "into_outcome",
    "into_unit_outcome",
    "match",
    "returns_outcome",
    "returns_unit_outcome",
    "success",
]
