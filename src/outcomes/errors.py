"""Exception hierarchy for outcomes.

These are raised conditions only: programming mistakes and bad configuration.
Expected domain failures are values (:class:`outcomes.core.error.Error`)
carried by an ``Err`` outcome and are never raised.
"""

from __future__ import annotations


class OutcomesError(Exception):
    """Base exception for all outcomes errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(OutcomesError):
    """Configuration validation or resolution failed."""


class WireFormatError(OutcomesError):
    """A wire payload could not be read back into an outcome."""


class InternalError(OutcomesError):
    """A caller bug or invariant violation; never a domain failure."""


class ValueAccessError(InternalError):
    """``.value`` was read on a failed outcome.

    Check ``succeeded`` first, or use ``match`` which only hands the value to
    the success branch.
    """

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(
            message,
            hint=(
                "Check `outcome.succeeded` or use `match(...)` before reading `.value`."
            ),
        )
        self.code = code
