"""Exhaustive two-way dispatch over an outcome."""

from __future__ import annotations

import typing

from .outcome import Err, Ok

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    from .error import Error
    from .outcome import Outcome, Unit

T = typing.TypeVar("T")
R = typing.TypeVar("R")


@typing.overload
def match(
    outcome: Outcome[Unit],
    on_success: Callable[[], R],
    on_failure: Callable[[Error], R],
) -> R: ...
@typing.overload
def match(
    outcome: Outcome[T],
    on_success: Callable[[T], R],
    on_failure: Callable[[Error], R],
) -> R: ...
def match(
    outcome: Outcome[typing.Any],
    on_success: Callable[..., R],
    on_failure: Callable[[Error], R],
) -> R:
    """Invoke exactly one branch and return its result unchanged.

    Args:
        outcome: The outcome to consume.
        on_success: Called with the value, or with no arguments for a
            value-less success.
        on_failure: Called with the :class:`Error` of a failed outcome.

    Both handlers are required; a non-callable handler raises ``TypeError``
    before either branch runs. This is the safe way to reach the value of a
    succeeded outcome without risking ``ValueAccessError``.
    """
    if not isinstance(outcome, (Ok, Err)):
        raise TypeError(f"match() expects Ok or Err, got {type(outcome).__name__}")
    return outcome.match(on_success, on_failure)
