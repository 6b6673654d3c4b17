"""Outcome type: success with a value, or failure with an :class:`Error`.

A single tagged union covers both shapes an operation can have:

- value-carrying: ``Outcome[T]`` is ``Ok(value)`` or ``Err(error)``
- value-less: ``Outcome[Unit]`` is ``Ok(UNIT)`` or ``Err(error)``

State is fixed at construction. Reading ``.value`` on an ``Err`` is a caller
bug and raises :class:`~outcomes.errors.ValueAccessError`; use
:func:`~outcomes.core.dispatch.match` to consume both branches safely.

Python has no implicit conversions, so bare values and errors are lifted with
:func:`into_outcome` / :func:`into_unit_outcome`, or by decorating a function
with :func:`returns_outcome` / :func:`returns_unit_outcome` so its body can
``return Error.not_found(...)`` directly.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import typing

from outcomes.errors import ValueAccessError

from ._validation import _require, _require_callable
from .error import Error

if typing.TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = typing.TypeVar("T")
R = typing.TypeVar("R")
P = typing.ParamSpec("P")


@dataclasses.dataclass(frozen=True, slots=True)
class Unit:
    """Payload of a successful outcome that produces no value."""

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit()


@dataclasses.dataclass(frozen=True, slots=True)
class Ok(typing.Generic[T]):
    """A succeeded outcome carrying ``value``."""

    value: T

    @property
    def succeeded(self) -> bool:
        return True

    @property
    def error(self) -> None:
        """Always ``None``: a succeeded outcome has no error."""
        return None

    def match(
        self,
        on_success: Callable[..., R],
        on_failure: Callable[[Error], R],
    ) -> R:
        """Invoke ``on_success`` and return its result unchanged.

        ``on_success`` is called with no arguments when the payload is
        ``UNIT``, otherwise with the value. ``on_failure`` is never called.
        """
        _require_callable(on_success, "on_success")
        _require_callable(on_failure, "on_failure")
        if isinstance(self.value, Unit):
            return on_success()
        return on_success(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Err:
    """A failed outcome carrying ``error``."""

    error: Error

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.error, Error),
            message=f"must be an Error, got {type(self.error).__name__}",
            exc=TypeError,
            field_name="error",
        )

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def value(self) -> typing.NoReturn:
        raise ValueAccessError(
            f"Cannot read value of a failed outcome ({self.error.code})",
            code=self.error.code,
        )

    def match(
        self,
        on_success: Callable[..., R],
        on_failure: Callable[[Error], R],
    ) -> R:
        """Invoke ``on_failure`` with the error; ``on_success`` is never called."""
        _require_callable(on_success, "on_success")
        _require_callable(on_failure, "on_failure")
        return on_failure(self.error)


Outcome = Ok[T] | Err


@typing.overload
def success() -> Ok[Unit]: ...
@typing.overload
def success(value: T) -> Ok[T]: ...
def success(value: typing.Any = UNIT) -> Ok[typing.Any]:
    """Build a succeeded outcome; with no argument the value-less form."""
    return Ok(value)


def failure(error: Error) -> Err:
    """Build a failed outcome carrying ``error``."""
    return Err(error)


def into_outcome(obj: T | Error | Outcome[T]) -> Outcome[T]:
    """Lift a bare value or error into an outcome.

    An :class:`Error` becomes ``Err``, an existing outcome passes through, and
    anything else becomes ``Ok``.
    """
    if isinstance(obj, (Ok, Err)):
        return obj
    if isinstance(obj, Error):
        return Err(obj)
    return Ok(obj)


def into_unit_outcome(obj: Error | Outcome[Unit] | None) -> Outcome[Unit]:
    """Lift the return of a value-less operation into an outcome.

    ``None`` means success, an :class:`Error` means failure.
    """
    if obj is None:
        return Ok(UNIT)
    if isinstance(obj, (Ok, Err)):
        return obj
    if isinstance(obj, Error):
        return Err(obj)
    raise TypeError(
        f"value-less operation returned {type(obj).__name__}; "
        "expected None, an Error or an outcome"
    )


def returns_outcome(
    func: Callable[P, typing.Any],
) -> Callable[P, typing.Any]:
    """Wrap ``func`` so its return value goes through :func:`into_outcome`.

    Works for plain and ``async`` functions.
    """
    return _lifting(func, into_outcome)


def returns_unit_outcome(
    func: Callable[P, typing.Any],
) -> Callable[P, typing.Any]:
    """Wrap ``func`` so its return value goes through :func:`into_unit_outcome`."""
    return _lifting(func, into_unit_outcome)


def _lifting(
    func: Callable[P, typing.Any],
    lift: Callable[[typing.Any], Outcome[typing.Any]],
) -> Callable[P, typing.Any]:
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(
            *args: P.args, **kwargs: P.kwargs
        ) -> Outcome[typing.Any]:
            awaitable = typing.cast("Awaitable[typing.Any]", func(*args, **kwargs))
            return lift(await awaitable)

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[typing.Any]:
        return lift(func(*args, **kwargs))

    return wrapper
