"""Configuration: frozen Config for the sample configuration service."""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from dotenv import load_dotenv

from outcomes.errors import ConfigurationError

load_dotenv()

_LATENCY_ENV = "OUTCOMES_LATENCY_S"
_TIMEOUT_ENV = "OUTCOMES_TIMEOUT_S"
_SEED_ENV = "OUTCOMES_SEED"

_DEFAULT_LATENCY_S = 1.0
_DEFAULT_TIMEOUT_S = 5.0


@dataclass(frozen=True)
class Config:
    """Immutable configuration for the sample service.

    Fields left as *None* are resolved from ``OUTCOMES_*`` environment
    variables, then from defaults.

    Example:
        config = Config(latency_s=0.0, seed=7)
    """

    #: Simulated work per call. Auto-resolved from ``OUTCOMES_LATENCY_S``.
    latency_s: float | None = None
    #: Bound on each call; exceeding it yields a failure outcome.
    #: Auto-resolved from ``OUTCOMES_TIMEOUT_S``; ``0`` disables it.
    timeout_s: float | None = None
    #: Seed for the simulated found/not-found coin flips.
    seed: int | None = None

    def __post_init__(self) -> None:
        """Resolve unset fields from the environment and validate."""
        if self.latency_s is None:
            object.__setattr__(
                self,
                "latency_s",
                _env_float(_LATENCY_ENV, default=_DEFAULT_LATENCY_S),
            )
        if self.timeout_s is None:
            object.__setattr__(
                self,
                "timeout_s",
                _env_float(_TIMEOUT_ENV, default=_DEFAULT_TIMEOUT_S),
            )
        if self.seed is None and os.environ.get(_SEED_ENV):
            object.__setattr__(self, "seed", _env_int(_SEED_ENV))

        if self.latency_s is not None and not math.isfinite(self.latency_s):
            raise ConfigurationError(
                f"latency_s must be a finite number, got {self.latency_s}",
                hint="Use 0 to disable the simulated delay.",
            )
        if self.latency_s is not None and self.latency_s < 0:
            raise ConfigurationError(
                f"latency_s must be ≥ 0, got {self.latency_s}",
                hint="Use 0 to disable the simulated delay.",
            )
        if self.timeout_s is not None and not math.isfinite(self.timeout_s):
            raise ConfigurationError(
                f"timeout_s must be a finite number, got {self.timeout_s}",
                hint="Use 0 to run calls without a bound.",
            )
        if self.timeout_s is not None and self.timeout_s < 0:
            raise ConfigurationError(
                f"timeout_s must be ≥ 0, got {self.timeout_s}",
                hint="Use 0 to run calls without a bound.",
            )
        # 0 means unbounded
        if self.timeout_s == 0:
            object.__setattr__(self, "timeout_s", None)

    def __str__(self) -> str:
        """Return a compact, developer-friendly representation."""
        return (
            f"Config(latency_s={self.latency_s!r}, timeout_s={self.timeout_s!r}, "
            f"seed={self.seed!r})"
        )


def _env_float(name: str, *, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be a number, got {raw!r}",
            hint=f"Example: {name}=0.5",
        ) from e


def _env_int(name: str) -> int:
    raw = os.environ[name]
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}",
            hint=f"Example: {name}=42",
        ) from e
