"""Configuration resolution and validation."""

from __future__ import annotations

import pytest

from outcomes.config import Config
from outcomes.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_defaults_without_environment() -> None:
    cfg = Config()

    assert cfg.latency_s == 1.0
    assert cfg.timeout_s == 5.0
    assert cfg.seed is None


def test_values_resolve_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTCOMES_LATENCY_S", "0.25")
    monkeypatch.setenv("OUTCOMES_TIMEOUT_S", "2")
    monkeypatch.setenv("OUTCOMES_SEED", "42")

    cfg = Config()

    assert cfg.latency_s == 0.25
    assert cfg.timeout_s == 2.0
    assert cfg.seed == 42


def test_explicit_values_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTCOMES_LATENCY_S", "3")
    monkeypatch.setenv("OUTCOMES_SEED", "1")

    cfg = Config(latency_s=0.0, seed=9)

    assert cfg.latency_s == 0.0
    assert cfg.seed == 9


@pytest.mark.parametrize("explicit", [True, False])
def test_zero_timeout_means_unbounded(
    monkeypatch: pytest.MonkeyPatch, explicit: bool
) -> None:
    if explicit:
        cfg = Config(timeout_s=0)
    else:
        monkeypatch.setenv("OUTCOMES_TIMEOUT_S", "0")
        cfg = Config()

    assert cfg.timeout_s is None


def test_negative_latency_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as exc:
        Config(latency_s=-1)

    assert "latency_s" in str(exc.value)
    assert exc.value.hint


def test_negative_timeout_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="timeout_s"):
        Config(timeout_s=-0.5)


@pytest.mark.parametrize(
    ("name", "raw"),
    [("OUTCOMES_LATENCY_S", "fast"), ("OUTCOMES_SEED", "1.5")],
)
def test_unparseable_environment_values_are_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, raw: str
) -> None:
    monkeypatch.setenv(name, raw)

    with pytest.raises(ConfigurationError, match=name):
        Config()


def test_config_is_frozen() -> None:
    cfg = Config(latency_s=0.0)

    with pytest.raises(AttributeError):
        cfg.latency_s = 1.0  # type: ignore[misc]


def test_str_is_readable() -> None:
    assert str(Config(latency_s=0.0, timeout_s=1.0, seed=3)) == (
        "Config(latency_s=0.0, timeout_s=1.0, seed=3)"
    )


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
@pytest.mark.parametrize("name", ["OUTCOMES_LATENCY_S", "OUTCOMES_TIMEOUT_S"])
def test_non_finite_environment_values_are_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, raw: str
) -> None:
    monkeypatch.setenv(name, raw)

    with pytest.raises(ConfigurationError) as exc:
        Config()

    assert "finite" in str(exc.value)
    assert exc.value.hint


@pytest.mark.parametrize("field", ["latency_s", "timeout_s"])
@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_explicit_values_are_rejected(
    field: str, value: float
) -> None:
    with pytest.raises(ConfigurationError, match=field):
        Config(**{field: value})
