"""Pytest configuration and fixtures.

Provides environment isolation and test doubles. Fixtures here are autouse
unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from outcomes.config import Config

# =============================================================================
# Test Doubles
# =============================================================================


class ScriptedRandom:
    """Stand-in for ``random.Random`` that replays scripted ``randrange`` results."""

    def __init__(self, *script: int) -> None:
        self.script = list(script)
        self.calls = 0

    def randrange(self, *args: int) -> int:
        del args
        self.calls += 1
        return self.script.pop(0)


@pytest.fixture
def scripted_random():
    """Return the ScriptedRandom class for building scripted coin flips."""
    return ScriptedRandom


@pytest.fixture
def fast_config() -> Config:
    """Config with no simulated latency and no timeout."""
    return Config(latency_s=0.0, timeout_s=0.0, seed=0)


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_outcomes_env(request, monkeypatch):
    """Clear OUTCOMES_* variables so each test starts from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("OUTCOMES_"):
            monkeypatch.delenv(key, raising=False)
