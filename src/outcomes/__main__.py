"""Console demo of outcomes.

Examples:
- python -m outcomes
- python -m outcomes --service --seed 7 --latency 0
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING, Any
from uuid import UUID, uuid4

from outcomes.config import Config
from outcomes.core.dispatch import match
from outcomes.core.outcome import returns_outcome, returns_unit_outcome
from outcomes.samples.configurations import (
    Configuration,
    ConfigurationErrors,
    ConfigurationResponse,
    ConfigurationService,
    CreateConfigurationRequest,
    UpdateConfigurationRequest,
    to_response,
)
from outcomes.wire import dump_error

if TYPE_CHECKING:
    from collections.abc import Sequence

    from outcomes.core.error import Error
    from outcomes.core.outcome import Outcome


@returns_outcome
def get_by_id_with_success(configuration_id: UUID) -> ConfigurationResponse:
    return to_response(
        Configuration(
            id=configuration_id, key="Key", value="Value", description="Description"
        )
    )


@returns_outcome
def get_by_id_with_failure(configuration_id: UUID) -> Error:
    return ConfigurationErrors.not_found(str(configuration_id))


@returns_outcome
def create_with_success() -> ConfigurationResponse:
    return to_response(
        Configuration(key="Key", value="Value", description="Description")
    )


@returns_outcome
def create_with_failure() -> Error:
    return ConfigurationErrors.CREATE_FAILURE


@returns_outcome
def create_with_conflict() -> Error:
    return ConfigurationErrors.conflict("Key")


@returns_unit_outcome
def update_with_success() -> None:
    return None


@returns_unit_outcome
def update_with_failure() -> Error:
    return ConfigurationErrors.UPDATE_FAILURE


def describe(name: str, outcome: Outcome[Any]) -> str:
    """Render ``<name>: <succeeded>, <value or error JSON>``."""
    detail = match(
        outcome,
        lambda *value: str(value[0]) if value else "No Content",
        lambda error: json.dumps(dump_error(error)),
    )
    return f"{name}: {outcome.succeeded}, {detail}"


def scenarios() -> list[tuple[str, Outcome[Any]]]:
    return [
        ("GetByIdWithSuccess", get_by_id_with_success(uuid4())),
        ("GetByIdWithFailure", get_by_id_with_failure(uuid4())),
        ("CreateWithSuccess", create_with_success()),
        ("CreateWithFailure", create_with_failure()),
        ("CreateWithConflictFailure", create_with_conflict()),
        ("UpdateWithSuccess", update_with_success()),
        ("UpdateWithFailure", update_with_failure()),
    ]


async def service_round(config: Config) -> list[tuple[str, Outcome[Any]]]:
    service = ConfigurationService(config)
    configuration_id = uuid4()
    create = CreateConfigurationRequest(key="Test", value="v", description="d")
    update = UpdateConfigurationRequest(key="Test1", value="v", description="d")
    return [
        ("GetAll", await service.get_all()),
        ("GetById", await service.get_by_id(configuration_id)),
        ("Add", await service.add(create)),
        ("Update", await service.update(configuration_id, update)),
        ("Delete", await service.delete(configuration_id)),
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m outcomes", description="Console demo of outcomes."
    )
    parser.add_argument(
        "--service",
        action="store_true",
        help="Run the simulated configuration service instead of fixed scenarios",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for simulated lookups"
    )
    parser.add_argument(
        "--latency",
        type=float,
        default=None,
        help="Simulated latency per call, in seconds",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.service:
        config = Config(latency_s=args.latency, seed=args.seed)
        results = asyncio.run(service_round(config))
    else:
        results = scenarios()

    for name, outcome in results:
        print(describe(name, outcome))
    return 0


if __name__ == "__main__":
    sys.exit(main())
