"""In-memory configuration service returning outcomes.

A mock data service: nothing is stored, lookups succeed or fail by coin
flip, and saves succeed only for the key ``"Test1"``. It exists to show
producers returning :class:`~outcomes.core.error.Error` values directly from
decorated functions, and callers consuming them with ``match``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
import logging
import random
from typing import TYPE_CHECKING, ClassVar, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict

from outcomes.config import Config
from outcomes.core.error import Error
from outcomes.core.outcome import Err, returns_outcome, returns_unit_outcome

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from outcomes.core.outcome import Outcome, Unit

T = TypeVar("T")

log = logging.getLogger(__name__)

_CONFLICTING_KEY = "Test"
_SAVEABLE_KEY = "Test1"


@dataclass(frozen=True)
class Configuration:
    """A stored configuration entry."""

    key: str
    value: str
    description: str
    id: UUID = field(default_factory=uuid4)


class ConfigurationResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    key: str
    value: str
    description: str


class CreateConfigurationRequest(BaseModel):
    key: str
    value: str
    description: str


class UpdateConfigurationRequest(BaseModel):
    key: str
    value: str
    description: str


def to_response(configuration: Configuration) -> ConfigurationResponse:
    return ConfigurationResponse(
        id=str(configuration.id),
        key=configuration.key,
        value=configuration.value,
        description=configuration.description,
    )


def to_entity(
    request: CreateConfigurationRequest | UpdateConfigurationRequest,
    configuration_id: UUID | None = None,
) -> Configuration:
    return Configuration(
        id=configuration_id or uuid4(),
        key=request.key,
        value=request.value,
        description=request.description,
    )


class ConfigurationErrors:
    """Catalog of the errors this service can return."""

    CREATE_FAILURE: ClassVar[Error] = Error.failure(
        "Configurations.CreateFailure",
        "Something went wrong in creating configuration",
    )
    UPDATE_FAILURE: ClassVar[Error] = Error.failure(
        "Configurations.UpdateFailure",
        "Something went wrong in updating configuration",
    )
    DELETE_FAILURE: ClassVar[Error] = Error.failure(
        "Configurations.DeleteFailure",
        "Something went wrong in deleting configuration",
    )

    @staticmethod
    def not_found(configuration_id: str) -> Error:
        return Error.not_found(
            "Configurations.NotFound",
            f"Configuration with Id: {configuration_id} not found",
        )

    @staticmethod
    def conflict(key: str) -> Error:
        return Error.conflict(
            "Configurations.Conflict",
            f"Configuration with Name: {key} already exists",
        )

    @staticmethod
    def timed_out(operation: str) -> Error:
        # No dedicated cancellation kind; aborted work is a plain failure.
        return Error.failure(
            "Configurations.Timeout",
            f"Configuration {operation} did not complete in time",
        )


def _stub(configuration_id: UUID | None = None, n: int = 1) -> Configuration:
    return Configuration(
        id=configuration_id or uuid4(),
        key=f"Key{n}",
        value=f"Value{n}",
        description=f"Description{n}",
    )


class ConfigurationService:
    """Async CRUD facade over a simulated data source.

    Every public method returns an outcome; none raises for domain failures.
    Calls are bounded by ``config.timeout_s`` and a timeout comes back as
    ``ConfigurationErrors.timed_out``.
    """

    def __init__(
        self, config: Config | None = None, *, rng: random.Random | None = None
    ) -> None:
        self._config = config or Config()
        self._rng = rng or random.Random(self._config.seed)

    async def get_all(self) -> Outcome[list[ConfigurationResponse]]:
        return await self._bounded("listing", self._get_all())

    async def get_by_id(self, configuration_id: UUID) -> Outcome[ConfigurationResponse]:
        return await self._bounded("lookup", self._get_by_id(configuration_id))

    async def add(
        self, request: CreateConfigurationRequest
    ) -> Outcome[ConfigurationResponse]:
        return await self._bounded("creation", self._add(request))

    async def update(
        self, configuration_id: UUID, request: UpdateConfigurationRequest
    ) -> Outcome[Unit]:
        return await self._bounded("update", self._update(configuration_id, request))

    async def delete(self, configuration_id: UUID) -> Outcome[Unit]:
        return await self._bounded("deletion", self._delete(configuration_id))

    @returns_outcome
    async def _get_all(self) -> list[ConfigurationResponse]:
        configurations = [_stub(n=1), _stub(n=2)]
        await self._simulate_work()
        return [to_response(c) for c in configurations]

    @returns_outcome
    async def _get_by_id(
        self, configuration_id: UUID
    ) -> ConfigurationResponse | Error:
        # 50% found
        configuration = _stub(configuration_id) if self._rng.randrange(2) == 0 else None
        await self._simulate_work()
        if configuration is None:
            return ConfigurationErrors.not_found(str(configuration_id))
        return to_response(configuration)

    @returns_outcome
    async def _add(
        self, request: CreateConfigurationRequest
    ) -> ConfigurationResponse | Error:
        if await self._exists(request.key):
            return ConfigurationErrors.conflict(request.key)
        configuration = to_entity(request)
        if not await self._save(configuration):
            return ConfigurationErrors.CREATE_FAILURE
        return to_response(configuration)

    @returns_unit_outcome
    async def _update(
        self, configuration_id: UUID, request: UpdateConfigurationRequest
    ) -> Error | None:
        # 75% found
        found = self._rng.randrange(4) > 0
        await self._simulate_work()
        if not found:
            return ConfigurationErrors.not_found(str(configuration_id))
        if not await self._save(to_entity(request, configuration_id)):
            return ConfigurationErrors.UPDATE_FAILURE
        return None

    @returns_unit_outcome
    async def _delete(self, configuration_id: UUID) -> Error | None:
        configuration = _stub(configuration_id) if self._rng.randrange(2) == 0 else None
        await self._simulate_work()
        if configuration is None:
            return ConfigurationErrors.not_found(str(configuration_id))
        if not await self._save(configuration):
            return ConfigurationErrors.DELETE_FAILURE
        return None

    async def _exists(self, key: str) -> bool:
        await self._simulate_work()
        return key == _CONFLICTING_KEY

    async def _save(self, configuration: Configuration) -> bool:
        await self._simulate_work()
        return configuration.key == _SAVEABLE_KEY

    async def _simulate_work(self) -> None:
        await asyncio.sleep(self._config.latency_s or 0)

    async def _bounded(
        self, operation: str, work: Awaitable[Outcome[T]]
    ) -> Outcome[T]:
        try:
            async with asyncio.timeout(self._config.timeout_s):
                outcome = await work
        except TimeoutError:
            log.debug(
                "Configuration %s timed out after %ss", operation, self._config.timeout_s
            )
            return Err(ConfigurationErrors.timed_out(operation))
        log.debug(
            "Configuration %s finished: succeeded=%s", operation, outcome.succeeded
        )
        return outcome
