"""
Configuration Use Cases

Service boundary shared by every configuration aggregate:
load the aggregate, invoke one operation, persist it.
Follows Clean Architecture and SOLID principles.
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from store_admin.core.domain import (
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InternalException,
)
from store_admin.core.shared import get_service_logger
from store_admin.domains.store_config.application.ports import IConfigurationRepository, IIdGenerator
from store_admin.domains.store_config.domain.entities import ConfigurationAggregate

logger = get_service_logger("store_config")

TAggregate = TypeVar("TAggregate", bound=ConfigurationAggregate)
TResult = TypeVar("TResult")

CONFIGURATION_EXISTS = "CONFIGURATION_ALREADY_EXISTS"
CONFIGURATION_NOT_FOUND = "CONFIGURATION_NOT_FOUND"


@dataclass
class MutationResult(Generic[TAggregate, TResult]):
    """Outcome of a successful mutation: the saved aggregate and the touched record."""

    configuration: TAggregate
    result: TResult | None = None


class ConfigurationUseCase(Generic[TAggregate]):
    """
    Base for configuration use cases.

    Domain failures are logged at WARNING and re-raised untouched; any other
    failure of a collaborator is logged with its traceback and surfaced as
    InternalException. Nothing is retried.
    """

    def __init__(
        self,
        repository: IConfigurationRepository[TAggregate],
        id_generator: IIdGenerator | None = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            repository: Repository for the configuration aggregate
            id_generator: Identifier generator (defaults to UUID4 strings)
        """
        self.repository = repository
        self.id_generator = id_generator

    async def _guard(self, operation: str, store_id: str, action: Callable[[], Awaitable[TResult]]) -> TResult:
        try:
            return await action()
        except DomainException as e:
            logger.warning(
                f"{operation} rejected: {e.message}",
                store_id=store_id,
                operation=operation,
                kind=e.kind.value,
                code=e.code,
            )
            raise
        except Exception as e:
            logger.error(
                f"{operation} failed: {e}",
                exc_info=True,
                store_id=store_id,
                operation=operation,
            )
            raise InternalException(operation, original_error=e) from e

    async def _load(self, store_id: str, entity_type: str) -> TAggregate:
        configuration = await self.repository.find_by_store_id(store_id)
        if configuration is None:
            raise EntityNotFoundException(entity_type, store_id, code=CONFIGURATION_NOT_FOUND)
        if self.id_generator is not None:
            configuration.id_factory = self.id_generator
        return configuration


class CreateConfigurationUseCase(ConfigurationUseCase[TAggregate]):
    """Create the configuration of a store; a second creation is a duplicate."""

    def __init__(
        self,
        repository: IConfigurationRepository[TAggregate],
        aggregate_cls: type[TAggregate],
        id_generator: IIdGenerator | None = None,
    ):
        super().__init__(repository, id_generator)
        self.aggregate_cls = aggregate_cls

    async def execute(self, store_id: str, data: Mapping[str, Any] | None = None) -> TAggregate:
        """
        Execute configuration creation.

        Args:
            store_id: Owning store
            data: Initial state in the aggregate's input shape

        Returns:
            The persisted aggregate

        Raises:
            DuplicateEntityException: If the store already has this configuration
        """

        async def action() -> TAggregate:
            entity_type = self.aggregate_cls.ENTITY_TYPE
            if await self.repository.exists_by_store_id(store_id):
                raise DuplicateEntityException(entity_type, "store_id", store_id, CONFIGURATION_EXISTS)

            configuration = self.aggregate_cls.create(store_id, data, id_factory=self.id_generator)
            created = await self.repository.create(configuration)
            logger.info(f"{entity_type} created", store_id=store_id, configuration_id=created.id)
            return created

        return await self._guard(f"create_{self.aggregate_cls.__name__}", store_id, action)


class GetConfigurationUseCase(ConfigurationUseCase[TAggregate]):
    """Load the configuration of a store."""

    def __init__(self, repository: IConfigurationRepository[TAggregate], entity_type: str):
        super().__init__(repository)
        self.entity_type = entity_type

    async def execute(self, store_id: str) -> TAggregate:
        return await self._guard(f"get_{self.entity_type}", store_id, lambda: self._load(store_id, self.entity_type))


class DeleteConfigurationUseCase(ConfigurationUseCase[TAggregate]):
    """Delete the configuration of a store as a whole."""

    def __init__(self, repository: IConfigurationRepository[TAggregate], entity_type: str):
        super().__init__(repository)
        self.entity_type = entity_type

    async def execute(self, store_id: str) -> None:
        async def action() -> None:
            if not await self.repository.delete_by_store_id(store_id):
                raise EntityNotFoundException(self.entity_type, store_id, code=CONFIGURATION_NOT_FOUND)
            logger.info(f"{self.entity_type} deleted", store_id=store_id)

        await self._guard(f"delete_{self.entity_type}", store_id, action)


class ManageConfigurationUseCase(ConfigurationUseCase[TAggregate]):
    """
    Base for the per-aggregate mutation use cases.

    Each public method runs exactly one aggregate operation inside
    `_mutate`: load, mutate, save. A rejected operation never reaches
    the repository.
    """

    ENTITY_TYPE: str = "Configuration"

    async def _mutate(
        self,
        store_id: str,
        operation: str,
        mutation: Callable[[TAggregate], TResult],
    ) -> MutationResult[TAggregate, TResult]:
        async def action() -> MutationResult[TAggregate, TResult]:
            configuration = await self._load(store_id, self.ENTITY_TYPE)
            result = mutation(configuration)
            saved = await self.repository.save(configuration)
            logger.info(
                f"{self.ENTITY_TYPE} updated: {operation}",
                store_id=store_id,
                operation=operation,
                version=saved.version,
            )
            return MutationResult(configuration=saved, result=result)

        return await self._guard(operation, store_id, action)
