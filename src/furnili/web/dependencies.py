"""FastAPI dependency injection for BOM services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from furnili.application.commands import (
    BomHistoryQuery,
    CalculateBomCommand,
    FinalizeBomCommand,
)
from furnili.application.factory import ServiceFactory, get_factory
from furnili.contracts.protocols import BomRepository, RateProvider


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]


def get_calculate_command(factory: ServiceFactoryDep) -> CalculateBomCommand:
    """Dependency for CalculateBomCommand."""
    return factory.create_calculate_command()


def get_finalize_command(factory: ServiceFactoryDep) -> FinalizeBomCommand:
    return factory.create_finalize_command()


def get_history_query(factory: ServiceFactoryDep) -> BomHistoryQuery:
    return factory.create_history_query()


def get_repository(factory: ServiceFactoryDep) -> BomRepository:
    return factory.get_repository()


def get_rate_provider(factory: ServiceFactoryDep) -> RateProvider:
    return factory.get_rate_provider()


# Type aliases for cleaner endpoint signatures
CalculateCommandDep = Annotated[CalculateBomCommand, Depends(get_calculate_command)]
FinalizeCommandDep = Annotated[FinalizeBomCommand, Depends(get_finalize_command)]
HistoryQueryDep = Annotated[BomHistoryQuery, Depends(get_history_query)]
RepositoryDep = Annotated[BomRepository, Depends(get_repository)]
RateProviderDep = Annotated[RateProvider, Depends(get_rate_provider)]
