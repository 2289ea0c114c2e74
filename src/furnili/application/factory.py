"""Service factory for dependency injection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from furnili.application.commands import (
        BomHistoryQuery,
        CalculateBomCommand,
        FinalizeBomCommand,
    )
    from furnili.contracts.protocols import BomRepository, RateProvider
    from furnili.infrastructure.numbering import CalculationNumberGenerator


logger = logging.getLogger(__name__)


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes wiring of the rate provider, the calculation store and the
    commands that use them. Services are created lazily and cached, so one
    factory shares a single repository between the calculate, finalize and
    history use cases.

    Attributes:
        rates_path: Optional JSON rate file. The bundled default rate table
            is used when not set.
        store_path: Optional JSON file for persisting calculations. An
            in-memory store is used when not set.
    """

    rates_path: Path | None = None
    store_path: Path | None = None

    _rate_provider: "RateProvider | None" = field(
        default=None, init=False, repr=False
    )
    _repository: "BomRepository | None" = field(default=None, init=False, repr=False)

    def get_rate_provider(self) -> "RateProvider":
        """Get or create the rate provider.

        Raises:
            ConfigError: If ``rates_path`` cannot be loaded.
        """
        if self._rate_provider is None:
            from furnili.infrastructure.rates import StaticRateProvider

            if self.rates_path is None:
                self._rate_provider = StaticRateProvider.defaults()
            else:
                from furnili.application.config import (
                    config_to_board_rates,
                    config_to_edge_banding_rates,
                    config_to_hardware_rates,
                    load_rate_config,
                )

                config = load_rate_config(self.rates_path)
                self._rate_provider = StaticRateProvider(
                    config_to_board_rates(config),
                    config_to_hardware_rates(config),
                    config_to_edge_banding_rates(config),
                )
                logger.info(f"Loaded rate tables from {self.rates_path}")
        return self._rate_provider

    def get_repository(self) -> "BomRepository":
        """Get or create the calculation store."""
        if self._repository is None:
            from furnili.infrastructure.repository import (
                InMemoryBomRepository,
                JsonFileBomRepository,
            )

            if self.store_path is None:
                self._repository = InMemoryBomRepository()
            else:
                self._repository = JsonFileBomRepository(self.store_path)
        return self._repository

    def get_number_generator(self) -> "CalculationNumberGenerator":
        from furnili.infrastructure.numbering import CalculationNumberGenerator

        return CalculationNumberGenerator()

    def create_calculate_command(self) -> "CalculateBomCommand":
        """Create a CalculateBomCommand with injected dependencies."""
        from furnili.application.commands import CalculateBomCommand

        return CalculateBomCommand(
            rates=self.get_rate_provider(),
            repository=self.get_repository(),
            number_generator=self.get_number_generator(),
        )

    def create_finalize_command(self) -> "FinalizeBomCommand":
        from furnili.application.commands import FinalizeBomCommand

        return FinalizeBomCommand(self.get_repository())

    def create_history_query(self) -> "BomHistoryQuery":
        from furnili.application.commands import BomHistoryQuery

        return BomHistoryQuery(self.get_repository())


# Module-level default factory
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
