"""Pytest configuration and shared fixtures for BOM tests."""

from __future__ import annotations

from datetime import date

import pytest

from furnili.application.commands import CalculateBomCommand
from furnili.domain import BoardRate, BoardThickness, Dimensions, HardwareRate, PartsConfig
from furnili.domain.services.constants import DEFAULT_HARDWARE_RATES
from furnili.infrastructure import (
    CalculationNumberGenerator,
    InMemoryBomRepository,
    StaticRateProvider,
)


# =============================================================================
# Reference data
# =============================================================================

MDF_LAMINATE_18_RATE = 120.0


@pytest.fixture
def fixture_rates() -> StaticRateProvider:
    """Small rate table: 18mm MDF laminate plus every default hardware item."""
    return StaticRateProvider(
        board_rates=[
            BoardRate(
                board_type="mdf",
                thickness=BoardThickness.MM_18,
                finish="laminate",
                rate_per_sqft=MDF_LAMINATE_18_RATE,
            ),
        ],
        hardware_rates=[
            HardwareRate(item_name=name, category=category, current_rate=rate, unit=unit)
            for name, category, rate, unit in DEFAULT_HARDWARE_RATES
        ],
    )


@pytest.fixture
def wardrobe_dimensions() -> Dimensions:
    return Dimensions(height=2400, width=1200, depth=600)


@pytest.fixture
def wardrobe_config() -> PartsConfig:
    return PartsConfig(shutters=2, shelves=3, drawers=2, doors=0, back_panels=1)


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def repository() -> InMemoryBomRepository:
    return InMemoryBomRepository()


@pytest.fixture
def number_generator() -> CalculationNumberGenerator:
    return CalculationNumberGenerator(today=lambda: date(2024, 5, 1))


@pytest.fixture
def calculate_command(
    fixture_rates: StaticRateProvider,
    repository: InMemoryBomRepository,
    number_generator: CalculationNumberGenerator,
) -> CalculateBomCommand:
    """CalculateBomCommand wired to the fixture rates and an empty store."""
    return CalculateBomCommand(
        rates=fixture_rates,
        repository=repository,
        number_generator=number_generator,
    )
