"""Adapter to convert RateConfiguration into domain rate objects.

The rate provider in the infrastructure layer works with domain
``BoardRate`` and ``HardwareRate`` entities; these functions translate the
validated Pydantic models into them.
"""

from furnili.application.config.schema import RateConfiguration
from furnili.domain.entities import BoardRate, HardwareRate
from furnili.domain.value_objects import BoardThickness, EdgeBandingType


def config_to_board_rates(config: RateConfiguration) -> list[BoardRate]:
    """Convert board rate rows to domain BoardRate objects."""
    return [
        BoardRate(
            board_type=row.board_type,
            thickness=BoardThickness(row.thickness),
            finish=row.finish,
            rate_per_sqft=row.rate_per_sqft,
            supplier=row.supplier,
            is_active=row.is_active,
        )
        for row in config.board_rates
    ]


def config_to_hardware_rates(config: RateConfiguration) -> list[HardwareRate]:
    """Convert hardware rate rows to domain HardwareRate objects."""
    return [
        HardwareRate(
            item_name=row.item_name.strip(),
            category=row.category,
            current_rate=row.current_rate,
            unit=row.unit,
            supplier=row.supplier,
            is_active=row.is_active,
        )
        for row in config.hardware_rates
    ]


def config_to_edge_banding_rates(
    config: RateConfiguration,
) -> dict[EdgeBandingType, float]:
    """Convert edge banding rates to a lookup keyed by banding type."""
    return {
        EdgeBandingType.MM_2: config.edge_banding.banding_2mm,
        EdgeBandingType.MM_08: config.edge_banding.banding_08mm,
    }
