"""Rate configuration loading and conversion."""

from furnili.application.config.adapter import (
    config_to_board_rates,
    config_to_edge_banding_rates,
    config_to_hardware_rates,
)
from furnili.application.config.loader import (
    ConfigError,
    load_rate_config,
    load_rate_config_from_dict,
)
from furnili.application.config.schema import (
    BoardRateConfig,
    EdgeBandingRatesConfig,
    HardwareRateConfig,
    RateConfiguration,
)

__all__ = [
    "BoardRateConfig",
    "ConfigError",
    "EdgeBandingRatesConfig",
    "HardwareRateConfig",
    "RateConfiguration",
    "config_to_board_rates",
    "config_to_edge_banding_rates",
    "config_to_hardware_rates",
    "load_rate_config",
    "load_rate_config_from_dict",
]
