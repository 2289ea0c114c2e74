"""In-memory reference rate tables.

StaticRateProvider indexes board and hardware rate rows once and serves
lookups from dictionaries. Keys are matched case-insensitively and
inactive rows are never served.
"""

from __future__ import annotations

import logging
from typing import Iterable

from furnili.domain.entities import BoardRate, HardwareRate
from furnili.domain.errors import RateLookupError
from furnili.domain.services.constants import (
    DEFAULT_BOARD_BASE_RATES,
    DEFAULT_EDGE_BANDING_RATES,
    DEFAULT_HARDWARE_RATES,
    FINISH_SURCHARGES,
    THICKNESS_RATE_FACTORS,
)
from furnili.domain.value_objects import BoardThickness, EdgeBandingType

logger = logging.getLogger(__name__)


def _key(value: str) -> str:
    return value.strip().lower()


class StaticRateProvider:
    """RateProvider backed by fixed rate tables.

    Example:
        >>> provider = StaticRateProvider.defaults()
        >>> provider.board_rate("mdf", BoardThickness.MM_18, "laminate")
        120.0
    """

    def __init__(
        self,
        board_rates: Iterable[BoardRate],
        hardware_rates: Iterable[HardwareRate],
        edge_banding_rates: dict[EdgeBandingType, float] | None = None,
    ) -> None:
        self._board: dict[tuple[str, int, str], BoardRate] = {}
        for rate in board_rates:
            if rate.is_active:
                key = (_key(rate.board_type), int(rate.thickness), _key(rate.finish))
                self._board[key] = rate

        self._hardware: dict[str, HardwareRate] = {}
        for item in hardware_rates:
            if item.is_active:
                self._hardware[_key(item.item_name)] = item

        if edge_banding_rates is None:
            edge_banding_rates = dict(DEFAULT_EDGE_BANDING_RATES)
        self._edge_banding = dict(edge_banding_rates)

        logger.debug(
            f"Rate tables loaded: {len(self._board)} board, "
            f"{len(self._hardware)} hardware"
        )

    @classmethod
    def defaults(cls) -> "StaticRateProvider":
        """Provider built from the bundled default rate table.

        Every board type, stock thickness and finish combination is priced
        as base rate x thickness factor + finish surcharge.
        """
        board_rates = [
            BoardRate(
                board_type=board_type.value,
                thickness=thickness,
                finish=finish.value,
                rate_per_sqft=base * factor + surcharge,
            )
            for board_type, base in DEFAULT_BOARD_BASE_RATES.items()
            for thickness, factor in THICKNESS_RATE_FACTORS.items()
            for finish, surcharge in FINISH_SURCHARGES.items()
        ]
        hardware_rates = [
            HardwareRate(item_name=name, category=category, current_rate=rate, unit=unit)
            for name, category, rate, unit in DEFAULT_HARDWARE_RATES
        ]
        return cls(board_rates, hardware_rates, dict(DEFAULT_EDGE_BANDING_RATES))

    def board_rate(
        self, board_type: str, thickness: BoardThickness, finish: str
    ) -> float:
        key = (_key(board_type), int(thickness), _key(finish))
        rate = self._board.get(key)
        if rate is None:
            raise RateLookupError(
                "board", (board_type, f"{int(thickness)}mm", finish)
            )
        return rate.rate_per_sqft

    def hardware_rate(self, item_name: str) -> HardwareRate:
        rate = self._hardware.get(_key(item_name))
        if rate is None:
            raise RateLookupError("hardware", (item_name,))
        return rate

    def edge_banding_rate(self, banding_type: EdgeBandingType) -> float:
        rate = self._edge_banding.get(banding_type)
        if rate is None:
            raise RateLookupError("edge banding", (banding_type.value,))
        return rate

    def board_rates(self) -> list[BoardRate]:
        return sorted(self._board.values(), key=lambda r: r.key)

    def hardware_rates(self) -> list[HardwareRate]:
        return sorted(self._hardware.values(), key=lambda r: r.item_name)
