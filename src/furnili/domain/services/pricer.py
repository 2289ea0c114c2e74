"""Pricing of board parts and hardware against reference rates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from furnili.domain.entities import BomItem
from furnili.domain.value_objects import (
    BoardPart,
    BoardThickness,
    EdgeBandingType,
    ItemType,
)

from .edge_banding import EdgeBandingEstimator
from .hardware_rules import HardwareRequirement

if TYPE_CHECKING:
    from furnili.contracts.protocols import RateProvider


logger = logging.getLogger(__name__)


def material_label(board_type: str, thickness: BoardThickness) -> str:
    """Human readable board material, e.g. ``"18mm MDF"``."""
    return f"{thickness.label} {board_type.replace('_', ' ').upper()}"


class Pricer:
    """Prices board parts and hardware requirements.

    A board row's unit rate is the cost of one piece: its area times the
    board rate plus its edge banding times the banding rates. Every lookup
    goes through the injected RateProvider, and a missing rate propagates
    as ``RateLookupError``.
    """

    def __init__(
        self,
        rates: "RateProvider",
        banding_estimator: EdgeBandingEstimator | None = None,
    ) -> None:
        self.rates = rates
        self.banding_estimator = banding_estimator or EdgeBandingEstimator()

    def price_boards(
        self,
        parts: list[BoardPart],
        board_type: str,
        thickness: BoardThickness,
        finish: str,
    ) -> list[BomItem]:
        """Price every board part with the selected board.

        The board rate is looked up even when there are no parts, so an
        unknown board selection always fails.
        """
        board_rate = self.rates.board_rate(board_type, thickness, finish)
        rate_2mm = self.rates.edge_banding_rate(EdgeBandingType.MM_2)
        rate_08mm = self.rates.edge_banding_rate(EdgeBandingType.MM_08)
        material = material_label(board_type, thickness)

        items: list[BomItem] = []
        for part in parts:
            piece_banding = self.banding_estimator.estimate_piece(part)
            piece_cost = (
                part.area_sqft * board_rate
                + piece_banding.banding_2mm * rate_2mm
                + piece_banding.banding_08mm * rate_08mm
            )
            items.append(
                BomItem(
                    item_type=ItemType.BOARD,
                    category=part.category.value,
                    part_name=part.name,
                    quantity=part.quantity,
                    unit_rate=piece_cost,
                    part_kind=part.kind,
                    material_type=material,
                    length=part.length,
                    width=part.width,
                    thickness=float(thickness.value),
                    edge_banding=piece_banding.scaled(part.quantity),
                )
            )

        logger.debug(
            f"Priced {len(items)} board parts at {board_rate:.2f}/sqft "
            f"({board_type}, {thickness.label}, {finish})"
        )
        return items

    def price_hardware(self, requirements: list[HardwareRequirement]) -> list[BomItem]:
        """Price hardware requirements by item name."""
        items: list[BomItem] = []
        for requirement in requirements:
            rate = self.rates.hardware_rate(requirement.name)
            items.append(
                BomItem(
                    item_type=ItemType.HARDWARE,
                    category=rate.category,
                    part_name=requirement.name,
                    quantity=requirement.quantity,
                    unit_rate=rate.current_rate,
                    unit=requirement.unit,
                )
            )
        return items
