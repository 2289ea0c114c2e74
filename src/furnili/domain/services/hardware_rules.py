"""Hardware quantity rules.

This module provides HardwareCalculator for deriving the hardware a
furniture unit needs from its parts configuration.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from furnili.domain.value_objects import Dimensions, EdgeBanding, PartsConfig

from .constants import (
    BASE_JOINTS,
    DOWEL,
    DOWELS_PER_JOINT,
    DRAWER_SLIDE,
    EDGE_BANDING_GLUE,
    FEET_TO_METRES,
    HANDLE,
    HINGE,
    HINGE_HEIGHT_THRESHOLD_MM,
    HINGES_PER_LEAF_HIGH,
    HINGES_PER_LEAF_LOW,
    JOINTS_PER_SHELF,
    LOCK,
    MINIFIX,
    MINIFIX_PER_JOINT,
    STRAIGHTENER,
    STRAIGHTENER_HEIGHT_THRESHOLD_MM,
    WALL_BRACKET,
)
from .parts_expander import UnitProfile


@dataclass(frozen=True)
class HardwareRequirement:
    """Quantity of one hardware item needed for a unit.

    Attributes:
        name: Hardware item name, used as the rate key.
        quantity: Number of units required.
        unit: Counting unit ("pieces", "pairs" or "meters").
        notes: What the hardware is for.
    """

    name: str
    quantity: int
    unit: str = "pieces"
    notes: str | None = None


class HardwareCalculator:
    """Service for calculating hardware requirements.

    Items with a zero quantity are left out entirely.
    """

    def calculate(
        self,
        dimensions: Dimensions,
        config: PartsConfig,
        profile: UnitProfile,
        banding: EdgeBanding | None = None,
    ) -> list[HardwareRequirement]:
        """Calculate hardware for one unit.

        Args:
            dimensions: Overall unit dimensions in millimetres.
            config: Requested part counts.
            profile: Hardware behaviour for the unit type.
            banding: Total edge banding of the board parts. When given, glue
                is added for it in whole metres.

        Returns:
            Hardware requirements in a stable order.
        """
        leaves = config.shutters + config.doors
        joints = BASE_JOINTS + config.shelves * JOINTS_PER_SHELF

        if dimensions.height <= HINGE_HEIGHT_THRESHOLD_MM:
            hinges_per_leaf = HINGES_PER_LEAF_LOW
        else:
            hinges_per_leaf = HINGES_PER_LEAF_HIGH

        straighteners = 0
        if profile.straighteners and dimensions.height > STRAIGHTENER_HEIGHT_THRESHOLD_MM:
            straighteners = config.shutters

        candidates = [
            HardwareRequirement(
                HINGE, leaves * hinges_per_leaf, notes="Shutter and door mounting"
            ),
            HardwareRequirement(
                LOCK,
                config.shutters if profile.shutter_locks else 0,
                notes="One per shutter",
            ),
            HardwareRequirement(
                HANDLE, leaves + config.drawers, notes="Shutters, doors and drawers"
            ),
            HardwareRequirement(
                DRAWER_SLIDE, config.drawers, unit="pairs", notes="One pair per drawer"
            ),
            HardwareRequirement(
                MINIFIX, joints * MINIFIX_PER_JOINT, notes="Carcass and shelf joints"
            ),
            HardwareRequirement(
                DOWEL, joints * DOWELS_PER_JOINT, notes="Carcass and shelf joints"
            ),
            HardwareRequirement(
                EDGE_BANDING_GLUE,
                glue_metres(banding) if banding is not None else 0,
                unit="meters",
                notes="Edge banding adhesive",
            ),
            HardwareRequirement(
                STRAIGHTENER, straighteners, notes="Tall shutters"
            ),
            HardwareRequirement(
                WALL_BRACKET, profile.wall_brackets, notes="Wall mounting"
            ),
        ]
        return [item for item in candidates if item.quantity > 0]


def glue_metres(banding: EdgeBanding) -> int:
    """Whole metres of glue for ``banding`` (given in feet), rounded up."""
    metres = round(banding.total * FEET_TO_METRES, 6)
    return math.ceil(metres)
