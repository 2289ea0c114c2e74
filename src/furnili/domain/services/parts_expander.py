"""Parts expansion: furniture unit + parts configuration -> board parts.

The expander is rule-table driven. Every ``PartKind`` has an entry in
``PART_RULES`` giving its display label, banding category, and a sizing
function over the overall unit dimensions. Unit types select a
``UnitProfile`` that drives hardware rules; unknown unit types use the
generic profile.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from furnili.domain.errors import ValidationError
from furnili.domain.value_objects import (
    COUNTED_KINDS,
    BoardPart,
    Dimensions,
    PartCategory,
    PartKind,
    PartsConfig,
    UnitType,
)

from .constants import (
    CARCASS_BACK_CLEARANCE_MM,
    CARCASS_SIDE_CLEARANCE_MM,
    DRAWER_ZONE_FRACTION,
    WALL_BRACKETS_PER_TV_PANEL,
)

logger = logging.getLogger(__name__)

# (dimensions, count) -> (length, width) in mm
SizeRule = Callable[[Dimensions, int], "tuple[float, float] | None"]


@dataclass(frozen=True)
class PartRule:
    """How to name, categorize and size one part kind."""

    label: str
    category: PartCategory
    size: SizeRule


def _shelf(d: Dimensions, count: int) -> tuple[float, float]:
    return (d.width - CARCASS_SIDE_CLEARANCE_MM, d.depth - CARCASS_BACK_CLEARANCE_MM)


def _leaf(d: Dimensions, count: int) -> tuple[float, float]:
    # Shutters and doors split the unit width evenly and run full height
    return (d.height, d.width / count)


def _drawer_front(d: Dimensions, count: int) -> tuple[float, float]:
    return (
        d.width - CARCASS_SIDE_CLEARANCE_MM,
        (d.height * DRAWER_ZONE_FRACTION) / count,
    )


def _back_panel(d: Dimensions, count: int) -> tuple[float, float]:
    return (d.width, d.height)


def _top_bottom(d: Dimensions, count: int) -> tuple[float, float]:
    return (d.width, d.depth)


def _side(d: Dimensions, count: int) -> tuple[float, float]:
    return (d.height, d.depth)


def _custom(d: Dimensions, count: int) -> None:
    return None


PART_RULES: dict[PartKind, PartRule] = {
    PartKind.TOP: PartRule("Top Panel", PartCategory.CARCASS, _top_bottom),
    PartKind.BOTTOM: PartRule("Bottom Panel", PartCategory.CARCASS, _top_bottom),
    PartKind.SIDE: PartRule("Side Panel", PartCategory.CARCASS, _side),
    PartKind.SHUTTER: PartRule("Shutter", PartCategory.SHUTTER, _leaf),
    PartKind.DOOR: PartRule("Door", PartCategory.DOOR, _leaf),
    PartKind.DRAWER: PartRule("Drawer Front", PartCategory.DRAWER, _drawer_front),
    PartKind.SHELF: PartRule("Shelf", PartCategory.SHELF, _shelf),
    PartKind.BACK_PANEL: PartRule("Back Panel", PartCategory.BACK_PANEL, _back_panel),
    PartKind.CUSTOM: PartRule("Custom", PartCategory.CUSTOM, _custom),
}

# Carcass panels and how many of each a unit has
CARCASS_KINDS: tuple[tuple[PartKind, int], ...] = (
    (PartKind.TOP, 1),
    (PartKind.BOTTOM, 1),
    (PartKind.SIDE, 2),
)


@dataclass(frozen=True)
class UnitProfile:
    """Hardware behaviour of a furniture unit type.

    Attributes:
        shutter_locks: Fit a lock to every shutter.
        straighteners: Fit straighteners to tall shutters.
        wall_brackets: Wall brackets per unit.
    """

    shutter_locks: bool = True
    straighteners: bool = True
    wall_brackets: int = 0


GENERIC_PROFILE = UnitProfile()

UNIT_PROFILES: dict[UnitType, UnitProfile] = {
    UnitType.WARDROBE: GENERIC_PROFILE,
    UnitType.STORAGE_UNIT: UnitProfile(straighteners=False),
    UnitType.DOOR: UnitProfile(straighteners=False),
    UnitType.SHOE_RACK: UnitProfile(shutter_locks=False, straighteners=False),
    UnitType.BED: UnitProfile(shutter_locks=False, straighteners=False),
    UnitType.TABLE: UnitProfile(shutter_locks=False, straighteners=False),
    UnitType.SOFA: UnitProfile(shutter_locks=False, straighteners=False),
    UnitType.TV_PANEL: UnitProfile(
        shutter_locks=False,
        straighteners=False,
        wall_brackets=WALL_BRACKETS_PER_TV_PANEL,
    ),
}


def resolve_profile(unit_type: str | UnitType) -> UnitProfile:
    """Return the profile for a unit type, falling back to the generic one."""
    parsed = UnitType.parse(unit_type)
    if parsed is None:
        return GENERIC_PROFILE
    return UNIT_PROFILES.get(parsed, GENERIC_PROFILE)


class PartsExpander:
    """Expands a parts configuration into an ordered list of board parts.

    Order: carcass (when requested), shutters, doors, drawers, shelves,
    back panels, then custom parts. Each counted kind yields ``count``
    identical parts of quantity 1.
    """

    def expand(
        self,
        unit_type: str | UnitType,
        dimensions: Dimensions,
        config: PartsConfig,
        include_carcass: bool = False,
    ) -> list[BoardPart]:
        """Generate board parts for one unit.

        Args:
            unit_type: Furniture unit type; unknown names are accepted.
            dimensions: Overall unit dimensions in millimetres.
            config: Requested part counts and custom parts.
            include_carcass: Also emit top, bottom and side panels.

        Returns:
            Ordered list of BoardPart.

        Raises:
            ValidationError: If a part would end up with a non-positive size.
        """
        if UnitType.parse(unit_type) is None:
            logger.warning(f"Unknown unit type {unit_type!r}, expanding generically")

        parts: list[BoardPart] = []

        if include_carcass:
            for kind, count in CARCASS_KINDS:
                parts.extend(self._synthesize(kind, count, dimensions))

        for kind in COUNTED_KINDS:
            parts.extend(self._synthesize(kind, config.count(kind), dimensions))

        for custom in config.custom_parts:
            if custom.quantity == 0:
                continue
            parts.append(
                BoardPart(
                    name=custom.name.strip(),
                    kind=PartKind.CUSTOM,
                    category=PART_RULES[PartKind.CUSTOM].category,
                    length=custom.length,
                    width=custom.width,
                    quantity=custom.quantity,
                )
            )

        logger.debug(f"Expanded {unit_type} into {len(parts)} board parts")
        return parts

    def _synthesize(
        self, kind: PartKind, count: int, dimensions: Dimensions
    ) -> list[BoardPart]:
        if count == 0:
            return []

        rule = PART_RULES[kind]
        size = rule.size(dimensions, count)
        if size is None:
            return []
        length, width = size
        if length <= 0 or width <= 0:
            raise ValidationError(
                f"Unit dimensions too small for {rule.label.lower()}: "
                f"{length:.1f}mm x {width:.1f}mm",
                field=kind.value,
            )

        if count == 1:
            names = [rule.label]
        else:
            names = [f"{rule.label} {i}" for i in range(1, count + 1)]

        return [
            BoardPart(
                name=name,
                kind=kind,
                category=rule.category,
                length=length,
                width=width,
                quantity=1,
            )
            for name in names
        ]
