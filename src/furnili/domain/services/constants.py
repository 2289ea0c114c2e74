"""Business rules for BOM calculation.

This module provides:
- Carcass clearances and drawer proportions used by the parts expander
- The edge banding rule table per part category
- Hardware quantity rules and thresholds
- Default reference rates
"""

from __future__ import annotations

from dataclasses import dataclass

from furnili.domain.value_objects import (
    BoardThickness,
    BoardType,
    EdgeBandingType,
    Finish,
    PartCategory,
)


# Shelves and drawer fronts sit between two 18 mm side panels
CARCASS_SIDE_CLEARANCE_MM = 36.0
# Shelves stop short of the back panel groove
CARCASS_BACK_CLEARANCE_MM = 18.0
# Share of the unit height given over to the drawer stack
DRAWER_ZONE_FRACTION = 0.25


@dataclass(frozen=True)
class BandingRule:
    """Number of long and short edges banded with each banding type.

    Long edges run along the part length, short edges along its width.
    """

    visible_long: int = 0
    visible_short: int = 0
    concealed_long: int = 0
    concealed_short: int = 0


# Visible edges get 2 mm banding, concealed edges 0.8 mm.
# Categories missing from this table get no banding.
EDGE_BANDING_RULES: dict[PartCategory, BandingRule] = {
    PartCategory.SHUTTER: BandingRule(visible_long=2, visible_short=2),
    PartCategory.DOOR: BandingRule(visible_long=2, visible_short=2),
    PartCategory.DRAWER: BandingRule(visible_long=2, visible_short=2),
    PartCategory.CARCASS: BandingRule(visible_long=2, visible_short=2),
    PartCategory.SHELF: BandingRule(
        visible_long=1, concealed_long=1, concealed_short=2
    ),
    PartCategory.BACK_PANEL: BandingRule(concealed_long=2, concealed_short=2),
}


# Hardware item names, also used as rate table keys
HINGE = "Hinge"
LOCK = "Lock"
HANDLE = "Handle"
DRAWER_SLIDE = "Drawer Slide"
MINIFIX = "Minifix"
DOWEL = "Dowel"
STRAIGHTENER = "Straightener"
WALL_BRACKET = "Wall Bracket"
EDGE_BANDING_GLUE = "Edge Banding Glue"

# Shutters and doors taller than this need the extra hinge
HINGE_HEIGHT_THRESHOLD_MM = 1200.0
HINGES_PER_LEAF_LOW = 3
HINGES_PER_LEAF_HIGH = 4

# Shutters taller than this get a straightener each
STRAIGHTENER_HEIGHT_THRESHOLD_MM = 2100.0

# Carcass joints: top and bottom to both sides, plus two per shelf
BASE_JOINTS = 4
JOINTS_PER_SHELF = 2
MINIFIX_PER_JOINT = 3
DOWELS_PER_JOINT = 5

WALL_BRACKETS_PER_TV_PANEL = 4

# Glue is bought by the whole metre of banding
FEET_TO_METRES = 0.3048


# Default reference rates (INR)
DEFAULT_BOARD_BASE_RATES: dict[BoardType, float] = {
    BoardType.PRE_LAM_PARTICLE_BOARD: 80.0,
    BoardType.MDF: 100.0,
    BoardType.PLY: 120.0,
    BoardType.SOLID_WOOD: 150.0,
    BoardType.HDF: 90.0,
}

# Base rates are quoted for 18 mm stock
THICKNESS_RATE_FACTORS: dict[BoardThickness, float] = {
    BoardThickness.MM_6: 0.5,
    BoardThickness.MM_12: 0.75,
    BoardThickness.MM_18: 1.0,
    BoardThickness.MM_25: 1.35,
}

# Added per square foot on top of the board rate
FINISH_SURCHARGES: dict[Finish, float] = {
    Finish.LAMINATE: 20.0,
    Finish.VENEER: 45.0,
    Finish.ACRYLIC: 70.0,
    Finish.PAINT: 35.0,
    Finish.MEMBRANE: 40.0,
    Finish.NONE: 0.0,
}

# Per linear foot
DEFAULT_EDGE_BANDING_RATES: dict[EdgeBandingType, float] = {
    EdgeBandingType.MM_2: 4.0,
    EdgeBandingType.MM_08: 2.0,
}

# (item name, category, rate, unit)
DEFAULT_HARDWARE_RATES: tuple[tuple[str, str, float, str], ...] = (
    (HINGE, "hinges", 30.0, "pieces"),
    (LOCK, "locks", 80.0, "pieces"),
    (HANDLE, "handles", 25.0, "pieces"),
    (DRAWER_SLIDE, "slides", 240.0, "pairs"),
    (MINIFIX, "fasteners", 10.0, "pieces"),
    (DOWEL, "fasteners", 2.0, "pieces"),
    (STRAIGHTENER, "fittings", 150.0, "pieces"),
    (WALL_BRACKET, "brackets", 50.0, "pieces"),
    (EDGE_BANDING_GLUE, "adhesives", 3.0, "meters"),
)
