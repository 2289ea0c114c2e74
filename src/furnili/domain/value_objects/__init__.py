"""Value objects for the BOM domain.

All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

from ._dimensions import (
    MM_PER_FOOT,
    SQ_MM_PER_SQ_FOOT,
    Dimensions,
    mm_to_feet,
    sq_mm_to_sq_feet,
)
from ._enums import (
    BoardThickness,
    BoardType,
    BomStatus,
    EdgeBandingType,
    Finish,
    ItemType,
    LengthUnit,
    PartCategory,
    PartKind,
    UnitType,
)
from ._parts import (
    COUNTED_KINDS,
    BoardPart,
    CustomPart,
    EdgeBanding,
    PartsConfig,
)

__all__ = [
    "BoardPart",
    "BoardThickness",
    "BoardType",
    "BomStatus",
    "COUNTED_KINDS",
    "CustomPart",
    "Dimensions",
    "EdgeBanding",
    "EdgeBandingType",
    "Finish",
    "ItemType",
    "LengthUnit",
    "MM_PER_FOOT",
    "PartCategory",
    "PartKind",
    "PartsConfig",
    "SQ_MM_PER_SQ_FOOT",
    "UnitType",
    "mm_to_feet",
    "sq_mm_to_sq_feet",
]
