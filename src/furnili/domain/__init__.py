"""Domain layer - entities, value objects, and BOM calculation services."""

from .entities import BoardRate, BomCalculation, BomItem, HardwareRate
from .errors import (
    CalculationNotFoundError,
    RateLookupError,
    StatusTransitionError,
    ValidationError,
)
from .services import (
    BomCalculator,
    EdgeBandingEstimator,
    HardwareCalculator,
    PartsExpander,
    Pricer,
    normalize,
    normalize_dimensions,
)
from .value_objects import (
    BoardPart,
    BoardThickness,
    BoardType,
    BomStatus,
    CustomPart,
    Dimensions,
    EdgeBanding,
    EdgeBandingType,
    Finish,
    ItemType,
    LengthUnit,
    PartCategory,
    PartKind,
    PartsConfig,
    UnitType,
)

__all__ = [
    "BoardPart",
    "BoardRate",
    "BoardThickness",
    "BoardType",
    "BomCalculation",
    "BomCalculator",
    "BomItem",
    "BomStatus",
    "CalculationNotFoundError",
    "CustomPart",
    "Dimensions",
    "EdgeBanding",
    "EdgeBandingEstimator",
    "EdgeBandingType",
    "Finish",
    "HardwareCalculator",
    "HardwareRate",
    "ItemType",
    "LengthUnit",
    "PartCategory",
    "PartKind",
    "PartsConfig",
    "PartsExpander",
    "Pricer",
    "RateLookupError",
    "StatusTransitionError",
    "UnitType",
    "ValidationError",
    "normalize",
    "normalize_dimensions",
]
