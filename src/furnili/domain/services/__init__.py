"""Domain services for BOM calculation.

This package provides:
- Dimension normalization to millimetres
- Parts expansion from a parts configuration
- Edge banding estimation per part
- Hardware quantity rules
- Pricing against injected reference rates
- BomCalculator facade running the whole pipeline
"""

from __future__ import annotations

from .bom_calculator import BomCalculator
from .dimension_normalizer import normalize, normalize_dimensions, parse_unit
from .edge_banding import EdgeBandingEstimator
from .hardware_rules import HardwareCalculator, HardwareRequirement, glue_metres
from .parts_expander import (
    PART_RULES,
    UNIT_PROFILES,
    PartRule,
    PartsExpander,
    UnitProfile,
    resolve_profile,
)
from .pricer import Pricer, material_label

__all__ = [
    "BomCalculator",
    "EdgeBandingEstimator",
    "HardwareCalculator",
    "HardwareRequirement",
    "PART_RULES",
    "PartRule",
    "PartsExpander",
    "Pricer",
    "UNIT_PROFILES",
    "UnitProfile",
    "glue_metres",
    "material_label",
    "normalize",
    "normalize_dimensions",
    "parse_unit",
    "resolve_profile",
]
