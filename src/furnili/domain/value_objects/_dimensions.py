"""Dimension and unit-conversion value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import ValidationError

MM_PER_FOOT = 304.8
SQ_MM_PER_SQ_FOOT = MM_PER_FOOT * MM_PER_FOOT  # 92903.04


def mm_to_feet(mm: float) -> float:
    """Convert millimetres to linear feet."""
    return mm / MM_PER_FOOT


def sq_mm_to_sq_feet(length: float, width: float) -> float:
    """Area of a ``length`` x ``width`` rectangle (mm) in square feet."""
    return (length * width) / SQ_MM_PER_SQ_FOOT


@dataclass(frozen=True)
class Dimensions:
    """Immutable overall unit dimensions in millimetres."""

    height: float
    width: float
    depth: float

    def __post_init__(self) -> None:
        for name in ("height", "width", "depth"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValidationError(
                    f"{name.capitalize()} must be a positive finite number",
                    field=name,
                    value=value,
                )
