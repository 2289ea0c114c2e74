"""Conversion of input dimensions to millimetres."""

from __future__ import annotations

import math

from furnili.domain.errors import ValidationError
from furnili.domain.value_objects import MM_PER_FOOT, Dimensions, LengthUnit


def parse_unit(unit: str | LengthUnit) -> LengthUnit:
    """Parse a unit-of-measure flag.

    Raises:
        ValidationError: If the unit is not ``mm`` or ``ft``.
    """
    if isinstance(unit, LengthUnit):
        return unit
    try:
        return LengthUnit(str(unit).strip().lower())
    except ValueError:
        raise ValidationError(
            f"Unsupported unit of measure: {unit!r} (expected 'mm' or 'ft')",
            field="unit_of_measure",
            value=unit,
        ) from None


def normalize(value: float, unit: str | LengthUnit, field: str = "dimension") -> float:
    """Convert a single positive length to millimetres.

    Args:
        value: Length in ``unit``.
        unit: ``mm`` (passed through) or ``ft`` (multiplied by 304.8).
        field: Field name used in error messages.

    Raises:
        ValidationError: If the value is not a positive finite number or
            the unit is unknown.
    """
    length_unit = parse_unit(unit)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field} must be a number", field=field, value=value)
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number) or number <= 0:
        raise ValidationError(
            f"{field} must be a positive finite number", field=field, value=value
        )
    millimetres = number * MM_PER_FOOT if length_unit is LengthUnit.FT else number
    # feet can overflow on conversion
    if not math.isfinite(millimetres):
        raise ValidationError(
            f"{field} is too large to convert to millimetres", field=field, value=value
        )
    return millimetres


def normalize_dimensions(
    height: float,
    width: float,
    depth: float,
    unit: str | LengthUnit = LengthUnit.MM,
) -> Dimensions:
    """Convert overall unit dimensions to millimetres.

    Returns:
        Dimensions with height, width and depth in millimetres.

    Raises:
        ValidationError: If any dimension is non-positive or non-finite.
    """
    return Dimensions(
        height=normalize(height, unit, "height"),
        width=normalize(width, unit, "width"),
        depth=normalize(depth, unit, "depth"),
    )
