"""Parts configuration, board parts and edge banding value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..errors import ValidationError
from ._dimensions import sq_mm_to_sq_feet
from ._enums import EdgeBandingType, PartCategory, PartKind

# Part kinds a caller can request by count, in expansion order.
COUNTED_KINDS: tuple[PartKind, ...] = (
    PartKind.SHUTTER,
    PartKind.DOOR,
    PartKind.DRAWER,
    PartKind.SHELF,
    PartKind.BACK_PANEL,
)


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer", field=name, value=value)
    if value < 0:
        raise ValidationError(f"{name} cannot be negative", field=name, value=value)


def _check_optional_length(name: str, value: float | None) -> None:
    if value is None:
        return
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(
            f"{name} must be a positive finite number", field=name, value=value
        )


@dataclass(frozen=True)
class CustomPart:
    """A caller-named board part outside the fixed part kinds.

    Attributes:
        name: Display name of the part.
        quantity: Number of pieces. Zero means the part is skipped.
        length: Optional length in millimetres.
        width: Optional width in millimetres.
    """

    name: str
    quantity: int = 1
    length: float | None = None
    width: float | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Custom part name is required", field="name")
        _check_count("quantity", self.quantity)
        _check_optional_length("length", self.length)
        _check_optional_length("width", self.width)
        if (self.length is None) != (self.width is None):
            raise ValidationError(
                f"Custom part '{self.name}' needs both length and width or neither",
                field="length",
            )


@dataclass(frozen=True)
class PartsConfig:
    """Requested part counts for one furniture unit.

    All counts are non-negative integers; a zero count produces no parts.
    """

    shelves: int = 0
    drawers: int = 0
    shutters: int = 0
    doors: int = 0
    back_panels: int = 0
    custom_parts: tuple[CustomPart, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("shelves", "drawers", "shutters", "doors", "back_panels"):
            _check_count(name, getattr(self, name))
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "custom_parts", tuple(self.custom_parts))

    def count(self, kind: PartKind) -> int:
        """Return the requested count for a counted part kind."""
        counts = {
            PartKind.SHUTTER: self.shutters,
            PartKind.DOOR: self.doors,
            PartKind.DRAWER: self.drawers,
            PartKind.SHELF: self.shelves,
            PartKind.BACK_PANEL: self.back_panels,
        }
        return counts.get(kind, 0)


@dataclass(frozen=True)
class EdgeBanding:
    """Edge banding lengths in linear feet, split by banding thickness."""

    banding_2mm: float = 0.0
    banding_08mm: float = 0.0

    def __add__(self, other: "EdgeBanding") -> "EdgeBanding":
        return EdgeBanding(
            banding_2mm=self.banding_2mm + other.banding_2mm,
            banding_08mm=self.banding_08mm + other.banding_08mm,
        )

    def scaled(self, factor: float) -> "EdgeBanding":
        return EdgeBanding(
            banding_2mm=self.banding_2mm * factor,
            banding_08mm=self.banding_08mm * factor,
        )

    @property
    def total(self) -> float:
        return self.banding_2mm + self.banding_08mm

    @property
    def banding_type(self) -> EdgeBandingType | None:
        """Dominant banding type, MIXED when both are used, None when neither."""
        if self.banding_2mm > 0 and self.banding_08mm > 0:
            return EdgeBandingType.MIXED
        if self.banding_2mm > 0:
            return EdgeBandingType.MM_2
        if self.banding_08mm > 0:
            return EdgeBandingType.MM_08
        return None


@dataclass(frozen=True)
class BoardPart:
    """A board piece produced by the parts expander.

    ``length`` and ``width`` are in millimetres and are None only for custom
    parts supplied without dimensions.
    """

    name: str
    kind: PartKind
    category: PartCategory
    length: float | None
    width: float | None
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def has_dimensions(self) -> bool:
        return self.length is not None and self.width is not None

    @property
    def area_sqft(self) -> float:
        """Area of a single piece in square feet (0 without dimensions)."""
        if self.length is None or self.width is None:
            return 0.0
        return sq_mm_to_sq_feet(self.length, self.width)

    @property
    def total_area_sqft(self) -> float:
        """Area of all pieces of this part in square feet."""
        return self.area_sqft * self.quantity
