"""Enumerations used across BOM calculation."""

from __future__ import annotations

from enum import Enum


class UnitType(str, Enum):
    """Furniture units the calculator knows how to expand."""

    WARDROBE = "wardrobe"
    BED = "bed"
    STORAGE_UNIT = "storage_unit"
    DOOR = "door"
    SHOE_RACK = "shoe_rack"
    TABLE = "table"
    SOFA = "sofa"
    TV_PANEL = "tv_panel"

    @classmethod
    def parse(cls, value: "str | UnitType") -> "UnitType | None":
        """Return the matching unit type, or None for unknown names."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class LengthUnit(str, Enum):
    """Units accepted for input dimensions."""

    MM = "mm"
    FT = "ft"


class BoardType(str, Enum):
    """Board materials carried in the default rate table."""

    PRE_LAM_PARTICLE_BOARD = "pre_lam_particle_board"
    MDF = "mdf"
    PLY = "ply"
    SOLID_WOOD = "solid_wood"
    HDF = "hdf"


class BoardThickness(int, Enum):
    """Stock board thicknesses in millimetres."""

    MM_6 = 6
    MM_12 = 12
    MM_18 = 18
    MM_25 = 25

    @property
    def label(self) -> str:
        return f"{self.value}mm"

    @classmethod
    def parse(cls, value: "str | int | BoardThickness") -> "BoardThickness":
        """Parse ``18``, ``"18"`` or ``"18mm"`` into a thickness.

        Raises:
            ValueError: If the value is not a stock thickness.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            if text.endswith("mm"):
                text = text[:-2].strip()
            value = int(text) if text.isdigit() else -1
        return cls(value)


class Finish(str, Enum):
    """Surface finishes carried in the default rate table."""

    LAMINATE = "laminate"
    VENEER = "veneer"
    ACRYLIC = "acrylic"
    PAINT = "paint"
    MEMBRANE = "membrane"
    NONE = "none"


class PartKind(str, Enum):
    """Board part kinds produced by the parts expander."""

    TOP = "top"
    BOTTOM = "bottom"
    SIDE = "side"
    SHUTTER = "shutter"
    DOOR = "door"
    DRAWER = "drawer"
    SHELF = "shelf"
    BACK_PANEL = "back_panel"
    CUSTOM = "custom"


class PartCategory(str, Enum):
    """Categories that drive edge banding rules."""

    CARCASS = "carcass"
    SHUTTER = "shutter"
    DOOR = "door"
    DRAWER = "drawer"
    SHELF = "shelf"
    BACK_PANEL = "back_panel"
    CUSTOM = "custom"


class ItemType(str, Enum):
    """Kinds of BOM rows."""

    BOARD = "board"
    HARDWARE = "hardware"


class EdgeBandingType(str, Enum):
    """Edge banding thicknesses."""

    MM_2 = "2mm"
    MM_08 = "0.8mm"
    MIXED = "mixed"


class BomStatus(str, Enum):
    """Lifecycle of a stored calculation."""

    DRAFT = "draft"
    FINAL = "final"
