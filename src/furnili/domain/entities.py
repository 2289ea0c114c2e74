"""Domain entities: BOM calculations, their items, and reference rates."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from .errors import StatusTransitionError
from .value_objects import (
    BoardThickness,
    BomStatus,
    Dimensions,
    EdgeBanding,
    EdgeBandingType,
    ItemType,
    LengthUnit,
    PartKind,
    PartsConfig,
    sq_mm_to_sq_feet,
)


@dataclass(frozen=True)
class BoardRate:
    """Price per square foot for a board type, thickness and finish."""

    board_type: str
    thickness: BoardThickness
    finish: str
    rate_per_sqft: float
    supplier: str | None = None
    is_active: bool = True

    @property
    def key(self) -> tuple[str, int, str]:
        return (self.board_type, int(self.thickness), self.finish)


@dataclass(frozen=True)
class HardwareRate:
    """Current price per unit for a hardware item."""

    item_name: str
    category: str
    current_rate: float
    unit: str = "pieces"
    supplier: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class BomItem:
    """One priced row of a bill of materials.

    ``total_cost`` is always ``unit_rate * quantity``. For board rows the
    unit rate already includes the edge banding of one piece.

    Attributes:
        item_type: Board or hardware row.
        category: Part category for boards, hardware category otherwise.
        part_name: Display name.
        quantity: Number of pieces (or pairs for slides).
        unit_rate: Cost of one unit.
        unit: Counting unit ("pieces", "pairs").
        part_kind: Part kind for board rows, None for hardware.
        material_type: Board material description for board rows.
        length: Length in millimetres.
        width: Width in millimetres.
        thickness: Thickness in millimetres.
        edge_banding: Banding for all pieces of this row, in linear feet.
    """

    item_type: ItemType
    category: str
    part_name: str
    quantity: int
    unit_rate: float
    unit: str = "pieces"
    part_kind: PartKind | None = None
    material_type: str | None = None
    length: float | None = None
    width: float | None = None
    thickness: float | None = None
    edge_banding: EdgeBanding = field(default_factory=EdgeBanding)

    @property
    def total_cost(self) -> float:
        return self.unit_rate * self.quantity

    @property
    def edge_banding_type(self) -> EdgeBandingType | None:
        return self.edge_banding.banding_type

    @property
    def edge_banding_length(self) -> float:
        return self.edge_banding.total

    @property
    def area_sqft(self) -> float:
        """Board area of all pieces in square feet (0 for hardware)."""
        if self.length is None or self.width is None:
            return 0.0
        return sq_mm_to_sq_feet(self.length, self.width) * self.quantity


@dataclass(frozen=True)
class BomCalculation:
    """A computed bill of materials for one furniture unit.

    Totals are derived from the items, so they always agree with them.
    The only permitted change after creation is ``draft -> final``.
    """

    unit_type: str
    dimensions: Dimensions
    board_type: str
    board_thickness: BoardThickness
    finish: str
    parts_config: PartsConfig
    items: tuple[BomItem, ...]
    unit_of_measure: LengthUnit = LengthUnit.MM
    number: str | None = None
    status: BomStatus = BomStatus.DRAFT
    project_id: int | None = None
    notes: str | None = None
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def board_items(self) -> tuple[BomItem, ...]:
        return tuple(i for i in self.items if i.item_type is ItemType.BOARD)

    @property
    def hardware_items(self) -> tuple[BomItem, ...]:
        return tuple(i for i in self.items if i.item_type is ItemType.HARDWARE)

    @property
    def total_board_area(self) -> float:
        """Total board area in square feet."""
        return sum(item.area_sqft for item in self.board_items)

    @property
    def board_area_by_thickness(self) -> dict[str, float]:
        """Board area in square feet keyed by thickness label, e.g. "18mm"."""
        areas: dict[str, float] = {}
        for item in self.board_items:
            if item.thickness is None or item.area_sqft == 0:
                continue
            label = f"{item.thickness:g}mm"
            areas[label] = areas.get(label, 0.0) + item.area_sqft
        return areas

    @property
    def total_edge_banding(self) -> EdgeBanding:
        total = EdgeBanding()
        for item in self.board_items:
            total = total + item.edge_banding
        return total

    @property
    def total_material_cost(self) -> float:
        return sum(item.total_cost for item in self.board_items)

    @property
    def total_hardware_cost(self) -> float:
        return sum(item.total_cost for item in self.hardware_items)

    @property
    def total_cost(self) -> float:
        return self.total_material_cost + self.total_hardware_cost

    def parts_of_kind(self, kind: PartKind) -> tuple[BomItem, ...]:
        return tuple(i for i in self.board_items if i.part_kind is kind)

    def with_number(self, number: str) -> "BomCalculation":
        return replace(self, number=number)

    def finalize(self) -> "BomCalculation":
        """Return a copy in ``final`` status.

        Raises:
            StatusTransitionError: If the calculation is already final.
        """
        if self.status is not BomStatus.DRAFT:
            raise StatusTransitionError(
                self.number or "<unsaved>", self.status.value, BomStatus.FINAL.value
            )
        return replace(self, status=BomStatus.FINAL)
