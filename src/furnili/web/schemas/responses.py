"""Pydantic response schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class BomItemSchema(BaseModel):
    """One priced line of a bill of materials."""

    item_type: str = Field(..., description="'board' or 'hardware'")
    category: str = Field(..., description="Part category or hardware category")
    part_name: str = Field(..., description="Part or hardware item name")
    part_kind: str | None = Field(default=None, description="Part kind for boards")
    material_type: str | None = Field(default=None, description="Board material")
    length: float | None = Field(default=None, description="Length in mm")
    width: float | None = Field(default=None, description="Width in mm")
    thickness: float | None = Field(default=None, description="Thickness in mm")
    quantity: int = Field(..., description="Quantity")
    unit: str = Field(default="pieces", description="Unit of quantity")
    edge_banding_type: str | None = Field(
        default=None, description="'2mm', '0.8mm' or 'mixed'"
    )
    edge_banding_2mm: float = Field(default=0.0, description="2mm banding in feet")
    edge_banding_08mm: float = Field(default=0.0, description="0.8mm banding in feet")
    edge_banding_length: float = Field(default=0.0, description="Total banding in feet")
    unit_rate: float = Field(..., description="Cost per unit")
    total_cost: float = Field(..., description="unit_rate x quantity")


class SheetLayoutSchema(BaseModel):
    """One stock sheet of the cutting plan."""

    index: int = Field(..., description="Zero-based sheet index")
    thickness: float = Field(..., description="Board thickness in mm")
    pieces: int = Field(..., description="Pieces cut from this sheet")
    utilization: float = Field(..., description="Share of the sheet used, 0 to 1")
    waste_area: float = Field(..., description="Offcut area in sq mm")


class SheetPlanSchema(BaseModel):
    """Stock sheets needed for the board parts."""

    total_sheets: int = Field(..., description="Sheets of 2440 x 1220 mm")
    sheets_by_thickness: dict[str, int] = Field(
        default_factory=dict, description="Sheet count per thickness"
    )
    utilization: float = Field(..., description="Overall share used, 0 to 1")
    waste_area: float = Field(..., description="Total offcut area in sq mm")
    unplaced_parts: list[str] = Field(
        default_factory=list, description="Parts larger than a sheet"
    )
    sheets: list[SheetLayoutSchema] = Field(default_factory=list)


class BomSummarySchema(BaseModel):
    """Totals of a calculation."""

    total_board_area: float = Field(..., description="Board area in sq ft")
    board_area_by_thickness: dict[str, float] = Field(
        default_factory=dict, description="Board area in sq ft per thickness"
    )
    total_edge_banding_2mm: float = Field(..., description="2mm banding in feet")
    total_edge_banding_08mm: float = Field(..., description="0.8mm banding in feet")
    total_material_cost: float = Field(..., description="Board cost")
    total_hardware_cost: float = Field(..., description="Hardware cost")
    total_cost: float = Field(..., description="Material plus hardware cost")
    sheet_plan: SheetPlanSchema = Field(..., description="Sheet optimization")


class BomCalculationSchema(BaseModel):
    """Response for a stored calculation."""

    number: str = Field(..., description="Calculation number")
    status: str = Field(..., description="'draft' or 'final'")
    unit_type: str = Field(..., description="Furniture unit type")
    height: float = Field(..., description="Height in mm")
    width: float = Field(..., description="Width in mm")
    depth: float = Field(..., description="Depth in mm")
    unit_of_measure: str = Field(..., description="Unit the request used")
    board_type: str = Field(..., description="Board material key")
    board_thickness: int = Field(..., description="Board thickness in mm")
    finish: str = Field(..., description="Board finish")
    parts_config: dict[str, Any] = Field(..., description="Requested part counts")
    project_id: int | None = Field(default=None, description="Owning project")
    notes: str | None = Field(default=None, description="Notes")
    created_at: datetime = Field(..., description="Creation time (UTC)")
    summary: BomSummarySchema = Field(..., description="Totals")
    items: list[BomItemSchema] = Field(default_factory=list, description="Line items")


class BomHistoryItemSchema(BaseModel):
    """Short form of a calculation for history listings."""

    number: str = Field(..., description="Calculation number")
    status: str = Field(..., description="'draft' or 'final'")
    unit_type: str = Field(..., description="Furniture unit type")
    board_type: str = Field(..., description="Board material key")
    total_board_area: float = Field(..., description="Board area in sq ft")
    total_cost: float = Field(..., description="Total cost")
    created_at: datetime = Field(..., description="Creation time (UTC)")


class PaginationSchema(BaseModel):
    """Pagination metadata."""

    page: int = Field(..., description="Current page (1-based)")
    limit: int = Field(..., description="Page size")
    total: int = Field(..., description="Total stored calculations")
    total_pages: int = Field(..., description="Number of pages")


class BomHistorySchema(BaseModel):
    """Response for calculation history."""

    calculations: list[BomHistoryItemSchema] = Field(
        default_factory=list, description="Calculations, newest first"
    )
    pagination: PaginationSchema = Field(..., description="Pagination metadata")


class BoardRateSchema(BaseModel):
    """Reference board rate."""

    board_type: str = Field(..., description="Board material key")
    thickness: int = Field(..., description="Thickness in mm")
    finish: str = Field(..., description="Finish key")
    rate_per_sqft: float = Field(..., description="Rate per square foot")
    supplier: str | None = Field(default=None, description="Supplier")


class HardwareRateSchema(BaseModel):
    """Reference hardware rate."""

    item_name: str = Field(..., description="Hardware item name")
    category: str = Field(..., description="Hardware category")
    current_rate: float = Field(..., description="Rate per unit")
    unit: str = Field(..., description="Unit of quantity")
    supplier: str | None = Field(default=None, description="Supplier")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
