"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CustomPartSchema(BaseModel):
    """Named extra board part supplied by the caller."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=100, description="Part name")
    quantity: int = Field(default=1, ge=0, le=100, description="Number of pieces")
    length: float | None = Field(default=None, gt=0, description="Length in mm")
    width: float | None = Field(default=None, gt=0, description="Width in mm")


class PartsConfigSchema(BaseModel):
    """Requested part counts. Every count defaults to zero."""

    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )

    shelves: int = Field(default=0, ge=0, le=50, description="Number of shelves")
    drawers: int = Field(default=0, ge=0, le=50, description="Number of drawers")
    shutters: int = Field(default=0, ge=0, le=50, description="Number of shutters")
    doors: int = Field(default=0, ge=0, le=50, description="Number of doors")
    back_panels: int = Field(
        default=0, ge=0, le=50, description="Number of back panels"
    )
    custom_parts: list[CustomPartSchema] = Field(
        default_factory=list, description="Additional named parts"
    )


class CalculateBomRequest(BaseModel):
    """Request for calculating a bill of materials.

    Field names are accepted in snake_case or camelCase.
    """

    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )

    unit_type: str = Field(..., min_length=1, description="Furniture unit type")
    height: float = Field(..., description="Overall height")
    width: float = Field(..., description="Overall width")
    depth: float = Field(..., description="Overall depth")
    unit_of_measure: str = Field(default="mm", description="'mm' or 'ft'")
    board_type: str = Field(..., min_length=1, description="Board material key")
    board_thickness: int | str = Field(
        default=18, description="Board thickness, e.g. 18 or '18mm'"
    )
    finish: str = Field(default="laminate", min_length=1, description="Board finish")
    parts_config: PartsConfigSchema = Field(
        default_factory=PartsConfigSchema, description="Part counts"
    )
    include_carcass: bool = Field(
        default=False, description="Also list top, bottom and side panels"
    )
    project_id: int | None = Field(default=None, description="Owning project")
    notes: str | None = Field(default=None, max_length=2000, description="Notes")
