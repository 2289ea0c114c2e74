"""Rate configuration schema.

Pydantic models describing a JSON rate file: board rates keyed by
(board type, thickness, finish), hardware rates keyed by item name, and
edge banding rates per linear foot.

Example file:

    {
      "schema_version": "1.0",
      "board_rates": [
        {"board_type": "mdf", "thickness": "18mm", "finish": "laminate",
         "rate_per_sqft": 120}
      ],
      "hardware_rates": [
        {"item_name": "Hinge", "category": "hinges", "current_rate": 30}
      ],
      "edge_banding": {"2mm": 4.0, "0.8mm": 2.0}
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from furnili.domain.value_objects import BoardThickness

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class BoardRateConfig(BaseModel):
    """One row of the board rate table.

    Attributes:
        board_type: Board material key (e.g. "mdf", "ply").
        thickness: Stock thickness in millimetres; accepts 18 or "18mm".
        finish: Finish key (e.g. "laminate").
        rate_per_sqft: Price per square foot.
        supplier: Optional supplier name.
        is_active: Inactive rows are ignored by lookups.
    """

    model_config = ConfigDict(extra="forbid")

    board_type: str = Field(..., min_length=1)
    thickness: int
    finish: str = Field(..., min_length=1)
    rate_per_sqft: float = Field(..., ge=0)
    supplier: str | None = None
    is_active: bool = True

    @field_validator("thickness", mode="before")
    @classmethod
    def validate_thickness(cls, v: Any) -> int:
        """Accept ``18``, ``"18"`` and ``"18mm"`` for stock thicknesses."""
        try:
            return BoardThickness.parse(v).value
        except (TypeError, ValueError):
            allowed = ", ".join(t.label for t in BoardThickness)
            raise ValueError(f"Unsupported thickness {v!r}; expected one of {allowed}")

    @field_validator("board_type", "finish")
    @classmethod
    def normalize_key(cls, v: str) -> str:
        return v.strip().lower()


class HardwareRateConfig(BaseModel):
    """One row of the hardware rate table."""

    model_config = ConfigDict(extra="forbid")

    item_name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    current_rate: float = Field(..., ge=0)
    unit: str = "pieces"
    supplier: str | None = None
    is_active: bool = True


class EdgeBandingRatesConfig(BaseModel):
    """Edge banding prices per linear foot."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    banding_2mm: float = Field(default=4.0, ge=0, alias="2mm")
    banding_08mm: float = Field(default=2.0, ge=0, alias="0.8mm")


class RateConfiguration(BaseModel):
    """Root model of a rate configuration file.

    Attributes:
        schema_version: Version string in format "major.minor".
        board_rates: Board rate rows; (board_type, thickness, finish) must
            be unique among active rows.
        hardware_rates: Hardware rate rows; item names must be unique among
            active rows.
        edge_banding: Edge banding rates per linear foot.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    board_rates: list[BoardRateConfig] = Field(default_factory=list)
    hardware_rates: list[HardwareRateConfig] = Field(default_factory=list)
    edge_banding: EdgeBandingRatesConfig = Field(
        default_factory=EdgeBandingRatesConfig
    )

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version {v}; supported: "
                f"{', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_keys(self) -> "RateConfiguration":
        seen_boards: set[tuple[str, int, str]] = set()
        for row in self.board_rates:
            if not row.is_active:
                continue
            key = (row.board_type, row.thickness, row.finish)
            if key in seen_boards:
                raise ValueError(
                    f"Duplicate board rate for {row.board_type} "
                    f"{row.thickness}mm {row.finish}"
                )
            seen_boards.add(key)

        seen_items: set[str] = set()
        for item in self.hardware_rates:
            if not item.is_active:
                continue
            name = item.item_name.strip().lower()
            if name in seen_items:
                raise ValueError(f"Duplicate hardware rate for {item.item_name}")
            seen_items.add(name)
        return self
