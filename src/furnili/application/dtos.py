"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from furnili.domain import (
    BoardThickness,
    CustomPart,
    LengthUnit,
    PartsConfig,
    ValidationError,
)


@dataclass
class CalculationRequest:
    """Input DTO for a BOM calculation.

    Dimensions are in ``unit_of_measure``; board type and finish are free
    strings matched against the rate table, so an unknown one surfaces as
    a rate lookup failure rather than a validation error.
    """

    unit_type: str
    height: float
    width: float
    depth: float
    board_type: str
    board_thickness: str | int = 18
    finish: str = "laminate"
    unit_of_measure: str = LengthUnit.MM.value
    shelves: int = 0
    drawers: int = 0
    shutters: int = 0
    doors: int = 0
    back_panels: int = 0
    custom_parts: list[CustomPart] = field(default_factory=list)
    include_carcass: bool = False
    project_id: int | None = None
    notes: str | None = None

    def thickness(self) -> BoardThickness:
        """Parse the board thickness.

        Raises:
            ValidationError: If the thickness is not a stock size.
        """
        try:
            return BoardThickness.parse(self.board_thickness)
        except (TypeError, ValueError):
            allowed = ", ".join(t.label for t in BoardThickness)
            raise ValidationError(
                f"Unsupported board thickness {self.board_thickness!r}; "
                f"expected one of {allowed}",
                field="board_thickness",
                value=self.board_thickness,
            ) from None

    def parts_config(self) -> PartsConfig:
        """Build the domain parts configuration (validates counts)."""
        return PartsConfig(
            shelves=self.shelves,
            drawers=self.drawers,
            shutters=self.shutters,
            doors=self.doors,
            back_panels=self.back_panels,
            custom_parts=tuple(self.custom_parts),
        )


@dataclass
class HistoryPage:
    """One page of stored calculations."""

    calculations: list = field(default_factory=list)
    page: int = 1
    limit: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return -(-self.total // self.limit)
