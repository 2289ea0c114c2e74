"""Sheet optimization for the board parts of a calculation.

Board parts are packed onto standard 2440 x 1220 mm sheets with a shelf
based guillotine packer: pieces are placed left to right on horizontal
shelves, and every cut runs edge to edge so the plan can be cut on a panel
saw. Parts of different thickness never share a sheet.

All dataclasses are frozen and all measurements are in millimetres.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

from furnili.domain.entities import BomCalculation, BomItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetConfig:
    """Stock sheet size and cutting allowances.

    Attributes:
        length: Sheet length in mm (default 2440, 8 ft).
        width: Sheet width in mm (default 1220, 4 ft).
        margin: Unusable material at each sheet edge in mm.
        kerf: Saw blade kerf in mm, lost between adjacent pieces.
    """

    length: float = 2440.0
    width: float = 1220.0
    margin: float = 5.0
    kerf: float = 3.0

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Sheet dimensions must be positive")
        if self.margin < 0 or self.kerf < 0:
            raise ValueError("Margin and kerf must be non-negative")
        if self.usable_length <= 0 or self.usable_width <= 0:
            raise ValueError("Margin leaves no usable area on the sheet")

    @property
    def usable_length(self) -> float:
        return self.length - 2 * self.margin

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def area(self) -> float:
        """Full sheet area in square mm."""
        return self.length * self.width


@dataclass(frozen=True)
class CutPiece:
    """One physical piece to cut."""

    label: str
    length: float
    width: float
    thickness: float

    @property
    def area(self) -> float:
        return self.length * self.width


@dataclass(frozen=True)
class PlacedPiece:
    """A piece placed on a sheet.

    ``x`` runs along the sheet length and ``y`` along its width, both from
    the corner of the usable area.
    """

    piece: CutPiece
    x: float
    y: float
    rotated: bool = False

    @property
    def placed_length(self) -> float:
        return self.piece.width if self.rotated else self.piece.length

    @property
    def placed_width(self) -> float:
        return self.piece.length if self.rotated else self.piece.width


@dataclass(frozen=True)
class SheetLayout:
    """Pieces placed on one sheet."""

    index: int
    thickness: float
    sheet: SheetConfig
    placements: tuple[PlacedPiece, ...]

    @property
    def used_area(self) -> float:
        return sum(p.piece.area for p in self.placements)

    @property
    def waste_area(self) -> float:
        return self.sheet.area - self.used_area

    @property
    def utilization(self) -> float:
        """Share of the full sheet covered by pieces, 0 to 1."""
        return self.used_area / self.sheet.area


@dataclass(frozen=True)
class SheetPlan:
    """Result of packing a calculation's board parts.

    Attributes:
        layouts: One layout per sheet, grouped by thickness.
        unplaced: Pieces larger than a sheet in both orientations.
    """

    layouts: tuple[SheetLayout, ...] = ()
    unplaced: tuple[CutPiece, ...] = ()

    @property
    def total_sheets(self) -> int:
        return len(self.layouts)

    @property
    def used_area(self) -> float:
        return sum(layout.used_area for layout in self.layouts)

    @property
    def waste_area(self) -> float:
        """Offcut area across all sheets in square mm."""
        return sum(layout.waste_area for layout in self.layouts)

    @property
    def utilization(self) -> float:
        """Overall share of sheet area used, 0 when no sheets are needed."""
        total = sum(layout.sheet.area for layout in self.layouts)
        if total == 0:
            return 0.0
        return self.used_area / total

    @property
    def sheets_by_thickness(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for layout in self.layouts:
            label = f"{layout.thickness:g}mm"
            counts[label] = counts.get(label, 0) + 1
        return counts


@dataclass
class _Shelf:
    y: float
    height: float
    remaining: float
    pieces: list[PlacedPiece] = field(default_factory=list)


@dataclass
class _OpenSheet:
    shelves: list[_Shelf] = field(default_factory=list)
    next_y: float = 0.0


class SheetOptimizer:
    """Packs board parts onto stock sheets.

    Uses first-fit decreasing: pieces are sorted by area, largest first,
    and each goes onto the existing shelf it fills best. Failing that it
    opens a new shelf on a sheet with room left, and failing that a new
    sheet. Pieces may be rotated by 90 degrees.
    """

    def __init__(self, sheet: SheetConfig | None = None) -> None:
        self.sheet = sheet or SheetConfig()

    def plan(self, calculation: BomCalculation) -> SheetPlan:
        """Sheet plan for the board rows of ``calculation``."""
        return self.optimize(calculation.board_items)

    def optimize(self, items: Sequence[BomItem]) -> SheetPlan:
        """Pack board rows; rows without dimensions are skipped."""
        by_thickness: dict[float, list[CutPiece]] = defaultdict(list)
        for piece in self._expand(items):
            by_thickness[piece.thickness].append(piece)

        layouts: list[SheetLayout] = []
        unplaced: list[CutPiece] = []
        for thickness in sorted(by_thickness):
            sheets, rejected = self._pack(by_thickness[thickness])
            for sheet in sheets:
                placements = tuple(p for shelf in sheet.shelves for p in shelf.pieces)
                layouts.append(
                    SheetLayout(len(layouts), thickness, self.sheet, placements)
                )
            unplaced.extend(rejected)

        plan = SheetPlan(layouts=tuple(layouts), unplaced=tuple(unplaced))
        logger.debug(
            f"Sheet plan: {plan.total_sheets} sheets, "
            f"{plan.utilization * 100:.1f}% utilized, {len(unplaced)} unplaced"
        )
        return plan

    def _expand(self, items: Sequence[BomItem]) -> list[CutPiece]:
        pieces: list[CutPiece] = []
        for item in items:
            if item.length is None or item.width is None:
                continue
            for i in range(item.quantity):
                label = item.part_name if item.quantity == 1 else f"{item.part_name} #{i + 1}"
                pieces.append(
                    CutPiece(label, item.length, item.width, item.thickness or 0.0)
                )
        return pieces

    def _orientations(self, piece: CutPiece) -> list[tuple[bool, float, float]]:
        """Orientations as (rotated, length along sheet, width across sheet)."""
        options = [(False, piece.length, piece.width)]
        if piece.length != piece.width:
            options.append((True, piece.width, piece.length))
        return options

    def _pack(
        self, pieces: list[CutPiece]
    ) -> tuple[list[_OpenSheet], list[CutPiece]]:
        usable_length = self.sheet.usable_length
        usable_width = self.sheet.usable_width
        kerf = self.sheet.kerf

        sheets: list[_OpenSheet] = []
        unplaced: list[CutPiece] = []
        ordered = sorted(
            pieces, key=lambda p: (p.area, max(p.length, p.width)), reverse=True
        )

        for piece in ordered:
            fits = [
                o
                for o in self._orientations(piece)
                if o[1] <= usable_length and o[2] <= usable_width
            ]
            if not fits:
                logger.debug(
                    f"'{piece.label}' ({piece.length:.0f} x {piece.width:.0f} mm) "
                    f"does not fit a {self.sheet.length:.0f} x "
                    f"{self.sheet.width:.0f} mm sheet"
                )
                unplaced.append(piece)
                continue

            # Best existing shelf: least height left above the piece
            best: tuple[float, _Shelf, tuple[bool, float, float]] | None = None
            for sheet in sheets:
                for shelf in sheet.shelves:
                    for option in fits:
                        _, along, across = option
                        if across <= shelf.height and along <= shelf.remaining:
                            slack = shelf.height - across
                            if best is None or slack < best[0]:
                                best = (slack, shelf, option)
            if best is not None:
                _, shelf, option = best
                self._place(piece, shelf, option, usable_length, kerf)
                continue

            # New shelf on an open sheet, lowest profile first
            placed = False
            for sheet in sheets:
                for option in sorted(fits, key=lambda o: o[2]):
                    if sheet.next_y + option[2] <= usable_width:
                        shelf = self._open_shelf(sheet, option, usable_length, kerf)
                        self._place(piece, shelf, option, usable_length, kerf)
                        placed = True
                        break
                if placed:
                    break
            if placed:
                continue

            sheet = _OpenSheet()
            sheets.append(sheet)
            option = min(fits, key=lambda o: o[2])
            shelf = self._open_shelf(sheet, option, usable_length, kerf)
            self._place(piece, shelf, option, usable_length, kerf)

        return sheets, unplaced

    def _open_shelf(
        self,
        sheet: _OpenSheet,
        option: tuple[bool, float, float],
        usable_length: float,
        kerf: float,
    ) -> _Shelf:
        shelf = _Shelf(y=sheet.next_y, height=option[2], remaining=usable_length)
        sheet.shelves.append(shelf)
        sheet.next_y += option[2] + kerf
        return shelf

    def _place(
        self,
        piece: CutPiece,
        shelf: _Shelf,
        option: tuple[bool, float, float],
        usable_length: float,
        kerf: float,
    ) -> None:
        rotated, along, _ = option
        x = usable_length - shelf.remaining
        shelf.pieces.append(PlacedPiece(piece, x=x, y=shelf.y, rotated=rotated))
        shelf.remaining -= along + kerf
