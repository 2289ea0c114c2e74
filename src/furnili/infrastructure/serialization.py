"""Conversion of BOM calculations to and from plain dictionaries.

The dictionary form is used for JSON output and for the file-backed
repository. Derived totals are written for readers but recomputed from
the items on load.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from furnili.domain.entities import BomCalculation, BomItem
from furnili.domain.value_objects import (
    BoardThickness,
    BomStatus,
    CustomPart,
    Dimensions,
    EdgeBanding,
    ItemType,
    LengthUnit,
    PartKind,
    PartsConfig,
)

from .sheet_optimizer import SheetOptimizer, SheetPlan


def item_to_dict(item: BomItem) -> dict[str, Any]:
    banding_type = item.edge_banding_type
    return {
        "item_type": item.item_type.value,
        "category": item.category,
        "part_name": item.part_name,
        "part_kind": item.part_kind.value if item.part_kind else None,
        "material_type": item.material_type,
        "length": item.length,
        "width": item.width,
        "thickness": item.thickness,
        "quantity": item.quantity,
        "unit": item.unit,
        "edge_banding_type": banding_type.value if banding_type else None,
        "edge_banding_2mm": item.edge_banding.banding_2mm,
        "edge_banding_08mm": item.edge_banding.banding_08mm,
        "edge_banding_length": item.edge_banding_length,
        "unit_rate": item.unit_rate,
        "total_cost": item.total_cost,
    }


def item_from_dict(data: dict[str, Any]) -> BomItem:
    part_kind = data.get("part_kind")
    return BomItem(
        item_type=ItemType(data["item_type"]),
        category=data["category"],
        part_name=data["part_name"],
        quantity=int(data["quantity"]),
        unit_rate=float(data["unit_rate"]),
        unit=data.get("unit", "pieces"),
        part_kind=PartKind(part_kind) if part_kind else None,
        material_type=data.get("material_type"),
        length=data.get("length"),
        width=data.get("width"),
        thickness=data.get("thickness"),
        edge_banding=EdgeBanding(
            banding_2mm=float(data.get("edge_banding_2mm", 0.0)),
            banding_08mm=float(data.get("edge_banding_08mm", 0.0)),
        ),
    )


def parts_config_to_dict(config: PartsConfig) -> dict[str, Any]:
    return {
        "shelves": config.shelves,
        "drawers": config.drawers,
        "shutters": config.shutters,
        "doors": config.doors,
        "back_panels": config.back_panels,
        "custom_parts": [
            {
                "name": part.name,
                "quantity": part.quantity,
                "length": part.length,
                "width": part.width,
            }
            for part in config.custom_parts
        ],
    }


def parts_config_from_dict(data: dict[str, Any]) -> PartsConfig:
    return PartsConfig(
        shelves=data.get("shelves", 0),
        drawers=data.get("drawers", 0),
        shutters=data.get("shutters", 0),
        doors=data.get("doors", 0),
        back_panels=data.get("back_panels", 0),
        custom_parts=tuple(
            CustomPart(
                name=part["name"],
                quantity=part.get("quantity", 1),
                length=part.get("length"),
                width=part.get("width"),
            )
            for part in data.get("custom_parts", [])
        ),
    )


def sheet_plan_to_dict(plan: SheetPlan) -> dict[str, Any]:
    return {
        "total_sheets": plan.total_sheets,
        "sheets_by_thickness": plan.sheets_by_thickness,
        "utilization": plan.utilization,
        "waste_area": plan.waste_area,
        "unplaced_parts": [piece.label for piece in plan.unplaced],
        "sheets": [
            {
                "index": layout.index,
                "thickness": layout.thickness,
                "pieces": len(layout.placements),
                "utilization": layout.utilization,
                "waste_area": layout.waste_area,
            }
            for layout in plan.layouts
        ],
    }


def calculation_to_dict(calculation: BomCalculation) -> dict[str, Any]:
    """Full dictionary form of a calculation, summary totals included."""
    banding = calculation.total_edge_banding
    return {
        "number": calculation.number,
        "status": calculation.status.value,
        "unit_type": calculation.unit_type,
        "height": calculation.dimensions.height,
        "width": calculation.dimensions.width,
        "depth": calculation.dimensions.depth,
        "unit_of_measure": calculation.unit_of_measure.value,
        "board_type": calculation.board_type,
        "board_thickness": int(calculation.board_thickness),
        "finish": calculation.finish,
        "parts_config": parts_config_to_dict(calculation.parts_config),
        "project_id": calculation.project_id,
        "notes": calculation.notes,
        "created_at": calculation.created_at.isoformat(),
        "summary": {
            "total_board_area": calculation.total_board_area,
            "board_area_by_thickness": calculation.board_area_by_thickness,
            "total_edge_banding_2mm": banding.banding_2mm,
            "total_edge_banding_08mm": banding.banding_08mm,
            "total_material_cost": calculation.total_material_cost,
            "total_hardware_cost": calculation.total_hardware_cost,
            "total_cost": calculation.total_cost,
            "sheet_plan": sheet_plan_to_dict(SheetOptimizer().plan(calculation)),
        },
        "items": [item_to_dict(item) for item in calculation.items],
    }


def calculation_from_dict(data: dict[str, Any]) -> BomCalculation:
    """Rebuild a calculation written by ``calculation_to_dict``."""
    return BomCalculation(
        unit_type=data["unit_type"],
        dimensions=Dimensions(
            height=float(data["height"]),
            width=float(data["width"]),
            depth=float(data["depth"]),
        ),
        board_type=data["board_type"],
        board_thickness=BoardThickness(int(data["board_thickness"])),
        finish=data["finish"],
        parts_config=parts_config_from_dict(data.get("parts_config", {})),
        items=tuple(item_from_dict(item) for item in data.get("items", [])),
        unit_of_measure=LengthUnit(data.get("unit_of_measure", "mm")),
        number=data.get("number"),
        status=BomStatus(data.get("status", "draft")),
        project_id=data.get("project_id"),
        notes=data.get("notes"),
        created_at=datetime.fromisoformat(data["created_at"]),
    )
