"""Console formatters for BOM calculations and rate tables."""

from __future__ import annotations

import json

from furnili.domain.entities import BoardRate, BomCalculation, HardwareRate

from .serialization import calculation_to_dict
from .sheet_optimizer import SheetOptimizer

CURRENCY = "Rs."


class BomReportFormatter:
    """Formats a BomCalculation as human-readable text or JSON."""

    def __init__(self, optimizer: SheetOptimizer | None = None) -> None:
        self.optimizer = optimizer or SheetOptimizer()

    def format(self, calculation: BomCalculation, output_format: str = "text") -> str:
        if output_format == "json":
            return self.format_json(calculation)
        return self.format_text(calculation)

    def format_text(self, calculation: BomCalculation) -> str:
        """Format as a text report: header, boards, hardware, summary."""
        d = calculation.dimensions
        lines: list[str] = []
        lines.append("=" * 70)
        title = "BILL OF MATERIALS"
        if calculation.number:
            title = f"{title} {calculation.number}"
        lines.append(f"{title} [{calculation.status.value}]")
        lines.append("=" * 70)
        lines.append(
            f"Unit: {calculation.unit_type}  "
            f"{d.height:.0f} H x {d.width:.0f} W x {d.depth:.0f} D mm"
        )
        lines.append(
            f"Board: {calculation.board_type} {calculation.board_thickness.label} "
            f"{calculation.finish}"
        )
        lines.append("")

        lines.append("BOARD PARTS")
        lines.append("-" * 70)
        if calculation.board_items:
            lines.append(
                f"  {'Part':<20} {'Size (mm)':<18} {'Qty':>4} {'Band':>6} "
                f"{'Rate':>9} {'Total':>9}"
            )
            for item in calculation.board_items:
                if item.length is not None and item.width is not None:
                    size = f"{item.length:.0f} x {item.width:.0f}"
                else:
                    size = "-"
                band = item.edge_banding_type.value if item.edge_banding_type else "-"
                lines.append(
                    f"  {item.part_name:<20} {size:<18} {item.quantity:>4} {band:>6} "
                    f"{item.unit_rate:>9.2f} {item.total_cost:>9.2f}"
                )
        else:
            lines.append("  (No board parts)")
        lines.append("")

        lines.append("HARDWARE")
        lines.append("-" * 70)
        if calculation.hardware_items:
            for item in calculation.hardware_items:
                lines.append(
                    f"  {item.part_name:<20} {item.quantity:>4} {item.unit:<7} "
                    f"@ {item.unit_rate:>7.2f} = {item.total_cost:>9.2f}"
                )
        else:
            lines.append("  (No hardware)")
        lines.append("")

        banding = calculation.total_edge_banding
        lines.append("=" * 70)
        lines.append("SUMMARY")
        lines.append("-" * 70)
        lines.append(f"  Board area:          {calculation.total_board_area:>10.2f} sq ft")
        for label, area in sorted(calculation.board_area_by_thickness.items()):
            lines.append(f"    {label:<18} {area:>10.2f} sq ft")
        lines.append(f"  Edge banding 2mm:    {banding.banding_2mm:>10.2f} ft")
        lines.append(f"  Edge banding 0.8mm:  {banding.banding_08mm:>10.2f} ft")
        lines.append(
            f"  Material cost:       {CURRENCY} {calculation.total_material_cost:>10.2f}"
        )
        lines.append(
            f"  Hardware cost:       {CURRENCY} {calculation.total_hardware_cost:>10.2f}"
        )
        lines.append("-" * 70)
        lines.append(f"  TOTAL:               {CURRENCY} {calculation.total_cost:>10.2f}")
        lines.append("")

        plan = self.optimizer.plan(calculation)
        sheet = self.optimizer.sheet
        lines.append(f"SHEETS ({sheet.length:.0f} x {sheet.width:.0f} mm)")
        lines.append("-" * 70)
        lines.append(f"  Sheets needed:       {plan.total_sheets:>10}")
        for label, count in sorted(plan.sheets_by_thickness.items()):
            lines.append(f"    {label:<18} {count:>10}")
        lines.append(f"  Utilization:         {plan.utilization * 100:>9.1f}%")
        lines.append(f"  Waste:               {plan.waste_area / 1e6:>10.2f} sq m")
        for piece in plan.unplaced:
            lines.append(f"  ! {piece.label} is larger than a sheet")
        lines.append("")
        return "\n".join(lines)

    def format_json(self, calculation: BomCalculation) -> str:
        return json.dumps(calculation_to_dict(calculation), indent=2)


class RateTableFormatter:
    """Formats reference rate tables for display."""

    def format_board_rates(self, rates: list[BoardRate]) -> str:
        if not rates:
            return "No board rates configured."
        lines = [
            "BOARD RATES",
            "=" * 60,
            f"{'Board':<24} {'Thickness':>9} {'Finish':<12} {'Rate/sqft':>10}",
            "-" * 60,
        ]
        for rate in rates:
            lines.append(
                f"{rate.board_type:<24} {rate.thickness.label:>9} "
                f"{rate.finish:<12} {rate.rate_per_sqft:>10.2f}"
            )
        return "\n".join(lines)

    def format_hardware_rates(self, rates: list[HardwareRate]) -> str:
        if not rates:
            return "No hardware rates configured."
        lines = [
            "HARDWARE RATES",
            "=" * 60,
            f"{'Item':<20} {'Category':<12} {'Unit':<8} {'Rate':>10}",
            "-" * 60,
        ]
        for rate in rates:
            lines.append(
                f"{rate.item_name:<20} {rate.category:<12} {rate.unit:<8} "
                f"{rate.current_rate:>10.2f}"
            )
        return "\n".join(lines)
