"""Integration tests for the calculate CLI command.

This module tests `furnili calculate` end-to-end using the Typer CliRunner.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from furnili.cli.commands.calculate import parse_custom_part
from furnili.cli.main import app
from furnili.domain import CustomPart, ValidationError

runner = CliRunner()

WARDROBE_ARGS = [
    "calculate",
    "--unit-type", "wardrobe",
    "--height", "2400",
    "--width", "1200",
    "--depth", "600",
    "--board-type", "mdf",
    "--thickness", "18mm",
    "--finish", "laminate",
    "--shutters", "2",
    "--shelves", "3",
    "--drawers", "2",
    "--back-panels", "1",
]


class TestCalculateCommand:
    """Test suite for the 'calculate' command."""

    def test_text_report(self) -> None:
        result = runner.invoke(app, WARDROBE_ARGS)

        assert result.exit_code == 0, result.output
        assert "BILL OF MATERIALS BOM-" in result.output
        assert "Shutter 1" in result.output
        assert "Drawer Front 2" in result.output
        assert "Back Panel" in result.output
        assert "TOTAL:" in result.output

    def test_json_report(self) -> None:
        result = runner.invoke(app, WARDROBE_ARGS + ["--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        board_items = [i for i in data["items"] if i["item_type"] == "board"]
        assert len(board_items) == 8
        assert data["status"] == "draft"
        assert data["summary"]["total_cost"] == pytest.approx(
            sum(i["total_cost"] for i in data["items"])
        )

    def test_feet_input(self) -> None:
        result = runner.invoke(
            app,
            [
                "calculate", "-u", "tv_panel", "-h", "6", "-w", "8", "-d", "1.5",
                "--unit", "ft", "-b", "ply", "--finish", "veneer", "--format", "json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["width"] == pytest.approx(8 * 304.8)
        assert data["unit_of_measure"] == "ft"
        names = [i["part_name"] for i in data["items"]]
        assert "Wall Bracket" in names

    def test_custom_and_carcass(self) -> None:
        result = runner.invoke(
            app,
            WARDROBE_ARGS
            + ["--custom", "Loft Panel:2:900x450", "--custom", "Skirting:1", "--carcass"],
        )

        assert result.exit_code == 0, result.output
        assert "Loft Panel" in result.output
        assert "Skirting" in result.output
        assert "Side Panel 2" in result.output

    def test_unknown_board_type_fails(self) -> None:
        args = list(WARDROBE_ARGS)
        args[args.index("mdf")] = "nonexistent_type"
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "nonexistent_type" in result.output

    def test_invalid_dimension_fails(self) -> None:
        args = list(WARDROBE_ARGS)
        args[args.index("2400")] = "0"
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_thickness_fails(self) -> None:
        args = list(WARDROBE_ARGS)
        args[args.index("18mm")] = "20mm"
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "board thickness" in result.output

    def test_invalid_custom_part_fails(self) -> None:
        result = runner.invoke(app, WARDROBE_ARGS + ["--custom", "Loft Panel"])

        assert result.exit_code == 1
        assert "NAME:QTY" in result.output

    def test_unknown_format_fails(self) -> None:
        result = runner.invoke(app, WARDROBE_ARGS + ["--format", "pdf"])

        assert result.exit_code == 1
        assert "Unknown format: pdf" in result.output

    def test_store_keeps_history(self, tmp_path: Path) -> None:
        store = tmp_path / "history.json"
        first = runner.invoke(app, WARDROBE_ARGS + ["--store", str(store)])
        second = runner.invoke(app, WARDROBE_ARGS + ["--store", str(store)])

        assert first.exit_code == 0, first.output
        assert second.exit_code == 0, second.output
        assert "-0002 [draft]" in second.output
        data = json.loads(store.read_text())
        assert len(data["calculations"]) == 2

    def test_rates_file(self, tmp_path: Path) -> None:
        rates = tmp_path / "rates.json"
        rates.write_text(
            json.dumps(
                {
                    "board_rates": [
                        {
                            "board_type": "mdf",
                            "thickness": "18mm",
                            "finish": "laminate",
                            "rate_per_sqft": 0,
                        }
                    ],
                    "edge_banding": {"2mm": 0, "0.8mm": 0},
                }
            )
        )
        result = runner.invoke(
            app, WARDROBE_ARGS + ["--rates", str(rates), "--format", "json"]
        )

        # hardware rates are missing from the file
        assert result.exit_code == 1
        assert "No hardware rate" in result.output

    def test_missing_rates_file(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, WARDROBE_ARGS + ["--rates", str(tmp_path / "missing.json")]
        )

        assert result.exit_code == 1
        assert "Rate file not found" in result.output

    def test_corrupt_store_file(self, tmp_path: Path) -> None:
        store = tmp_path / "history.json"
        store.write_text("{not json")

        result = runner.invoke(app, WARDROBE_ARGS + ["--store", str(store)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output
        assert "not valid JSON" in result.output
        assert store.read_text() == "{not json"

    def test_store_with_unexpected_layout(self, tmp_path: Path) -> None:
        store = tmp_path / "history.json"
        store.write_text(json.dumps({"sequence": 1, "calculations": [{"number": "x"}]}))

        result = runner.invoke(app, WARDROBE_ARGS + ["--store", str(store)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "unexpected layout" in result.output


class TestParseCustomPart:
    def test_name_and_quantity(self) -> None:
        assert parse_custom_part("Skirting:3") == CustomPart("Skirting", 3)

    def test_with_size(self) -> None:
        assert parse_custom_part("Loft Panel:1:900X450") == CustomPart(
            "Loft Panel", 1, 900.0, 450.0
        )

    @pytest.mark.parametrize(
        "value", ["Skirting", ":2", "Skirting:two", "Loft:1:900", "Loft:1:axb", "a:1:2x3:4"]
    )
    def test_malformed(self, value: str) -> None:
        with pytest.raises(ValidationError):
            parse_custom_part(value)
