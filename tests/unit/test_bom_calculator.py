"""Unit tests for the BomCalculator pipeline.

These tests verify:
- Cost totals always agree with the items
- The wardrobe reference example
- Missing rates fail the whole calculation
"""

import pytest

from furnili.domain import (
    BoardThickness,
    BomCalculator,
    BomStatus,
    CustomPart,
    Dimensions,
    ItemType,
    PartKind,
    PartsConfig,
)
from furnili.infrastructure import StaticRateProvider

SQFT = 92903.04


@pytest.fixture
def calculator(fixture_rates: StaticRateProvider) -> BomCalculator:
    return BomCalculator(fixture_rates)


def calculate(calculator: BomCalculator, dims: Dimensions, config: PartsConfig, **kwargs):
    return calculator.calculate(
        kwargs.pop("unit_type", "wardrobe"),
        dims,
        kwargs.pop("board_type", "mdf"),
        BoardThickness.MM_18,
        "laminate",
        config,
        **kwargs,
    )


class TestWardrobeExample:
    """2400 x 1200 x 600 wardrobe, 18mm MDF laminate."""

    def test_eight_board_parts(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        bom = calculate(calculator, wardrobe_dimensions, wardrobe_config)
        assert len(bom.board_items) == 8
        assert len(bom.parts_of_kind(PartKind.SHUTTER)) == 2
        assert len(bom.parts_of_kind(PartKind.SHELF)) == 3
        assert len(bom.parts_of_kind(PartKind.DRAWER)) == 2
        assert len(bom.parts_of_kind(PartKind.BACK_PANEL)) == 1
        assert len(bom.parts_of_kind(PartKind.DOOR)) == 0

    def test_board_area_is_sum_of_parts(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        bom = calculate(calculator, wardrobe_dimensions, wardrobe_config)
        expected_mm2 = (
            2 * 2400 * 600  # shutters
            + 2 * 1164 * 300  # drawer fronts
            + 3 * 1164 * 582  # shelves
            + 1200 * 2400  # back panel
        )
        assert bom.total_board_area == pytest.approx(expected_mm2 / SQFT)
        assert bom.total_board_area == pytest.approx(
            sum(i.area_sqft for i in bom.board_items)
        )

    def test_hardware_cost(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        bom = calculate(calculator, wardrobe_dimensions, wardrobe_config)
        # hinges 8x30, locks 2x80, handles 4x25, slides 2 pairs x240,
        # minifix 30x10, dowels 50x2, glue 36m x3, straighteners 2x150
        assert bom.total_hardware_cost == pytest.approx(1788.0)

    def test_drawer_slides_cost_two_slides_per_drawer(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
    ) -> None:
        bom = calculate(calculator, wardrobe_dimensions, PartsConfig(drawers=2))
        (slides,) = [i for i in bom.hardware_items if i.part_name == "Drawer Slide"]
        assert slides.quantity == 2
        assert slides.unit == "pairs"
        assert slides.total_cost == pytest.approx(480.0)

    def test_edge_banding_glue(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        bom = calculate(calculator, wardrobe_dimensions, wardrobe_config)
        (glue,) = [i for i in bom.hardware_items if i.part_name == "Edge Banding Glue"]
        # 35.532 m of banding, rounded up to whole metres
        assert glue.quantity == 36
        assert glue.unit == "meters"
        assert glue.unit_rate == 3.0

    def test_area_by_thickness(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        bom = calculate(calculator, wardrobe_dimensions, wardrobe_config)
        assert list(bom.board_area_by_thickness) == ["18mm"]
        assert bom.board_area_by_thickness["18mm"] == pytest.approx(
            bom.total_board_area
        )

    def test_result_is_unnumbered_draft(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        bom = calculate(calculator, wardrobe_dimensions, wardrobe_config)
        assert bom.number is None
        assert bom.status is BomStatus.DRAFT

    def test_board_rows_precede_hardware(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        bom = calculate(calculator, wardrobe_dimensions, wardrobe_config)
        types = [item.item_type for item in bom.items]
        first_hardware = types.index(ItemType.HARDWARE)
        assert all(t is ItemType.BOARD for t in types[:first_hardware])
        assert all(t is ItemType.HARDWARE for t in types[first_hardware:])

    def test_nonexistent_board_type(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        with pytest.raises(LookupError):
            calculate(
                calculator,
                wardrobe_dimensions,
                wardrobe_config,
                board_type="nonexistent_type",
            )


class TestTotals:
    """Totals agree with the items for any configuration."""

    @pytest.mark.parametrize(
        "config",
        [
            PartsConfig(),
            PartsConfig(shelves=5),
            PartsConfig(shutters=3, doors=1, drawers=4, back_panels=2),
            PartsConfig(
                shelves=2,
                custom_parts=(
                    CustomPart("Loft Panel", 2, 900, 450),
                    CustomPart("Skirting"),
                ),
            ),
        ],
    )
    @pytest.mark.parametrize("include_carcass", [False, True])
    def test_total_cost_invariant(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        config: PartsConfig,
        include_carcass: bool,
    ) -> None:
        bom = calculate(
            calculator, wardrobe_dimensions, config, include_carcass=include_carcass
        )
        assert bom.total_cost == pytest.approx(
            bom.total_material_cost + bom.total_hardware_cost
        )
        assert bom.total_cost == pytest.approx(sum(i.total_cost for i in bom.items))
        for item in bom.items:
            assert item.total_cost == pytest.approx(item.unit_rate * item.quantity)

    def test_carcass_adds_four_parts(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
        wardrobe_config: PartsConfig,
    ) -> None:
        without = calculate(calculator, wardrobe_dimensions, wardrobe_config)
        with_carcass = calculate(
            calculator, wardrobe_dimensions, wardrobe_config, include_carcass=True
        )
        assert len(with_carcass.board_items) == len(without.board_items) + 4
        assert with_carcass.total_material_cost > without.total_material_cost

    def test_metadata_is_recorded(
        self,
        calculator: BomCalculator,
        wardrobe_dimensions: Dimensions,
    ) -> None:
        bom = calculate(
            calculator,
            wardrobe_dimensions,
            PartsConfig(shelves=1),
            unit_type="tv_panel",
            project_id=42,
            notes="Living room",
        )
        assert bom.unit_type == "tv_panel"
        assert bom.project_id == 42
        assert bom.notes == "Living room"
        assert [i.part_name for i in bom.hardware_items][-1] == "Wall Bracket"
