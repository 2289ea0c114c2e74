"""Unit tests for board and hardware pricing."""

import pytest

from furnili.domain import (
    BoardPart,
    BoardThickness,
    ItemType,
    PartCategory,
    PartKind,
    Pricer,
    RateLookupError,
)
from furnili.domain.services import HardwareRequirement, material_label
from furnili.infrastructure import StaticRateProvider

SQFT = 92903.04
FT = 304.8


@pytest.fixture
def pricer(fixture_rates: StaticRateProvider) -> Pricer:
    return Pricer(fixture_rates)


def shutter(quantity: int = 1) -> BoardPart:
    return BoardPart(
        name="Shutter",
        kind=PartKind.SHUTTER,
        category=PartCategory.SHUTTER,
        length=2400,
        width=600,
        quantity=quantity,
    )


class TestMaterialLabel:
    def test_label(self) -> None:
        assert material_label("mdf", BoardThickness.MM_18) == "18mm MDF"
        assert material_label("solid_wood", BoardThickness.MM_25) == "25mm SOLID WOOD"


class TestPriceBoards:
    def test_piece_cost_includes_banding(self, pricer: Pricer) -> None:
        (item,) = pricer.price_boards([shutter()], "mdf", BoardThickness.MM_18, "laminate")
        expected = (2400 * 600) / SQFT * 120.0 + (6000 / FT) * 4.0
        assert item.unit_rate == pytest.approx(expected)
        assert item.total_cost == pytest.approx(expected)

    def test_board_row_fields(self, pricer: Pricer) -> None:
        (item,) = pricer.price_boards([shutter()], "mdf", BoardThickness.MM_18, "laminate")
        assert item.item_type is ItemType.BOARD
        assert item.category == "shutter"
        assert item.part_kind is PartKind.SHUTTER
        assert item.material_type == "18mm MDF"
        assert item.thickness == 18.0
        assert (item.length, item.width) == (2400, 600)

    def test_quantity_multiplies_cost_and_banding(self, pricer: Pricer) -> None:
        (single,) = pricer.price_boards([shutter()], "mdf", BoardThickness.MM_18, "laminate")
        (triple,) = pricer.price_boards(
            [shutter(quantity=3)], "mdf", BoardThickness.MM_18, "laminate"
        )
        assert triple.unit_rate == pytest.approx(single.unit_rate)
        assert triple.total_cost == pytest.approx(single.total_cost * 3)
        assert triple.edge_banding.banding_2mm == pytest.approx(
            single.edge_banding.banding_2mm * 3
        )

    def test_dimensionless_part_costs_nothing(self, pricer: Pricer) -> None:
        part = BoardPart("Skirting", PartKind.CUSTOM, PartCategory.CUSTOM, None, None, 2)
        (item,) = pricer.price_boards([part], "mdf", BoardThickness.MM_18, "laminate")
        assert item.total_cost == 0.0
        assert item.quantity == 2

    def test_unknown_board_type(self, pricer: Pricer) -> None:
        with pytest.raises(RateLookupError) as exc_info:
            pricer.price_boards([shutter()], "nonexistent_type", BoardThickness.MM_18, "laminate")
        assert exc_info.value.table == "board"

    def test_unknown_board_fails_even_without_parts(self, pricer: Pricer) -> None:
        with pytest.raises(LookupError):
            pricer.price_boards([], "mdf", BoardThickness.MM_12, "laminate")


class TestPriceHardware:
    def test_hardware_row(self, pricer: Pricer) -> None:
        (item,) = pricer.price_hardware([HardwareRequirement("Hinge", 8)])
        assert item.item_type is ItemType.HARDWARE
        assert item.category == "hinges"
        assert item.unit_rate == 30.0
        assert item.total_cost == 240.0
        assert item.part_kind is None

    def test_unit_comes_from_requirement(self, pricer: Pricer) -> None:
        (item,) = pricer.price_hardware(
            [HardwareRequirement("Drawer Slide", 2, unit="pairs")]
        )
        assert item.unit == "pairs"

    def test_missing_hardware_rate(self) -> None:
        rates = StaticRateProvider(board_rates=[], hardware_rates=[])
        with pytest.raises(RateLookupError) as exc_info:
            Pricer(rates).price_hardware([HardwareRequirement("Hinge", 1)])
        assert exc_info.value.key == ("Hinge",)
