"""Unit tests for hardware quantity rules."""

import pytest

from furnili.domain import Dimensions, EdgeBanding, HardwareCalculator, PartsConfig
from furnili.domain.services import UnitProfile, glue_metres, resolve_profile


@pytest.fixture
def calculator() -> HardwareCalculator:
    return HardwareCalculator()


def quantities(requirements) -> dict[str, int]:
    return {r.name: r.quantity for r in requirements}


class TestHardwareCalculator:
    def test_wardrobe(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=2400, width=1200, depth=600)
        config = PartsConfig(shutters=2, shelves=3, drawers=2, back_panels=1)
        result = quantities(calculator.calculate(dims, config, resolve_profile("wardrobe")))
        assert result == {
            "Hinge": 8,
            "Lock": 2,
            "Handle": 4,
            "Drawer Slide": 2,
            "Minifix": 30,
            "Dowel": 50,
            "Straightener": 2,
        }

    def test_short_units_use_three_hinges(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=1200, width=800, depth=400)
        result = quantities(
            calculator.calculate(dims, PartsConfig(doors=2), UnitProfile())
        )
        assert result["Hinge"] == 6

    def test_no_straighteners_at_threshold(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=2100, width=800, depth=400)
        result = quantities(
            calculator.calculate(dims, PartsConfig(shutters=2), UnitProfile())
        )
        assert "Straightener" not in result

    def test_profile_without_locks(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=900, width=800, depth=350)
        result = quantities(
            calculator.calculate(
                dims, PartsConfig(shutters=2), resolve_profile("shoe_rack")
            )
        )
        assert "Lock" not in result

    def test_tv_panel_wall_brackets(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=1800, width=2400, depth=400)
        result = quantities(
            calculator.calculate(dims, PartsConfig(), resolve_profile("tv_panel"))
        )
        assert result["Wall Bracket"] == 4

    def test_empty_config_still_has_carcass_joints(
        self, calculator: HardwareCalculator
    ) -> None:
        dims = Dimensions(height=900, width=600, depth=300)
        result = quantities(calculator.calculate(dims, PartsConfig(), UnitProfile()))
        assert result == {"Minifix": 12, "Dowel": 20}

    def test_drawer_slides_are_pairs(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=900, width=600, depth=300)
        (slides,) = [
            r
            for r in calculator.calculate(dims, PartsConfig(drawers=3), UnitProfile())
            if r.name == "Drawer Slide"
        ]
        assert slides.quantity == 3
        assert slides.unit == "pairs"

    def test_zero_quantities_are_dropped(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=900, width=600, depth=300)
        requirements = calculator.calculate(dims, PartsConfig(), UnitProfile())
        assert all(r.quantity > 0 for r in requirements)

    def test_glue_for_edge_banding(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=900, width=600, depth=300)
        banding = EdgeBanding(banding_2mm=10.0, banding_08mm=5.0)
        (glue,) = [
            r
            for r in calculator.calculate(dims, PartsConfig(), UnitProfile(), banding)
            if r.name == "Edge Banding Glue"
        ]
        # 15 ft is 4.572 m
        assert glue.quantity == 5
        assert glue.unit == "meters"

    def test_no_glue_without_banding(self, calculator: HardwareCalculator) -> None:
        dims = Dimensions(height=900, width=600, depth=300)
        result = quantities(
            calculator.calculate(dims, PartsConfig(), UnitProfile(), EdgeBanding())
        )
        assert "Edge Banding Glue" not in result


class TestGlueMetres:
    @pytest.mark.parametrize(
        "feet, metres",
        [(0.0, 0), (1.0, 1), (3.28, 1), (3.281, 2), (100 / 0.3048, 100)],
    )
    def test_rounds_up_to_whole_metres(self, feet: float, metres: int) -> None:
        assert glue_metres(EdgeBanding(banding_2mm=feet)) == metres
