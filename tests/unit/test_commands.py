"""Unit tests for application commands and the service factory.

These tests verify:
- CalculateBomCommand validates, numbers and stores drafts
- Failures store nothing
- FinalizeBomCommand status transitions
- BomHistoryQuery pagination
- ServiceFactory wiring
"""

import json
from pathlib import Path

import pytest

from furnili.application import (
    BomHistoryQuery,
    CalculateBomCommand,
    CalculationRequest,
    FinalizeBomCommand,
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from furnili.application.config import ConfigError
from furnili.domain import (
    BomStatus,
    CalculationNotFoundError,
    CustomPart,
    LengthUnit,
    RateLookupError,
    StatusTransitionError,
    ValidationError,
)
from furnili.infrastructure import (
    CalculationNumberGenerator,
    InMemoryBomRepository,
    JsonFileBomRepository,
    StaticRateProvider,
)


def wardrobe_request(**overrides) -> CalculationRequest:
    values = dict(
        unit_type="wardrobe",
        height=2400,
        width=1200,
        depth=600,
        board_type="mdf",
        board_thickness="18mm",
        finish="laminate",
        shutters=2,
        shelves=3,
        drawers=2,
        doors=0,
        back_panels=1,
    )
    values.update(overrides)
    return CalculationRequest(**values)


class TestCalculationRequest:
    @pytest.mark.parametrize("value", [18, "18", "18mm"])
    def test_thickness(self, value) -> None:
        assert int(wardrobe_request(board_thickness=value).thickness()) == 18

    def test_bad_thickness(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            wardrobe_request(board_thickness="20mm").thickness()
        assert exc_info.value.field == "board_thickness"

    def test_parts_config(self) -> None:
        request = wardrobe_request(custom_parts=[CustomPart("Loft Panel")])
        config = request.parts_config()
        assert config.shelves == 3
        assert config.custom_parts == (CustomPart("Loft Panel"),)


class TestCalculateBomCommand:
    def test_stores_numbered_draft(
        self,
        calculate_command: CalculateBomCommand,
        repository: InMemoryBomRepository,
    ) -> None:
        calc = calculate_command.execute(wardrobe_request())
        assert calc.number == "BOM-20240501-0001"
        assert calc.status is BomStatus.DRAFT
        assert len(calc.board_items) == 8
        assert repository.get(calc.number) == calc

    def test_numbers_increase(self, calculate_command: CalculateBomCommand) -> None:
        first = calculate_command.execute(wardrobe_request())
        second = calculate_command.execute(wardrobe_request())
        assert first.number == "BOM-20240501-0001"
        assert second.number == "BOM-20240501-0002"

    def test_feet_are_converted(self, calculate_command: CalculateBomCommand) -> None:
        calc = calculate_command.execute(
            wardrobe_request(height=8, width=4, depth=2, unit_of_measure="ft")
        )
        assert calc.dimensions.height == pytest.approx(2438.4)
        assert calc.unit_of_measure is LengthUnit.FT

    def test_inputs_are_normalized(self, calculate_command: CalculateBomCommand) -> None:
        calc = calculate_command.execute(
            wardrobe_request(unit_type=" Wardrobe ", board_type="MDF", finish="Laminate")
        )
        assert calc.unit_type == "wardrobe"
        assert calc.board_type == "mdf"
        assert calc.finish == "laminate"

    def test_unknown_board_type_saves_nothing(
        self,
        calculate_command: CalculateBomCommand,
        repository: InMemoryBomRepository,
    ) -> None:
        with pytest.raises(LookupError):
            calculate_command.execute(wardrobe_request(board_type="nonexistent_type"))
        assert repository.count() == 0
        # the failed attempt did not consume a number
        assert repository.next_sequence() == 1

    def test_missing_hardware_rate_saves_nothing(
        self,
        fixture_rates: StaticRateProvider,
        repository: InMemoryBomRepository,
        number_generator: CalculationNumberGenerator,
    ) -> None:
        rates = StaticRateProvider(
            board_rates=fixture_rates.board_rates(),
            hardware_rates=[
                rate
                for rate in fixture_rates.hardware_rates()
                if rate.item_name != "Straightener"
            ],
        )
        command = CalculateBomCommand(rates, repository, number_generator)

        with pytest.raises(RateLookupError) as exc_info:
            command.execute(wardrobe_request())
        assert exc_info.value.table == "hardware"
        assert repository.count() == 0
        assert repository.next_sequence() == 1

    def test_missing_finish_rate(self, calculate_command: CalculateBomCommand) -> None:
        with pytest.raises(RateLookupError):
            calculate_command.execute(wardrobe_request(finish="acrylic"))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"height": 0},
            {"width": -100},
            {"unit_of_measure": "inch"},
            {"shelves": -1},
            {"board_thickness": "7mm"},
        ],
    )
    def test_validation_errors_save_nothing(
        self,
        calculate_command: CalculateBomCommand,
        repository: InMemoryBomRepository,
        overrides: dict,
    ) -> None:
        with pytest.raises(ValidationError):
            calculate_command.execute(wardrobe_request(**overrides))
        assert repository.count() == 0

    def test_unknown_unit_type_is_accepted(
        self, calculate_command: CalculateBomCommand
    ) -> None:
        calc = calculate_command.execute(wardrobe_request(unit_type="bookshelf"))
        assert calc.unit_type == "bookshelf"
        assert len(calc.board_items) == 8


class TestFinalizeBomCommand:
    def test_finalize(
        self,
        calculate_command: CalculateBomCommand,
        repository: InMemoryBomRepository,
    ) -> None:
        calc = calculate_command.execute(wardrobe_request())
        final = FinalizeBomCommand(repository).execute(calc.number)
        assert final.status is BomStatus.FINAL
        assert repository.get(calc.number).status is BomStatus.FINAL

    def test_finalize_twice(
        self,
        calculate_command: CalculateBomCommand,
        repository: InMemoryBomRepository,
    ) -> None:
        calc = calculate_command.execute(wardrobe_request())
        command = FinalizeBomCommand(repository)
        command.execute(calc.number)
        with pytest.raises(StatusTransitionError):
            command.execute(calc.number)

    def test_finalize_unknown(self, repository: InMemoryBomRepository) -> None:
        with pytest.raises(CalculationNotFoundError):
            FinalizeBomCommand(repository).execute("BOM-20240501-0042")


class TestBomHistoryQuery:
    def test_pages(
        self,
        calculate_command: CalculateBomCommand,
        repository: InMemoryBomRepository,
    ) -> None:
        for _ in range(3):
            calculate_command.execute(wardrobe_request())
        page = BomHistoryQuery(repository).execute(page=1, limit=2)
        assert page.total == 3
        assert page.total_pages == 2
        assert [c.number for c in page.calculations] == [
            "BOM-20240501-0003",
            "BOM-20240501-0002",
        ]

    def test_empty(self, repository: InMemoryBomRepository) -> None:
        page = BomHistoryQuery(repository).execute()
        assert page.total == 0
        assert page.total_pages == 0


class TestServiceFactory:
    def test_defaults(self) -> None:
        factory = ServiceFactory()
        assert isinstance(factory.get_repository(), InMemoryBomRepository)
        assert factory.get_rate_provider() is factory.get_rate_provider()

    def test_commands_share_repository(self) -> None:
        factory = ServiceFactory()
        calc = factory.create_calculate_command().execute(wardrobe_request())
        page = factory.create_history_query().execute()
        assert [c.number for c in page.calculations] == [calc.number]

    def test_store_path(self, tmp_path: Path) -> None:
        factory = ServiceFactory(store_path=tmp_path / "history.json")
        assert isinstance(factory.get_repository(), JsonFileBomRepository)

    def test_rates_path(self, tmp_path: Path) -> None:
        path = tmp_path / "rates.json"
        path.write_text(
            json.dumps(
                {
                    "board_rates": [
                        {
                            "board_type": "ply",
                            "thickness": 18,
                            "finish": "veneer",
                            "rate_per_sqft": 200,
                        }
                    ]
                }
            )
        )
        rates = ServiceFactory(rates_path=path).get_rate_provider()
        assert [r.board_type for r in rates.board_rates()] == ["ply"]

    def test_bad_rates_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            ServiceFactory(rates_path=tmp_path / "missing.json").get_rate_provider()

    def test_default_factory(self) -> None:
        custom = ServiceFactory()
        set_factory(custom)
        try:
            assert get_factory() is custom
        finally:
            reset_factory()
        assert get_factory() is not custom
        reset_factory()
