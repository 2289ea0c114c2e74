"""Application commands (use cases) for BOM calculation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from furnili.domain import BomCalculation, BomCalculator, LengthUnit
from furnili.domain.services import normalize_dimensions, parse_unit

from .dtos import CalculationRequest, HistoryPage

if TYPE_CHECKING:
    from furnili.contracts.protocols import BomRepository, RateProvider


logger = logging.getLogger(__name__)


class CalculateBomCommand:
    """Command to calculate, number and store a draft BOM.

    Validation happens before any computation. The calculation is numbered
    and saved only after it has been fully priced, so a failure at any
    step leaves the repository untouched.
    """

    def __init__(
        self,
        rates: "RateProvider",
        repository: "BomRepository",
        number_generator: Callable[[int], str],
        calculator: BomCalculator | None = None,
    ) -> None:
        self.repository = repository
        self.number_generator = number_generator
        self.calculator = calculator or BomCalculator(rates)

    def execute(self, request: CalculationRequest) -> BomCalculation:
        """Execute the calculation command.

        Args:
            request: Calculation input.

        Returns:
            The stored draft BomCalculation with its number assigned.

        Raises:
            ValidationError: For invalid dimensions, counts, units or thickness.
            RateLookupError: If any board or hardware rate is missing.
        """
        unit = parse_unit(request.unit_of_measure)
        dimensions = normalize_dimensions(
            request.height, request.width, request.depth, unit
        )
        thickness = request.thickness()
        config = request.parts_config()

        calculation = self.calculator.calculate(
            unit_type=request.unit_type.strip().lower(),
            dimensions=dimensions,
            board_type=request.board_type.strip().lower(),
            thickness=thickness,
            finish=request.finish.strip().lower(),
            config=config,
            include_carcass=request.include_carcass,
            unit_of_measure=LengthUnit(unit),
            project_id=request.project_id,
            notes=request.notes,
        )

        number = self.number_generator(self.repository.next_sequence())
        saved = self.repository.save(calculation.with_number(number))
        logger.info(
            f"Saved draft {number}: {len(saved.items)} items, "
            f"total {saved.total_cost:.2f}"
        )
        return saved


class FinalizeBomCommand:
    """Command to move a stored calculation from draft to final."""

    def __init__(self, repository: "BomRepository") -> None:
        self.repository = repository

    def execute(self, number: str) -> BomCalculation:
        """Finalize a calculation.

        Raises:
            CalculationNotFoundError: If the number is unknown.
            StatusTransitionError: If the calculation is already final.
        """
        finalized = self.repository.get(number).finalize()
        self.repository.save(finalized)
        logger.info(f"Finalized {number}")
        return finalized


class BomHistoryQuery:
    """Paginated listing of stored calculations, newest first."""

    def __init__(self, repository: "BomRepository") -> None:
        self.repository = repository

    def execute(self, page: int = 1, limit: int = 10) -> HistoryPage:
        calculations, total = self.repository.list(page=page, limit=limit)
        return HistoryPage(
            calculations=calculations, page=page, limit=limit, total=total
        )
