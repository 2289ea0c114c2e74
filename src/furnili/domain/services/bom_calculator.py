"""BomCalculator facade service.

This module provides the BomCalculator class as a facade that runs the
bill-of-materials pipeline:

    parts expansion -> edge banding -> board pricing -> hardware pricing

over dimensions that are already in millimetres. It performs no storage;
the result is an unnumbered draft BomCalculation. Hardware includes glue
for the total edge banding of the parts.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from furnili.domain.entities import BomCalculation
from furnili.domain.value_objects import (
    BoardThickness,
    Dimensions,
    EdgeBanding,
    LengthUnit,
    PartsConfig,
    UnitType,
)

from .edge_banding import EdgeBandingEstimator
from .hardware_rules import HardwareCalculator
from .parts_expander import PartsExpander, resolve_profile
from .pricer import Pricer

if TYPE_CHECKING:
    from furnili.contracts.protocols import RateProvider


logger = logging.getLogger(__name__)


class BomCalculator:
    """Computes a priced bill of materials for one furniture unit.

    The computation is all-or-nothing: a missing board or hardware rate
    raises ``RateLookupError`` and no partial result is returned.

    Example:
        >>> from furnili.infrastructure.rates import StaticRateProvider
        >>> calculator = BomCalculator(StaticRateProvider.defaults())
        >>> bom = calculator.calculate(
        ...     "wardrobe",
        ...     Dimensions(height=2400, width=1200, depth=600),
        ...     "mdf",
        ...     BoardThickness.MM_18,
        ...     "laminate",
        ...     PartsConfig(shutters=2, shelves=3),
        ... )
        >>> round(bom.total_cost, 2)  # doctest: +SKIP
    """

    def __init__(
        self,
        rates: "RateProvider",
        expander: PartsExpander | None = None,
        banding_estimator: EdgeBandingEstimator | None = None,
        hardware_calculator: HardwareCalculator | None = None,
    ) -> None:
        self.rates = rates
        self.expander = expander or PartsExpander()
        self.banding_estimator = banding_estimator or EdgeBandingEstimator()
        self.hardware_calculator = hardware_calculator or HardwareCalculator()
        self.pricer = Pricer(rates, self.banding_estimator)

    def calculate(
        self,
        unit_type: str | UnitType,
        dimensions: Dimensions,
        board_type: str,
        thickness: BoardThickness,
        finish: str,
        config: PartsConfig,
        include_carcass: bool = False,
        unit_of_measure: LengthUnit = LengthUnit.MM,
        project_id: int | None = None,
        notes: str | None = None,
    ) -> BomCalculation:
        """Run the full pipeline.

        Args:
            unit_type: Furniture unit type; unknown names use generic rules.
            dimensions: Overall dimensions in millimetres.
            board_type: Board material key, e.g. "mdf".
            thickness: Board thickness.
            finish: Finish key, e.g. "laminate".
            config: Part counts and custom parts.
            include_carcass: Also emit top, bottom and side panels.
            unit_of_measure: Unit the caller originally used (recorded only).
            project_id: Optional project the calculation belongs to.
            notes: Optional free-text notes.

        Returns:
            Draft BomCalculation without a number.

        Raises:
            ValidationError: If the dimensions cannot fit a requested part.
            RateLookupError: If any needed rate is missing.
        """
        unit_name = unit_type.value if isinstance(unit_type, UnitType) else unit_type

        parts = self.expander.expand(unit_type, dimensions, config, include_carcass)
        profile = resolve_profile(unit_type)
        banding = EdgeBanding()
        for part in parts:
            banding = banding + self.banding_estimator.estimate(part)
        requirements = self.hardware_calculator.calculate(
            dimensions, config, profile, banding
        )

        board_items = self.pricer.price_boards(parts, board_type, thickness, finish)
        hardware_items = self.pricer.price_hardware(requirements)

        calculation = BomCalculation(
            unit_type=unit_name,
            dimensions=dimensions,
            board_type=board_type,
            board_thickness=thickness,
            finish=finish,
            parts_config=config,
            items=tuple(board_items + hardware_items),
            unit_of_measure=unit_of_measure,
            project_id=project_id,
            notes=notes,
        )
        logger.debug(
            f"Calculated {unit_name}: {len(board_items)} board rows, "
            f"{len(hardware_items)} hardware rows, total {calculation.total_cost:.2f}"
        )
        return calculation
