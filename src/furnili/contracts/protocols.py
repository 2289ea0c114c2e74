"""Service protocols for dependency injection.

This module defines the read-only reference-data and persistence contracts
the BOM calculator depends on. Infrastructure implementations satisfy these
protocols, and tests can substitute fixed fixture tables.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from furnili.domain.entities import BoardRate, BomCalculation, HardwareRate
    from furnili.domain.value_objects import BoardThickness, EdgeBandingType


@runtime_checkable
class RateProvider(Protocol):
    """Read-only lookup of reference rates.

    Lookups raise ``RateLookupError`` (a ``LookupError``) when no active
    row matches; implementations never fall back to a default price.

    Example:
        ```python
        provider = StaticRateProvider.defaults()
        rate = provider.board_rate("mdf", BoardThickness.MM_18, "laminate")
        ```
    """

    def board_rate(
        self, board_type: str, thickness: BoardThickness, finish: str
    ) -> float:
        """Rate per square foot for a board type, thickness and finish."""
        ...

    def hardware_rate(self, item_name: str) -> HardwareRate:
        """Current rate row for a hardware item."""
        ...

    def edge_banding_rate(self, banding_type: EdgeBandingType) -> float:
        """Rate per linear foot for an edge banding thickness."""
        ...

    def board_rates(self) -> list[BoardRate]:
        """All active board rates."""
        ...

    def hardware_rates(self) -> list[HardwareRate]:
        """All active hardware rates."""
        ...


@runtime_checkable
class BomRepository(Protocol):
    """Persistence collaborator for computed calculations.

    Implementations store a calculation and its items together; a failed
    save leaves nothing behind.
    """

    def next_sequence(self) -> int:
        """Return the next calculation sequence number (1-based)."""
        ...

    def save(self, calculation: BomCalculation) -> BomCalculation:
        """Insert or replace a numbered calculation."""
        ...

    def get(self, number: str) -> BomCalculation:
        """Fetch a calculation by number.

        Raises:
            CalculationNotFoundError: If no calculation has that number.
        """
        ...

    def list(self, page: int = 1, limit: int = 10) -> tuple[list[BomCalculation], int]:
        """Return one page of calculations, newest first, plus the total count."""
        ...

    def count(self) -> int:
        """Number of stored calculations."""
        ...
