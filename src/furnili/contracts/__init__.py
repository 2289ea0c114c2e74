"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, the
calculator stays pure and testable with fixed fixture tables.

Example:
    ```python
    from furnili.contracts import RateProvider

    def price_of(provider: RateProvider) -> float:
        return provider.board_rate("ply", BoardThickness.MM_18, "veneer")
    ```
"""

from .protocols import (
    BomRepository as BomRepository,
    RateProvider as RateProvider,
)

__all__ = [
    "BomRepository",
    "RateProvider",
]
