"""Calculation number generation."""

from __future__ import annotations

from datetime import date
from typing import Callable


class CalculationNumberGenerator:
    """Builds numbers of the form ``BOM-YYYYMMDD-NNNN``.

    The sequence comes from the repository so numbers stay unique per
    store; the date source is injectable for tests.
    """

    def __init__(self, prefix: str = "BOM", today: Callable[[], date] = date.today) -> None:
        self.prefix = prefix
        self._today = today

    def __call__(self, sequence: int) -> str:
        return f"{self.prefix}-{self._today():%Y%m%d}-{sequence:04d}"
