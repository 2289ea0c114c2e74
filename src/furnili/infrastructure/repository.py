"""BomRepository implementations.

InMemoryBomRepository keeps calculations in a dict for the lifetime of the
process. JsonFileBomRepository additionally writes the whole store to a
JSON file after every save so the CLI can keep history between runs.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from furnili.application.config import ConfigError
from furnili.domain.entities import BomCalculation
from furnili.domain.errors import CalculationNotFoundError

from .serialization import calculation_from_dict, calculation_to_dict

logger = logging.getLogger(__name__)


class InMemoryBomRepository:
    """Process-local calculation store.

    Calculations are kept in insertion order; ``list`` returns them newest
    first.
    """

    def __init__(self) -> None:
        self._calculations: dict[str, BomCalculation] = {}
        self._sequence = 0
        self._lock = threading.Lock()

    def next_sequence(self) -> int:
        with self._lock:
            self._sequence += 1
            return self._sequence

    def save(self, calculation: BomCalculation) -> BomCalculation:
        if not calculation.number:
            raise ValueError("Calculation must be numbered before saving")
        with self._lock:
            self._calculations[calculation.number] = calculation
        logger.debug(f"Stored {calculation.number} ({calculation.status.value})")
        return calculation

    def get(self, number: str) -> BomCalculation:
        with self._lock:
            calculation = self._calculations.get(number)
        if calculation is None:
            raise CalculationNotFoundError(number)
        return calculation

    def list(self, page: int = 1, limit: int = 10) -> tuple[list[BomCalculation], int]:
        if page < 1 or limit < 1:
            raise ValueError("page and limit must be at least 1")
        with self._lock:
            newest_first = list(reversed(self._calculations.values()))
        offset = (page - 1) * limit
        return newest_first[offset : offset + limit], len(newest_first)

    def count(self) -> int:
        with self._lock:
            return len(self._calculations)


class JsonFileBomRepository(InMemoryBomRepository):
    """Calculation store persisted to a single JSON file.

    The file holds ``{"sequence": int, "calculations": [...]}`` in
    insertion order.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        if path.exists():
            self._load()

    def _load(self) -> None:
        """Read the store file.

        Raises:
            ConfigError: If the file cannot be read, is not valid JSON, or
                holds entries that are not stored calculations.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(
                f"Could not read calculation store {self.path}: {exc}",
                "file_read_error",
                self.path,
            ) from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(
                f"Calculation store {self.path} is not valid JSON at line "
                f"{exc.lineno}, column {exc.colno}: {exc.msg}",
                "json_parse",
                self.path,
                [{"line": exc.lineno, "column": exc.colno, "message": exc.msg}],
            ) from exc
        try:
            self._sequence = int(data.get("sequence", 0))
            for entry in data.get("calculations", []):
                calculation = calculation_from_dict(entry)
                self._calculations[calculation.number] = calculation
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ConfigError(
                f"Calculation store {self.path} has an unexpected layout: {exc!r}",
                "validation",
                self.path,
            ) from exc
        logger.debug(f"Loaded {len(self._calculations)} calculations from {self.path}")

    def next_sequence(self) -> int:
        sequence = super().next_sequence()
        self._write()
        return sequence

    def save(self, calculation: BomCalculation) -> BomCalculation:
        super().save(calculation)
        self._write()
        return calculation

    def _write(self) -> None:
        with self._lock:
            data = {
                "sequence": self._sequence,
                "calculations": [
                    calculation_to_dict(c) for c in self._calculations.values()
                ],
            }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
