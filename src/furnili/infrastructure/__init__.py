"""Infrastructure layer - rate tables, storage, and output formatting."""

from .formatters import BomReportFormatter, RateTableFormatter
from .numbering import CalculationNumberGenerator
from .rates import StaticRateProvider
from .repository import InMemoryBomRepository, JsonFileBomRepository
from .serialization import calculation_from_dict, calculation_to_dict
from .sheet_optimizer import SheetConfig, SheetOptimizer, SheetPlan

__all__ = [
    "BomReportFormatter",
    "CalculationNumberGenerator",
    "InMemoryBomRepository",
    "JsonFileBomRepository",
    "RateTableFormatter",
    "SheetConfig",
    "SheetOptimizer",
    "SheetPlan",
    "StaticRateProvider",
    "calculation_from_dict",
    "calculation_to_dict",
]
