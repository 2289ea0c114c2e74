"""Application layer - use cases and orchestration."""

from .commands import BomHistoryQuery, CalculateBomCommand, FinalizeBomCommand
from .dtos import CalculationRequest, HistoryPage
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "BomHistoryQuery",
    "CalculateBomCommand",
    "CalculationRequest",
    "FinalizeBomCommand",
    "HistoryPage",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
