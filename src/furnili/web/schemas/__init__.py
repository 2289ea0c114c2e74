"""Pydantic schemas for the REST API."""

from furnili.web.schemas.requests import (
    CalculateBomRequest,
    CustomPartSchema,
    PartsConfigSchema,
)
from furnili.web.schemas.responses import (
    BoardRateSchema,
    BomCalculationSchema,
    BomHistoryItemSchema,
    BomHistorySchema,
    BomItemSchema,
    BomSummarySchema,
    ErrorResponseSchema,
    HardwareRateSchema,
    PaginationSchema,
    SheetLayoutSchema,
    SheetPlanSchema,
)

__all__ = [
    # Requests
    "CalculateBomRequest",
    "CustomPartSchema",
    "PartsConfigSchema",
    # Responses
    "BoardRateSchema",
    "BomCalculationSchema",
    "BomHistoryItemSchema",
    "BomHistorySchema",
    "BomItemSchema",
    "BomSummarySchema",
    "ErrorResponseSchema",
    "HardwareRateSchema",
    "PaginationSchema",
    "SheetLayoutSchema",
    "SheetPlanSchema",
]
