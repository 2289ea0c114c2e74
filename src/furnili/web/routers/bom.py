"""Bill-of-materials calculation and history endpoints."""

from fastapi import APIRouter, Query, status

from furnili.application.dtos import CalculationRequest
from furnili.domain import BomCalculation, CustomPart
from furnili.infrastructure.serialization import calculation_to_dict
from furnili.web.dependencies import (
    CalculateCommandDep,
    FinalizeCommandDep,
    HistoryQueryDep,
    RepositoryDep,
)
from furnili.web.schemas.requests import CalculateBomRequest
from furnili.web.schemas.responses import (
    BomCalculationSchema,
    BomHistoryItemSchema,
    BomHistorySchema,
    ErrorResponseSchema,
    PaginationSchema,
)

router = APIRouter(prefix="/bom", tags=["bom"])

_NOT_FOUND = {404: {"model": ErrorResponseSchema, "description": "Unknown number"}}


def _to_calculation_request(request: CalculateBomRequest) -> CalculationRequest:
    """Convert the API schema to the application DTO."""
    parts = request.parts_config
    return CalculationRequest(
        unit_type=request.unit_type,
        height=request.height,
        width=request.width,
        depth=request.depth,
        unit_of_measure=request.unit_of_measure,
        board_type=request.board_type,
        board_thickness=request.board_thickness,
        finish=request.finish,
        shelves=parts.shelves,
        drawers=parts.drawers,
        shutters=parts.shutters,
        doors=parts.doors,
        back_panels=parts.back_panels,
        custom_parts=[
            CustomPart(
                name=part.name,
                quantity=part.quantity,
                length=part.length,
                width=part.width,
            )
            for part in parts.custom_parts
        ],
        include_carcass=request.include_carcass,
        project_id=request.project_id,
        notes=request.notes,
    )


def _calculation_to_schema(calculation: BomCalculation) -> BomCalculationSchema:
    return BomCalculationSchema.model_validate(calculation_to_dict(calculation))


@router.post(
    "/calculate",
    response_model=BomCalculationSchema,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponseSchema, "description": "Invalid input"}},
)
async def calculate_bom(
    request: CalculateBomRequest,
    command: CalculateCommandDep,
) -> BomCalculationSchema:
    """Calculate and store a draft bill of materials.

    Args:
        request: Unit dimensions, board selection and part counts.
        command: Injected CalculateBomCommand.

    Returns:
        The stored calculation with its number, items and totals.

    Raises:
        ValidationError: For invalid input (handled by exception handler).
        RateLookupError: For a missing rate (handled by exception handler).
    """
    calculation = command.execute(_to_calculation_request(request))
    return _calculation_to_schema(calculation)


@router.get("/history", response_model=BomHistorySchema)
async def get_history(
    query: HistoryQueryDep,
    page: int = Query(default=1, ge=1, description="Page number"),
    limit: int = Query(default=10, ge=1, le=100, description="Page size"),
) -> BomHistorySchema:
    """List stored calculations, newest first."""
    result = query.execute(page=page, limit=limit)
    return BomHistorySchema(
        calculations=[
            BomHistoryItemSchema(
                number=calc.number,
                status=calc.status.value,
                unit_type=calc.unit_type,
                board_type=calc.board_type,
                total_board_area=calc.total_board_area,
                total_cost=calc.total_cost,
                created_at=calc.created_at,
            )
            for calc in result.calculations
        ],
        pagination=PaginationSchema(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get("/{number}", response_model=BomCalculationSchema, responses=_NOT_FOUND)
async def get_calculation(
    number: str,
    repository: RepositoryDep,
) -> BomCalculationSchema:
    """Get a stored calculation by number.

    Raises:
        CalculationNotFoundError: If the number is unknown (handled by
            exception handler).
    """
    return _calculation_to_schema(repository.get(number))


@router.post(
    "/{number}/finalize",
    response_model=BomCalculationSchema,
    responses={
        **_NOT_FOUND,
        409: {"model": ErrorResponseSchema, "description": "Already final"},
    },
)
async def finalize_calculation(
    number: str,
    command: FinalizeCommandDep,
) -> BomCalculationSchema:
    """Mark a draft calculation as final."""
    return _calculation_to_schema(command.execute(number))
