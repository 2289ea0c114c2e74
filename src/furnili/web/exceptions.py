"""Error handlers mapping domain exceptions to REST responses."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from furnili.application.config import ConfigError
from furnili.domain.errors import (
    CalculationNotFoundError,
    RateLookupError,
    StatusTransitionError,
    ValidationError,
)
from furnili.web.schemas.responses import ErrorResponseSchema


def _error_response(
    status_code: int,
    error: str,
    error_type: str,
    details: list[dict[str, Any]] | dict[str, Any] | None = None,
) -> JSONResponse:
    body = ErrorResponseSchema(error=error, error_type=error_type, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        details = {"field": exc.field} if exc.field else None
        return _error_response(422, str(exc), "validation", details)

    @app.exception_handler(RateLookupError)
    async def rate_lookup_error_handler(
        request: Request, exc: RateLookupError
    ) -> JSONResponse:
        return _error_response(
            422,
            str(exc),
            "rate_lookup",
            {"table": exc.table, "key": list(exc.key)},
        )

    @app.exception_handler(CalculationNotFoundError)
    async def not_found_handler(
        request: Request, exc: CalculationNotFoundError
    ) -> JSONResponse:
        return _error_response(
            404, f"Calculation not found: {exc.number}", "not_found"
        )

    @app.exception_handler(StatusTransitionError)
    async def status_transition_handler(
        request: Request, exc: StatusTransitionError
    ) -> JSONResponse:
        return _error_response(
            409,
            str(exc),
            "status_transition",
            {"current": exc.current, "target": exc.target},
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return _error_response(
            500, exc.message, f"config_{exc.error_type}", exc.details or None
        )
