"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from furnili import __version__
from furnili.web.exceptions import register_exception_handlers
from furnili.web.routers import bom_router, rates_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build the BOM API with its routers, CORS policy and error handlers."""
    app = FastAPI(
        title="Furnili BOM API",
        description="Price furniture units and keep a history of draft and final BOMs",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (bom_router, rates_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    logger.debug(f"Created API app version {__version__}")
    return app


app = create_app()
