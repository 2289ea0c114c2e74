"""API routers for the REST API."""

from furnili.web.routers.bom import router as bom_router
from furnili.web.routers.rates import router as rates_router

__all__ = [
    "bom_router",
    "rates_router",
]
