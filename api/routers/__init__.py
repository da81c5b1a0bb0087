"""API routers."""

from api.routers.currencies import router as currencies_router
from api.routers.ratios import router as ratios_router
from api.routers.reports import router as reports_router

__all__ = [
    "currencies_router",
    "ratios_router",
    "reports_router",
]
