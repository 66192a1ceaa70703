"""Routers package - API endpoint routers."""

from .health import router as health_router
from .companies import router as companies_router
from .industries import router as industries_router
from .invoices import router as invoices_router

__all__ = [
    "health_router",
    "companies_router",
    "industries_router",
    "invoices_router",
]
