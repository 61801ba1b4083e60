"""API Routes for Storefront."""

from .products_router import router as products_router
from .sessions_router import router as sessions_router
from .uploads_router import router as uploads_router

__all__ = [
    "products_router",
    "sessions_router",
    "uploads_router",
]
