"""
API route modules.

Each module defines routes for one area. The static router must be
included last.
"""

from routes.data import router as data_router
from routes.logs import router as logs_router
from routes.static import router as static_router

__all__ = [
    "data_router",
    "logs_router",
    "static_router",
]
