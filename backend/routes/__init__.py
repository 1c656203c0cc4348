"""
Routes package initialization.
Exports all route modules.
"""

from routes.auth_routes import router as auth_router
from routes.content import router as content_router
from routes.investigations import router as investigations_router
from routes.suspicious_vehicles import router as suspicious_vehicles_router

__all__ = [
    "auth_router",
    "content_router",
    "investigations_router",
    "suspicious_vehicles_router"
]
