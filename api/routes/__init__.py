"""API route modules."""

from routes.cubes_routes import router as cubes_router
from routes.cylinders_routes import router as cylinders_router
from routes.health_routes import router as health_router

__all__ = [
    "cubes_router",
    "cylinders_router",
    "health_router",
]
