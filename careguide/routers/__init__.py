from careguide.routers.health import router as health_router
from careguide.routers.kids import router as kids_router
from careguide.routers.medicines import router as medicines_router
from careguide.routers.symptoms import router as symptoms_router

__all__ = [
    "health_router",
    "kids_router",
    "medicines_router",
    "symptoms_router",
]
