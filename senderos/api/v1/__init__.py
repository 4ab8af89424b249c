from fastapi import APIRouter

from .annotation_routes import router as annotation_router
from .catalog_routes import router as catalog_router
from .reservation_routes import router as reservation_router

router = APIRouter()
router.include_router(catalog_router)
router.include_router(reservation_router)
router.include_router(annotation_router)

__all__ = [
    "router",
    "annotation_router",
    "catalog_router",
    "reservation_router",
]
