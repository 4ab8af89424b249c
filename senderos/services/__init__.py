from .annotation_service import AnnotationService
from .catalog_service import CatalogService
from .reservation_service import ReservationService

__all__ = [
    "AnnotationService",
    "CatalogService",
    "ReservationService",
]
