from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from senderos.dependencies import get_db
from senderos.schemas import AnnotationCreate, CreatedResponse, MessageResponse
from senderos.services import AnnotationService

router = APIRouter(prefix="/anotaciones", tags=["annotations"])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_annotation(
    payload: AnnotationCreate,
    db: Session = Depends(get_db),
) -> CreatedResponse:
    service = AnnotationService(db)
    annotation_id = service.create_annotation(payload)
    return CreatedResponse(message="Anotación creada", id=annotation_id)


@router.delete("/{annotation_id}", response_model=MessageResponse)
def delete_annotation(
    annotation_id: int,
    db: Session = Depends(get_db),
) -> MessageResponse:
    service = AnnotationService(db)
    service.delete_annotation(annotation_id)
    return MessageResponse(message="Anotación eliminada")


__all__ = ["router"]
