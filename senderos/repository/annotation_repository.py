from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from senderos.core.errors import StoreError
from senderos.models import Annotation


def list_annotations_by_reservation_ids(
    db: Session, reservation_ids: Iterable[int]
) -> Dict[int, List[Annotation]]:
    """Group the annotations of the given reservations by reservation id.

    Each list keeps creation order. An empty id set never reaches the database.
    """
    ids = set(reservation_ids)
    if not ids:
        return {}

    query = (
        select(Annotation)
        .where(Annotation.reservation_id.in_(ids))
        .order_by(Annotation.id)
    )
    try:
        annotations = db.scalars(query).all()
    except SQLAlchemyError as exc:
        raise StoreError("Error al obtener anotaciones") from exc

    grouped: Dict[int, List[Annotation]] = defaultdict(list)
    for annotation in annotations:
        grouped[annotation.reservation_id].append(annotation)
    return dict(grouped)


def create_annotation(db: Session, reservation_id: int, content: str) -> Annotation:
    annotation = Annotation(reservation_id=reservation_id, content=content)
    try:
        db.add(annotation)
        db.flush()
    except SQLAlchemyError as exc:
        raise StoreError("Error al crear anotación") from exc
    return annotation


def delete_annotation(db: Session, annotation_id: int) -> int:
    statement = delete(Annotation).where(Annotation.id == annotation_id)
    try:
        result = db.execute(statement)
    except SQLAlchemyError as exc:
        raise StoreError("Error al eliminar anotación") from exc
    return result.rowcount
