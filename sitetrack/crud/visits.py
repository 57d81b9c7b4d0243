import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from sitetrack.crud.base import RecordNotFound, insert_record, patch_record, delete_record
from sitetrack.db.models.photo import Photo
from sitetrack.db.models.visit import Visit
from sitetrack.schemas.photo import PhotoOut
from sitetrack.schemas.visit import (
    VisitCreate, VisitUpdate, VisitOut, VisitWithPhotos, MEDIA_FIELDS, check_media_pairing,
)

logger = logging.getLogger(__name__)

URL_FIELDS = tuple(name for names in MEDIA_FIELDS.values() for name in names)


def list_visits(db: Session, project_id: str) -> List[Visit]:
    return db.query(Visit).filter(Visit.project_id == project_id).all()


def list_visits_by_date(db: Session, order: str = "desc") -> List[Visit]:
    column = Visit.date.asc() if order == "asc" else Visit.date.desc()
    return db.query(Visit).order_by(column).all()


def get_visit(db: Session, visit_id: str) -> Optional[Visit]:
    return db.get(Visit, visit_id)


def get_visit_with_photos(db: Session, visit_id: str) -> Optional[VisitWithPhotos]:
    visit = db.get(Visit, visit_id)
    if visit is None:
        return None

    photos = db.query(Photo).filter(Photo.visit_id == visit_id).all()
    return VisitWithPhotos(
        **VisitOut.model_validate(visit).model_dump(exclude={"media_url"}),
        photos=[PhotoOut.model_validate(p) for p in photos],
    )


def create_visit(db: Session, data: VisitCreate) -> str:
    return insert_record(db, Visit(
        project_id=data.project_id,
        date=data.date,
        notes=data.notes,
        exterior_type=data.exterior_type,
        splat_url=data.splat_url,
        video_url=data.video_url,
        youtube360_url=data.youtube360_url,
    ))


def update_visit(db: Session, visit_id: str, changes: VisitUpdate) -> str:
    updates = changes.model_dump(exclude_none=True)
    if not updates:
        return visit_id

    visit = db.get(Visit, visit_id)
    if visit is None:
        raise RecordNotFound(f"visits {visit_id} not found")

    # URLs already stored are not re-checked when the type changes
    check_media_pairing(
        updates.get("exterior_type", visit.exterior_type),
        **{name: updates.get(name) for name in URL_FIELDS},
    )
    return patch_record(db, Visit, visit_id, updates)


def remove_visit(db: Session, visit_id: str) -> None:
    """Delete a visit and its photos.

    Photos go first, each in its own commit, then the visit. An
    interruption part way through leaves the remaining photos and the
    visit in place.
    """
    if db.get(Visit, visit_id) is None:
        raise RecordNotFound(f"visits {visit_id} not found")

    photos =db.query(Photo).filter(Photo.visit_id == visit_id).all()
    for photo in photos:
        db.delete(photo)
        db.commit()

    delete_record(db, Visit, visit_id)
    logger.info("Removed visit %s with %d photos", visit_id, len(photos))
