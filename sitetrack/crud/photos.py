from typing import List, Optional

from sqlalchemy.orm import Session

from sitetrack.crud.base import insert_record, patch_record, delete_record
from sitetrack.db.models.photo import Photo
from sitetrack.schemas.photo import PhotoCreate, PhotoUpdate


def list_photos(db: Session, visit_id: str) -> List[Photo]:
    return db.query(Photo).filter(Photo.visit_id == visit_id).all()


def get_photo(db: Session, photo_id: str) -> Optional[Photo]:
    return db.get(Photo, photo_id)


def create_photo(db: Session, data: PhotoCreate) -> str:
    return insert_record(db, Photo(
        visit_id=data.visit_id,
        storage_id=data.storage_id,
        file_url=data.file_url,
        caption=data.caption,
        category=data.category,
    ))


def update_photo(db: Session, photo_id: str, changes: PhotoUpdate) -> str:
    return patch_record(db, Photo, photo_id, changes.model_dump(exclude_none=True))


def remove_photo(db: Session, photo_id: str) -> None:
    # The stored blob is kept
    delete_record(db, Photo, photo_id)
