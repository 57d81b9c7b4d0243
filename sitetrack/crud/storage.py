import hashlib
import logging
import mimetypes
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sitetrack.core.config import settings
from sitetrack.core.security import UploadTokenError, create_upload_token, decode_upload_token
from sitetrack.db.models.storage import StoredFile
from sitetrack.schemas.storage import UploadUrl

logger = logging.getLogger(__name__)


def generate_upload_url() -> UploadUrl:
    token, expires_at = create_upload_token()
    return UploadUrl(
        upload_url=f"{settings.PUBLIC_BASE_URL}{settings.API_PREFIX}/storage/upload?token={token}",
        expires_at=expires_at,
    )


def token_used(db: Session, token_id: str) -> bool:
    return db.query(StoredFile).filter(StoredFile.upload_token_id == token_id).first() is not None


def store_upload(db: Session, token: str, body: bytes, content_type: Optional[str] = None) -> str:
    """Write an uploaded body to disk and return its storage id."""
    token_id = decode_upload_token(token)
    if token_used(db, token_id):
        raise UploadTokenError("Upload URL has already been used")

    content_type = content_type or "application/octet-stream"
    ext = mimetypes.guess_extension(content_type.split(";")[0].strip()) or ""
    year_month = datetime.now(timezone.utc).strftime("%Y/%m")
    relative_path = f"{year_month}/{uuid.uuid4().hex}{ext}"

    target = Path(settings.STORAGE_DIR) / relative_path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(body)

    stored = StoredFile(
        content_type=content_type,
        size=len(body),
        sha256=hashlib.sha256(body).hexdigest(),
        path=relative_path,
        upload_token_id=token_id,
    )
    db.add(stored)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        target.unlink(missing_ok=True)
        raise UploadTokenError("Upload URL has already been used")
    logger.info("Stored upload %s (%d bytes)", stored.id, stored.size)
    return stored.id


def get_file(db: Session, storage_id: str) -> Optional[StoredFile]:
    return db.get(StoredFile, storage_id)


def get_file_path(stored: StoredFile) -> Path:
    return Path(settings.STORAGE_DIR) / stored.path


def get_file_url(db: Session, storage_id: str) -> Optional[str]:
    if get_file(db, storage_id) is None:
        return None
    return f"{settings.PUBLIC_BASE_URL}{settings.API_PREFIX}/storage/{storage_id}"
