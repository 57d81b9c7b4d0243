
from sqlalchemy import Column, String, Integer, Text, DateTime
from sqlalchemy.sql import func
from sitetrack.db.base import Base
from sitetrack.db.models.ids import new_id

class StoredFile(Base):
    __tablename__ = "stored_files"

    id = Column(String(32), primary_key=True, default=new_id)
    content_type = Column(String(100), nullable=False, default="application/octet-stream")
    size = Column(Integer, nullable=False)
    sha256 = Column(String(64), nullable=False)
    path = Column(Text, nullable=False)  # relative to STORAGE_DIR
    # jti of the upload URL token, an upload URL can be used once
    upload_token_id = Column(String(32), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
