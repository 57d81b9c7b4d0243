
from sqlalchemy import Column, String, Text, Enum, DateTime
from sqlalchemy.sql import func
from sitetrack.db.base import Base
from sitetrack.db.models.ids import new_id

PHOTO_CATEGORIES = ("plumbing", "electrical", "framing", "general")

class Photo(Base):
    __tablename__ = "photos"

    id = Column(String(32), primary_key=True, default=new_id)
    visit_id = Column(String(32), nullable=False, index=True)
    storage_id = Column(String(32), nullable=False)
    # Public URL resolved once at upload time
    file_url = Column(Text, nullable=False)
    caption = Column(Text, nullable=True)
    category = Column(Enum(*PHOTO_CATEGORIES, name="photo_category"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
