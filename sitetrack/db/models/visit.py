
from sqlalchemy import Column, String, Text, Float, Enum, DateTime
from sqlalchemy.sql import func
from sitetrack.db.base import Base
from sitetrack.db.models.ids import new_id

EXTERIOR_TYPES = ("splat", "video")

class Visit(Base):
    __tablename__ = "visits"

    id = Column(String(32), primary_key=True, default=new_id)
    project_id = Column(String(32), nullable=False, index=True)
    date = Column(Float(precision=53), nullable=False, index=True)  # epoch milliseconds
    notes = Column(Text, nullable=True)
    exterior_type = Column(Enum(*EXTERIOR_TYPES, name="exterior_type"), nullable=False)
    splat_url = Column(Text, nullable=True)
    video_url = Column(Text, nullable=True)
    youtube360_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
