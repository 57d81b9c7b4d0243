
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from sitetrack.db.base import Base
from sitetrack.db.models.ids import new_id

class Project(Base):
    __tablename__ = "projects"

    id = Column(String(32), primary_key=True, default=new_id)
    # Plain indexed reference, deleting a client leaves its projects in place
    client_id = Column(String(32), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    address = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
