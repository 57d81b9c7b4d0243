
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from sitetrack.db.base import Base
from sitetrack.db.models.ids import new_id

class Client(Base):
    __tablename__ = "clients"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, index=True)  # not unique
    created_at = Column(DateTime(timezone=True), server_default=func.now())
