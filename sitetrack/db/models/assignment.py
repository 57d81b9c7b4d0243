
from sqlalchemy import Column, String, Enum, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from sitetrack.db.base import Base
from sitetrack.db.models.ids import new_id

ASSIGNMENT_ROLES = ("operator", "client")

class ProjectAssignment(Base):
    __tablename__ = "project_assignments"
    __table_args__ = (
        # Compound lookup index, also closes the assign check-then-insert race
        UniqueConstraint("user_id", "project_id", name="uq_assignment_user_project"),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    project_id = Column(String(32), nullable=False, index=True)
    user_id = Column(String(32), nullable=False, index=True)
    role = Column(Enum(*ASSIGNMENT_ROLES, name="assignment_role"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
