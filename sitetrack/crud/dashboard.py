from sqlalchemy.orm import Session

from sitetrack.db.models.client import Client
from sitetrack.db.models.project import Project
from sitetrack.db.models.visit import Visit
from sitetrack.schemas.dashboard import DashboardStats
from sitetrack.schemas.visit import VisitOut

RECENT_VISITS = 5


def get_stats(db: Session) -> DashboardStats:
    recent = db.query(Visit).order_by(Visit.date.desc()).limit(RECENT_VISITS).all()
    return DashboardStats(
        clients=db.query(Client).count(),
        projects=db.query(Project).count(),
        visits=db.query(Visit).count(),
        recent_visits=[VisitOut.model_validate(v) for v in recent],
    )
