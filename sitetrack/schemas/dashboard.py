from typing import List

from pydantic import BaseModel

from sitetrack.schemas.visit import VisitOut


class DashboardStats(BaseModel):
    clients: int
    projects: int
    visits: int
    recent_visits: List[VisitOut]
