from typing import Optional

from pydantic import BaseModel, ConfigDict

from sitetrack.schemas.common import RecordId, AssignmentRole
from sitetrack.schemas.client import ClientSummary


class ProjectCreate(BaseModel):
    client_id: RecordId
    name: str
    address: str


class ProjectUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None


class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_id: str
    name: str
    address: str


class ProjectWithClient(ProjectOut):
    client: Optional[ClientSummary] = None


class ProjectWithRole(ProjectOut):
    role: AssignmentRole
