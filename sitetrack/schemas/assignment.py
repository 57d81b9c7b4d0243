from typing import Optional

from pydantic import BaseModel, ConfigDict

from sitetrack.schemas.common import RecordId, AssignmentRole


class AssignmentCreate(BaseModel):
    project_id: RecordId
    user_id: RecordId
    role: AssignmentRole


class AssignmentUpdate(BaseModel):
    role: Optional[AssignmentRole] = None


class AssignmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    user_id: str
    role: AssignmentRole
