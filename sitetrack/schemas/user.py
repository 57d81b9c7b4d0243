from pydantic import BaseModel, ConfigDict

from sitetrack.schemas.common import AssignmentRole


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    external_id: str


class UserWithRole(UserOut):
    role: AssignmentRole
