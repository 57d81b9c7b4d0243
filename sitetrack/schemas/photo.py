from typing import Optional

from pydantic import BaseModel, ConfigDict

from sitetrack.schemas.common import RecordId, PhotoCategory


class PhotoCreate(BaseModel):
    visit_id: RecordId
    storage_id: RecordId
    file_url: str
    caption: Optional[str] = None
    category: Optional[PhotoCategory] = None


class PhotoUpdate(BaseModel):
    caption: Optional[str] = None
    category: Optional[PhotoCategory] = None


class PhotoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    visit_id: str
    storage_id: str
    file_url: str
    caption: Optional[str] = None
    category: Optional[PhotoCategory] = None
