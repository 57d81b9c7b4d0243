from typing import List, Optional

from pydantic import BaseModel, ConfigDict, computed_field, model_validator

from sitetrack.schemas.common import RecordId, ExteriorType
from sitetrack.schemas.photo import PhotoOut

# Media URL fields each exterior type may carry
MEDIA_FIELDS = {
    "splat": ("splat_url",),
    "video": ("video_url", "youtube360_url"),
}


def check_media_pairing(exterior_type: str, **urls: Optional[str]) -> None:
    """Reject media URLs that belong to the other exterior type.

    A URL is not required to be present, a visit can be recorded before
    its capture has been processed.
    """
    allowed = MEDIA_FIELDS[exterior_type]
    misplaced = sorted(name for name, value in urls.items() if value is not None and name not in allowed)
    if misplaced:
        raise ValueError(
            f"exterior_type '{exterior_type}' does not accept {', '.join(misplaced)}"
        )


class VisitCreate(BaseModel):
    project_id: RecordId
    date: float
    notes: Optional[str] = None
    exterior_type: ExteriorType
    splat_url: Optional[str] = None
    video_url: Optional[str] = None
    youtube360_url: Optional[str] = None

    @model_validator(mode="after")
    def media_matches_exterior_type(self):
        check_media_pairing(
            self.exterior_type,
            splat_url=self.splat_url,
            video_url=self.video_url,
            youtube360_url=self.youtube360_url,
        )
        return self


class VisitUpdate(BaseModel):
    date: Optional[float] = None
    notes: Optional[str] = None
    exterior_type: Optional[ExteriorType] = None
    splat_url: Optional[str] = None
    video_url: Optional[str] = None
    youtube360_url: Optional[str] = None


class VisitOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    date: float
    notes: Optional[str] = None
    exterior_type: ExteriorType
    splat_url: Optional[str] = None
    video_url: Optional[str] = None
    youtube360_url: Optional[str] = None

    @computed_field
    @property
    def media_url(self) -> Optional[str]:
        if self.exterior_type == "splat":
            return self.splat_url
        return self.youtube360_url or self.video_url


class VisitWithPhotos(VisitOut):
    photos: List[PhotoOut] = []
