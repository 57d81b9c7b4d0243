from datetime import datetime

from pydantic import BaseModel


class UploadUrl(BaseModel):
    upload_url: str
    expires_at: datetime


class UploadResult(BaseModel):
    storage_id: str
