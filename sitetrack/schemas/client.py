from typing import Optional

from pydantic import BaseModel, ConfigDict


class ClientCreate(BaseModel):
    name: str
    email: str


class ClientUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class ClientOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str


class ClientSummary(BaseModel):
    """Denormalized client projection attached to project listings."""
    name: str
    email: str
