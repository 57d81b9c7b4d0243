
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from sitetrack.core.live import live_response
from sitetrack.core.security import Identity
from sitetrack.crud import users as crud
from sitetrack.routers import deps
from sitetrack.schemas.user import UserOut

router = APIRouter(
    prefix="/users",
    tags=["users"],
)

@router.get("/me")
async def current_user(
    request: Request,
    db: Session = Depends(deps.get_db),
    identity: Identity = Depends(deps.require_identity)
):
    user = crud.get_current_user(db, identity)
    return live_response(request, UserOut.model_validate(user) if user else None)
