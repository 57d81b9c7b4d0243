
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from sitetrack.core.live import live_response
from sitetrack.crud import dashboard as crud
from sitetrack.routers import deps

router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(deps.require_identity)]
)

@router.get("/stats")
async def dashboard_stats(request: Request, db: Session = Depends(deps.get_db)):
    return live_response(request, crud.get_stats(db))
