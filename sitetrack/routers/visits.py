
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from sitetrack.core.live import live_response
from sitetrack.crud import visits as crud
from sitetrack.crud.base import RecordNotFound
from sitetrack.routers import deps
from sitetrack.schemas.common import SortOrder
from sitetrack.schemas.visit import VisitCreate, VisitUpdate, VisitOut

router = APIRouter(
    prefix="/visits",
    tags=["visits"],
    dependencies=[Depends(deps.require_identity)]
)

@router.get("")
async def list_visits(request: Request, project_id: str, db: Session = Depends(deps.get_db)):
    visits = crud.list_visits(db, project_id)
    return live_response(request, [VisitOut.model_validate(v) for v in visits])

@router.get("/by-date")
async def list_visits_by_date(request: Request, order: SortOrder = "desc", db: Session = Depends(deps.get_db)):
    visits = crud.list_visits_by_date(db, order=order)
    return live_response(request, [VisitOut.model_validate(v) for v in visits])

@router.get("/{visit_id}")
async def get_visit(visit_id: str, request: Request, db: Session = Depends(deps.get_db)):
    visit = crud.get_visit(db, visit_id)
    return live_response(request, VisitOut.model_validate(visit) if visit else None)

@router.get("/{visit_id}/with-photos")
async def get_visit_with_photos(visit_id: str, request: Request, db: Session = Depends(deps.get_db)):
    return live_response(request, crud.get_visit_with_photos(db, visit_id))

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_visit(payload: VisitCreate, db: Session = Depends(deps.get_db)):
    return {"id": crud.create_visit(db, payload)}

@router.patch("/{visit_id}")
async def update_visit(visit_id: str, payload: VisitUpdate, db: Session = Depends(deps.get_db)):
    try:
        return {"id": crud.update_visit(db, visit_id, payload)}
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

@router.delete("/{visit_id}")
async def remove_visit(visit_id: str, db: Session = Depends(deps.get_db)):
    try:
        crud.remove_visit(db, visit_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None
