
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from sitetrack.core.live import live_response
from sitetrack.crud import assignments as crud
from sitetrack.crud.base import RecordNotFound
from sitetrack.routers import deps
from sitetrack.schemas.assignment import AssignmentCreate, AssignmentUpdate, AssignmentOut

router = APIRouter(
    prefix="/assignments",
    tags=["assignments"],
    dependencies=[Depends(deps.require_identity)]
)

@router.get("")
async def list_assignments(
    request: Request,
    project_id: Optional[str] = None,
    user_id: Optional[str] = None,
    db: Session = Depends(deps.get_db)
):
    assignments = crud.list_assignments(db, project_id=project_id, user_id=user_id)
    return live_response(request, [AssignmentOut.model_validate(a) for a in assignments])

@router.get("/by-user/{user_id}")
async def get_user_projects(user_id: str, request: Request, db: Session = Depends(deps.get_db)):
    return live_response(request, crud.get_user_projects(db, user_id))

@router.get("/by-project/{project_id}")
async def get_project_users(project_id: str, request: Request, db: Session = Depends(deps.get_db)):
    return live_response(request, crud.get_project_users(db, project_id))

@router.put("")
async def assign(payload: AssignmentCreate, db: Session = Depends(deps.get_db)):
    return {"id": crud.assign(db, payload.project_id, payload.user_id, payload.role)}

@router.delete("")
async def remove_assignment_for_pair(project_id: str, user_id: str, db: Session = Depends(deps.get_db)):
    crud.remove_assignment_for_pair(db, project_id, user_id)
    return None

@router.get("/{assignment_id}")
async def get_assignment(assignment_id: str, request: Request, db: Session = Depends(deps.get_db)):
    assignment = crud.get_assignment(db, assignment_id)
    return live_response(request, AssignmentOut.model_validate(assignment) if assignment else None)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_assignment(payload: AssignmentCreate, db: Session = Depends(deps.get_db)):
    return {"id": crud.create_assignment(db, payload)}

@router.patch("/{assignment_id}")
async def update_assignment(assignment_id: str, payload: AssignmentUpdate, db: Session = Depends(deps.get_db)):
    try:
        return {"id": crud.update_assignment(db, assignment_id, payload)}
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{assignment_id}")
async def remove_assignment(assignment_id: str, db: Session = Depends(deps.get_db)):
    try:
        crud.remove_assignment(db, assignment_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None
