
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from sitetrack.core.live import live_response
from sitetrack.crud import projects as crud
from sitetrack.crud.base import RecordNotFound
from sitetrack.routers import deps
from sitetrack.schemas.project import ProjectCreate, ProjectUpdate, ProjectOut

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    dependencies=[Depends(deps.require_identity)]
)

@router.get("")
async def list_projects(request: Request, client_id: Optional[str] = None, db: Session = Depends(deps.get_db)):
    projects = crud.list_projects(db, client_id=client_id)
    return live_response(request, [ProjectOut.model_validate(p) for p in projects])

@router.get("/with-client")
async def list_projects_with_client(request: Request, db: Session = Depends(deps.get_db)):
    return live_response(request, crud.list_projects_with_client(db))

@router.get("/{project_id}")
async def get_project(project_id: str, request: Request, db: Session = Depends(deps.get_db)):
    project = crud.get_project(db, project_id)
    return live_response(request, ProjectOut.model_validate(project) if project else None)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(payload: ProjectCreate, db: Session = Depends(deps.get_db)):
    return {"id": crud.create_project(db, payload)}

@router.patch("/{project_id}")
async def update_project(project_id: str, payload: ProjectUpdate, db: Session = Depends(deps.get_db)):
    try:
        return {"id": crud.update_project(db, project_id, payload)}
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{project_id}")
async def remove_project(project_id: str, db: Session = Depends(deps.get_db)):
    try:
        crud.remove_project(db, project_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None
