
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import MultipleResultsFound
from sqlalchemy.orm import Session

from sitetrack.core.live import live_response
from sitetrack.crud import clients as crud
from sitetrack.crud.base import RecordNotFound
from sitetrack.routers import deps
from sitetrack.schemas.client import ClientCreate, ClientUpdate, ClientOut

router = APIRouter(
    prefix="/clients",
    tags=["clients"],
    dependencies=[Depends(deps.require_identity)]
)

@router.get("")
async def list_clients(request: Request, db: Session = Depends(deps.get_db)):
    clients = crud.list_clients(db)
    return live_response(request, [ClientOut.model_validate(c) for c in clients])

@router.get("/by-email")
async def get_client_by_email(request: Request, email: str, db: Session = Depends(deps.get_db)):
    try:
        client = crud.get_client_by_email(db, email)
    except MultipleResultsFound:
        raise HTTPException(status_code=409, detail="More than one client has this email")
    return live_response(request, ClientOut.model_validate(client) if client else None)

@router.get("/{client_id}")
async def get_client(client_id: str, request: Request, db: Session = Depends(deps.get_db)):
    client = crud.get_client(db, client_id)
    return live_response(request, ClientOut.model_validate(client) if client else None)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_client(payload: ClientCreate, db: Session = Depends(deps.get_db)):
    return {"id": crud.create_client(db, payload)}

@router.patch("/{client_id}")
async def update_client(client_id: str, payload: ClientUpdate, db: Session = Depends(deps.get_db)):
    try:
        return {"id": crud.update_client(db, client_id, payload)}
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{client_id}")
async def remove_client(client_id: str, db: Session = Depends(deps.get_db)):
    try:
        crud.remove_client(db, client_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None
