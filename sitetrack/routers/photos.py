
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from sitetrack.core.live import live_response
from sitetrack.crud import photos as crud
from sitetrack.crud.base import RecordNotFound
from sitetrack.routers import deps
from sitetrack.schemas.photo import PhotoCreate, PhotoUpdate, PhotoOut

router = APIRouter(
    prefix="/photos",
    tags=["photos"],
    dependencies=[Depends(deps.require_identity)]
)

@router.get("")
async def list_photos(request: Request, visit_id: str, db: Session = Depends(deps.get_db)):
    photos = crud.list_photos(db, visit_id)
    return live_response(request, [PhotoOut.model_validate(p) for p in photos])

@router.get("/{photo_id}")
async def get_photo(photo_id: str, request: Request, db: Session = Depends(deps.get_db)):
    photo = crud.get_photo(db, photo_id)
    return live_response(request, PhotoOut.model_validate(photo) if photo else None)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_photo(payload: PhotoCreate, db: Session = Depends(deps.get_db)):
    return {"id": crud.create_photo(db, payload)}

@router.patch("/{photo_id}")
async def update_photo(photo_id: str, payload: PhotoUpdate, db: Session = Depends(deps.get_db)):
    try:
        return {"id": crud.update_photo(db, photo_id, payload)}
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{photo_id}")
async def remove_photo(photo_id: str, db: Session = Depends(deps.get_db)):
    try:
        crud.remove_photo(db, photo_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None
