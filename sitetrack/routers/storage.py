
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from sitetrack.core.live import live_response
from sitetrack.core.security import UploadTokenError
from sitetrack.crud import storage as crud
from sitetrack.routers import deps

router = APIRouter(
    prefix="/storage",
    tags=["storage"],
)

@router.post("/upload-url", dependencies=[Depends(deps.require_identity)])
async def generate_upload_url():
    return crud.generate_upload_url()

@router.post("/upload", status_code=status.HTTP_201_CREATED)
async def upload(token: str, request: Request, db: Session = Depends(deps.get_db)):
    # Authorized by the signed token in the URL
    body = await request.body()
    try:
        storage_id = crud.store_upload(db, token, body, request.headers.get("content-type"))
    except UploadTokenError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"storage_id": storage_id}

@router.get("/{storage_id}/url", dependencies=[Depends(deps.require_identity)])
async def get_file_url(storage_id: str, request: Request, db: Session = Depends(deps.get_db)):
    return live_response(request, crud.get_file_url(db, storage_id))

@router.get("/{storage_id}")
async def download(storage_id: str, db: Session = Depends(deps.get_db)):
    stored = crud.get_file(db, storage_id)
    if not stored:
        raise HTTPException(status_code=404, detail="File not found")
    path = crud.get_file_path(stored)
    if not path.exists():
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(path, media_type=stored.content_type)
