
from typing import Optional
from fastapi import HTTPException, status, Request
from jose import JWTError
from sqlalchemy.orm import Session
from sitetrack.db.session import SessionLocal
from sitetrack.core.security import Identity, decode_identity_token

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def _read_token(request: Request) -> Optional[str]:
    token = request.headers.get("Authorization") or request.cookies.get("access_token")
    if not token:
        return None

    # Remove "Bearer " prefix if present
    if token.startswith("Bearer "):
        token = token.split(" ", 1)[1]
    return token

async def require_identity(request: Request) -> Identity:
    token = _read_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"}
        )

    try:
        return decode_identity_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"}
        )

async def get_dashboard_identity(request: Request) -> Identity:
    token = _read_token(request)

    if not token:
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Not authenticated",
            headers={"Location": "/?error=login_required"}
        )

    try:
        return decode_identity_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Could not validate credentials",
            headers={"Location": "/?error=invalid_token"}
        )
