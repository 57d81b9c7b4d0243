import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from sitetrack.core.security import WebhookVerificationError, verify_webhook
from sitetrack.crud import users
from sitetrack.routers import deps

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/webhooks",
    tags=["webhooks"],
)

def display_name(data: dict) -> str:
    name = " ".join(part for part in (data.get("first_name"), data.get("last_name")) if part)
    return name or data.get("username") or data.get("id", "")

@router.post("/identity")
async def identity_webhook(request: Request, db: Session = Depends(deps.get_db)):
    payload = await request.body()
    try:
        event = verify_webhook(payload, request.headers)
    except WebhookVerificationError as e:
        logger.warning("Rejected identity webhook: %s", e)
        raise HTTPException(status_code=400, detail="Invalid webhook signature")

    event_type = event.get("type")
    data = event.get("data") or {}

    if event_type in ("user.created", "user.updated", "user.deleted") and not data.get("id"):
        logger.warning("Identity webhook %s has no user id", event_type)
    elif event_type in ("user.created", "user.updated"):
        users.upsert_from_identity(db, data["id"], display_name(data))
    elif event_type == "user.deleted":
        users.delete_from_identity(db, data["id"])
    else:
        logger.info("Ignored identity webhook event %s", event_type)

    return {"ok": True}
