
import base64
import hashlib
import hmac
import json
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional, Tuple

from jose import JWTError, jwt

from sitetrack.core.config import settings

UPLOAD_TOKEN_SUBJECT = "upload"


@dataclass
class Identity:
    """Caller identity taken from a verified identity provider token."""
    subject: str
    name: Optional[str] = None
    email: Optional[str] = None


class UploadTokenError(Exception):
    pass


class WebhookVerificationError(Exception):
    pass


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_identity_token(token: str) -> Identity:
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    subject = payload.get("sub")
    if not subject or subject == UPLOAD_TOKEN_SUBJECT:
        raise JWTError("Token has no identity subject")
    return Identity(subject=subject, name=payload.get("name"), email=payload.get("email"))


def create_upload_token(expires_delta: Optional[timedelta] = None) -> Tuple[str, datetime]:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.UPLOAD_URL_EXPIRE_MINUTES)
    )
    token = jwt.encode(
        {"sub": UPLOAD_TOKEN_SUBJECT, "jti": uuid.uuid4().hex, "exp": expire},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    return token, expire


def decode_upload_token(token: str) -> str:
    """Return the token id of a valid upload token."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise UploadTokenError(f"Invalid upload URL: {e}") from e
    if payload.get("sub") != UPLOAD_TOKEN_SUBJECT or not payload.get("jti"):
        raise UploadTokenError("Invalid upload URL")
    return payload["jti"]


def _webhook_key(secret: str) -> bytes:
    if secret.startswith("whsec_"):
        secret = secret[len("whsec_"):]
    return base64.b64decode(secret)


def sign_webhook(payload: bytes, msg_id: str, timestamp: int, secret: Optional[str] = None) -> str:
    """Signature header value for ``payload``, in the ``v1,<base64>`` form."""
    key = _webhook_key(secret or settings.WEBHOOK_SECRET)
    signed = f"{msg_id}.{timestamp}.".encode() + payload
    digest = hmac.new(key, signed, hashlib.sha256).digest()
    return "v1," + base64.b64encode(digest).decode()


def verify_webhook(
    payload: bytes,
    headers: Mapping[str, str],
    secret: Optional[str] = None,
    now: Optional[float] = None,
) -> dict:
    """Check an identity provider webhook and return its decoded event.

    Expects ``svix-id``, ``svix-timestamp`` and ``svix-signature`` headers;
    the signature header may list several space separated ``v1,<sig>``
    entries, any of which may match.
    """
    secret = secret or settings.WEBHOOK_SECRET
    if not secret:
        raise WebhookVerificationError("Webhook secret is not configured")

    msg_id = headers.get("svix-id")
    timestamp = headers.get("svix-timestamp")
    signature_header = headers.get("svix-signature")
    if not msg_id or not timestamp or not signature_header:
        raise WebhookVerificationError("Missing webhook signature headers")

    try:
        sent_at = int(timestamp)
    except ValueError:
        raise WebhookVerificationError("Invalid webhook timestamp")
    now = time.time() if now is None else now
    if abs(now - sent_at) > settings.WEBHOOK_TOLERANCE_SECONDS:
        raise WebhookVerificationError("Webhook timestamp outside tolerance")

    try:
        expected = sign_webhook(payload, msg_id, sent_at, secret)
    except (ValueError, TypeError):
        raise WebhookVerificationError("Webhook secret is malformed")
    expected = expected.encode()
    candidates = [c.encode("latin-1", "replace") for c in signature_header.split(" ")]
    if not any(hmac.compare_digest(expected, candidate) for candidate in candidates):
        raise WebhookVerificationError("No matching webhook signature")

    try:
        event = json.loads(payload)
    except ValueError:
        raise WebhookVerificationError("Webhook body is not JSON")
    if not isinstance(event, dict):
        raise WebhookVerificationError("Webhook body is not an event object")
    return event
