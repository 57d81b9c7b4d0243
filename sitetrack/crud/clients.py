from typing import List, Optional

from sqlalchemy.orm import Session

from sitetrack.crud.base import insert_record, patch_record, delete_record
from sitetrack.db.models.client import Client
from sitetrack.schemas.client import ClientCreate, ClientUpdate


def list_clients(db: Session) -> List[Client]:
    return db.query(Client).all()


def get_client(db: Session, client_id: str) -> Optional[Client]:
    return db.get(Client, client_id)


def get_client_by_email(db: Session, email: str) -> Optional[Client]:
    # Raises MultipleResultsFound when the email is shared
    return db.query(Client).filter(Client.email == email).one_or_none()


def create_client(db: Session, data: ClientCreate) -> str:
    return insert_record(db, Client(name=data.name, email=data.email))


def update_client(db: Session, client_id: str, changes: ClientUpdate) -> str:
    return patch_record(db, Client, client_id, changes.model_dump(exclude_none=True))


def remove_client(db: Session, client_id: str) -> None:
    # Projects of the client are left in place
    delete_record(db, Client, client_id)
