import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sitetrack.core.security import Identity
from sitetrack.db.models.user import User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_external_id(db: Session, external_id: str) -> Optional[User]:
    return db.query(User).filter(User.external_id == external_id).first()


def get_current_user(db: Session, identity: Optional[Identity]) -> Optional[User]:
    if identity is None:
        return None
    return get_user_by_external_id(db, identity.subject)


def upsert_from_identity(db: Session, external_id: str, name: str) -> str:
    """Insert or rename the user for ``external_id``.

    A redelivered event racing the first one loses on the unique
    ``external_id``; the row that won is renamed instead.
    """
    user = get_user_by_external_id(db, external_id)
    if user is not None:
        user.name = name
        db.commit()
        logger.info("Updated user for identity %s", external_id)
        return user.id

    user = User(external_id=external_id, name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        user = get_user_by_external_id(db, external_id)
        if user is None:
            raise
        logger.info("User for identity %s created concurrently", external_id)
        user.name = name
        db.commit()
        return user.id
    logger.info("Created user for identity %s", external_id)
    return user.id


def delete_from_identity(db: Session, external_id: str) -> None:
    user = get_user_by_external_id(db, external_id)
    if user is None:
        logger.warning("Can't delete user, there is none for identity %s", external_id)
        return
    db.delete(user)
    db.commit()
    logger.info("Deleted user for identity %s", external_id)
