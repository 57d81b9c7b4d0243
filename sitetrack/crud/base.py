from sqlalchemy.orm import Session


class RecordNotFound(LookupError):
    pass


def insert_record(db: Session, record) -> str:
    db.add(record)
    db.commit()
    return record.id


def patch_record(db: Session, model, record_id: str, updates: dict) -> str:
    """Apply a partial update and return the id.

    An empty ``updates`` mapping is a no-op and never touches the store,
    even when ``record_id`` does not resolve.
    """
    if not updates:
        return record_id

    record = db.get(model, record_id)
    if record is None:
        raise RecordNotFound(f"{model.__tablename__} {record_id} not found")

    for field, value in updates.items():
        setattr(record, field, value)
    db.commit()
    return record_id


def delete_record(db: Session, model, record_id: str) -> None:
    record = db.get(model, record_id)
    if record is None:
        raise RecordNotFound(f"{model.__tablename__} {record_id} not found")
    db.delete(record)
    db.commit()
