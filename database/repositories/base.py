import uuid
from typing import Any

from sqlalchemy.orm import Session


def as_uuid(value: Any) -> uuid.UUID:
    """Accept UUIDs or their string form for primary/foreign key lookups."""
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
