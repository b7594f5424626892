from typing import Any, TypeVar

from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, obj: T) -> T:
        self.db.add(obj)
        self.db.flush()  # Generate ID / server defaults
        return obj

    def delete(self, obj: Any) -> None:
        self.db.delete(obj)
        self.db.flush()
