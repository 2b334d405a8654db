"""Thin per-model data access used by the services.

Every call runs in its own transaction: it commits on success and rolls the
session back before re-raising on failure. Callers that need two calls to
succeed together have to arrange that themselves.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking.database import Base

ModelT = TypeVar('ModelT', bound=Base)


class Store(Generic[ModelT]):
    def __init__(self, db: Session, model: type[ModelT]):
        self.db = db
        self.model = model

    def create(self, **values: Any) -> ModelT:
        record = self.model(**values)
        try:
            self.db.add(record)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(record)
        return record

    def find_one(self, **criteria: Any) -> ModelT | None:
        return self.db.query(self.model).filter_by(**criteria).order_by(self.model.id.asc()).first()

    def find_all(self, **criteria: Any) -> list[ModelT]:
        return self.db.query(self.model).filter_by(**criteria).order_by(self.model.id.asc()).all()

    def find_by_key(self, key: int) -> ModelT | None:
        return self.db.get(self.model, key)

    def update(self, patch: dict[str, Any], **criteria: Any) -> int:
        """Apply ``patch`` to every row matching ``criteria``; return the affected row count."""
        try:
            affected = self.db.query(self.model).filter_by(**criteria).update(
                patch,
                synchronize_session=False,
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return affected

    def destroy(self, record: ModelT) -> None:
        try:
            self.db.delete(record)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
