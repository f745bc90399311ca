"""
SQLAlchemy implementation of the Base Repository.
"""

import functools
from typing import Any, Dict, Generic, List, Optional, Set, Type, TypeVar

import structlog
from pydantic import BaseModel
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from synergia.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    StorageUnavailableException,
)
from synergia.infrastructure.database import Base

logger = structlog.get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
ReadType = TypeVar("ReadType", bound=BaseModel)


def storage_guard(method):
    """Translate driver failures into application errors."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except IntegrityError as exc:
            self._rollback()
            logger.warning(
                "Constraint violated",
                collection=self.collection,
                operation=method.__name__,
                error=str(exc.orig),
            )
            raise BusinessRuleViolationException(
                "Registro viola uma restrição de unicidade ou integridade",
                details={"collection": self.collection, "reason": str(exc.orig)},
            ) from exc
        except DBAPIError as exc:
            self._rollback()
            logger.exception(
                "Storage failure", collection=self.collection, operation=method.__name__
            )
            raise StorageUnavailableException(
                "Armazenamento local indisponível",
                details={"collection": self.collection, "reason": str(exc.orig)},
            ) from exc

    return wrapper


class SQLAlchemyRepository(Generic[ModelType, ReadType]):
    """Generic repository implementation for SQLAlchemy models.

    Reads return pydantic snapshots, never live ORM rows, so callers cannot
    mutate persisted state behind the repository's back. With ``autocommit``
    off the repository only flushes and the owning transaction commits.
    """

    read_schema: Type[ReadType]
    immutable_fields: Set[str] = set()

    def __init__(self, db: Session, model: Type[ModelType], autocommit: bool = True):
        self.db = db
        self.model = model
        self.autocommit = autocommit

    @property
    def collection(self) -> str:
        return self.model.__tablename__

    def _commit(self) -> None:
        if self.autocommit:
            self.db.commit()
        else:
            self.db.flush()

    def _rollback(self) -> None:
        if self.autocommit:
            self.db.rollback()

    def _values(self, record: Any) -> Dict[str, Any]:
        if isinstance(record, BaseModel):
            data = record.model_dump(by_alias=False)
        else:
            data = dict(record)
        columns = self.model.__table__.columns.keys()
        return {key: value for key, value in data.items() if key in columns}

    def _prepare_new(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    def _snapshot(self, db_obj: ModelType) -> ReadType:
        return self.read_schema.model_validate(db_obj)

    def _get_or_raise(self, id: Optional[int]) -> ModelType:
        db_obj = self.db.get(self.model, id) if id is not None else None
        if db_obj is None:
            raise EntityNotFoundException(
                f"{self.collection}: registro {id} não encontrado",
                details={"collection": self.collection, "id": id},
            )
        return db_obj

    @storage_guard
    def add(self, record: Any) -> int:
        values = self._values(record)
        values.pop("id", None)
        db_obj = self.model(**self._prepare_new(values))
        self.db.add(db_obj)
        self._commit()
        logger.debug("Record added", collection=self.collection, id=db_obj.id)
        return db_obj.id

    @storage_guard
    def insert_snapshot(self, record: Any) -> int:
        db_obj = self.model(**self._prepare_new(self._values(record)))
        self.db.add(db_obj)
        self._commit()
        return db_obj.id

    @storage_guard
    def get(self, id: int) -> Optional[ReadType]:
        db_obj = self.db.get(self.model, id)
        return self._snapshot(db_obj) if db_obj is not None else None

    @storage_guard
    def get_all(self) -> List[ReadType]:
        rows = self.db.query(self.model).order_by(self.model.id).all()
        return [self._snapshot(row) for row in rows]

    @storage_guard
    def update(self, record: Any) -> None:
        values = self._values(record)
        db_obj = self._get_or_raise(values.pop("id", None))

        for field, value in values.items():
            if field not in self.immutable_fields:
                setattr(db_obj, field, value)

        self._commit()

    @storage_guard
    def delete(self, id: int) -> None:
        db_obj = self._get_or_raise(id)
        self.db.delete(db_obj)
        self._commit()

    @storage_guard
    def clear(self) -> None:
        removed = self.db.query(self.model).delete()
        self._commit()
        logger.info("Collection cleared", collection=self.collection, removed=removed)
