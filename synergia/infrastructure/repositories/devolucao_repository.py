"""
SQLAlchemy Implementation of Devolucao Repository.

A return and its line items form one aggregate: items are written, replaced
and removed only through the parent, in the same flush as the parent.
"""

from typing import Any, Dict, List, Optional, Sequence

import structlog
from pydantic import BaseModel
from sqlalchemy.orm import Session, selectinload

from synergia.domain.models.devolucao import Devolucao, ItemDevolucao
from synergia.domain.repositories.devolucao_repository import DevolucaoRepository
from synergia.domain.schemas.devolucao import DevolucaoRead, ItemDevolucaoBase, ItemDevolucaoRead
from synergia.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard

logger = structlog.get_logger(__name__)


def _itens_of(record: Any) -> Optional[List[Any]]:
    if isinstance(record, BaseModel):
        return getattr(record, "itens", None)
    return record.get("itens") if hasattr(record, "get") else None


class SQLAlchemyDevolucaoRepository(SQLAlchemyRepository[Devolucao, DevolucaoRead], DevolucaoRepository):
    read_schema = DevolucaoRead

    def __init__(self, db: Session, autocommit: bool = True):
        super().__init__(db, Devolucao, autocommit)

    def _build_itens(self, itens: Sequence[Any]) -> List[ItemDevolucao]:
        built = []
        for item in itens or []:
            # Caller-supplied ids and back references are never trusted
            data: Dict[str, Any] = ItemDevolucaoBase.model_validate(item).model_dump()
            built.append(ItemDevolucao(**data))
        return built

    def _persist(self, values: Dict[str, Any], itens: Sequence[Any]) -> int:
        db_obj = Devolucao(**values)
        db_obj.itens = self._build_itens(itens)
        self.db.add(db_obj)
        self._commit()
        logger.debug("Devolucao added", id=db_obj.id, itens=len(db_obj.itens))
        return db_obj.id

    @storage_guard
    def add_devolucao(self, parent: Any, itens: Sequence[Any]) -> int:
        values = self._values(parent)
        values.pop("id", None)
        return self._persist(values, itens)

    def add(self, record: Any) -> int:
        return self.add_devolucao(record, _itens_of(record) or [])

    @storage_guard
    def insert_snapshot(self, record: Any) -> int:
        return self._persist(self._values(record), _itens_of(record) or [])

    @storage_guard
    def update_devolucao(self, parent: Any, itens: Sequence[Any]) -> None:
        values = self._values(parent)
        db_obj = self._get_or_raise(values.pop("id", None))

        for field, value in values.items():
            setattr(db_obj, field, value)
        # delete-orphan cascade drops the previous items in the same flush
        db_obj.itens = self._build_itens(itens)
        self._commit()

    @storage_guard
    def update(self, record: Any) -> None:
        itens = _itens_of(record)
        if itens is not None:
            return self.update_devolucao(record, itens)
        return super().update(record)

    @storage_guard
    def get_all(self) -> List[DevolucaoRead]:
        rows = (
            self.db.query(Devolucao)
            .options(selectinload(Devolucao.itens))
            .order_by(Devolucao.id)
            .all()
        )
        return [self._snapshot(row) for row in rows]

    @storage_guard
    def list_itens(self, devolucao_id: int) -> List[ItemDevolucaoRead]:
        rows = (
            self.db.query(ItemDevolucao)
            .filter(ItemDevolucao.devolucao_id == devolucao_id)
            .order_by(ItemDevolucao.id)
            .all()
        )
        return [ItemDevolucaoRead.model_validate(row) for row in rows]

    @storage_guard
    def clear(self) -> None:
        self.db.query(ItemDevolucao).delete()
        removed = self.db.query(Devolucao).delete()
        self._commit()
        self.db.expire_all()
        logger.info("Collection cleared", collection=self.collection, removed=removed)
