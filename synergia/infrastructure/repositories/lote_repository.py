"""
SQLAlchemy Implementation of Lote Repository.
"""

import structlog
from sqlalchemy.orm import Session

from synergia.domain.models.lote import Lote
from synergia.domain.models.warranty import Warranty
from synergia.domain.schemas.lote import LoteRead
from synergia.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard

logger = structlog.get_logger(__name__)


class SQLAlchemyLoteRepository(SQLAlchemyRepository[Lote, LoteRead]):
    """Lote repository. Removing a lote releases its warranties instead of deleting them."""

    read_schema = LoteRead

    def __init__(self, db: Session, autocommit: bool = True):
        super().__init__(db, Lote, autocommit)

    def _unlink_warranties(self, *criteria) -> int:
        return (
            self.db.query(Warranty)
            .filter(*criteria)
            .update({Warranty.lote_id: None}, synchronize_session=False)
        )

    @storage_guard
    def delete(self, id: int) -> None:
        db_obj = self._get_or_raise(id)
        unlinked = self._unlink_warranties(Warranty.lote_id == id)
        self.db.delete(db_obj)
        self._commit()
        # Bulk update bypassed the identity map
        self.db.expire_all()
        logger.info("Lote deleted", lote_id=id, unlinked_warranties=unlinked)

    @storage_guard
    def clear(self) -> None:
        self._unlink_warranties(Warranty.lote_id.isnot(None))
        removed = self.db.query(Lote).delete()
        self._commit()
        self.db.expire_all()
        logger.info("Collection cleared", collection=self.collection, removed=removed)
