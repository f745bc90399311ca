"""
SQLAlchemy Implementation of Warranty Repository.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from synergia.domain.models.warranty import Warranty
from synergia.domain.schemas.warranty import WarrantyRead
from synergia.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SQLAlchemyWarrantyRepository(SQLAlchemyRepository[Warranty, WarrantyRead]):
    """Warranty repository; registration date is written once and kept."""

    read_schema = WarrantyRead
    immutable_fields = {"data_registro"}

    def __init__(self, db: Session, autocommit: bool = True):
        super().__init__(db, Warranty, autocommit)

    def _prepare_new(self, values: Dict[str, Any]) -> Dict[str, Any]:
        if not values.get("data_registro"):
            values["data_registro"] = utc_now_iso()
        return values

    @storage_guard
    def list_by_lote(self, lote_id: int) -> List[WarrantyRead]:
        rows = (
            self.db.query(Warranty)
            .filter(Warranty.lote_id == lote_id)
            .order_by(Warranty.id)
            .all()
        )
        return [self._snapshot(row) for row in rows]
