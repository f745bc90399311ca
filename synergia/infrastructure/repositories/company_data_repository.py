"""
SQLAlchemy Implementation of CompanyData Repository.
"""

from typing import Any, Optional

from sqlalchemy.orm import Session

from synergia.domain.models.company_data import COMPANY_DATA_ID, CompanyData
from synergia.domain.repositories.company_data_repository import CompanyDataRepository
from synergia.domain.schemas.company_data import CompanyDataRead
from synergia.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard


class SQLAlchemyCompanyDataRepository(SQLAlchemyRepository[CompanyData, CompanyDataRead], CompanyDataRepository):
    """Singleton row; always stored under the fixed id."""

    read_schema = CompanyDataRead

    def __init__(self, db: Session, autocommit: bool = True):
        super().__init__(db, CompanyData, autocommit)

    def get_company_data(self) -> Optional[CompanyDataRead]:
        return self.get(COMPANY_DATA_ID)

    @storage_guard
    def update_company_data(self, data: Any) -> CompanyDataRead:
        values = self._values(data)
        values["id"] = COMPANY_DATA_ID
        db_obj = self.db.merge(CompanyData(**values))
        self._commit()
        return self._snapshot(db_obj)

    def insert_snapshot(self, record: Any) -> int:
        self.update_company_data(record)
        return COMPANY_DATA_ID
