"""
SQLAlchemy Implementation of Supplier Repository.
"""

from sqlalchemy.orm import Session

from synergia.domain.models.supplier import Supplier
from synergia.domain.schemas.supplier import SupplierRead
from synergia.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemySupplierRepository(SQLAlchemyRepository[Supplier, SupplierRead]):
    read_schema = SupplierRead

    def __init__(self, db: Session, autocommit: bool = True):
        super().__init__(db, Supplier, autocommit)
