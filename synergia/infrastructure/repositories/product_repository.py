"""
SQLAlchemy Implementation of Product Repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from synergia.domain.models.product import Product
from synergia.domain.repositories.product_repository import ProductRepository
from synergia.domain.schemas.product import ProductRead
from synergia.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard


class SQLAlchemyProductRepository(SQLAlchemyRepository[Product, ProductRead], ProductRepository):
    """Product catalog repository. ``codigo`` is unique."""

    read_schema = ProductRead

    def __init__(self, db: Session, autocommit: bool = True):
        super().__init__(db, Product, autocommit)

    @storage_guard
    def get_by_code(self, codigo: str) -> Optional[ProductRead]:
        db_obj = self.db.query(Product).filter(Product.codigo == codigo).first()
        return self._snapshot(db_obj) if db_obj is not None else None
