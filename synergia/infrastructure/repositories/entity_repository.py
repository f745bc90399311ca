"""
One repository per collection, bound to a single session.
"""

from typing import Iterable, Optional

import structlog
from sqlalchemy.orm import Session

# Model registration on Base.metadata happens through these imports
from synergia.infrastructure.repositories.company_data_repository import SQLAlchemyCompanyDataRepository
from synergia.infrastructure.repositories.devolucao_repository import SQLAlchemyDevolucaoRepository
from synergia.infrastructure.repositories.lote_repository import SQLAlchemyLoteRepository
from synergia.infrastructure.repositories.person_repository import SQLAlchemyPersonRepository
from synergia.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from synergia.infrastructure.repositories.status_repository import SQLAlchemyStatusRepository
from synergia.infrastructure.repositories.supplier_repository import SQLAlchemySupplierRepository
from synergia.infrastructure.repositories.warranty_repository import SQLAlchemyWarrantyRepository

logger = structlog.get_logger(__name__)

# Children before parents
CLEAR_ORDER = (
    "devolucoes",
    "warranties",
    "lotes",
    "persons",
    "suppliers",
    "products",
    "statuses",
    "company",
)


class EntityRepository:
    def __init__(self, db: Session, autocommit: bool = True):
        self.db = db
        self.warranties = SQLAlchemyWarrantyRepository(db, autocommit)
        self.persons = SQLAlchemyPersonRepository(db, autocommit)
        self.suppliers = SQLAlchemySupplierRepository(db, autocommit)
        self.lotes = SQLAlchemyLoteRepository(db, autocommit)
        self.devolucoes = SQLAlchemyDevolucaoRepository(db, autocommit)
        self.products = SQLAlchemyProductRepository(db, autocommit)
        self.statuses = SQLAlchemyStatusRepository(db, autocommit)
        self.company = SQLAlchemyCompanyDataRepository(db, autocommit)

    def clear_all(self, names: Optional[Iterable[str]] = None) -> None:
        """Clear the named collections (every collection when None)."""
        wanted = set(CLEAR_ORDER if names is None else names)
        unknown = wanted - set(CLEAR_ORDER)
        if unknown:
            raise ValueError(f"Unknown collections: {sorted(unknown)}")

        for name in CLEAR_ORDER:
            if name in wanted:
                getattr(self, name).clear()
        logger.info("Collections cleared", collections=[n for n in CLEAR_ORDER if n in wanted])
