"""
SQLAlchemy Implementation of CustomStatus Repository.
"""

from typing import Optional

import structlog
from sqlalchemy.orm import Session

from synergia.domain.models.custom_status import CustomStatus
from synergia.domain.schemas.custom_status import CustomStatusRead
from synergia.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard

logger = structlog.get_logger(__name__)

DEFAULT_STATUSES = [
    {"nome": "Aguardando Envio", "cor": "#FBBF24", "aplicavel_em": ["garantia"]},
    {"nome": "Enviado para Análise", "cor": "#3B82F6", "aplicavel_em": ["garantia", "lote"]},
    {"nome": "Aprovada - Peça Nova", "cor": "#22C55E", "aplicavel_em": ["garantia"]},
    {"nome": "Aprovada - Crédito NF", "cor": "#8B5CF6", "aplicavel_em": ["garantia"]},
    {"nome": "Aprovada - Crédito Boleto", "cor": "#15803D", "aplicavel_em": ["garantia"]},
    {"nome": "Recusada", "cor": "#EF4444", "aplicavel_em": ["garantia", "lote"]},
    {"nome": "Aberto", "cor": "#6B7280", "aplicavel_em": ["lote"]},
    {"nome": "Aprovado Parcialmente", "cor": "#16A34A", "aplicavel_em": ["lote"]},
    {"nome": "Aprovado Totalmente", "cor": "#15803D", "aplicavel_em": ["lote"]},
    {"nome": "Recebido", "cor": "#6B7280", "aplicavel_em": ["devolucao"]},
    {"nome": "Aguardando Peças", "cor": "#FBBF24", "aplicavel_em": ["devolucao"]},
    {"nome": "Finalizada", "cor": "#22C55E", "aplicavel_em": ["devolucao"]},
    {"nome": "Cancelada", "cor": "#EF4444", "aplicavel_em": ["devolucao"]},
]


class SQLAlchemyStatusRepository(SQLAlchemyRepository[CustomStatus, CustomStatusRead]):
    read_schema = CustomStatusRead

    def __init__(self, db: Session, autocommit: bool = True):
        super().__init__(db, CustomStatus, autocommit)

    @storage_guard
    def get_by_name(self, nome: str) -> Optional[CustomStatusRead]:
        db_obj = self.db.query(CustomStatus).filter(CustomStatus.nome == nome).first()
        return self._snapshot(db_obj) if db_obj is not None else None

    @storage_guard
    def seed_defaults(self) -> int:
        """Insert the stock statuses into an empty collection. Returns how many were added."""
        if self.db.query(CustomStatus.id).first() is not None:
            return 0
        self.db.add_all(CustomStatus(**dict(status)) for status in DEFAULT_STATUSES)
        self._commit()
        logger.info("Default statuses seeded", count=len(DEFAULT_STATUSES))
        return len(DEFAULT_STATUSES)
