"""Pydantic schemas for Lotes (batches) and their statistics."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from synergia.domain.schemas.base import CamelModel


class LoteStatus(str, Enum):
    ABERTO = "Aberto"
    ENVIADO = "Enviado"
    APROVADO_PARCIALMENTE = "Aprovado Parcialmente"
    APROVADO_TOTALMENTE = "Aprovado Totalmente"
    RECUSADO = "Recusado"


class LoteAttachment(CamelModel):
    name: Optional[str] = None
    url: Optional[str] = None


class LoteBase(CamelModel):
    nome: Optional[str] = None
    fornecedor: Optional[str] = None
    data_criacao: Optional[str] = None
    data_envio: Optional[str] = None
    nota_fiscal_saida: Optional[str] = None
    notas_fiscais_retorno: Optional[str] = None
    status: Optional[str] = LoteStatus.ABERTO.value
    attachments: Optional[List[LoteAttachment]] = None


class LoteCreate(LoteBase):
    nome: str
    fornecedor: str


class LoteRead(LoteBase):
    id: int


class LoteStatusCounts(CamelModel):
    aprovados: int = 0
    recusados: int = 0
    pendentes: int = 0
    pagos: int = 0


class LoteWithStats(LoteRead):
    item_count: int = 0
    status_counts: LoteStatusCounts = Field(default_factory=LoteStatusCounts)
