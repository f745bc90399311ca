"""Pydantic schemas for Devolucoes (returns) and their line items."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from synergia.domain.schemas.base import CamelModel


class ReturnStatus(str, Enum):
    RECEBIDO = "Recebido"
    AGUARDANDO_PECAS = "Aguardando Peças"
    FINALIZADA = "Finalizada"
    CANCELADA = "Cancelada"


class RequisitionAction(str, Enum):
    ALTERADA = "Alterada"
    EXCLUIDA = "Excluída"


class ItemDevolucaoBase(CamelModel):
    """A line item as the caller supplies it: no id, no parent reference."""
    codigo_peca: Optional[str] = None
    descricao_peca: Optional[str] = None
    quantidade: Optional[float] = None


class ItemDevolucaoRead(ItemDevolucaoBase):
    id: int
    devolucao_id: int


class DevolucaoBase(CamelModel):
    cliente: Optional[str] = None
    mecanico: Optional[str] = None
    requisicao_venda: Optional[str] = None
    acao_requisicao: Optional[str] = None
    data_venda: Optional[str] = None
    data_devolucao: Optional[str] = None
    status: Optional[str] = ReturnStatus.RECEBIDO.value
    observacao_geral: Optional[str] = None


class DevolucaoCreate(DevolucaoBase):
    cliente: str
    requisicao_venda: str
    itens: List[ItemDevolucaoBase] = Field(default_factory=list)


class DevolucaoRead(DevolucaoBase):
    id: int
    itens: List[ItemDevolucaoRead] = Field(default_factory=list)

