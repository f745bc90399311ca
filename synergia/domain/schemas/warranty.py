"""Pydantic schemas for Warranty claims."""

from enum import Enum
from typing import List, Optional

from synergia.domain.schemas.base import CamelModel


class WarrantyStatus(str, Enum):
    EM_ANALISE = "Em análise"
    APROVADA = "Aprovada"
    RECUSADA = "Recusada"
    PAGA = "Paga"


class WarrantyBase(CamelModel):
    codigo: Optional[str] = None
    descricao: Optional[str] = None
    fornecedor: Optional[str] = None
    quantidade: Optional[float] = None
    defeito: Optional[str] = None
    requisicao_venda: Optional[str] = None
    requisicoes_garantia: Optional[str] = None
    nf_compra: Optional[str] = None
    valor_compra: Optional[str] = None
    cliente: Optional[str] = None
    mecanico: Optional[str] = None
    nota_fiscal_retorno: Optional[str] = None
    nota_fiscal_saida: Optional[str] = None
    observacao: Optional[str] = None
    data_registro: Optional[str] = None
    # Built-in WarrantyStatus values or any CustomStatus label
    status: Optional[str] = WarrantyStatus.EM_ANALISE.value
    lote_id: Optional[int] = None
    photos: Optional[List[str]] = None


class WarrantyCreate(WarrantyBase):
    pass


class WarrantyRead(WarrantyBase):
    id: int
