"""Pydantic schemas for user-defined statuses."""

from typing import List, Literal, Optional

from pydantic import Field

from synergia.domain.schemas.base import CamelModel

StatusApplicability = Literal["garantia", "lote", "devolucao", "acao"]


class CustomStatusBase(CamelModel):
    nome: Optional[str] = None
    cor: Optional[str] = None
    aplicavel_em: Optional[List[str]] = None


class CustomStatusCreate(CustomStatusBase):
    nome: str = Field(min_length=1)
    cor: str = Field(pattern=r"^#[0-9A-Fa-f]{6}$")
    aplicavel_em: List[StatusApplicability] = Field(min_length=1)


class CustomStatusRead(CustomStatusBase):
    id: int


class StatusBadge(CamelModel):
    status: str
    variant: str
    color: Optional[str] = None
