"""Pydantic schemas for the company letterhead singleton."""

from typing import Optional

from synergia.domain.schemas.base import CamelModel


class CompanyDataBase(CamelModel):
    nome_empresa: Optional[str] = None
    cnpj: Optional[str] = None
    cep: Optional[str] = None
    endereco: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None


class CompanyDataRead(CompanyDataBase):
    id: int
