"""Pydantic schemas for Suppliers."""

from typing import Optional

from synergia.domain.schemas.base import CamelModel


class SupplierBase(CamelModel):
    razao_social: Optional[str] = None
    nome_fantasia: Optional[str] = None
    cnpj: Optional[str] = None
    cidade: Optional[str] = None
    cep: Optional[str] = None
    endereco: Optional[str] = None
    bairro: Optional[str] = None


class SupplierCreate(SupplierBase):
    razao_social: str
    nome_fantasia: str
    cnpj: str
    cidade: str


class SupplierRead(SupplierBase):
    id: int
