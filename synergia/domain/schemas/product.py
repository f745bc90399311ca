"""Pydantic schemas for the Product catalog."""

from typing import Optional

from synergia.domain.schemas.base import CamelModel


class ProductBase(CamelModel):
    codigo: Optional[str] = None
    descricao: Optional[str] = None
    referencia: Optional[str] = None
    marca: Optional[str] = None


class ProductCreate(ProductBase):
    codigo: str
    descricao: str


class ProductRead(ProductBase):
    id: int
