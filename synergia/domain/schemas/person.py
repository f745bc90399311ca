"""Pydantic schemas for Persons (customers and mechanics)."""

from typing import Literal, Optional

from synergia.domain.schemas.base import CamelModel

PersonType = Literal["Cliente", "Mecânico", "Ambos"]


class PersonBase(CamelModel):
    nome: Optional[str] = None
    nome_fantasia: Optional[str] = None
    tipo: Optional[str] = None
    cpf_cnpj: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    cep: Optional[str] = None
    endereco: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    observacao: Optional[str] = None


class PersonCreate(PersonBase):
    nome: str
    tipo: PersonType


class PersonRead(PersonBase):
    id: int
