"""Pydantic schemas for the portable backup document."""

from typing import List, Optional

from pydantic import Field, field_validator

from synergia.domain.schemas.base import CamelModel
from synergia.domain.schemas.company_data import CompanyDataBase
from synergia.domain.schemas.custom_status import CustomStatusBase
from synergia.domain.schemas.devolucao import DevolucaoBase, ItemDevolucaoBase
from synergia.domain.schemas.lote import LoteBase
from synergia.domain.schemas.person import PersonBase
from synergia.domain.schemas.product import ProductBase
from synergia.domain.schemas.supplier import SupplierBase
from synergia.domain.schemas.warranty import WarrantyBase

# Backup records take every field as written: no defaults filled in, id kept when present.


class WarrantyRecord(WarrantyBase):
    id: Optional[int] = None
    status: Optional[str] = None


class LoteRecord(LoteBase):
    id: Optional[int] = None
    status: Optional[str] = None


class PersonRecord(PersonBase):
    id: Optional[int] = None


class SupplierRecord(SupplierBase):
    id: Optional[int] = None


class ProductRecord(ProductBase):
    id: Optional[int] = None


class CustomStatusRecord(CustomStatusBase):
    id: Optional[int] = None


class DevolucaoRecord(DevolucaoBase):
    """Parent id kept, item ids and back references dropped."""
    id: Optional[int] = None
    status: Optional[str] = None
    itens: List[ItemDevolucaoBase] = Field(default_factory=list)

    @field_validator("itens", mode="before")
    @classmethod
    def _null_itens(cls, value):
        return [] if value is None else value


class BackupDocument(CamelModel):
    warranties: List[WarrantyRecord] = Field(default_factory=list)
    persons: List[PersonRecord] = Field(default_factory=list)
    suppliers: List[SupplierRecord] = Field(default_factory=list)
    lotes: List[LoteRecord] = Field(default_factory=list)
    devolucoes: List[DevolucaoRecord] = Field(default_factory=list)
    company_data: Optional[CompanyDataBase] = None
    # None means the file does not carry the collection; restore leaves it untouched
    products: Optional[List[ProductRecord]] = None
    statuses: Optional[List[CustomStatusRecord]] = None
    legacy: bool = Field(default=False, exclude=True)


class RestoreSummary(CamelModel):
    warranties: int = 0
    persons: int = 0
    suppliers: int = 0
    lotes: int = 0
    devolucoes: int = 0
    company_data: int = 0
    products: int = 0
    statuses: int = 0
    total: int = 0
    legacy: bool = False

    @classmethod
    def of(cls, doc: BackupDocument) -> "RestoreSummary":
        counts = {
            "warranties": len(doc.warranties),
            "persons": len(doc.persons),
            "suppliers": len(doc.suppliers),
            "lotes": len(doc.lotes),
            "devolucoes": len(doc.devolucoes),
            "company_data": 1 if doc.company_data is not None else 0,
            "products": len(doc.products or []),
            "statuses": len(doc.statuses or []),
        }
        return cls(**counts, total=sum(counts.values()), legacy=doc.legacy)


class RestoreStatus(CamelModel):
    state: str
    data_version: int
    pending: Optional[RestoreSummary] = None
