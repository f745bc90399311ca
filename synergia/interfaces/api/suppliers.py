"""Suppliers API routes."""

from fastapi import APIRouter, Depends

from synergia.application.services.search_service import SUPPLIER_SEARCH_FIELDS
from synergia.domain.schemas.supplier import SupplierBase, SupplierCreate, SupplierRead
from synergia.interfaces.api.crud import register_crud_routes
from synergia.interfaces.api.deps import require_session

router = APIRouter(prefix="/api/suppliers", tags=["Suppliers"], dependencies=[Depends(require_session)])

register_crud_routes(
    router,
    collection="suppliers",
    create_schema=SupplierCreate,
    update_schema=SupplierBase,
    read_schema=SupplierRead,
    search_fields=SUPPLIER_SEARCH_FIELDS,
)
