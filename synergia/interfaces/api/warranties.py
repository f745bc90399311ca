"""Warranties API routes."""

from fastapi import APIRouter, Depends

from synergia.application.services.search_service import WARRANTY_SEARCH_FIELDS
from synergia.domain.schemas.warranty import WarrantyBase, WarrantyCreate, WarrantyRead
from synergia.interfaces.api.crud import register_crud_routes
from synergia.interfaces.api.deps import require_session

router = APIRouter(prefix="/api/warranties", tags=["Warranties"], dependencies=[Depends(require_session)])

register_crud_routes(
    router,
    collection="warranties",
    create_schema=WarrantyCreate,
    update_schema=WarrantyBase,
    read_schema=WarrantyRead,
    search_fields=WARRANTY_SEARCH_FIELDS,
)
