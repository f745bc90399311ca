"""Persons (customers and mechanics) API routes."""

from fastapi import APIRouter, Depends

from synergia.application.services.search_service import PERSON_SEARCH_FIELDS
from synergia.domain.schemas.person import PersonBase, PersonCreate, PersonRead
from synergia.interfaces.api.crud import register_crud_routes
from synergia.interfaces.api.deps import require_session

router = APIRouter(prefix="/api/persons", tags=["Persons"], dependencies=[Depends(require_session)])

register_crud_routes(
    router,
    collection="persons",
    create_schema=PersonCreate,
    update_schema=PersonBase,
    read_schema=PersonRead,
    search_fields=PERSON_SEARCH_FIELDS,
)
