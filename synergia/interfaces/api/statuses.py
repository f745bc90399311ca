"""Custom statuses API routes, plus badge resolution for the UI."""

from typing import Optional

from fastapi import APIRouter, Depends

from synergia.application.services.search_service import STATUS_SEARCH_FIELDS
from synergia.application.services.status_service import resolve_status_badge
from synergia.domain.schemas.custom_status import (
    CustomStatusBase,
    CustomStatusCreate,
    CustomStatusRead,
    StatusBadge,
)
from synergia.infrastructure.repositories.entity_repository import EntityRepository
from synergia.interfaces.api.crud import register_crud_routes
from synergia.interfaces.api.deps import require_session
from synergia.interfaces.deps import get_repository

router = APIRouter(prefix="/api/statuses", tags=["Statuses"], dependencies=[Depends(require_session)])


@router.get("/badge", response_model=StatusBadge)
def status_badge(
    kind: str,
    status: Optional[str] = None,
    repo: EntityRepository = Depends(get_repository),
):
    return resolve_status_badge(kind, status, repo.statuses.get_all())


register_crud_routes(
    router,
    collection="statuses",
    create_schema=CustomStatusCreate,
    update_schema=CustomStatusBase,
    read_schema=CustomStatusRead,
    search_fields=STATUS_SEARCH_FIELDS,
)
