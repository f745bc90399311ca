"""Lotes API routes: CRUD, per-lote statistics and the warranties of a lote."""

from typing import List, Optional

from fastapi import APIRouter, Depends

from synergia.application.services.lote_service import lotes_with_stats
from synergia.application.services.search_service import (
    LOTE_SEARCH_FIELDS,
    filter_records,
    sort_by_recency,
)
from synergia.core.exceptions import EntityNotFoundException
from synergia.domain.schemas.lote import LoteBase, LoteCreate, LoteRead, LoteWithStats
from synergia.domain.schemas.warranty import WarrantyRead
from synergia.infrastructure.repositories.entity_repository import EntityRepository
from synergia.interfaces.api.crud import register_crud_routes
from synergia.interfaces.api.deps import require_session
from synergia.interfaces.deps import get_repository

router = APIRouter(prefix="/api/lotes", tags=["Lotes"], dependencies=[Depends(require_session)])


@router.get("/stats", response_model=List[LoteWithStats])
def lote_stats(q: Optional[str] = None, repo: EntityRepository = Depends(get_repository)):
    lotes = filter_records(sort_by_recency(repo.lotes.get_all()), q, LOTE_SEARCH_FIELDS)
    return lotes_with_stats(lotes, repo.warranties.get_all())


@router.get("/{lote_id}/warranties", response_model=List[WarrantyRead])
def lote_warranties(lote_id: int, repo: EntityRepository = Depends(get_repository)):
    if repo.lotes.get(lote_id) is None:
        raise EntityNotFoundException(
            f"Lote {lote_id} não encontrado", details={"collection": "lotes", "id": lote_id}
        )
    return repo.warranties.list_by_lote(lote_id)


register_crud_routes(
    router,
    collection="lotes",
    create_schema=LoteCreate,
    update_schema=LoteBase,
    read_schema=LoteRead,
    search_fields=LOTE_SEARCH_FIELDS,
)
