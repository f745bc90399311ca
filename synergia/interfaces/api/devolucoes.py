"""Devolucoes (returns) API routes. Items are only reachable through their return."""

from typing import List, Optional

from fastapi import APIRouter, Depends

from synergia.application.services.search_service import filter_devolucoes
from synergia.core.exceptions import EntityNotFoundException
from synergia.domain.schemas.devolucao import (
    DevolucaoBase,
    DevolucaoCreate,
    DevolucaoRead,
    ItemDevolucaoBase,
    ItemDevolucaoRead,
)
from synergia.infrastructure.repositories.entity_repository import EntityRepository
from synergia.interfaces.api.crud import register_crud_routes
from synergia.interfaces.api.deps import require_session
from synergia.interfaces.deps import get_repository

router = APIRouter(prefix="/api/devolucoes", tags=["Devolucoes"], dependencies=[Depends(require_session)])


class DevolucaoUpdate(DevolucaoBase):
    """When ``itens`` is sent the whole item list is replaced."""
    itens: Optional[List[ItemDevolucaoBase]] = None


@router.get("/{devolucao_id}/itens", response_model=List[ItemDevolucaoRead])
def devolucao_itens(devolucao_id: int, repo: EntityRepository = Depends(get_repository)):
    if repo.devolucoes.get(devolucao_id) is None:
        raise EntityNotFoundException(
            f"Devolução {devolucao_id} não encontrada",
            details={"collection": "devolucoes", "id": devolucao_id},
        )
    return repo.devolucoes.list_itens(devolucao_id)


register_crud_routes(
    router,
    collection="devolucoes",
    create_schema=DevolucaoCreate,
    update_schema=DevolucaoUpdate,
    read_schema=DevolucaoRead,
    matcher=filter_devolucoes,
)
