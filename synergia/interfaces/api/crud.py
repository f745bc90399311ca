"""Shared list/create/read/update/delete/clear routes for one collection."""

from typing import Any, Callable, List, Optional, Sequence, Type

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from synergia.application.services.search_service import filter_records, sort_by_recency
from synergia.core.exceptions import EntityNotFoundException
from synergia.infrastructure.repositories.entity_repository import EntityRepository
from synergia.interfaces.deps import get_repository

Matcher = Callable[[Sequence[Any], Optional[str]], List[Any]]


def register_crud_routes(
    router: APIRouter,
    *,
    collection: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    search_fields: Sequence[str] = (),
    matcher: Optional[Matcher] = None,
) -> APIRouter:
    """Attach the standard routes. Call after any fixed-path routes are declared."""

    def collection_repo(repo: EntityRepository = Depends(get_repository)):
        return getattr(repo, collection)

    def search(records, q):
        if matcher is not None:
            return matcher(records, q)
        return filter_records(records, q, search_fields)

    @router.get("", response_model=List[read_schema])
    def list_records(q: Optional[str] = None, repo=Depends(collection_repo)):
        return search(sort_by_recency(repo.get_all()), q)

    @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    def create_record(body: create_schema, repo=Depends(collection_repo)):
        return repo.get(repo.add(body))

    @router.delete("", status_code=status.HTTP_204_NO_CONTENT)
    def clear_records(repo=Depends(collection_repo)):
        repo.clear()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get("/{record_id}", response_model=read_schema)
    def get_record(record_id: int, repo=Depends(collection_repo)):
        record = repo.get(record_id)
        if record is None:
            raise EntityNotFoundException(
                f"{collection}: registro {record_id} não encontrado",
                details={"collection": collection, "id": record_id},
            )
        return record

    @router.put("/{record_id}", response_model=read_schema)
    def update_record(record_id: int, body: update_schema, repo=Depends(collection_repo)):
        # Only the fields the client sent are written
        changes = body.model_dump(exclude_unset=True)
        changes["id"] = record_id
        repo.update(changes)
        return repo.get(record_id)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_record(record_id: int, repo=Depends(collection_repo)):
        repo.delete(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
