"""Product catalog API routes."""

from fastapi import APIRouter, Depends

from synergia.application.services.search_service import PRODUCT_SEARCH_FIELDS
from synergia.core.exceptions import EntityNotFoundException
from synergia.domain.schemas.product import ProductBase, ProductCreate, ProductRead
from synergia.infrastructure.repositories.entity_repository import EntityRepository
from synergia.interfaces.api.crud import register_crud_routes
from synergia.interfaces.api.deps import require_session
from synergia.interfaces.deps import get_repository

router = APIRouter(prefix="/api/products", tags=["Products"], dependencies=[Depends(require_session)])


@router.get("/by-code/{codigo}", response_model=ProductRead)
def product_by_code(codigo: str, repo: EntityRepository = Depends(get_repository)):
    product = repo.products.get_by_code(codigo)
    if product is None:
        raise EntityNotFoundException(
            f"Produto {codigo} não encontrado", details={"codigo": codigo}
        )
    return product


register_crud_routes(
    router,
    collection="products",
    create_schema=ProductCreate,
    update_schema=ProductBase,
    read_schema=ProductRead,
    search_fields=PRODUCT_SEARCH_FIELDS,
)
