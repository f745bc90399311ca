"""Company letterhead API routes."""

from typing import Optional

from fastapi import APIRouter, Depends

from synergia.domain.schemas.company_data import CompanyDataBase, CompanyDataRead
from synergia.infrastructure.repositories.entity_repository import EntityRepository
from synergia.interfaces.api.deps import require_session
from synergia.interfaces.deps import get_repository

router = APIRouter(prefix="/api/company", tags=["Company"], dependencies=[Depends(require_session)])


@router.get("", response_model=Optional[CompanyDataRead])
def get_company(repo: EntityRepository = Depends(get_repository)):
    return repo.company.get_company_data()


@router.put("", response_model=CompanyDataRead)
def put_company(body: CompanyDataBase, repo: EntityRepository = Depends(get_repository)):
    return repo.company.update_company_data(body)
