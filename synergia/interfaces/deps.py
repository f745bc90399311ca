"""
API Dependencies.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from synergia.application.services.restore_service import RestoreOrchestrator
from synergia.infrastructure.database import get_db
from synergia.infrastructure.repositories.entity_repository import EntityRepository


def get_repository(db: Session = Depends(get_db)) -> EntityRepository:
    """Get the per-request repository facade."""
    return EntityRepository(db)


def get_restore_orchestrator(request: Request) -> RestoreOrchestrator:
    """Process-wide restore state machine, created at startup."""
    return request.app.state.restore_orchestrator
