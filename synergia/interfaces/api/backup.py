"""Backup API routes: full export, two-step import, CSV export."""

from datetime import datetime
from typing import List, Optional

import pytz
import structlog
from fastapi import APIRouter, Depends, File, Query, Response, UploadFile

from synergia.application.services.backup_codec import backup_filename, dump_backup, encode
from synergia.application.services.csv_export_service import build_csv, export_filename
from synergia.application.services.restore_service import RestoreOrchestrator
from synergia.config import get_settings
from synergia.domain.schemas.backup import RestoreStatus, RestoreSummary
from synergia.infrastructure.repositories.entity_repository import EntityRepository
from synergia.interfaces.api.deps import require_session
from synergia.interfaces.deps import get_repository, get_restore_orchestrator

logger = structlog.get_logger(__name__)
settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)

router = APIRouter(prefix="/api/backup", tags=["Backup"], dependencies=[Depends(require_session)])


def _attachment(content: bytes, filename: str, media_type: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/export")
def export_backup(repo: EntityRepository = Depends(get_repository)):
    content = dump_backup(encode(repo))
    return _attachment(content, backup_filename(datetime.now(tz).date()), "application/json")


@router.post("/import", response_model=RestoreSummary)
async def import_backup(
    file: UploadFile = File(...),
    orchestrator: RestoreOrchestrator = Depends(get_restore_orchestrator),
):
    raw = await file.read()
    logger.info("Backup uploaded", filename=file.filename, size=len(raw))
    return orchestrator.load(raw)


@router.post("/import/confirm", response_model=RestoreSummary)
def confirm_import(orchestrator: RestoreOrchestrator = Depends(get_restore_orchestrator)):
    return orchestrator.confirm()


@router.post("/import/cancel", response_model=RestoreStatus)
def cancel_import(orchestrator: RestoreOrchestrator = Depends(get_restore_orchestrator)):
    orchestrator.cancel()
    return orchestrator.status()


@router.get("/status", response_model=RestoreStatus)
def restore_status(orchestrator: RestoreOrchestrator = Depends(get_restore_orchestrator)):
    return orchestrator.status()


@router.get("/csv/{data_type}")
def export_csv(
    data_type: str,
    fields: Optional[List[str]] = Query(None),
    repo: EntityRepository = Depends(get_repository),
):
    content = build_csv(repo, data_type, fields)
    return _attachment(content, export_filename(data_type), "text/csv; charset=utf-8")
