"""
Restore orchestrator: load a backup, show what it holds, then replace the store.

The store is only touched by ``confirm``, inside one transaction, so a
failed restore leaves the previous data in place.
"""

from enum import Enum
from threading import Lock
from typing import Iterable, Optional, Union

import structlog

from synergia.application.services.backup_codec import decode
from synergia.core.events import DataChangedSignal, data_changed
from synergia.core.exceptions import (
    AppError,
    PartialRestoreFailureException,
    RestoreStateException,
    StorageUnavailableException,
)
from synergia.domain.schemas.backup import BackupDocument, RestoreStatus, RestoreSummary
from synergia.infrastructure.database import LocalStore
from synergia.infrastructure.repositories.entity_repository import EntityRepository

logger = structlog.get_logger(__name__)

ALWAYS_REPLACED = ("devolucoes", "warranties", "lotes", "persons", "suppliers", "company")


class RestoreState(str, Enum):
    IDLE = "idle"
    PENDING_CONFIRMATION = "pending_confirmation"
    COMMITTING = "committing"


def _ids_first(records: Iterable):
    # Explicit ids go in before autoincremented ones so they cannot collide
    return sorted(records, key=lambda record: record.id is None)


class RestoreOrchestrator:
    def __init__(self, store: LocalStore, signal: DataChangedSignal = data_changed):
        self.store = store
        self.signal = signal
        self._lock = Lock()
        self._state = RestoreState.IDLE
        self._pending: Optional[BackupDocument] = None

    @property
    def state(self) -> RestoreState:
        return self._state

    @property
    def pending_summary(self) -> Optional[RestoreSummary]:
        with self._lock:
            return RestoreSummary.of(self._pending) if self._pending is not None else None

    def status(self) -> RestoreStatus:
        return RestoreStatus(
            state=self._state.value,
            data_version=self.signal.version,
            pending=self.pending_summary,
        )

    def load(self, raw: Union[bytes, str]) -> RestoreSummary:
        """Decode a backup and hold it until confirmed. Never writes."""
        with self._lock:
            if self._state == RestoreState.COMMITTING:
                raise RestoreStateException("Uma restauração já está em andamento")
            try:
                doc = decode(raw)
            except AppError:
                self._pending = None
                self._state = RestoreState.IDLE
                raise
            self._pending = doc
            self._state = RestoreState.PENDING_CONFIRMATION

        summary = RestoreSummary.of(doc)
        logger.info("Restore pending confirmation", total=summary.total, legacy=summary.legacy)
        return summary

    def cancel(self) -> None:
        with self._lock:
            if self._state == RestoreState.COMMITTING:
                raise RestoreStateException("Uma restauração já está em andamento")
            dropped = self._pending is not None
            self._pending = None
            self._state = RestoreState.IDLE
        logger.info("Restore cancelled", had_pending=dropped)

    def confirm(self) -> RestoreSummary:
        """Replace the store with the pending document, all or nothing."""
        with self._lock:
            if self._state != RestoreState.PENDING_CONFIRMATION or self._pending is None:
                raise RestoreStateException("Nenhum backup carregado para restaurar")
            doc = self._pending
            self._state = RestoreState.COMMITTING

        summary = RestoreSummary.of(doc)
        try:
            self._replace_all(doc)
        except Exception as exc:
            rolled_back = not (
                isinstance(exc, StorageUnavailableException) and exc.details.get("rollback_failed")
            )
            logger.exception("Restore failed", rolled_back=rolled_back)
            raise PartialRestoreFailureException(
                "Falha ao gravar os dados do backup",
                details={
                    "rolled_back": rolled_back,
                    "reason": getattr(exc, "message", str(exc)),
                },
            ) from exc
        finally:
            with self._lock:
                self._pending = None
                self._state = RestoreState.IDLE

        logger.info("Restore committed", **summary.model_dump())
        self.signal.send()
        return summary

    def _replace_all(self, doc: BackupDocument) -> None:
        with self.store.transaction() as repo:
            self._clear(repo, doc)
            self._insert(repo, doc)

    def _clear(self, repo: EntityRepository, doc: BackupDocument) -> None:
        names = list(ALWAYS_REPLACED)
        if doc.products is not None:
            names.append("products")
        if doc.statuses is not None:
            names.append("statuses")
        repo.clear_all(names)

    def _insert(self, repo: EntityRepository, doc: BackupDocument) -> None:
        # Lotes before warranties: warranties reference them
        for lote in _ids_first(doc.lotes):
            repo.lotes.insert_snapshot(lote)
        for warranty in _ids_first(doc.warranties):
            repo.warranties.insert_snapshot(warranty)
        for person in _ids_first(doc.persons):
            repo.persons.insert_snapshot(person)
        for supplier in _ids_first(doc.suppliers):
            repo.suppliers.insert_snapshot(supplier)
        for product in _ids_first(doc.products or []):
            repo.products.insert_snapshot(product)
        for custom_status in _ids_first(doc.statuses or []):
            repo.statuses.insert_snapshot(custom_status)
        for devolucao in _ids_first(doc.devolucoes):
            repo.devolucoes.insert_snapshot(devolucao)
        if doc.company_data is not None:
            repo.company.update_company_data(doc.company_data)
