"""
Backup codec: the whole store to one JSON document and back.

Two input shapes are accepted. The current one is an object keyed by
collection; the legacy one is a bare array of warranty-like objects written
by older exports. Decoding is a strict gate: a document either decodes
completely or raises, it is never half-applied.
"""

import json
from collections import Counter
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Union

import structlog
from pydantic import ValidationError

from synergia.core.exceptions import BackupSyntaxException, BackupValidationException
from synergia.domain.schemas.backup import BackupDocument, DevolucaoRecord, RestoreSummary
from synergia.infrastructure.repositories.entity_repository import EntityRepository

logger = structlog.get_logger(__name__)

CORE_LIST_KEYS = ("warranties", "persons", "suppliers", "lotes", "devolucoes")
OPTIONAL_LIST_KEYS = ("products", "statuses")
COMPANY_KEY = "companyData"
LEGACY_MARKER_FIELDS = ("codigo", "descricao")
NATURAL_KEYS = {"products": "codigo", "statuses": "nome"}


def encode(repo: EntityRepository) -> BackupDocument:
    """Snapshot every collection into a backup document."""
    # Items go through a plain dict so their ids and back references are dropped
    devolucoes = [
        DevolucaoRecord.model_validate(devolucao.model_dump())
        for devolucao in repo.devolucoes.get_all()
    ]
    company = repo.company.get_company_data()

    doc = BackupDocument(
        warranties=[w.model_dump() for w in repo.warranties.get_all()],
        persons=[p.model_dump() for p in repo.persons.get_all()],
        suppliers=[s.model_dump() for s in repo.suppliers.get_all()],
        lotes=[lote.model_dump() for lote in repo.lotes.get_all()],
        devolucoes=devolucoes,
        company_data=company.model_dump(exclude={"id"}) if company else None,
        products=[p.model_dump() for p in repo.products.get_all()],
        statuses=[s.model_dump() for s in repo.statuses.get_all()],
    )
    logger.info("Backup encoded", **RestoreSummary.of(doc).model_dump(exclude={"legacy"}))
    return doc


def dump_backup(doc: BackupDocument) -> bytes:
    return doc.model_dump_json(by_alias=True, indent=2).encode("utf-8")


def backup_filename(day: date) -> str:
    return f"backup_synergia_os_{day.isoformat()}.json"


def _parse_json(raw: Union[bytes, str]) -> Any:
    try:
        text = raw.decode("utf-8-sig") if isinstance(raw, (bytes, bytearray)) else raw
        return json.loads(text)
    except UnicodeDecodeError as exc:
        raise BackupSyntaxException(
            "O arquivo não está codificado em UTF-8", details={"reason": str(exc)}
        ) from exc
    except ValueError as exc:
        raise BackupSyntaxException(
            "O arquivo não é um JSON válido", details={"reason": str(exc)}
        ) from exc


def _validation_error(message: str, exc: ValidationError) -> BackupValidationException:
    return BackupValidationException(
        message, details={"errors": json.loads(exc.json(include_url=False))}
    )


def _as_current(data: Any, failures: Dict[str, str]) -> Optional[BackupDocument]:
    if not isinstance(data, dict):
        failures["current"] = f"expected an object, got {type(data).__name__}"
        return None

    payload: Dict[str, Any] = {}
    for key in CORE_LIST_KEYS + OPTIONAL_LIST_KEYS:
        if key in data and (isinstance(data[key], list) or data[key] is None):
            payload[key] = data[key]
    if COMPANY_KEY in data and (isinstance(data[COMPANY_KEY], dict) or data[COMPANY_KEY] is None):
        payload[COMPANY_KEY] = data[COMPANY_KEY]

    recognized = [key for key, value in payload.items() if value is not None]
    if not recognized:
        failures["current"] = "no recognized collection key holds a list"
        return None

    # Keys present with the wrong type still go to validation and fail there
    for key in CORE_LIST_KEYS + OPTIONAL_LIST_KEYS + (COMPANY_KEY,):
        if key in data and key not in payload:
            payload[key] = data[key]
    for key in CORE_LIST_KEYS:
        if payload.get(key, []) is None:
            payload[key] = []

    try:
        return BackupDocument.model_validate(payload)
    except ValidationError as exc:
        raise _validation_error("O backup contém registros inválidos", exc) from exc


def _as_legacy(data: Any, failures: Dict[str, str]) -> Optional[BackupDocument]:
    if not isinstance(data, list):
        failures["legacy"] = f"expected an array, got {type(data).__name__}"
        return None

    warranties = [
        element for element in data
        if isinstance(element, dict) and any(field in element for field in LEGACY_MARKER_FIELDS)
    ]
    if not warranties:
        failures["legacy"] = "no array element looks like a warranty"
        return None

    dropped = len(data) - len(warranties)
    if dropped:
        logger.warning("Legacy backup elements ignored", dropped=dropped, kept=len(warranties))

    try:
        return BackupDocument.model_validate({"warranties": warranties, "legacy": True})
    except ValidationError as exc:
        raise _validation_error("O backup legado contém registros inválidos", exc) from exc


def _repeated(values: Iterable[Any]) -> List[Any]:
    counts = Counter(value for value in values if value is not None)
    return sorted(value for value, count in counts.items() if count > 1)


def _check_unique_keys(doc: BackupDocument) -> None:
    duplicates: Dict[str, List[Any]] = {}
    for name in CORE_LIST_KEYS + OPTIONAL_LIST_KEYS:
        repeated = _repeated(record.id for record in getattr(doc, name) or [])
        if repeated:
            duplicates[name] = repeated
    # Unique columns in the store
    for name, field in NATURAL_KEYS.items():
        repeated = _repeated(getattr(record, field) for record in getattr(doc, name) or [])
        if repeated:
            duplicates[f"{name}.{field}"] = repeated

    if duplicates:
        raise BackupValidationException(
            "O backup contém identificadores repetidos", details={"duplicates": duplicates}
        )


def _drop_dangling_lote_refs(doc: BackupDocument) -> None:
    lote_ids = {lote.id for lote in doc.lotes if lote.id is not None}
    dangling = [w for w in doc.warranties if w.lote_id is not None and w.lote_id not in lote_ids]
    for warranty in dangling:
        warranty.lote_id = None
    if dangling:
        logger.warning(
            "Warranty lote references cleared",
            warranty_ids=[w.id for w in dangling],
            count=len(dangling),
        )


def decode(raw: Union[bytes, str]) -> BackupDocument:
    """Parse and validate an untrusted backup file."""
    data = _parse_json(raw)

    failures: Dict[str, str] = {}
    doc = _as_current(data, failures)
    if doc is None:
        doc = _as_legacy(data, failures)
    if doc is None:
        logger.warning("Backup shape not recognized", **failures)
        raise BackupValidationException(
            "Formato de backup não reconhecido", details={"variants": failures}
        )

    _check_unique_keys(doc)
    _drop_dangling_lote_refs(doc)
    logger.info("Backup decoded", **RestoreSummary.of(doc).model_dump())
    return doc
