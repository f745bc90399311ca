"""Lote statistics over the warranties each lote holds."""

from collections import defaultdict
from typing import Dict, List, Sequence

from synergia.domain.schemas.lote import LoteRead, LoteStatusCounts, LoteWithStats
from synergia.domain.schemas.warranty import WarrantyRead

PAID_STATUSES = {"Paga", "Aprovada - Crédito Boleto"}
PENDING_STATUSES = {"Em análise", "Aguardando Envio", "Enviado para Análise"}


def count_statuses(warranties: Sequence[WarrantyRead]) -> LoteStatusCounts:
    counts = LoteStatusCounts()
    for warranty in warranties:
        status = warranty.status or ""
        if status.startswith("Aprovada"):
            counts.aprovados += 1
        if status == "Recusada":
            counts.recusados += 1
        if status in PAID_STATUSES:
            counts.pagos += 1
        if status in PENDING_STATUSES:
            counts.pendentes += 1
    return counts


def lotes_with_stats(lotes: Sequence[LoteRead], warranties: Sequence[WarrantyRead]) -> List[LoteWithStats]:
    by_lote: Dict[int, List[WarrantyRead]] = defaultdict(list)
    for warranty in warranties:
        if warranty.lote_id is not None:
            by_lote[warranty.lote_id].append(warranty)

    return [
        LoteWithStats(
            **lote.model_dump(),
            item_count=len(by_lote[lote.id]),
            status_counts=count_statuses(by_lote[lote.id]),
        )
        for lote in lotes
    ]
