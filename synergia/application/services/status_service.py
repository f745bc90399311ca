"""Badge colour resolution for status labels."""

from typing import Dict, Iterable, Optional

from synergia.domain.schemas.custom_status import CustomStatusRead, StatusBadge

# Badge kind -> the applicability tag a CustomStatus uses for it
KIND_APPLICABILITY = {
    "warranty": "garantia",
    "lote": "lote",
    "devolucao": "devolucao",
    "acao": "acao",
}

DEFAULT_VARIANTS: Dict[str, Dict[str, str]] = {
    "warranty": {
        "Aprovada - Peça Nova": "accent-green",
        "Aprovada - Crédito Boleto": "accent-green-dark",
        "Aprovada - Crédito NF": "default",
        "Recusada": "destructive",
        "Enviado para Análise": "accent-blue",
        "Aguardando Envio": "warning",
    },
    "lote": {
        "Enviado": "accent-blue",
        "Aprovado Totalmente": "accent-green",
        "Aprovado Parcialmente": "accent-green",
        "Recusado": "destructive",
    },
    "devolucao": {
        "Recebido": "accent-blue",
        "Aguardando Peças": "warning",
        "Finalizada": "success",
        "Cancelada": "destructive",
    },
    "acao": {
        "Excluída": "destructive",
    },
}

FALLBACK_VARIANTS = {"devolucao": "outline"}


def resolve_status_badge(
    kind: str,
    status: Optional[str],
    statuses: Iterable[CustomStatusRead] = (),
) -> StatusBadge:
    """Pick the badge for a status. A matching user-defined colour wins."""
    if not status:
        return StatusBadge(status="N/A", variant="secondary")

    tag = KIND_APPLICABILITY.get(kind)
    for custom in statuses:
        if custom.nome == status and custom.cor and tag in (custom.aplicavel_em or []):
            return StatusBadge(status=status, variant="custom", color=custom.cor)

    variant = DEFAULT_VARIANTS.get(kind, {}).get(status, FALLBACK_VARIANTS.get(kind, "secondary"))
    return StatusBadge(status=status, variant=variant)
