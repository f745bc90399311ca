"""CSV export of one collection with user-selected columns.

Output is meant to be opened in Excel: UTF-8 with BOM, Portuguese headers,
dates as dd/mm/YYYY HH:MM in the configured timezone.
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
import pytz
import structlog

from synergia.config import get_settings
from synergia.core.exceptions import BusinessRuleViolationException
from synergia.infrastructure.repositories.entity_repository import EntityRepository

logger = structlog.get_logger(__name__)

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)

# Column key -> header label, in export order
FIELD_CONFIG: Dict[str, Dict[str, str]] = {
    "warranties": {
        "id": "ID",
        "codigo": "Código",
        "descricao": "Descrição",
        "fornecedor": "Fornecedor",
        "quantidade": "Quantidade",
        "defeito": "Defeito",
        "requisicao_venda": "Req. Venda",
        "requisicoes_garantia": "Req. Garantia",
        "nf_compra": "NF Compra",
        "valor_compra": "Valor Compra",
        "cliente": "Cliente",
        "mecanico": "Mecânico",
        "nota_fiscal_saida": "NF Saída",
        "nota_fiscal_retorno": "NF Retorno",
        "observacao": "Observação",
        "data_registro": "Data de Registro",
        "status": "Status",
        "lote_id": "ID do Lote",
    },
    "devolutions": {
        "id": "ID Devolução",
        "cliente": "Cliente",
        "mecanico": "Mecânico",
        "requisicao_venda": "Requisição Venda",
        "acao_requisicao": "Ação Requisição",
        "data_venda": "Data Venda",
        "data_devolucao": "Data Devolução",
        "status": "Status",
        "observacao_geral": "Obs. Geral",
        "codigo_peca": "Código Peça",
        "descricao_peca": "Descrição Peça",
        "quantidade": "Quantidade Peça",
    },
    "persons": {
        "id": "ID",
        "nome": "Nome",
        "tipo": "Tipo",
        "cpf_cnpj": "CPF/CNPJ",
        "telefone": "Telefone",
        "email": "Email",
        "cep": "CEP",
        "endereco": "Endereço",
        "bairro": "Bairro",
        "cidade": "Cidade/UF",
        "observacao": "Observação",
    },
    "suppliers": {
        "id": "ID",
        "razao_social": "Razão Social",
        "nome_fantasia": "Nome Fantasia",
        "cnpj": "CNPJ",
        "cidade": "Cidade/UF",
    },
}

DATE_FIELDS = {"data_registro", "data_venda", "data_devolucao"}


def export_filename(data_type: str, day: Optional[date] = None) -> str:
    day = day or datetime.now(tz).date()
    return f"{data_type}_export_{day.isoformat()}.csv"


def format_date(value: Any) -> str:
    """ISO string -> dd/mm/YYYY HH:MM local time. Unparsable values pass through."""
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz).strftime("%d/%m/%Y %H:%M")


def format_value(field: str, value: Any) -> str:
    if value is None or value == "":
        return ""
    if field in DATE_FIELDS:
        return format_date(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _load_rows(repo: EntityRepository, data_type: str) -> List[Dict[str, Any]]:
    if data_type == "warranties":
        return [w.model_dump() for w in repo.warranties.get_all()]
    if data_type == "persons":
        return [p.model_dump() for p in repo.persons.get_all()]
    if data_type == "suppliers":
        return [s.model_dump() for s in repo.suppliers.get_all()]

    # One row per returned part; a return without items still gets one row
    rows = []
    for devolucao in repo.devolucoes.get_all():
        parent = devolucao.model_dump(exclude={"itens"})
        if not devolucao.itens:
            rows.append(parent)
        for item in devolucao.itens:
            rows.append({**parent, **item.model_dump(exclude={"id", "devolucao_id"})})
    return rows


def build_csv(repo: EntityRepository, data_type: str, fields: Optional[Sequence[str]] = None) -> bytes:
    if data_type not in FIELD_CONFIG:
        raise BusinessRuleViolationException(
            "Tipo de dado não suportado para exportação",
            details={"data_type": data_type, "supported": sorted(FIELD_CONFIG)},
        )
    labels = FIELD_CONFIG[data_type]

    selected = list(fields) if fields else list(labels)
    unknown = [field for field in selected if field not in labels]
    if unknown:
        raise BusinessRuleViolationException(
            "Campos desconhecidos para exportação", details={"fields": unknown}
        )

    rows = _load_rows(repo, data_type)
    if not rows:
        raise BusinessRuleViolationException("Não há dados para exportar nesta categoria")

    df = pd.DataFrame(
        [[format_value(field, row.get(field)) for field in selected] for row in rows],
        columns=[labels[field] for field in selected],
    )
    content = df.to_csv(index=False, lineterminator="\n")

    logger.info("CSV exported", data_type=data_type, rows=len(df), columns=len(selected))
    return ("\ufeff" + content).encode("utf-8")
