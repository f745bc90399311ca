"""Accent- and case-insensitive substring search shared by every list view."""

import unicodedata
from typing import Any, Iterable, List, Mapping, Sequence, TypeVar

R = TypeVar("R")

WARRANTY_SEARCH_FIELDS = (
    "codigo",
    "descricao",
    "fornecedor",
    "cliente",
    "defeito",
    "status",
    "requisicao_venda",
    "requisicoes_garantia",
    "nota_fiscal_retorno",
)
DEVOLUCAO_SEARCH_FIELDS = ("cliente", "mecanico", "requisicao_venda", "status")
DEVOLUCAO_ITEM_SEARCH_FIELDS = ("codigo_peca", "descricao_peca")
PRODUCT_SEARCH_FIELDS = ("codigo", "descricao", "marca", "referencia")
LOTE_SEARCH_FIELDS = ("nome", "fornecedor", "notas_fiscais_retorno", "id")
PERSON_SEARCH_FIELDS = ("nome", "nome_fantasia", "cpf_cnpj", "telefone", "email", "cidade")
SUPPLIER_SEARCH_FIELDS = ("razao_social", "nome_fantasia", "cnpj", "cidade")
STATUS_SEARCH_FIELDS = ("nome",)


def _stringify(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_text(value: Any) -> str:
    """Lower-case, strip accents and surrounding whitespace. None becomes ""."""
    if value is None:
        return ""
    decomposed = unicodedata.normalize("NFD", _stringify(value).lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).strip()


def _field_value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def smart_search(record: Any, term: Any, fields: Sequence[str]) -> bool:
    needle = normalize_text(term)
    if not needle:
        return True
    return any(needle in normalize_text(_field_value(record, field)) for field in fields)


def filter_records(records: Iterable[R], term: Any, fields: Sequence[str]) -> List[R]:
    return [record for record in records if smart_search(record, term, fields)]


def sort_by_recency(records: Iterable[R]) -> List[R]:
    """Newest first, i.e. descending id."""
    return sorted(records, key=lambda record: _field_value(record, "id") or 0, reverse=True)


def devolucao_matches(devolucao: Any, term: Any) -> bool:
    """A return matches on its own fields or on any of its items' part fields."""
    if smart_search(devolucao, term, DEVOLUCAO_SEARCH_FIELDS):
        return True
    itens = _field_value(devolucao, "itens") or []
    return any(smart_search(item, term, DEVOLUCAO_ITEM_SEARCH_FIELDS) for item in itens)


def filter_devolucoes(devolucoes: Iterable[R], term: Any) -> List[R]:
    return [devolucao for devolucao in devolucoes if devolucao_matches(devolucao, term)]
