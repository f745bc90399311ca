from datetime import date

import pytest

from synergia.application.services.csv_export_service import build_csv, export_filename, format_date
from synergia.core.exceptions import BusinessRuleViolationException
from synergia.domain.schemas.devolucao import DevolucaoCreate
from synergia.domain.schemas.person import PersonCreate
from synergia.domain.schemas.warranty import WarrantyCreate


def _lines(content: bytes):
    assert content.startswith(b"\xef\xbb\xbf")
    return content.decode("utf-8-sig").splitlines()


def test_warranty_export_uses_labels_and_local_dates(repo):
    repo.warranties.add(
        WarrantyCreate(codigo="A1", descricao="Peça, com vírgula", quantidade=2, data_registro="2024-01-15T15:30:00Z")
    )

    lines = _lines(build_csv(repo, "warranties", ["codigo", "descricao", "quantidade", "data_registro"]))

    assert lines[0] == "Código,Descrição,Quantidade,Data de Registro"
    # America/Sao_Paulo is UTC-3
    assert lines[1] == 'A1,"Peça, com vírgula",2,15/01/2024 12:30'


def test_devolutions_are_flattened_per_item(repo):
    repo.devolucoes.add_devolucao(
        DevolucaoCreate(cliente="Ana", requisicao_venda="RV1"),
        [{"codigo_peca": "P1"}, {"codigo_peca": "P2"}],
    )
    repo.devolucoes.add_devolucao(DevolucaoCreate(cliente="Bia", requisicao_venda="RV2"), [])

    lines = _lines(build_csv(repo, "devolutions", ["id", "cliente", "codigo_peca"]))

    assert lines == ["ID Devolução,Cliente,Código Peça", "1,Ana,P1", "1,Ana,P2", "2,Bia,"]


def test_all_fields_by_default(repo):
    repo.persons.add(PersonCreate(nome="Ana", tipo="Cliente"))
    header = _lines(build_csv(repo, "persons"))[0]
    assert header.split(",")[:3] == ["ID", "Nome", "Tipo"]


def test_rejects_unknown_type_field_and_empty_data(repo):
    with pytest.raises(BusinessRuleViolationException):
        build_csv(repo, "lotes")
    with pytest.raises(BusinessRuleViolationException):
        build_csv(repo, "persons", ["senha"])
    with pytest.raises(BusinessRuleViolationException):
        build_csv(repo, "suppliers")


def test_unparsable_date_passes_through():
    assert format_date("ontem") == "ontem"


def test_export_filename():
    assert export_filename("persons", date(2024, 2, 1)) == "persons_export_2024-02-01.csv"
