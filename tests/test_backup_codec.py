import json
from datetime import date

import pytest

from synergia.application.services.backup_codec import backup_filename, decode, dump_backup, encode
from synergia.core.exceptions import BackupSyntaxException, BackupValidationException
from synergia.domain.schemas.devolucao import DevolucaoCreate
from synergia.domain.schemas.lote import LoteCreate
from synergia.domain.schemas.person import PersonCreate
from synergia.domain.schemas.warranty import WarrantyCreate


@pytest.fixture
def populated(repo):
    lote_id = repo.lotes.add(LoteCreate(nome="Lote A", fornecedor="Fornecedor X"))
    repo.warranties.add(WarrantyCreate(codigo="W1", cliente="Ana", lote_id=lote_id, photos=["a.jpg"]))
    repo.warranties.add(WarrantyCreate(codigo="W2", quantidade=1.5))
    repo.persons.add(PersonCreate(nome="Ana", tipo="Cliente"))
    repo.devolucoes.add_devolucao(
        DevolucaoCreate(cliente="Ana", requisicao_venda="RV-1"),
        [{"codigo_peca": "P1", "quantidade": 1}, {"codigo_peca": "P2", "quantidade": 2}],
    )
    repo.company.update_company_data({"nome_empresa": "Synergia"})
    return repo


def test_encoded_document_uses_camel_case_and_drops_item_ids(populated):
    payload = json.loads(dump_backup(encode(populated)))

    assert set(payload) == {
        "warranties", "persons", "suppliers", "lotes", "devolucoes", "companyData", "products", "statuses"
    }
    assert payload["warranties"][0]["loteId"] == payload["lotes"][0]["id"]
    assert payload["companyData"]["nomeEmpresa"] == "Synergia"
    assert "legacy" not in payload

    itens = payload["devolucoes"][0]["itens"]
    assert [item["codigoPeca"] for item in itens] == ["P1", "P2"]
    assert all("id" not in item and "devolucaoId" not in item for item in itens)


def test_encode_then_decode_preserves_records(populated):
    doc = encode(populated)
    decoded = decode(dump_backup(doc))

    assert decoded == doc
    assert decoded.legacy is False


def test_empty_store_encodes_null_company(repo):
    payload = json.loads(dump_backup(encode(repo)))
    assert payload["companyData"] is None
    assert payload["warranties"] == []


def test_legacy_array_is_read_as_warranties():
    doc = decode(b'[{"codigo":"A1","descricao":"x"}]')

    assert doc.legacy is True
    assert len(doc.warranties) == 1
    assert doc.warranties[0].codigo == "A1"
    assert doc.persons == doc.suppliers == doc.lotes == doc.devolucoes == []
    assert doc.company_data is None
    assert doc.products is None and doc.statuses is None


def test_legacy_array_drops_elements_that_are_not_warranties():
    doc = decode(json.dumps([{"codigo": "A1"}, {"nome": "not a warranty"}, 7]))
    assert [w.codigo for w in doc.warranties] == ["A1"]


def test_numeric_codes_are_read_as_text():
    doc = decode(b'[{"codigo": 123, "descricao": "x"}]')
    assert doc.warranties[0].codigo == "123"


@pytest.mark.parametrize("raw", [b"not json", b"{", "\xff\xfe".encode("latin-1")])
def test_unparsable_bytes_are_syntax_errors(raw):
    with pytest.raises(BackupSyntaxException):
        decode(raw)


@pytest.mark.parametrize(
    "raw",
    [
        b"{}",
        b'{"foo": []}',
        b"[]",
        b'[{"nome": "x"}]',
        b"42",
        b'"text"',
        b'{"warranties": null}',
        b'{"companyData": null}',
        b'{"companyData": null, "foo": 1}',
    ],
)
def test_unrecognized_shapes_are_validation_errors(raw):
    with pytest.raises(BackupValidationException) as exc_info:
        decode(raw)
    assert set(exc_info.value.details["variants"]) == {"current", "legacy"}


def test_wrong_record_types_are_validation_errors():
    with pytest.raises(BackupValidationException) as exc_info:
        decode(b'{"warranties": [{"quantidade": "muitas"}]}')
    assert exc_info.value.details["errors"]


def test_wrong_collection_type_is_a_validation_error():
    with pytest.raises(BackupValidationException):
        decode(b'{"warranties": [], "persons": "Ana"}')


def test_duplicate_ids_are_rejected():
    raw = json.dumps({"persons": [{"id": 1, "nome": "A"}, {"id": 1, "nome": "B"}]})
    with pytest.raises(BackupValidationException) as exc_info:
        decode(raw)
    assert exc_info.value.details["duplicates"] == {"persons": [1]}


def test_repeated_unique_codes_are_rejected():
    raw = json.dumps({
        "products": [{"id": 1, "codigo": "DUP"}, {"id": 2, "codigo": "DUP"}],
        "statuses": [{"nome": "Paga"}, {"nome": "Paga"}, {"nome": "Aprovada"}],
    })
    with pytest.raises(BackupValidationException) as exc_info:
        decode(raw)
    assert exc_info.value.details["duplicates"] == {
        "products.codigo": ["DUP"],
        "statuses.nome": ["Paga"],
    }


def test_missing_collections_default_to_empty():
    doc = decode(b'{"persons": [{"nome": "Ana"}], "lotes": null}')

    assert [p.nome for p in doc.persons] == ["Ana"]
    assert doc.lotes == [] and doc.warranties == []
    assert doc.products is None


def test_dangling_lote_reference_is_cleared():
    raw = json.dumps({
        "lotes": [{"id": 1, "nome": "L"}],
        "warranties": [{"id": 1, "loteId": 1}, {"id": 2, "loteId": 99}],
    })
    doc = decode(raw)
    assert [w.lote_id for w in doc.warranties] == [1, None]


def test_null_item_list_is_empty():
    doc = decode(b'{"devolucoes": [{"id": 3, "cliente": "Ana", "itens": null}]}')
    assert doc.devolucoes[0].itens == []


def test_backup_filename():
    assert backup_filename(date(2024, 5, 7)) == "backup_synergia_os_2024-05-07.json"
