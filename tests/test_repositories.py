import pytest
from sqlalchemy import text

from synergia.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    StorageUnavailableException,
)
from synergia.domain.schemas.lote import LoteCreate
from synergia.domain.schemas.person import PersonCreate
from synergia.domain.schemas.product import ProductCreate
from synergia.domain.schemas.supplier import SupplierCreate
from synergia.domain.schemas.warranty import WarrantyCreate
from synergia.infrastructure.database import LocalStore
from synergia.infrastructure.repositories.status_repository import DEFAULT_STATUSES

SAMPLES = {
    "warranties": lambda: WarrantyCreate(codigo="P-1", descricao="Bomba d'água", quantidade=2),
    "persons": lambda: PersonCreate(nome="João", tipo="Cliente"),
    "suppliers": lambda: SupplierCreate(
        razao_social="Peças LTDA", nome_fantasia="Peças", cnpj="00.000.000/0001-00", cidade="Curitiba"
    ),
    "lotes": lambda: LoteCreate(nome="Lote 1", fornecedor="Peças"),
    "products": lambda: ProductCreate(codigo="FLT-1", descricao="Filtro"),
}


@pytest.mark.parametrize("collection", sorted(SAMPLES))
def test_get_returns_what_add_stored(repo, collection):
    target = getattr(repo, collection)
    record = SAMPLES[collection]()

    new_id = target.add(record)
    stored = target.get(new_id)

    assert stored.id == new_id
    for field, value in record.model_dump(exclude_unset=True).items():
        assert getattr(stored, field) == value


@pytest.mark.parametrize("collection", sorted(SAMPLES))
def test_add_ignores_caller_id(repo, collection):
    target = getattr(repo, collection)
    data = SAMPLES[collection]().model_dump()
    if collection == "products":
        data["codigo"] = "OTHER"

    first = target.add(SAMPLES[collection]())
    second = target.add({**data, "id": 999})

    assert second == first + 1
    assert target.get(999) is None


@pytest.mark.parametrize("collection", sorted(SAMPLES))
def test_update_on_missing_id_changes_nothing(repo, collection):
    target = getattr(repo, collection)
    target.add(SAMPLES[collection]())
    before = target.get_all()

    with pytest.raises(EntityNotFoundException):
        target.update({**SAMPLES[collection]().model_dump(), "id": 12345})

    assert target.get_all() == before


@pytest.mark.parametrize("collection", sorted(SAMPLES))
def test_delete_missing_id_raises(repo, collection):
    with pytest.raises(EntityNotFoundException):
        getattr(repo, collection).delete(777)


@pytest.mark.parametrize("collection", sorted(SAMPLES) + ["statuses", "devolucoes"])
def test_clear_empties_each_collection_independently(repo, collection):
    repo.persons.add(SAMPLES["persons"]())
    target = getattr(repo, collection)
    if collection in SAMPLES and collection != "persons":
        target.add(SAMPLES[collection]())

    target.clear()

    assert target.get_all() == []
    if collection != "persons":
        assert len(repo.persons.get_all()) == 1


def test_get_absent_is_none(repo):
    assert repo.warranties.get(1) is None


def test_get_all_is_ordered_by_id(repo):
    ids = [repo.persons.add(PersonCreate(nome=name, tipo="Ambos")) for name in ("C", "A", "B")]
    assert [p.id for p in repo.persons.get_all()] == ids


def test_identifiers_are_never_reused(repo):
    first = repo.persons.add(SAMPLES["persons"]())
    second = repo.persons.add(SAMPLES["persons"]())
    repo.persons.delete(second)

    third = repo.persons.add(SAMPLES["persons"]())
    repo.persons.clear()
    fourth = repo.persons.add(SAMPLES["persons"]())

    assert (first, second, third, fourth) == (1, 2, 3, 4)


def test_reads_are_snapshots(repo):
    new_id = repo.persons.add(SAMPLES["persons"]())
    snapshot = repo.persons.get(new_id)
    snapshot.nome = "Alterado"

    assert repo.persons.get(new_id).nome == "João"


def test_update_replaces_fields(repo):
    new_id = repo.suppliers.add(SAMPLES["suppliers"]())
    repo.suppliers.update({"id": new_id, "cidade": "Londrina"})

    stored = repo.suppliers.get(new_id)
    assert stored.cidade == "Londrina"
    assert stored.razao_social == "Peças LTDA"


def test_warranty_registration_date_is_stamped_once(repo):
    new_id = repo.warranties.add(WarrantyCreate(codigo="A"))
    stamped = repo.warranties.get(new_id).data_registro
    assert stamped

    repo.warranties.update({"id": new_id, "data_registro": "2000-01-01T00:00:00", "status": "Paga"})

    stored = repo.warranties.get(new_id)
    assert stored.data_registro == stamped
    assert stored.status == "Paga"


def test_warranty_keeps_supplied_registration_date(repo):
    new_id = repo.warranties.add(WarrantyCreate(codigo="A", data_registro="2024-03-01T10:00:00+00:00"))
    assert repo.warranties.get(new_id).data_registro == "2024-03-01T10:00:00+00:00"


def test_warranty_default_status(repo):
    new_id = repo.warranties.add(WarrantyCreate(codigo="A"))
    assert repo.warranties.get(new_id).status == "Em análise"


def test_deleting_lote_unlinks_its_warranties(repo, fresh_repo):
    lote_id = repo.lotes.add(SAMPLES["lotes"]())
    linked = repo.warranties.add(WarrantyCreate(codigo="A", lote_id=lote_id))
    repo.warranties.add(WarrantyCreate(codigo="B"))
    assert [w.id for w in repo.warranties.list_by_lote(lote_id)] == [linked]

    repo.lotes.delete(lote_id)

    reader = fresh_repo()
    assert reader.lotes.get(lote_id) is None
    assert reader.warranties.get(linked).lote_id is None
    assert len(reader.warranties.get_all()) == 2


def test_product_lookup_by_code_and_uniqueness(repo):
    repo.products.add(SAMPLES["products"]())

    assert repo.products.get_by_code("FLT-1").descricao == "Filtro"
    assert repo.products.get_by_code("nope") is None
    with pytest.raises(BusinessRuleViolationException):
        repo.products.add(ProductCreate(codigo="FLT-1", descricao="Duplicado"))
    assert len(repo.products.get_all()) == 1


def test_default_statuses_are_seeded_once(repo):
    statuses = repo.statuses.get_all()

    assert len(statuses) == len(DEFAULT_STATUSES) == 13
    assert repo.statuses.get_by_name("Aguardando Envio").cor == "#FBBF24"
    assert repo.statuses.seed_defaults() == 0


def test_company_data_is_a_singleton(repo):
    assert repo.company.get_company_data() is None

    repo.company.update_company_data({"nome_empresa": "Synergia", "cidade": "Maringá"})
    repo.company.update_company_data({"nome_empresa": "Synergia Peças", "cidade": "Maringá"})

    company = repo.company.get_company_data()
    assert company.id == 1
    assert company.nome_empresa == "Synergia Peças"

    repo.company.clear()
    assert repo.company.get_company_data() is None


def test_clear_all_rejects_unknown_collection(repo):
    with pytest.raises(ValueError):
        repo.clear_all(["garantias"])


def test_unopenable_store_raises_storage_unavailable(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")

    with pytest.raises(StorageUnavailableException):
        LocalStore(f"sqlite:///{blocker}/synergia.db")


def test_storage_failure_is_reported_not_swallowed(repo):
    repo.db.execute(text("DROP TABLE suppliers"))
    repo.db.commit()

    with pytest.raises(StorageUnavailableException):
        repo.suppliers.get_all()


def test_transaction_rolls_back_every_collection(store, fresh_repo):
    seed = fresh_repo()
    seed.persons.add(SAMPLES["persons"]())

    with pytest.raises(RuntimeError):
        with store.transaction() as tx:
            tx.persons.clear()
            tx.suppliers.add(SAMPLES["suppliers"]())
            raise RuntimeError("boom")

    reader = fresh_repo()
    assert len(reader.persons.get_all()) == 1
    assert reader.suppliers.get_all() == []
