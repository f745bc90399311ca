import json

import pytest


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/warranties"),
        ("post", "/api/persons"),
        ("delete", "/api/suppliers"),
        ("get", "/api/company"),
        ("get", "/api/backup/export"),
        ("post", "/api/backup/import/confirm"),
    ],
)
def test_data_routes_require_a_session(client, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UnauthorizedException"


def test_tampered_cookie_is_rejected(client):
    client.cookies.set("session", "not-a-jwt")
    assert client.get("/api/persons").status_code == 401


def test_wrong_password(client):
    response = client.post("/api/login", json={"email": "admin@synergia.local", "password": "nope"})
    assert response.status_code == 401


def test_login_sets_httponly_cookie_and_logout_clears_it(client):
    response = client.post(
        "/api/login", json={"email": "admin@synergia.local", "password": "admin123"}
    )

    assert response.status_code == 200
    assert "httponly" in response.headers["set-cookie"].lower()
    assert client.get("/api/me").json()["role"] == "admin"

    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401


def test_health_is_public(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_person_crud_and_search(auth_client):
    created = auth_client.post("/api/persons", json={"nome": "José Álvares", "tipo": "Mecânico", "cidade": "São Paulo"})
    assert created.status_code == 201
    person_id = created.json()["id"]
    auth_client.post("/api/persons", json={"nome": "Maria", "tipo": "Cliente"})

    assert [p["nome"] for p in auth_client.get("/api/persons").json()] == ["Maria", "José Álvares"]
    assert [p["nome"] for p in auth_client.get("/api/persons", params={"q": "sao paulo"}).json()] == ["José Álvares"]

    updated = auth_client.put(f"/api/persons/{person_id}", json={"telefone": "4499"})
    assert updated.json()["telefone"] == "4499"
    assert updated.json()["nome"] == "José Álvares"

    assert auth_client.delete(f"/api/persons/{person_id}").status_code == 204
    missing = auth_client.get(f"/api/persons/{person_id}")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "EntityNotFoundException"


def test_create_requires_mandatory_fields(auth_client):
    assert auth_client.post("/api/persons", json={"nome": "Sem tipo"}).status_code == 422
    assert auth_client.post("/api/lotes", json={"nome": "Sem fornecedor"}).status_code == 422
    assert auth_client.post("/api/statuses", json={"nome": "X", "cor": "#000000", "aplicavelEm": []}).status_code == 422


def test_update_missing_record_is_404(auth_client):
    response = auth_client.put("/api/suppliers/99", json={"cidade": "X"})
    assert response.status_code == 404


def test_clear_collection(auth_client):
    auth_client.post("/api/products", json={"codigo": "A", "descricao": "a"})
    assert auth_client.delete("/api/products").status_code == 204
    assert auth_client.get("/api/products").json() == []


def test_warranty_uses_camel_case_on_the_wire(auth_client):
    created = auth_client.post(
        "/api/warranties", json={"codigo": "W1", "requisicaoVenda": "RV-9", "quantidade": 1}
    ).json()

    assert created["requisicaoVenda"] == "RV-9"
    assert created["status"] == "Em análise"
    assert created["dataRegistro"]


def test_duplicate_product_code_is_rejected(auth_client):
    auth_client.post("/api/products", json={"codigo": "A", "descricao": "a"})
    response = auth_client.post("/api/products", json={"codigo": "A", "descricao": "b"})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "BusinessRuleViolationException"
    assert auth_client.get("/api/products/by-code/A").json()["descricao"] == "a"


def test_lote_stats_and_warranties(auth_client):
    lote_id = auth_client.post("/api/lotes", json={"nome": "L1", "fornecedor": "F"}).json()["id"]
    auth_client.post("/api/warranties", json={"codigo": "A", "loteId": lote_id, "status": "Recusada"})
    auth_client.post("/api/warranties", json={"codigo": "B", "loteId": lote_id, "status": "Aguardando Envio"})

    (stats,) = auth_client.get("/api/lotes/stats").json()
    assert stats["itemCount"] == 2
    assert stats["statusCounts"] == {"aprovados": 0, "recusados": 1, "pendentes": 1, "pagos": 0}
    assert len(auth_client.get(f"/api/lotes/{lote_id}/warranties").json()) == 2

    auth_client.delete(f"/api/lotes/{lote_id}")
    assert all(w["loteId"] is None for w in auth_client.get("/api/warranties").json())


def test_devolucao_items_view_and_item_search(auth_client):
    created = auth_client.post(
        "/api/devolucoes",
        json={
            "cliente": "Ana",
            "requisicaoVenda": "RV-1",
            "itens": [{"codigoPeca": "P1", "descricaoPeca": "Pastilha"}, {"codigoPeca": "P2"}],
        },
    ).json()

    itens = auth_client.get(f"/api/devolucoes/{created['id']}/itens").json()
    assert [i["codigoPeca"] for i in itens] == ["P1", "P2"]
    assert [d["id"] for d in auth_client.get("/api/devolucoes", params={"q": "pastilha"}).json()] == [created["id"]]

    auth_client.put(f"/api/devolucoes/{created['id']}", json={"itens": [{"codigoPeca": "P3"}]})
    itens = auth_client.get(f"/api/devolucoes/{created['id']}/itens").json()
    assert [i["codigoPeca"] for i in itens] == ["P3"]


def test_company_get_and_put(auth_client):
    assert auth_client.get("/api/company").json() is None

    auth_client.put("/api/company", json={"nomeEmpresa": "Synergia", "cnpj": "1"})

    assert auth_client.get("/api/company").json()["nomeEmpresa"] == "Synergia"


def test_status_badge_route(auth_client):
    badge = auth_client.get("/api/statuses/badge", params={"kind": "warranty", "status": "Aguardando Envio"}).json()
    assert badge == {"status": "Aguardando Envio", "variant": "custom", "color": "#FBBF24"}


def test_backup_export_import_flow(auth_client):
    auth_client.post("/api/persons", json={"nome": "Ana", "tipo": "Cliente"})
    exported = auth_client.get("/api/backup/export")

    assert exported.status_code == 200
    assert "backup_synergia_os_" in exported.headers["content-disposition"]
    document = exported.json()
    assert [p["nome"] for p in document["persons"]] == ["Ana"]

    auth_client.delete("/api/persons")
    summary = auth_client.post(
        "/api/backup/import", files={"file": ("backup.json", exported.content, "application/json")}
    )
    assert summary.status_code == 200
    assert summary.json()["persons"] == 1
    assert auth_client.get("/api/persons").json() == []
    assert auth_client.get("/api/backup/status").json()["state"] == "pending_confirmation"

    confirmed = auth_client.post("/api/backup/import/confirm")
    assert confirmed.status_code == 200
    assert [p["nome"] for p in auth_client.get("/api/persons").json()] == ["Ana"]

    status = auth_client.get("/api/backup/status").json()
    assert status["state"] == "idle"
    assert status["dataVersion"] >= 1


def test_backup_import_rejects_garbage(auth_client):
    auth_client.post("/api/persons", json={"nome": "Ana", "tipo": "Cliente"})

    bad = auth_client.post("/api/backup/import", files={"file": ("x.json", b"not json", "application/json")})
    unknown = auth_client.post(
        "/api/backup/import", files={"file": ("x.json", json.dumps({"foo": 1}).encode(), "application/json")}
    )

    assert bad.status_code == 400
    assert bad.json()["error"]["code"] == "BackupSyntaxException"
    assert unknown.status_code == 422
    assert auth_client.post("/api/backup/import/confirm").status_code == 409
    assert len(auth_client.get("/api/persons").json()) == 1


def test_backup_import_cancel(auth_client):
    auth_client.post(
        "/api/backup/import", files={"file": ("b.json", b'[{"codigo": "A1"}]', "application/json")}
    )
    cancelled = auth_client.post("/api/backup/import/cancel").json()

    assert cancelled["state"] == "idle"
    assert cancelled["pending"] is None
    assert auth_client.get("/api/warranties").json() == []


def test_csv_export_route(auth_client):
    auth_client.post("/api/persons", json={"nome": "Ana", "tipo": "Cliente"})

    response = auth_client.get("/api/backup/csv/persons", params=[("fields", "nome"), ("fields", "tipo")])

    assert response.status_code == 200
    assert "persons_export_" in response.headers["content-disposition"]
    assert response.content.decode("utf-8-sig").splitlines() == ["Nome,Tipo", "Ana,Cliente"]
