import pytest
from fastapi.testclient import TestClient

from synergia.config import get_settings
from synergia.core.events import DataChangedSignal
from synergia.infrastructure.database import LocalStore, set_store
from synergia.infrastructure.repositories.entity_repository import EntityRepository


@pytest.fixture
def store():
    store = LocalStore("sqlite://")
    store.init_schema()
    set_store(store)
    yield store
    set_store(None)
    store.dispose()


@pytest.fixture
def fresh_repo(store):
    """Factory of repositories on new sessions, so reads never hit a stale identity map."""
    sessions = []

    def _make() -> EntityRepository:
        session = store.session()
        sessions.append(session)
        return EntityRepository(session)

    yield _make
    for session in sessions:
        session.close()


@pytest.fixture
def repo(fresh_repo):
    return fresh_repo()


@pytest.fixture
def signal():
    return DataChangedSignal()


@pytest.fixture
def client(store):
    from synergia.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_client(client):
    settings = get_settings()
    response = client.post(
        "/api/login",
        json={"email": settings.DEFAULT_ADMIN_EMAIL, "password": settings.DEFAULT_ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client
