from __future__ import annotations

from typing import Dict

import pytest
from fastapi.testclient import TestClient

from contactbook.api.main import create_app
from contactbook.core.config import Settings
from contactbook.core.database import ContactStore

from tests.stubs import StubCollection, StubMotorClient


@pytest.fixture(autouse=True)
def reset_stub_clients():
    StubMotorClient.instances = []
    StubMotorClient.ping_error = None
    StubMotorClient.index_error = None
    yield


@pytest.fixture
def settings() -> Settings:
    return Settings(MONGODB_URI="mongodb://stub:27017", DB_NAME="contacts_test")


@pytest.fixture
def store(settings: Settings) -> ContactStore:
    return ContactStore.from_settings(settings, client_factory=StubMotorClient)


@pytest.fixture
def client(settings: Settings, store: ContactStore):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def collection(client: TestClient) -> StubCollection:
    return client.app.state.store.collection


@pytest.fixture
def jane() -> Dict[str, str]:
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "Jane.Doe@Example.com",
        "favoriteColor": "blue",
        "birthday": "1995-03-12",
    }
