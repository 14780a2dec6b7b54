"""API test fixtures — app with the business layer replaced by an in-memory spy."""

import pytest
from httpx import ASGITransport, AsyncClient

from model_api.api.routes.models import get_model_operations
from model_api.main import create_app
from tests.fakes import FakeModelOperations


@pytest.fixture
def operations():
    return FakeModelOperations()


@pytest.fixture
def app(operations):
    app = create_app()
    app.dependency_overrides[get_model_operations] = lambda: operations
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
