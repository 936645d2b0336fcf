import pytest
from fastapi.testclient import TestClient

from food_api.config import Settings
from food_api.main import create_app
from food_client.api import FoodApi
from food_client.queries import FoodQueries


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        ENVIRONMENT="test",
        AUTO_CREATE_TABLES=True,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the client runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_food(client):
    def _make(**fields):
        payload = {"name": "Pad Thai", **fields}
        resp = client.post("/api/foods", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def api(client):
    return FoodApi(client=client)


@pytest.fixture
def queries(api):
    return FoodQueries(api)
