import pytest
from fastapi.testclient import TestClient

from storage.config import Settings
from storage.database.base import dispose_db, init_db
from storage.repository import memory_repositories, set_repositories, sql_repositories
from storage.service import user as user_service
from api.main import create_app

PASSWORD = "password123"


def make_settings(**overrides) -> Settings:
    values = dict(
        storage_backend="memory",
        jwt_secret="test-access-secret-0123456789abcdef",
        refresh_token_secret="test-refresh-secret-0123456789abcdef",
        rate_limit_max_requests=0,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def repositories():
    repos = memory_repositories()
    set_repositories(repos)
    yield repos
    set_repositories(None)


@pytest.fixture(params=["memory", "sql"])
def backend(request):
    """Run a test once against each repository implementation."""
    if request.param == "sql":
        init_db("sqlite://")
        set_repositories(sql_repositories())
    else:
        set_repositories(memory_repositories())
    yield request.param
    set_repositories(None)
    dispose_db()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(repositories, settings):
    return TestClient(create_app(settings, configure=False))


@pytest.fixture
def login(client):
    """Register (if needed) and log in, returning the token payload."""
    def _login(email="alice@example.com", username="alice", password=PASSWORD):
        res = client.post("/api/auth/register", json={"email": email, "password": password, "username": username})
        assert res.status_code in (201, 409), res.text
        res = client.post("/api/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        return res.json()["data"]
    return _login


@pytest.fixture
def headers_for(login):
    def _headers(email="alice@example.com", username="alice"):
        return {"Authorization": f"Bearer {login(email, username)['accessToken']}"}
    return _headers


@pytest.fixture
def alice(headers_for):
    return headers_for("alice@example.com", "alice")


@pytest.fixture
def bob(headers_for):
    return headers_for("bob@example.com", "bob")


@pytest.fixture
def admin(client):
    user_service.create_user("admin@example.com", PASSWORD, "admin", role="admin")
    res = client.post("/api/auth/login", json={"email": "admin@example.com", "password": PASSWORD})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['data']['accessToken']}"}
