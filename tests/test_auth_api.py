from fastapi.testclient import TestClient

from api.main import create_app
from conftest import PASSWORD, make_settings


def register(client, email="carol@example.com", password=PASSWORD, username="carol"):
    return client.post("/api/auth/register", json={"email": email, "password": password, "username": username})


def test_register(client):
    res = register(client, email="Carol@Example.com")
    assert res.status_code == 201, res.text
    user = res.json()["data"]
    assert user["email"] == "carol@example.com"
    assert user["role"] == "user"
    assert "password" not in user
    assert "passwordHash" not in user


def test_register_duplicate_email(client):
    register(client)
    res = register(client, email="CAROL@example.com")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "EMAIL_EXISTS"


def test_register_validation(client):
    res = register(client, email="not-an-email")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"

    res = register(client, password="short")
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "password" in fields


def test_login_and_bad_credentials(client):
    register(client)
    res = client.post("/api/auth/login", json={"email": "carol@example.com", "password": PASSWORD})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["accessToken"] and data["refreshToken"]
    assert data["user"]["username"] == "carol"

    for email, password in (("carol@example.com", "wrong-password"), ("nobody@example.com", PASSWORD)):
        res = client.post("/api/auth/login", json={"email": email, "password": password})
        assert res.status_code == 401
        assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_refresh(client, login):
    tokens = login()
    res = client.post("/api/auth/refresh", json={"refreshToken": tokens["refreshToken"]})
    assert res.status_code == 200
    access = res.json()["data"]["accessToken"]

    res = client.get("/api/users/me", headers={"Authorization": f"Bearer {access}"})
    assert res.status_code == 200
    assert res.json()["data"]["email"] == "alice@example.com"


def test_refresh_rejects_bad_tokens(client, login):
    tokens = login()

    res = client.post("/api/auth/refresh", json={"refreshToken": ""})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "NO_TOKEN"

    # an access token is signed with the other secret
    res = client.post("/api/auth/refresh", json={"refreshToken": tokens["accessToken"]})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_TOKEN"

    res = client.post("/api/auth/refresh", json={})
    assert res.status_code == 400


def test_refresh_token_cannot_authenticate_requests(client, login):
    tokens = login()
    res = client.get("/api/users/me", headers={"Authorization": f"Bearer {tokens['refreshToken']}"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_TOKEN"


def test_expired_access_token(repositories):
    client = TestClient(create_app(make_settings(jwt_expires_minutes=-1), configure=False))
    register(client)
    tokens = client.post("/api/auth/login", json={"email": "carol@example.com", "password": PASSWORD}).json()["data"]

    res = client.get("/api/todos", headers={"Authorization": f"Bearer {tokens['accessToken']}"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "TOKEN_EXPIRED"


def test_expired_refresh_token(repositories):
    client = TestClient(create_app(make_settings(refresh_token_expires_days=-1), configure=False))
    register(client)
    tokens = client.post("/api/auth/login", json={"email": "carol@example.com", "password": PASSWORD}).json()["data"]

    res = client.post("/api/auth/refresh", json={"refreshToken": tokens["refreshToken"]})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_TOKEN"
    assert res.json()["error"]["message"] == "Refresh token expired"


def test_logout(client, alice):
    res = client.post("/api/auth/logout", headers=alice)
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Logged out"}


def test_bootstrap_admin(repositories):
    settings = make_settings(admin_email="root@example.com", admin_password=PASSWORD)
    create_app(settings, configure=False)
    # a second start finds the existing admin
    client = TestClient(create_app(settings, configure=False))

    res = client.post("/api/auth/login", json={"email": "root@example.com", "password": PASSWORD})
    assert res.status_code == 200
    assert res.json()["data"]["user"]["role"] == "admin"


def test_password_is_kept_verbatim(client):
    res = register(client, email="  dave@example.com ", password="  secret-pass  ", username="  dave  ")
    assert res.status_code == 201, res.text
    assert res.json()["data"]["username"] == "dave"
    assert res.json()["data"]["email"] == "dave@example.com"

    res = client.post("/api/auth/login", json={"email": "dave@example.com", "password": "  secret-pass  "})
    assert res.status_code == 200, res.text

    res = client.post("/api/auth/login", json={"email": "dave@example.com", "password": "secret-pass"})
    assert res.status_code == 401


def test_wrong_password_twice_in_a_row(client):
    register(client)
    for _ in range(2):
        res = client.post("/api/auth/login", json={"email": "carol@example.com", "password": "wrong-password"})
        assert res.status_code == 401
        assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"
