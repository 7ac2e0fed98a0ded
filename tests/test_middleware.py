from fastapi.testclient import TestClient

from api.main import create_app
from api.middleware.rate_limit import FixedWindowRateLimiter
from storage.service import todo as todo_service
from conftest import make_settings


def test_public_endpoints(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["message"] == "Server is running"
    assert res.json()["timestamp"].endswith("Z")

    res = client.get("/api")
    assert res.json() == {"success": True, "message": "WHS-TodoList API Server", "version": "1.0.0"}


def test_missing_or_malformed_authorization(client):
    res = client.get("/api/todos")
    assert res.status_code == 401
    assert res.json() == {"success": False, "error": {"code": "UNAUTHORIZED", "message": "Authorization token is required"}}

    res = client.get("/api/todos", headers={"Authorization": "Token abc"})
    assert res.json()["error"]["code"] == "UNAUTHORIZED"

    res = client.get("/api/todos", headers={"Authorization": "Bearer not.a.jwt"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_TOKEN"


def test_token_signed_with_another_secret(repositories, login):
    tokens = login()
    other = TestClient(create_app(make_settings(jwt_secret="another-access-secret-0123456789abcdef"), configure=False))
    res = other.get("/api/todos", headers={"Authorization": f"Bearer {tokens['accessToken']}"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_TOKEN"


def test_unknown_route_and_method(client, alice):
    res = client.get("/nope")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"

    res = client.get("/api/nope", headers=alice)
    assert res.status_code == 404
    assert res.json()["success"] is False

    res = client.delete("/api/todos", headers=alice)
    assert res.status_code == 405
    assert res.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


def test_invalid_json(client):
    res = client.post("/api/auth/login", content="{not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_JSON"


def test_unhandled_error_is_wrapped(repositories, settings, alice, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("database on fire")

    monkeypatch.setattr(todo_service, "list_todos", boom)
    client = TestClient(create_app(settings, configure=False), raise_server_exceptions=False)
    res = client.get("/api/todos", headers=alice)
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}}


def test_body_limit(repositories):
    client = TestClient(create_app(make_settings(max_body_bytes=64), configure=False))
    res = client.post("/api/auth/register", json={"email": "a@example.com", "password": "x" * 100, "username": "a"})
    assert res.status_code == 413
    assert res.json()["error"]["code"] == "PAYLOAD_TOO_LARGE"


def test_chunked_body_limit(repositories):
    client = TestClient(create_app(make_settings(max_body_bytes=64), configure=False))

    def chunks():
        yield b'{"email": "a@example.com", '
        yield b'"password": "' + b"x" * 100 + b'", "username": "a"}'

    res = client.post("/api/auth/register", content=chunks(), headers={"Content-Type": "application/json"})
    assert res.status_code == 413
    assert res.json()["error"]["code"] == "PAYLOAD_TOO_LARGE"


def test_chunked_body_under_limit(repositories):
    client = TestClient(create_app(make_settings(max_body_bytes=1024), configure=False))

    def chunks():
        yield b'{"email": "a@example.com", '
        yield b'"password": "password123", "username": "a"}'

    res = client.post("/api/auth/register", content=chunks(), headers={"Content-Type": "application/json"})
    assert res.status_code == 201, res.text


def test_rate_limit(repositories):
    client = TestClient(create_app(make_settings(rate_limit_max_requests=2), configure=False))
    first = client.get("/health")
    assert first.headers["X-RateLimit-Limit"] == "2"
    assert first.headers["X-RateLimit-Remaining"] == "1"
    client.get("/health")

    res = client.get("/health")
    assert res.status_code == 429
    assert res.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"
    assert int(res.headers["Retry-After"]) > 0


def test_fixed_window_resets():
    now = [1000.0]
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=lambda: now[0])
    assert limiter.hit("1.2.3.4") == (True, 0, 60)
    assert limiter.hit("1.2.3.4")[0] is False
    assert limiter.hit("5.6.7.8")[0] is True

    now[0] += 60
    assert limiter.hit("1.2.3.4")[0] is True


def test_cors_preflight(client):
    res = client.options(
        "/api/todos",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_stale_windows_are_pruned():
    now = [1000.0]
    limiter = FixedWindowRateLimiter(max_requests=5, window_seconds=60, clock=lambda: now[0])
    limiter.hit("1.2.3.4")
    now[0] += 30
    limiter.hit("5.6.7.8")
    assert set(limiter._windows) == {"1.2.3.4", "5.6.7.8"}

    now[0] += 30
    limiter.hit("9.9.9.9")
    assert set(limiter._windows) == {"5.6.7.8", "9.9.9.9"}
