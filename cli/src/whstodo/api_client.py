"""API client for authenticated requests to the todo API."""

import json
import os
import sys
from typing import Any, Optional

import httpx


AUTH_FILE = os.path.join(os.path.expanduser(os.getenv("WHS_TODO_HOME", "~/.whs-todo")), "auth.json")
DEFAULT_API_URL = "http://localhost:3000"


class ApiError(Exception):
    def __init__(self, status_code: int, code: str, message: str):
        self.status_code = status_code
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


def load_auth() -> dict:
    """Load auth credentials from auth.json."""
    if not os.path.exists(AUTH_FILE):
        print("Not logged in. Run 'whs login' first.", file=sys.stderr)
        sys.exit(1)
    with open(AUTH_FILE) as f:
        return json.load(f)


def save_auth(access_token: str, refresh_token: str, email: str, api_url: str):
    os.makedirs(os.path.dirname(AUTH_FILE), exist_ok=True)
    with open(AUTH_FILE, "w") as f:
        json.dump({
            "access_token": access_token,
            "refresh_token": refresh_token,
            "email": email,
            "api_url": api_url,
        }, f)


def remove_auth():
    if os.path.exists(AUTH_FILE):
        os.remove(AUTH_FILE)


def _send(method: str, url: str, token: Optional[str] = None, **kwargs) -> httpx.Response:
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    with httpx.Client(timeout=30) as client:
        return client.request(method, url, headers=headers, **kwargs)


def _error_of(resp: httpx.Response) -> ApiError:
    try:
        error = resp.json().get("error") or {}
    except ValueError:
        error = {}
    return ApiError(resp.status_code, error.get("code", "HTTP_ERROR"), error.get("message", resp.text))


def _refresh(auth: dict) -> bool:
    """Swap an expired access token for a new one. Returns False if the refresh token is no good."""
    resp = _send("POST", f"{auth['api_url']}/api/auth/refresh", json={"refreshToken": auth.get("refresh_token", "")})
    if resp.status_code != 200:
        return False
    auth["access_token"] = resp.json()["data"]["accessToken"]
    save_auth(auth["access_token"], auth.get("refresh_token", ""), auth.get("email", ""), auth["api_url"])
    return True


def api_request(method: str, path: str, **kwargs) -> Any:
    """Make an authenticated API request and return the envelope's data.

    Args:
        method: HTTP method (GET, POST, etc.)
        path: API path (e.g. /api/todos)
        **kwargs: passed to httpx (params, json, etc.)
    """
    auth = load_auth()
    url = f"{auth.get('api_url', DEFAULT_API_URL)}{path}"

    resp = _send(method, url, auth.get("access_token"), **kwargs)
    if resp.status_code == 401 and _error_of(resp).code == "TOKEN_EXPIRED":
        if not _refresh(auth):
            print("Session expired. Run 'whs login' to re-authenticate.", file=sys.stderr)
            sys.exit(1)
        resp = _send(method, url, auth["access_token"], **kwargs)

    if resp.status_code >= 400:
        raise _error_of(resp)
    return resp.json().get("data")


def public_request(method: str, api_url: str, path: str, **kwargs) -> Any:
    resp = _send(method, f"{api_url}{path}", **kwargs)
    if resp.status_code >= 400:
        raise _error_of(resp)
    return resp.json().get("data")
