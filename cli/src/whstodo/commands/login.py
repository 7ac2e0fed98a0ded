"""Login command - exchange email/password for API tokens."""

import os

import click

from whstodo.api_client import DEFAULT_API_URL, public_request, save_auth
from whstodo.commands.util import handle_api_errors


@click.command("login")
@click.option("--email", prompt=True, help="Account email.")
@click.option("--password", prompt=True, hide_input=True, help="Account password.")
@click.option("--api-url", default=None, help="API base URL (defaults to $WHS_TODO_API_URL).")
@handle_api_errors
def login(email, password, api_url):
    """Log in and store the access and refresh tokens."""
    api_url = (api_url or os.environ.get("WHS_TODO_API_URL", DEFAULT_API_URL)).rstrip("/")
    data = public_request("POST", api_url, "/api/auth/login", json={"email": email, "password": password})
    save_auth(data["accessToken"], data["refreshToken"], data["user"]["email"], api_url)
    click.echo(f"Logged in as {data['user']['username']} ({data['user']['email']})")
