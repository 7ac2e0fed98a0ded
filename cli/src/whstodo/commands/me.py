import click

from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command("me")
@click.option("--username", "-u", default=None, help="Change username")
@click.option("--password", "-p", default=None, help="Change password")
@handle_api_errors
def me(username, password):
    """Show (or update) the current user."""
    fields = {}
    if username is not None:
        fields["username"] = username
    if password is not None:
        fields["password"] = password
    if fields:
        user = api_request("PATCH", "/api/users/me", json=fields)
    else:
        user = api_request("GET", "/api/users/me")
    click.echo(f"ID:       {user['userId']}")
    click.echo(f"Email:    {user['email']}")
    click.echo(f"Username: {user['username']}")
    click.echo(f"Role:     {user['role']}")
