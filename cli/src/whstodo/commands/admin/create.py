import click
from storage.errors import DomainError
from storage.service import user as user_service
from whstodo.config import get_config


@click.command('create')
@click.option('--email', prompt=True, help='Admin email')
@click.option('--username', default='admin', help='Display name')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True, help='Admin password')
def admin_create(email, username, password):
    """Create an admin account in the configured database."""
    get_config()
    try:
        user = user_service.create_user(email, password, username, role="admin")
    except DomainError as e:
        raise click.ClickException(f"{e.code}: {e.message}")
    click.echo(f"Created admin {user.email} ({user.user_id})")
