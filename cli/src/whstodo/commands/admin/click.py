import click

from .create import admin_create

@click.group('admin')
def admin_group():
    """Administrative tasks run directly against the database."""
    pass

admin_group.add_command(admin_create)
