import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('purge')
@click.argument('todo_id')
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@handle_api_errors
def trash_purge(todo_id, yes):
    """Permanently delete a todo from the trash."""
    if not yes:
        click.confirm(f"Permanently delete {todo_id}?", abort=True)
    api_request("DELETE", f"/api/trash/{todo_id}")
    click.echo(f"Permanently deleted todo ({todo_id})")
