import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('restore')
@click.argument('todo_id')
@handle_api_errors
def todo_restore(todo_id):
    """Restore a todo from the trash."""
    todo = api_request("PATCH", f"/api/todos/{todo_id}/restore")
    click.echo(f"Restored todo '{todo['title']}' ({todo['todoId']})")
