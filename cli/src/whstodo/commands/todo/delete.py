import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('delete')
@click.argument('todo_id')
@handle_api_errors
def todo_delete(todo_id):
    """Move a todo to the trash."""
    todo = api_request("DELETE", f"/api/todos/{todo_id}")
    click.echo(f"Deleted todo '{todo['title']}' ({todo['todoId']})")
