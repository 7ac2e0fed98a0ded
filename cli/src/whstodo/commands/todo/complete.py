import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('complete')
@click.argument('todo_id')
@handle_api_errors
def todo_complete(todo_id):
    """Mark a todo as completed."""
    todo = api_request("PATCH", f"/api/todos/{todo_id}/complete")
    click.echo(f"Completed todo '{todo['title']}' ({todo['todoId']})")
