import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors
from whstodo.time_util import utc_to_local


@click.command('get')
@click.argument('todo_id')
@handle_api_errors
def todo_get(todo_id):
    """Show todo details."""
    todo = api_request("GET", f"/api/todos/{todo_id}")

    click.echo(f"ID:        {todo['todoId']}")
    click.echo(f"Title:     {todo['title']}")
    click.echo(f"Status:    {todo['status']}")
    click.echo(f"Completed: {'yes' if todo['isCompleted'] else 'no'}")
    click.echo(f"Start:     {todo.get('startDate') or '-'}")
    click.echo(f"Due:       {todo.get('dueDate') or '-'}")
    if todo.get('content'):
        click.echo(f"Content:   {todo['content']}")
    click.echo(f"Created:   {utc_to_local(todo.get('createdAt'))}")
    if todo.get('deletedAt'):
        click.echo(f"Deleted:   {utc_to_local(todo['deletedAt'])}")
