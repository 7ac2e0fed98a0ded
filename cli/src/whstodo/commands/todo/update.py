import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('update')
@click.argument('todo_id')
@click.option('--title', '-t', default=None, help='New title')
@click.option('--content', '-c', default=None, help='New content')
@click.option('--start', '-s', default=None, help='New start date (YYYY-MM-DD)')
@click.option('--due', '-u', default=None, help='New due date (YYYY-MM-DD)')
@handle_api_errors
def todo_update(todo_id, title, content, start, due):
    """Update a todo."""
    fields = {}
    if title is not None:
        fields['title'] = title
    if content is not None:
        fields['content'] = content
    if start is not None:
        fields['startDate'] = start
    if due is not None:
        fields['dueDate'] = due

    if not fields:
        click.echo("No fields to update")
        return

    todo = api_request("PUT", f"/api/todos/{todo_id}", json=fields)
    click.echo(f"Updated todo '{todo['title']}' ({todo['todoId']})")
