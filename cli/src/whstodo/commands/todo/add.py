import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('add')
@click.argument('title')
@click.option('--content', '-c', default=None, help='Details')
@click.option('--start', '-s', default=None, help='Start date (YYYY-MM-DD)')
@click.option('--due', '-u', default=None, help='Due date (YYYY-MM-DD)')
@handle_api_errors
def todo_add(title, content, start, due):
    """Add a new todo."""
    body = {"title": title}
    if content is not None:
        body["content"] = content
    if start is not None:
        body["startDate"] = start
    if due is not None:
        body["dueDate"] = due
    todo = api_request("POST", "/api/todos", json=body)
    click.echo(f"Created todo '{todo['title']}' ({todo['todoId']})")
