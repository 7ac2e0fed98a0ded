import click
from tabulate import tabulate
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('list')
@click.option('--status', '-s', default=None, type=click.Choice(['active', 'completed', 'deleted']), help='Filter by status')
@click.option('--search', '-q', default=None, help='Search title and content')
@click.option('--sort-by', default='createdAt', type=click.Choice(['createdAt', 'dueDate']), help='Sort field')
@click.option('--order', default='desc', type=click.Choice(['asc', 'desc']), help='Sort order')
@handle_api_errors
def todo_list(status, search, sort_by, order):
    """List todos."""
    params = {"sortBy": sort_by, "order": order}
    if status is not None:
        params["status"] = status
    if search is not None:
        params["search"] = search

    todos = api_request("GET", "/api/todos", params=params)
    if not todos:
        click.echo("No todos found")
        return

    table = []
    for t in todos:
        table.append([
            t["todoId"],
            t["title"],
            "completed" if t["isCompleted"] and t["status"] == "active" else t["status"],
            t.get("startDate") or "-",
            t.get("dueDate") or "-",
        ])
    click.echo(tabulate(table, headers=["ID", "Title", "Status", "Start", "Due"], tablefmt="simple"))
