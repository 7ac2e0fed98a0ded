import click
from tabulate import tabulate
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors
from whstodo.time_util import utc_to_local


@click.command('list')
@click.option('--search', '-q', default=None, help='Search title and content')
@click.option('--sort-by', default='deletedAt', type=click.Choice(['deletedAt', 'dueDate', 'createdAt']), help='Sort field')
@click.option('--order', default='desc', type=click.Choice(['asc', 'desc']), help='Sort order')
@handle_api_errors
def trash_list(search, sort_by, order):
    """List soft-deleted todos."""
    params = {"sortBy": sort_by, "order": order}
    if search is not None:
        params["search"] = search
    todos = api_request("GET", "/api/trash", params=params)
    if not todos:
        click.echo("Trash is empty")
        return

    table = []
    for t in todos:
        table.append([
            t["todoId"],
            t["title"],
            t.get("dueDate") or "-",
            utc_to_local(t.get("deletedAt")),
        ])
    click.echo(tabulate(table, headers=["ID", "Title", "Due", "Deleted At"], tablefmt="simple"))
