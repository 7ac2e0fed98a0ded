import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('add')
@click.argument('title')
@click.argument('date')
@click.option('--description', '-d', default=None, help='Description')
@click.option('--once', is_flag=True, help='Not a yearly recurring holiday')
@handle_api_errors
def holiday_add(title, date, description, once):
    """Add a holiday on DATE (YYYY-MM-DD). Admin only."""
    body = {"title": title, "date": date, "isRecurring": not once}
    if description is not None:
        body["description"] = description
    holiday = api_request("POST", "/api/holidays", json=body)
    click.echo(f"Created holiday '{holiday['title']}' on {holiday['date']} ({holiday['holidayId']})")
