import click
from tabulate import tabulate
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('list')
@click.option('--year', '-y', default=None, type=click.IntRange(1900, 2100), help='Filter by year')
@click.option('--month', '-m', default=None, type=click.IntRange(1, 12), help='Filter by month')
@handle_api_errors
def holiday_list(year, month):
    """List holidays."""
    params = {}
    if year is not None:
        params["year"] = year
    if month is not None:
        params["month"] = month
    holidays = api_request("GET", "/api/holidays", params=params)
    if not holidays:
        click.echo("No holidays found")
        return

    table = [
        [h["holidayId"], h["date"], h["title"], "yes" if h["isRecurring"] else "no", h.get("description") or "-"]
        for h in holidays
    ]
    click.echo(tabulate(table, headers=["ID", "Date", "Title", "Recurring", "Description"], tablefmt="simple"))
