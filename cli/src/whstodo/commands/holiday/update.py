import click
from whstodo.api_client import api_request
from whstodo.commands.util import handle_api_errors


@click.command('update')
@click.argument('holiday_id')
@click.option('--title', '-t', default=None, help='New title')
@click.option('--date', default=None, help='New date (YYYY-MM-DD)')
@click.option('--description', '-d', default=None, help='New description')
@click.option('--recurring/--once', default=None, help='Yearly recurring or not')
@handle_api_errors
def holiday_update(holiday_id, title, date, description, recurring):
    """Update a holiday. Admin only."""
    fields = {}
    if title is not None:
        fields['title'] = title
    if date is not None:
        fields['date'] = date
    if description is not None:
        fields['description'] = description
    if recurring is not None:
        fields['isRecurring'] = recurring

    if not fields:
        click.echo("No fields to update")
        return

    holiday = api_request("PUT", f"/api/holidays/{holiday_id}", json=fields)
    click.echo(f"Updated holiday '{holiday['title']}' ({holiday['holidayId']})")
