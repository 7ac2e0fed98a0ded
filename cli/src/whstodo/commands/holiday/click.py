import click

from .list import holiday_list
from .add import holiday_add
from .update import holiday_update

@click.group('holiday')
def holiday_group():
    """Browse holidays (admins can add and edit)."""
    pass

holiday_group.add_command(holiday_list)
holiday_group.add_command(holiday_add)
holiday_group.add_command(holiday_update)
