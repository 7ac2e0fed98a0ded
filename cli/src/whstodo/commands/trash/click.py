import click

from .list import trash_list
from .purge import trash_purge

@click.group('trash')
def trash_group():
    """Inspect and empty the trash."""
    pass

trash_group.add_command(trash_list)
trash_group.add_command(trash_purge)
