import click

from .add import todo_add
from .list import todo_list
from .get import todo_get
from .update import todo_update
from .complete import todo_complete
from .delete import todo_delete
from .restore import todo_restore

@click.group('todo')
def todo_group():
    """Manage todos."""
    pass

todo_group.add_command(todo_add)
todo_group.add_command(todo_list)
todo_group.add_command(todo_get)
todo_group.add_command(todo_update)
todo_group.add_command(todo_complete)
todo_group.add_command(todo_delete)
todo_group.add_command(todo_restore)
