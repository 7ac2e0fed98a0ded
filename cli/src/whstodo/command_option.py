import click
from dotenv import load_dotenv

from whstodo.commands.login import login
from whstodo.commands.logout import logout
from whstodo.commands.me import me
from whstodo.commands.todo.click import todo_group
from whstodo.commands.trash.click import trash_group
from whstodo.commands.holiday.click import holiday_group
from whstodo.commands.admin.click import admin_group
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

@click.group(context_settings=CONTEXT_SETTINGS)
def cli():
    """Personal todo list client."""
    load_dotenv()


# Register commands
cli.add_command(login)
cli.add_command(logout)
cli.add_command(me)
cli.add_command(todo_group)
cli.add_command(trash_group)
cli.add_command(holiday_group)
cli.add_command(admin_group)
