import functools
import sys

import click

from whstodo.api_client import ApiError


def handle_api_errors(func):
    """Print API errors as 'CODE: message' and exit non-zero."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ApiError as e:
            click.echo(f"{e.code}: {e.message}", err=True)
            sys.exit(1)
    return wrapper
