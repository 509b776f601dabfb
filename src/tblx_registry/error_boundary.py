"""Error boundary handling for CLI commands.

Catches registry errors at command entry points and prints a clean message
instead of a stack trace.
"""

import functools
from collections.abc import Callable
from typing import Any
from typing import TypeVar

import click

from .exceptions import ComponentNotFoundError
from .exceptions import RegistryError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns RegistryError into an error message and exit code 1.

    ComponentNotFoundError also lists the names that do exist.
    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ComponentNotFoundError as e:
            click.echo(f"❌ {e.message}", err=True)
            click.echo("\nAvailable components:", err=True)
            for name, description in e.available.items():
                click.echo(f"  - {name}: {description}", err=True)
            raise SystemExit(1) from None
        except RegistryError as e:
            click.echo(f"❌ {e.message}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
