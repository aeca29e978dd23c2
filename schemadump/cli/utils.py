"""
schemadump CLI - Utilities

Error reporting and summary output for CLI commands. Everything here writes
to stderr; stdout only carries the generated-file lines.
"""

import click
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from schemadump.exceptions import SchemaDumpError


@contextmanager
def progress_step(message: str):
    """
    Context manager for a single progress step.

    Usage:
        with progress_step("Reading catalog of shop"):
            tables = catalog.tables()
    """
    click.secho(f"  [....] {message}", fg='blue', err=True)
    try:
        yield
        click.secho(f"  [ OK ] {message}", fg='green', err=True)
    except Exception:
        click.secho(f"  [FAIL] {message}", fg='red', err=True)
        raise


def handle_error(error: Exception, context: Optional[str] = None):
    """
    Report an error with formatting and suggestions.

    Args:
        error: The exception that occurred
        context: Optional context about what operation failed
    """
    click.echo(err=True)

    if isinstance(error, SchemaDumpError):
        if error.error_code:
            click.secho(f"[ERROR {error.error_code}] ", fg='red', bold=True, nl=False, err=True)
        else:
            click.secho("[ERROR] ", fg='red', bold=True, nl=False, err=True)

        click.secho(error.message, fg='red', err=True)

        if error.suggestion:
            click.secho("\n[TIP] ", fg='yellow', bold=True, nl=False, err=True)
            click.secho(error.suggestion, fg='yellow', err=True)

    elif isinstance(error, SQLAlchemyError):
        click.secho("[ERROR] ", fg='red', bold=True, nl=False, err=True)
        click.secho(f"Catalog query failed: {error}", fg='red', err=True)
        click.secho("\n[TIP] ", fg='yellow', bold=True, nl=False, err=True)
        click.secho("Check that the user can read information_schema.", fg='yellow', err=True)

    elif isinstance(error, PermissionError):
        click.secho("[ERROR] ", fg='red', bold=True, nl=False, err=True)
        click.secho(f"Permission denied: {error.filename or error}", fg='red', err=True)
        click.secho("\n[TIP] ", fg='yellow', bold=True, nl=False, err=True)
        click.secho("Check the permissions of the output directory.", fg='yellow', err=True)

    else:
        click.secho("[ERROR] ", fg='red', bold=True, nl=False, err=True)
        if context:
            click.secho(f"{context}: {error}", fg='red', err=True)
        else:
            click.secho(str(error), fg='red', err=True)

    click.echo(err=True)


def success_message(message: str, details: Optional[dict] = None):
    """
    Display a success message with optional details.

    Args:
        message: Main success message
        details: Optional dict of key-value details to display
    """
    click.echo(err=True)
    click.secho(f"[SUCCESS] {message}", fg='green', bold=True, err=True)

    if details:
        for key, value in details.items():
            click.secho(f"  {key}: ", fg='blue', nl=False, err=True)
            click.secho(str(value), fg='cyan', err=True)

    click.echo(err=True)
