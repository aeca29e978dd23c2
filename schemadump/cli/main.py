"""
schemadump CLI

Entry point of the ``schemadump`` command.
"""

import sys

import click

from schemadump.config import Config
from schemadump.logging import setup_logging
from schemadump.cli.commands.dump_command import dump
from schemadump.cli.commands.tables_command import tables
from schemadump.cli.utils import handle_error


def _version_callback(ctx, param, value):
    """Display version and exit."""
    if value:
        from schemadump import __version__
        click.echo(f'schemadump v{__version__}')
        ctx.exit()


@click.group()
@click.option('--version', '-V', is_flag=True, callback=_version_callback, expose_value=False, is_eager=True, help='Show version and exit')
@click.option('--env-file', default=None, metavar='PATH', help='Read SCHEMADUMP_* settings from this file (default: .env)')
@click.option('-v', '--verbose', is_flag=True, default=False, help='Log debug output to stderr')
@click.pass_context
def cli(ctx, env_file, verbose):
    """
    schemadump - Ecto schemas from an existing MySQL or PostgreSQL database
    """
    config = (ctx.obj or Config).load_from_env(env_file)
    try:
        config.validate()
    except ValueError as e:
        handle_error(e, "Invalid configuration")
        sys.exit(1)

    setup_logging("DEBUG" if verbose else config.LOG_LEVEL)
    ctx.obj = config


cli.add_command(dump)
cli.add_command(tables)


if __name__ == '__main__':
    cli()
