"""
schemadump CLI - Tables Command

Lists the tables a dump would generate schemas for.
"""

import sys

import click
from sqlalchemy.exc import SQLAlchemyError

from schemadump.db.catalog import catalog_for
from schemadump.db.connection import RepositoryManager, open_repository
from schemadump.exceptions import SchemaDumpError
from schemadump.options import compile_filter

from ..utils import handle_error
from .helpers import current_config, repository_options


@click.command(name='tables')
@repository_options
@click.pass_obj
def tables(obj, repos, include, exclude):
    """
    List the tables selected by the filters, one per line.

    Examples:
        schemadump tables -r postgresql://localhost/shop --exclude '_archive$'
    """
    config = current_config(obj)

    try:
        include_pattern = compile_filter(include, "--include")
        exclude_pattern = compile_filter(exclude, "--exclude")

        for url in RepositoryManager(config).resolve(repos):
            with open_repository(url, config) as repo:
                for table in catalog_for(repo).tables(include_pattern, exclude_pattern):
                    click.echo(table)
    except (SchemaDumpError, SQLAlchemyError) as e:
        handle_error(e)
        sys.exit(1)
