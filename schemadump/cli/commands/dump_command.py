"""
schemadump CLI - Dump Command

Reads the catalog of each repository and writes one Ecto schema per table.
"""

import sys
from pathlib import Path
from typing import List

import click
from sqlalchemy.exc import SQLAlchemyError

from schemadump.db.catalog import catalog_for
from schemadump.db.connection import Repository, RepositoryManager, open_repository
from schemadump.exceptions import SchemaDumpError
from schemadump.logging import get_logger
from schemadump.options import GeneratorOptions, build_options

from ..render import render_schema
from ..utils import handle_error, progress_step, success_message
from ..writer import model_path, write_model
from .helpers import current_config, repository_options

logger = get_logger(__name__)


def dump_repository(repo: Repository, options: GeneratorOptions) -> List[Path]:
    """
    Generate the schemas of every selected table of one repository.

    Tables are processed one at a time in catalog order; the first failure
    aborts the run.

    Returns:
        Paths of the generated (or, in dry-run mode, previewed) files
    """
    catalog = catalog_for(repo)

    with progress_step(f"Reading tables of {repo}"):
        tables = catalog.tables(options.include, options.exclude)

    logger.info(f"{len(tables)} table(s) selected in {repo}")

    generated = []
    for table in tables:
        description = catalog.describe(table)
        content = render_schema(description, options)
        path = model_path(table, options)

        if options.dry_run:
            click.secho(f"# [DRY-RUN] {path}", fg='yellow')
            click.echo(content)
        else:
            write_model(path, content)

        generated.append(path)

    return generated


def dump_models(options: GeneratorOptions, config) -> List[Path]:
    """Run the generator over every configured repository."""
    generated = []
    for url in RepositoryManager(config).resolve(options.repos):
        with open_repository(url, config) as repo:
            generated.extend(dump_repository(repo, options))
    return generated


@click.command(name='dump')
@repository_options
@click.option('--app', default=None, metavar='NAME',
              help='Application module, e.g. MyApp (read from mix.exs when omitted)')
@click.option('--prefix', 'prefixes', multiple=True, metavar='NAME',
              help='Table prefix turned into a module namespace (repeatable or comma-separated)')
@click.option('--not-prefix', 'not_prefixes', multiple=True, metavar='NAME',
              help='Prefix or table name that must not be namespaced (repeatable or comma-separated)')
@click.option('--inserted-at', default=None, metavar='COLUMN',
              help='Column holding the insertion timestamp (default: inserted_at)')
@click.option('--datetime-type', default=None, metavar='TYPE',
              help='Ecto type for date-time columns and timestamps, e.g. :utc_datetime')
@click.option('--output-dir', default=None, metavar='DIR',
              help='Root directory of the generated files (default: lib)')
@click.option('--dry-run', is_flag=True, default=False,
              help='Print the generated schemas without writing files')
@click.pass_obj
def dump(obj, repos, include, exclude, app, prefixes, not_prefixes, inserted_at,
         datetime_type, output_dir, dry_run):
    """
    Generate Ecto schemas from a database catalog.

    One file per table is written to <output-dir>/<app>/models/.

    Examples:
        schemadump dump -r postgresql://localhost/shop --app Shop
        schemadump dump -r mysql+pymysql://root@localhost/blog --include '^blog_' --prefix blog
    """
    config = current_config(obj)

    try:
        options = build_options(
            config,
            repos=repos,
            app=app,
            include=include,
            exclude=exclude,
            prefixes=prefixes,
            not_prefixes=not_prefixes,
            inserted_at=inserted_at,
            datetime_type=datetime_type,
            output_dir=output_dir,
            dry_run=dry_run,
        )
        generated = dump_models(options, config)
    except (SchemaDumpError, SQLAlchemyError, OSError) as e:
        handle_error(e)
        sys.exit(1)

    if dry_run:
        success_message("Dry run finished, no files written", {"Schemas": len(generated)})
    else:
        success_message("Schemas generated", {
            "Application": options.app,
            "Directory": options.models_dir,
            "Files": len(generated),
        })
