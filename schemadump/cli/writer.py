"""
Schema file writer.

Files land in ``<output_dir>/<app>/models/`` and are named after the
singularized table name. Existing files are overwritten.
"""

from pathlib import Path

import click

from schemadump.config import Config
from schemadump.core.naming import singular_snake, split_prefix
from schemadump.options import GeneratorOptions


def model_path(table: str, options: GeneratorOptions) -> Path:
    """
    Path of the generated file for a table.

    Examples:
        order_items -> lib/my_app/models/order_item.ex
        blog_posts -> lib/my_app/models/blog/post.ex (with --prefix blog)
    """
    directory = options.models_dir
    name = table.lower()

    prefix = split_prefix(table, options.prefixes, options.not_prefixes)
    if prefix is not None:
        directory = directory / prefix.lower()
        name = name[len(prefix) + 1:]

    return directory / f"{singular_snake(name)}{Config.Internal.FILE_EXTENSION}"


def write_model(path: Path, content: str) -> Path:
    """
    Write a generated schema and report it on stdout.

    Intermediate directories are created as needed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    click.secho(f"  {path} was generated", fg='magenta')
    return path
