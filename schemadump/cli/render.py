"""
Schema file rendering.

Turns a catalog TableDescriptor into the text of an Ecto schema module.
"""

from schemadump.core.columns import TableDescriptor, classify_columns
from schemadump.core.naming import namespaced_module_name, split_prefix
from schemadump.options import GeneratorOptions

from ._template_loader import jinja_env

SCHEMA_TEMPLATE = 'schema.ex.j2'


def schema_module_name(table: str, options: GeneratorOptions) -> str:
    """
    Module name of a table's schema, relative to the app.

    Examples:
        order_items -> OrderItem
        blog_posts -> Blog.Post (with --prefix blog)
    """
    prefix = split_prefix(table, options.prefixes, options.not_prefixes)
    return namespaced_module_name(table, prefix)


def render_schema(table: TableDescriptor, options: GeneratorOptions) -> str:
    """
    Render the schema module for a table.

    Args:
        table: Catalog description of the table
        options: Generator options

    Returns:
        Elixir source of the schema module
    """
    template = jinja_env.get_template(SCHEMA_TEMPLATE)
    return template.render(
        app=options.app,
        module_name=schema_module_name(table.name, options),
        table=table.name,
        has_id=table.has_id,
        columns=classify_columns(table, options),
    )
