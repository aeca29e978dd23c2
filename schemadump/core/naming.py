"""
Table and column name conversions.

Examples:
    order_items  -> OrderItem   (module), order_item (file)
    time_series  -> TimeSerie
    blog_posts   -> Blog.Post   (with prefix "blog")
"""

import re
from typing import Optional, Sequence

import inflect

_inflector = inflect.engine()

SINGULAR_ENDINGS = re.compile(r'(ss|us|is)$')

ATOM_PATTERN = re.compile(r'^[a-z_][a-zA-Z0-9_]*[?!]?$')


def camelize(name: str) -> str:
    """
    Convert snake_case to PascalCase.

    Examples:
        users -> Users
        order_items -> OrderItems
    """
    return ''.join(segment.capitalize() for segment in name.split('_'))


def underscore(name: str) -> str:
    """
    Convert PascalCase to snake_case.

    Examples:
        MyApp -> my_app
        Shop -> shop
    """
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


def singularize(word: str) -> str:
    """
    Singularize an English noun.

    Words ending in "series" lose only the trailing "s" (series -> serie),
    everything else goes through inflect. Words that already read as singular
    (address, status, analysis) are kept, and inflect's answer is only taken
    when pluralizing it gives back the original word.
    """
    if not word:
        return word

    if word.lower().endswith('series'):
        return word[:-1]

    if SINGULAR_ENDINGS.search(word.lower()):
        return word

    singular = _inflector.singular_noun(word)
    if not singular or _inflector.plural_noun(singular) != word:
        return word
    return singular


def singular_snake(name: str) -> str:
    """
    Singularize the last segment of a snake_case name.

    Examples:
        order_items -> order_item
        time_series -> time_serie
    """
    segments = name.lower().split('_')
    segments[-1] = singularize(segments[-1])
    return '_'.join(segments)


def module_name(name: str) -> str:
    """
    Module name for a table or association.

    Examples:
        order_items -> OrderItem
        customer -> Customer
    """
    return camelize(singular_snake(name))


def split_prefix(
    name: str,
    prefixes: Sequence[str],
    not_prefixes: Sequence[str] = (),
) -> Optional[str]:
    """
    Find the configured prefix a name is namespaced under.

    A name is namespaced under ``prefix`` when it starts with ``prefix_`` and
    neither the prefix nor the name itself is listed in ``not_prefixes``.
    The longest matching prefix wins.

    Returns:
        The matching prefix, or None
    """
    if name in not_prefixes:
        return None

    matches = [
        prefix for prefix in prefixes
        if prefix not in not_prefixes
        and name.startswith(f"{prefix}_")
        and len(name) > len(prefix) + 1
    ]
    if not matches:
        return None
    return max(matches, key=len)


def namespaced_module_name(name: str, prefix: Optional[str]) -> str:
    """
    Module name, nested under the prefix namespace when one applies.

    Examples:
        ("blog_posts", "blog") -> Blog.Post
        ("blog_posts", None) -> BlogPost
    """
    if prefix is None:
        return module_name(name)
    rest = name[len(prefix) + 1:]
    return f"{camelize(prefix)}.{module_name(rest)}"


def to_atom(name: str) -> str:
    """
    Render a name as an Elixir atom literal.

    Examples:
        email -> :email
        first name -> :"first name"
    """
    if ATOM_PATTERN.match(name):
        return f":{name}"
    escaped = name.replace('\\', '\\\\').replace('"', '\\"')
    return f':"{escaped}"'
