"""
Column and table descriptors.

A TableDescriptor holds the raw catalog rows of one table; classify_columns
turns them into the ordered declarations of the generated schema.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from schemadump.config import Config
from schemadump.core.naming import namespaced_module_name, split_prefix, to_atom
from schemadump.core.types import INTEGER, get_type, normalize_type_token

if TYPE_CHECKING:
    from schemadump.options import GeneratorOptions

ColumnRow = Tuple[str, str, bool]


class ColumnKind(str, Enum):
    """How a column is declared in the schema block."""
    FIELD = "field"
    BELONGS_TO = "belongs_to"
    TIMESTAMPS = "timestamps"


@dataclass(frozen=True)
class ColumnDescriptor:
    """One declaration of a generated schema."""
    name: str
    raw_type: str
    primary_key: bool
    kind: ColumnKind
    type_token: str = ""
    association: str = ""
    target_module: str = ""
    timestamp_args: str = ""

    @property
    def atom(self) -> str:
        name = self.association if self.kind == ColumnKind.BELONGS_TO else self.name
        return to_atom(name.lower())

    @property
    def extra(self) -> str:
        args = []
        if self.kind == ColumnKind.BELONGS_TO and self.type_token != INTEGER:
            args.append(f"type: {self.type_token}")
        if self.primary_key:
            args.append("primary_key: true")
        return "".join(f", {arg}" for arg in args)


@dataclass(frozen=True)
class TableDescriptor:
    """A table and its (name, raw type, primary key) rows in catalog order."""
    name: str
    columns: Tuple[ColumnRow, ...]

    @property
    def column_names(self) -> List[str]:
        return [name for name, _, _ in self.columns]

    @property
    def has_id(self) -> bool:
        return Config.Internal.ID_COLUMN in self.column_names


def inserted_at_column(table: TableDescriptor, options: "GeneratorOptions") -> str:
    """
    Name of the column declared as the inserted-at timestamp.

    Without an explicit override, a table that has ``created_at`` but no
    ``inserted_at`` uses ``created_at``.
    """
    internal = Config.Internal
    names = table.column_names
    if (
        options.inserted_at == internal.DEFAULT_INSERTED_AT
        and internal.DEFAULT_INSERTED_AT not in names
        and internal.CREATED_AT in names
    ):
        return internal.CREATED_AT
    return options.inserted_at


def _timestamp_args(
    options: "GeneratorOptions",
    inserted_at: str,
    has_inserted: bool,
    has_updated: bool,
) -> str:
    args = []
    if not has_inserted:
        args.append("inserted_at: false")
    elif inserted_at != Config.Internal.DEFAULT_INSERTED_AT:
        args.append(f"inserted_at: {to_atom(inserted_at)}")
    if not has_updated:
        args.append("updated_at: false")
    if options.datetime_type:
        args.append(f"type: {normalize_type_token(options.datetime_type)}")
    return ", ".join(args)


def _association(
    column: str,
    table: TableDescriptor,
    options: "GeneratorOptions",
) -> Tuple[str, str]:
    suffix = Config.Internal.FOREIGN_KEY_SUFFIX
    trimmed = column[:-len(suffix)]

    table_prefix = split_prefix(table.name, options.prefixes, options.not_prefixes)
    column_prefix = split_prefix(trimmed, options.prefixes, options.not_prefixes)
    prefix: Optional[str] = column_prefix if column_prefix and column_prefix == table_prefix else None

    return trimmed, namespaced_module_name(trimmed, prefix)


def classify_columns(table: TableDescriptor, options: "GeneratorOptions") -> List[ColumnDescriptor]:
    """
    Build the schema declarations for a table.

    - ``id`` is dropped (Ecto declares it implicitly)
    - the inserted-at column (see inserted_at_column) and ``updated_at`` collapse into one
      ``timestamps`` declaration at the position of the first of them
    - ``<name>_id`` columns become ``belongs_to :<name>``
    - everything else is a ``field``

    Args:
        table: Catalog description of the table
        options: Generator options

    Returns:
        Ordered list of declarations
    """
    internal = Config.Internal
    names = table.column_names
    inserted_at = inserted_at_column(table, options)
    timestamp_columns = {inserted_at, internal.UPDATED_AT}
    has_inserted = inserted_at in names
    has_updated = internal.UPDATED_AT in names

    declarations: List[ColumnDescriptor] = []
    timestamps_done = False

    for name, raw_type, primary_key in table.columns:
        if name == internal.ID_COLUMN:
            continue

        if name in timestamp_columns:
            if not timestamps_done:
                declarations.append(ColumnDescriptor(
                    name=name,
                    raw_type=raw_type,
                    primary_key=False,
                    kind=ColumnKind.TIMESTAMPS,
                    timestamp_args=_timestamp_args(options, inserted_at, has_inserted, has_updated),
                ))
                timestamps_done = True
            continue

        if name.endswith(internal.FOREIGN_KEY_SUFFIX) and len(name) > len(internal.FOREIGN_KEY_SUFFIX):
            association, target = _association(name, table, options)
            declarations.append(ColumnDescriptor(
                name=name,
                raw_type=raw_type,
                primary_key=bool(primary_key),
                kind=ColumnKind.BELONGS_TO,
                type_token=get_type(raw_type, options.datetime_type),
                association=association,
                target_module=target,
            ))
            continue

        declarations.append(ColumnDescriptor(
            name=name,
            raw_type=raw_type,
            primary_key=bool(primary_key),
            kind=ColumnKind.FIELD,
            type_token=get_type(raw_type, options.datetime_type),
        ))

    return declarations
