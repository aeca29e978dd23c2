"""
Catalog readers.

Each supported engine exposes the same three queries over
``information_schema``: the table listing, the columns of a table and the
primary key columns of a table.
"""

import re
from typing import Iterable, List, Optional, Set

from sqlalchemy import text
from sqlalchemy.engine import Connection

from schemadump.config import Config
from schemadump.core.columns import ColumnRow, TableDescriptor
from schemadump.db.connection import EngineKind, Repository
from schemadump.logging import get_logger

logger = get_logger(__name__)


def filter_tables(
    tables: Iterable[str],
    include: Optional[re.Pattern] = None,
    exclude: Optional[re.Pattern] = None,
) -> List[str]:
    """
    Apply the include/exclude filters, keeping the listing order.

    A table must match ``include`` (when set) and must not match ``exclude``
    (when set); exclude wins when both match.
    """
    selected = []
    for table in tables:
        if include is not None and not include.search(table):
            continue
        if exclude is not None and exclude.search(table):
            logger.debug(f"Skipping excluded table {table}")
            continue
        selected.append(table)
    return selected


class CatalogReader:
    """Engine-specific access to the database catalog."""

    TABLES_SQL = ""
    COLUMNS_SQL = ""
    PRIMARY_KEYS_SQL = ""

    def __init__(self, connection: Connection, schema: Optional[str]):
        self.connection = connection
        self.schema = schema

    def _rows(self, sql: str, **params) -> List[tuple]:
        result = self.connection.execute(text(sql), params)
        return [tuple(row) for row in result]

    def list_tables(self) -> List[str]:
        """Names of all tables in the schema, in catalog order."""
        return [row[0] for row in self._rows(self.TABLES_SQL, schema=self.schema)]

    def primary_keys(self, table: str) -> Set[str]:
        """Names of the primary key columns of a table."""
        return {row[0] for row in self._rows(self.PRIMARY_KEYS_SQL, schema=self.schema, table=table)}

    def list_columns(self, table: str) -> List[ColumnRow]:
        """(name, raw type, primary key) for each column of a table."""
        raise NotImplementedError

    def tables(
        self,
        include: Optional[re.Pattern] = None,
        exclude: Optional[re.Pattern] = None,
    ) -> List[str]:
        return filter_tables(self.list_tables(), include, exclude)

    def describe(self, table: str) -> TableDescriptor:
        return TableDescriptor(name=table, columns=tuple(self.list_columns(table)))


class MySQLCatalog(CatalogReader):
    """MySQL / MariaDB catalog; the schema is the repository's database."""

    TABLES_SQL = """
        SELECT table_name
        FROM information_schema.tables
        WHERE table_schema = :schema
    """

    COLUMNS_SQL = """
        SELECT COLUMN_NAME, DATA_TYPE,
               CASE WHEN COLUMN_KEY = 'PRI' THEN 1 ELSE 0 END AS primary_key
        FROM information_schema.columns
        WHERE table_name = :table
        AND table_schema = :schema
        ORDER BY ORDINAL_POSITION
    """

    PRIMARY_KEYS_SQL = """
        SELECT COLUMN_NAME
        FROM information_schema.columns
        WHERE table_name = :table
        AND table_schema = :schema
        AND COLUMN_KEY = 'PRI'
    """

    def list_columns(self, table: str) -> List[ColumnRow]:
        return [
            (name, data_type.lower(), bool(primary_key))
            for name, data_type, primary_key in self._rows(self.COLUMNS_SQL, schema=self.schema, table=table)
        ]


class PostgresCatalog(CatalogReader):
    """PostgreSQL catalog, restricted to the ``public`` schema."""

    TABLES_SQL = """
        SELECT table_name
        FROM information_schema.tables
        WHERE table_schema = :schema
    """

    COLUMNS_SQL = """
        SELECT column_name, data_type
        FROM information_schema.columns
        WHERE table_name = :table
        AND table_schema = :schema
        ORDER BY ordinal_position
    """

    PRIMARY_KEYS_SQL = """
        SELECT c.column_name
        FROM information_schema.table_constraints tc
        JOIN information_schema.constraint_column_usage AS ccu
        USING (constraint_schema, constraint_name)
        JOIN information_schema.columns AS c ON c.table_schema = tc.constraint_schema
        AND tc.table_name = c.table_name
        AND ccu.column_name = c.column_name
        WHERE constraint_type = 'PRIMARY KEY'
        AND tc.table_name = :table
        AND tc.constraint_schema = :schema
    """

    def __init__(self, connection: Connection, schema: Optional[str] = None):
        super().__init__(connection, schema or Config.Internal.POSTGRES_SCHEMA)

    @staticmethod
    def normalize_type(data_type: str) -> str:
        """
        Keep the first word of a PostgreSQL type name.

        Examples:
            timestamp without time zone -> timestamp
            character varying -> character
        """
        words = (data_type or "").lower().split()
        return words[0] if words else ""

    def list_columns(self, table: str) -> List[ColumnRow]:
        primary_keys = self.primary_keys(table)
        return [
            (name, self.normalize_type(data_type), name in primary_keys)
            for name, data_type in self._rows(self.COLUMNS_SQL, schema=self.schema, table=table)
        ]


def catalog_for(repo: Repository) -> CatalogReader:
    """Build the catalog reader matching a repository's engine."""
    if repo.kind == EngineKind.MYSQL:
        return MySQLCatalog(repo.connection, repo.database)
    return PostgresCatalog(repo.connection)
