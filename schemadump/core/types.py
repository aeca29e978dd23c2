"""
SQL type to Ecto type mapping.

Catalog type names (``information_schema.columns.data_type``) are looked up
lowercased. Anything not listed falls back to ``:string``.
"""

from typing import Dict, Optional

from schemadump.logging import get_logger

logger = get_logger(__name__)

INTEGER = ":integer"
BOOLEAN = ":boolean"
BINARY = ":binary"
STRING = ":string"
FLOAT = ":float"
DECIMAL = ":decimal"
DATE = ":date"
TIME = ":time"
DATETIME = ":naive_datetime"

TYPE_MAP: Dict[str, str] = {
    # Integers
    "bigint": INTEGER,
    "bigserial": INTEGER,
    "int": INTEGER,
    "integer": INTEGER,
    "mediumint": INTEGER,
    "serial": INTEGER,
    "smallint": INTEGER,
    "smallserial": INTEGER,
    "tinyint": INTEGER,
    # Booleans
    "bit": BOOLEAN,
    "bit varying": BOOLEAN,
    "bool": BOOLEAN,
    "boolean": BOOLEAN,
    # Binaries
    "binary": BINARY,
    "blob": BINARY,
    "bytea": BINARY,
    "longblob": BINARY,
    "mediumblob": BINARY,
    "tinyblob": BINARY,
    "varbinary": BINARY,
    # Strings
    "char": STRING,
    "character": STRING,
    "character varying": STRING,
    "enum": STRING,
    "longtext": STRING,
    "mediumtext": STRING,
    "set": STRING,
    "text": STRING,
    "tinytext": STRING,
    "varchar": STRING,
    "year": STRING,
    # Stored as strings until user-defined mappings exist
    "inet": STRING,
    "json": STRING,
    "jsonb": STRING,
    "oid": STRING,
    "user-defined": STRING,
    "uuid": STRING,
    # Floats
    "decimal": FLOAT,
    "double": FLOAT,
    "double precision": FLOAT,
    "float": FLOAT,
    "real": FLOAT,
    "numeric": DECIMAL,
    # Dates and times
    "date": DATE,
    "time": TIME,
    "datetime": DATETIME,
    "timestamp": DATETIME,
    "timestamptz": DATETIME,
}


def normalize_type_token(token: Optional[str]) -> Optional[str]:
    """
    Turn a user supplied type into an Elixir term.

    ``utc_datetime`` becomes ``:utc_datetime``; atoms (``:utc_datetime``) and
    module names (``DateTime``) are kept as given.
    """
    if not token:
        return None
    token = token.strip()
    if token.startswith(":") or token[:1].isupper():
        return token
    return f":{token}"


def get_type(raw_type: str, datetime_type: Optional[str] = None) -> str:
    """
    Map a raw SQL type name to an Ecto type token.

    Args:
        raw_type: Type name as reported by the catalog
        datetime_type: Replacement for the date-time token, if configured

    Returns:
        Ecto type token, ``:string`` for unknown types
    """
    key = (raw_type or "").strip().lower()
    token = TYPE_MAP.get(key)

    if token is None:
        logger.debug(f"{raw_type} is not supported ... Fallback to {STRING}")
        return STRING

    if token == DATETIME and datetime_type:
        return normalize_type_token(datetime_type)

    return token
