"""Naming, type mapping and column classification."""

from schemadump.core.columns import ColumnDescriptor, ColumnKind, TableDescriptor, classify_columns
from schemadump.core.naming import camelize, module_name, singularize, split_prefix
from schemadump.core.types import TYPE_MAP, get_type

__all__ = [
    "ColumnDescriptor",
    "ColumnKind",
    "TableDescriptor",
    "classify_columns",
    "camelize",
    "module_name",
    "singularize",
    "split_prefix",
    "TYPE_MAP",
    "get_type",
]
