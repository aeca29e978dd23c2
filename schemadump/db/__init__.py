"""
schemadump Database Support

Repository connections and catalog readers for MySQL and PostgreSQL.
"""

from schemadump.db.connection import EngineKind, Repository, RepositoryManager, open_repository
from schemadump.db.catalog import CatalogReader, MySQLCatalog, PostgresCatalog, catalog_for, filter_tables

__all__ = [
    "EngineKind",
    "Repository",
    "RepositoryManager",
    "open_repository",
    "CatalogReader",
    "MySQLCatalog",
    "PostgresCatalog",
    "catalog_for",
    "filter_tables",
]
