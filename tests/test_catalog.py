"""
Tests for the catalog readers and table filters
"""

import re

import pytest

from schemadump.db.catalog import (
    MySQLCatalog,
    PostgresCatalog,
    catalog_for,
    filter_tables,
)


class TestFilterTables:
    """Include/exclude filtering"""

    def test_no_filters_keeps_everything_in_order(self):
        assert filter_tables(["b", "a", "c"]) == ["b", "a", "c"]

    def test_include(self):
        tables = ["pub_orders", "users", "pub_items"]
        assert filter_tables(tables, include=re.compile("^pub_")) == ["pub_orders", "pub_items"]

    def test_exclude(self):
        tables = ["orders", "orders_archive"]
        assert filter_tables(tables, exclude=re.compile("_archive$")) == ["orders"]

    def test_exclude_wins_over_include(self):
        tables = ["pub_orders", "pub_orders_archive", "users"]
        selected = filter_tables(tables, include=re.compile("^pub_"), exclude=re.compile("_archive$"))
        assert selected == ["pub_orders"]


class TestPostgresCatalog:
    """PostgreSQL catalog queries"""

    def test_lists_tables_of_public_schema(self, make_connection, shop_tables):
        connection = make_connection(shop_tables)
        catalog = PostgresCatalog(connection)

        assert catalog.list_tables() == ["users", "order_items", "orders_archive"]
        sql, params = connection.queries[0]
        assert "information_schema.tables" in sql
        assert params == {"schema": "public"}

    def test_primary_keys_use_constraint_join(self, make_connection, shop_tables):
        connection = make_connection(shop_tables)
        catalog = PostgresCatalog(connection)

        assert catalog.primary_keys("users") == {"id"}
        sql, params = connection.queries[0]
        assert "table_constraints" in sql
        assert "constraint_column_usage" in sql
        assert params["table"] == "users"

    def test_columns_normalize_types_and_flag_primary_keys(self, make_connection, shop_tables):
        catalog = PostgresCatalog(make_connection(shop_tables))

        assert catalog.list_columns("users") == [
            ("id", "integer", True),
            ("email", "character", False),
            ("created_at", "timestamp", False),
        ]

    def test_describe(self, make_connection, shop_tables):
        table = PostgresCatalog(make_connection(shop_tables)).describe("order_items")
        assert table.name == "order_items"
        assert table.column_names[:3] == ["id", "order_id", "quantity"]
        assert table.has_id

    def test_tables_applies_filters(self, make_connection, shop_tables):
        catalog = PostgresCatalog(make_connection(shop_tables))
        assert catalog.tables(exclude=re.compile("_archive$")) == ["users", "order_items"]

    def test_normalize_type(self):
        assert PostgresCatalog.normalize_type("timestamp without time zone") == "timestamp"
        assert PostgresCatalog.normalize_type("USER-DEFINED") == "user-defined"
        assert PostgresCatalog.normalize_type("") == ""


class TestMySQLCatalog:
    """MySQL catalog queries"""

    def test_schema_is_the_repository_database(self, mysql_repo):
        catalog = catalog_for(mysql_repo)

        assert isinstance(catalog, MySQLCatalog)
        assert catalog.list_tables() == ["users", "order_items"]
        _, params = mysql_repo.connection.queries[0]
        assert params == {"schema": "shop"}

    def test_columns_carry_pri_flag(self, mysql_repo):
        catalog = catalog_for(mysql_repo)
        assert catalog.list_columns("users") == [
            ("id", "int", True),
            ("email", "varchar", False),
            ("created_at", "datetime", False),
        ]

    def test_primary_keys(self, mysql_repo):
        assert catalog_for(mysql_repo).primary_keys("order_items") == {"id"}


def test_catalog_for_postgres(postgres_repo):
    assert isinstance(catalog_for(postgres_repo), PostgresCatalog)


def test_query_errors_propagate(make_connection):
    catalog = PostgresCatalog(make_connection({"users": []}))
    with pytest.raises(KeyError):
        catalog.list_columns("missing")
