"""
Tests for schema rendering
"""

import pytest
from jinja2 import UndefinedError

from schemadump.cli._template_loader import jinja_env
from schemadump.cli.render import render_schema, schema_module_name
from schemadump.core.columns import TableDescriptor
from schemadump.options import GeneratorOptions


def test_users_table_end_to_end():
    table = TableDescriptor("users", (
        ("id", "int", True),
        ("email", "varchar", False),
        ("created_at", "timestamp", False),
    ))
    content = render_schema(table, GeneratorOptions(app="Shop"))

    assert content == (
        'defmodule Shop.User do\n'
        '  use Shop.Schema\n'
        '\n'
        '  schema "users" do\n'
        '    field :email, :string\n'
        '    timestamps(inserted_at: :created_at, updated_at: false)\n'
        '  end\n'
        'end\n'
    )
    assert "field :id" not in content
    assert "belongs_to" not in content


def test_belongs_to_and_fields():
    table = TableDescriptor("order_items", (
        ("id", "bigint", True),
        ("order_id", "bigint", False),
        ("quantity", "integer", False),
        ("inserted_at", "timestamp", False),
        ("updated_at", "timestamp", False),
    ))
    content = render_schema(table, GeneratorOptions(app="Shop"))

    assert "defmodule Shop.OrderItem do" in content
    assert 'schema "order_items" do' in content
    assert "    belongs_to :order, Shop.Order\n" in content
    assert "    field :quantity, :integer\n" in content
    assert "    timestamps()\n" in content


def test_table_without_id_disables_default_primary_key():
    table = TableDescriptor("countries", (("code", "char", True), ("name", "varchar", False)))
    content = render_schema(table, GeneratorOptions(app="Geo"))

    assert "  @primary_key false\n" in content
    assert "    field :code, :string, primary_key: true\n" in content


def test_prefixed_table_is_namespaced():
    options = GeneratorOptions(app="Shop", prefixes=("blog",))
    table = TableDescriptor("blog_comments", (("id", "integer", True), ("blog_post_id", "integer", False)))
    content = render_schema(table, options)

    assert "defmodule Shop.Blog.Comment do" in content
    assert "belongs_to :blog_post, Shop.Blog.Post" in content


def test_uuid_foreign_key_renders_type():
    table = TableDescriptor("sessions", (("id", "uuid", True), ("user_id", "uuid", False)))
    content = render_schema(table, GeneratorOptions(app="Shop"))
    assert "    belongs_to :user, Shop.User, type: :string\n" in content


def test_series_table_module():
    assert schema_module_name("time_series", GeneratorOptions()) == "TimeSerie"


def test_template_output_is_not_html_escaped():
    table = TableDescriptor("notes", (("id", "integer", True), ('say "hi"', "text", False)))
    content = render_schema(table, GeneratorOptions(app="App"))
    assert 'field :"say \\"hi\\"", :string' in content
    assert "&#34;" not in content


def test_strict_undefined_enabled():
    template = jinja_env.get_template("schema.ex.j2")
    with pytest.raises(UndefinedError):
        template.render(app="App")
