"""Tests for the table helper operations."""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Optional

import pytest
from pydantic import BaseModel, Field

from datatable_helpers.errors import (
    ColumnNotFoundError,
    DuplicateColumnError,
    InvalidArgumentError,
    RowOwnershipError,
)
from datatable_helpers.extensions import (
    add,
    add_or_update,
    contains_column,
    ensure_column,
    fill,
    order_properties,
    scaffold,
)
from datatable_helpers.models.comparison import StringComparison
from datatable_helpers.models.table import DB_NULL, DataTable


@dataclass
class Person:
    name: str
    age: Optional[int] = None


@dataclass
class Pair:
    A: int
    B: str


@dataclass
class Labeled:
    code: str
    years: int = field(default=0, metadata={"display_name": "Years Active"})


class Product(BaseModel):
    sku: str
    price: float | None = Field(default=None, title="Unit Price")


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


Code = namedtuple("Code", "a b")


class TestEnsureColumn:
    def test_creates_then_reports_existing(self, table: DataTable):
        assert ensure_column(table, "Name") is False
        assert ensure_column(table, "Name") is True
        assert len(table.columns) == 1

    def test_case_insensitive_existing(self, table: DataTable):
        ensure_column(table, "NAME")
        assert ensure_column(table, "name") is True
        assert table.columns.names == ["NAME"]

    def test_default_type_is_str(self, table: DataTable):
        ensure_column(table, "Name")
        assert table.columns["Name"].data_type is str

    def test_unwraps_optional(self, table: DataTable):
        ensure_column(table, "A", Optional[int])
        ensure_column(table, "B", float | None)
        assert table.columns["A"].data_type is int
        assert table.columns["B"].data_type is float

    def test_existing_column_type_untouched(self, table: DataTable):
        ensure_column(table, "A", int)
        ensure_column(table, "A", str)
        assert table.columns["A"].data_type is int

    def test_none_table(self):
        with pytest.raises(InvalidArgumentError, match="table"):
            ensure_column(None, "A")  # type: ignore[arg-type]

    @pytest.mark.parametrize("name", [None, ""])
    def test_empty_name(self, table: DataTable, name):
        with pytest.raises(ValueError, match="cannot be None or empty"):
            ensure_column(table, name)  # type: ignore[arg-type]
        assert len(table.columns) == 0


class TestContainsColumn:
    def test_ignore_case_by_default(self, table: DataTable):
        ensure_column(table, "NAME")
        assert contains_column(table, "Name") is True

    def test_ordinal_is_case_sensitive(self, table: DataTable):
        ensure_column(table, "NAME")
        assert contains_column(table, "Name", StringComparison.ORDINAL) is False
        assert contains_column(table, "NAME", StringComparison.ORDINAL) is True

    def test_missing(self, table: DataTable):
        assert contains_column(table, "Name") is False

    def test_invalid_arguments(self, table: DataTable):
        with pytest.raises(InvalidArgumentError):
            contains_column(None, "A")  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            contains_column(table, "")


class TestAdd:
    def test_object_into_scaffolded_table(self, table: DataTable):
        scaffold(table, Person)
        row = add(table, Person("Ada", 36))
        assert len(table.rows) == 1
        assert table.rows[0] is row
        assert row["name"] == "Ada"
        assert row["age"] == 36

    def test_none_property_becomes_db_null(self, table: DataTable):
        scaffold(table, Person)
        row = add(table, Person("Ada"))
        assert row["age"] is DB_NULL

    def test_missing_column_fails_without_adding(self, table: DataTable):
        ensure_column(table, "name")
        with pytest.raises(ColumnNotFoundError, match="age"):
            add(table, Person("Ada", 36))
        assert len(table.rows) == 0
        assert table.columns.names == ["name"]

    def test_existing_row_passes_through(self, table: DataTable):
        ensure_column(table, "A")
        row = table.new_row()
        row["A"] = "x"
        assert add(table, row) is row
        assert table.rows[0] is row

    def test_foreign_row_rejected(self, table: DataTable):
        other = DataTable("other")
        with pytest.raises(RowOwnershipError):
            add(table, other.new_row())

    def test_mapping(self, table: DataTable):
        ensure_column(table, "a")
        ensure_column(table, "b")
        row = add(table, {"a": 1, "b": None})
        assert row["a"] == 1
        assert row["b"] is DB_NULL

    def test_pydantic_model(self, table: DataTable):
        scaffold(table, Product)
        row = add(table, Product(sku="X1", price=9.5))
        assert row.item_array == ["X1", 9.5]

    def test_plain_object_attributes(self, table: DataTable):
        ensure_column(table, "x")
        ensure_column(table, "y")
        row = add(table, Point(1, 2))
        assert row.item_array == [1, 2]

    def test_namedtuple(self, table: DataTable):
        scaffold(table, Code)
        row = add(table, Code(1, "x"))
        assert row.item_array == [1, "x"]

    def test_simple_namespace(self, table: DataTable):
        ensure_column(table, "a")
        row = add(table, SimpleNamespace(a=1))
        assert row["a"] == 1

    def test_invalid_arguments(self, table: DataTable):
        with pytest.raises(InvalidArgumentError):
            add(None, Person("Ada"))  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError, match="item"):
            add(table, None)


class TestAddOrUpdate:
    def test_creates_column_and_sets_value(self, table: DataTable):
        row = table.rows.add(table.new_row())
        add_or_update(row, "Status", "new")
        assert row["Status"] == "new"
        assert table.columns["Status"].data_type is str

    def test_overwrites_without_duplicate(self, table: DataTable):
        row = table.rows.add(table.new_row())
        add_or_update(row, "Status", "new")
        add_or_update(row, "status", "done")
        assert row["Status"] == "done"
        assert len(table.columns) == 1

    def test_other_rows_get_null_cell(self, table: DataTable):
        first = table.rows.add(table.new_row())
        second = table.rows.add(table.new_row())
        add_or_update(second, "Flag", "y")
        assert first["Flag"] is DB_NULL

    def test_none_row(self):
        with pytest.raises(InvalidArgumentError, match="row"):
            add_or_update(None, "A", 1)  # type: ignore[arg-type]

    def test_row_without_table(self):
        t = DataTable()
        row = t.new_row()
        del t
        with pytest.raises(RowOwnershipError):
            add_or_update(row, "A", 1)


class TestScaffold:
    def test_typed_columns(self, table: DataTable):
        scaffold(table, Person)
        assert table.columns.names == ["name", "age"]
        assert table.columns["name"].data_type is str
        assert table.columns["age"].data_type is int

    def test_idempotent(self, table: DataTable):
        scaffold(table, Person)
        scaffold(table, Person)
        assert len(table.columns) == 2

    def test_uses_raw_names_not_display_names(self, table: DataTable):
        scaffold(table, Product)
        assert table.columns.names == ["sku", "price"]
        assert table.columns["price"].data_type is float

    def test_keeps_existing_columns(self, table: DataTable):
        ensure_column(table, "NAME", bytes)
        scaffold(table, Person)
        assert table.columns.names == ["NAME", "age"]
        assert table.columns["name"].data_type is bytes

    def test_invalid_arguments(self, table: DataTable):
        with pytest.raises(InvalidArgumentError):
            scaffold(None, Person)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError, match="source_type"):
            scaffold(table, None)  # type: ignore[arg-type]


class TestFill:
    def test_two_items(self, table: DataTable):
        fill(table, [Pair(1, "x"), Pair(2, "y")])
        assert table.columns.names == ["A", "B"]
        assert len(table.rows) == 2
        assert table.rows[0].item_array == [1, "x"]
        assert table.rows[1].item_array == [2, "y"]

    def test_columns_are_untyped(self, table: DataTable):
        fill(table, [Pair(1, "x")])
        assert all(c.data_type is None for c in table.columns)

    def test_empty_items_with_type(self, table: DataTable):
        fill(table, [], Pair)
        assert table.columns.names == ["A", "B"]
        assert len(table.rows) == 0

    def test_empty_items_without_type(self, table: DataTable):
        with pytest.raises(InvalidArgumentError, match="item_type"):
            fill(table, [])

    def test_accepts_generator(self, table: DataTable):
        fill(table, (Pair(n, str(n)) for n in range(3)), Pair)
        assert [r["A"] for r in table.rows] == [0, 1, 2]

    def test_display_names(self, table: DataTable):
        fill(table, [Labeled("a", 3)])
        assert table.columns.names == ["code", "Years Active"]
        assert table.rows[0]["Years Active"] == 3

    def test_pydantic_titles(self, table: DataTable):
        fill(table, [Product(sku="X1")], Product)
        assert table.columns.names == ["sku", "Unit Price"]
        assert table.rows[0]["Unit Price"] is DB_NULL

    def test_mixed_value_types_allowed(self, table: DataTable):
        fill(table, [{"v": 1}, {"v": "one"}, {"v": None}])
        assert [r["v"] for r in table.rows] == [1, "one", DB_NULL]

    def test_clashing_column(self, table: DataTable):
        ensure_column(table, "a")
        with pytest.raises(DuplicateColumnError):
            fill(table, [Pair(1, "x")])

    def test_invalid_arguments(self, table: DataTable):
        with pytest.raises(InvalidArgumentError):
            fill(None, [])  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError, match="data"):
            fill(table, None)  # type: ignore[arg-type]


class TestFillOtherObjectKinds:
    def test_namedtuple(self, table: DataTable):
        fill(table, [Code(1, "x"), Code(2, "y")])
        assert table.columns.names == ["a", "b"]
        assert table.rows[0].item_array == [1, "x"]
        assert table.rows[1].item_array == [2, "y"]

    def test_plain_objects(self, table: DataTable):
        fill(table, [Point(1, 2), Point(3, 4)])
        assert table.columns.names == ["x", "y"]
        assert [r.item_array for r in table.rows] == [[1, 2], [3, 4]]

    def test_plain_objects_with_type(self, table: DataTable):
        fill(table, [Point(5, 6)], Point)
        assert table.columns.names == ["x", "y"]
        assert table.rows[0].item_array == [5, 6]

    def test_simple_namespaces(self, table: DataTable):
        fill(table, [SimpleNamespace(a=1, b="x")])
        assert table.columns.names == ["a", "b"]
        assert table.rows[0].item_array == [1, "x"]


class TestOrderProperties:
    def test_keeps_declaration_order(self):
        assert order_properties(["a", "b", "c", "d"]) == ["a", "b", "c", "d"]

    def test_empty(self):
        assert order_properties([]) == []

    def test_single(self):
        assert order_properties(["only"]) == ["only"]
