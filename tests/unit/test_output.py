"""Tests for Rich table rendering."""

from io import StringIO

from rich.console import Console

from datatable_helpers.extensions import fill, scaffold
from datatable_helpers.models.table import DataTable
from datatable_helpers.output.tables import (
    datatable_to_rich,
    kv_table,
    make_table,
    schema_table,
    type_label,
)


def _render(renderable) -> str:
    buf = StringIO()
    console = Console(file=buf, force_terminal=True, width=80)
    console.print(renderable)
    return buf.getvalue()


class Reading:
    sensor: str
    value: float | None

    def __init__(self, sensor: str, value: float | None) -> None:
        self.sensor = sensor
        self.value = value


class TestTables:
    def test_make_table(self):
        out = _render(make_table("Test", ["A", "B"], [["1", "2"], ["3", "4"]]))
        assert "Test" in out
        assert "1" in out
        assert "4" in out

    def test_kv_table(self):
        out = _render(kv_table({"key1": "val1", "key2": "val2"}, title="KV"))
        assert "key1" in out
        assert "val1" in out

    def test_kv_table_none_values(self):
        out = _render(kv_table({"key": None}))
        assert "key" in out
        assert "None" not in out

    def test_datatable_to_rich(self):
        table = DataTable("readings")
        fill(table, [Reading("t1", 20.5), Reading("t2", None)])
        out = _render(datatable_to_rich(table))
        assert "readings" in out
        assert "sensor" in out
        assert "20.5" in out
        assert "t2" in out

    def test_explicit_title_wins(self):
        table = DataTable("readings")
        fill(table, [], Reading)
        out = _render(datatable_to_rich(table, title="Latest"))
        assert "Latest" in out
        assert "readings" not in out

    def test_schema_table(self):
        table = DataTable()
        scaffold(table, Reading)
        out = _render(schema_table(table, title="Schema"))
        assert "sensor" in out
        assert "float" in out
        assert "str" in out


class TestTypeLabel:
    def test_untyped(self):
        assert type_label(None) == "object"

    def test_class(self):
        assert type_label(int) == "int"
