"""In-memory tabular container: a table of named columns and aligned rows.

A :class:`DataTable` owns its columns and rows. Every row exposes exactly one
cell per column of its table; cells that were never written (including cells
of columns added after the row was created) hold :data:`DB_NULL`.

Rows and columns only keep a weak reference back to their table, so the
table stays the single owner of the object graph.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import Any, Union

from datatable_helpers.errors import (
    ColumnNotFoundError,
    DuplicateColumnError,
    RowOwnershipError,
)


class _DBNull:
    """Database-null cell marker."""

    _instance: _DBNull | None = None

    def __new__(cls) -> _DBNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "DB_NULL"

    def __reduce__(self) -> str:
        return "DB_NULL"


DB_NULL = _DBNull()


class DataColumn:
    """A named slot present in every row of a table.

    ``data_type`` is informational only; cell values are never coerced.
    ``None`` means the column is untyped.
    """

    def __init__(self, column_name: str, data_type: type | None = None) -> None:
        self.column_name = column_name
        self.data_type = data_type
        self._table: weakref.ref[DataTable] | None = None

    @property
    def table(self) -> DataTable | None:
        return self._table() if self._table is not None else None

    @property
    def ordinal(self) -> int:
        table = self.table
        return table.columns.index_of(self) if table is not None else -1

    def __repr__(self) -> str:
        type_name = getattr(self.data_type, "__name__", None) or repr(self.data_type)
        return f"DataColumn({self.column_name!r}, {type_name})"


ColumnKey = Union[str, int, DataColumn]


class DataColumnCollection:
    """Ordered set of columns, unique by case-insensitive name."""

    def __init__(self, table: DataTable) -> None:
        self._table = weakref.ref(table)
        self._columns: list[DataColumn] = []

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[DataColumn]:
        return iter(list(self._columns))

    def __contains__(self, key: object) -> bool:
        if isinstance(key, DataColumn):
            return any(c is key for c in self._columns)
        if isinstance(key, str):
            return self.find(key) is not None
        return False

    def __getitem__(self, key: str | int) -> DataColumn:
        if isinstance(key, int):
            return self._columns[key]
        column = self.find(key)
        if column is None:
            table = self._table()
            raise ColumnNotFoundError(key, table.table_name if table else None)
        return column

    @property
    def names(self) -> list[str]:
        return [c.column_name for c in self._columns]

    def find(self, column_name: str) -> DataColumn | None:
        """Return the column named *column_name* (case-insensitive), if any."""
        folded = column_name.casefold()
        for column in self._columns:
            if column.column_name.casefold() == folded:
                return column
        return None

    def index_of(self, key: str | DataColumn) -> int:
        for i, column in enumerate(self._columns):
            if isinstance(key, DataColumn):
                if column is key:
                    return i
            elif column.column_name.casefold() == key.casefold():
                return i
        return -1

    def add(self, column_name: str | None = None, data_type: type | None = None) -> DataColumn:
        """Append a new column; an empty name gets the next ``ColumnN`` name."""
        name = column_name or self._next_default_name()
        if self.find(name) is not None:
            raise DuplicateColumnError(name)
        column = DataColumn(name, data_type)
        column._table = self._table
        self._columns.append(column)
        return column

    def _next_default_name(self) -> str:
        n = 1
        while self.find(f"Column{n}") is not None:
            n += 1
        return f"Column{n}"


class DataRow:
    """One record of a table, holding one cell per column."""

    def __init__(self, table: DataTable) -> None:
        self._table = weakref.ref(table)
        self._cells: dict[DataColumn, Any] = {}

    @property
    def table(self) -> DataTable | None:
        return self._table()

    def _require_table(self) -> DataTable:
        table = self._table()
        if table is None:
            raise RowOwnershipError("Row does not belong to a table.")
        return table

    def _column(self, key: ColumnKey) -> DataColumn:
        table = self._require_table()
        if isinstance(key, DataColumn):
            if key.table is not table:
                raise ColumnNotFoundError(key.column_name, table.table_name)
            return key
        return table.columns[key]

    def __getitem__(self, key: ColumnKey) -> Any:
        return self._cells.get(self._column(key), DB_NULL)

    def __setitem__(self, key: ColumnKey, value: Any) -> None:
        self._cells[self._column(key)] = DB_NULL if value is None else value

    @property
    def item_array(self) -> list[Any]:
        """Cell values in column order."""
        table = self._require_table()
        return [self._cells.get(c, DB_NULL) for c in table.columns]

    def to_dict(self) -> dict[str, Any]:
        table = self._require_table()
        return {c.column_name: self._cells.get(c, DB_NULL) for c in table.columns}

    def __repr__(self) -> str:
        if self.table is None:
            return "DataRow(<detached>)"
        return f"DataRow({self.item_array!r})"


class DataRowCollection:
    """Ordered list of the rows attached to a table."""

    def __init__(self, table: DataTable) -> None:
        self._table = weakref.ref(table)
        self._rows: list[DataRow] = []
        self._attached: set[int] = set()

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[DataRow]:
        return iter(list(self._rows))

    def __getitem__(self, index: int) -> DataRow:
        return self._rows[index]

    def __contains__(self, row: object) -> bool:
        return id(row) in self._attached

    def add(self, row: DataRow) -> DataRow:
        """Attach a row created by this table's :meth:`DataTable.new_row`."""
        if row.table is not self._table():
            raise RowOwnershipError("This row already belongs to another table.")
        if id(row) in self._attached:
            raise RowOwnershipError("This row already belongs to this table.")
        self._rows.append(row)
        self._attached.add(id(row))
        return row


class DataTable:
    """Named columns plus an ordered list of rows."""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name
        self.columns = DataColumnCollection(self)
        self.rows = DataRowCollection(self)

    def new_row(self) -> DataRow:
        """Create a detached row with this table's schema."""
        return DataRow(self)

    def __repr__(self) -> str:
        name = f"{self.table_name!r}, " if self.table_name else ""
        return f"DataTable({name}columns={self.columns.names!r}, rows={len(self.rows)})"
