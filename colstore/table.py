"""A table made of equally long named columns."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import islice, zip_longest

from colstore.column import Column


class Table:
    """A column-oriented table of string values."""

    def __init__(self, column_names: Iterable[str] = ()) -> None:
        self.columns: list[Column] = [Column(name) for name in column_names]

    def __repr__(self) -> str:
        return f"Table({self.column_names()!r}, rows={self.row_count()})"

    def column_names(self) -> list[str]:
        """Return the column names in table order."""
        return [col.name for col in self.columns]

    def column(self, name: str) -> Column:
        """Return the first column called ``name``."""
        for col in self.columns:
            if col.name == name:
                return col
        raise KeyError(f"Column {name!r} not found")

    def row_count(self) -> int:
        """Return the number of rows, taken from the first column."""
        return len(self.columns[0]) if self.columns else 0

    def insert_row(self, row: Sequence[str]) -> None:
        """Append one value to each column; the row must match the column count."""
        if len(row) != len(self.columns):
            raise ValueError(
                f"Row size mismatch: expected {len(self.columns)} values, got {len(row)}"
            )
        for col, value in zip(self.columns, row):
            col.insert(value)

    def update(self, column_name: str, index: int, new_value: str) -> None:
        """Set the value at ``index`` in every column called ``column_name``."""
        for col in self.columns:
            if col.name == column_name:
                col.update(index, new_value)

    def search(self, column_name: str, value: str) -> list[int]:
        """Return the row positions where ``column_name`` holds ``value``."""
        return self.column(column_name).search(value)

    def rows(self) -> Iterator[tuple[str, ...]]:
        """Yield each row as a tuple of values in column order."""
        if not self.columns:
            return
        yield from islice(zip_longest(*self.columns, fillvalue=""), self.row_count())

    def render(self) -> str:
        """Return a printable listing of the table."""
        names = "".join(f"{name} " for name in self.column_names())
        lines = [f"Column Names: {names}", f"Number of rows: {self.row_count()}"]
        lines.extend(" ".join(row) for row in self.rows())
        return "\n".join(lines) + "\n"