"""Parsing and running SQL-like queries against in-memory tables."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Sequence
from pathlib import Path

from colstore.column import Column
from colstore.storage import save_table
from colstore.table import Table

_CELL_WIDTH = 15
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")

_TEXT_COMPARISONS: dict[str, Callable[[str, str], bool]] = {
    "=": operator.eq,
    "!=": operator.ne,
}
_NUMERIC_COMPARISONS: dict[str, Callable[[int, int], bool]] = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}


class QueryError(Exception):
    """Raised when a query is malformed or refers to something missing."""


def tokenize(query: str) -> list[str]:
    """Split a query on whitespace."""
    return query.split()


def _split_list(text: str, strip_chars: str) -> list[str]:
    """Split on commas the way a line reader does: no field after a final comma."""
    if not text:
        return []
    pieces = text.split(",")
    if pieces[-1] == "":
        pieces.pop()
    return [piece.strip(strip_chars) for piece in pieces]


def _strip_parens(text: str) -> str:
    if text and text[0] == "(" and text[-1] == ")":
        return text[1:-1]
    return text


def _parse_int_prefix(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _matches(op: str, row_value: str, value: str) -> bool:
    if op in _TEXT_COMPARISONS:
        return _TEXT_COMPARISONS[op](row_value, value)
    left, right = _parse_int_prefix(row_value), _parse_int_prefix(value)
    if left is None or right is None:
        return False
    return _NUMERIC_COMPARISONS[op](left, right)


def _value_at(column: Column, index: int) -> str:
    return column.get(index) if index < len(column) else ""


def _find_column(table: Table, name: str) -> Column | None:
    try:
        return table.column(name)
    except KeyError:
        return None


def _render_grid(table: Table, names: Sequence[str], row_indices: Sequence[int]) -> str:
    header = "".join(name.ljust(_CELL_WIDTH) for name in names)
    separator = "-" * _CELL_WIDTH * len(names)
    columns = [_find_column(table, name) for name in names]
    lines = [header, separator]
    for index in row_indices:
        lines.append(
            "".join(
                _value_at(col, index).ljust(_CELL_WIDTH)
                for col in columns
                if col is not None
            )
        )
    return "\n".join(lines) + "\n"


class QueryProcessor:
    """Holds named tables and runs queries against them, persisting changes."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self._tables: dict[str, Table] = {}

    def add_table(self, name: str, table: Table) -> str:
        """Register ``table`` under ``name`` and return a confirmation message."""
        self._tables[name] = table
        return f"Table '{name}' added successfully.\n"

    def table(self, name: str) -> Table:
        """Return the table registered under ``name``."""
        try:
            return self._tables[name]
        except KeyError:
            raise QueryError(f"Table '{name}' not found") from None

    def execute(self, query: str) -> str:
        """Run one query and return the text it produces."""
        if not query:
            raise QueryError("Empty query")
        tokens = tokenize(query)
        if not tokens:
            raise QueryError("Invalid query format")

        command = tokens[0]
        if command == "CREATE" and len(tokens) >= 4 and tokens[1] == "TABLE":
            return self._create(tokens)
        handlers = {
            "INSERT": self._insert,
            "DELETE": self._delete,
            "UPDATE": self._update,
        }
        if command in handlers:
            return handlers[command](tokens)
        if len(tokens) < 4:
            raise QueryError("Invalid query format")
        if command == "SELECT":
            return self._select(tokens)
        return ""

    def _save(self, name: str) -> None:
        save_table(self._tables[name], name, self.directory)

    def _create(self, tokens: list[str]) -> str:
        name = tokens[2]
        columns_text = _strip_parens(" ".join(tokens[3:]))
        column_names = [col for col in _split_list(columns_text, " \t") if col]
        if not column_names:
            raise QueryError("No columns specified")
        message = self.add_table(name, Table(column_names))
        self._save(name)
        listed = "".join(f"{col} " for col in column_names)
        return f"{message}Table '{name}' created with columns: {listed}\n"

    def _insert(self, tokens: list[str]) -> str:
        if len(tokens) < 6 or tokens[1] != "INTO":
            raise QueryError("Invalid INSERT query format")
        name = tokens[2]
        table = self.table(name)
        if "VALUES" not in tokens or tokens.index("VALUES") == len(tokens) - 1:
            raise QueryError("Missing VALUES keyword or values")
        values_text = _strip_parens(" ".join(tokens[tokens.index("VALUES") + 1:]))
        values = _split_list(values_text, " '\"")
        if len(values) != len(table.columns):
            raise QueryError("Number of values does not match number of columns")
        table.insert_row(values)
        self._save(name)
        return f"Row inserted into '{name}'\n"

    def _delete(self, tokens: list[str]) -> str:
        if "FROM" not in tokens or tokens.index("FROM") == len(tokens) - 1:
            raise QueryError("Invalid DELETE query format")
        name = tokens[tokens.index("FROM") + 1]
        table = self.table(name)
        selected = self._selected_columns(tokens, table)
        if "WHERE" in tokens:
            return self._where(table, tokens[tokens.index("WHERE"):], selected, delete=True)

        row_count = table.row_count()
        if row_count == 0:
            return f"No rows to delete in table '{name}'\n"
        for index in reversed(range(row_count)):
            for col in table.columns:
                if index < len(col):
                    col.delete_at(index)
        self._save(name)
        return f"All rows deleted from table '{name}'\n"

    def _update(self, tokens: list[str]) -> str:
        # Expected: UPDATE <table> SET <column> = <value> WHERE <column> = <value>
        if len(tokens) < 6 or tokens[2] != "SET":
            raise QueryError("Invalid UPDATE query format")
        name = tokens[1]
        table = self.table(name)
        column_name, new_value = tokens[3], tokens[5]
        if "WHERE" not in tokens or tokens.index("WHERE") + 3 >= len(tokens):
            raise QueryError("Missing WHERE clause or condition")
        where = tokens.index("WHERE")
        where_column, where_value = tokens[where + 1], tokens[where + 3]

        target = _find_column(table, where_column)
        if target is None:
            raise QueryError(f"Column '{where_column}' not found")
        matching = [
            index
            for index in range(table.row_count())
            if _value_at(target, index) == where_value
        ]
        if not matching:
            return "No rows match the WHERE condition\n"

        column = _find_column(table, column_name)
        lines = []
        if column is not None:
            for index in matching:
                if index < len(column):
                    column.update(index, new_value)
                lines.append(
                    f"Updated '{column_name}' to '{new_value}' for row {index + 1}\n"
                )
        self._save(name)
        return "".join(lines)

    def _select(self, tokens: list[str]) -> str:
        if "FROM" not in tokens or tokens.index("FROM") == len(tokens) - 1:
            raise QueryError("Missing FROM clause")
        table = self.table(tokens[tokens.index("FROM") + 1])
        selected = self._selected_columns(tokens, table)
        if "WHERE" in tokens:
            return self._where(table, tokens[tokens.index("WHERE"):], selected, delete=False)
        for name in selected:
            if _find_column(table, name) is None:
                raise QueryError(f"Column '{name}' not found")
        return _render_grid(table, selected, range(table.row_count()))

    @staticmethod
    def _selected_columns(tokens: list[str], table: Table) -> list[str]:
        selected = []
        for token in tokens[1:]:
            if token == "FROM":
                break
            if token == ",":
                continue
            if token == "*":
                return table.column_names()
            selected.append(token[:-1] if token.endswith(",") else token)
        return selected

    @staticmethod
    def _where(
        table: Table, where_tokens: list[str], selected: list[str], *, delete: bool
    ) -> str:
        if len(where_tokens) < 4:
            raise QueryError("Invalid WHERE clause syntax")
        column_name, op, value = where_tokens[1], where_tokens[2], where_tokens[3]
        target = _find_column(table, column_name)
        if target is None:
            raise QueryError(f"Column '{column_name}' not found")

        row_count = table.row_count()
        if row_count and op not in _TEXT_COMPARISONS and op not in _NUMERIC_COMPARISONS:
            raise QueryError(f"Unsupported operator '{op}'")
        matching = [
            index
            for index in range(row_count)
            if _matches(op, _value_at(target, index), value)
        ]
        if not matching:
            return "No rows match the WHERE condition\n"

        if delete:
            for index in sorted(matching, reverse=True):
                for col in table.columns:
                    if index < len(col):
                        col.delete_at(index)
            return "Rows deleted successfully.\n"
        return "Filtered results:\n" + _render_grid(table, selected, matching)