"""Saving tables to and loading them from comma-separated text files."""

from __future__ import annotations

from pathlib import Path

from colstore.table import Table


class StorageError(Exception):
    """Raised when a table file cannot be written or read."""


def _table_path(table_name: str, directory: str | Path) -> Path:
    return Path(directory) / f"{table_name}.txt"


def _split_fields(line: str) -> list[str]:
    # A trailing separator does not start another field.
    fields = line.split(",")
    if fields[-1] == "":
        fields.pop()
    return fields


def save_table(table: Table, table_name: str, directory: str | Path = ".") -> Path:
    """Write ``table`` to ``<directory>/<table_name>.txt`` and return the path."""
    path = _table_path(table_name, directory)
    lines = [",".join(table.column_names())]
    lines.extend(",".join(row) for row in table.rows())
    try:
        with path.open("w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in lines)
    except OSError as exc:
        raise StorageError(f"Could not open file for writing: {table_name}") from exc
    return path


def load_table(table_name: str, directory: str | Path = ".") -> Table:
    """Read the table stored in ``<directory>/<table_name>.txt``.

    Blank lines are ignored, and so are rows whose field count does not
    match the header.
    """
    path = _table_path(table_name, directory)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Could not open file for reading: {table_name}") from exc
    if not content:
        raise StorageError(f"File is empty: {table_name}")

    header, *lines = content.split("\n")
    table = Table(_split_fields(header))
    for line in filter(None, lines):
        try:
            table.insert_row(_split_fields(line))
        except ValueError:
            continue
    return table