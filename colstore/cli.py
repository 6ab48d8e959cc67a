"""Interactive shell for the column-store database."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from colstore.query import QueryError, QueryProcessor
from colstore.storage import StorageError, load_table, save_table
from colstore.table import Table

_EXIT_WORDS = {"EXIT", "exit", "quit", "QUIT"}
_HELP_WORDS = {"HELP", "help"}
_HELP_TEXT = (
    "Supported commands:\n"
    "  SELECT ...\n  INSERT ...\n  UPDATE ...\n  DELETE ...\n"
    "Type EXIT to quit.\n"
)


def run_shell(
    processor: QueryProcessor,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Read queries line by line and run them until an exit word or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    while True:
        stdout.write("\n> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        text = line.rstrip("\r\n")
        if text in _EXIT_WORDS:
            stdout.write("Exiting Column-Store DB.\n")
            break
        if text in _HELP_WORDS:
            stdout.write(_HELP_TEXT)
            continue
        if not text:
            continue
        stdout.write(f"Executing query: {text}\n")
        try:
            stdout.write(processor.execute(text))
        except (QueryError, StorageError) as exc:
            stdout.write(f"Error: {exc}\n")


def main(argv: list[str] | None = None) -> int:
    """Start the shell with a demonstration table."""
    parser = argparse.ArgumentParser(prog="colstore", description="Column-store database shell")
    parser.add_argument(
        "--directory", default=".", help="directory holding the table files"
    )
    args = parser.parse_args(argv)

    print("Column-Store DB Started!!")
    demo = Table(["ID", "Name", "Age"])
    demo.insert_row(["1", "Alice", "20"])
    demo.insert_row(["2", "Bob", "22"])
    save_table(demo, "StudentTable", args.directory)
    loaded = load_table("StudentTable", args.directory)

    processor = QueryProcessor(args.directory)
    print(processor.add_table("StudentTable", loaded), end="")
    print(
        "Type SQL-like queries (e.g., SELECT * FROM StudentTable), "
        "or type EXIT to quit."
    )
    run_shell(processor, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())