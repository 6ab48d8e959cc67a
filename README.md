# colstore

A small column-oriented table store. Each table is held in memory column by
column. It can be saved to a plain comma-separated text file,
`<table name>.txt`. The file has a header line of column names and then one
line per row.

## Install

```
pip install .
```

## The shell

```
colstore [--directory DIR]
```

`--directory` names the directory that holds the table files. The default is
the current directory.

When it starts, the shell creates a demonstration table `StudentTable` with the
columns `ID`, `Name` and `Age` and two rows. It writes the table to
`StudentTable.txt`, which replaces any earlier file of that name. It then loads
the table back and reads queries one line at a time. Each query is echoed as
`Executing query: ...`. Its output follows, or an `Error: ...` line if the query
fails.

- `HELP` or `help` prints a summary.
- `EXIT`, `exit`, `QUIT`, `quit`, or the end of input ends the session.

Keywords are case sensitive and tokens are separated by whitespace:

```
CREATE TABLE People (Id, Name, City)
INSERT INTO People VALUES (1, 'Ann', Oslo)
SELECT * FROM People
SELECT Name, City FROM People WHERE Id = 1
SELECT * FROM StudentTable WHERE Age >= 21
UPDATE People SET City = Bergen WHERE Id = 1
DELETE FROM People WHERE Name != Ann
DELETE FROM People
```

- **`INSERT` values:** surrounding spaces and quote characters are stripped from each value.
- **`WHERE` operators:** a single condition with `=`, `!=`, `<`, `>`, `<=` or `>=`.
- **Ordering comparisons:** these read the leading integer of each side. A value that does not start with a number never matches.
- **`UPDATE`:** sets one column in every row where the `WHERE` column equals the given value.
- **Saving:** `CREATE TABLE`, `INSERT`, `UPDATE` and an unconditional `DELETE` save the table file. `DELETE ... WHERE` changes only the table in memory. That change reaches the file at the table's next save.

## As a library

```python
from colstore.table import Table
from colstore.storage import save_table, load_table
from colstore.query import QueryProcessor

table = Table(["ID", "Name"])
table.insert_row(["1", "Alice"])
save_table(table, "Students", ".")      # returns the path written
loaded = load_table("Students", ".")
print(loaded.render())

processor = QueryProcessor(".")
processor.add_table("Students", loaded)
print(processor.execute("SELECT * FROM Students WHERE ID = 1"))
```

### `colstore.column.Column`

Holds a single named column. It supports the following:

- `insert`, `get`, `update`, `delete_at` and `search`. `search` returns the matching positions.
- `render`, `len()` and iteration.
- An index outside the column raises `IndexError`.

### `colstore.table.Table`

Supports `insert_row`, `update`, `search`, `column`, `column_names`,
`row_count`, `rows` and `render`. Errors are raised as follows:

- `insert_row` raises `ValueError` when the row length does not match the column count.
- `column` and `search` raise `KeyError` for an unknown column.

### `colstore.storage`

`save_table` writes a table file and `load_table` reads one. `load_table` skips
blank lines and rows whose field count differs from the header. Failures to
write, to read, or an empty file raise `StorageError`.

### `colstore.query.QueryProcessor`

Keeps named tables and runs queries against them. The behaviour is:

- `execute` returns the text a query produces.
- Malformed queries and unknown tables or columns raise `QueryError`.
- `tokenize` splits a query on whitespace.
- `colstore.cli.run_shell` runs the interactive loop over any processor and text streams.

## Limitations

- **No quoting in files:** values are not quoted or escaped. A value containing a comma does not survive a save and load.
- **No joins, sorting or aggregates:** queries cannot join tables, sort rows or compute aggregates, and a `WHERE` clause takes one condition.
- **Tables at startup:** the shell loads only `StudentTable` when it starts. Tables saved in earlier sessions are not loaded again, although their files remain on disk.