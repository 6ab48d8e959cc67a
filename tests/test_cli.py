import io

from colstore.cli import main, run_shell
from colstore.query import QueryProcessor
from colstore.table import Table


def _processor(tmp_path):
    proc = QueryProcessor(tmp_path)
    table = Table(["ID", "Name", "Age"])
    table.insert_row(["1", "Alice", "20"])
    proc.add_table("S", table)
    return proc


def _run(tmp_path, text):
    out = io.StringIO()
    run_shell(_processor(tmp_path), io.StringIO(text), out)
    return out.getvalue()


def test_help_and_exit(tmp_path):
    out = _run(tmp_path, "help\nEXIT\n")
    assert "Supported commands:" in out
    assert out.endswith("Exiting Column-Store DB.\n")


def test_query_output(tmp_path):
    out = _run(tmp_path, "SELECT * FROM S\nquit\n")
    assert "Executing query: SELECT * FROM S" in out
    assert "Alice" in out


def test_error_is_reported(tmp_path):
    out = _run(tmp_path, "SELECT x FROM Missing\nexit\n")
    assert "Error: Table 'Missing' not found" in out


def test_empty_lines_skipped(tmp_path):
    out = _run(tmp_path, "\n\nQUIT\n")
    assert "Executing query" not in out
    assert out.count("\n> ") == 3


def test_end_of_input_stops(tmp_path):
    out = _run(tmp_path, "")
    assert out == "\n> "


def test_main_runs_demo(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("SELECT * FROM StudentTable\nexit\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Column-Store DB Started!!")
    assert "Bob" in out
    assert (tmp_path / "StudentTable.txt").exists()