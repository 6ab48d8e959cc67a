import pytest

from colstore.storage import StorageError, load_table, save_table
from colstore.table import Table


@pytest.fixture
def students():
    t = Table(["ID", "Name", "Age"])
    t.insert_row(["1", "Alice", "20"])
    t.insert_row(["2", "Bob", "22"])
    return t


def test_round_trip(tmp_path, students):
    save_table(students, "StudentTable", tmp_path)
    loaded = load_table("StudentTable", tmp_path)
    assert loaded.column_names() == students.column_names()
    assert list(loaded.rows()) == list(students.rows())


def test_saved_file_format(tmp_path):
    t = Table(["ID", "Name"])
    t.insert_row(["1", "Alice"])
    t.insert_row(["2", "Bob"])
    path = save_table(t, "T", tmp_path)
    assert path == tmp_path / "T.txt"
    assert path.read_text(encoding="utf-8") == "ID,Name\n1,Alice\n2,Bob\n"


def test_round_trip_empty_table(tmp_path):
    save_table(Table(["A", "B"]), "Empty", tmp_path)
    loaded = load_table("Empty", tmp_path)
    assert loaded.column_names() == ["A", "B"]
    assert loaded.row_count() == 0


def test_inner_empty_value_survives(tmp_path):
    t = Table(["A", "B", "C"])
    t.insert_row(["1", "", "x"])
    save_table(t, "Gaps", tmp_path)
    assert list(load_table("Gaps", tmp_path).rows()) == [("1", "", "x")]


def test_missing_file(tmp_path):
    with pytest.raises(StorageError, match="Could not open file for reading: Nope"):
        load_table("Nope", tmp_path)


def test_empty_file(tmp_path):
    (tmp_path / "Blank.txt").write_text("", encoding="utf-8")
    with pytest.raises(StorageError, match="File is empty: Blank"):
        load_table("Blank", tmp_path)


def test_unwritable_location(tmp_path, students):
    with pytest.raises(StorageError, match="Could not open file for writing"):
        save_table(students, "StudentTable", tmp_path / "missing_dir")


def test_blank_lines_are_skipped(tmp_path):
    (tmp_path / "T.txt").write_text("A,B\n\n1,2\n\n3,4\n", encoding="utf-8")
    loaded = load_table("T", tmp_path)
    assert list(loaded.rows()) == [("1", "2"), ("3", "4")]


def test_mismatched_rows_are_skipped(tmp_path):
    (tmp_path / "T.txt").write_text("A,B\n1,2\n3\n4,5,6\n7,8\n", encoding="utf-8")
    loaded = load_table("T", tmp_path)
    assert list(loaded.rows()) == [("1", "2"), ("7", "8")]


def test_last_line_without_newline(tmp_path):
    (tmp_path / "T.txt").write_text("A,B\n1,2", encoding="utf-8")
    loaded = load_table("T", tmp_path)
    assert list(loaded.rows()) == [("1", "2")]


def test_save_overwrites(tmp_path, students):
    save_table(students, "S", tmp_path)
    students.insert_row(["3", "Carol", "30"])
    save_table(students, "S", tmp_path)
    assert load_table("S", tmp_path).row_count() == students.row_count()