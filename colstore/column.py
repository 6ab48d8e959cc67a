"""A single named column of string values."""

from __future__ import annotations

from collections.abc import Iterator


class Column:
    """An ordered, named sequence of string values."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._values: list[str] = []

    def __repr__(self) -> str:
        return f"Column({self.name!r}, {self._values!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._values):
            raise IndexError(
                f"Index {index} out of bounds for column {self.name!r} "
                f"of size {len(self._values)}"
            )

    def insert(self, value: str) -> None:
        """Append a value to the end of the column."""
        self._values.append(value)

    def get(self, index: int) -> str:
        """Return the value at ``index``; negative indices are rejected."""
        self._check_index(index)
        return self._values[index]

    def delete_at(self, index: int) -> str:
        """Remove the value at ``index`` and return it."""
        self._check_index(index)
        return self._values.pop(index)

    def update(self, index: int, new_value: str) -> None:
        """Replace the value at ``index``."""
        self._check_index(index)
        self._values[index] = new_value

    def search(self, value: str) -> list[int]:
        """Return the positions holding exactly ``value``, in order."""
        return [position for position, item in enumerate(self._values) if item == value]

    def render(self) -> str:
        """Return a printable listing of the column's name and values."""
        values = "".join(f"{item} " for item in self._values)
        return f"Column Name: {self.name}\n{values}\n"