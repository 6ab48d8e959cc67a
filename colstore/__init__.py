"""A small column-oriented table store with plain-text persistence and a SQL-like query shell."""

__version__ = "0.1.0"