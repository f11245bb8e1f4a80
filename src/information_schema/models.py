"""
Schema object model consumed (read-only) by the information schema catalog.

These dataclasses describe a validated database schema snapshot: tables with
their columns, primary key, indexes, foreign keys and check constraints, plus
views. Cross references (foreign keys, indexes, check dependencies) are held by
name and resolved through `Schema` / `Table` lookups.

Notes:
- Dataclasses are frozen and hold tuples so a snapshot can be shared freely.
- Declaration order is significant everywhere and is preserved as given.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import pyspark.sql.types as T

from src.enums import OnDeleteAction

# -----------------------------
# Columns and keys
# -----------------------------


@dataclass(frozen=True, slots=True)
class Column:
    """
    Table column definition.

    Fields
    ------
    max_length : int | None
        Declared STRING/BYTES length; None means ``MAX``.
    generation_expression : str | None
        Expression of a generated column, as written in DDL (parenthesised).
    default_expression : str | None
        DEFAULT expression text, if any.
    dependent_columns : tuple[str, ...]
        Columns a generated column reads.
    """

    name: str
    data_type: T.DataType
    is_nullable: bool = True
    max_length: int | None = None
    generation_expression: str | None = None
    is_stored: bool = False
    default_expression: str | None = None
    allows_commit_timestamp: bool = False
    dependent_columns: tuple[str, ...] = ()

    @property
    def is_generated(self) -> bool:
        return self.generation_expression is not None

    @property
    def has_default_value(self) -> bool:
        return self.default_expression is not None


@dataclass(frozen=True, slots=True)
class KeyColumn:
    """A column reference inside a primary key or index key, with its direction."""

    column_name: str
    is_descending: bool = False


@dataclass(frozen=True, slots=True)
class RowDeletionPolicy:
    """Time-to-live policy: delete rows whose `column_name` is older than N days."""

    column_name: str
    older_than_days: int

    def to_ddl(self) -> str:
        """DDL text, e.g. ``OLDER_THAN(created_at, INTERVAL 7 DAY)``."""
        return f"OLDER_THAN({self.column_name}, INTERVAL {self.older_than_days} DAY)"


# -----------------------------
# Indexes and constraints
# -----------------------------


@dataclass(frozen=True, slots=True)
class Index:
    """Secondary index on a table."""

    name: str
    key_columns: tuple[KeyColumn, ...]
    stored_columns: tuple[str, ...] = ()
    is_unique: bool = False
    is_null_filtered: bool = False
    is_managed: bool = False
    parent_table_name: str | None = None


@dataclass(frozen=True, slots=True)
class ForeignKey:
    """
    Foreign key from the owning table to `referenced_table`.

    `referenced_index` names the unique index on the referenced table that backs
    the key; None means the referenced table's primary key backs it.
    """

    name: str
    referencing_columns: tuple[str, ...]
    referenced_table: str
    referenced_columns: tuple[str, ...]
    referenced_index: str | None = None


@dataclass(frozen=True, slots=True)
class CheckConstraint:
    """Declared CHECK constraint and the columns its expression reads."""

    name: str
    expression: str
    dependent_columns: tuple[str, ...] = ()


# -----------------------------
# Tables, views and the snapshot
# -----------------------------


@dataclass(frozen=True, slots=True)
class Table:
    """User table definition."""

    name: str
    columns: tuple[Column, ...]
    primary_key: tuple[KeyColumn, ...] = ()
    indexes: tuple[Index, ...] = ()
    foreign_keys: tuple[ForeignKey, ...] = ()
    check_constraints: tuple[CheckConstraint, ...] = ()
    parent_table_name: str | None = None
    on_delete_action: OnDeleteAction = OnDeleteAction.NO_ACTION
    row_deletion_policy: RowDeletionPolicy | None = None

    @property
    def column_names(self) -> tuple[str, ...]:
        """Column names in declared order."""
        return tuple(column.name for column in self.columns)

    def column(self, name: str) -> Column:
        """Return the column called `name`; KeyError if the table has none."""
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"Table {self.name} has no column {name!r}")

    def index(self, name: str) -> Index:
        """Return the index called `name`; KeyError if the table has none."""
        for index in self.indexes:
            if index.name == name:
                return index
        raise KeyError(f"Table {self.name} has no index {name!r}")


@dataclass(frozen=True, slots=True)
class ViewColumn:
    """Output column of a view."""

    name: str
    data_type: T.DataType


@dataclass(frozen=True, slots=True)
class View:
    """View definition: name, SQL body and output columns."""

    name: str
    body: str
    columns: tuple[ViewColumn, ...] = ()


@dataclass(frozen=True, slots=True)
class Schema:
    """Point-in-time snapshot of a database schema; tables and views in declared order."""

    tables: tuple[Table, ...] = ()
    views: tuple[View, ...] = ()
    _tables_by_name: dict[str, Table] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_tables_by_name", {table.name: table for table in self.tables})

    @classmethod
    def of(cls, tables: Sequence[Table] = (), views: Sequence[View] = ()) -> Schema:
        """Build a snapshot from any sequences, freezing them to tuples."""
        return cls(tables=tuple(tables), views=tuple(views))

    def table(self, name: str) -> Table:
        """Return the table called `name`; KeyError if absent."""
        try:
            return self._tables_by_name[name]
        except KeyError:
            raise KeyError(f"Schema has no table {name!r}") from None
