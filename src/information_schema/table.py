"""
Introspection tables: declaration, row installation and the default-row builder.

An `InformationSchemaTable` is declared with a fixed Spark schema and receives
its rows exactly once, as one batch. Two factories declare tables:

- `build_table_from_metadata`: columns come from the column-metadata registry.
- `build_table`: columns are given explicitly as ``(name, DataType)`` pairs.

`row_from_overrides` builds a full row from the handful of values a synthesizer
cares about, filling the rest with type defaults.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import pyspark.sql.types as T

from src.information_schema.dialect import DialectAdapter
from src.information_schema.errors import (
    BuildPhaseError,
    NonCanonicalOverrideKeyError,
    RowShapeError,
    UnknownOverrideKeyError,
)
from src.information_schema.metadata import ColumnsMetaEntry
from src.information_schema.types import accepts_value, default_value, spark_type_for_spanner_type
from src.logger import LOGGER

Row = tuple[Any, ...]


class InformationSchemaTable:
    """A named, typed, read-only table of the information schema."""

    def __init__(self, name: str, canonical_name: str, schema: T.StructType) -> None:
        self.name = name
        self.canonical_name = canonical_name
        self.schema = schema
        self._rows: tuple[Row, ...] | None = None

    def __repr__(self) -> str:
        return f"InformationSchemaTable({self.name!r}, columns={len(self.schema.fields)})"

    # ---------- shape ----------

    @property
    def column_names(self) -> tuple[str, ...]:
        """Column names as spelled in the active dialect, in declared order."""
        return tuple(field.name for field in self.schema.fields)

    @property
    def canonical_column_names(self) -> tuple[str, ...]:
        """Upper-case canonical column names, in declared order."""
        return tuple(name.upper() for name in self.column_names)

    def column_type(self, column_name: str) -> T.DataType:
        return self.schema[column_name].dataType

    # ---------- contents ----------

    @property
    def is_populated(self) -> bool:
        return self._rows is not None

    @property
    def rows(self) -> tuple[Row, ...]:
        """Installed rows; empty until the table is populated."""
        return self._rows if self._rows is not None else ()

    def records(self) -> list[dict[str, Any]]:
        """Rows as dicts keyed by column name (dialect spelling)."""
        names = self.column_names
        return [dict(zip(names, row)) for row in self.rows]

    def set_rows(self, rows: Iterable[Sequence[Any]]) -> None:
        """
        Install the table's contents. Allowed exactly once per table.

        Raises:
            BuildPhaseError: rows were already installed.
            RowShapeError: a row's arity or value types disagree with the schema.
        """
        if self._rows is not None:
            LOGGER.critical("Rows for %s were already installed", self.name)
            raise BuildPhaseError(f"Rows for {self.name} were already installed")
        checked = tuple(self._check_row(tuple(row)) for row in rows)
        self._rows = checked

    def _check_row(self, row: Row) -> Row:
        fields = self.schema.fields
        if len(row) != len(fields):
            message = f"Row for {self.name} has {len(row)} value(s); expected {len(fields)}: {row!r}"
            LOGGER.critical(message)
            raise RowShapeError(message)
        for field, value in zip(fields, row):
            if not accepts_value(field.dataType, value):
                message = (
                    f"Value {value!r} does not fit {self.name}.{field.name} "
                    f"({field.dataType.simpleString()})"
                )
                LOGGER.critical(message)
                raise RowShapeError(message)
        return row


# -----------------------------
# Factories
# -----------------------------


def build_table_from_metadata(
    table_name: str,
    entries: Iterable[ColumnsMetaEntry],
    adapter: DialectAdapter,
) -> InformationSchemaTable:
    """
    Declare a table whose columns are exactly the registry entries for `table_name`,
    in registry order.
    """
    fields = [
        T.StructField(
            adapter.name_for_dialect(entry.column_name),
            spark_type_for_spanner_type(entry.spanner_type),
            True,
        )
        for entry in entries
        if entry.table_name == table_name
    ]
    return InformationSchemaTable(
        name=adapter.name_for_dialect(table_name),
        canonical_name=table_name,
        schema=T.StructType(fields),
    )


def build_table(
    table_name: str,
    columns: Sequence[tuple[str, T.DataType]],
    adapter: DialectAdapter,
) -> InformationSchemaTable:
    """Declare a table from explicit ``(column_name, DataType)`` pairs."""
    fields = [
        T.StructField(adapter.name_for_dialect(column_name), data_type, True)
        for column_name, data_type in columns
    ]
    return InformationSchemaTable(
        name=adapter.name_for_dialect(table_name),
        canonical_name=table_name,
        schema=T.StructType(fields),
    )


# -----------------------------
# Default-row builder
# -----------------------------


def row_from_overrides(table: InformationSchemaTable, overrides: Mapping[str, Any]) -> Row:
    """
    Build one row of `table` from a map of canonical column name -> value.

    Columns without an override get their type default ("" / 0 / False / epoch).
    A value of None in `overrides` is an explicit SQL NULL.

    Example:
        Given TABLES(TABLE_CATALOG, TABLE_SCHEMA, TABLE_NAME, TABLE_TYPE, ...),
        ``row_from_overrides(tables, {"TABLE_NAME": "Users", "TABLE_TYPE": "BASE TABLE"})``
        returns ``("", "", "Users", "BASE TABLE", ...)``.

    Raises:
        NonCanonicalOverrideKeyError: a key is the lower-cased form of a column name.
        UnknownOverrideKeyError: a key names no column of `table`.
    """
    canonical_names = table.canonical_column_names
    for canonical_name in canonical_names:
        lowered = canonical_name.lower()
        if lowered != canonical_name and lowered in overrides:
            LOGGER.critical("Non-canonical override key %r for %s", lowered, table.name)
            raise NonCanonicalOverrideKeyError(
                f"Override key {lowered!r} for {table.name} must be upper-case"
            )

    unknown = sorted(set(overrides) - set(canonical_names))
    if unknown:
        LOGGER.critical("Unknown override key(s) %s for %s", unknown, table.name)
        raise UnknownOverrideKeyError(f"{table.name} has no column(s) {unknown}")

    return tuple(
        overrides[canonical_name] if canonical_name in overrides else default_value(field.dataType)
        for canonical_name, field in zip(canonical_names, table.schema.fields)
    )
