"""
Column-metadata registry: the static shape of every introspection table.

Each `ColumnsMetaEntry` describes one column of one INFORMATION_SCHEMA table
(canonical upper-case names, Spanner type, nullability). The registry answers
two questions:

- What columns does a registry-driven table have? (`entries_for_table`)
- How does the catalog describe its own tables in COLUMNS, INDEX_COLUMNS and
  the constraint tables? (`get_column_metadata`, `find_key_column_metadata`)

It covers hand-declared tables too, so the catalog can describe every table it
exposes. The registry and the consuming code must agree exactly: a lookup miss
in `get_column_metadata` is a defect and raises.

The registry is built once at import time and never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from src.information_schema import names as n
from src.information_schema.errors import MissingColumnMetadataError
from src.logger import LOGGER

_STRING = "STRING(MAX)"
_INT64 = "INT64"
_BOOL = "BOOL"


@dataclass(frozen=True, slots=True)
class ColumnsMetaEntry:
    """One column of one introspection table."""

    table_name: str
    column_name: str
    spanner_type: str
    is_nullable: str

    @property
    def nullable(self) -> bool:
        return self.is_nullable == n.YES


@dataclass(frozen=True, slots=True)
class IndexColumnsMetaEntry:
    """One primary-key column of one introspection table."""

    table_name: str
    column_name: str
    is_nullable: str
    column_ordering: str
    spanner_type: str
    primary_key_ordinal: int


def _table(table_name: str, *columns: tuple[str, str, bool]) -> tuple[ColumnsMetaEntry, ...]:
    return tuple(
        ColumnsMetaEntry(table_name, column_name, spanner_type, n.YES if nullable else n.NO)
        for column_name, spanner_type, nullable in columns
    )


COLUMNS_METADATA: tuple[ColumnsMetaEntry, ...] = (
    *_table(
        n.SCHEMATA,
        (n.CATALOG_NAME, _STRING, False),
        (n.SCHEMA_NAME, _STRING, False),
        (n.EFFECTIVE_TIMESTAMP, _INT64, True),
    ),
    *_table(
        n.SPANNER_STATISTICS,
        (n.CATALOG_NAME, _STRING, False),
        (n.SCHEMA_NAME, _STRING, False),
        (n.PACKAGE_NAME, _STRING, False),
        (n.ALLOW_GC, _BOOL, False),
    ),
    *_table(
        n.DATABASE_OPTIONS,
        (n.CATALOG_NAME, _STRING, False),
        (n.SCHEMA_NAME, _STRING, False),
        (n.OPTION_NAME, _STRING, False),
        (n.OPTION_TYPE, _STRING, False),
        (n.OPTION_VALUE, _STRING, False),
    ),
    *_table(
        n.TABLES,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.TABLE_TYPE, _STRING, False),
        (n.PARENT_TABLE_NAME, _STRING, True),
        (n.ON_DELETE_ACTION, _STRING, True),
        (n.SPANNER_STATE, _STRING, True),
        (n.INTERLEAVE_TYPE, _STRING, True),
        (n.ROW_DELETION_POLICY_EXPRESSION, _STRING, True),
    ),
    *_table(
        n.COLUMNS,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.COLUMN_NAME, _STRING, False),
        (n.ORDINAL_POSITION, _INT64, False),
        (n.COLUMN_DEFAULT, _STRING, True),
        (n.DATA_TYPE, _STRING, True),
        (n.IS_NULLABLE, _STRING, True),
        (n.SPANNER_TYPE, _STRING, True),
        (n.IS_GENERATED, _STRING, False),
        (n.GENERATION_EXPRESSION, _STRING, True),
        (n.IS_STORED, _STRING, True),
        (n.SPANNER_STATE, _STRING, True),
        (n.CHARACTER_MAXIMUM_LENGTH, _INT64, True),
        (n.NUMERIC_PRECISION, _INT64, True),
        (n.NUMERIC_PRECISION_RADIX, _INT64, True),
        (n.NUMERIC_SCALE, _INT64, True),
    ),
    *_table(
        n.COLUMN_COLUMN_USAGE,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.COLUMN_NAME, _STRING, False),
        (n.DEPENDENT_COLUMN, _STRING, False),
    ),
    *_table(
        n.VIEWS,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.VIEW_DEFINITION, _STRING, False),
    ),
    *_table(
        n.INDEXES,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.INDEX_NAME, _STRING, False),
        (n.INDEX_TYPE, _STRING, False),
        (n.PARENT_TABLE_NAME, _STRING, False),
        (n.IS_UNIQUE, _BOOL, False),
        (n.IS_NULL_FILTERED, _BOOL, False),
        (n.INDEX_STATE, _STRING, True),
        (n.SPANNER_IS_MANAGED, _BOOL, False),
    ),
    *_table(
        n.INDEX_COLUMNS,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.INDEX_NAME, _STRING, False),
        (n.INDEX_TYPE, _STRING, False),
        (n.COLUMN_NAME, _STRING, False),
        (n.ORDINAL_POSITION, _INT64, True),
        (n.COLUMN_ORDERING, _STRING, True),
        (n.IS_NULLABLE, _STRING, True),
        (n.SPANNER_TYPE, _STRING, True),
    ),
    *_table(
        n.COLUMN_OPTIONS,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.COLUMN_NAME, _STRING, False),
        (n.OPTION_NAME, _STRING, False),
        (n.OPTION_TYPE, _STRING, False),
        (n.OPTION_VALUE, _STRING, False),
    ),
    *_table(
        n.TABLE_CONSTRAINTS,
        (n.CONSTRAINT_CATALOG, _STRING, False),
        (n.CONSTRAINT_SCHEMA, _STRING, False),
        (n.CONSTRAINT_NAME, _STRING, False),
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.CONSTRAINT_TYPE, _STRING, False),
        (n.IS_DEFERRABLE, _STRING, False),
        (n.INITIALLY_DEFERRED, _STRING, False),
        (n.ENFORCED, _STRING, False),
    ),
    *_table(
        n.CHECK_CONSTRAINTS,
        (n.CONSTRAINT_CATALOG, _STRING, False),
        (n.CONSTRAINT_SCHEMA, _STRING, False),
        (n.CONSTRAINT_NAME, _STRING, False),
        (n.CHECK_CLAUSE, _STRING, False),
        (n.SPANNER_STATE, _STRING, False),
    ),
    *_table(
        n.CONSTRAINT_TABLE_USAGE,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.CONSTRAINT_CATALOG, _STRING, False),
        (n.CONSTRAINT_SCHEMA, _STRING, False),
        (n.CONSTRAINT_NAME, _STRING, False),
    ),
    *_table(
        n.REFERENTIAL_CONSTRAINTS,
        (n.CONSTRAINT_CATALOG, _STRING, False),
        (n.CONSTRAINT_SCHEMA, _STRING, False),
        (n.CONSTRAINT_NAME, _STRING, False),
        (n.UNIQUE_CONSTRAINT_CATALOG, _STRING, True),
        (n.UNIQUE_CONSTRAINT_SCHEMA, _STRING, True),
        (n.UNIQUE_CONSTRAINT_NAME, _STRING, True),
        (n.MATCH_OPTION, _STRING, False),
        (n.UPDATE_RULE, _STRING, False),
        (n.DELETE_RULE, _STRING, False),
        (n.SPANNER_STATE, _STRING, False),
    ),
    *_table(
        n.KEY_COLUMN_USAGE,
        (n.CONSTRAINT_CATALOG, _STRING, False),
        (n.CONSTRAINT_SCHEMA, _STRING, False),
        (n.CONSTRAINT_NAME, _STRING, False),
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.COLUMN_NAME, _STRING, False),
        (n.ORDINAL_POSITION, _INT64, False),
        (n.POSITION_IN_UNIQUE_CONSTRAINT, _INT64, True),
    ),
    *_table(
        n.CONSTRAINT_COLUMN_USAGE,
        (n.TABLE_CATALOG, _STRING, False),
        (n.TABLE_SCHEMA, _STRING, False),
        (n.TABLE_NAME, _STRING, False),
        (n.COLUMN_NAME, _STRING, False),
        (n.CONSTRAINT_CATALOG, _STRING, False),
        (n.CONSTRAINT_SCHEMA, _STRING, False),
        (n.CONSTRAINT_NAME, _STRING, False),
    ),
)

# Primary keys of the introspection tables, in key order.
PRIMARY_KEYS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        n.SCHEMATA: (n.CATALOG_NAME, n.SCHEMA_NAME),
        n.SPANNER_STATISTICS: (n.CATALOG_NAME, n.SCHEMA_NAME, n.PACKAGE_NAME),
        n.DATABASE_OPTIONS: (n.CATALOG_NAME, n.SCHEMA_NAME, n.OPTION_NAME),
        n.TABLES: (n.TABLE_CATALOG, n.TABLE_SCHEMA, n.TABLE_NAME),
        n.COLUMNS: (n.TABLE_CATALOG, n.TABLE_SCHEMA, n.TABLE_NAME, n.COLUMN_NAME),
        n.COLUMN_COLUMN_USAGE: (
            n.TABLE_CATALOG,
            n.TABLE_SCHEMA,
            n.TABLE_NAME,
            n.COLUMN_NAME,
            n.DEPENDENT_COLUMN,
        ),
        n.VIEWS: (n.TABLE_CATALOG, n.TABLE_SCHEMA, n.TABLE_NAME),
        n.INDEXES: (n.TABLE_CATALOG, n.TABLE_SCHEMA, n.TABLE_NAME, n.INDEX_NAME, n.INDEX_TYPE),
        n.INDEX_COLUMNS: (
            n.TABLE_CATALOG,
            n.TABLE_SCHEMA,
            n.TABLE_NAME,
            n.INDEX_NAME,
            n.INDEX_TYPE,
            n.COLUMN_NAME,
        ),
        n.COLUMN_OPTIONS: (
            n.TABLE_CATALOG,
            n.TABLE_SCHEMA,
            n.TABLE_NAME,
            n.COLUMN_NAME,
            n.OPTION_NAME,
        ),
        n.TABLE_CONSTRAINTS: (n.CONSTRAINT_CATALOG, n.CONSTRAINT_SCHEMA, n.CONSTRAINT_NAME),
        n.CHECK_CONSTRAINTS: (n.CONSTRAINT_CATALOG, n.CONSTRAINT_SCHEMA, n.CONSTRAINT_NAME),
        n.CONSTRAINT_TABLE_USAGE: (
            n.TABLE_CATALOG,
            n.TABLE_SCHEMA,
            n.TABLE_NAME,
            n.CONSTRAINT_CATALOG,
            n.CONSTRAINT_SCHEMA,
            n.CONSTRAINT_NAME,
        ),
        n.REFERENTIAL_CONSTRAINTS: (n.CONSTRAINT_CATALOG, n.CONSTRAINT_SCHEMA, n.CONSTRAINT_NAME),
        n.KEY_COLUMN_USAGE: (
            n.CONSTRAINT_CATALOG,
            n.CONSTRAINT_SCHEMA,
            n.CONSTRAINT_NAME,
            n.COLUMN_NAME,
        ),
        n.CONSTRAINT_COLUMN_USAGE: (
            n.TABLE_CATALOG,
            n.TABLE_SCHEMA,
            n.TABLE_NAME,
            n.COLUMN_NAME,
            n.CONSTRAINT_CATALOG,
            n.CONSTRAINT_SCHEMA,
            n.CONSTRAINT_NAME,
        ),
    }
)

_COLUMNS_BY_KEY: Mapping[tuple[str, str], ColumnsMetaEntry] = MappingProxyType(
    {(entry.table_name, entry.column_name): entry for entry in COLUMNS_METADATA}
)


def _build_index_columns_metadata() -> tuple[IndexColumnsMetaEntry, ...]:
    entries: list[IndexColumnsMetaEntry] = []
    for table_name, key_columns in PRIMARY_KEYS.items():
        for ordinal, column_name in enumerate(key_columns, start=1):
            column = _COLUMNS_BY_KEY[(table_name, column_name)]
            entries.append(
                IndexColumnsMetaEntry(
                    table_name=table_name,
                    column_name=column_name,
                    is_nullable=column.is_nullable,
                    column_ordering="ASC",
                    spanner_type=column.spanner_type,
                    primary_key_ordinal=ordinal,
                )
            )
    return tuple(entries)


INDEX_COLUMNS_METADATA: tuple[IndexColumnsMetaEntry, ...] = _build_index_columns_metadata()

_KEY_COLUMNS_BY_KEY: Mapping[tuple[str, str], IndexColumnsMetaEntry] = MappingProxyType(
    {(entry.table_name, entry.column_name): entry for entry in INDEX_COLUMNS_METADATA}
)


# ---------- lookups ----------


def entries_for_table(table_name: str) -> tuple[ColumnsMetaEntry, ...]:
    """Registry entries of one table, in registry order."""
    return tuple(entry for entry in COLUMNS_METADATA if entry.table_name == table_name)


def get_column_metadata(table_name: str, column_name: str) -> ColumnsMetaEntry:
    """
    Return the registry entry for an introspection column (canonical names).

    Raises:
        MissingColumnMetadataError: the registry does not describe the column.
    """
    entry = _COLUMNS_BY_KEY.get((table_name, column_name))
    if entry is None:
        LOGGER.critical("Missing metadata for column %s.%s", table_name, column_name)
        raise MissingColumnMetadataError(table_name, column_name)
    return entry


def find_key_column_metadata(table_name: str, column_name: str) -> IndexColumnsMetaEntry | None:
    """Primary-key metadata for an introspection column, or None if it is not a key column."""
    return _KEY_COLUMNS_BY_KEY.get((table_name, column_name))
