"""
Declaration order and shapes of every introspection table.

Registry-driven tables take their columns from the column-metadata registry.
Relationship and constraint tables are declared here column by column; the
registry still describes them (so COLUMNS can list them) and the two must agree.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

import pyspark.sql.types as T

from src.information_schema import names as n

_STRING = T.StringType()
_INT64 = T.LongType()
_BOOL = T.BooleanType()

# Tables whose columns come straight from the registry, in declaration order.
REGISTRY_TABLES: tuple[str, ...] = (
    n.SCHEMATA,
    n.SPANNER_STATISTICS,
    n.DATABASE_OPTIONS,
    n.TABLES,
    n.COLUMNS,
    n.COLUMN_COLUMN_USAGE,
    n.VIEWS,
)

# Hand-declared tables, in declaration order.
DECLARED_TABLES: Mapping[str, tuple[tuple[str, T.DataType], ...]] = MappingProxyType(
    {
        n.INDEXES: (
            (n.TABLE_CATALOG, _STRING),
            (n.TABLE_SCHEMA, _STRING),
            (n.TABLE_NAME, _STRING),
            (n.INDEX_NAME, _STRING),
            (n.INDEX_TYPE, _STRING),
            (n.PARENT_TABLE_NAME, _STRING),
            (n.IS_UNIQUE, _BOOL),
            (n.IS_NULL_FILTERED, _BOOL),
            (n.INDEX_STATE, _STRING),
            (n.SPANNER_IS_MANAGED, _BOOL),
        ),
        n.INDEX_COLUMNS: (
            (n.TABLE_CATALOG, _STRING),
            (n.TABLE_SCHEMA, _STRING),
            (n.TABLE_NAME, _STRING),
            (n.INDEX_NAME, _STRING),
            (n.INDEX_TYPE, _STRING),
            (n.COLUMN_NAME, _STRING),
            (n.ORDINAL_POSITION, _INT64),
            (n.COLUMN_ORDERING, _STRING),
            (n.IS_NULLABLE, _STRING),
            (n.SPANNER_TYPE, _STRING),
        ),
        n.COLUMN_OPTIONS: (
            (n.TABLE_CATALOG, _STRING),
            (n.TABLE_SCHEMA, _STRING),
            (n.TABLE_NAME, _STRING),
            (n.COLUMN_NAME, _STRING),
            (n.OPTION_NAME, _STRING),
            (n.OPTION_TYPE, _STRING),
            (n.OPTION_VALUE, _STRING),
        ),
        n.CHECK_CONSTRAINTS: (
            (n.CONSTRAINT_CATALOG, _STRING),
            (n.CONSTRAINT_SCHEMA, _STRING),
            (n.CONSTRAINT_NAME, _STRING),
            (n.CHECK_CLAUSE, _STRING),
            (n.SPANNER_STATE, _STRING),
        ),
        n.TABLE_CONSTRAINTS: (
            (n.CONSTRAINT_CATALOG, _STRING),
            (n.CONSTRAINT_SCHEMA, _STRING),
            (n.CONSTRAINT_NAME, _STRING),
            (n.TABLE_CATALOG, _STRING),
            (n.TABLE_SCHEMA, _STRING),
            (n.TABLE_NAME, _STRING),
            (n.CONSTRAINT_TYPE, _STRING),
            (n.IS_DEFERRABLE, _STRING),
            (n.INITIALLY_DEFERRED, _STRING),
            (n.ENFORCED, _STRING),
        ),
        n.CONSTRAINT_TABLE_USAGE: (
            (n.TABLE_CATALOG, _STRING),
            (n.TABLE_SCHEMA, _STRING),
            (n.TABLE_NAME, _STRING),
            (n.CONSTRAINT_CATALOG, _STRING),
            (n.CONSTRAINT_SCHEMA, _STRING),
            (n.CONSTRAINT_NAME, _STRING),
        ),
        n.REFERENTIAL_CONSTRAINTS: (
            (n.CONSTRAINT_CATALOG, _STRING),
            (n.CONSTRAINT_SCHEMA, _STRING),
            (n.CONSTRAINT_NAME, _STRING),
            (n.UNIQUE_CONSTRAINT_CATALOG, _STRING),
            (n.UNIQUE_CONSTRAINT_SCHEMA, _STRING),
            (n.UNIQUE_CONSTRAINT_NAME, _STRING),
            (n.MATCH_OPTION, _STRING),
            (n.UPDATE_RULE, _STRING),
            (n.DELETE_RULE, _STRING),
            (n.SPANNER_STATE, _STRING),
        ),
        n.KEY_COLUMN_USAGE: (
            (n.CONSTRAINT_CATALOG, _STRING),
            (n.CONSTRAINT_SCHEMA, _STRING),
            (n.CONSTRAINT_NAME, _STRING),
            (n.TABLE_CATALOG, _STRING),
            (n.TABLE_SCHEMA, _STRING),
            (n.TABLE_NAME, _STRING),
            (n.COLUMN_NAME, _STRING),
            (n.ORDINAL_POSITION, _INT64),
            (n.POSITION_IN_UNIQUE_CONSTRAINT, _INT64),
        ),
        n.CONSTRAINT_COLUMN_USAGE: (
            (n.TABLE_CATALOG, _STRING),
            (n.TABLE_SCHEMA, _STRING),
            (n.TABLE_NAME, _STRING),
            (n.COLUMN_NAME, _STRING),
            (n.CONSTRAINT_CATALOG, _STRING),
            (n.CONSTRAINT_SCHEMA, _STRING),
            (n.CONSTRAINT_NAME, _STRING),
        ),
    }
)
