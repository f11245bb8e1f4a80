"""
Dialect adapter: the one place that knows how the two dialects differ.

Row synthesizers ask the adapter for dialect-sensitive names and values instead
of branching on the dialect themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

import pyspark.sql.types as T

from src.constants import (
    BIGINT_NUMERIC_PRECISION,
    BINARY_NUMERIC_PRECISION_RADIX,
    DOUBLE_NUMERIC_PRECISION,
    PUBLIC_SCHEMA_NAME,
)
from src.enums import DatabaseDialect
from src.information_schema import names
from src.information_schema.models import Column
from src.information_schema.types import is_double, is_int64


@dataclass(frozen=True, slots=True)
class DialectAdapter:
    """Dialect-sensitive names and values for one catalog build."""

    dialect: DatabaseDialect

    @property
    def is_postgresql(self) -> bool:
        return self.dialect == DatabaseDialect.POSTGRESQL

    # ---------- names ----------

    def name_for_dialect(self, identifier: str) -> str:
        """
        Spell an introspection identifier for the active dialect.

        Canonical identifiers are upper-case; Postgres spells them lower-case.
        Idempotent and total: any string maps to a string.
        """
        if self.is_postgresql:
            return identifier.lower()
        return identifier

    @property
    def default_schema_name(self) -> str:
        """Name of the schema user tables live in."""
        return PUBLIC_SCHEMA_NAME if self.is_postgresql else ""

    @property
    def information_schema_name(self) -> str:
        return self.name_for_dialect(names.INFORMATION_SCHEMA)

    # ---------- option types ----------

    @property
    def string_option_type(self) -> str:
        return "character varying" if self.is_postgresql else "STRING"

    @property
    def bool_option_type(self) -> str:
        return "boolean" if self.is_postgresql else "BOOL"

    # ---------- COLUMNS numeric/character facets ----------

    def numeric_precision(self, data_type: T.DataType) -> int | None:
        if not self.is_postgresql:
            return None
        if is_double(data_type):
            return DOUBLE_NUMERIC_PRECISION
        if is_int64(data_type):
            return BIGINT_NUMERIC_PRECISION
        return None

    def numeric_precision_radix(self, data_type: T.DataType) -> int | None:
        if self.is_postgresql and (is_double(data_type) or is_int64(data_type)):
            return BINARY_NUMERIC_PRECISION_RADIX
        return None

    def numeric_scale(self, data_type: T.DataType) -> int | None:
        if self.is_postgresql and is_int64(data_type):
            return 0
        return None

    def character_maximum_length(self, column: Column) -> int | None:
        """Declared length of a scalar STRING/BYTES column; None otherwise."""
        if isinstance(column.data_type, T.ArrayType):
            return None
        return column.max_length

    def commit_timestamp_data_type(self, column: Column) -> str | None:
        """Postgres reports commit-timestamp columns with a dedicated DATA_TYPE."""
        if self.is_postgresql and column.allows_commit_timestamp:
            return names.SPANNER_COMMIT_TIMESTAMP
        return None
