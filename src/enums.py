"""Enumerations used throughout the information schema catalog."""

from enum import StrEnum


class DatabaseDialect(StrEnum):
    """SQL dialect a database (and therefore its information schema) speaks."""

    GOOGLE_STANDARD_SQL = "GOOGLE_STANDARD_SQL"
    POSTGRESQL = "POSTGRESQL"


class OnDeleteAction(StrEnum):
    """Action applied to interleaved child rows when a parent row is deleted."""

    CASCADE = "CASCADE"
    NO_ACTION = "NO ACTION"


class ConstraintType(StrEnum):
    """Values of TABLE_CONSTRAINTS.CONSTRAINT_TYPE."""

    PRIMARY_KEY = "PRIMARY KEY"
    CHECK = "CHECK"
    FOREIGN_KEY = "FOREIGN KEY"
    UNIQUE = "UNIQUE"


class TableType(StrEnum):
    """Values of TABLES.TABLE_TYPE."""

    BASE_TABLE = "BASE TABLE"
    VIEW = "VIEW"


class ColumnOrdering(StrEnum):
    """Sort direction of a key column."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def for_key(cls, is_descending: bool) -> "ColumnOrdering":
        """Ordering label for a key column's direction."""
        return cls.DESC if is_descending else cls.ASC
