"""
Deterministic constraint identifiers for the information schema.

Conventions:
- Verbs: build_* for names, render_* for clause text.
- Names are built from the table/column names exactly as given; callers pass
  dialect-cased names for introspection tables and user names untouched.
- The same builder is used by every table that mentions a constraint, which is
  what keeps TABLE_CONSTRAINTS joinable with the usage tables.
"""

from __future__ import annotations

from src.information_schema.models import ForeignKey

PRIMARY_KEY_PREFIX = "PK_"
NOT_NULL_CHECK_PREFIX = "CK_IS_NOT_NULL_"


def build_primary_key_name(table_name: str) -> str:
    """``PK_<table>``."""
    return f"{PRIMARY_KEY_PREFIX}{table_name}"


def build_not_null_check_name(table_name: str, column_name: str) -> str:
    """``CK_IS_NOT_NULL_<table>_<column>``."""
    return f"{NOT_NULL_CHECK_PREFIX}{table_name}_{column_name}"


def render_not_null_clause(column_name: str) -> str:
    """``<column> IS NOT NULL``."""
    return f"{column_name} IS NOT NULL"


def build_unique_constraint_name(foreign_key: ForeignKey) -> str:
    """
    Name of the unique constraint backing a foreign key.

    An explicit backing index lends its own name. Without one the referenced
    table's primary key backs the key, so the name is that table's primary-key
    constraint name.
    """
    if foreign_key.referenced_index is not None:
        return foreign_key.referenced_index
    return build_primary_key_name(foreign_key.referenced_table)
