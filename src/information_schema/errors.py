"""
Internal-consistency failures raised while building the information schema.

None of these describe bad input: the schema snapshot is validated upstream.
Each one means the column-metadata registry, the hand-declared table shapes
and the row synthesizers have drifted apart, so the build must stop rather
than publish a wrong introspection row.
"""

from __future__ import annotations


class InformationSchemaInvariantError(RuntimeError):
    """Base class for registry/catalog contract violations."""


class MissingColumnMetadataError(InformationSchemaInvariantError):
    """Raised when the registry has no entry for an introspection column."""

    def __init__(self, table_name: str, column_name: str) -> None:
        super().__init__(f"Missing metadata for column {table_name}.{column_name}")
        self.table_name = table_name
        self.column_name = column_name


class NonCanonicalOverrideKeyError(InformationSchemaInvariantError):
    """Raised when a row override is keyed by a lower-cased column name."""


class UnknownOverrideKeyError(InformationSchemaInvariantError):
    """Raised when a row override names a column the table does not declare."""


class RowShapeError(InformationSchemaInvariantError):
    """Raised when a row's arity or value types disagree with its table."""


class BuildPhaseError(InformationSchemaInvariantError):
    """Raised when a catalog build step runs outside its phase."""
