"""
The information schema catalog of one schema snapshot.

`InformationSchemaCatalog` builds every introspection table in two phases:
  1) DECLARE: register each table's shape, registry-driven tables first.
  2) POPULATE: install each table's rows once, in `_POPULATE_STEPS` order.

The simple metadata tables are populated first; the tables that describe the
catalog itself (TABLES, COLUMNS, INDEXES, INDEX_COLUMNS and the constraint
tables) come after, once every introspection table is known. The finished
catalog is sealed and read-only; a schema change builds a new catalog.

Fail-fast: invariant errors bubble up to the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from src import settings
from src.enums import DatabaseDialect
from src.information_schema import names as n
from src.information_schema.declarations import DECLARED_TABLES, REGISTRY_TABLES
from src.information_schema.dialect import DialectAdapter
from src.information_schema.errors import BuildPhaseError
from src.information_schema.metadata import COLUMNS_METADATA
from src.information_schema.models import Schema
from src.information_schema.populate import constraints, indexes, metadata_tables
from src.information_schema.populate.context import BuildContext, BuildPhase
from src.information_schema.table import (
    InformationSchemaTable,
    Row,
    build_table,
    build_table_from_metadata,
)
from src.logger import LOGGER


@dataclass(frozen=True, slots=True)
class PopulateStep:
    """One POPULATE step: the table to fill and the function producing its rows."""

    table_name: str
    rows: Callable[[BuildContext], list[Row]]


_POPULATE_STEPS: tuple[PopulateStep, ...] = (
    PopulateStep(n.SCHEMATA, metadata_tables.schemata_rows),
    PopulateStep(n.DATABASE_OPTIONS, metadata_tables.database_options_rows),
    PopulateStep(n.SPANNER_STATISTICS, metadata_tables.spanner_statistics_rows),
    PopulateStep(n.COLUMN_OPTIONS, indexes.column_options_rows),
    # Self-descriptive tables: these enumerate the introspection tables.
    PopulateStep(n.TABLES, metadata_tables.tables_rows),
    PopulateStep(n.COLUMNS, metadata_tables.columns_rows),
    PopulateStep(n.COLUMN_COLUMN_USAGE, metadata_tables.column_column_usage_rows),
    PopulateStep(n.INDEXES, indexes.indexes_rows),
    PopulateStep(n.INDEX_COLUMNS, indexes.index_columns_rows),
    PopulateStep(n.CHECK_CONSTRAINTS, constraints.check_constraints_rows),
    PopulateStep(n.TABLE_CONSTRAINTS, constraints.table_constraints_rows),
    PopulateStep(n.CONSTRAINT_TABLE_USAGE, constraints.constraint_table_usage_rows),
    PopulateStep(n.REFERENTIAL_CONSTRAINTS, constraints.referential_constraints_rows),
    PopulateStep(n.KEY_COLUMN_USAGE, constraints.key_column_usage_rows),
    PopulateStep(n.CONSTRAINT_COLUMN_USAGE, constraints.constraint_column_usage_rows),
    PopulateStep(n.VIEWS, metadata_tables.views_rows),
)


class InformationSchemaCatalog:
    """Read-only introspection tables describing `schema` under `dialect`."""

    def __init__(
        self,
        schema: Schema,
        dialect: DatabaseDialect | str = settings.DATABASE_DIALECT,
    ) -> None:
        adapter = DialectAdapter(DatabaseDialect(dialect))
        self._context = BuildContext(schema=schema, adapter=adapter)
        self._build()

    # ---------- public API ----------

    @property
    def dialect(self) -> DatabaseDialect:
        return self._context.adapter.dialect

    @property
    def schema(self) -> Schema:
        return self._context.schema

    @property
    def tables(self) -> tuple[InformationSchemaTable, ...]:
        """Every introspection table, in declaration order."""
        return self._context.introspection_tables

    @property
    def table_names(self) -> tuple[str, ...]:
        return tuple(table.name for table in self.tables)

    def table(self, name: str) -> InformationSchemaTable:
        """
        Return the introspection table called `name`, spelled in the active
        dialect (``TABLES`` natively, ``tables`` in Postgres).
        """
        for table in self.tables:
            if table.name == name:
                return table
        raise KeyError(f"No information schema table {name!r} in the {self.dialect} dialect")

    # ---------- build pipeline ----------

    def _build(self) -> None:
        LOGGER.info(
            "Building information schema (%s) for %d table(s) and %d view(s).",
            self.dialect,
            len(self.schema.tables),
            len(self.schema.views),
        )
        self._declare()
        self._context.advance(BuildPhase.POPULATE)
        self._populate()
        self._context.advance(BuildPhase.SEALED)
        LOGGER.info("Information schema built with %d table(s).", len(self.tables))

    def _declare(self) -> None:
        """Register every introspection table's shape."""
        adapter = self._context.adapter
        for table_name in REGISTRY_TABLES:
            self._context.declare(build_table_from_metadata(table_name, COLUMNS_METADATA, adapter))
        for table_name, columns in DECLARED_TABLES.items():
            self._context.declare(build_table(table_name, columns, adapter))

    def _populate(self) -> None:
        """Fill every table once, then check none was left out."""
        for step in _POPULATE_STEPS:
            self._context.install(step.table_name, step.rows(self._context))

        unpopulated = [
            table.name for table in self._context.introspection_tables if not table.is_populated
        ]
        if unpopulated:
            LOGGER.critical("Tables left unpopulated: %s", unpopulated)
            raise BuildPhaseError(f"Tables left unpopulated: {unpopulated}")
