"""
Shared state of one catalog build, with the phase gate.

The build runs in two phases. During DECLARE tables are registered with their
shape only. During POPULATE rows are installed. Anything that enumerates the
introspection tables (TABLES, COLUMNS, INDEXES, the constraint tables) reads
`introspection_tables`, which refuses to answer before DECLARE has finished:
answering early would silently describe an incomplete catalog.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property
from typing import TYPE_CHECKING, Any

from src.information_schema.dialect import DialectAdapter
from src.information_schema.errors import BuildPhaseError
from src.information_schema.models import Schema
from src.information_schema.table import InformationSchemaTable
from src.logger import LOGGER

if TYPE_CHECKING:
    from src.information_schema.populate.constraints import ConstraintFact


class BuildPhase(StrEnum):
    DECLARE = "declare"
    POPULATE = "populate"
    SEALED = "sealed"


@dataclass
class BuildContext:
    """Schema snapshot, dialect and introspection tables of one catalog build."""

    schema: Schema
    adapter: DialectAdapter
    phase: BuildPhase = BuildPhase.DECLARE
    _tables: dict[str, InformationSchemaTable] = field(default_factory=dict)

    # ---------- phase handling ----------

    def _require(self, phase: BuildPhase, action: str) -> None:
        if self.phase != phase:
            LOGGER.critical("Cannot %s during the %s phase", action, self.phase)
            raise BuildPhaseError(f"Cannot {action} during the {self.phase} phase")

    def advance(self, phase: BuildPhase) -> None:
        """Move to the next phase; phases only move forward, one step at a time."""
        order = list(BuildPhase)
        if order.index(phase) != order.index(self.phase) + 1:
            LOGGER.critical("Cannot move from the %s phase to %s", self.phase, phase)
            raise BuildPhaseError(f"Cannot move from {self.phase} to {phase}")
        self.phase = phase

    # ---------- tables ----------

    def declare(self, table: InformationSchemaTable) -> None:
        """Register a table's shape. DECLARE phase only."""
        self._require(BuildPhase.DECLARE, f"declare {table.name}")
        if table.canonical_name in self._tables:
            LOGGER.critical("Table %s is declared twice", table.name)
            raise BuildPhaseError(f"Table {table.name} is declared twice")
        self._tables[table.canonical_name] = table

    def table(self, canonical_name: str) -> InformationSchemaTable:
        """Look up a declared table by canonical name."""
        return self._tables[canonical_name]

    @property
    def introspection_tables(self) -> tuple[InformationSchemaTable, ...]:
        """Every declared table, in declaration order. Unavailable while declaring."""
        if self.phase == BuildPhase.DECLARE:
            LOGGER.critical("Introspection tables enumerated before declaration finished")
            raise BuildPhaseError("Introspection tables are still being declared")
        return tuple(self._tables.values())

    def install(self, canonical_name: str, rows: Sequence[Sequence[Any]]) -> None:
        """Install a table's rows. POPULATE phase only."""
        table = self.table(canonical_name)
        self._require(BuildPhase.POPULATE, f"populate {table.name}")
        table.set_rows(rows)
        LOGGER.debug("Populated %s with %d row(s).", table.name, len(table.rows))

    # ---------- derived facts ----------

    @cached_property
    def constraints(self) -> tuple[ConstraintFact, ...]:
        """Every constraint of the catalog, derived once and shared by all constraint tables."""
        from src.information_schema.populate.constraints import derive_constraints

        return derive_constraints(self)
