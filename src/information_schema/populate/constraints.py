"""
Constraint synthesis for TABLE_CONSTRAINTS, CHECK_CONSTRAINTS,
CONSTRAINT_TABLE_USAGE, REFERENTIAL_CONSTRAINTS, KEY_COLUMN_USAGE and
CONSTRAINT_COLUMN_USAGE.

The schema is walked once (`derive_constraints`) into `ConstraintFact`s; each of
the six tables is then a projection of the same facts. Names, ordinals and
foreign-key pairings are therefore computed in exactly one place, so a client
joining these tables on (schema, table, constraint name) always finds a match.

Derived per user table
----------------------
- ``PK_<table>``: PRIMARY KEY over the key columns, ordinal from 1.
- ``CK_IS_NOT_NULL_<table>_<column>``: CHECK per non-nullable column.
- Declared CHECK constraints, by their own name.
- FOREIGN KEY per foreign key. Its unique constraint is the backing index (also
  emitted once as a UNIQUE constraint on the referenced table) or, without one,
  the referenced table's ``PK_<table>``.

Derived per introspection table
-------------------------------
- Primary key and NOT NULL checks from the column-metadata registry, with
  dialect-cased names.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.enums import ConstraintType
from src.information_schema import names as n
from src.information_schema.identifiers import (
    build_not_null_check_name,
    build_primary_key_name,
    build_unique_constraint_name,
    render_not_null_clause,
)
from src.information_schema.metadata import get_column_metadata
from src.information_schema.models import Schema, Table
from src.information_schema.populate.context import BuildContext
from src.information_schema.populate.indexes import introspection_key_columns
from src.information_schema.table import InformationSchemaTable, Row

# -----------------------------
# Facts
# -----------------------------


@dataclass(frozen=True, slots=True)
class KeyUsage:
    """One KEY_COLUMN_USAGE entry of a constraint (on the constraint's own table)."""

    column_name: str
    ordinal_position: int
    position_in_unique_constraint: int | None = None


@dataclass(frozen=True, slots=True)
class ColumnUsage:
    """One CONSTRAINT_COLUMN_USAGE entry of a constraint."""

    table_name: str
    column_name: str


@dataclass(frozen=True, slots=True)
class ConstraintFact:
    """
    Everything the six constraint tables say about one constraint.

    Fields
    ------
    schema_name : str
        Schema of both the constraint and its table.
    table_name : str
        Table the constraint belongs to (TABLE_CONSTRAINTS / KEY_COLUMN_USAGE).
    used_table_name : str
        Table reported by CONSTRAINT_TABLE_USAGE; the referenced table for a
        foreign key, the owning table otherwise.
    unique_constraint_name : str | None
        Foreign keys only: the unique constraint the key points at.
    """

    schema_name: str
    name: str
    table_name: str
    constraint_type: ConstraintType
    used_table_name: str
    key_usages: tuple[KeyUsage, ...] = ()
    column_usages: tuple[ColumnUsage, ...] = ()
    check_clause: str | None = None
    unique_constraint_name: str | None = None


# -----------------------------
# Derivation
# -----------------------------


def derive_constraints(context: BuildContext) -> tuple[ConstraintFact, ...]:
    """Walk the schema and the introspection tables once, in a deterministic order."""
    schema_name = context.adapter.default_schema_name
    facts: list[ConstraintFact] = []
    emitted_unique: set[tuple[str, str]] = set()

    for table in context.schema.tables:
        facts.append(_primary_key_fact(schema_name, table))
        facts.extend(_not_null_facts(schema_name, table))
        facts.extend(_check_facts(schema_name, table))
        for foreign_key_fact, unique_fact in _foreign_key_facts(schema_name, table, context.schema):
            facts.append(foreign_key_fact)
            if unique_fact is None:
                continue
            key = (unique_fact.table_name, unique_fact.name)
            if key not in emitted_unique:
                emitted_unique.add(key)
                facts.append(unique_fact)

    for table in context.introspection_tables:
        facts.extend(_introspection_facts(context, table))

    return tuple(facts)


def _primary_key_fact(schema_name: str, table: Table) -> ConstraintFact:
    key_columns = tuple(key_column.column_name for key_column in table.primary_key)
    return ConstraintFact(
        schema_name=schema_name,
        name=build_primary_key_name(table.name),
        table_name=table.name,
        constraint_type=ConstraintType.PRIMARY_KEY,
        used_table_name=table.name,
        key_usages=tuple(
            KeyUsage(column_name, ordinal) for ordinal, column_name in enumerate(key_columns, start=1)
        ),
        column_usages=tuple(ColumnUsage(table.name, column_name) for column_name in key_columns),
    )


def _not_null_facts(schema_name: str, table: Table) -> list[ConstraintFact]:
    return [
        ConstraintFact(
            schema_name=schema_name,
            name=build_not_null_check_name(table.name, column.name),
            table_name=table.name,
            constraint_type=ConstraintType.CHECK,
            used_table_name=table.name,
            column_usages=(ColumnUsage(table.name, column.name),),
            check_clause=render_not_null_clause(column.name),
        )
        for column in table.columns
        if not column.is_nullable
    ]


def _check_facts(schema_name: str, table: Table) -> list[ConstraintFact]:
    return [
        ConstraintFact(
            schema_name=schema_name,
            name=check.name,
            table_name=table.name,
            constraint_type=ConstraintType.CHECK,
            used_table_name=table.name,
            column_usages=tuple(ColumnUsage(table.name, column) for column in check.dependent_columns),
            check_clause=check.expression,
        )
        for check in table.check_constraints
    ]


def _foreign_key_facts(
    schema_name: str, table: Table, schema: Schema
) -> list[tuple[ConstraintFact, ConstraintFact | None]]:
    """Each foreign key with the UNIQUE constraint of its explicit backing index, if any."""
    pairs: list[tuple[ConstraintFact, ConstraintFact | None]] = []
    for foreign_key in table.foreign_keys:
        referenced = foreign_key.referenced_table
        foreign_key_fact = ConstraintFact(
            schema_name=schema_name,
            name=foreign_key.name,
            table_name=table.name,
            constraint_type=ConstraintType.FOREIGN_KEY,
            used_table_name=referenced,
            key_usages=tuple(
                KeyUsage(column_name, ordinal, position_in_unique_constraint=ordinal)
                for ordinal, column_name in enumerate(foreign_key.referencing_columns, start=1)
            ),
            column_usages=tuple(
                ColumnUsage(referenced, column_name) for column_name in foreign_key.referenced_columns
            ),
            unique_constraint_name=build_unique_constraint_name(foreign_key),
        )

        unique_fact = None
        if foreign_key.referenced_index is not None:
            index = schema.table(referenced).index(foreign_key.referenced_index)
            index_columns = tuple(key_column.column_name for key_column in index.key_columns)
            unique_fact = ConstraintFact(
                schema_name=schema_name,
                name=index.name,
                table_name=referenced,
                constraint_type=ConstraintType.UNIQUE,
                used_table_name=referenced,
                key_usages=tuple(
                    KeyUsage(column_name, ordinal)
                    for ordinal, column_name in enumerate(index_columns, start=1)
                ),
                column_usages=tuple(ColumnUsage(referenced, column_name) for column_name in index_columns),
            )
        pairs.append((foreign_key_fact, unique_fact))
    return pairs


def _introspection_facts(context: BuildContext, table: InformationSchemaTable) -> list[ConstraintFact]:
    """Primary key and NOT NULL checks of one introspection table, from the registry."""
    adapter = context.adapter
    schema_name = adapter.information_schema_name

    key_columns = [
        (metadata.primary_key_ordinal, column_name)
        for metadata, column_name in introspection_key_columns(table)
    ]

    facts = [
        ConstraintFact(
            schema_name=schema_name,
            name=adapter.name_for_dialect(build_primary_key_name(table.canonical_name)),
            table_name=table.name,
            constraint_type=ConstraintType.PRIMARY_KEY,
            used_table_name=table.name,
            key_usages=tuple(KeyUsage(column_name, ordinal) for ordinal, column_name in key_columns),
            column_usages=tuple(ColumnUsage(table.name, column_name) for _, column_name in key_columns),
        )
    ]

    for canonical_column, column_name in zip(table.canonical_column_names, table.column_names):
        metadata = get_column_metadata(table.canonical_name, canonical_column)
        if metadata.nullable:
            continue
        facts.append(
            ConstraintFact(
                schema_name=schema_name,
                name=adapter.name_for_dialect(
                    build_not_null_check_name(table.canonical_name, canonical_column)
                ),
                table_name=table.name,
                constraint_type=ConstraintType.CHECK,
                used_table_name=table.name,
                column_usages=(ColumnUsage(table.name, column_name),),
                check_clause=render_not_null_clause(column_name),
            )
        )
    return facts


# -----------------------------
# Projections
# -----------------------------


def table_constraints_rows(context: BuildContext) -> list[Row]:
    return [
        (
            "",  # constraint_catalog
            fact.schema_name,
            fact.name,
            "",  # table_catalog
            fact.schema_name,
            fact.table_name,
            str(fact.constraint_type),
            n.NO,  # is_deferrable
            n.NO,  # initially_deferred
            n.YES,  # enforced
        )
        for fact in context.constraints
    ]


def check_constraints_rows(context: BuildContext) -> list[Row]:
    return [
        ("", fact.schema_name, fact.name, fact.check_clause, n.COMMITTED)
        for fact in context.constraints
        if fact.constraint_type == ConstraintType.CHECK
    ]


def constraint_table_usage_rows(context: BuildContext) -> list[Row]:
    return [
        ("", fact.schema_name, fact.used_table_name, "", fact.schema_name, fact.name)
        for fact in context.constraints
    ]


def referential_constraints_rows(context: BuildContext) -> list[Row]:
    return [
        (
            "",
            fact.schema_name,
            fact.name,
            "",  # unique_constraint_catalog
            fact.schema_name,
            fact.unique_constraint_name,
            n.SIMPLE,  # match_option
            n.NO_ACTION,  # update_rule
            n.NO_ACTION,  # delete_rule
            n.COMMITTED,
        )
        for fact in context.constraints
        if fact.constraint_type == ConstraintType.FOREIGN_KEY
    ]


def key_column_usage_rows(context: BuildContext) -> list[Row]:
    return [
        (
            "",
            fact.schema_name,
            fact.name,
            "",
            fact.schema_name,
            fact.table_name,
            usage.column_name,
            usage.ordinal_position,
            usage.position_in_unique_constraint,
        )
        for fact in context.constraints
        for usage in fact.key_usages
    ]


def constraint_column_usage_rows(context: BuildContext) -> list[Row]:
    return [
        ("", fact.schema_name, usage.table_name, usage.column_name, "", fact.schema_name, fact.name)
        for fact in context.constraints
        for usage in fact.column_usages
    ]
