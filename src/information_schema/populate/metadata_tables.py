"""
Rows of the registry-driven tables: SCHEMATA, SPANNER_STATISTICS,
DATABASE_OPTIONS, TABLES, COLUMNS, COLUMN_COLUMN_USAGE and VIEWS.

Every row is built with `row_from_overrides` from a fresh override mapping, so a
branch only names the fields it sets and nothing carries over between rows.
TABLES and COLUMNS also describe the introspection tables themselves.
"""

from __future__ import annotations

import pyspark.sql.types as T

from src.enums import TableType
from src.information_schema import names as n
from src.information_schema.metadata import get_column_metadata
from src.information_schema.models import Column, Table, View
from src.information_schema.populate.context import BuildContext
from src.information_schema.table import InformationSchemaTable, Row, row_from_overrides
from src.information_schema.types import spanner_type_name

# -----------------------------
# SCHEMATA / SPANNER_STATISTICS / DATABASE_OPTIONS
# -----------------------------


def schemata_rows(context: BuildContext) -> list[Row]:
    """The user schema and the information schema itself."""
    schemata = context.table(n.SCHEMATA)
    return [
        row_from_overrides(schemata, {n.SCHEMA_NAME: context.adapter.default_schema_name}),
        row_from_overrides(schemata, {n.SCHEMA_NAME: context.adapter.information_schema_name}),
    ]


def spanner_statistics_rows(context: BuildContext) -> list[Row]:
    """No statistics packages exist, so the table is always empty."""
    return []


def database_options_rows(context: BuildContext) -> list[Row]:
    adapter = context.adapter
    return [
        row_from_overrides(
            context.table(n.DATABASE_OPTIONS),
            {
                n.SCHEMA_NAME: adapter.default_schema_name,
                n.OPTION_NAME: n.DATABASE_DIALECT_OPTION,
                n.OPTION_TYPE: adapter.string_option_type,
                n.OPTION_VALUE: str(adapter.dialect),
            },
        )
    ]


# -----------------------------
# TABLES
# -----------------------------


def tables_rows(context: BuildContext) -> list[Row]:
    """User tables, then views, then every introspection table."""
    tables = context.table(n.TABLES)
    schema_name = context.adapter.default_schema_name
    rows = [
        row_from_overrides(tables, _user_table_overrides(schema_name, table))
        for table in context.schema.tables
    ]
    rows.extend(
        row_from_overrides(tables, _view_overrides(schema_name, view)) for view in context.schema.views
    )
    information_schema = context.adapter.information_schema_name
    rows.extend(
        row_from_overrides(
            tables,
            {
                n.TABLE_SCHEMA: information_schema,
                n.TABLE_NAME: table.name,
                n.TABLE_TYPE: str(TableType.VIEW),
                n.PARENT_TABLE_NAME: None,
                n.ON_DELETE_ACTION: None,
                n.SPANNER_STATE: None,
                n.INTERLEAVE_TYPE: None,
                n.ROW_DELETION_POLICY_EXPRESSION: None,
            },
        )
        for table in context.introspection_tables
    )
    return rows


def _user_table_overrides(schema_name: str, table: Table) -> dict[str, object]:
    interleaved = table.parent_table_name is not None
    policy = table.row_deletion_policy
    return {
        n.TABLE_SCHEMA: schema_name,
        n.TABLE_NAME: table.name,
        n.TABLE_TYPE: str(TableType.BASE_TABLE),
        n.PARENT_TABLE_NAME: table.parent_table_name,
        n.ON_DELETE_ACTION: str(table.on_delete_action) if interleaved else None,
        n.SPANNER_STATE: n.COMMITTED,
        n.INTERLEAVE_TYPE: n.IN_PARENT if interleaved else None,
        n.ROW_DELETION_POLICY_EXPRESSION: policy.to_ddl() if policy is not None else None,
    }


def _view_overrides(schema_name: str, view: View) -> dict[str, object]:
    return {
        n.TABLE_SCHEMA: schema_name,
        n.TABLE_NAME: view.name,
        n.TABLE_TYPE: str(TableType.VIEW),
        n.PARENT_TABLE_NAME: None,
        n.ON_DELETE_ACTION: None,
        n.SPANNER_STATE: n.COMMITTED,
        n.INTERLEAVE_TYPE: None,
        n.ROW_DELETION_POLICY_EXPRESSION: None,
    }


# -----------------------------
# COLUMNS
# -----------------------------


def columns_rows(context: BuildContext) -> list[Row]:
    """Columns of user tables, then of views, then of every introspection table."""
    columns = context.table(n.COLUMNS)
    rows: list[Row] = []
    for table in context.schema.tables:
        for position, column in enumerate(table.columns, start=1):
            overrides = _table_column_overrides(context, table, column, position)
            rows.append(row_from_overrides(columns, overrides))
    for view in context.schema.views:
        for position, view_column in enumerate(view.columns, start=1):
            rows.append(
                row_from_overrides(
                    columns,
                    {
                        **_numeric_overrides(context, view_column.data_type),
                        n.TABLE_SCHEMA: context.adapter.default_schema_name,
                        n.TABLE_NAME: view.name,
                        n.COLUMN_NAME: view_column.name,
                        n.ORDINAL_POSITION: position,
                        n.COLUMN_DEFAULT: None,
                        n.DATA_TYPE: None,
                        n.IS_NULLABLE: n.YES,
                        n.SPANNER_TYPE: spanner_type_name(view_column.data_type),
                        n.IS_GENERATED: n.NEVER,
                        n.GENERATION_EXPRESSION: None,
                        n.IS_STORED: None,
                        n.SPANNER_STATE: n.COMMITTED,
                        n.CHARACTER_MAXIMUM_LENGTH: None,
                    },
                )
            )
    for table in context.introspection_tables:
        rows.extend(_introspection_column_rows(context, columns, table))
    return rows


def _numeric_overrides(context: BuildContext, data_type: T.DataType) -> dict[str, object]:
    adapter = context.adapter
    return {
        n.NUMERIC_PRECISION: adapter.numeric_precision(data_type),
        n.NUMERIC_PRECISION_RADIX: adapter.numeric_precision_radix(data_type),
        n.NUMERIC_SCALE: adapter.numeric_scale(data_type),
    }


def _strip_outer_parentheses(expression: str) -> str:
    if expression.startswith("(") and expression.endswith(")"):
        return expression[1:-1]
    return expression


def _table_column_overrides(
    context: BuildContext, table: Table, column: Column, position: int
) -> dict[str, object]:
    generated = column.is_generated
    return {
        **_numeric_overrides(context, column.data_type),
        n.TABLE_SCHEMA: context.adapter.default_schema_name,
        n.TABLE_NAME: table.name,
        n.COLUMN_NAME: column.name,
        n.ORDINAL_POSITION: position,
        n.COLUMN_DEFAULT: column.default_expression,
        n.DATA_TYPE: context.adapter.commit_timestamp_data_type(column),
        n.IS_NULLABLE: n.YES if column.is_nullable else n.NO,
        n.SPANNER_TYPE: spanner_type_name(column.data_type, column.max_length),
        n.IS_GENERATED: n.ALWAYS if generated else n.NEVER,
        n.GENERATION_EXPRESSION: (
            _strip_outer_parentheses(column.generation_expression) if generated else None
        ),
        n.IS_STORED: (n.YES if column.is_stored else n.NO) if generated else None,
        n.SPANNER_STATE: n.COMMITTED,
        n.CHARACTER_MAXIMUM_LENGTH: context.adapter.character_maximum_length(column),
    }


def _introspection_column_rows(
    context: BuildContext, columns: InformationSchemaTable, table: InformationSchemaTable
) -> list[Row]:
    rows: list[Row] = []
    information_schema = context.adapter.information_schema_name
    names = zip(table.canonical_column_names, table.column_names)
    for position, (canonical_column, column_name) in enumerate(names, start=1):
        metadata = get_column_metadata(table.canonical_name, canonical_column)
        rows.append(
            row_from_overrides(
                columns,
                {
                    **_numeric_overrides(context, table.column_type(column_name)),
                    n.TABLE_SCHEMA: information_schema,
                    n.TABLE_NAME: table.name,
                    n.COLUMN_NAME: column_name,
                    n.ORDINAL_POSITION: position,
                    n.COLUMN_DEFAULT: None,
                    n.DATA_TYPE: None,
                    n.IS_NULLABLE: metadata.is_nullable,
                    n.SPANNER_TYPE: metadata.spanner_type,
                    n.IS_GENERATED: n.NEVER,
                    n.GENERATION_EXPRESSION: None,
                    n.IS_STORED: None,
                    n.SPANNER_STATE: None,
                    n.CHARACTER_MAXIMUM_LENGTH: None,
                },
            )
        )
    return rows


# -----------------------------
# COLUMN_COLUMN_USAGE / VIEWS
# -----------------------------


def column_column_usage_rows(context: BuildContext) -> list[Row]:
    """One row per (generated column, column it reads)."""
    usage = context.table(n.COLUMN_COLUMN_USAGE)
    schema_name = context.adapter.default_schema_name
    return [
        row_from_overrides(
            usage,
            {
                n.TABLE_SCHEMA: schema_name,
                n.TABLE_NAME: table.name,
                n.COLUMN_NAME: used_column,
                n.DEPENDENT_COLUMN: column.name,
            },
        )
        for table in context.schema.tables
        for column in table.columns
        if column.is_generated
        for used_column in column.dependent_columns
    ]


def views_rows(context: BuildContext) -> list[Row]:
    views = context.table(n.VIEWS)
    schema_name = context.adapter.default_schema_name
    return [
        row_from_overrides(
            views,
            {n.TABLE_SCHEMA: schema_name, n.TABLE_NAME: view.name, n.VIEW_DEFINITION: view.body},
        )
        for view in context.schema.views
    ]
