"""Rows of INDEXES, INDEX_COLUMNS and COLUMN_OPTIONS."""

from __future__ import annotations

from src.enums import ColumnOrdering
from src.information_schema import names as n
from src.information_schema.metadata import IndexColumnsMetaEntry, find_key_column_metadata
from src.information_schema.models import Column, Index, Table
from src.information_schema.populate.context import BuildContext
from src.information_schema.table import InformationSchemaTable, Row
from src.information_schema.types import spanner_type_name


def introspection_key_columns(
    table: InformationSchemaTable,
) -> list[tuple[IndexColumnsMetaEntry, str]]:
    """
    Primary-key columns of an introspection table, ordered by key ordinal.

    Each item pairs the registry key entry with the column name as spelled in
    the active dialect.
    """
    key_columns = []
    for canonical_column, column_name in zip(table.canonical_column_names, table.column_names):
        metadata = find_key_column_metadata(table.canonical_name, canonical_column)
        if metadata is None:
            continue  # Not a primary key column.
        key_columns.append((metadata, column_name))
    return sorted(key_columns, key=lambda item: item[0].primary_key_ordinal)


def _yes_no(flag: bool) -> str:
    return n.YES if flag else n.NO


def _column_type(column: Column) -> str:
    return spanner_type_name(column.data_type, column.max_length)


# -----------------------------
# INDEXES
# -----------------------------


def indexes_rows(context: BuildContext) -> list[Row]:
    schema_name = context.adapter.default_schema_name
    rows: list[Row] = []
    for table in context.schema.tables:
        for index in table.indexes:
            rows.append(
                (
                    "",
                    schema_name,
                    table.name,
                    index.name,
                    n.INDEX,
                    index.parent_table_name or "",
                    index.is_unique,
                    index.is_null_filtered,
                    n.READ_WRITE,
                    index.is_managed,
                )
            )
        rows.append(_primary_key_index_row(schema_name, table.name))

    information_schema = context.adapter.information_schema_name
    for table in context.introspection_tables:
        rows.append(_primary_key_index_row(information_schema, table.name))
    return rows


def _primary_key_index_row(schema_name: str, table_name: str) -> Row:
    return (
        "",
        schema_name,
        table_name,
        n.PRIMARY_KEY_INDEX,  # index_name
        n.PRIMARY_KEY_INDEX,  # index_type
        "",
        True,  # is_unique
        False,  # is_null_filtered
        None,  # index_state
        False,  # spanner_is_managed
    )


# -----------------------------
# INDEX_COLUMNS
# -----------------------------


def index_columns_rows(context: BuildContext) -> list[Row]:
    schema_name = context.adapter.default_schema_name
    rows: list[Row] = []
    for table in context.schema.tables:
        for index in table.indexes:
            rows.extend(_index_key_rows(schema_name, table, index))
            rows.extend(_index_storing_rows(schema_name, table, index))
        rows.extend(_primary_key_column_rows(schema_name, table))

    information_schema = context.adapter.information_schema_name
    for table in context.introspection_tables:
        for metadata, column_name in introspection_key_columns(table):
            rows.append(
                (
                    "",
                    information_schema,
                    table.name,
                    n.PRIMARY_KEY_INDEX,
                    n.PRIMARY_KEY_INDEX,
                    column_name,
                    metadata.primary_key_ordinal,
                    metadata.column_ordering,
                    metadata.is_nullable,
                    metadata.spanner_type,
                )
            )
    return rows


def _index_key_rows(schema_name: str, table: Table, index: Index) -> list[Row]:
    rows: list[Row] = []
    for position, key_column in enumerate(index.key_columns, start=1):
        column = table.column(key_column.column_name)
        rows.append(
            (
                "",
                schema_name,
                table.name,
                index.name,
                n.INDEX,
                column.name,
                position,
                str(ColumnOrdering.for_key(key_column.is_descending)),
                _yes_no(column.is_nullable and not index.is_null_filtered),
                _column_type(column),
            )
        )
    return rows


def _index_storing_rows(schema_name: str, table: Table, index: Index) -> list[Row]:
    rows: list[Row] = []
    for column_name in index.stored_columns:
        column = table.column(column_name)
        rows.append(
            (
                "",
                schema_name,
                table.name,
                index.name,
                n.INDEX,
                column.name,
                None,  # ordinal_position
                None,  # column_ordering
                _yes_no(column.is_nullable),
                _column_type(column),
            )
        )
    return rows


def _primary_key_column_rows(schema_name: str, table: Table) -> list[Row]:
    rows: list[Row] = []
    for position, key_column in enumerate(table.primary_key, start=1):
        column = table.column(key_column.column_name)
        rows.append(
            (
                "",
                schema_name,
                table.name,
                n.PRIMARY_KEY_INDEX,
                n.PRIMARY_KEY_INDEX,
                column.name,
                position,
                str(ColumnOrdering.for_key(key_column.is_descending)),
                _yes_no(column.is_nullable),
                _column_type(column),
            )
        )
    return rows


# -----------------------------
# COLUMN_OPTIONS
# -----------------------------


def column_options_rows(context: BuildContext) -> list[Row]:
    schema_name = context.adapter.default_schema_name
    return [
        (
            "",
            schema_name,
            table.name,
            column.name,
            n.ALLOW_COMMIT_TIMESTAMP_OPTION,
            context.adapter.bool_option_type,
            n.TRUE,
        )
        for table in context.schema.tables
        for column in table.columns
        if column.allows_commit_timestamp
    ]
