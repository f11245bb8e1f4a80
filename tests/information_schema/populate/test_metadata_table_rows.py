import pyspark.sql.types as T

from src.enums import DatabaseDialect, OnDeleteAction
from src.information_schema import names as n
from src.information_schema.declarations import DECLARED_TABLES, REGISTRY_TABLES
from src.information_schema.dialect import DialectAdapter
from src.information_schema.metadata import COLUMNS_METADATA
from src.information_schema.models import (
    Column,
    KeyColumn,
    RowDeletionPolicy,
    Schema,
    Table,
    View,
    ViewColumn,
)
from src.information_schema.populate.context import BuildContext, BuildPhase
from src.information_schema.populate.metadata_tables import (
    column_column_usage_rows,
    columns_rows,
    database_options_rows,
    schemata_rows,
    spanner_statistics_rows,
    tables_rows,
    views_rows,
)
from src.information_schema.table import build_table, build_table_from_metadata

# ---------- helpers ----------


def make_context(schema: Schema, dialect=DatabaseDialect.GOOGLE_STANDARD_SQL) -> BuildContext:
    adapter = DialectAdapter(dialect)
    context = BuildContext(schema=schema, adapter=adapter)
    for table_name in REGISTRY_TABLES:
        context.declare(build_table_from_metadata(table_name, COLUMNS_METADATA, adapter))
    for table_name, columns in DECLARED_TABLES.items():
        context.declare(build_table(table_name, columns, adapter))
    context.advance(BuildPhase.POPULATE)
    return context


def make_schema() -> Schema:
    singers = Table(
        name="Singers",
        columns=(
            Column("SingerId", T.LongType(), is_nullable=False),
            Column("FirstName", T.StringType(), max_length=64),
            Column("LastName", T.StringType(), max_length=64),
            Column(
                "FullName",
                T.StringType(),
                generation_expression="(FirstName || ' ' || LastName)",
                is_stored=True,
                dependent_columns=("FirstName", "LastName"),
            ),
            Column("Tags", T.ArrayType(T.StringType()), max_length=16),
            Column("Score", T.DoubleType(), default_expression="0.0"),
            Column("UpdatedAt", T.TimestampType(), allows_commit_timestamp=True),
        ),
        primary_key=(KeyColumn("SingerId"),),
        row_deletion_policy=RowDeletionPolicy("UpdatedAt", 7),
    )
    albums = Table(
        name="Albums",
        columns=(
            Column("SingerId", T.LongType(), is_nullable=False),
            Column("AlbumId", T.LongType(), is_nullable=False),
        ),
        primary_key=(KeyColumn("SingerId"), KeyColumn("AlbumId")),
        parent_table_name="Singers",
        on_delete_action=OnDeleteAction.CASCADE,
    )
    top_singers = View(
        name="TopSingers",
        body="SELECT SingerId FROM Singers WHERE Score > 10",
        columns=(ViewColumn("SingerId", T.LongType()),),
    )
    return Schema.of([singers, albums], [top_singers])


def records(context: BuildContext, table_name: str, rows):
    names = context.table(table_name).canonical_column_names
    return [dict(zip(names, row)) for row in rows]


def user_column(context: BuildContext, table_name: str, column_name: str) -> dict:
    for record in records(context, n.COLUMNS, columns_rows(context)):
        if record[n.TABLE_NAME] == table_name and record[n.COLUMN_NAME] == column_name:
            return record
    raise AssertionError(f"{table_name}.{column_name} not in COLUMNS")


# ---------- SCHEMATA / DATABASE_OPTIONS / SPANNER_STATISTICS ----------


def test_schemata_rows_per_dialect():
    assert schemata_rows(make_context(Schema())) == [("", "", 0), ("", "INFORMATION_SCHEMA", 0)]
    assert schemata_rows(make_context(Schema(), DatabaseDialect.POSTGRESQL)) == [
        ("", "public", 0),
        ("", "information_schema", 0),
    ]


def test_database_options_report_dialect():
    assert database_options_rows(make_context(Schema())) == [
        ("", "", "database_dialect", "STRING", "GOOGLE_STANDARD_SQL")
    ]
    assert database_options_rows(make_context(Schema(), DatabaseDialect.POSTGRESQL)) == [
        ("", "public", "database_dialect", "character varying", "POSTGRESQL")
    ]


def test_spanner_statistics_is_empty():
    assert spanner_statistics_rows(make_context(make_schema())) == []


# ---------- TABLES ----------


def test_tables_rows_for_user_tables_and_views():
    context = make_context(make_schema())
    by_name = {r[n.TABLE_NAME]: r for r in records(context, n.TABLES, tables_rows(context))}

    assert by_name["Singers"] == {
        n.TABLE_CATALOG: "",
        n.TABLE_SCHEMA: "",
        n.TABLE_NAME: "Singers",
        n.TABLE_TYPE: "BASE TABLE",
        n.PARENT_TABLE_NAME: None,
        n.ON_DELETE_ACTION: None,
        n.SPANNER_STATE: "COMMITTED",
        n.INTERLEAVE_TYPE: None,
        n.ROW_DELETION_POLICY_EXPRESSION: "OLDER_THAN(UpdatedAt, INTERVAL 7 DAY)",
    }
    assert by_name["Albums"][n.PARENT_TABLE_NAME] == "Singers"
    assert by_name["Albums"][n.ON_DELETE_ACTION] == "CASCADE"
    assert by_name["Albums"][n.INTERLEAVE_TYPE] == "IN PARENT"
    assert by_name["Albums"][n.ROW_DELETION_POLICY_EXPRESSION] is None
    assert by_name["TopSingers"][n.TABLE_TYPE] == "VIEW"
    assert by_name["TopSingers"][n.PARENT_TABLE_NAME] is None


def test_tables_rows_describe_introspection_tables():
    context = make_context(Schema(), DatabaseDialect.POSTGRESQL)
    rows = records(context, n.TABLES, tables_rows(context))
    assert [r[n.TABLE_NAME] for r in rows] == [t.name for t in context.introspection_tables]
    assert {(r[n.TABLE_SCHEMA], r[n.TABLE_TYPE]) for r in rows} == {("information_schema", "VIEW")}
    assert all(r[n.SPANNER_STATE] is None for r in rows)


# ---------- COLUMNS ----------


def test_columns_ordinals_start_at_one_per_table():
    context = make_context(make_schema())
    rows = records(context, n.COLUMNS, columns_rows(context))
    singers = [r[n.ORDINAL_POSITION] for r in rows if r[n.TABLE_NAME] == "Singers"]
    assert singers == [1, 2, 3, 4, 5, 6, 7]


def test_columns_generated_column():
    record = user_column(make_context(make_schema()), "Singers", "FullName")
    assert record[n.IS_GENERATED] == "ALWAYS"
    assert record[n.GENERATION_EXPRESSION] == "FirstName || ' ' || LastName"
    assert record[n.IS_STORED] == "YES"


def test_columns_plain_column():
    record = user_column(make_context(make_schema()), "Singers", "FirstName")
    assert record[n.IS_GENERATED] == "NEVER"
    assert record[n.GENERATION_EXPRESSION] is None
    assert record[n.IS_STORED] is None
    assert record[n.SPANNER_TYPE] == "STRING(64)"
    assert record[n.CHARACTER_MAXIMUM_LENGTH] == 64
    assert record[n.IS_NULLABLE] == "YES"
    assert record[n.SPANNER_STATE] == "COMMITTED"


def test_columns_array_and_default():
    context = make_context(make_schema())
    tags = user_column(context, "Singers", "Tags")
    assert tags[n.SPANNER_TYPE] == "ARRAY<STRING(16)>"
    assert tags[n.CHARACTER_MAXIMUM_LENGTH] is None
    assert user_column(context, "Singers", "Score")[n.COLUMN_DEFAULT] == "0.0"


def test_columns_numeric_facets_per_dialect():
    native = make_context(make_schema())
    postgres = make_context(make_schema(), DatabaseDialect.POSTGRESQL)

    native_score = user_column(native, "Singers", "Score")
    assert (native_score[n.NUMERIC_PRECISION], native_score[n.NUMERIC_SCALE]) == (None, None)

    score = user_column(postgres, "Singers", "Score")
    singer_id = user_column(postgres, "Singers", "SingerId")
    assert (score[n.NUMERIC_PRECISION], score[n.NUMERIC_PRECISION_RADIX]) == (53, 2)
    assert score[n.NUMERIC_SCALE] is None
    assert (singer_id[n.NUMERIC_PRECISION], singer_id[n.NUMERIC_SCALE]) == (64, 0)
    assert singer_id[n.IS_NULLABLE] == "NO"


def test_columns_commit_timestamp_data_type_in_postgres():
    native = user_column(make_context(make_schema()), "Singers", "UpdatedAt")
    postgres = user_column(
        make_context(make_schema(), DatabaseDialect.POSTGRESQL), "Singers", "UpdatedAt"
    )
    assert native[n.DATA_TYPE] is None
    assert postgres[n.DATA_TYPE] == "spanner.commit_timestamp"


def test_columns_view_columns():
    record = user_column(make_context(make_schema()), "TopSingers", "SingerId")
    assert record[n.ORDINAL_POSITION] == 1
    assert record[n.SPANNER_TYPE] == "INT64"
    assert record[n.IS_NULLABLE] == "YES"
    assert record[n.IS_GENERATED] == "NEVER"


def test_columns_describe_introspection_columns_from_registry():
    context = make_context(Schema(), DatabaseDialect.POSTGRESQL)
    rows = records(context, n.COLUMNS, columns_rows(context))
    tables = [r for r in rows if r[n.TABLE_NAME] == "tables"]

    assert [r[n.COLUMN_NAME] for r in tables] == list(context.table(n.TABLES).column_names)
    assert tables[0][n.TABLE_SCHEMA] == "information_schema"
    assert tables[2][n.COLUMN_NAME] == "table_name"
    assert tables[2][n.IS_NULLABLE] == "NO"
    assert tables[2][n.SPANNER_TYPE] == "STRING(MAX)"
    assert tables[2][n.CHARACTER_MAXIMUM_LENGTH] is None
    assert all(r[n.SPANNER_STATE] is None for r in tables)


def test_columns_rows_do_not_leak_values():
    context = make_context(make_schema())
    generated = user_column(context, "Singers", "FullName")
    following = user_column(context, "Singers", "Tags")
    assert generated[n.IS_GENERATED] == "ALWAYS"
    assert following[n.IS_GENERATED] == "NEVER"
    assert following[n.GENERATION_EXPRESSION] is None
    assert following[n.IS_STORED] is None


# ---------- COLUMN_COLUMN_USAGE / VIEWS ----------


def test_column_column_usage_rows():
    assert column_column_usage_rows(make_context(make_schema())) == [
        ("", "", "Singers", "FirstName", "FullName"),
        ("", "", "Singers", "LastName", "FullName"),
    ]


def test_views_rows():
    assert views_rows(make_context(make_schema(), DatabaseDialect.POSTGRESQL)) == [
        ("", "public", "TopSingers", "SELECT SingerId FROM Singers WHERE Score > 10")
    ]
