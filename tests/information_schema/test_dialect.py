import pyspark.sql.types as T
import pytest

from src.enums import DatabaseDialect
from src.information_schema.dialect import DialectAdapter
from src.information_schema.models import Column

NATIVE = DialectAdapter(DatabaseDialect.GOOGLE_STANDARD_SQL)
POSTGRES = DialectAdapter(DatabaseDialect.POSTGRESQL)


def test_schema_names():
    assert NATIVE.default_schema_name == ""
    assert POSTGRES.default_schema_name == "public"
    assert NATIVE.information_schema_name == "INFORMATION_SCHEMA"
    assert POSTGRES.information_schema_name == "information_schema"


@pytest.mark.parametrize("identifier", ["TABLES", "tables", "Mixed_Case", ""])
def test_name_for_dialect_is_idempotent(identifier):
    for adapter in (NATIVE, POSTGRES):
        once = adapter.name_for_dialect(identifier)
        assert adapter.name_for_dialect(once) == once


def test_name_for_dialect_casing():
    assert NATIVE.name_for_dialect("TABLE_NAME") == "TABLE_NAME"
    assert POSTGRES.name_for_dialect("TABLE_NAME") == "table_name"


def test_option_types():
    assert (NATIVE.string_option_type, NATIVE.bool_option_type) == ("STRING", "BOOL")
    assert (POSTGRES.string_option_type, POSTGRES.bool_option_type) == (
        "character varying",
        "boolean",
    )


@pytest.mark.parametrize(
    "data_type, precision, radix, scale",
    [
        (T.DoubleType(), 53, 2, None),
        (T.LongType(), 64, 2, 0),
        (T.StringType(), None, None, None),
        (T.BooleanType(), None, None, None),
    ],
)
def test_postgres_numeric_facets(data_type, precision, radix, scale):
    assert POSTGRES.numeric_precision(data_type) == precision
    assert POSTGRES.numeric_precision_radix(data_type) == radix
    assert POSTGRES.numeric_scale(data_type) == scale


@pytest.mark.parametrize("data_type", [T.DoubleType(), T.LongType(), T.StringType()])
def test_native_numeric_facets_are_null(data_type):
    assert NATIVE.numeric_precision(data_type) is None
    assert NATIVE.numeric_precision_radix(data_type) is None
    assert NATIVE.numeric_scale(data_type) is None


def test_character_maximum_length():
    assert NATIVE.character_maximum_length(Column("c", T.StringType(), max_length=10)) == 10
    assert NATIVE.character_maximum_length(Column("c", T.StringType())) is None
    array_column = Column("c", T.ArrayType(T.StringType()), max_length=10)
    assert POSTGRES.character_maximum_length(array_column) is None


def test_commit_timestamp_data_type_only_in_postgres():
    column = Column("UpdatedAt", T.TimestampType(), allows_commit_timestamp=True)
    assert POSTGRES.commit_timestamp_data_type(column) == "spanner.commit_timestamp"
    assert NATIVE.commit_timestamp_data_type(column) is None
    assert POSTGRES.commit_timestamp_data_type(Column("At", T.TimestampType())) is None
