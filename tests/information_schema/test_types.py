from datetime import datetime, timezone

import pyspark.sql.types as T
import pytest

from src.information_schema.types import (
    UNIX_EPOCH,
    accepts_value,
    default_value,
    spanner_type_name,
    spark_type_for_spanner_type,
)

# ---------- registry type strings ----------


@pytest.mark.parametrize(
    "spanner_type, expected",
    [
        ("STRING(MAX)", T.StringType()),
        ("INT64", T.LongType()),
        ("BOOL", T.BooleanType()),
        ("TIMESTAMP", T.TimestampType()),
    ],
)
def test_spark_type_for_registry_type(spanner_type, expected):
    assert spark_type_for_spanner_type(spanner_type) == expected


def test_spark_type_for_unknown_registry_type_raises():
    with pytest.raises(TypeError):
        spark_type_for_spanner_type("JSON")


# ---------- defaults ----------


def test_default_values_per_type():
    assert default_value(T.StringType()) == ""
    assert default_value(T.LongType()) == 0
    assert default_value(T.BooleanType()) is False
    assert default_value(T.TimestampType()) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert default_value(T.TimestampType()) is UNIX_EPOCH


def test_default_value_for_unsupported_type_raises():
    with pytest.raises(TypeError):
        default_value(T.DoubleType())


def test_accepts_value_rejects_bool_for_int64_and_accepts_none_everywhere():
    assert accepts_value(T.LongType(), 3)
    assert not accepts_value(T.LongType(), True)
    assert not accepts_value(T.StringType(), 1)
    assert accepts_value(T.BooleanType(), None)
    assert accepts_value(T.TimestampType(), UNIX_EPOCH)


# ---------- DDL type printer ----------


@pytest.mark.parametrize(
    "data_type, max_length, expected",
    [
        (T.StringType(), None, "STRING(MAX)"),
        (T.StringType(), 64, "STRING(64)"),
        (T.BinaryType(), 10, "BYTES(10)"),
        (T.LongType(), None, "INT64"),
        (T.DoubleType(), None, "FLOAT64"),
        (T.FloatType(), None, "FLOAT32"),
        (T.BooleanType(), None, "BOOL"),
        (T.TimestampType(), None, "TIMESTAMP"),
        (T.DateType(), None, "DATE"),
        (T.DecimalType(38, 9), None, "NUMERIC"),
        (T.ArrayType(T.LongType()), None, "ARRAY<INT64>"),
        (T.ArrayType(T.StringType()), 16, "ARRAY<STRING(16)>"),
    ],
)
def test_spanner_type_name(data_type, max_length, expected):
    assert spanner_type_name(data_type, max_length) == expected


def test_spanner_type_name_unsupported_type_raises():
    with pytest.raises(TypeError):
        spanner_type_name(T.MapType(T.StringType(), T.StringType()))
