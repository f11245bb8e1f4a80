"""
Bridge between Spanner type names and Spark SQL data types.

Schema columns carry Spark `DataType`s; the information schema reports them
with their Spanner DDL spelling (``STRING(MAX)``, ``ARRAY<INT64>`` ...).
Introspection tables are themselves declared with Spanner type strings in the
column-metadata registry and are materialised as Spark types.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

import pyspark.sql.types as T

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Types an introspection table column can be declared with.
SPANNER_TYPE_TO_SPARK_TYPE: Mapping[str, T.DataType] = MappingProxyType(
    {
        "STRING(MAX)": T.StringType(),
        "INT64": T.LongType(),
        "BOOL": T.BooleanType(),
        "TIMESTAMP": T.TimestampType(),
    }
)


def spark_type_for_spanner_type(spanner_type: str) -> T.DataType:
    """Spark type for a registry type string such as ``STRING(MAX)``."""
    try:
        return SPANNER_TYPE_TO_SPARK_TYPE[spanner_type]
    except KeyError:
        raise TypeError(f"Unsupported information schema column type: {spanner_type!r}") from None


def is_int64(data_type: T.DataType) -> bool:
    """True for the integral Spark types that Spanner stores as INT64."""
    return isinstance(data_type, (T.LongType, T.IntegerType, T.ShortType, T.ByteType))


def is_double(data_type: T.DataType) -> bool:
    return isinstance(data_type, T.DoubleType)


def default_value(data_type: T.DataType) -> Any:
    """
    Type-appropriate filler for a column the row builder was not given a value for.

    STRING -> "", INT64 -> 0, BOOL -> False, TIMESTAMP -> Unix epoch (UTC).
    """
    if isinstance(data_type, T.StringType):
        return ""
    if isinstance(data_type, T.BooleanType):
        return False
    if is_int64(data_type):
        return 0
    if isinstance(data_type, T.TimestampType):
        return UNIX_EPOCH
    raise TypeError(f"No default value for information schema type {data_type.simpleString()}")


def accepts_value(data_type: T.DataType, value: Any) -> bool:
    """True if `value` may be stored in a column of `data_type` (None is always accepted)."""
    if value is None:
        return True
    if isinstance(data_type, T.StringType):
        return isinstance(value, str)
    if isinstance(data_type, T.BooleanType):
        return isinstance(value, bool)
    if is_int64(data_type):
        return isinstance(value, int) and not isinstance(value, bool)
    if isinstance(data_type, T.TimestampType):
        return isinstance(value, datetime)
    return False


def _sized(name: str, max_length: int | None) -> str:
    return f"{name}({max_length if max_length is not None else 'MAX'})"


def spanner_type_name(data_type: T.DataType, max_length: int | None = None) -> str:
    """
    Render a column type with its Spanner DDL spelling.

    `max_length` applies to STRING/BYTES (and their arrays); None prints ``MAX``.

    Examples:
        spanner_type_name(T.StringType(), 64)                 -> "STRING(64)"
        spanner_type_name(T.ArrayType(T.LongType()))          -> "ARRAY<INT64>"
        spanner_type_name(T.ArrayType(T.BinaryType()))        -> "ARRAY<BYTES(MAX)>"
    """
    if isinstance(data_type, T.ArrayType):
        return f"ARRAY<{spanner_type_name(data_type.elementType, max_length)}>"
    if isinstance(data_type, T.StringType):
        return _sized("STRING", max_length)
    if isinstance(data_type, T.BinaryType):
        return _sized("BYTES", max_length)
    if isinstance(data_type, T.BooleanType):
        return "BOOL"
    if is_int64(data_type):
        return "INT64"
    if is_double(data_type):
        return "FLOAT64"
    if isinstance(data_type, T.FloatType):
        return "FLOAT32"
    if isinstance(data_type, T.TimestampType):
        return "TIMESTAMP"
    if isinstance(data_type, T.DateType):
        return "DATE"
    if isinstance(data_type, T.DecimalType):
        return "NUMERIC"
    raise TypeError(f"Unsupported column type: {data_type.simpleString()}")
