"""
Spark query surface for a built catalog.

Introspection tables are materialised as DataFrames from their rows and
declared StructType, and can be registered as temporary views so they are
queryable with Spark SQL.
"""

from __future__ import annotations

from pyspark.sql import DataFrame, SparkSession

from src import settings
from src.information_schema.catalog import InformationSchemaCatalog
from src.information_schema.table import InformationSchemaTable
from src.logger import LOGGER


def to_dataframe(spark: SparkSession, table: InformationSchemaTable) -> DataFrame:
    """DataFrame holding the table's rows, with the table's declared schema."""
    return spark.createDataFrame(list(table.rows), schema=table.schema)


def temp_view_name(table: InformationSchemaTable, prefix: str = settings.TEMP_VIEW_PREFIX) -> str:
    """``<prefix>_<table name>``, e.g. ``information_schema_TABLES``."""
    return f"{prefix}_{table.name}"


def register_temp_views(
    spark: SparkSession,
    catalog: InformationSchemaCatalog,
    prefix: str = settings.TEMP_VIEW_PREFIX,
) -> list[str]:
    """Register every table of `catalog` as a temporary view; return the view names."""
    view_names = []
    for table in catalog.tables:
        view_name = temp_view_name(table, prefix)
        to_dataframe(spark, table).createOrReplaceTempView(view_name)
        view_names.append(view_name)
    LOGGER.info("Registered %d information schema view(s).", len(view_names))
    return view_names
