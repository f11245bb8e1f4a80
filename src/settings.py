"""Configuration values sourced from environment variables."""

import os
from typing import Final

from src.enums import DatabaseDialect

_database_dialect = os.getenv(key="DATABASE_DIALECT", default="GOOGLE_STANDARD_SQL")


DATABASE_DIALECT: Final[str] = DatabaseDialect(_database_dialect)
TEMP_VIEW_PREFIX: Final[str] = os.getenv(key="TEMP_VIEW_PREFIX", default="information_schema")
LOG_LEVEL: Final[str] = os.getenv(key="LOG_LEVEL", default="INFO")
LOGGER_NAME: Final[str] = os.getenv(key="LOGGER_NAME", default="information-schema")
LOG_COLOUR_ENABLED: Final[bool] = bool(
    os.getenv(key="LOG_COLOUR_ENABLED", default="True").upper() == "TRUE"
)
