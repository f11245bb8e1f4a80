"""Shared constant values used across the information schema catalog."""

from typing import Final

PUBLIC_SCHEMA_NAME: Final[str] = "public"
DOUBLE_NUMERIC_PRECISION: Final[int] = 53
BIGINT_NUMERIC_PRECISION: Final[int] = 64
BINARY_NUMERIC_PRECISION_RADIX: Final[int] = 2
