"""
Canonical (native dialect, upper-case) identifiers of the information schema.

Every table name, column name and override key used by the catalog comes from
here. The Postgres dialect lower-cases these through `DialectAdapter`, never by
hand, so override maps can always be keyed by these constants.
"""

from typing import Final

INFORMATION_SCHEMA: Final[str] = "INFORMATION_SCHEMA"

# ---------- table names ----------

SCHEMATA: Final[str] = "SCHEMATA"
SPANNER_STATISTICS: Final[str] = "SPANNER_STATISTICS"
DATABASE_OPTIONS: Final[str] = "DATABASE_OPTIONS"
TABLES: Final[str] = "TABLES"
COLUMNS: Final[str] = "COLUMNS"
COLUMN_COLUMN_USAGE: Final[str] = "COLUMN_COLUMN_USAGE"
VIEWS: Final[str] = "VIEWS"
INDEXES: Final[str] = "INDEXES"
INDEX_COLUMNS: Final[str] = "INDEX_COLUMNS"
COLUMN_OPTIONS: Final[str] = "COLUMN_OPTIONS"
TABLE_CONSTRAINTS: Final[str] = "TABLE_CONSTRAINTS"
CHECK_CONSTRAINTS: Final[str] = "CHECK_CONSTRAINTS"
CONSTRAINT_TABLE_USAGE: Final[str] = "CONSTRAINT_TABLE_USAGE"
REFERENTIAL_CONSTRAINTS: Final[str] = "REFERENTIAL_CONSTRAINTS"
KEY_COLUMN_USAGE: Final[str] = "KEY_COLUMN_USAGE"
CONSTRAINT_COLUMN_USAGE: Final[str] = "CONSTRAINT_COLUMN_USAGE"

# ---------- column names ----------

CATALOG_NAME: Final[str] = "CATALOG_NAME"
SCHEMA_NAME: Final[str] = "SCHEMA_NAME"
EFFECTIVE_TIMESTAMP: Final[str] = "EFFECTIVE_TIMESTAMP"
PACKAGE_NAME: Final[str] = "PACKAGE_NAME"
ALLOW_GC: Final[str] = "ALLOW_GC"
OPTION_NAME: Final[str] = "OPTION_NAME"
OPTION_TYPE: Final[str] = "OPTION_TYPE"
OPTION_VALUE: Final[str] = "OPTION_VALUE"
TABLE_CATALOG: Final[str] = "TABLE_CATALOG"
TABLE_SCHEMA: Final[str] = "TABLE_SCHEMA"
TABLE_NAME: Final[str] = "TABLE_NAME"
TABLE_TYPE: Final[str] = "TABLE_TYPE"
PARENT_TABLE_NAME: Final[str] = "PARENT_TABLE_NAME"
ON_DELETE_ACTION: Final[str] = "ON_DELETE_ACTION"
SPANNER_STATE: Final[str] = "SPANNER_STATE"
INTERLEAVE_TYPE: Final[str] = "INTERLEAVE_TYPE"
ROW_DELETION_POLICY_EXPRESSION: Final[str] = "ROW_DELETION_POLICY_EXPRESSION"
COLUMN_NAME: Final[str] = "COLUMN_NAME"
ORDINAL_POSITION: Final[str] = "ORDINAL_POSITION"
COLUMN_DEFAULT: Final[str] = "COLUMN_DEFAULT"
DATA_TYPE: Final[str] = "DATA_TYPE"
IS_NULLABLE: Final[str] = "IS_NULLABLE"
SPANNER_TYPE: Final[str] = "SPANNER_TYPE"
IS_GENERATED: Final[str] = "IS_GENERATED"
GENERATION_EXPRESSION: Final[str] = "GENERATION_EXPRESSION"
IS_STORED: Final[str] = "IS_STORED"
CHARACTER_MAXIMUM_LENGTH: Final[str] = "CHARACTER_MAXIMUM_LENGTH"
NUMERIC_PRECISION: Final[str] = "NUMERIC_PRECISION"
NUMERIC_PRECISION_RADIX: Final[str] = "NUMERIC_PRECISION_RADIX"
NUMERIC_SCALE: Final[str] = "NUMERIC_SCALE"
DEPENDENT_COLUMN: Final[str] = "DEPENDENT_COLUMN"
VIEW_DEFINITION: Final[str] = "VIEW_DEFINITION"
INDEX_NAME: Final[str] = "INDEX_NAME"
INDEX_TYPE: Final[str] = "INDEX_TYPE"
IS_UNIQUE: Final[str] = "IS_UNIQUE"
IS_NULL_FILTERED: Final[str] = "IS_NULL_FILTERED"
INDEX_STATE: Final[str] = "INDEX_STATE"
SPANNER_IS_MANAGED: Final[str] = "SPANNER_IS_MANAGED"
COLUMN_ORDERING: Final[str] = "COLUMN_ORDERING"
CONSTRAINT_CATALOG: Final[str] = "CONSTRAINT_CATALOG"
CONSTRAINT_SCHEMA: Final[str] = "CONSTRAINT_SCHEMA"
CONSTRAINT_NAME: Final[str] = "CONSTRAINT_NAME"
CONSTRAINT_TYPE: Final[str] = "CONSTRAINT_TYPE"
IS_DEFERRABLE: Final[str] = "IS_DEFERRABLE"
INITIALLY_DEFERRED: Final[str] = "INITIALLY_DEFERRED"
ENFORCED: Final[str] = "ENFORCED"
CHECK_CLAUSE: Final[str] = "CHECK_CLAUSE"
UNIQUE_CONSTRAINT_CATALOG: Final[str] = "UNIQUE_CONSTRAINT_CATALOG"
UNIQUE_CONSTRAINT_SCHEMA: Final[str] = "UNIQUE_CONSTRAINT_SCHEMA"
UNIQUE_CONSTRAINT_NAME: Final[str] = "UNIQUE_CONSTRAINT_NAME"
MATCH_OPTION: Final[str] = "MATCH_OPTION"
UPDATE_RULE: Final[str] = "UPDATE_RULE"
DELETE_RULE: Final[str] = "DELETE_RULE"
POSITION_IN_UNIQUE_CONSTRAINT: Final[str] = "POSITION_IN_UNIQUE_CONSTRAINT"

# ---------- cell values ----------

YES: Final[str] = "YES"
NO: Final[str] = "NO"
ALWAYS: Final[str] = "ALWAYS"
NEVER: Final[str] = "NEVER"
COMMITTED: Final[str] = "COMMITTED"
IN_PARENT: Final[str] = "IN PARENT"
INDEX: Final[str] = "INDEX"
PRIMARY_KEY_INDEX: Final[str] = "PRIMARY_KEY"
READ_WRITE: Final[str] = "READ_WRITE"
SIMPLE: Final[str] = "SIMPLE"
NO_ACTION: Final[str] = "NO ACTION"
TRUE: Final[str] = "TRUE"
DATABASE_DIALECT_OPTION: Final[str] = "database_dialect"
ALLOW_COMMIT_TIMESTAMP_OPTION: Final[str] = "allow_commit_timestamp"
SPANNER_COMMIT_TIMESTAMP: Final[str] = "spanner.commit_timestamp"
