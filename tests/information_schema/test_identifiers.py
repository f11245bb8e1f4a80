from src.information_schema.identifiers import (
    build_not_null_check_name,
    build_primary_key_name,
    build_unique_constraint_name,
    render_not_null_clause,
)
from src.information_schema.models import ForeignKey


def test_primary_key_name():
    assert build_primary_key_name("Users") == "PK_Users"


def test_not_null_check_name_and_clause():
    assert build_not_null_check_name("Users", "Name") == "CK_IS_NOT_NULL_Users_Name"
    assert render_not_null_clause("Name") == "Name IS NOT NULL"


def test_names_keep_given_casing():
    assert build_primary_key_name("tables") == "PK_tables"
    assert build_not_null_check_name("tables", "table_name") == "CK_IS_NOT_NULL_tables_table_name"


def test_unique_constraint_name_defaults_to_referenced_primary_key():
    foreign_key = ForeignKey("FK_Orders_Users", ("UserId",), "Users", ("UserId",))
    assert build_unique_constraint_name(foreign_key) == "PK_Users"


def test_unique_constraint_name_uses_backing_index():
    foreign_key = ForeignKey(
        "FK_Orders_Users", ("Email",), "Users", ("Email",), referenced_index="UsersByEmail"
    )
    assert build_unique_constraint_name(foreign_key) == "UsersByEmail"
