import pyspark.sql.types as T
import pytest

import src.information_schema.populate.context as context_mod  # for monkeypatching LOGGER
from src.enums import DatabaseDialect
from src.information_schema.dialect import DialectAdapter
from src.information_schema.errors import BuildPhaseError
from src.information_schema.models import Schema
from src.information_schema.populate.context import BuildContext, BuildPhase
from src.information_schema.table import build_table


class FakeLogger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def critical(self, msg: str, *args) -> None:
        self.messages.append(msg % args if args else msg)

    def debug(self, msg: str, *args) -> None:
        self.messages.append(msg % args if args else msg)


def make_context() -> BuildContext:
    return BuildContext(
        schema=Schema(),
        adapter=DialectAdapter(DatabaseDialect.GOOGLE_STANDARD_SQL),
    )


def make_table(name: str = "THINGS"):
    return build_table(
        name, [("NAME", T.StringType())], DialectAdapter(DatabaseDialect.GOOGLE_STANDARD_SQL)
    )


def test_enumerating_tables_while_declaring_is_rejected(monkeypatch):
    fake = FakeLogger()
    monkeypatch.setattr(context_mod, "LOGGER", fake)
    context = make_context()
    context.declare(make_table())

    with pytest.raises(BuildPhaseError):
        _ = context.introspection_tables
    assert fake.messages == ["Introspection tables enumerated before declaration finished"]


def test_tables_are_enumerated_in_declaration_order_after_declare():
    context = make_context()
    context.declare(make_table("B"))
    context.declare(make_table("A"))
    context.advance(BuildPhase.POPULATE)

    assert [table.name for table in context.introspection_tables] == ["B", "A"]


def test_declare_twice_is_rejected():
    context = make_context()
    context.declare(make_table())
    with pytest.raises(BuildPhaseError):
        context.declare(make_table())


def test_declare_after_declare_phase_is_rejected(monkeypatch):
    monkeypatch.setattr(context_mod, "LOGGER", FakeLogger())
    context = make_context()
    context.advance(BuildPhase.POPULATE)
    with pytest.raises(BuildPhaseError):
        context.declare(make_table())


def test_install_only_during_populate(monkeypatch):
    fake = FakeLogger()
    monkeypatch.setattr(context_mod, "LOGGER", fake)
    context = make_context()
    context.declare(make_table())

    with pytest.raises(BuildPhaseError):
        context.install("THINGS", [("a",)])

    context.advance(BuildPhase.POPULATE)
    context.install("THINGS", [("a",)])
    assert context.table("THINGS").rows == (("a",),)
    assert "Populated THINGS with 1 row(s)." in fake.messages

    context.advance(BuildPhase.SEALED)
    with pytest.raises(BuildPhaseError):
        context.install("THINGS", [("b",)])


def test_phases_only_move_forward_one_step():
    context = make_context()
    with pytest.raises(BuildPhaseError):
        context.advance(BuildPhase.SEALED)
    context.advance(BuildPhase.POPULATE)
    with pytest.raises(BuildPhaseError):
        context.advance(BuildPhase.DECLARE)
