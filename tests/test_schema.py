"""Tests for the PostgreSQL-specific schema DDL, compiled without a server."""

from types import SimpleNamespace

from sqlalchemy import create_mock_engine
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateColumn

from app.db.schema import ensure_uuid_support, invoices, metadata


class RecordingConnection:
    """Just enough of a Connection to capture executed statements."""

    def __init__(self, dialect_name: str):
        self.dialect = SimpleNamespace(name=dialect_name)
        self.statements = []

    def execute(self, statement):
        self.statements.append(str(statement))


def test_uuid_extension_created_on_postgresql():
    conn = RecordingConnection("postgresql")

    ensure_uuid_support(conn)

    assert conn.statements == ['CREATE EXTENSION IF NOT EXISTS "uuid-ossp"']


def test_uuid_extension_skipped_on_sqlite():
    conn = RecordingConnection("sqlite")

    ensure_uuid_support(conn)

    assert conn.statements == []


def test_create_all_sets_uuid_server_default_on_postgresql():
    emitted = []

    def executor(sql, *multiparams, **params):
        emitted.append(str(sql.compile(dialect=mock.dialect)))

    mock = create_mock_engine("postgresql://", executor)
    metadata.create_all(mock, checkfirst=False)

    for table in ("customers", "invoices"):
        assert (
            f"ALTER TABLE {table} ALTER COLUMN id SET DEFAULT uuid_generate_v4()"
            in emitted
        )


def test_added_date_column_defaults_to_current_date_on_postgresql():
    ddl = str(CreateColumn(invoices.c.date).compile(dialect=postgresql.dialect()))
    ddl = ddl.replace("\"", "")

    assert ddl.startswith("date DATE")
    assert "CURRENT_DATE" in ddl
