# app/db/schema.py

import uuid

from sqlalchemy import (
    DDL, MetaData, Table, Column, Integer, Text,
    Date, ForeignKey, CheckConstraint, Uuid, event, func, inspect, text
)
from sqlalchemy.engine import Connection
from sqlalchemy.schema import CreateColumn

metadata = MetaData()

UNIQUE_INVOICE_INDEX = "uniq_invoices_customer_amount_date"
INVOICE_STATUSES = ("paid", "pending")

customers = Table(
    "customers",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid.uuid4),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False, unique=True),
    Column("image_url", Text, nullable=True),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid.uuid4),
    Column(
        "customer_id",
        Uuid,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("amount", Integer, nullable=False),
    Column("status", Text, nullable=False, server_default=text("'pending'")),
    Column("date", Date, server_default=func.current_date()),
    CheckConstraint(
        "status IN ('paid', 'pending')", name="ck_invoices_status"
    ),
)

# Columns introduced after the first release; older databases get them via
# ALTER TABLE instead of a rebuild.
ADDED_COLUMNS = (
    customers.c.image_url,
    invoices.c.date,
    invoices.c.status,
)

# Postgres: let rows inserted by other clients get ids too.
for _table in (customers, invoices):
    event.listen(
        _table,
        "after_create",
        DDL(
            "ALTER TABLE %(table)s ALTER COLUMN id SET DEFAULT uuid_generate_v4()"
        ).execute_if(dialect="postgresql"),
    )


def ensure_uuid_support(conn: Connection) -> None:
    if conn.dialect.name == "postgresql":
        conn.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))


def add_missing_columns(conn: Connection) -> list[str]:
    """
    Add any column from ADDED_COLUMNS that an existing table lacks.
    Returns the "table.column" names that were added.
    """
    inspector = inspect(conn)
    added = []
    for column in ADDED_COLUMNS:
        table_name = column.table.name
        existing = {c["name"] for c in inspector.get_columns(table_name)}
        if column.name in existing:
            continue
        ddl = CreateColumn(column).compile(dialect=conn.dialect)
        conn.execute(text(f"ALTER TABLE {table_name} ADD COLUMN {ddl}"))
        added.append(f"{table_name}.{column.name}")
    return added


def ensure_schema(conn: Connection) -> list[str]:
    """
    Bring the schema to a known-good shape without dropping anything.
    """
    ensure_uuid_support(conn)
    metadata.create_all(conn, checkfirst=True)
    return add_missing_columns(conn)


def ensure_unique_invoice_index(conn: Connection) -> None:
    conn.execute(
        text(
            f"CREATE UNIQUE INDEX IF NOT EXISTS {UNIQUE_INVOICE_INDEX} "
            "ON invoices (customer_id, amount, date)"
        )
    )
