# app/services/seeder.py

import logging
from typing import Dict, Iterable
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine

from app.db.schema import customers, ensure_schema, invoices
from app.models.admin import SeedResult
from app.models.customers import CustomerSeed
from app.models.invoices import InvoiceSeed
from app.seed_data import CUSTOMER_SEEDS, DEFAULT_IMAGE_URL, INVOICE_SEEDS

logger = logging.getLogger(__name__)


def insert_for(conn: Connection):
    """
    Dialect-specific insert() so we can use ON CONFLICT DO NOTHING.
    """
    if conn.dialect.name == "postgresql":
        return pg_insert
    if conn.dialect.name == "sqlite":
        return sqlite_insert
    raise NotImplementedError(
        f"Unsupported database dialect: {conn.dialect.name}"
    )


def insert_customers(conn: Connection, seeds: Iterable[CustomerSeed]) -> int:
    """
    Insert customers, skipping any whose email already exists.
    Returns the number of new rows.
    """
    rows = [
        {"name": c.name, "email": c.email, "image_url": c.image_url}
        for c in seeds
    ]
    if not rows:
        return 0

    count_stmt = select(func.count()).select_from(customers)
    before = conn.execute(count_stmt).scalar_one()

    stmt = insert_for(conn)(customers).on_conflict_do_nothing(
        index_elements=[customers.c.email]
    )
    conn.execute(stmt, rows)

    return conn.execute(count_stmt).scalar_one() - before


def backfill_images(conn: Connection, default_url: str = DEFAULT_IMAGE_URL) -> int:
    stmt = (
        update(customers)
        .where(customers.c.image_url.is_(None))
        .values(image_url=default_url)
    )
    return conn.execute(stmt).rowcount


def customer_ids_by_name(conn: Connection) -> Dict[str, UUID]:
    """
    Map customer name to id. Names are not unique; the lowest id wins.
    """
    rows = conn.execute(
        select(customers.c.id, customers.c.name).order_by(customers.c.id)
    ).all()
    ids: Dict[str, UUID] = {}
    for row in rows:
        ids.setdefault(row.name, row.id)
    return ids


def insert_invoice_if_absent(conn: Connection, customer_id: UUID, seed: InvoiceSeed) -> bool:
    """
    Insert one invoice unless the customer already has one with the same
    amount and date. Returns True when a row was written.
    """
    existing = conn.execute(
        select(invoices.c.id)
        .where(
            invoices.c.customer_id == customer_id,
            invoices.c.amount == seed.amount,
            invoices.c.date == seed.date,
        )
        .limit(1)
    ).first()
    if existing is not None:
        return False

    # ON CONFLICT makes the unique index authoritative once it is installed.
    stmt = (
        insert_for(conn)(invoices)
        .values(
            customer_id=customer_id,
            amount=seed.amount,
            status=seed.status,
            date=seed.date,
        )
        .on_conflict_do_nothing()
    )
    return conn.execute(stmt).rowcount == 1


def seed_database(
    engine: Engine,
    customer_seeds: Iterable[CustomerSeed] = CUSTOMER_SEEDS,
    invoice_seeds: Iterable[InvoiceSeed] = INVOICE_SEEDS,
) -> SeedResult:
    """
    Create/upgrade the schema and insert the demo catalog.

    Safe to call repeatedly: customers are keyed by email and invoices by
    (customer, amount, date), so a second run inserts nothing.
    """
    result = SeedResult()

    with engine.begin() as conn:
        result.columns_added = ensure_schema(conn)
        for name in result.columns_added:
            logger.info("Added missing column %s", name)

        result.customers_inserted = insert_customers(conn, customer_seeds)
        result.images_backfilled = backfill_images(conn)

        ids = customer_ids_by_name(conn)

        for seed in invoice_seeds:
            customer_id = ids.get(seed.customer_name)
            if customer_id is None:
                logger.warning(
                    "Skipping invoice for unknown customer %r", seed.customer_name
                )
                if seed.customer_name not in result.missing_customers:
                    result.missing_customers.append(seed.customer_name)
                continue

            if insert_invoice_if_absent(conn, customer_id, seed):
                result.invoices_inserted += 1
            else:
                result.invoices_skipped_existing += 1

    logger.info(
        "Seed complete: %s customers, %s invoices inserted (%s already present)",
        result.customers_inserted,
        result.invoices_inserted,
        result.invoices_skipped_existing,
    )
    return result
