# app/services/deduplicator.py

import logging
from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.engine import Connection, Engine

from app.db.schema import ensure_unique_invoice_index, invoices
from app.models.admin import CleanupResult
from app.models.invoices import DuplicateGroup

logger = logging.getLogger(__name__)

NATURAL_KEY = (invoices.c.customer_id, invoices.c.amount, invoices.c.date)


def find_duplicate_invoices(conn: Connection) -> List[DuplicateGroup]:
    """
    Groups of invoices sharing (customer_id, amount, date), largest first.
    """
    count_col = func.count().label("count")
    stmt = (
        select(*NATURAL_KEY, count_col)
        .group_by(*NATURAL_KEY)
        .having(func.count() > 1)
        .order_by(count_col.desc(), *NATURAL_KEY)
    )
    rows = conn.execute(stmt).mappings().all()

    return [
        DuplicateGroup(
            customer_id=row["customer_id"],
            amount=row["amount"],
            date=row["date"],
            count=row["count"],
        )
        for row in rows
    ]


def delete_duplicate_invoices(conn: Connection) -> int:
    """
    Keep the lowest-id row of each duplicate group and delete the rest.
    Returns the number of rows deleted.
    """
    ranked = select(
        invoices.c.id,
        func.row_number()
        .over(partition_by=list(NATURAL_KEY), order_by=invoices.c.id)
        .label("rn"),
    ).subquery("ranked")

    stmt = delete(invoices).where(
        invoices.c.id.in_(select(ranked.c.id).where(ranked.c.rn > 1))
    )
    return conn.execute(stmt).rowcount


def cleanup_duplicate_invoices(engine: Engine) -> CleanupResult:
    """
    Collapse duplicate invoices to one row per natural key and install the
    unique index that keeps them from coming back.

    Runs in a single transaction: if the index cannot be created the deletes
    are rolled back as well.
    """
    result = CleanupResult()

    with engine.begin() as conn:
        result.duplicates_found = find_duplicate_invoices(conn)

        if result.duplicates_found:
            for group in result.duplicates_found:
                logger.info(
                    "Duplicate group customer=%s amount=%s date=%s count=%s",
                    group.customer_id,
                    group.amount,
                    group.date,
                    group.count,
                )
            result.deleted = delete_duplicate_invoices(conn)
            logger.info("Deleted %s duplicate invoice rows", result.deleted)
        else:
            logger.info("No duplicate invoices found")

        ensure_unique_invoice_index(conn)
        result.index_ensured = True

    return result
