# app/api/invoices.py

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.db.schema import customers, invoices
from app.models.invoices import InvoiceOut

router = APIRouter(prefix="/invoices", tags=["invoices"])


def _row_to_invoice(row) -> InvoiceOut:
    return InvoiceOut(
        id=row["id"],
        customer_id=row["customer_id"],
        customer_name=row["customer_name"],
        amount=row["amount"],
        status=row["status"],
        date=row["date"],
    )


@router.get("/", response_model=List[InvoiceOut])
def list_invoices(
    engine: Engine = Depends(get_engine),
    customer_id: Optional[UUID] = Query(
        default=None,
        description="Only invoices owned by this customer",
    ),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
) -> List[InvoiceOut]:
    """
    Invoices joined with their customer name, newest first.
    """
    stmt = (
        select(
            invoices.c.id,
            invoices.c.customer_id,
            customers.c.name.label("customer_name"),
            invoices.c.amount,
            invoices.c.status,
            invoices.c.date,
        )
        .select_from(invoices.join(customers))
        .order_by(invoices.c.date.desc(), invoices.c.id)
        .limit(limit)
        .offset(offset)
    )
    if customer_id is not None:
        stmt = stmt.where(invoices.c.customer_id == customer_id)

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [_row_to_invoice(row) for row in rows]
