# app/models/invoices.py

import datetime as dt
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

InvoiceStatus = Literal["paid", "pending"]


class InvoiceSeed(BaseModel):
    customer_name: str
    amount: int = Field(..., description="Amount in minor units (cents)")
    status: InvoiceStatus
    date: dt.date


class InvoiceOut(BaseModel):
    id: UUID
    customer_id: UUID
    customer_name: str
    amount: int
    status: InvoiceStatus
    date: Optional[dt.date] = None

    class Config:
        from_attributes = True


class DuplicateGroup(BaseModel):
    customer_id: UUID
    amount: int
    date: Optional[dt.date] = None
    count: int
