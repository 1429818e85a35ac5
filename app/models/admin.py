# app/models/admin.py

from typing import List

from pydantic import BaseModel

from app.models.invoices import DuplicateGroup


class SeedResult(BaseModel):
    columns_added: List[str] = []
    customers_inserted: int = 0
    images_backfilled: int = 0
    invoices_inserted: int = 0
    invoices_skipped_existing: int = 0
    missing_customers: List[str] = []


class SeedResponse(SeedResult):
    message: str


class CleanupResult(BaseModel):
    duplicates_found: List[DuplicateGroup] = []
    deleted: int = 0
    index_ensured: bool = False


class CleanupResponse(CleanupResult):
    message: str
