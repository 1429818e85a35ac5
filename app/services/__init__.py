# app/services/__init__.py

from .deduplicator import cleanup_duplicate_invoices, find_duplicate_invoices
from .seeder import seed_database

__all__ = [
    "cleanup_duplicate_invoices",
    "find_duplicate_invoices",
    "seed_database",
]
