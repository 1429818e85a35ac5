# app/api/admin.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from app.api.deps import require_non_production
from app.db.engine import get_engine
from app.models.admin import CleanupResponse, SeedResponse
from app.services import cleanup_duplicate_invoices, seed_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"], dependencies=[Depends(require_non_production)])


def _error_response(exc: Exception) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=500)


@router.get("/seed", response_model=SeedResponse)
def seed(engine: Engine = Depends(get_engine)):
    """
    Create the schema if needed and insert the demo customers and invoices.
    Idempotent.
    """
    try:
        result = seed_database(engine)
    except Exception as exc:
        logger.exception("[Seed Error] %s", exc)
        return _error_response(exc)

    return SeedResponse(
        message="Database seeded successfully (idempotent).",
        **result.model_dump(),
    )


@router.get("/admin/cleanup-invoices", response_model=CleanupResponse)
def cleanup_invoices(engine: Engine = Depends(get_engine)):
    """
    Remove duplicate invoices (same customer, amount and date), keeping the
    lowest id per group, then ensure the unique index exists.
    """
    try:
        result = cleanup_duplicate_invoices(engine)
    except Exception as exc:
        logger.exception("[Cleanup Error] %s", exc)
        return _error_response(exc)

    if result.duplicates_found:
        message = "Duplicates removed and unique index ensured."
    else:
        message = "No duplicate invoices found."

    return CleanupResponse(message=message, **result.model_dump())
