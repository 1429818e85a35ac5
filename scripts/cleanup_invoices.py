# scripts/cleanup_invoices.py
"""
Remove duplicate invoices and install the (customer_id, amount, date) unique index.

    python -m scripts.cleanup_invoices
"""

import logging
import sys

from app.config import get_settings
from app.db.engine import engine_for
from app.services import cleanup_duplicate_invoices

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    if settings.is_production:
        logger.error("Refusing to clean up a production database.")
        return 1

    result = cleanup_duplicate_invoices(
        engine_for(settings.database_url, settings.echo_sql)
    )

    logger.info(f"Duplicate groups found: {len(result.duplicates_found)}")
    logger.info(f"Rows deleted:           {result.deleted}")
    if result.index_ensured:
        logger.info("Unique index on invoices(customer_id, amount, date) ensured.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
