# scripts/seed.py
"""
Seed the demo customers and invoices from the command line.

    python -m scripts.seed
"""

import logging
import sys

from app.config import get_settings
from app.db.engine import engine_for
from app.services import seed_database

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    if settings.is_production:
        logger.error("Refusing to seed a production database.")
        return 1

    result = seed_database(engine_for(settings.database_url, settings.echo_sql))

    logger.info(f"Customers inserted:    {result.customers_inserted}")
    logger.info(f"Images backfilled:     {result.images_backfilled}")
    logger.info(f"Invoices inserted:     {result.invoices_inserted}")
    logger.info(f"Invoices already there: {result.invoices_skipped_existing}")
    for name in result.missing_customers:
        logger.warning("No customer named %r; its invoices were skipped", name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
