# scripts/init_db.py
"""
Create the tables (and any columns added since) without touching existing rows.
"""

import logging

from app.config import get_settings
from app.db.engine import engine_for
from app.db.schema import ensure_schema

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    engine = engine_for(settings.database_url, settings.echo_sql)
    with engine.begin() as conn:
        added = ensure_schema(conn)
    logger.info("DB schema ensured (columns added: %s).", ", ".join(added) or "none")


if __name__ == "__main__":
    main()
