# /app/main.py

"""
Process entry point for the records backend. Presentation and export
collaborators call `bootstrap()` once at startup and then work with the
returned DatabaseService and the service modules.
"""

import logging

from .core.logging_config import setup_logging
from .services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)


def bootstrap() -> DatabaseService:
    """Configures logging and loads every collection from durable storage."""
    setup_logging()
    db = get_db_service()
    logger.info("Pravah records backend started.")
    return db
