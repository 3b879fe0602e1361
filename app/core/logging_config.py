# /app/core/logging_config.py

import logging
from typing import Optional

from . import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configures the root logger once for the whole process."""
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format=LOG_FORMAT,
    )
