"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this module only
configures the root handler once, from ``settings.LOG_LEVEL``.
"""

import logging
from typing import Optional

from app.core.config import settings

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the API process."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=_LOG_FORMAT)
    # SQL echo is controlled by DEBUG on the engine, keep the logger quiet otherwise
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
