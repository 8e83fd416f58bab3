"""Configuration des logs de l'application."""

import logging
from typing import Optional

from todo_app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure le logger racine (basicConfig ne fait rien si des handlers
    existent déjà, donc appel multiple sans effet).
    """
    level = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # uvicorn garde ses propres handlers, on aligne juste le niveau
    logging.getLogger("uvicorn").setLevel(level)
