# studio_kasse/app/services/db_init.py
from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from app.models.base import Base
# Alle Modelle registrieren (Side-Effect-Import)
import app.models.entities  # noqa: F401
import app.models.cashbook  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Legt fehlende Tabellen an. Bestehende Tabellen bleiben unveraendert.
    Wird beim App-Startup von main.py aufgerufen.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Datenbank initialisiert (%s)", engine.url.render_as_string(hide_password=True))
