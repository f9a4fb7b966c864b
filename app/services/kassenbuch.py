# studio_kasse/app/services/kassenbuch.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.models.base import as_dict
from app.models.cashbook import Buchung, QUELLE_MANUELL
from app.schemas import BuchungCreate, BuchungUpdate
from app.services.errors import KassenbuchRegelVerletzt, NichtGefunden

logger = logging.getLogger(__name__)


def list_buchungen(db: Session) -> List[Dict[str, Any]]:
    rows = db.query(Buchung).order_by(Buchung.datum.desc(), Buchung.created_at.desc()).all()
    return [as_dict(b) for b in rows]


def create_buchung(db: Session, payload: BuchungCreate) -> Dict[str, Any]:
    """Manuelle Buchung; automatische entstehen nur ueber Termine."""
    b = Buchung(
        datum=payload.datum,
        typ=payload.typ.value,
        betrag=payload.betrag,
        bemerkung=payload.bemerkung or "",
        quelle=QUELLE_MANUELL,
    )
    db.add(b)
    db.commit()
    db.refresh(b)
    return as_dict(b)


def _manuelle_buchung(db: Session, buchung_id: int, aktion: str) -> Buchung:
    b = db.get(Buchung, buchung_id)
    if not b:
        raise NichtGefunden(f"Buchung {buchung_id} nicht gefunden")
    if b.quelle != QUELLE_MANUELL:
        logger.warning("Buchung %s (Quelle %s) darf nicht direkt %s werden", buchung_id, b.quelle, aktion)
        raise KassenbuchRegelVerletzt(f"Automatische Buchungen können nur über den Termin {aktion} werden")
    return b


def update_buchung(db: Session, buchung_id: int, payload: BuchungUpdate) -> Dict[str, Any]:
    b = _manuelle_buchung(db, buchung_id, "geändert")
    b.datum = payload.datum
    b.typ = payload.typ.value
    b.betrag = payload.betrag
    b.bemerkung = payload.bemerkung
    db.commit()
    db.refresh(b)
    return as_dict(b)


def delete_buchung(db: Session, buchung_id: int) -> None:
    b = _manuelle_buchung(db, buchung_id, "gelöscht")
    db.delete(b)
    db.commit()
