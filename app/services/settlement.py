# studio_kasse/app/services/settlement.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from app.config import settings as app_settings
from app.models.base import as_dict, transaction
from app.models.cashbook import Buchung, QUELLE_TERMIN, TYP_AUSGABE
from app.models.entities import (
    Freelancer, Kaution, Termin, TERMIN_TYPEN, TYP_GUTSCHEIN, TYP_KAUTION, TYP_PAYPAL,
)
from app.schemas import TerminCreate, VerrechnungPosten
from app.services.errors import KautionBereitsVerrechnet
from app.services.pricing import D, studio_anteil

logger = logging.getLogger(__name__)


@dataclass
class TerminErgebnis:
    termin: Termin
    warnungen: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return as_dict(self.termin) | {"warnungen": list(self.warnungen)}


def _freelancer_name(db: Session, freelancer_id: Optional[int]) -> str:
    fl = db.get(Freelancer, freelancer_id) if freelancer_id is not None else None
    return fl.name if fl and fl.name else app_settings.UNBEKANNT_NAME


def _bemerkung(prefix: str, name: str, bezeichnung: Optional[str]) -> str:
    return f"{prefix} an {name} {bezeichnung or ''}".rstrip()


def _ausgabe(db: Session, termin: Termin, betrag: Decimal, bemerkung: str) -> None:
    db.add(Buchung(
        datum=termin.datum, typ=TYP_AUSGABE, betrag=betrag, bemerkung=bemerkung,
        quelle=QUELLE_TERMIN, termin_id=termin.id,
    ))


def _kaution_verrechnen(db: Session, termin: Termin, kaution_id: int) -> Optional[Kaution]:
    """
    Setzt eine offene Kaution auf ausgezahlt. Bedingtes UPDATE: nur wenn sie
    noch offen ist. Liefert None wenn die ID nicht existiert.
    """
    res = db.execute(
        update(Kaution)
        .where(Kaution.id == kaution_id, Kaution.ausgezahlt == False)  # noqa: E712
        .values(ausgezahlt=True, termin_id=termin.id)
        .execution_options(synchronize_session=False)
    )
    kaution = db.get(Kaution, kaution_id, populate_existing=True)
    if res.rowcount == 0:
        if kaution is None:
            return None
        raise KautionBereitsVerrechnet(kaution_id)
    return kaution


def _termin_posten(db: Session, termin: Termin, typ: str, posten: VerrechnungPosten, name: str) -> None:
    db.add(Kaution(
        freelancer_id=termin.freelancer_id, datum=termin.datum, bezeichnung=posten.bezeichnung,
        betrag=posten.betrag, typ=typ, ausgezahlt=True, termin_id=termin.id,
    ))
    _ausgabe(db, termin, posten.betrag, _bemerkung(typ, name, posten.bezeichnung))


def create_termin(db: Session, payload: TerminCreate) -> TerminErgebnis:
    """
    Legt einen Termin an und verrechnet in derselben Transaktion:
      - bestehende Kautionen (kaution_ids) -> ausgezahlt + Ausgabe im Kassenbuch
      - Gutscheine und PayPal-Kautionen -> neue, bereits ausgezahlte Kaution + Ausgabe
    Unbekannte Kautions-IDs werden uebersprungen und als Warnung gemeldet;
    eine bereits verrechnete Kaution bricht alles ab (KautionBereitsVerrechnet).
    """
    with transaction(db):
        name = _freelancer_name(db, payload.freelancer_id)

        termin = Termin(
            freelancer_id=payload.freelancer_id,
            datum=payload.datum,
            gesamtbetrag=D(payload.gesamtbetrag),
            studio_anteil=studio_anteil(payload.gesamtbetrag),
        )
        db.add(termin)
        db.flush()  # ID verfügbar

        ergebnis = TerminErgebnis(termin=termin)

        for kid in payload.kaution_ids:
            kaution = _kaution_verrechnen(db, termin, kid)
            if kaution is None:
                logger.warning("Termin %s: Kaution %s nicht gefunden, übersprungen", termin.id, kid)
                ergebnis.warnungen.append(f"Kaution {kid} nicht gefunden")
                continue
            _ausgabe(db, termin, kaution.betrag, _bemerkung(TYP_KAUTION, name, kaution.bezeichnung))

        for g in payload.gutscheine:
            _termin_posten(db, termin, TYP_GUTSCHEIN, g, name)

        for p in payload.paypal_kautionen:
            _termin_posten(db, termin, TYP_PAYPAL, p, name)

    db.refresh(termin)
    logger.info("Termin erstellt: %s, %s€", name, termin.gesamtbetrag)
    return ergebnis


def delete_termin(db: Session, termin_id: int) -> None:
    """
    Macht create_termin rueckgaengig: echte Kautionen wieder offen,
    Gutscheine/PayPal und alle Buchungen des Termins weg, dann der Termin.
    """
    with transaction(db):
        db.execute(
            update(Kaution)
            .where(Kaution.termin_id == termin_id, Kaution.typ == TYP_KAUTION)
            .values(ausgezahlt=False, termin_id=None)
            .execution_options(synchronize_session=False)
        )
        db.execute(
            delete(Kaution)
            .where(Kaution.termin_id == termin_id, Kaution.typ.in_(TERMIN_TYPEN))
            .execution_options(synchronize_session=False)
        )
        db.execute(
            delete(Buchung)
            .where(Buchung.termin_id == termin_id)
            .execution_options(synchronize_session=False)
        )
        res = db.execute(
            delete(Termin)
            .where(Termin.id == termin_id)
            .execution_options(synchronize_session=False)
        )
    if res.rowcount:
        logger.info("Termin %s gelöscht", termin_id)
    else:
        logger.info("Termin %s nicht vorhanden, nichts zu löschen", termin_id)
