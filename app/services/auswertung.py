# studio_kasse/app/services/auswertung.py
from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime
from typing import Any, Dict, List, Tuple

from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from app.models.entities import Freelancer, Kaution, Termin, TYP_KAUTION
from app.services.errors import UngueltigeEingabe
from app.services.pricing import as_float


def monatsgrenzen(monat: str) -> Tuple[date, date]:
    """'2025-11' -> (2025-11-01, 2025-11-30). Echtes Monatsende, auch im Februar."""
    try:
        start = datetime.strptime(monat, "%Y-%m").date()
    except (TypeError, ValueError):
        raise UngueltigeEingabe(f"Ungültiger Monat '{monat}', erwartet YYYY-MM")
    ende = start.replace(day=monthrange(start.year, start.month)[1])
    return start, ende


def _offene_kautionen(db: Session) -> Dict[int, Tuple[int, float]]:
    rows = (
        db.query(
            Kaution.freelancer_id,
            func.count(Kaution.id),
            func.coalesce(func.sum(Kaution.betrag), 0),
        )
        .filter(Kaution.ausgezahlt == False, Kaution.typ == TYP_KAUTION)  # noqa: E712
        .group_by(Kaution.freelancer_id)
        .all()
    )
    return {fid: (int(anzahl), as_float(summe)) for fid, anzahl, summe in rows}


def monatsauswertung(db: Session, monat: str) -> List[Dict[str, Any]]:
    """
    Pro aktivem Freelancer: Termine/Umsatz/Studio-Anteil im Monat und
    der aktuelle Stand offener Kautionen (unabhaengig vom Monat).
    """
    start, ende = monatsgrenzen(monat)

    rows = (
        db.query(
            Freelancer.id,
            Freelancer.name,
            Freelancer.farbe,
            func.count(Termin.id).label("anzahl_termine"),
            func.coalesce(func.sum(Termin.gesamtbetrag), 0).label("umsatz"),
            func.coalesce(func.sum(Termin.studio_anteil), 0).label("studio_anteil"),
        )
        .outerjoin(Termin, and_(Termin.freelancer_id == Freelancer.id, Termin.datum.between(start, ende)))
        .filter(Freelancer.archived == False)  # noqa: E712
        .group_by(Freelancer.id, Freelancer.name, Freelancer.farbe)
        .order_by(Freelancer.name.asc())
        .all()
    )

    kautionen = _offene_kautionen(db)
    out = []
    for r in rows:
        k_anzahl, k_summe = kautionen.get(r.id, (0, 0.0))
        out.append({
            "id": r.id,
            "name": r.name,
            "farbe": r.farbe,
            "anzahl_termine": int(r.anzahl_termine or 0),
            "umsatz": as_float(r.umsatz),
            "studio_anteil": as_float(r.studio_anteil),
            "kautionen_anzahl": k_anzahl,
            "kautionen_summe": k_summe,
        })
    return out


def summen(zeilen: List[Dict[str, Any]]) -> Dict[str, float]:
    return {
        "anzahl_termine": sum(z["anzahl_termine"] for z in zeilen),
        "umsatz": round(sum(z["umsatz"] for z in zeilen), 2),
        "studio_anteil": round(sum(z["studio_anteil"] for z in zeilen), 2),
        "kautionen_anzahl": sum(z["kautionen_anzahl"] for z in zeilen),
        "kautionen_summe": round(sum(z["kautionen_summe"] for z in zeilen), 2),
    }
