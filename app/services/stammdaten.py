# studio_kasse/app/services/stammdaten.py
from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.config import settings as app_settings
from app.models.base import as_dict
from app.models.entities import Freelancer, Kaution, Termin
from app.schemas import FreelancerCreate, FreelancerUpdate, KautionCreate
from app.services.errors import NichtGefunden

# --- Freelancer ----------------------------------------------------------

def list_freelancers(db: Session) -> List[Dict[str, Any]]:
    rows = db.query(Freelancer).order_by(Freelancer.archived.asc(), Freelancer.name.asc()).all()
    return [as_dict(f) for f in rows]

def create_freelancer(db: Session, payload: FreelancerCreate) -> Dict[str, Any]:
    fl = Freelancer(
        name=payload.name,
        adresse=payload.adresse or "",
        farbe=payload.farbe or app_settings.DEFAULT_FARBE,
    )
    db.add(fl)
    db.commit()
    db.refresh(fl)
    return as_dict(fl)

def update_freelancer(db: Session, freelancer_id: int, payload: FreelancerUpdate) -> Dict[str, Any]:
    fl = db.get(Freelancer, freelancer_id)
    if not fl:
        raise NichtGefunden(f"Freelancer {freelancer_id} nicht gefunden")
    fl.name = payload.name
    fl.adresse = payload.adresse
    fl.farbe = payload.farbe
    fl.archived = payload.archived
    db.commit()
    db.refresh(fl)
    return as_dict(fl)

def delete_freelancer(db: Session, freelancer_id: int) -> None:
    db.query(Freelancer).filter(Freelancer.id == freelancer_id).delete(synchronize_session=False)
    db.commit()

# --- Kautionen -----------------------------------------------------------

def list_kautionen(db: Session) -> List[Dict[str, Any]]:
    rows = (
        db.query(Kaution, Freelancer.name)
        .outerjoin(Freelancer, Kaution.freelancer_id == Freelancer.id)
        .order_by(Kaution.datum.desc(), Kaution.created_at.desc())
        .all()
    )
    return [as_dict(k) | {"freelancer_name": name} for k, name in rows]

def list_kautionen_freelancer(db: Session, freelancer_id: int) -> List[Dict[str, Any]]:
    rows = (
        db.query(Kaution)
        .filter(Kaution.freelancer_id == freelancer_id)
        .order_by(Kaution.datum.desc())
        .all()
    )
    return [as_dict(k) for k in rows]

def create_kaution(db: Session, payload: KautionCreate) -> Dict[str, Any]:
    k = Kaution(
        freelancer_id=payload.freelancer_id,
        datum=payload.datum,
        bezeichnung=payload.bezeichnung,
        betrag=payload.betrag,
        typ=payload.typ,
    )
    db.add(k)
    db.commit()
    db.refresh(k)
    return as_dict(k)

def delete_kaution(db: Session, kaution_id: int) -> None:
    db.query(Kaution).filter(Kaution.id == kaution_id).delete(synchronize_session=False)
    db.commit()

# --- Termine (lesend; Anlegen/Loeschen siehe settlement) -----------------

def _verrechnungen(db: Session, termin_ids: List[int]) -> Dict[int, List[Dict[str, Any]]]:
    out: Dict[int, List[Dict[str, Any]]] = defaultdict(list)
    if not termin_ids:
        return out
    for k in db.query(Kaution).filter(Kaution.termin_id.in_(termin_ids)).order_by(Kaution.id.asc()):
        out[k.termin_id].append(as_dict(k))
    return out

def _mit_verrechnungen(db: Session, termine: List[Termin], namen: Optional[List[str]] = None) -> List[Dict[str, Any]]:
    verr = _verrechnungen(db, [t.id for t in termine])
    out = []
    for i, t in enumerate(termine):
        row = as_dict(t)
        if namen is not None:
            row["freelancer_name"] = namen[i]
        # null statt [] wenn nichts verrechnet wurde
        row["verrechnungen"] = verr.get(t.id) or None
        out.append(row)
    return out

def list_termine(db: Session) -> List[Dict[str, Any]]:
    rows = (
        db.query(Termin, Freelancer.name)
        .outerjoin(Freelancer, Termin.freelancer_id == Freelancer.id)
        .order_by(Termin.datum.desc())
        .all()
    )
    return _mit_verrechnungen(db, [t for t, _ in rows], [name for _, name in rows])

def list_termine_freelancer(db: Session, freelancer_id: int) -> List[Dict[str, Any]]:
    termine = (
        db.query(Termin)
        .filter(Termin.freelancer_id == freelancer_id)
        .order_by(Termin.datum.desc())
        .all()
    )
    return _mit_verrechnungen(db, termine)
