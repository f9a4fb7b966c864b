# studio_kasse/app/services/config_store.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.models.entities import Einstellung


def load_value(db: Session, key: str) -> Optional[str]:
    """
    Liest eine Einstellung. Fehlender Key ist kein Fehler,
    leerer Wert wird wie fehlend behandelt (None).
    """
    row = db.get(Einstellung, key)
    if row is None:
        return None
    return row.value or None


def save_value(db: Session, key: str, value: Optional[str]) -> None:
    row = db.get(Einstellung, key)
    if row is None:
        db.add(Einstellung(key=key, value=value))
    else:
        row.value = value
    db.commit()
