# studio_kasse/app/models/cashbook.py
from __future__ import annotations
from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, Text, Index, CheckConstraint
from app.models.base import Base

TYP_EINNAHME = "einnahme"
TYP_AUSGABE = "ausgabe"

QUELLE_MANUELL = "manuell"
QUELLE_TERMIN = "termin"

class Buchung(Base):
    __tablename__ = "buchungen"
    __table_args__ = (CheckConstraint("typ IN ('einnahme', 'ausgabe')", name="ck_buchungen_typ"),)

    id = Column(Integer, primary_key=True)
    datum = Column(Date, nullable=False)
    typ = Column(String(10), nullable=False)  # einnahme | ausgabe
    betrag = Column(Numeric(10, 2), nullable=False)
    bemerkung = Column(Text, nullable=True)
    quelle = Column(String(50), nullable=False, default=QUELLE_MANUELL)  # manuell | termin
    termin_id = Column(Integer, nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

Index("ix_buchungen_datum_typ", Buchung.datum, Buchung.typ)
