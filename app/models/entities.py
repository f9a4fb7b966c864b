from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text

from app.config import settings as app_settings

from .base import Base

# Kautions-Typen
TYP_KAUTION = "Kaution"
TYP_GUTSCHEIN = "Gutschein"
TYP_PAYPAL = "PayPal"

# nur beim Termin entstanden, werden beim Loeschen des Termins mitgeloescht
TERMIN_TYPEN = (TYP_GUTSCHEIN, TYP_PAYPAL)

# ---------- Stammdaten ----------

class Freelancer(Base):
    __tablename__ = "freelancers"
    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    adresse = Column(Text, default="")
    farbe = Column(String(7), default=app_settings.DEFAULT_FARBE)
    archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

# ---------- Kautionen (inkl. Gutscheine und PayPal) ----------

class Kaution(Base):
    __tablename__ = "kautionen"
    id = Column(Integer, primary_key=True)
    freelancer_id = Column(Integer, ForeignKey("freelancers.id"), nullable=True)
    datum = Column(Date, nullable=False)
    bezeichnung = Column(String(100))
    betrag = Column(Numeric(10, 2), nullable=False)
    typ = Column(String(20), nullable=False, default=TYP_KAUTION)  # Kaution|Gutschein|PayPal
    ausgezahlt = Column(Boolean, nullable=False, default=False)
    termin_id = Column(Integer, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

# ---------- Termine ----------

class Termin(Base):
    __tablename__ = "termine"
    id = Column(Integer, primary_key=True)
    freelancer_id = Column(Integer, ForeignKey("freelancers.id"))
    datum = Column(Date, nullable=False, index=True)
    gesamtbetrag = Column(Numeric(10, 2), nullable=False)
    studio_anteil = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

# ---------- Einstellungen ----------

class Einstellung(Base):
    __tablename__ = "einstellungen"
    key = Column(String(50), primary_key=True)
    value = Column(Text)
