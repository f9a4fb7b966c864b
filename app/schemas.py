from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


class BuchungTyp(str, Enum):
    einnahme = "einnahme"
    ausgabe = "ausgabe"


class ApiErrorDetail(BaseModel):
    field: str
    message: str


# ---------- Freelancer ----------

class FreelancerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    adresse: Optional[str] = None
    farbe: Optional[str] = Field(default=None, max_length=7)


class FreelancerUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    adresse: Optional[str] = None
    farbe: Optional[str] = Field(default=None, max_length=7)
    archived: bool = False


# ---------- Kautionen ----------

class KautionCreate(BaseModel):
    freelancer_id: Optional[int] = None
    datum: date
    bezeichnung: Optional[str] = Field(default=None, max_length=100)
    betrag: Decimal = Field(max_digits=10, decimal_places=2)
    # Gutscheine/PayPal entstehen nur ueber einen Termin
    typ: Literal["Kaution"] = "Kaution"


# ---------- Termine ----------

class VerrechnungPosten(BaseModel):
    bezeichnung: Optional[str] = Field(default=None, max_length=100)
    betrag: Decimal = Field(max_digits=10, decimal_places=2)


class TerminCreate(BaseModel):
    freelancer_id: int
    datum: date
    gesamtbetrag: Decimal = Field(max_digits=10, decimal_places=2)
    kaution_ids: list[int] = Field(default_factory=list)
    gutscheine: list[VerrechnungPosten] = Field(default_factory=list)
    paypal_kautionen: list[VerrechnungPosten] = Field(default_factory=list)


# ---------- Kassenbuch ----------

class BuchungCreate(BaseModel):
    datum: date
    typ: BuchungTyp
    betrag: Decimal = Field(max_digits=10, decimal_places=2)
    bemerkung: Optional[str] = None


class BuchungUpdate(BuchungCreate):
    pass


# ---------- Einstellungen ----------

class EinstellungWert(BaseModel):
    value: Optional[str] = None
