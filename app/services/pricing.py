from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP

from app.config import settings as app_settings

Money = Decimal

Q2 = Decimal("0.01")

def D(x) -> Decimal:
    if isinstance(x, Decimal):
        return x
    if x is None or x == "":
        return Decimal("0")
    return Decimal(str(x))

def round2(x: Decimal) -> Decimal:
    return x.quantize(Q2, rounding=ROUND_HALF_UP)

def studio_quote() -> Decimal:
    return D(app_settings.STUDIO_ANTEIL_QUOTE)

def studio_anteil(gesamtbetrag, quote: Decimal | None = None) -> Decimal:
    """Anteil des Studios am Termin (Standard 30%), auf Rappen/Cent gerundet."""
    q = studio_quote() if quote is None else D(quote)
    return round2(D(gesamtbetrag) * q)

def as_float(x) -> float:
    """Decimal-Summen aus der DB fuer JSON; None zaehlt als 0."""
    return float(round2(D(x)))
