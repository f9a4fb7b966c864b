# app/berichte_auswertung.py
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.models.base import get_db
from app.services.auswertung import monatsauswertung
from app.services.auswertung_pdf import render_auswertung_pdf

router = APIRouter(prefix="/api/auswertung", tags=["Auswertung"])

# PDF-Route zuerst, sonst faengt /{monat} auch "2025-11.pdf"
@router.get("/{monat}.pdf")
def auswertung_pdf(monat: str, db: Session = Depends(get_db)):
    zeilen = monatsauswertung(db, monat)
    return Response(
        content=render_auswertung_pdf(monat, zeilen),
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="auswertung_{monat}.pdf"'}
    )

@router.get("/{monat}")
def auswertung(monat: str, db: Session = Depends(get_db)):
    return monatsauswertung(db, monat)
