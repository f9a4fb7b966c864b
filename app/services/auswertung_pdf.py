# studio_kasse/app/services/auswertung_pdf.py
from __future__ import annotations

from datetime import datetime
from io import BytesIO
from typing import Any, Dict, List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.config import settings as app_settings
from app.services.auswertung import summen


def render_auswertung_pdf(monat: str, zeilen: List[Dict[str, Any]]) -> bytes:
    styles = getSampleStyleSheet()
    buf = BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4,
                            leftMargin=15*mm, rightMargin=15*mm,
                            topMargin=12*mm, bottomMargin=12*mm)
    story = []
    story.append(Paragraph(f"Auswertung {monat}", styles["Title"]))
    story.append(Paragraph(f"{app_settings.APP_NAME} · erstellt {datetime.now():%d.%m.%Y %H:%M}", styles["Normal"]))
    story.append(Spacer(1, 6))

    rows = [["Freelancer", "Termine", "Umsatz", "Studio-Anteil", "Kautionen offen", "Summe offen"]]
    for z in zeilen:
        rows.append([z["name"], str(z["anzahl_termine"]), f"{z['umsatz']:.2f}", f"{z['studio_anteil']:.2f}",
                     str(z["kautionen_anzahl"]), f"{z['kautionen_summe']:.2f}"])
    s = summen(zeilen)
    rows.append(["Total", str(s["anzahl_termine"]), f"{s['umsatz']:.2f}", f"{s['studio_anteil']:.2f}",
                 str(s["kautionen_anzahl"]), f"{s['kautionen_summe']:.2f}"])

    t = Table(rows, colWidths=[50*mm, 18*mm, 27*mm, 27*mm, 28*mm, 27*mm], repeatRows=1)
    t.setStyle(TableStyle([("GRID",(0,0),(-1,-1),0.25,colors.grey),
                           ("BACKGROUND",(0,0),(-1,0),colors.whitesmoke),
                           ("BACKGROUND",(0,-1),(-1,-1),colors.whitesmoke),
                           ("ALIGN",(1,1),(-1,-1),"RIGHT")]))
    story.append(t)

    doc.build(story)
    return buf.getvalue()
