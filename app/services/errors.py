# studio_kasse/app/services/errors.py
from __future__ import annotations


class StudioKasseFehler(Exception):
    """Fachlicher Fehler mit HTTP-Status; wird als {"error": ...} ausgeliefert."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NichtGefunden(StudioKasseFehler):
    status_code = 404


class UngueltigeEingabe(StudioKasseFehler):
    status_code = 400


class KassenbuchRegelVerletzt(StudioKasseFehler):
    status_code = 400


class KautionBereitsVerrechnet(StudioKasseFehler):
    status_code = 409

    def __init__(self, kaution_id: int):
        super().__init__(f"Kaution {kaution_id} ist bereits verrechnet")
        self.kaution_id = kaution_id
