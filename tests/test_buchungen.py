def _auto_buchung(client, freelancer_id: int) -> dict:
    client.post(
        "/api/termine",
        json={
            "freelancer_id": freelancer_id,
            "datum": "2025-11-10",
            "gesamtbetrag": 100,
            "gutscheine": [{"bezeichnung": "GS", "betrag": 10}],
        },
    )
    return next(b for b in client.get("/api/buchungen").json() if b["quelle"] == "termin")


def test_create_manual_buchung(client) -> None:
    res = client.post("/api/buchungen", json={"datum": "2025-11-03", "typ": "einnahme", "betrag": 120})
    assert res.status_code == 200
    b = res.json()
    assert b["quelle"] == "manuell"
    assert b["bemerkung"] == ""
    assert b["termin_id"] is None
    assert b["betrag"] == 120.0


def test_list_buchungen_newest_first(client) -> None:
    client.post("/api/buchungen", json={"datum": "2025-11-01", "typ": "ausgabe", "betrag": 5, "bemerkung": "alt"})
    client.post("/api/buchungen", json={"datum": "2025-11-20", "typ": "ausgabe", "betrag": 7, "bemerkung": "neu"})
    assert [b["bemerkung"] for b in client.get("/api/buchungen").json()] == ["neu", "alt"]


def test_invalid_typ_is_rejected(client) -> None:
    res = client.post("/api/buchungen", json={"datum": "2025-11-03", "typ": "spende", "betrag": 1})
    assert res.status_code == 422
    assert res.json()["details"][0]["field"] == "typ"


def test_update_manual_buchung(client) -> None:
    b = client.post("/api/buchungen", json={"datum": "2025-11-03", "typ": "einnahme", "betrag": 10}).json()
    res = client.put(
        f"/api/buchungen/{b['id']}",
        json={"datum": "2025-11-04", "typ": "ausgabe", "betrag": 11.5, "bemerkung": "korrigiert"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["datum"] == "2025-11-04"
    assert body["typ"] == "ausgabe"
    assert body["betrag"] == 11.5
    assert body["bemerkung"] == "korrigiert"
    assert body["quelle"] == "manuell"


def test_delete_manual_buchung(client) -> None:
    b = client.post("/api/buchungen", json={"datum": "2025-11-03", "typ": "einnahme", "betrag": 10}).json()
    res = client.delete(f"/api/buchungen/{b['id']}")
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert client.get("/api/buchungen").json() == []


def test_delete_termin_buchung_is_rejected(client, anna) -> None:
    auto = _auto_buchung(client, anna["id"])
    res = client.delete(f"/api/buchungen/{auto['id']}")
    assert res.status_code == 400
    assert res.json() == {"error": "Automatische Buchungen können nur über den Termin gelöscht werden"}
    assert any(b["id"] == auto["id"] for b in client.get("/api/buchungen").json())


def test_update_termin_buchung_is_rejected(client, anna) -> None:
    auto = _auto_buchung(client, anna["id"])
    res = client.put(
        f"/api/buchungen/{auto['id']}",
        json={"datum": "2025-11-04", "typ": "einnahme", "betrag": 999},
    )
    assert res.status_code == 400
    assert "nur über den Termin" in res.json()["error"]
    still = next(b for b in client.get("/api/buchungen").json() if b["id"] == auto["id"])
    assert still["betrag"] == 10.0


def test_unknown_buchung_is_404(client) -> None:
    assert client.delete("/api/buchungen/777").status_code == 404
    res = client.put("/api/buchungen/777", json={"datum": "2025-11-04", "typ": "einnahme", "betrag": 1})
    assert res.status_code == 404
    assert res.json() == {"error": "Buchung 777 nicht gefunden"}
