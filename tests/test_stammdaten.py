def test_freelancer_defaults(client) -> None:
    res = client.post("/api/freelancers", json={"name": "Dana"})
    assert res.status_code == 200
    fl = res.json()
    assert fl["adresse"] == ""
    assert fl["farbe"] == "#10b981"
    assert fl["archived"] is False
    assert fl["created_at"]


def test_freelancers_archived_last(client) -> None:
    zoe = client.post("/api/freelancers", json={"name": "Zoe"}).json()
    alt = client.post("/api/freelancers", json={"name": "Aaron"}).json()
    client.put(f"/api/freelancers/{alt['id']}", json={"name": "Aaron", "archived": True})
    client.post("/api/freelancers", json={"name": "Mia"})

    names = [f["name"] for f in client.get("/api/freelancers").json()]
    assert names == ["Mia", "Zoe", "Aaron"]
    assert zoe["id"] != alt["id"]


def test_update_freelancer(client, anna) -> None:
    res = client.put(
        f"/api/freelancers/{anna['id']}",
        json={"name": "Anna B.", "adresse": "Ring 2", "farbe": "#ff0000", "archived": False},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Anna B."
    assert body["adresse"] == "Ring 2"
    assert body["farbe"] == "#ff0000"


def test_update_unknown_freelancer(client) -> None:
    res = client.put("/api/freelancers/999", json={"name": "X"})
    assert res.status_code == 404
    assert "nicht gefunden" in res.json()["error"]


def test_delete_freelancer(client) -> None:
    fl = client.post("/api/freelancers", json={"name": "Weg"}).json()
    assert client.delete(f"/api/freelancers/{fl['id']}").json() == {"success": True}
    assert client.get("/api/freelancers").json() == []


def test_freelancer_name_required(client) -> None:
    res = client.post("/api/freelancers", json={"adresse": "nirgends"})
    assert res.status_code == 422
    assert res.json()["details"][0]["field"] == "name"


def test_kautionen_listing(client, anna, neue_kaution) -> None:
    ben = client.post("/api/freelancers", json={"name": "Ben"}).json()
    neue_kaution(anna["id"], 10, bezeichnung="alt", datum="2025-09-01")
    neue_kaution(anna["id"], 20, bezeichnung="neu", datum="2025-10-15")
    neue_kaution(ben["id"], 30, bezeichnung="ben")

    alle = client.get("/api/kautionen").json()
    assert [k["bezeichnung"] for k in alle] == ["neu", "ben", "alt"]
    assert {k["freelancer_name"] for k in alle} == {"Anna", "Ben"}

    annas = client.get(f"/api/kautionen/freelancer/{anna['id']}").json()
    assert [k["bezeichnung"] for k in annas] == ["neu", "alt"]
    assert all(k["typ"] == "Kaution" and k["ausgezahlt"] is False for k in annas)


def test_kaution_only_plain_type(client, anna) -> None:
    res = client.post(
        "/api/kautionen",
        json={"freelancer_id": anna["id"], "datum": "2025-10-01", "betrag": 5, "typ": "Gutschein"},
    )
    assert res.status_code == 422


def test_delete_kaution(client, anna, neue_kaution) -> None:
    k = neue_kaution(anna["id"], 10)
    assert client.delete(f"/api/kautionen/{k['id']}").json() == {"success": True}
    assert client.get("/api/kautionen").json() == []


def test_einstellungen_roundtrip(client) -> None:
    assert client.get("/api/einstellungen/studio_name").json() == {"value": None}

    assert client.post("/api/einstellungen/studio_name", json={"value": "Ink & Co"}).json() == {"success": True}
    assert client.get("/api/einstellungen/studio_name").json() == {"value": "Ink & Co"}

    client.post("/api/einstellungen/studio_name", json={"value": "Ink & Friends"})
    assert client.get("/api/einstellungen/studio_name").json() == {"value": "Ink & Friends"}

    client.post("/api/einstellungen/studio_name", json={"value": ""})
    assert client.get("/api/einstellungen/studio_name").json() == {"value": None}


def test_health(client) -> None:
    body = client.get("/api/health").json()
    assert body["ok"] is True
    assert body["version"]
