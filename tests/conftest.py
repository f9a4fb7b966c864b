import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client(tmp_path):
    app = create_app(f"sqlite:///{(tmp_path / 'studio.db').as_posix()}", static_dir=str(tmp_path / "public"))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def anna(client) -> dict:
    res = client.post("/api/freelancers", json={"name": "Anna", "adresse": "Hauptstr. 1"})
    assert res.status_code == 200
    return res.json()


@pytest.fixture
def neue_kaution(client):
    def _neu(freelancer_id: int, betrag: float, bezeichnung: str = "Oktober", datum: str = "2025-10-01") -> dict:
        res = client.post(
            "/api/kautionen",
            json={"freelancer_id": freelancer_id, "datum": datum, "bezeichnung": bezeichnung, "betrag": betrag},
        )
        assert res.status_code == 200
        return res.json()
    return _neu
