"""
Error handling and edge case tests.

- Not found errors (unknown vet, specialty, day) map to 404
- Malformed requests map to 422
- Unexpected errors map to 500 without leaking details
- Exception payloads
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from test_fixtures import client, db_session, make_vet
from main import app
from services.vet_service import VetService
from app.exceptions import NotFoundError, VetClinicError


# =============================================================================
# NOT FOUND
# =============================================================================


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/vets/404"),
        ("get", "/vets/404/edit"),
        ("get", "/vets/404/specialty/new"),
        ("get", "/vets/404/available-day/new"),
        ("post", "/vets/404/specialty/1/delete"),
        ("post", "/vets/404/available-day/1/delete"),
    ],
)
def test_unknown_vet_returns_404(client, method, path):
    r = getattr(client, method)(path)
    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert "404" in body["error"]["message"]


def test_edit_unknown_vet_returns_404(client):
    r = client.post("/vets/404/edit", json={"first_name": "A", "last_name": "B"})
    assert r.status_code == 404


def test_unknown_specialty_name_returns_404(client, db_session: Session):
    vet = make_vet(db_session)

    r = client.post(f"/vets/{vet.id}/specialty/new", json={"specialty": "astrology"})

    assert r.status_code == 404
    assert r.json()["error"]["details"] == {"specialty": "astrology"}


def test_unknown_day_id_returns_404(client, db_session: Session):
    vet = make_vet(db_session)

    r = client.post(f"/vets/{vet.id}/available-day/999/delete")

    assert r.status_code == 404
    assert r.json()["error"]["details"] == {"day_id": 999}


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/vets/100000000000000000000"),
        ("get", "/vets/-100000000000000000000/edit"),
        ("post", "/vets/100000000000000000000/available-day/1/delete"),
    ],
)
def test_vet_id_beyond_column_range_returns_404(client, method, path):
    r = getattr(client, method)(path)
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_specialty_id_beyond_column_range_returns_404(client, db_session: Session):
    vet = make_vet(db_session)

    r = client.post(f"/vets/{vet.id}/specialty/100000000000000000000/delete")

    assert r.status_code == 404
    assert r.json()["error"]["details"] == {"specialty_id": 10**20}


# =============================================================================
# MALFORMED REQUESTS
# =============================================================================


def test_non_integer_vet_id_returns_422(client):
    r = client.get("/vets/abc")
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_missing_specialty_key_returns_422(client, db_session: Session):
    vet = make_vet(db_session)

    r = client.post(f"/vets/{vet.id}/specialty/new", json={})

    assert r.status_code == 422


def test_blank_day_name_returns_422(client, db_session: Session):
    vet = make_vet(db_session)

    r = client.post(f"/vets/{vet.id}/available-day/new", json={"day": "  "})

    assert r.status_code == 422


def test_unknown_route_returns_404_envelope(client):
    r = client.get("/owners")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


# =============================================================================
# UNEXPECTED ERRORS
# =============================================================================


def test_unexpected_error_returns_500(db_session: Session, monkeypatch):
    def boom(db):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(VetService, "get_all_vets", boom)
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.get("/vets")

    assert r.status_code == 500
    body = r.json()
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "exploded" not in body["error"]["message"]


# =============================================================================
# EXCEPTION PAYLOADS
# =============================================================================


def test_exception_to_dict():
    exc = NotFoundError("Vet 3 not found", details={"vet_id": 3}, code="VET_MISSING")
    assert exc.to_dict() == {
        "message": "Vet 3 not found",
        "code": "VET_MISSING",
        "details": {"vet_id": 3},
    }
    assert str(exc) == "Vet 3 not found"


def test_exception_defaults():
    assert VetClinicError().message == "Unexpected error"
    assert VetClinicError.http_status == 500
    assert NotFoundError().message == "Not found"
    assert NotFoundError.http_status == 404
