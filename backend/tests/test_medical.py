from datetime import datetime, timezone

import pytest

from emur.core.exceptions import BadRequestError
from emur.models.medical import Medical, MedicalRating
from emur.models.reminder import Reminder
from emur.services.medical_service import parse_medical_csv

CSV = (
    "Nombre;Segundo;Apellido;Otro;CJPPU;Profesion\n"
    "  Ana ;x; Muñoz ;y; 1234 ; 5678\n"
    "Luis;x;García;y;4321;8765\n"
).encode("latin-1")


def test_parse_trims_and_skips_header():
    medicals = parse_medical_csv(CSV)
    assert [(m.first_name, m.last_name, m.cjppu_number, m.profession_number) for m in medicals] == [
        ("Ana", "Muñoz", "1234", "5678"),
        ("Luis", "García", "4321", "8765"),
    ]


def test_parse_rejects_short_rows():
    with pytest.raises(BadRequestError):
        parse_medical_csv(b"h;h;h;h;h;h\nAna;x;Perez\n")


def test_import_csv(client, db, user_headers):
    r = client.post("/api/v1/medical", files={"file": ("medicos.csv", CSV, "text/csv")}, headers=user_headers)
    assert r.status_code == 200, r.text
    assert r.json()["data"] == {"imported": 2}
    assert db.query(Medical).count() == 2

    r = client.get("/api/v1/medical", headers=user_headers)
    assert [m["last_name"] for m in r.json()["data"]] == ["García", "Muñoz"]


def test_import_is_all_or_nothing(client, db, admin_headers):
    bad = CSV + b"Pedro;x\n"
    r = client.post("/api/v1/medical", files={"file": ("medicos.csv", bad, "text/csv")}, headers=admin_headers)
    assert r.status_code == 400
    assert db.query(Medical).count() == 0


@pytest.fixture
def appointment(db, user):
    reminder = Reminder(user_id=user.id, name="Control", type="appointment", date=datetime(2024, 5, 2, tzinfo=timezone.utc))
    db.add(reminder)
    db.commit()
    return reminder


@pytest.fixture
def medical(db):
    medical = Medical(first_name="Ana", last_name="Muñoz", cjppu_number="1234", profession_number="5678")
    db.add(medical)
    db.commit()
    return medical


def test_rate_medical(client, db, user_headers, medical, appointment):
    r = client.post("/api/v1/medical/rating",
                    json={"medical_id": medical.id, "reminder_id": appointment.id, "rating": 4},
                    headers=user_headers)
    assert r.status_code == 200, r.text
    assert r.json()["data"]["rating"] == 4
    assert db.query(MedicalRating).count() == 1


def test_rate_medical_requires_ids(client, user_headers):
    r = client.post("/api/v1/medical/rating", json={"medical_id": 0, "reminder_id": 3, "rating": 4},
                    headers=user_headers)
    assert r.status_code == 400


def test_rate_unknown_medical_or_reminder(client, db, user_headers, medical, appointment):
    r = client.post("/api/v1/medical/rating", json={"medical_id": 999, "reminder_id": appointment.id, "rating": 4},
                    headers=user_headers)
    assert r.status_code == 404
    assert r.json()["message"] == "medical not found"

    r = client.post("/api/v1/medical/rating", json={"medical_id": medical.id, "reminder_id": 999, "rating": 4},
                    headers=user_headers)
    assert r.status_code == 404
    assert r.json()["message"] == "reminder not found"
    assert db.query(MedicalRating).count() == 0


def test_health_services(client, user_headers, appointment):
    r = client.post("/api/v1/healthservices", json={"name": "Hospital de Clínicas"}, headers=user_headers)
    assert r.status_code == 201, r.text

    r = client.get("/api/v1/healthservices", headers=user_headers)
    assert [s["name"] for s in r.json()["data"]] == ["Hospital de Clínicas"]

    r = client.post("/api/v1/healthservices/rating", json={"health_service_id": 1, "reminder_id": 0, "rating": 5},
                    headers=user_headers)
    assert r.status_code == 400

    r = client.post("/api/v1/healthservices/rating",
                    json={"health_service_id": 1, "reminder_id": appointment.id, "rating": 5},
                    headers=user_headers)
    assert r.status_code == 200
    assert r.json()["data"]["reminder_id"] == appointment.id


def test_rate_unknown_health_service(client, user_headers, appointment):
    r = client.post("/api/v1/healthservices/rating",
                    json={"health_service_id": 42, "reminder_id": appointment.id, "rating": 5},
                    headers=user_headers)
    assert r.status_code == 404
    assert r.json()["message"] == "health service not found"
