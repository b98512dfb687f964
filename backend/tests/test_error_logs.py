import pytest

from conftest import TestingSessionLocal

from emur.models.error_log import ErrorLog
from emur.services.error_logging import error_logger, sanitize_data


@pytest.fixture
def db_error_logger(monkeypatch):
    monkeypatch.setattr(error_logger, "db_session_factory", TestingSessionLocal)
    return error_logger


def test_sanitize_redacts_secrets():
    data = {"email": "a@emur.org", "password": "x", "nested": {"api_key": "k"}, "auth": "Bearer eyJabcdefghijklmnopqrstuvwxyz"}
    clean = sanitize_data(data)
    assert clean["email"] == "a@emur.org"
    assert clean["password"] == "[REDACTED]"
    assert clean["nested"]["api_key"] == "[REDACTED]"
    assert clean["auth"] == "[REDACTED_TOKEN]"


def test_log_error_persists_row(db, db_error_logger):
    error_id = db_error_logger.log_error(ValueError("boom"), severity="warning", context={"city": "Salto"})
    assert error_id is not None

    row = db.query(ErrorLog).filter(ErrorLog.id == error_id).one()
    assert row.error_type == "ValueError"
    assert row.severity == "warning"
    assert row.context_data == {"city": "Salto"}
    assert row.resolved is False


def test_log_error_without_factory_returns_none(monkeypatch):
    monkeypatch.setattr(error_logger, "db_session_factory", None)
    assert error_logger.log_error(RuntimeError("x")) is None


def test_admin_lists_and_resolves(client, db_error_logger, admin, admin_headers):
    first = db_error_logger.log_error(ValueError("first"), severity="error")
    db_error_logger.log_error(KeyError("second"), severity="critical")

    r = client.get("/api/v1/error-logs", headers=admin_headers)
    assert r.status_code == 200, r.text
    assert r.json()["data"]["total"] == 2

    r = client.get("/api/v1/error-logs?severity=critical", headers=admin_headers)
    assert [e["error_type"] for e in r.json()["data"]["errors"]] == ["KeyError"]

    r = client.put(f"/api/v1/error-logs/{first}/resolve", json={"resolution_notes": "fixed"}, headers=admin_headers)
    assert r.status_code == 200, r.text
    detail = r.json()["data"]
    assert detail["resolved"] is True
    assert detail["resolved_by"] == str(admin.uuid)

    r = client.get("/api/v1/error-logs?resolved=false", headers=admin_headers)
    assert r.json()["data"]["total"] == 1


def test_error_log_detail_not_found(client, admin_headers):
    assert client.get("/api/v1/error-logs/999", headers=admin_headers).status_code == 404


def test_error_logs_admin_only(client, user_headers):
    assert client.get("/api/v1/error-logs", headers=user_headers).status_code == 403
