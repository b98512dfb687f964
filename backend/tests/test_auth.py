from conftest import DEFAULT_PASSWORD, auth_headers, make_user

from emur.core.config import get_settings
from emur.core.security import verify_password
from emur.models.user import User
from emur.services.auth_service import verify_token


def test_signup_creates_user_with_hashed_password(client, db):
    r = client.post("/api/v1/users/signup", json={"email": "Nueva@Emur.org", "password": "MyPass1!"})
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["code"] == 201
    assert body["data"]["uuid"]

    stored = db.query(User).filter(User.email == "nueva@emur.org").one()
    assert stored.password != "MyPass1!"
    assert verify_password("MyPass1!", stored.password)
    assert stored.is_active is True
    assert stored.role == "user"


def test_signup_duplicate_email_conflicts(client):
    payload = {"email": "dup@emur.org", "password": "MyPass1!"}
    assert client.post("/api/v1/users/signup", json=payload).status_code == 201

    r = client.post("/api/v1/users/signup", json={"email": "DUP@emur.org", "password": "other"})
    assert r.status_code == 409
    assert r.json()["message"] == "User already exists"


def test_signup_rejects_invalid_email(client):
    r = client.post("/api/v1/users/signup", json={"email": "not-an-email", "password": "x"})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid input"
    assert body["data"][0]["loc"][-1] == "email"


def test_login_returns_bearer_token_with_claims(client, user):
    r = client.post("/api/v1/users/login", json={"email": user.email, "password": DEFAULT_PASSWORD})
    assert r.status_code == 200, r.text
    token = r.json()["data"]["token"]
    assert token.startswith("Bearer ")

    claims = verify_token(get_settings(), token)
    assert claims is not None
    assert claims.email == user.email
    assert claims.user_uuid == user.uuid
    assert claims.role == "user"


def test_login_wrong_password(client, user):
    r = client.post("/api/v1/users/login", json={"email": user.email, "password": "wrong"})
    assert r.status_code == 400
    assert r.json()["message"] == "incorrect/mismatch password"


def test_login_unknown_email(client):
    r = client.post("/api/v1/users/login", json={"email": "ghost@emur.org", "password": "x"})
    assert r.status_code == 400
    assert r.json()["message"] == "user not found"


def test_login_banned_user_forbidden(client, db):
    make_user(db, "banned@emur.org", is_banned=True)
    r = client.post("/api/v1/users/login", json={"email": "banned@emur.org", "password": DEFAULT_PASSWORD})
    assert r.status_code == 403


def test_missing_token_returns_empty_401(client):
    r = client.get("/api/v1/users")
    assert r.status_code == 401
    assert r.content == b""


def test_tampered_token_returns_empty_401(client, user):
    headers = auth_headers(user)
    headers["Authorization"] += "x"
    r = client.get("/api/v1/symptoms", headers=headers)
    assert r.status_code == 401
    assert r.content == b""


def test_token_without_bearer_prefix_is_accepted(client, user):
    token = auth_headers(user)["Authorization"].removeprefix("Bearer ")
    r = client.get("/api/v1/users", headers={"Authorization": token})
    assert r.status_code == 200, r.text
    assert r.json()["data"]["email"] == user.email


def test_other_auth_scheme_returns_empty_401(client, user):
    token = auth_headers(user)["Authorization"].removeprefix("Bearer ")
    r = client.get("/api/v1/users", headers={"Authorization": f"Basic {token}"})
    assert r.status_code == 401
    assert r.content == b""


def test_user_role_cannot_reach_admin_route(client, user_headers):
    r = client.post("/api/v1/symptoms", json={"name": "Fatigue", "is_active": True, "scale": 3}, headers=user_headers)
    assert r.status_code == 403
    assert r.json()["code"] == 403


def test_admin_role_cannot_reach_user_only_route(client, admin_headers):
    r = client.get("/api/v1/monitorings", headers=admin_headers)
    assert r.status_code == 403


def test_health_endpoint(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
