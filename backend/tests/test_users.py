from sqlalchemy import text

from emur.models.user import User


def test_get_profile(client, user, user_headers):
    r = client.get("/api/v1/users", headers=user_headers)
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["email"] == user.email
    assert data["role"] == "user"
    assert "password" not in data
    assert "id" not in data


def test_update_profile_parses_date_and_encrypts_names(client, db, user, user_headers):
    payload = {
        "first_name": "María",
        "last_name": "Pérez",
        "date_of_birth": "31-12-1990",
        "sex": "F",
        "city": "Montevideo",
        "country": "Uruguay",
    }
    r = client.put("/api/v1/users", json=payload, headers=user_headers)
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["first_name"] == "María"
    assert data["date_of_birth"] == "1990-12-31"
    assert data["city"] == "Montevideo"

    raw = db.execute(text("SELECT first_name FROM users WHERE email = :e"), {"e": user.email}).scalar_one()
    assert raw != "María"

    db.expire_all()
    assert db.query(User).filter(User.email == user.email).one().first_name == "María"


def test_update_profile_requires_city_and_country(client, user_headers):
    r = client.put("/api/v1/users", json={"first_name": "Ana"}, headers=user_headers)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid input"


def test_update_profile_rejects_bad_date_format(client, user_headers):
    payload = {"date_of_birth": "1990-12-31", "city": "Lima", "country": "Peru"}
    r = client.put("/api/v1/users", json=payload, headers=user_headers)
    assert r.status_code == 400


def test_admin_bans_the_user_in_the_path(client, db, admin, user, admin_headers):
    r = client.put(f"/api/v1/users/banned/{user.uuid}", json={"status": True}, headers=admin_headers)
    assert r.status_code == 200, r.text
    assert r.json()["data"]["uuid"] == str(user.uuid)

    db.expire_all()
    assert db.query(User).filter(User.id == user.id).one().is_banned is True
    assert db.query(User).filter(User.id == admin.id).one().is_banned is False


def test_admin_deactivates_user(client, db, user, admin_headers):
    r = client.put(f"/api/v1/users/active/{user.uuid}", json={"status": False}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["data"]["is_active"] is False


def test_status_toggle_unknown_user(client, admin_headers):
    r = client.put("/api/v1/users/active/00000000-0000-0000-0000-000000000000", json={"status": True},
                   headers=admin_headers)
    assert r.status_code == 404


def test_status_toggle_requires_admin(client, other_user, user_headers):
    r = client.put(f"/api/v1/users/banned/{other_user.uuid}", json={"status": True}, headers=user_headers)
    assert r.status_code == 403
