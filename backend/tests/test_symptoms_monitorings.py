from emur.models.monitoring import Monitoring


def create_symptom(client, admin_headers, name="Fatigue", scale=3):
    r = client.post("/api/v1/symptoms", json={"name": name, "is_active": True, "scale": scale}, headers=admin_headers)
    assert r.status_code == 200, r.text
    return r.json()["data"]["uuid"]


def test_monitoring_flow(client, db, admin_headers, user_headers):
    symptom_uuid = create_symptom(client, admin_headers)

    r = client.post("/api/v1/monitorings", json={"symptom": symptom_uuid, "scale": 4}, headers=user_headers)
    assert r.status_code == 400
    assert r.json()["message"] == "scale exceeds the symptom maximum"
    assert db.query(Monitoring).count() == 0

    r = client.post("/api/v1/monitorings", json={"symptom": symptom_uuid, "scale": 2}, headers=user_headers)
    assert r.status_code == 200, r.text
    assert r.json()["data"]["scale"] == 2

    r = client.post("/api/v1/monitorings", json={"symptom": symptom_uuid, "scale": 1}, headers=user_headers)
    assert r.status_code == 400
    assert r.json()["message"] == "monitoring already exists"
    assert db.query(Monitoring).count() == 1


def test_monitoring_unknown_symptom(client, user_headers):
    r = client.post(
        "/api/v1/monitorings",
        json={"symptom": "6a1f3f7e-1111-4f7a-9a2b-000000000000", "scale": 1},
        headers=user_headers,
    )
    assert r.status_code == 400
    assert r.json()["message"] == "symptom not found"


def test_list_monitorings_only_returns_own(client, admin_headers, user_headers, other_headers):
    symptom_uuid = create_symptom(client, admin_headers)
    client.post("/api/v1/monitorings", json={"symptom": symptom_uuid, "scale": 1}, headers=user_headers)
    client.post("/api/v1/monitorings", json={"symptom": symptom_uuid, "scale": 3}, headers=other_headers)

    r = client.get("/api/v1/monitorings", headers=user_headers)
    assert r.status_code == 200
    data = r.json()["data"]
    assert len(data) == 1
    assert data[0]["scale"] == 1
    assert data[0]["symptom"]["uuid"] == symptom_uuid


def test_symptom_catalog_visible_to_members(client, admin_headers, user_headers):
    create_symptom(client, admin_headers, "Fatigue")
    create_symptom(client, admin_headers, "Vertigo", scale=5)

    r = client.get("/api/v1/symptoms", headers=user_headers)
    assert r.status_code == 200
    assert [s["name"] for s in r.json()["data"]] == ["Fatigue", "Vertigo"]


def test_negative_scale_rejected(client, admin_headers):
    r = client.post("/api/v1/symptoms", json={"name": "Pain", "scale": -1}, headers=admin_headers)
    assert r.status_code == 400


def test_track_and_untrack_symptom(client, admin_headers, user_headers):
    symptom_uuid = create_symptom(client, admin_headers)

    r = client.post("/api/v1/symptoms/add-user", json={"symptom": symptom_uuid}, headers=user_headers)
    assert r.status_code == 200, r.text

    r = client.post("/api/v1/symptoms/add-user", json={"symptom": symptom_uuid}, headers=user_headers)
    assert r.status_code == 400

    r = client.get("/api/v1/symptoms/user", headers=user_headers)
    assert [s["uuid"] for s in r.json()["data"]] == [symptom_uuid]

    r = client.post("/api/v1/symptoms/remove-user", json={"symptom": symptom_uuid}, headers=user_headers)
    assert r.status_code == 200

    r = client.get("/api/v1/symptoms/user", headers=user_headers)
    assert r.json()["data"] == []

    r = client.post("/api/v1/symptoms/remove-user", json={"symptom": symptom_uuid}, headers=user_headers)
    assert r.status_code == 404
