TREATMENT = {
    "name": "Interferon beta",
    "type": "injection",
    "frequency": [{"day": "monday", "time": ["08:00"]}],
    "shots": [{"name": "Interferon", "dose": 30}],
    "notes": "Keep refrigerated",
}


def test_treatment_lifecycle(client, user_headers):
    r = client.post("/api/v1/treatments", json=TREATMENT, headers=user_headers)
    assert r.status_code == 201, r.text
    uuid = r.json()["data"]["uuid"]
    assert r.json()["data"]["frequency"] == TREATMENT["frequency"]

    r = client.put(f"/api/v1/treatments/{uuid}", json={**TREATMENT, "notes": "Room temperature"},
                   headers=user_headers)
    assert r.status_code == 200
    assert r.json()["data"]["notes"] == "Room temperature"

    r = client.get("/api/v1/treatments", headers=user_headers)
    assert len(r.json()["data"]) == 1

    assert client.delete(f"/api/v1/treatments/{uuid}", headers=user_headers).status_code == 200
    assert client.get("/api/v1/treatments", headers=user_headers).json()["data"] == []


def test_treatment_owner_only(client, user_headers, other_headers):
    uuid = client.post("/api/v1/treatments", json=TREATMENT, headers=user_headers).json()["data"]["uuid"]

    assert client.put(f"/api/v1/treatments/{uuid}", json=TREATMENT, headers=other_headers).status_code == 403
    assert client.delete(f"/api/v1/treatments/{uuid}", headers=other_headers).status_code == 403
    assert client.get("/api/v1/treatments", headers=other_headers).json()["data"] == []


def test_treatment_unknown_uuid(client, user_headers):
    r = client.delete("/api/v1/treatments/7b7b7b7b-4444-4a4a-8b8b-000000000000", headers=user_headers)
    assert r.status_code == 404
