RECORD = {
    "health_care_provider": "CASMU",
    "multiple_sclerosis_type": "RRMS",
    "conmorbidity": False,
    "support_network": True,
    "is_disabled": False,
}


def test_get_missing_record(client, user_headers):
    assert client.get("/api/v1/medicalrecords", headers=user_headers).status_code == 404


def test_create_and_get_record(client, user_headers):
    r = client.post("/api/v1/medicalrecords", json=RECORD, headers=user_headers)
    assert r.status_code == 201, r.text

    r = client.get("/api/v1/medicalrecords", headers=user_headers)
    assert r.status_code == 200
    assert r.json()["data"]["health_care_provider"] == "CASMU"


def test_second_record_rejected(client, user_headers):
    assert client.post("/api/v1/medicalrecords", json=RECORD, headers=user_headers).status_code == 201
    r = client.post("/api/v1/medicalrecords", json=RECORD, headers=user_headers)
    assert r.status_code == 400


def test_update_by_owner(client, user_headers):
    uuid = client.post("/api/v1/medicalrecords", json=RECORD, headers=user_headers).json()["data"]["uuid"]
    r = client.put(f"/api/v1/medicalrecords/{uuid}", json={**RECORD, "is_disabled": True}, headers=user_headers)
    assert r.status_code == 200, r.text
    assert r.json()["data"]["is_disabled"] is True


def test_update_by_non_owner_forbidden(client, user_headers, other_headers):
    uuid = client.post("/api/v1/medicalrecords", json=RECORD, headers=user_headers).json()["data"]["uuid"]
    r = client.put(f"/api/v1/medicalrecords/{uuid}", json={**RECORD, "is_disabled": True}, headers=other_headers)
    assert r.status_code == 403
