LOCATION = {
    "name": "Farmacia Central",
    "latitude": "-34.9011",
    "longitude": "-56.1645",
    "type": 1,
    "hours_availability": [{"day": "monday", "open_time": "08:00", "close_time": "20:00"}],
    "phone": [{"number": "+598 2900 0000"}],
    "is_published": True,
}


def test_map_crud(client, admin_headers, user_headers):
    assert client.post("/api/v1/maps", json=LOCATION, headers=user_headers).status_code == 403

    r = client.post("/api/v1/maps", json=LOCATION, headers=admin_headers)
    assert r.status_code == 201, r.text
    uuid = r.json()["data"]["uuid"]

    r = client.put(f"/api/v1/maps/{uuid}", json={**LOCATION, "name": "Farmacia Norte"}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Farmacia Norte"

    r = client.get("/api/v1/maps", headers=user_headers)
    data = r.json()["data"]
    assert len(data) == 1
    assert data[0]["phone"] == [{"number": "+598 2900 0000"}]

    assert client.delete(f"/api/v1/maps/{uuid}", headers=admin_headers).status_code == 200
    assert client.get("/api/v1/maps", headers=user_headers).json()["data"] == []


def test_question_with_answers(client, user_headers, other_headers):
    r = client.post("/api/v1/questions", json={"text": "How do you handle fatigue?"}, headers=user_headers)
    assert r.status_code == 201, r.text
    question_uuid = r.json()["data"]["uuid"]

    r = client.post("/api/v1/answers", json={"question_uuid": question_uuid, "text": "Short naps"},
                    headers=other_headers)
    assert r.status_code == 201, r.text
    assert r.json()["data"]["is_public"] is True

    r = client.get(f"/api/v1/questions/{question_uuid}", headers=user_headers)
    assert r.status_code == 200
    detail = r.json()["data"]
    assert detail["question"]["text"] == "How do you handle fatigue?"
    assert [a["text"] for a in detail["answers"]] == ["Short naps"]

    r = client.get("/api/v1/questions", headers=user_headers)
    assert len(r.json()["data"]) == 1


def test_answer_unknown_question(client, user_headers):
    r = client.post("/api/v1/answers", json={"question_uuid": "2c2c2c2c-5555-4d4d-8e8e-000000000000", "text": "?"},
                    headers=user_headers)
    assert r.status_code == 404
