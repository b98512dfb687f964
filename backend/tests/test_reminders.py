import json

from conftest import png_bytes

from emur.models.media import Media, ReminderMedia
from emur.models.reminder import Reminder
from emur.repositories.base import PersistenceError
from emur.repositories.health import ReminderRepository

REMINDER_FORM = {
    "name": "Neurologist",
    "type": "appointment",
    "date": "15/03/2025",
    "notification": json.dumps([{"days_or_hours": "days", "hours_before": 24}]),
    "task": json.dumps([{"name": "Bring MRI", "checked": False}]),
    "note": "Second floor",
}


def create_reminder(client, headers, n_files=2):
    files = [("file", (f"scan{i}.png", png_bytes(), "image/png")) for i in range(n_files)]
    r = client.post("/api/v1/reminders", data=REMINDER_FORM, files=files or None, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_reminder_with_attachments(client, db, storage, user_headers):
    data = create_reminder(client, user_headers)
    reminder = data["reminder"]
    assert reminder["name"] == "Neurologist"
    assert reminder["date"].startswith("2025-03-15")
    assert reminder["notification"] == [{"days_or_hours": "days", "hours_before": 24}]
    assert reminder["task"][0]["name"] == "Bring MRI"
    assert reminder["is_active"] is True
    assert len(data["media"]) == 2
    assert len(storage.objects) == 2
    assert db.query(ReminderMedia).count() == 2


def test_create_reminder_without_files(client, user_headers):
    data = create_reminder(client, user_headers, n_files=0)
    assert data["media"] == []


def test_create_reminder_bad_date(client, user_headers):
    form = {**REMINDER_FORM, "date": "2025-03-15"}
    r = client.post("/api/v1/reminders", data=form, headers=user_headers)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid input"


def test_create_reminder_bad_notification_json(client, user_headers):
    form = {**REMINDER_FORM, "notification": "{not json"}
    r = client.post("/api/v1/reminders", data=form, headers=user_headers)
    assert r.status_code == 400


def test_list_reminders_is_owner_scoped(client, user_headers, other_headers):
    create_reminder(client, user_headers, n_files=0)
    create_reminder(client, other_headers, n_files=0)

    r = client.get("/api/v1/reminders", headers=user_headers)
    assert r.status_code == 200
    assert len(r.json()["data"]) == 1


def test_update_with_files_replaces_attachments(client, db, storage, user_headers):
    data = create_reminder(client, user_headers)
    old_urls = set(data["media"])

    files = [("file", ("new.png", png_bytes(), "image/png"))]
    form = {**REMINDER_FORM, "name": "Neurologist (moved)"}
    r = client.put(f"/api/v1/reminders?uuid={data['reminder']['uuid']}", data=form, files=files,
                   headers=user_headers)
    assert r.status_code == 200, r.text
    updated = r.json()["data"]
    assert updated["reminder"]["name"] == "Neurologist (moved)"
    assert len(updated["media"]) == 1
    assert not old_urls & set(updated["media"])

    assert set(storage.deleted) == old_urls
    assert db.query(Media).count() == 1
    assert db.query(ReminderMedia).count() == 1


def test_update_without_files_keeps_attachments(client, user_headers):
    data = create_reminder(client, user_headers)
    r = client.put(f"/api/v1/reminders?uuid={data['reminder']['uuid']}", data=REMINDER_FORM,
                   headers=user_headers)
    assert r.status_code == 200, r.text
    assert sorted(r.json()["data"]["media"]) == sorted(data["media"])


def test_update_by_non_owner_forbidden(client, user_headers, other_headers):
    data = create_reminder(client, user_headers, n_files=0)
    r = client.put(f"/api/v1/reminders?uuid={data['reminder']['uuid']}", data=REMINDER_FORM,
                   headers=other_headers)
    assert r.status_code == 403


def test_delete_reminder_cleans_media(client, db, storage, user_headers, other_headers):
    data = create_reminder(client, user_headers)
    uuid = data["reminder"]["uuid"]

    assert client.delete(f"/api/v1/reminders?uuid={uuid}", headers=other_headers).status_code == 403

    r = client.delete(f"/api/v1/reminders?uuid={uuid}", headers=user_headers)
    assert r.status_code == 200, r.text
    assert db.query(Reminder).count() == 0
    assert db.query(Media).count() == 0
    assert storage.objects == {}


def test_failed_update_keeps_old_files(client, db, storage, user_headers, monkeypatch):
    data = create_reminder(client, user_headers)
    old_urls = set(data["media"])

    def failing_update(self, value):
        raise PersistenceError("failed to update record: disk I/O error")

    monkeypatch.setattr(ReminderRepository, "update", failing_update)

    files = [("file", ("new.png", png_bytes(), "image/png"))]
    r = client.put(f"/api/v1/reminders?uuid={data['reminder']['uuid']}", data=REMINDER_FORM, files=files,
                   headers=user_headers)
    assert r.status_code == 500

    assert storage.deleted == []
    assert old_urls <= set(storage.objects)
    assert {m.media_url for m in db.query(Media).join(ReminderMedia, ReminderMedia.media_id == Media.id)} == old_urls
