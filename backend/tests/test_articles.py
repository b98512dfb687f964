from conftest import png_bytes

from emur.models.article import Article
from emur.models.media import ArticleMedia, Media


def create_article(client, admin_headers, with_image=True):
    files = {"file": ("cover.png", png_bytes(), "image/png")} if with_image else None
    r = client.post(
        "/api/v1/articles",
        data={"title": "Living with MS", "content": "Practical advice"},
        files=files,
        headers=admin_headers,
    )
    assert r.status_code == 201, r.text
    return r.json()["data"]


def create_category(client, admin_headers, name="Wellbeing"):
    r = client.post("/api/v1/categories", json={"name": name}, headers=admin_headers)
    assert r.status_code == 201, r.text
    return r.json()["data"]["uuid"]


def test_create_article_stores_cover(client, db, storage, admin_headers):
    data = create_article(client, admin_headers)
    article = data["article"]
    assert article["image"] in storage.objects
    assert data["media"] == [article["image"]]
    assert article["is_published"] is False
    assert db.query(ArticleMedia).count() == 1


def test_members_list_articles(client, admin_headers, user_headers):
    create_article(client, admin_headers, with_image=False)
    r = client.get("/api/v1/articles", headers=user_headers)
    assert r.status_code == 200
    assert r.json()["data"][0]["article"]["title"] == "Living with MS"


def test_update_article_publishes(client, admin_headers):
    uuid = create_article(client, admin_headers, with_image=False)["article"]["uuid"]
    r = client.put(
        f"/api/v1/articles/{uuid}",
        json={"title": "Living with MS", "content": "Updated", "is_published": True},
        headers=admin_headers,
    )
    assert r.status_code == 200, r.text
    assert r.json()["data"]["is_published"] is True
    assert r.json()["data"]["content"] == "Updated"


def test_add_category_once(client, admin_headers):
    article_uuid = create_article(client, admin_headers, with_image=False)["article"]["uuid"]
    category_uuid = create_category(client, admin_headers)

    r = client.post(f"/api/v1/articles/{article_uuid}/categories", json={"category": category_uuid},
                    headers=admin_headers)
    assert r.status_code == 200, r.text
    assert [c["uuid"] for c in r.json()["data"]["categories"]] == [category_uuid]

    r = client.post(f"/api/v1/articles/{article_uuid}/categories", json={"category": category_uuid},
                    headers=admin_headers)
    assert r.status_code == 409


def test_add_unknown_category(client, admin_headers):
    article_uuid = create_article(client, admin_headers, with_image=False)["article"]["uuid"]
    r = client.post(f"/api/v1/articles/{article_uuid}/categories",
                    json={"category": "5d0c4c34-3333-4d2e-9f00-000000000000"}, headers=admin_headers)
    assert r.status_code == 404


def test_delete_article_removes_cover(client, db, storage, admin_headers):
    uuid = create_article(client, admin_headers)["article"]["uuid"]
    r = client.delete(f"/api/v1/articles/{uuid}", headers=admin_headers)
    assert r.status_code == 200, r.text
    assert db.query(Article).count() == 0
    assert db.query(Media).count() == 0
    assert storage.objects == {}


def test_category_crud(client, admin_headers, user_headers):
    uuid = create_category(client, admin_headers, "Nutrition")

    r = client.put(f"/api/v1/categories/{uuid}", json={"name": "Diet"}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Diet"

    r = client.get("/api/v1/categories", headers=user_headers)
    assert [c["name"] for c in r.json()["data"]] == ["Diet"]

    assert client.delete(f"/api/v1/categories/{uuid}", headers=user_headers).status_code == 403
    assert client.delete(f"/api/v1/categories/{uuid}", headers=admin_headers).status_code == 200
    assert client.get("/api/v1/categories", headers=user_headers).json()["data"] == []
