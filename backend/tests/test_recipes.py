from conftest import png_bytes

from emur.models.media import Media, RecipeMedia
from emur.models.recipe import RatingRecipe, Recipe

RECIPE_FORM = {
    "name": "Lentil soup",
    "description": "Warm and simple",
    "ingredients": "lentils, carrot, onion",
    "elaboration": "Boil everything for 40 minutes",
    "category": "2",
    "time": "50",
    "prep_time": "10",
    "cook_time": "40",
    "serving": "4",
    "difficulty": "easy",
    "is_published": "true",
}


def create_recipe(client, admin_headers, with_image=True):
    files = {"file": ("soup.png", png_bytes(), "image/png")} if with_image else None
    r = client.post("/api/v1/recipes", data=RECIPE_FORM, files=files, headers=admin_headers)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_recipe_uploads_image_and_thumbnail(client, db, storage, admin_headers):
    data = create_recipe(client, admin_headers)
    assert data["recipe"]["name"] == "Lentil soup"
    assert data["recipe"]["category"] == 2
    assert len(data["media"]) == 1
    assert data["media"][0].endswith(".png")

    assert len(storage.objects) == 2
    media = db.query(Media).one()
    assert media.media_url in storage.objects
    assert media.media_thumb in storage.objects
    assert "_thumb.png" in media.media_thumb
    assert db.query(RecipeMedia).count() == 1


def test_create_recipe_rejects_unsupported_file(client, db, storage, admin_headers):
    files = {"file": ("notes.txt", b"hello", "text/plain")}
    r = client.post("/api/v1/recipes", data=RECIPE_FORM, files=files, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["message"] == "unsupported file type"
    assert storage.objects == {}
    assert db.query(Recipe).count() == 0


def test_create_recipe_requires_admin(client, user_headers):
    r = client.post("/api/v1/recipes", data=RECIPE_FORM, headers=user_headers)
    assert r.status_code == 403


def test_list_recipes_includes_media(client, admin_headers, user_headers):
    create_recipe(client, admin_headers)
    create_recipe(client, admin_headers, with_image=False)

    r = client.get("/api/v1/recipes", headers=user_headers)
    assert r.status_code == 200
    items = r.json()["data"]
    assert len(items) == 2
    assert sorted(len(item["media"]) for item in items) == [0, 1]


def test_vote_out_of_range(client, admin_headers, user_headers):
    recipe_uuid = create_recipe(client, admin_headers, with_image=False)["recipe"]["uuid"]
    for vote in (0, 6):
        r = client.post(f"/api/v1/recipes/{recipe_uuid}/vote", json={"vote": vote}, headers=user_headers)
        assert r.status_code == 400


def test_revote_updates_existing_row(client, db, admin_headers, user_headers):
    recipe_uuid = create_recipe(client, admin_headers, with_image=False)["recipe"]["uuid"]

    r = client.post(f"/api/v1/recipes/{recipe_uuid}/vote", json={"vote": 4}, headers=user_headers)
    assert r.status_code == 200, r.text
    r = client.post(f"/api/v1/recipes/{recipe_uuid}/vote", json={"vote": 2}, headers=user_headers)
    assert r.status_code == 200

    votes = db.query(RatingRecipe).all()
    assert len(votes) == 1
    assert votes[0].level == 2


def test_vote_unknown_recipe(client, user_headers):
    r = client.post("/api/v1/recipes/4f6e0b1c-2222-4a4b-8c8d-000000000000/vote", json={"vote": 3},
                    headers=user_headers)
    assert r.status_code == 404


def test_update_recipe(client, admin_headers):
    recipe = create_recipe(client, admin_headers, with_image=False)["recipe"]
    payload = {**{k: v for k, v in recipe.items() if k not in ("uuid", "created_at")}, "name": "Red lentil soup"}
    r = client.put(f"/api/v1/recipes/{recipe['uuid']}", json=payload, headers=admin_headers)
    assert r.status_code == 200, r.text
    assert r.json()["data"]["name"] == "Red lentil soup"


def test_delete_recipe_removes_media_and_objects(client, db, storage, admin_headers):
    recipe_uuid = create_recipe(client, admin_headers)["recipe"]["uuid"]

    r = client.delete(f"/api/v1/recipes/{recipe_uuid}", headers=admin_headers)
    assert r.status_code == 200, r.text

    assert db.query(Recipe).count() == 0
    assert db.query(RecipeMedia).count() == 0
    assert db.query(Media).count() == 0
    assert storage.objects == {}
    assert len(storage.deleted) == 2
