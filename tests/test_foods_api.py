import math

import pytest


def test_create_returns_201_with_id_and_default_status(client):
    resp = client.post("/api/foods", json={
        "name": "Margherita",
        "rating": 4.5,
        "food_image": "https://x.com/a.png",
        "restaurant_name": "Luigi's",
        "restaurant_image": "https://x.com/luigi.png",
    })
    assert resp.status_code == 201
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["name"] == "Margherita"
    assert body["rating"] == 4.5
    assert body["food_image"] == "https://x.com/a.png"
    assert body["restaurant_status"] == "open"


def test_create_ignores_client_supplied_id(client, make_food):
    first = make_food()
    resp = client.post("/api/foods", json={"id": first["id"], "name": "Ramen"})
    assert resp.status_code == 201
    assert resp.json()["id"] != first["id"]


def test_create_rating_bounds(client):
    assert client.post("/api/foods", json={"name": "A", "rating": 6}).status_code == 400
    assert client.post("/api/foods", json={"name": "A", "rating": -0.1}).status_code == 400
    assert client.post("/api/foods", json={"name": "A", "rating": 5}).status_code == 201
    assert client.post("/api/foods", json={"name": "A", "rating": 0}).status_code == 201


def test_create_image_must_be_url(client):
    bad = client.post("/api/foods", json={"name": "A", "food_image": "not-a-url"})
    assert bad.status_code == 400
    assert bad.json()["details"] == {"food_image": "Invalid URL format"}

    good = client.post("/api/foods", json={"name": "A", "food_image": "https://x.com/a.png"})
    assert good.status_code == 201


def test_create_requires_name(client):
    missing = client.post("/api/foods", json={"rating": 3})
    assert missing.status_code == 400
    assert "name" in missing.json()["details"]

    blank = client.post("/api/foods", json={"name": "   "})
    assert blank.status_code == 400
    assert blank.json()["details"] == {"name": "Food name is required"}


def test_list_defaults(client, make_food):
    for i in range(12):
        make_food(name=f"Dish {i}")
    body = client.get("/api/foods").json()
    assert len(body["data"]) == 10
    assert body["meta"] == {"total": 12, "page": 1, "limit": 10, "totalPages": 2}


@pytest.mark.parametrize("page,limit", [(1, 1), (1, 3), (2, 3), (3, 3), (4, 3), (1, 7), (2, 7), (1, 50)])
def test_list_page_size_and_total_pages(client, make_food, page, limit):
    for i in range(8):
        make_food(name=f"Dish {i}")
    body = client.get("/api/foods", params={"page": page, "limit": limit}).json()
    assert len(body["data"]) <= limit
    assert body["meta"]["totalPages"] == math.ceil(8 / limit)
    assert body["meta"]["total"] == 8


def test_list_pages_do_not_overlap(client, make_food):
    created = [make_food(name=f"Dish {i}")["id"] for i in range(5)]
    seen = []
    for page in (1, 2, 3):
        seen += [f["id"] for f in client.get(
            "/api/foods", params={"page": page, "limit": 2}).json()["data"]]
    assert seen == created


def test_list_empty_store(client):
    body = client.get("/api/foods").json()
    assert body == {"data": [], "meta": {"total": 0, "page": 1, "limit": 10, "totalPages": 0}}


def test_search_is_case_insensitive_substring(client, make_food):
    make_food(name="Abcdef Rolls")
    make_food(name="xxABCxx")
    make_food(name="Burger")
    body = client.get("/api/foods", params={"name": "abc"}).json()
    names = sorted(f["name"] for f in body["data"])
    assert names == ["Abcdef Rolls", "xxABCxx"]
    assert body["meta"]["total"] == 2


def test_search_treats_wildcards_literally(client, make_food):
    make_food(name="100% beef")
    make_food(name="1000 island")
    body = client.get("/api/foods", params={"name": "0%"}).json()
    assert [f["name"] for f in body["data"]] == ["100% beef"]


def test_empty_search_matches_everything(client, make_food):
    make_food(name="A")
    make_food(name="B")
    assert client.get("/api/foods", params={"name": ""}).json()["meta"]["total"] == 2


def test_update_merges_partial_fields(client, make_food):
    food = make_food(name="Sushi", rating=3, restaurant_name="Kyo",
                     food_image="https://x.com/s.png")
    resp = client.put(f"/api/foods/{food['id']}", json={"rating": 4})
    assert resp.status_code == 200
    assert resp.json() == {**food, "rating": 4}


def test_update_round_trip_shows_in_list(client, make_food):
    food = make_food(name="Tacos", restaurant_name="El Sol", restaurant_status="closed")
    client.put(f"/api/foods/{food['id']}", json={"rating": 4})
    listed = {f["id"]: f for f in client.get("/api/foods").json()["data"]}
    assert listed[food["id"]] == {**food, "rating": 4}


def test_update_can_clear_optional_field(client, make_food):
    food = make_food(rating=2, food_image="https://x.com/a.png")
    resp = client.put(f"/api/foods/{food['id']}", json={"food_image": None})
    assert resp.status_code == 200
    assert resp.json()["food_image"] is None
    assert resp.json()["rating"] == 2


def test_update_does_not_change_id(client, make_food):
    food = make_food()
    resp = client.put(f"/api/foods/{food['id']}", json={"id": 555, "name": "Renamed"})
    assert resp.json()["id"] == food["id"]
    assert resp.json()["name"] == "Renamed"


def test_update_missing_record(client):
    resp = client.put("/api/foods/999999", json={"rating": 4})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Food item not found", "details": "No food item with id 999999"}


def test_update_validates_only_supplied_fields(client, make_food):
    food = make_food()
    assert client.put(f"/api/foods/{food['id']}", json={"rating": 7}).status_code == 400
    assert client.put(f"/api/foods/{food['id']}", json={"restaurant_status": "closed"}).status_code == 200


def test_delete_then_list_and_delete_again(client, make_food):
    food = make_food()
    other = make_food(name="Keep me")

    resp = client.delete(f"/api/foods/{food['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    ids = [f["id"] for f in client.get("/api/foods").json()["data"]]
    assert ids == [other["id"]]

    again = client.delete(f"/api/foods/{food['id']}")
    assert again.status_code == 404
    assert again.json()["error"] == "Food item not found"
