from uuid import UUID, uuid4

from fastapi.testclient import TestClient

from gamestore.config import AppConfig
from gamestore.main import create_app


def test_welcome(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Welcome to the Games API"
    UUID(body["requestId"])
    assert body["dateTime"]
    assert client.get("/").json()["requestId"] != body["requestId"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["games"] == 3
    assert body["uptime"] >= 0
    assert client.head("/health").status_code == 200


def test_list_seeded_games(client):
    response = client.get("/games")
    assert response.status_code == 200
    games = response.json()
    assert [g["name"] for g in games] == ["Street Fighter II", "Final Fantasy XIV", "FIFA 23"]
    assert games[0] == {
        "id": games[0]["id"],
        "name": "Street Fighter II",
        "genre": "Fighting",
        "price": 19.99,
        "releaseDate": "1992-07-15",
    }
    assert client.get("/games").json() == games


def test_create_then_get(client, doom_json):
    response = client.post("/games", json=doom_json)
    assert response.status_code == 201
    created = response.json()
    game_id = created.pop("id")
    assert created == doom_json
    assert response.headers["location"] == f"http://testserver/games/{game_id}"

    fetched = client.get(f"/games/{game_id}")
    assert fetched.status_code == 200
    assert fetched.json() == {"id": game_id, **doom_json}
    assert len(client.get("/games").json()) == 4


def test_create_ignores_supplied_id(client, doom_json):
    supplied = str(uuid4())
    response = client.post("/games", json={"id": supplied, **doom_json})
    assert response.status_code == 201
    assert response.json()["id"] != supplied


def test_create_invalid_name(client, doom_json):
    response = client.post("/games", json={**doom_json, "name": "Aa"})
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert body["errors"] == {"name": ["The name must be between 3 and 50 characters long."]}
    assert len(client.get("/games").json()) == 3


def test_create_invalid_price_and_genre(client, doom_json):
    response = client.post("/games", json={**doom_json, "price": 150, "genre": "g" * 25})
    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"price", "genre"}


def test_create_price_boundaries(client, doom_json):
    assert client.post("/games", json={**doom_json, "price": 1}).status_code == 201
    assert client.post("/games", json={**doom_json, "price": 100}).status_code == 201
    assert client.post("/games", json={**doom_json, "price": 0}).status_code == 400


def test_create_malformed_body(client, doom_json):
    payload = dict(doom_json)
    del payload["name"]
    payload["releaseDate"] = "not a date"
    response = client.post("/games", json=payload)
    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"name", "releaseDate"}


def test_update(client, doom_json):
    game_id = client.get("/games").json()[0]["id"]
    response = client.put(f"/games/{game_id}", json={"id": str(uuid4()), **doom_json})
    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/games/{game_id}").json() == {"id": game_id, **doom_json}


def test_update_invalid(client, doom_json):
    game = client.get("/games").json()[0]
    response = client.put(f"/games/{game['id']}", json={**doom_json, "price": 0})
    assert response.status_code == 400
    assert "price" in response.json()["errors"]
    assert client.get(f"/games/{game['id']}").json() == game


def test_update_invalid_unknown_id_is_validation_error(client, doom_json):
    response = client.put(f"/games/{uuid4()}", json={**doom_json, "name": "Aa"})
    assert response.status_code == 400


def test_update_unknown(client, doom_json):
    response = client.put(f"/games/{uuid4()}", json=doom_json)
    assert response.status_code == 404
    assert response.content == b""


def test_delete(client):
    game_id = client.get("/games").json()[1]["id"]
    response = client.delete(f"/games/{game_id}")
    assert response.status_code == 204
    assert client.get(f"/games/{game_id}").status_code == 404
    assert client.delete(f"/games/{game_id}").status_code == 404
    assert len(client.get("/games").json()) == 2


def test_get_and_delete_unknown(client):
    assert client.get(f"/games/{uuid4()}").status_code == 404
    response = client.delete(f"/games/{uuid4()}")
    assert response.status_code == 404
    assert response.content == b""


def test_malformed_id_is_rejected_before_store(client, doom_json):
    assert client.get("/games/not-a-guid").status_code == 404
    assert client.put("/games/123", json=doom_json).status_code == 404
    assert client.delete("/games/123").status_code == 404
    assert len(client.get("/games").json()) == 3


def test_apps_do_not_share_stores(doom_json):
    with TestClient(create_app(AppConfig(SEED_DATA=False))) as first:
        with TestClient(create_app(AppConfig(SEED_DATA=False))) as second:
            assert first.post("/games", json=doom_json).status_code == 201
            assert len(first.get("/games").json()) == 1
            assert second.get("/games").json() == []


def test_openapi_documents_games_routes(client):
    schema = client.get("/openapi.json").json()
    operations = {
        op["operationId"]
        for path in schema["paths"].values()
        for op in path.values()
        if "Games" in op.get("tags", [])
    }
    assert operations == {"GetAllGames", "GetGameById", "CreateGame", "UpdateGame", "DeleteGame"}


def test_price_comes_back_unchanged(client, doom_json):
    response = client.post("/games", json={**doom_json, "price": 99.99})
    assert response.status_code == 201
    game = response.json()
    assert game["price"] == 99.99
    assert client.get(f"/games/{game['id']}").json()["price"] == 99.99


def test_over_precise_price_is_rejected(client, doom_json):
    response = client.post("/games", json={**doom_json, "price": "99.9999999999999999999"})
    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"price"}
    assert len(client.get("/games").json()) == 3


def test_undecodable_body_is_reported_against_body(client):
    response = client.post(
        "/games",
        content=b'{"name": "Doom", "genre',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert list(response.json()["errors"]) == ["body"]


def test_blank_name_reports_one_message(client, doom_json):
    response = client.post("/games", json={**doom_json, "name": ""})
    assert response.status_code == 400
    assert response.json()["errors"] == {"name": ["The name field is required."]}
