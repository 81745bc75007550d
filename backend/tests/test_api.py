from fastapi.testclient import TestClient

from dnd_generator.generator import CLASSES, RACES


def _payload(**overrides) -> dict:
    body = {
        "name": "Aragorn",
        "race": "Human",
        "characterClass": "Ranger",
        "level": 10,
        "strength": 16,
        "dexterity": 14,
        "constitution": 15,
        "intelligence": 12,
        "wisdom": 13,
        "charisma": 8,
        "background": "Heir of Isildur.",
    }
    body.update(overrides)
    return body


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_create_and_fetch_character(client: TestClient):
    resp = client.post("/api/characters", json=_payload())
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] is not None
    assert created["characterClass"] == "Ranger"
    assert created["modifiers"]["strength"] == "+3"
    assert created["modifiers"]["charisma"] == "-1"

    fetched = client.get(f"/api/characters/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_create_applies_defaults(client: TestClient):
    resp = client.post("/api/characters", json={"name": "Frodo", "race": "Halfling", "characterClass": "Rogue"})
    assert resp.status_code == 201
    data = resp.json()
    assert data["level"] == 1
    assert data["wisdom"] == 10
    assert data["background"] is None


def test_create_rejects_with_every_field_error(client: TestClient):
    resp = client.post("/api/characters", json=_payload(name="A", level=21, strength=0, race=" "))
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert [e["field"] for e in detail] == ["name", "race", "level", "strength"]
    assert detail[2]["message"] == "Level cannot exceed 20"
    assert client.get("/api/characters").json() == []


def test_create_missing_class_is_rejected(client: TestClient):
    resp = client.post("/api/characters", json={"name": "Nameless", "race": "Elf"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == [{"field": "characterClass", "message": "Character class is required"}]


def test_create_with_malformed_number_is_unprocessable(client: TestClient):
    resp = client.post("/api/characters", json=_payload(level="high"))
    assert resp.status_code == 422


def test_get_missing_character(client: TestClient):
    resp = client.get("/api/characters/999")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Character not found"}


def test_update_character(client: TestClient):
    created = client.post("/api/characters", json=_payload()).json()
    resp = client.put(f"/api/characters/{created['id']}", json=_payload(name="Elessar", level=20))
    assert resp.status_code == 200
    assert resp.json()["name"] == "Elessar"
    assert resp.json()["id"] == created["id"]
    assert client.get(f"/api/characters/{created['id']}").json()["level"] == 20


def test_update_missing_and_invalid(client: TestClient):
    assert client.put("/api/characters/42", json=_payload()).status_code == 404

    created = client.post("/api/characters", json=_payload()).json()
    resp = client.put(f"/api/characters/{created['id']}", json=_payload(level=0))
    assert resp.status_code == 400
    assert client.get(f"/api/characters/{created['id']}").json()["level"] == 10


def test_delete_character(client: TestClient):
    created = client.post("/api/characters", json=_payload()).json()
    resp = client.delete(f"/api/characters/{created['id']}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"/api/characters/{created['id']}").status_code == 404
    assert client.delete(f"/api/characters/{created['id']}").status_code == 404


def test_list_search_and_filters(client: TestClient):
    client.post("/api/characters", json=_payload(name="Thorin", race="Dwarf", characterClass="Fighter", level=3))
    client.post("/api/characters", json=_payload(name="Legolas", race="Elf", characterClass="Ranger", level=3))
    client.post("/api/characters", json=_payload(name="Gimli", race="Dwarf", characterClass="Barbarian", level=4))

    names = lambda resp: [c["name"] for c in resp.json()]  # noqa: E731

    assert names(client.get("/api/characters")) == ["Thorin", "Legolas", "Gimli"]
    assert names(client.get("/api/characters/search", params={"name": "leg"})) == ["Legolas"]
    assert names(client.get("/api/characters/race/Dwarf")) == ["Thorin", "Gimli"]
    assert names(client.get("/api/characters/class/Ranger")) == ["Legolas"]
    assert names(client.get("/api/characters/level/3")) == ["Thorin", "Legolas"]
    assert client.get("/api/characters/race/Orc").json() == []


def test_search_requires_name(client: TestClient):
    assert client.get("/api/characters/search").status_code == 422


def test_options(client: TestClient):
    resp = client.get("/api/characters/options")
    assert resp.status_code == 200
    assert resp.json() == {"races": list(RACES), "classes": list(CLASSES)}


def test_generate_persists_random_character(client: TestClient):
    resp = client.post("/api/characters/generate")
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] is not None
    assert data["race"] in RACES
    assert data["characterClass"] in CLASSES
    assert 1 <= data["level"] <= 10
    assert data["name"] in data["background"]

    fetched = client.get(f"/api/characters/{data['id']}")
    assert fetched.json() == data


def test_boolean_numbers_are_unprocessable(client: TestClient):
    resp = client.post("/api/characters", json=_payload(level=True))
    assert resp.status_code == 422
    assert resp.json()["detail"][0]["loc"] == ["body", "level"]

    resp = client.post("/api/characters", json=_payload(strength=False))
    assert resp.status_code == 422
    assert client.get("/api/characters").json() == []


def test_padded_name_is_stored_as_submitted(client: TestClient):
    padded = "   " + "x" * 100 + "   "
    resp = client.post("/api/characters", json=_payload(name=padded))
    assert resp.status_code == 201
    assert client.get(f"/api/characters/{resp.json()['id']}").json()["name"] == padded
