from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from lockerapi.infrastructure.config import Settings
from lockerapi.main import create_app


@pytest.fixture(params=["memory", "sql"])
def client(request: pytest.FixtureRequest) -> TestClient:
    """
    A fresh app (and therefore a fresh store or database) per test, for each storage backend.
    """
    app_settings = Settings(storage_backend=request.param, database_url="sqlite+pysqlite:///:memory:")
    return TestClient(create_app(app_settings))


def _create_user(client: TestClient, email: str = "a@x.com") -> dict:
    res = client.post("/users", json={"email": email, "first_name": "A", "last_name": "X", "password": "p"})
    assert res.status_code == 201
    return res.json()


def _create_locker(client: TestClient, user_id: int, number: str = "12A", status: str = "available") -> dict:
    res = client.post(f"/users/{user_id}/lockers", json={"number": number, "status": status})
    assert res.status_code == 201
    return res.json()


def test_user_ids_are_unique_and_increasing(client: TestClient) -> None:
    ids = [_create_user(client, email=f"u{i}@x.com")["id"] for i in range(5)]

    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_created_user_has_no_lockers_and_no_password(client: TestClient) -> None:
    user = _create_user(client)

    assert user["lockers"] == []
    assert "password" not in user
    assert client.get(f"/users/{user['id']}").json() == user


def test_create_locker_for_missing_user_is_404_and_changes_nothing(client: TestClient) -> None:
    res = client.post("/users/999/lockers", json={"number": "1", "status": "available"})

    assert res.status_code == 404
    assert client.get("/lockers").json() == []


def test_created_locker_matches_owner_view(client: TestClient) -> None:
    user = _create_user(client)
    locker = _create_locker(client, user["id"])

    assert locker["user_id"] == user["id"]
    assert client.get(f"/lockers/{locker['id']}").json() == locker
    assert client.get(f"/users/{user['id']}").json()["lockers"] == [locker]


def test_locker_update_is_visible_from_both_places(client: TestClient) -> None:
    user = _create_user(client)
    locker = _create_locker(client, user["id"])

    res = client.put(f"/lockers/{locker['id']}", json={"number": "12A", "status": "in-use"})
    assert res.status_code == 200
    updated = res.json()

    assert updated == {**locker, "status": "in-use"}
    assert client.get(f"/lockers/{locker['id']}").json()["status"] == "in-use"
    assert client.get(f"/users/{user['id']}").json()["lockers"] == [updated]


def test_locker_update_keeps_id_and_owner(client: TestClient) -> None:
    user = _create_user(client)
    locker = _create_locker(client, user["id"])

    res = client.put(
        f"/lockers/{locker['id']}",
        json={"id": 500, "user_id": 500, "number": "99", "status": "broken"},
    )

    assert res.status_code == 200
    assert res.json() == {"id": locker["id"], "user_id": user["id"], "number": "99", "status": "broken"}


def test_deleted_locker_disappears_from_both_places(client: TestClient) -> None:
    user = _create_user(client)
    first = _create_locker(client, user["id"], number="1")
    second = _create_locker(client, user["id"], number="2")
    third = _create_locker(client, user["id"], number="3")

    assert client.delete(f"/lockers/{second['id']}").status_code == 204

    assert client.get(f"/lockers/{second['id']}").status_code == 404
    assert client.get(f"/users/{user['id']}").json()["lockers"] == [first, third]
    assert client.delete(f"/lockers/{second['id']}").status_code == 404


def test_update_user_keeps_id_and_lockers(client: TestClient) -> None:
    user = _create_user(client)
    locker = _create_locker(client, user["id"])

    res = client.put(
        f"/users/{user['id']}",
        json={"email": "b@x.com", "first_name": "B", "last_name": "Y", "password": "q"},
    )

    assert res.status_code == 200
    assert res.json() == {
        "id": user["id"],
        "email": "b@x.com",
        "first_name": "B",
        "last_name": "Y",
        "lockers": [locker],
    }


def test_user_id_is_not_reused_after_deleting_the_newest_user(client: TestClient) -> None:
    first = _create_user(client, email="1@x.com")
    _create_locker(client, first["id"])

    assert client.delete(f"/users/{first['id']}").status_code == 204
    second = _create_user(client, email="2@x.com")

    assert second["id"] > first["id"]
    assert second["lockers"] == []
    assert client.get(f"/users/{second['id']}").json()["lockers"] == []


def test_locker_id_is_not_reused_after_deleting_the_newest_locker(client: TestClient) -> None:
    user = _create_user(client)
    first = _create_locker(client, user["id"], number="1")

    assert client.delete(f"/lockers/{first['id']}").status_code == 204
    second = _create_locker(client, user["id"], number="2")

    assert second["id"] > first["id"]
    assert client.get(f"/users/{user['id']}").json()["lockers"] == [second]


def test_update_missing_user_is_404(client: TestClient) -> None:
    assert client.put("/users/999", json={"email": "b@x.com"}).status_code == 404


def test_delete_user_leaves_lockers_orphaned(client: TestClient) -> None:
    user = _create_user(client)
    locker = _create_locker(client, user["id"])

    assert client.delete(f"/users/{user['id']}").status_code == 204

    assert client.get(f"/users/{user['id']}").status_code == 404
    assert client.delete(f"/users/{user['id']}").status_code == 404
    assert client.get(f"/lockers/{locker['id']}").json() == locker


def test_lists_are_ordered_by_id(client: TestClient) -> None:
    first = _create_user(client, email="1@x.com")
    second = _create_user(client, email="2@x.com")
    lockers = [_create_locker(client, second["id"], number=str(n)) for n in range(3)]

    assert [u["id"] for u in client.get("/users").json()] == [first["id"], second["id"]]
    assert client.get("/lockers").json() == lockers


def test_create_user_with_missing_fields_uses_empty_strings(client: TestClient) -> None:
    res = client.post("/users", json={"email": "only@x.com"})

    assert res.status_code == 201
    assert res.json()["first_name"] == ""
    assert res.json()["last_name"] == ""


def test_bad_request_body_is_400(client: TestClient) -> None:
    res = client.post("/users", content=b"{", headers={"Content-Type": "application/json"})

    assert res.status_code == 400
    assert client.get("/users").json() == []


def test_malformed_locker_body_is_400_even_for_missing_user(client: TestClient) -> None:
    res = client.post("/users/999/lockers", content=b"{", headers={"Content-Type": "application/json"})

    assert res.status_code == 400
    assert client.get("/lockers").json() == []


def test_walkthrough_with_sequential_ids_from_zero() -> None:
    client = TestClient(create_app(Settings(storage_backend="memory")))

    res = client.post("/users", json={"email": "a@x.com", "first_name": "A", "last_name": "X", "password": "p"})
    assert res.status_code == 201
    assert res.json()["id"] == 0

    res = client.post("/users/0/lockers", json={"number": "12A", "status": "available"})
    assert res.status_code == 201
    assert res.json() == {"id": 0, "number": "12A", "status": "available", "user_id": 0}

    res = client.get("/users/0")
    assert res.status_code == 200
    assert res.json()["lockers"] == [{"id": 0, "number": "12A", "status": "available", "user_id": 0}]

    assert client.delete("/lockers/0").status_code == 204

    res = client.get("/users/0")
    assert res.status_code == 200
    assert res.json()["lockers"] == []


def test_initial_ids_come_from_settings() -> None:
    client = TestClient(create_app(Settings(storage_backend="memory", initial_user_id=100, initial_locker_id=7)))

    user = _create_user(client)
    locker = _create_locker(client, user["id"])

    assert user["id"] == 100
    assert locker["id"] == 7
