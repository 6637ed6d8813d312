"""
HTTP-level tests for the /api/users route table.
"""
from __future__ import annotations

import json
import uuid

import pytest

MISSING_ID = "9b2f6a52-6f0e-4c4b-8d2a-1f3e5c7a9b0d"


def test_crud_scenario(client, new_user):
    assert client.get("/api/users").json() == []

    created = client.post("/api/users", json=new_user)
    assert created.status_code == 201
    body = created.json()
    user_id = body["id"]
    assert uuid.UUID(user_id).version == 4
    assert {k: body[k] for k in new_user} == new_user

    fetched = client.get(f"/api/users/{user_id}")
    assert fetched.status_code == 200
    assert fetched.json() == body

    update = {"username": "updateduser", "age": 35, "hobbies": ["traveling"]}
    updated = client.put(f"/api/users/{user_id}", json=update)
    assert updated.status_code == 200
    assert updated.json() == {"id": user_id, **update}

    deleted = client.delete(f"/api/users/{user_id}")
    assert deleted.status_code == 204
    assert deleted.content == b""

    gone = client.get(f"/api/users/{user_id}")
    assert gone.status_code == 404
    assert gone.json() == {"message": "User not found"}


def test_responses_are_json(client, new_user):
    for response in (
        client.get("/api/users"),
        client.post("/api/users", json=new_user),
        client.get("/api/users/not-a-uuid"),
        client.get("/nowhere"),
    ):
        assert response.headers["content-type"].startswith("application/json")


def test_created_users_are_listed_in_insertion_order(client, new_user, data_file):
    ids = [client.post("/api/users", json={**new_user, "username": f"u{i}"}).json()["id"] for i in range(3)]

    listed = client.get("/api/users").json()
    assert [u["id"] for u in listed] == ids
    assert len(set(ids)) == 3
    assert [u["id"] for u in json.loads(data_file.read_text(encoding="utf-8"))] == ids


@pytest.mark.parametrize(
    "payload",
    [
        {"age": 30, "hobbies": []},
        {"username": "", "age": 30, "hobbies": []},
        {"username": "bob", "hobbies": []},
        {"username": "bob", "age": "30", "hobbies": []},
        {"username": "bob", "age": True, "hobbies": []},
        {"username": "bob", "age": -1, "hobbies": []},
        {"username": "bob", "age": 30},
        {"username": "bob", "age": 30, "hobbies": "reading"},
        {"username": "bob", "age": 30, "hobbies": [1, 2]},
        [],
    ],
)
def test_create_rejects_invalid_input(client, payload):
    response = client.post("/api/users", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid input"}
    assert client.get("/api/users").json() == []


def test_create_accepts_age_zero(client):
    response = client.post("/api/users", json={"username": "baby", "age": 0, "hobbies": []})

    assert response.status_code == 201
    assert response.json()["age"] == 0


def test_create_ignores_unknown_and_client_supplied_id(client, new_user):
    response = client.post("/api/users", json={**new_user, "id": MISSING_ID, "role": "admin"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] != MISSING_ID
    assert "role" not in body


def test_get_unknown_user(client):
    response = client.get(f"/api/users/{MISSING_ID}")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_update_keeps_omitted_fields(client, new_user):
    user = client.post("/api/users", json=new_user).json()

    response = client.put(f"/api/users/{user['id']}", json={"age": 31})

    assert response.status_code == 200
    assert response.json() == {**user, "age": 31}


def test_update_hobbies_without_username(client, new_user):
    user = client.post("/api/users", json=new_user).json()

    response = client.put(f"/api/users/{user['id']}", json={"hobbies": ["chess"]})

    assert response.status_code == 200
    assert response.json() == {**user, "hobbies": ["chess"]}
    assert client.get(f"/api/users/{user['id']}").json()["hobbies"] == ["chess"]


def test_update_age_to_zero(client, new_user):
    user = client.post("/api/users", json=new_user).json()

    response = client.put(f"/api/users/{user['id']}", json={"age": 0})

    assert response.status_code == 200
    assert response.json()["age"] == 0


@pytest.mark.parametrize(
    "payload",
    [{}, {"nickname": "x"}, {"username": None}, {"username": ""}, {"age": "old"}, {"hobbies": "chess"}, []],
)
def test_update_rejects_invalid_input(client, new_user, payload):
    user = client.post("/api/users", json=new_user).json()

    response = client.put(f"/api/users/{user['id']}", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid input"}
    assert client.get(f"/api/users/{user['id']}").json() == user


def test_update_checks_input_before_existence(client):
    assert client.put(f"/api/users/{MISSING_ID}", json={}).status_code == 400

    response = client.put(f"/api/users/{MISSING_ID}", json={"age": 40})
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_delete_twice_yields_404(client, new_user):
    user = client.post("/api/users", json=new_user).json()

    assert client.delete(f"/api/users/{user['id']}").status_code == 204
    second = client.delete(f"/api/users/{user['id']}")

    assert second.status_code == 404
    assert second.json() == {"message": "User not found"}


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH", "POST", "OPTIONS", "TRACE", "FOO"])
@pytest.mark.parametrize(
    "bad_id",
    ["", "not-a-uuid", "12345", "9b2f6a52-6f0e-4c4b-8d2a-1f3e5c7a9b0", "9b2f6a52-6f0e-4c4b-8d2a-1f3e5c7a9b0d/extra"],
)
def test_invalid_id_rejected_before_storage_access(client, data_file, method, bad_id):
    data_file.unlink()

    response = client.request(method, f"/api/users/{bad_id}", json={"age": 1})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid user ID"}
    # read_all would have recreated the file
    assert not data_file.exists()


def test_uppercase_uuid_is_valid(client):
    response = client.get(f"/api/users/{MISSING_ID.upper()}")

    assert response.status_code == 404


@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE"])
def test_collection_method_not_allowed(client, method):
    response = client.request(method, "/api/users")

    assert response.status_code == 405
    assert response.json() == {"message": "Method not allowed"}


@pytest.mark.parametrize("method", ["POST", "PATCH", "OPTIONS", "TRACE", "FOO"])
def test_item_method_not_allowed(client, method):
    response = client.request(method, f"/api/users/{MISSING_ID}")

    assert response.status_code == 405
    assert response.json() == {"message": "Method not allowed"}


@pytest.mark.parametrize("path", ["/", "/api", "/api/user", "/api/users-list", "/users"])
def test_unknown_endpoint(client, path):
    response = client.get(path)

    assert response.status_code == 404
    assert response.json() == {"message": "Endpoint not found"}


@pytest.mark.parametrize("method,path", [("POST", "/api/users"), ("PUT", f"/api/users/{MISSING_ID}")])
@pytest.mark.parametrize("body", [b"{not json", b""])
def test_malformed_json_is_internal_error(client, method, path, body):
    response = client.request(method, path, content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_list_after_reset_is_empty(client, new_user):
    from users_api.app.core.storage import get_store

    client.post("/api/users", json=new_user)
    get_store().reset()

    assert client.get("/api/users").json() == []


def test_write_failure_is_internal_error(client, new_user, monkeypatch):
    from users_api.app.core.storage import JsonFileStore

    def fail(self, users):
        raise OSError("disk full")

    monkeypatch.setattr(JsonFileStore, "write_all", fail)

    response = client.post("/api/users", json=new_user)

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
