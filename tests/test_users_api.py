"""
HTTP tests for the root and users endpoints.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from user_store_api.app.core.store import UserStore
from user_store_api.app.schemas.user import UserCreate
from user_store_api.app.services.user_service import UserService

# Forms a lenient number parser would accept but that are not plain integers.
NON_INTEGER_IDS = ["1.0", "%201", "1_0", "1e0", "0x1"]


def create(client: TestClient, name: str) -> int:
    response = client.post("/users", json={"name": name})
    assert response.status_code == 204
    return int(response.headers["location"].rsplit("/", 1)[1])


class TestRoot:
    """Tests for the root greeting."""

    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE"])
    def test_hello_world(self, client: TestClient, store: UserStore, method: str):
        response = client.request(method, "/")

        assert response.status_code == 200
        assert response.text == "Hello World"
        assert len(store) == 0

    def test_head(self, client: TestClient):
        response = client.head("/")

        assert response.status_code == 200


class TestCreateUser:
    """Tests for POST /users."""

    def test_create_then_fetch(self, client: TestClient):
        response = client.post("/users", json={"name": "Ada"})

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["location"] == "/users/1"

        response = client.get("/users/1")
        assert response.status_code == 200
        assert response.json() == {"name": "Ada"}

    def test_empty_body_object(self, client: TestClient, store: UserStore):
        response = client.post("/users", json={})

        assert response.status_code == 400
        assert response.text == "Name is required"
        assert response.headers["content-type"].startswith("text/plain")
        assert len(store) == 0

    def test_empty_name(self, client: TestClient, store: UserStore):
        response = client.post("/users", json={"name": ""})

        assert response.status_code == 400
        assert response.text == "Name is required"
        assert len(store) == 0

    def test_invalid_json(self, client: TestClient, store: UserStore):
        response = client.post(
            "/users",
            content=b'{"name": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.text.startswith("body")
        assert len(store) == 0

    @pytest.mark.parametrize("payload", [{"name": 5}, {"name": None}, ["Ada"]])
    def test_wrong_shape(self, client: TestClient, store: UserStore, payload):
        response = client.post("/users", json=payload)

        assert response.status_code == 400
        assert response.text
        assert len(store) == 0

    def test_sequential_creates_get_distinct_ids(self, client: TestClient):
        ids = [create(client, f"user-{i}") for i in range(20)]

        assert len(set(ids)) == 20

    @pytest.mark.parametrize("name", ["Ada", "Grace Hopper", "Ådа Ŀovelace", "x" * 1000])
    def test_round_trip(self, client: TestClient, name: str):
        user_id = create(client, name)

        assert client.get(f"/users/{user_id}").json() == {"name": name}


class TestGetUser:
    """Tests for GET /users/{id}."""

    def test_non_integer_id(self, client: TestClient):
        response = client.get("/users/abc")

        assert response.status_code == 400
        assert "user_id" in response.text

    @pytest.mark.parametrize("raw_id", NON_INTEGER_IDS)
    def test_loosely_numeric_id(self, client: TestClient, raw_id: str):
        create(client, "Ada")

        response = client.get(f"/users/{raw_id}")

        assert response.status_code == 400
        assert "user_id" in response.text

    def test_signed_id(self, client: TestClient):
        create(client, "Ada")

        assert client.get("/users/+1").json() == {"name": "Ada"}
        assert client.get("/users/-1").status_code == 404

    def test_missing_user(self, client: TestClient):
        response = client.get("/users/42")

        assert response.status_code == 404
        assert response.text == "user not found"

    def test_serialization_failure(self, client: TestClient, monkeypatch):
        class Unserializable:
            def model_dump_json(self):
                raise ValueError("cannot encode user")

        monkeypatch.setattr(UserService, "get_user", lambda self, user_id: Unserializable())

        response = client.get("/users/1")

        assert response.status_code == 500
        assert response.text == "cannot encode user"


class TestDeleteUser:
    """Tests for DELETE /users/{id}."""

    def test_delete_then_fetch(self, client: TestClient):
        user_id = create(client, "Ada")

        response = client.delete(f"/users/{user_id}")
        assert response.status_code == 204
        assert response.content == b""

        response = client.get(f"/users/{user_id}")
        assert response.status_code == 404
        assert response.text == "user not found"

    def test_delete_missing(self, client: TestClient, store: UserStore):
        create(client, "Ada")

        response = client.delete("/users/7")

        assert response.status_code == 404
        assert response.text == "user not found"
        assert len(store) == 1

    def test_delete_twice(self, client: TestClient):
        user_id = create(client, "Ada")

        assert client.delete(f"/users/{user_id}").status_code == 204
        assert client.delete(f"/users/{user_id}").status_code == 404

    def test_non_integer_id(self, client: TestClient):
        response = client.delete("/users/abc")

        assert response.status_code == 400

    @pytest.mark.parametrize("raw_id", NON_INTEGER_IDS)
    def test_loosely_numeric_id(self, client: TestClient, store: UserStore, raw_id: str):
        create(client, "Ada")

        response = client.delete(f"/users/{raw_id}")

        assert response.status_code == 400
        assert len(store) == 1

    def test_id_not_reused_after_delete(self, client: TestClient):
        first = create(client, "Ada")
        second = create(client, "Grace")
        client.delete(f"/users/{first}")

        third = create(client, "Linus")

        assert third not in (first, second)
        assert client.get(f"/users/{second}").json() == {"name": "Grace"}


class TestUserService:
    """Service calls made from many threads at once."""

    def test_concurrent_creates(self, store: UserStore):
        service = UserService(store)
        total = 200

        with ThreadPoolExecutor(max_workers=16) as pool:
            ids = list(pool.map(lambda i: service.create_user(UserCreate(name=f"user-{i}")), range(total)))

        assert len(store) == total
        assert len(set(ids)) == total

    def test_delete_reports_absence(self, store: UserStore):
        service = UserService(store)

        assert service.delete_user(1) is False
        assert service.get_user(1) is None
