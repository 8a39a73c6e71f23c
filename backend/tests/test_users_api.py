"""
AreaWatch Backend: /users Endpoint Tests
==========================================

What we test:
    ✅ List / get / create users
    ✅ PATCH /users/{id}: update, idempotence and every 400 / 404 path
    ✅ PATCH not routed when the switch is off
    ✅ Router-level errors rendered as plain text
"""

import pytest

NEW_USER = {
    "username": "zoe",
    "email": "zoe@example.com",
    "phone": "0488079013",
    "latitude": "-31.95",
    "longitude": "115.86",
}


class TestUsersEndpoints:
    """List, get and create."""

    @pytest.mark.asyncio
    async def test_list_seeded_users(self, test_client):
        response = await test_client.get("/users")

        assert response.status_code == 200
        assert [user["username"] for user in response.json()] == [
            "alice", "bob", "peter", "paul", "daniel",
        ]

    @pytest.mark.asyncio
    async def test_get_user(self, test_client):
        response = await test_client.get("/users/2")

        assert response.status_code == 200
        assert response.json() == {
            "id": 2,
            "username": "bob",
            "phone": "0488079009",
            "email": "bob@example.com",
            "latitude": "-33.837386",
            "longitude": "151.059379",
        }

    @pytest.mark.asyncio
    async def test_get_user_errors(self, test_client):
        missing = await test_client.get("/users/0")
        invalid = await test_client.get("/users/bob")

        assert missing.status_code == 404
        assert missing.text == "User not found"
        assert invalid.status_code == 400
        assert invalid.text == "Invalid user ID"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["1.0", "%201", "1_0", "99999999999999999999999"])
    async def test_get_user_rejects_loose_ids(self, test_client, raw_id):
        response = await test_client.get(f"/users/{raw_id}")

        assert response.status_code == 400
        assert response.text == "Invalid user ID"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("headers", [{"Content-Type": "text/plain"}, {}])
    async def test_create_user_without_json_content_type(self, test_client, headers):
        response = await test_client.post(
            "/users",
            content=b'{"username": "zoe", "email": "zoe@example.com", "phone": "0488079013", '
            b'"latitude": "-31.95", "longitude": "115.86"}',
            headers=headers,
        )

        assert response.status_code == 201
        assert response.json()["id"] == 6

    @pytest.mark.asyncio
    async def test_create_user_empty_body(self, test_client):
        response = await test_client.post("/users")

        assert response.status_code == 400
        assert response.text == "Invalid request body"

    @pytest.mark.asyncio
    async def test_create_user(self, test_client):
        response = await test_client.post("/users", json=NEW_USER)

        assert response.status_code == 201
        assert response.json() == {"id": 6, **NEW_USER}
        assert (await test_client.get("/users/6")).json() == response.json()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["username", "email", "phone", "latitude"])
    async def test_create_user_missing_field(self, test_client, missing):
        payload = {key: value for key, value in NEW_USER.items() if key != missing}

        response = await test_client.post("/users", json=payload)

        assert response.status_code == 400
        assert response.text == "Username, Phone, Location and Email are required"
        assert len((await test_client.get("/users")).json()) == 5

    @pytest.mark.asyncio
    async def test_create_user_combined(self, combined_client):
        payload = {
            "username": "zoe",
            "email": "zoe@example.com",
            "phone": "0488079013",
            "location": "-31.95, 115.86",
        }

        response = await combined_client.post("/users", json=payload)

        assert response.status_code == 201
        assert response.json() == {"id": 6, **payload}

    @pytest.mark.asyncio
    async def test_unknown_route(self, test_client):
        response = await test_client.get("/nowhere")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")


class TestUserLocationPatch:
    """PATCH /users/{id}."""

    @pytest.mark.asyncio
    async def test_patch_updates_location(self, test_client):
        response = await test_client.patch(
            "/users/1", json={"latitude": "-33.8", "longitude": "151.0"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["latitude"] == "-33.8"
        assert body["longitude"] == "151.0"
        assert body["username"] == "alice"
        assert (await test_client.get("/users/1")).json() == body

    @pytest.mark.asyncio
    async def test_patch_is_idempotent(self, test_client):
        update = {"latitude": "-33.8", "longitude": "151.0"}

        first = await test_client.patch("/users/3", json=update)
        second = await test_client.patch("/users/3", json=update)

        assert first.json() == second.json()

    @pytest.mark.asyncio
    async def test_patch_empty_object(self, test_client):
        response = await test_client.patch("/users/1", json={})

        assert response.status_code == 400
        assert response.text == "Both latitude and longitude fields are required in the request body"

    @pytest.mark.asyncio
    async def test_patch_no_body(self, test_client):
        response = await test_client.patch("/users/1")

        assert response.status_code == 400
        assert response.text == "Request body cannot be empty"

    @pytest.mark.asyncio
    async def test_patch_malformed_body(self, test_client):
        response = await test_client.patch(
            "/users/1", content=b"{latitude", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.text.startswith("Invalid request body: ")

    @pytest.mark.asyncio
    async def test_patch_invalid_id_reported_first(self, test_client):
        response = await test_client.patch("/users/abc")

        assert response.status_code == 400
        assert response.text == "Invalid user ID"

    @pytest.mark.asyncio
    async def test_patch_invalid_id_beats_malformed_body(self, test_client):
        response = await test_client.patch(
            "/users/1.0", content=b"{latitude", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.text == "Invalid user ID"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["1.0", "%201", "1_0", "99999999999999999999999"])
    async def test_patch_rejects_loose_ids(self, test_client, raw_id):
        response = await test_client.patch(
            f"/users/{raw_id}", json={"latitude": "1", "longitude": "2"}
        )

        assert response.status_code == 400
        assert response.text == "Invalid user ID"
        assert (await test_client.get("/users/1")).json()["latitude"] == "-27.492887"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("headers", [{"Content-Type": "text/plain"}, {}])
    async def test_patch_without_json_content_type(self, test_client, headers):
        response = await test_client.patch(
            "/users/2", content=b'{"latitude": "-12.46", "longitude": "130.84"}', headers=headers
        )

        assert response.status_code == 200
        assert response.json()["latitude"] == "-12.46"
        assert response.json()["longitude"] == "130.84"

    @pytest.mark.asyncio
    async def test_patch_unknown_user(self, test_client):
        response = await test_client.patch(
            "/users/99", json={"latitude": "1", "longitude": "2"}
        )

        assert response.status_code == 404
        assert response.text == "User not found"

    @pytest.mark.asyncio
    async def test_patch_combined_format(self, combined_client):
        response = await combined_client.patch("/users/2", json={"location": "-12.46, 130.84"})

        assert response.status_code == 200
        assert response.json()["location"] == "-12.46, 130.84"
        assert "latitude" not in response.json()

    @pytest.mark.asyncio
    async def test_patch_disabled(self, no_patch_client):
        response = await no_patch_client.patch(
            "/users/1", json={"latitude": "1", "longitude": "2"}
        )

        assert response.status_code == 405
        assert (await no_patch_client.get("/users/1")).json()["latitude"] == "-27.492887"
