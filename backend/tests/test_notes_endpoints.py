"""
Noteful Backend — Note Endpoint Tests
======================================

What:  HTTP-level tests for /api/notes against an in-memory SQLite database.

Note on timestamps:
    SQLite drops the timezone, so a stored `modified` comes back naive.
    Seeded rows are compared field by field with a prefix check on `modified`.
"""

import pytest


NOTE_NOT_FOUND = {"error": {"message": "Note Not Found"}}
SEEDED_MODIFIED = "2018-08-15T17:00:00"


def assert_matches_seed(body, seed):
    assert body["id"] == seed["id"]
    assert body["name"] == seed["name"]
    assert body["folder_id"] == seed["folder_id"]
    assert body["content"] == seed["content"]
    assert body["modified"].startswith(SEEDED_MODIFIED)


def new_note():
    return {
        "name": "Lions",
        "modified": "2018-08-15T17:00:00.000Z",
        "folder_id": 1,
        "content": "This is a test note. Note about Lions.",
    }


class TestListNotes:

    @pytest.mark.asyncio
    async def test_empty_table_returns_empty_list(self, test_client):
        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_returns_all_notes(self, test_client, seeded_notes):
        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        body = sorted(response.json(), key=lambda n: n["id"])
        assert len(body) == len(seeded_notes)
        for returned, seed in zip(body, seeded_notes):
            assert_matches_seed(returned, seed)


class TestGetNote:

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.get("/api/notes/123456")

        assert response.status_code == 404
        assert response.json() == NOTE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_returns_the_requested_note(self, test_client, seeded_notes):
        response = await test_client.get("/api/notes/2")

        assert response.status_code == 200
        assert_matches_seed(response.json(), seeded_notes[1])


class TestCreateNote:

    @pytest.mark.asyncio
    async def test_creates_note_with_location_header(self, test_client, seeded_folders):
        payload = new_note()

        response = await test_client.post("/api/notes", json=payload)

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == payload["name"]
        assert body["content"] == payload["content"]
        assert body["folder_id"] == payload["folder_id"]
        assert body["modified"].startswith(SEEDED_MODIFIED)
        assert isinstance(body["id"], int)
        # No /api prefix on the note Location header
        assert response.headers["location"] == f"/notes/{body['id']}"

        fetched = await test_client.get(f"/api/notes/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == body

    @pytest.mark.asyncio
    async def test_modified_defaults_to_now(self, test_client):
        payload = new_note()
        del payload["modified"]

        response = await test_client.post("/api/notes", json=payload)

        assert response.status_code == 201
        body = response.json()
        assert body["modified"]
        assert not body["modified"].startswith("2018")

        fetched = await test_client.get(f"/api/notes/{body['id']}")
        assert fetched.json() == body

    @pytest.mark.asyncio
    async def test_folder_id_is_not_checked(self, test_client):
        payload = {**new_note(), "folder_id": 999}

        response = await test_client.post("/api/notes", json=payload)

        assert response.status_code == 201
        assert response.json()["folder_id"] == 999

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["name", "content"])
    async def test_missing_required_field_returns_400(self, test_client, field):
        payload = new_note()
        del payload[field]

        response = await test_client.post("/api/notes", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": {"message": f"'{field}' is required"}}

    @pytest.mark.asyncio
    async def test_name_is_reported_before_content(self, test_client):
        response = await test_client.post("/api/notes", json={"folder_id": 1})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "'name' is required"}}


class TestDeleteNote:

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.delete("/api/notes/123")

        assert response.status_code == 404
        assert response.json() == NOTE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_removes_note(self, test_client, seeded_notes):
        response = await test_client.delete("/api/notes/2")

        assert response.status_code == 204
        assert response.content == b""

        remaining = await test_client.get("/api/notes")
        assert sorted(n["id"] for n in remaining.json()) == [1, 3]

        gone = await test_client.get("/api/notes/2")
        assert gone.status_code == 404


class TestUpdateNote:

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.patch("/api/notes/123456")

        assert response.status_code == 404
        assert response.json() == NOTE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_updates_only_name(self, test_client, seeded_notes):
        response = await test_client.patch(
            "/api/notes/2", json={"name": "updated note name"}
        )

        assert response.status_code == 204
        fetched = await test_client.get("/api/notes/2")
        assert_matches_seed(fetched.json(), {**seeded_notes[1], "name": "updated note name"})

    @pytest.mark.asyncio
    async def test_updates_folder_and_content(self, test_client, seeded_notes):
        response = await test_client.patch(
            "/api/notes/1", json={"folder_id": 3, "content": "moved"}
        )

        assert response.status_code == 204
        fetched = await test_client.get("/api/notes/1")
        assert_matches_seed(
            fetched.json(), {**seeded_notes[0], "folder_id": 3, "content": "moved"}
        )

    @pytest.mark.asyncio
    async def test_body_without_updatable_fields_returns_400(self, test_client, seeded_notes):
        response = await test_client.patch(
            "/api/notes/2", json={"irrelevantField": "foo"}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": {
                "message": "Request body must contain either 'name', 'folder_id', 'content'"
            }
        }

    @pytest.mark.asyncio
    async def test_unknown_fields_are_ignored(self, test_client, seeded_notes):
        response = await test_client.patch(
            "/api/notes/2",
            json={
                "name": "updated note name",
                "fieldToIgnore": "should not be in GET response",
            },
        )

        assert response.status_code == 204
        fetched = await test_client.get("/api/notes/2")
        body = fetched.json()
        assert "fieldToIgnore" not in body
        assert_matches_seed(body, {**seeded_notes[1], "name": "updated note name"})
