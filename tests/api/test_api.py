"""
Tests for the HTTP surface under /api/v1.
"""

from uuid import uuid4

import pytest


async def _create_deck(client, headers, name="Biology"):
    response = await client.post("/api/v1/decks", json={"name": name}, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestAuth:
    async def test_missing_token(self, async_client):
        response = await async_client.get("/api/v1/decks")
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_bad_token(self, async_client):
        response = await async_client.get(
            "/api/v1/decks", headers={"Authorization": "Bearer nope"}
        )
        assert response.status_code == 401

    async def test_health_is_public(self, async_client):
        response = await async_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_request_id_echoed(self, async_client):
        response = await async_client.get("/health", headers={"X-Request-ID": "abc"})
        assert response.headers["x-request-id"] == "abc"


class TestDeckEndpoints:
    async def test_deck_lifecycle(self, async_client, auth_headers, owner_id):
        deck = await _create_deck(async_client, auth_headers)
        assert deck["user_id"] == str(owner_id)

        response = await async_client.patch(
            f"/api/v1/decks/{deck['id']}",
            json={"description": "Cells"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["description"] == "Cells"
        assert response.json()["name"] == "Biology"

        response = await async_client.get("/api/v1/decks", headers=auth_headers)
        assert response.json()["total"] == 1

        response = await async_client.post(
            f"/api/v1/decks/{deck['id']}/archive", headers=auth_headers
        )
        assert response.json()["deleted_at"] is not None

        response = await async_client.get(
            "/api/v1/decks", params={"include_deleted": "true"}, headers=auth_headers
        )
        assert response.json()["total"] == 1

        response = await async_client.delete(
            f"/api/v1/decks/{deck['id']}", headers=auth_headers
        )
        assert response.status_code == 204

        response = await async_client.get(
            f"/api/v1/decks/{deck['id']}", headers=auth_headers
        )
        assert response.status_code == 404

    async def test_blank_name_is_422(self, async_client, auth_headers):
        response = await async_client.post(
            "/api/v1/decks", json={"name": "   "}, headers=auth_headers
        )
        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"

    async def test_other_users_deck_is_404(
        self, async_client, auth_headers, auth_headers_for
    ):
        deck = await _create_deck(async_client, auth_headers)

        response = await async_client.get(
            f"/api/v1/decks/{deck['id']}", headers=auth_headers_for(uuid4())
        )
        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"


class TestCardEndpoints:
    async def test_duplicate_card_is_409(self, async_client, auth_headers):
        deck = await _create_deck(async_client, auth_headers)
        url = f"/api/v1/decks/{deck['id']}/cards"

        first = await async_client.post(
            url, json={"front": "What is ATP?", "back": "Energy"}, headers=auth_headers
        )
        assert first.status_code == 201
        assert len(first.json()["content_hash"]) == 64

        second = await async_client.post(
            url, json={"front": "what is ATP?", "back": "ENERGY"}, headers=auth_headers
        )
        assert second.status_code == 409
        assert second.json()["error"] == "CONFLICT"

    async def test_card_crud_and_tag_filter(self, async_client, auth_headers):
        deck = await _create_deck(async_client, auth_headers)
        url = f"/api/v1/decks/{deck['id']}/cards"
        card = (
            await async_client.post(
                url,
                json={"front": "q1", "back": "a", "tags": ["exam"]},
                headers=auth_headers,
            )
        ).json()
        await async_client.post(url, json={"front": "q2", "back": "a"}, headers=auth_headers)

        response = await async_client.get(
            "/api/v1/cards", params={"tag": "exam"}, headers=auth_headers
        )
        assert [c["id"] for c in response.json()["items"]] == [card["id"]]

        response = await async_client.patch(
            f"/api/v1/cards/{card['id']}", json={"back": "b"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["content_hash"] != card["content_hash"]

        response = await async_client.delete(
            f"/api/v1/cards/{card['id']}", headers=auth_headers
        )
        assert response.status_code == 204

        response = await async_client.get(url, headers=auth_headers)
        assert [c["front"] for c in response.json()["items"]] == ["q2"]

    async def test_card_in_foreign_deck_is_404(
        self, async_client, auth_headers, auth_headers_for
    ):
        deck = await _create_deck(async_client, auth_headers)

        response = await async_client.post(
            f"/api/v1/decks/{deck['id']}/cards",
            json={"front": "q", "back": "a"},
            headers=auth_headers_for(uuid4()),
        )
        assert response.status_code == 404


class TestEventEndpoints:
    async def test_append_list_delete(self, async_client, auth_headers):
        response = await async_client.post(
            "/api/v1/events",
            json={"event_type": "card_viewed", "payload": {"card_id": "x"}},
            headers=auth_headers,
        )
        assert response.status_code == 201
        event = response.json()

        response = await async_client.get("/api/v1/events", headers=auth_headers)
        assert [e["id"] for e in response.json()["items"]] == [event["id"]]

        response = await async_client.delete(
            f"/api/v1/events/{event['id']}", headers=auth_headers
        )
        assert response.status_code == 204

    @pytest.mark.parametrize("method", ["put", "patch"])
    async def test_events_cannot_be_modified(self, async_client, auth_headers, method):
        response = await async_client.request(
            method.upper(),
            f"/api/v1/events/{uuid4()}",
            json={"event_type": "x"},
            headers=auth_headers,
        )
        assert response.status_code == 405


class TestAccountErasure:
    async def test_delete_own_data(self, async_client, auth_headers, owner_id):
        deck = await _create_deck(async_client, auth_headers)
        await async_client.post(
            f"/api/v1/decks/{deck['id']}/cards",
            json={"front": "q", "back": "a"},
            headers=auth_headers,
        )
        await async_client.post(
            "/api/v1/events", json={"event_type": "card_viewed"}, headers=auth_headers
        )

        response = await async_client.delete(
            f"/api/v1/account/data/{owner_id}", headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json() == {
            "owner_id": str(owner_id),
            "events": 1,
            "cards": 1,
            "decks": 1,
            "total": 3,
        }

        response = await async_client.delete(
            f"/api/v1/account/data/{owner_id}", headers=auth_headers
        )
        assert response.json()["total"] == 0

    async def test_delete_other_users_data_is_403(
        self, async_client, auth_headers, auth_headers_for, owner_id
    ):
        await _create_deck(async_client, auth_headers)

        response = await async_client.delete(
            f"/api/v1/account/data/{owner_id}", headers=auth_headers_for(uuid4())
        )
        assert response.status_code == 403

        response = await async_client.get("/api/v1/decks", headers=auth_headers)
        assert response.json()["total"] == 1
