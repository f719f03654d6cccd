"""
Integration tests for the deck store against SQLite.
"""

import asyncio
from uuid import uuid4

import pytest

from flashdeck.domain_core.exceptions import DomainValidationError, NotFoundError


@pytest.mark.integration
class TestDeckStore:
    async def test_create_and_get(self, deck_store, owner_id):
        deck = await deck_store.create(owner_id, "  Spanish ", "Verbs")

        fetched = await deck_store.get(deck.id, owner_id)
        assert fetched.id == deck.id
        assert fetched.name == "Spanish"
        assert fetched.description == "Verbs"
        assert fetched.user_id == owner_id
        assert not fetched.is_archived

    async def test_create_blank_name(self, deck_store, owner_id):
        with pytest.raises(DomainValidationError):
            await deck_store.create(owner_id, "   ")

        assert await deck_store.list(owner_id) == []

    async def test_get_other_owner_is_not_found(self, deck_store, deck, other_owner_id):
        with pytest.raises(NotFoundError):
            await deck_store.get(deck.id, other_owner_id)

    async def test_get_missing_is_not_found(self, deck_store, owner_id):
        with pytest.raises(NotFoundError):
            await deck_store.get(uuid4(), owner_id)

    async def test_list_scoped_by_owner_newest_first(
        self, deck_store, owner_id, other_owner_id
    ):
        first = await deck_store.create(owner_id, "First")
        await asyncio.sleep(0.01)
        second = await deck_store.create(owner_id, "Second")
        await deck_store.create(other_owner_id, "Not mine")

        assert [d.id for d in await deck_store.list(owner_id)] == [second.id, first.id]

    async def test_update_refreshes_updated_at(self, deck_store, deck, owner_id):
        await asyncio.sleep(0.01)
        updated = await deck_store.update(deck.id, owner_id, {"name": "Botany"})

        assert updated.name == "Botany"
        assert updated.description == deck.description
        assert updated.updated_at > deck.updated_at

    async def test_update_other_owner_is_not_found(
        self, deck_store, deck, owner_id, other_owner_id
    ):
        with pytest.raises(NotFoundError):
            await deck_store.update(deck.id, other_owner_id, {"name": "Stolen"})

        assert (await deck_store.get(deck.id, owner_id)).name == "Biology"

    async def test_update_rejects_owner_change(self, deck_store, deck, owner_id):
        with pytest.raises(DomainValidationError):
            await deck_store.update(deck.id, owner_id, {"user_id": uuid4()})

    async def test_archive_hides_from_default_listing(self, deck_store, deck, owner_id):
        archived = await deck_store.archive(deck.id, owner_id)

        assert archived.is_archived
        assert await deck_store.list(owner_id) == []
        assert [d.id for d in await deck_store.list(owner_id, include_deleted=True)] == [
            deck.id
        ]

    async def test_delete(self, deck_store, deck, owner_id):
        await deck_store.delete(deck.id, owner_id)

        with pytest.raises(NotFoundError):
            await deck_store.get(deck.id, owner_id)
        with pytest.raises(NotFoundError):
            await deck_store.delete(deck.id, owner_id)

    async def test_delete_other_owner_is_not_found(
        self, deck_store, deck, owner_id, other_owner_id
    ):
        with pytest.raises(NotFoundError):
            await deck_store.delete(deck.id, other_owner_id)

        assert await deck_store.get(deck.id, owner_id)
