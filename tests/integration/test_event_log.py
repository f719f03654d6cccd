"""
Integration tests for the append-only event log.
"""

import asyncio
from datetime import timedelta

import pytest

from flashdeck.application.services import EventLog
from flashdeck.data.repositories import EventRepository
from flashdeck.domain_core.exceptions import DomainValidationError, NotFoundError


@pytest.mark.integration
class TestEventLog:
    async def test_append_and_list_in_order(self, event_log, owner_id):
        first = await event_log.append(owner_id, "card_viewed", {"card_id": "a"})
        await asyncio.sleep(0.01)
        second = await event_log.append(owner_id, "generated_view")

        events = await event_log.list_by_owner(owner_id)

        assert [e.id for e in events] == [first.id, second.id]
        assert events[0].payload == {"card_id": "a"}
        assert events[1].payload == {}

    async def test_list_scoped_by_owner(self, event_log, owner_id, other_owner_id):
        await event_log.append(owner_id, "card_viewed")
        await event_log.append(other_owner_id, "card_viewed")

        assert len(await event_log.list_by_owner(owner_id)) == 1

    async def test_time_window_since_inclusive_until_exclusive(
        self, event_log, owner_id
    ):
        first = await event_log.append(owner_id, "a")
        await asyncio.sleep(0.01)
        second = await event_log.append(owner_id, "b")
        await asyncio.sleep(0.01)
        third = await event_log.append(owner_id, "c")

        window = await event_log.list_by_owner(
            owner_id, since=second.created_at, until=third.created_at
        )
        assert [e.id for e in window] == [second.id]

        later = await event_log.list_by_owner(
            owner_id, since=first.created_at + timedelta(microseconds=1)
        )
        assert [e.id for e in later] == [second.id, third.id]

    async def test_filter_by_event_type(self, event_log, owner_id):
        await event_log.append(owner_id, "card_viewed")
        await event_log.append(owner_id, "generated_view")

        events = await event_log.list_by_owner(owner_id, event_type="generated_view")
        assert [e.event_type for e in events] == ["generated_view"]

    async def test_validation(self, event_log, owner_id):
        with pytest.raises(DomainValidationError):
            await event_log.append(owner_id, " ")
        with pytest.raises(DomainValidationError):
            await event_log.append(owner_id, "card_viewed", ["not", "an", "object"])

    async def test_delete(self, event_log, owner_id, other_owner_id):
        event = await event_log.append(owner_id, "card_viewed")

        with pytest.raises(NotFoundError):
            await event_log.delete(event.id, other_owner_id)
        await event_log.delete(event.id, owner_id)

        assert await event_log.list_by_owner(owner_id) == []

    def test_no_update_operation(self):
        assert not hasattr(EventLog, "update")
        assert not hasattr(EventRepository, "update")
