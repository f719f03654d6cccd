"""
Unit tests for domain entities.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from flashdeck.domain_core.entities import Card, Deck, Event
from flashdeck.domain_core.value_objects.fingerprint import fingerprint

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_card(**overrides) -> Card:
    values = dict(
        id=uuid4(),
        deck_id=uuid4(),
        user_id=uuid4(),
        front="What is ATP?",
        back="Energy currency",
        content_hash=fingerprint("What is ATP?", "Energy currency"),
        created_at=NOW,
        updated_at=NOW,
    )
    values.update(overrides)
    return Card(**values)


class TestDeck:
    def test_archive_marker(self):
        deck = Deck(id=uuid4(), user_id=uuid4(), name="Bio", created_at=NOW, updated_at=NOW)
        assert not deck.is_archived
        deck.deleted_at = NOW
        assert deck.is_archived


class TestCard:
    def test_defaults(self):
        card = make_card()
        assert card.tags == []
        assert card.ai_generated is False
        assert not card.is_archived

    def test_has_tag(self):
        card = make_card(tags=["bio", "exam"])
        assert card.has_tag("exam")
        assert not card.has_tag("Exam")

    def test_matches_content_after_normalization(self):
        card = make_card()
        assert card.matches_content("what  is ATP?", "ENERGY currency")
        assert not card.matches_content("What is ADP?", "Energy currency")


class TestEvent:
    def test_event_is_immutable(self):
        event = Event(id=uuid4(), user_id=uuid4(), event_type="card_viewed", created_at=NOW)
        assert event.payload == {}
        with pytest.raises(FrozenInstanceError):
            event.event_type = "other"
