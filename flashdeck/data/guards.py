"""
Consistency guard: invariants enforced at the data-layer boundary.

The ORM hooks below run inside the flush, on the same connection and in the
same transaction as the write they inspect, so every mapped write path goes
through them:

- a card's ``user_id`` must equal the owner of the deck it references,
  on insert and on every update;
- a deck's owner never changes;
- ``updated_at`` is refreshed on every deck/card update, whichever columns
  changed;
- events are append-only.

On PostgreSQL the same rules are also installed as triggers when the
tables are created, which covers writes issued outside the ORM.
"""

from sqlalchemy import DDL, event, inspect, select

from flashdeck.data.models.card_model import CardModel
from flashdeck.data.models.deck_model import DeckModel
from flashdeck.data.models.event_model import EventModel
from flashdeck.domain_core.clock import utcnow
from flashdeck.domain_core.exceptions import IntegrityViolationError
from flashdeck.infra.config.logging_config import get_logger

log = get_logger("data.guard")


def _deck_owner(connection, deck_id):
    return connection.execute(
        select(DeckModel.__table__.c.user_id).where(DeckModel.__table__.c.id == deck_id)
    ).scalar_one_or_none()


def ensure_card_user_matches_deck(connection, card: CardModel) -> None:
    deck_owner = _deck_owner(connection, card.deck_id)
    if deck_owner is None:
        log.error("guard.card.deck_missing", card_id=card.id, deck_id=card.deck_id)
        raise IntegrityViolationError(f"deck {card.deck_id} not found")
    if card.user_id != deck_owner:
        log.error(
            "guard.card.owner_mismatch",
            card_id=card.id,
            card_user_id=card.user_id,
            deck_user_id=deck_owner,
        )
        raise IntegrityViolationError(
            f"card.user_id ({card.user_id}) must match deck.user_id ({deck_owner})"
        )


@event.listens_for(CardModel, "before_insert")
def _card_before_insert(mapper, connection, target: CardModel) -> None:
    ensure_card_user_matches_deck(connection, target)


@event.listens_for(CardModel, "before_update")
def _card_before_update(mapper, connection, target: CardModel) -> None:
    ensure_card_user_matches_deck(connection, target)
    target.updated_at = utcnow()


@event.listens_for(DeckModel, "before_update")
def _deck_before_update(mapper, connection, target: DeckModel) -> None:
    if inspect(target).attrs.user_id.history.has_changes():
        raise IntegrityViolationError(f"deck {target.id} owner is immutable")
    target.updated_at = utcnow()


@event.listens_for(EventModel, "before_update")
def _event_before_update(mapper, connection, target: EventModel) -> None:
    raise IntegrityViolationError(f"event {target.id} is immutable")


# PostgreSQL triggers mirroring the hooks above for non-ORM writers. One
# statement per DDL; asyncpg prepares each one. Messages are built by
# concatenation to keep '%' out of the DDL text.

_UPDATED_AT_FUNCTION = """
create or replace function update_updated_at_column()
returns trigger as $$
begin
  new.updated_at = now();
  return new;
end;
$$ language plpgsql
"""

POSTGRES_TRIGGERS = {
    DeckModel.__table__: [
        _UPDATED_AT_FUNCTION,
        """
create trigger trg_decks_updated_at
  before update on decks
  for each row execute function update_updated_at_column()
""",
    ],
    CardModel.__table__: [
        """
create or replace function ensure_card_user_matches_deck()
returns trigger as $$
declare
  deck_owner uuid;
begin
  select user_id into deck_owner from decks where id = new.deck_id;
  if deck_owner is null then
    raise exception using message = 'deck ' || new.deck_id || ' not found';
  end if;
  if new.user_id is distinct from deck_owner then
    raise exception using message =
      'card.user_id (' || new.user_id || ') must match deck.user_id (' || deck_owner || ')';
  end if;
  return new;
end;
$$ language plpgsql
""",
        """
create trigger trg_cards_user_matches_deck
  before insert or update on cards
  for each row execute function ensure_card_user_matches_deck()
""",
        _UPDATED_AT_FUNCTION,
        """
create trigger trg_cards_updated_at
  before update on cards
  for each row execute function update_updated_at_column()
""",
    ],
    EventModel.__table__: [
        """
create or replace function reject_event_update()
returns trigger as $$
begin
  raise exception using message = 'event ' || old.id || ' is immutable';
end;
$$ language plpgsql
""",
        """
create trigger trg_events_no_update
  before update on events
  for each row execute function reject_event_update()
""",
    ],
}

for _table, _statements in POSTGRES_TRIGGERS.items():
    for _statement in _statements:
        event.listen(
            _table, "after_create", DDL(_statement).execute_if(dialect="postgresql")
        )
