"""In-memory store.

Each entity type lives in its own Table: a dict keyed by id plus a
monotonic IdAllocator owned by that table. Nothing is shared between
store instances.
"""

import logging
import threading
from collections.abc import Iterable
from typing import Generic, TypeVar

from pydantic import BaseModel

from ..core.models import (
    ActivityLog,
    ActivityLogCreate,
    Bookmaker,
    BookmakerCreate,
    BookmakerUpdate,
    Event,
    EventCreate,
    EventUpdate,
    Opportunity,
    OpportunityCreate,
    OpportunityUpdate,
    Sport,
    SportCreate,
    SportUpdate,
)
from .base import Store
from .seed import seed_store

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class IdAllocator:
    """Hands out sequential ids starting at `start`."""

    def __init__(self, start: int = 1):
        self._next = start

    def allocate(self) -> int:
        record_id = self._next
        self._next += 1
        return record_id

    @property
    def next_id(self) -> int:
        """Id the next allocation will return."""
        return self._next


class Table(Generic[T]):
    """Rows of one entity type keyed by id, in insertion order."""

    def __init__(self, model: type[T]):
        self._model = model
        self._rows: dict[int, T] = {}
        self._ids = IdAllocator()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._rows)

    def all(self) -> list[T]:
        return list(self._rows.values())

    def get(self, record_id: int) -> T | None:
        return self._rows.get(record_id)

    def get_many(self, ids: Iterable[int]) -> dict[int, T]:
        rows = self._rows
        return {i: rows[i] for i in dict.fromkeys(ids) if i in rows}

    def insert(self, data: BaseModel) -> T:
        fields = data.model_dump()
        with self._lock:
            record = self._model(id=self._ids.allocate(), **fields)
            self._rows[record.id] = record
        return record

    def update(self, record_id: int, data: BaseModel) -> T | None:
        """Merge the non-null fields of `data` into the row; None when missing."""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        with self._lock:
            current = self._rows.get(record_id)
            if current is None:
                return None
            updated = current.model_copy(update=changes)
            self._rows[record_id] = updated
        return updated


class MemoryStore(Store):
    """Dict-backed Store implementation."""

    def __init__(self, seed: bool = False):
        self._bookmakers: Table[Bookmaker] = Table(Bookmaker)
        self._sports: Table[Sport] = Table(Sport)
        self._events: Table[Event] = Table(Event)
        self._opportunities: Table[Opportunity] = Table(Opportunity)
        self._activity_logs: Table[ActivityLog] = Table(ActivityLog)

        if seed:
            seed_store(self)

    # Bookmakers
    def list_bookmakers(self) -> list[Bookmaker]:
        return self._bookmakers.all()

    def get_bookmaker(self, bookmaker_id: int) -> Bookmaker | None:
        return self._bookmakers.get(bookmaker_id)

    def get_bookmakers(self, ids: Iterable[int]) -> dict[int, Bookmaker]:
        return self._bookmakers.get_many(ids)

    def create_bookmaker(self, data: BookmakerCreate) -> Bookmaker:
        bookmaker = self._bookmakers.insert(data)
        logger.debug("Created bookmaker %s (%s)", bookmaker.id, bookmaker.name)
        return bookmaker

    def update_bookmaker(self, bookmaker_id: int, data: BookmakerUpdate) -> Bookmaker | None:
        return self._bookmakers.update(bookmaker_id, data)

    # Sports
    def list_sports(self) -> list[Sport]:
        return self._sports.all()

    def get_sport(self, sport_id: int) -> Sport | None:
        return self._sports.get(sport_id)

    def get_sports(self, ids: Iterable[int]) -> dict[int, Sport]:
        return self._sports.get_many(ids)

    def create_sport(self, data: SportCreate) -> Sport:
        sport = self._sports.insert(data)
        logger.debug("Created sport %s (%s)", sport.id, sport.name)
        return sport

    def update_sport(self, sport_id: int, data: SportUpdate) -> Sport | None:
        return self._sports.update(sport_id, data)

    # Events
    def list_events(self) -> list[Event]:
        return self._events.all()

    def get_event(self, event_id: int) -> Event | None:
        return self._events.get(event_id)

    def get_events(self, ids: Iterable[int]) -> dict[int, Event]:
        return self._events.get_many(ids)

    def create_event(self, data: EventCreate) -> Event:
        event = self._events.insert(data)
        logger.debug("Created event %s (%s)", event.id, event.name)
        return event

    def update_event(self, event_id: int, data: EventUpdate) -> Event | None:
        return self._events.update(event_id, data)

    # Opportunities
    def list_opportunities(self) -> list[Opportunity]:
        return self._opportunities.all()

    def list_active_opportunities(self) -> list[Opportunity]:
        return [o for o in self._opportunities.all() if o.is_active]

    def get_opportunity(self, opportunity_id: int) -> Opportunity | None:
        return self._opportunities.get(opportunity_id)

    def get_opportunities(self, ids: Iterable[int]) -> dict[int, Opportunity]:
        return self._opportunities.get_many(ids)

    def create_opportunity(self, data: OpportunityCreate) -> Opportunity:
        opportunity = self._opportunities.insert(data)
        logger.debug(
            "Created opportunity %s (event %s, %.2f%%)",
            opportunity.id, opportunity.event_id, opportunity.profit_percent
        )
        return opportunity

    def update_opportunity(
        self,
        opportunity_id: int,
        data: OpportunityUpdate
    ) -> Opportunity | None:
        return self._opportunities.update(opportunity_id, data)

    # Activity logs
    def list_activity_logs(self) -> list[ActivityLog]:
        return self._activity_logs.all()

    def create_activity_log(self, data: ActivityLogCreate) -> ActivityLog:
        return self._activity_logs.insert(data)
