"""Store contract consumed by the query layer and the API.

Any map-backed or table-backed implementation satisfies it. Lookups
return None for unknown ids; batch lookups silently skip them.
Implementations report backend failures by raising StoreError; any
other exception surfaces as a generic 500.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

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


class Store(ABC):
    """Abstract store for bookmakers, sports, events, opportunities and logs."""

    # Bookmakers
    @abstractmethod
    def list_bookmakers(self) -> list[Bookmaker]: ...

    @abstractmethod
    def get_bookmaker(self, bookmaker_id: int) -> Bookmaker | None: ...

    @abstractmethod
    def get_bookmakers(self, ids: Iterable[int]) -> dict[int, Bookmaker]: ...

    @abstractmethod
    def create_bookmaker(self, data: BookmakerCreate) -> Bookmaker: ...

    @abstractmethod
    def update_bookmaker(self, bookmaker_id: int, data: BookmakerUpdate) -> Bookmaker | None: ...

    # Sports
    @abstractmethod
    def list_sports(self) -> list[Sport]: ...

    @abstractmethod
    def get_sport(self, sport_id: int) -> Sport | None: ...

    @abstractmethod
    def get_sports(self, ids: Iterable[int]) -> dict[int, Sport]: ...

    @abstractmethod
    def create_sport(self, data: SportCreate) -> Sport: ...

    @abstractmethod
    def update_sport(self, sport_id: int, data: SportUpdate) -> Sport | None: ...

    # Events
    @abstractmethod
    def list_events(self) -> list[Event]: ...

    @abstractmethod
    def get_event(self, event_id: int) -> Event | None: ...

    @abstractmethod
    def get_events(self, ids: Iterable[int]) -> dict[int, Event]: ...

    @abstractmethod
    def create_event(self, data: EventCreate) -> Event: ...

    @abstractmethod
    def update_event(self, event_id: int, data: EventUpdate) -> Event | None: ...

    # Opportunities
    @abstractmethod
    def list_opportunities(self) -> list[Opportunity]: ...

    @abstractmethod
    def list_active_opportunities(self) -> list[Opportunity]: ...

    @abstractmethod
    def get_opportunity(self, opportunity_id: int) -> Opportunity | None: ...

    @abstractmethod
    def get_opportunities(self, ids: Iterable[int]) -> dict[int, Opportunity]: ...

    @abstractmethod
    def create_opportunity(self, data: OpportunityCreate) -> Opportunity: ...

    @abstractmethod
    def update_opportunity(
        self,
        opportunity_id: int,
        data: OpportunityUpdate
    ) -> Opportunity | None: ...

    # Activity logs
    @abstractmethod
    def list_activity_logs(self) -> list[ActivityLog]: ...

    @abstractmethod
    def create_activity_log(self, data: ActivityLogCreate) -> ActivityLog: ...
