"""Queries and write checks used by the API.

Every query validates its parameters before touching the store.
"""

from ..config import DEFAULT_ACTIVITY_LIMIT, DEFAULT_EVENTS_LIMIT, DEFAULT_HIGH_PROFIT_LIMIT
from ..core.errors import NotFoundError, ValidationError
from ..core.models import OpportunityCreate, OpportunityUpdate
from ..store.base import Store
from .enrichment import (
    EnrichedActivityLog,
    EnrichedEvent,
    EnrichedOpportunity,
    enrich_activity_logs,
    enrich_events,
    enrich_opportunities,
)
from .filters import (
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    OpportunityFilters,
    filter_opportunities,
    sort_opportunities,
    validate_sort,
)


def _check_limit(limit: int) -> None:
    if limit < 1:
        raise ValidationError("Invalid input data", {"limit": "must be at least 1"})


def list_opportunities(
    store: Store,
    filters: OpportunityFilters | None = None,
    sort_field: str = DEFAULT_SORT_FIELD,
    direction: str = DEFAULT_SORT_DIRECTION
) -> list[EnrichedOpportunity]:
    """
    Active opportunities matching `filters`, enriched and sorted.

    Default order is profit percent, highest first.
    """
    validate_sort(sort_field, direction)
    filters = filters or OpportunityFilters()

    opportunities = store.list_active_opportunities()
    events = store.list_events() if filters.sport_id is not None else []
    matching = filter_opportunities(opportunities, events, filters)

    return sort_opportunities(enrich_opportunities(store, matching), sort_field, direction)


def list_high_profit_opportunities(
    store: Store,
    limit: int = DEFAULT_HIGH_PROFIT_LIMIT
) -> list[EnrichedOpportunity]:
    """Top `limit` active opportunities by stored profit percent."""
    _check_limit(limit)
    top = sorted(
        store.list_active_opportunities(),
        key=lambda o: o.profit_percent,
        reverse=True,
    )[:limit]
    return enrich_opportunities(store, top)


def validate_opportunity_references(
    store: Store,
    data: OpportunityCreate | OpportunityUpdate
) -> None:
    """
    Reject an opportunity write whose event or bookmaker ids do not exist.

    Ids left unset in a partial update are not checked.
    """
    bookmaker_fields = {
        "bookmaker1Id": data.bookmaker1_id,
        "bookmaker2Id": data.bookmaker2_id,
    }
    bookmaker_ids = [i for i in bookmaker_fields.values() if i is not None]
    bookmakers = store.get_bookmakers(bookmaker_ids) if bookmaker_ids else {}

    errors = {}
    if data.event_id is not None and not store.get_events([data.event_id]):
        errors["eventId"] = f"event {data.event_id} does not exist"
    for name, bookmaker_id in bookmaker_fields.items():
        if bookmaker_id is not None and bookmaker_id not in bookmakers:
            errors[name] = f"bookmaker {bookmaker_id} does not exist"

    if errors:
        raise ValidationError("Invalid input data", errors)


def get_opportunity_detail(store: Store, opportunity_id: int) -> EnrichedOpportunity:
    opportunity = store.get_opportunity(opportunity_id)
    if opportunity is None:
        raise NotFoundError("Opportunity", opportunity_id)
    return enrich_opportunities(store, [opportunity])[0]


def list_upcoming_events(
    store: Store,
    limit: int = DEFAULT_EVENTS_LIMIT
) -> list[EnrichedEvent]:
    """Events with status 'upcoming', soonest first."""
    _check_limit(limit)
    upcoming = sorted(
        (e for e in store.list_events() if e.status == "upcoming"),
        key=lambda e: e.start_time,
    )[:limit]
    return enrich_events(store, upcoming)


def list_activity_logs(
    store: Store,
    limit: int = DEFAULT_ACTIVITY_LIMIT
) -> list[EnrichedActivityLog]:
    """Most recent activity first."""
    _check_limit(limit)
    logs = sorted(
        store.list_activity_logs(),
        key=lambda log: (log.created_at, log.id),
        reverse=True,
    )[:limit]
    return enrich_activity_logs(store, logs)
