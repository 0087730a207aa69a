"""API routes for the arbitrage dashboard.

Reads are enriched and camelCase; writes accept camelCase bodies.
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query, Request

from ..config import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_ACTIVITY_LIMIT,
    DEFAULT_EVENTS_LIMIT,
    DEFAULT_HIGH_PROFIT_LIMIT,
    MAX_LIST_LIMIT,
)
from ..core.errors import NotFoundError
from ..core.models import (
    ActivityLogCreate,
    BookmakerCreate,
    BookmakerUpdate,
    CalculatorRequest,
    EventCreate,
    EventUpdate,
    OpportunityCreate,
    OpportunityUpdate,
    SportCreate,
    SportUpdate,
)
from ..core.sizing import calculate_profit
from ..engine import (
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    OpportunityFilters,
    enrich_events,
    enrich_opportunities,
    format_activity_log_json,
    format_calculation_json,
    format_event_json,
    format_opportunities_table,
    format_opportunity_json,
    format_opportunity_short,
    get_dashboard_stats,
    get_opportunity_detail,
    get_sports_distribution,
    list_activity_logs,
    list_high_profit_opportunities,
    list_opportunities,
    list_upcoming_events,
    parse_bookmaker_ids,
    parse_min_profit,
    validate_opportunity_references,
)
from ..store.base import Store

logger = logging.getLogger(__name__)


def get_store(request: Request) -> Store:
    """Store attached to the running app."""
    return request.app.state.store


router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/health")
async def health_check(store: Store = Depends(get_store)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": APP_NAME,
        "version": APP_VERSION,
        "opportunitiesCount": len(store.list_opportunities()),
        "activeOpportunitiesCount": len(store.list_active_opportunities()),
    }


# Bookmakers

@router.get("/bookmakers")
async def get_bookmakers(store: Store = Depends(get_store)):
    return [b.to_json() for b in store.list_bookmakers()]


@router.post("/bookmakers", status_code=201)
async def create_bookmaker(data: BookmakerCreate, store: Store = Depends(get_store)):
    bookmaker = store.create_bookmaker(data)
    logger.info("Bookmaker %s created: %s", bookmaker.id, bookmaker.name)
    return bookmaker.to_json()


@router.patch("/bookmakers/{bookmaker_id}")
async def update_bookmaker(
    bookmaker_id: int,
    data: BookmakerUpdate,
    store: Store = Depends(get_store),
):
    bookmaker = store.update_bookmaker(bookmaker_id, data)
    if bookmaker is None:
        raise NotFoundError("Bookmaker", bookmaker_id)
    return bookmaker.to_json()


# Sports

@router.get("/sports")
async def get_sports(store: Store = Depends(get_store)):
    return [s.to_json() for s in store.list_sports()]


@router.post("/sports", status_code=201)
async def create_sport(data: SportCreate, store: Store = Depends(get_store)):
    sport = store.create_sport(data)
    logger.info("Sport %s created: %s", sport.id, sport.name)
    return sport.to_json()


@router.patch("/sports/{sport_id}")
async def update_sport(sport_id: int, data: SportUpdate, store: Store = Depends(get_store)):
    sport = store.update_sport(sport_id, data)
    if sport is None:
        raise NotFoundError("Sport", sport_id)
    return sport.to_json()


# Events

@router.get("/events/upcoming")
async def get_upcoming_events(
    limit: int = Query(DEFAULT_EVENTS_LIMIT, ge=1, le=MAX_LIST_LIMIT),
    store: Store = Depends(get_store),
):
    """Upcoming events, soonest first, each with its sport."""
    return [format_event_json(e) for e in list_upcoming_events(store, limit)]


@router.post("/events", status_code=201)
async def create_event(data: EventCreate, store: Store = Depends(get_store)):
    event = store.create_event(data)
    logger.info("Event %s created: %s", event.id, event.name)
    return format_event_json(enrich_events(store, [event])[0])


@router.patch("/events/{event_id}")
async def update_event(event_id: int, data: EventUpdate, store: Store = Depends(get_store)):
    event = store.update_event(event_id, data)
    if event is None:
        raise NotFoundError("Event", event_id)
    return format_event_json(enrich_events(store, [event])[0])


# Opportunities

@router.get("/opportunities")
async def get_opportunities(
    sport_id: int | None = Query(None, alias="sportId"),
    min_profit: str | None = Query(None, alias="minProfit", description="Minimum profit %"),
    bookmaker_ids: str | None = Query(None, alias="bookmakerIds", description="Comma-separated ids"),
    sort: str = Query(DEFAULT_SORT_FIELD),
    direction: str = Query(DEFAULT_SORT_DIRECTION),
    format: Literal["json", "text"] = "json",
    store: Store = Depends(get_store),
):
    """
    Get active opportunities.

    Filters (all optional, combined with AND):
    - sportId: opportunities on events of this sport
    - minProfit: profit percent at or above this value
    - bookmakerIds: either leg at one of these bookmakers

    Sorting: sort=event|market|bookmakers|profitPercent|investment,
    direction=asc|desc (default profitPercent desc).
    """
    filters = OpportunityFilters(
        sport_id=sport_id,
        min_profit=parse_min_profit(min_profit),
        bookmaker_ids=parse_bookmaker_ids(bookmaker_ids),
    )
    opportunities = list_opportunities(store, filters, sort, direction)

    if format == "text":
        return {
            "count": len(opportunities),
            "text": format_opportunities_table(opportunities),
        }

    return [format_opportunity_json(o) for o in opportunities]


@router.get("/opportunities/high-profit")
async def get_high_profit_opportunities(
    limit: int = Query(DEFAULT_HIGH_PROFIT_LIMIT, ge=1, le=MAX_LIST_LIMIT),
    store: Store = Depends(get_store),
):
    return [format_opportunity_json(o) for o in list_high_profit_opportunities(store, limit)]


@router.get("/opportunities/{opportunity_id}")
async def get_opportunity(opportunity_id: int, store: Store = Depends(get_store)):
    return format_opportunity_json(get_opportunity_detail(store, opportunity_id))


@router.post("/opportunities", status_code=201)
async def create_opportunity(data: OpportunityCreate, store: Store = Depends(get_store)):
    """Store a new opportunity and record it in the activity log."""
    validate_opportunity_references(store, data)
    opportunity = store.create_opportunity(data)
    store.create_activity_log(ActivityLogCreate(
        type="new_opportunity",
        message="New arbitrage opportunity found",
        related_opportunity_id=opportunity.id,
    ))

    enriched = enrich_opportunities(store, [opportunity])[0]
    logger.info("Opportunity %s created: %s", opportunity.id, format_opportunity_short(enriched))
    return format_opportunity_json(enriched)


@router.patch("/opportunities/{opportunity_id}")
async def update_opportunity(
    opportunity_id: int,
    data: OpportunityUpdate,
    store: Store = Depends(get_store),
):
    if store.get_opportunity(opportunity_id) is None:
        raise NotFoundError("Opportunity", opportunity_id)
    validate_opportunity_references(store, data)

    opportunity = store.update_opportunity(opportunity_id, data)
    if opportunity is None:
        raise NotFoundError("Opportunity", opportunity_id)
    return format_opportunity_json(enrich_opportunities(store, [opportunity])[0])


# Activity

@router.get("/activity-logs")
async def get_activity_logs(
    limit: int = Query(DEFAULT_ACTIVITY_LIMIT, ge=1, le=MAX_LIST_LIMIT),
    store: Store = Depends(get_store),
):
    return [format_activity_log_json(log) for log in list_activity_logs(store, limit)]


# Dashboard

@router.get("/dashboard/stats")
async def dashboard_stats(store: Store = Depends(get_store)):
    return get_dashboard_stats(store).to_json()


@router.get("/dashboard/sports-distribution")
async def sports_distribution(store: Store = Depends(get_store)):
    return [entry.to_json() for entry in get_sports_distribution(store)]


# Calculator

@router.post("/calculator/profit")
async def calculator_profit(data: CalculatorRequest):
    """
    What-if stake split for two decimal odds.

    Returns stakes, profit and profit percent rounded to 2 decimals.
    A negative profit means the odds do not cover the book.
    """
    result = calculate_profit(data.odds1, data.odds2, data.total_stake)
    return format_calculation_json(result)
