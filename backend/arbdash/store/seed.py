"""Demo data for a fresh store.

Stored profit_percent values are illustrative figures for the
dashboard; they are not derived from the odds.
"""

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from ..core.models import (
    ActivityLogCreate,
    BookmakerCreate,
    EventCreate,
    OpportunityCreate,
    SportCreate,
)
from ..utils.time import utc_now

if TYPE_CHECKING:
    from .base import Store

logger = logging.getLogger(__name__)


BOOKMAKERS = [
    BookmakerCreate(name="Bet365", logo="bet365-logo"),
    BookmakerCreate(name="William Hill", logo="william-hill-logo"),
    BookmakerCreate(name="Betfair", logo="betfair-logo"),
    BookmakerCreate(name="Unibet", logo="unibet-logo"),
    BookmakerCreate(name="888Sport", logo="888sport-logo"),
]

SPORTS = [
    SportCreate(name="Football", icon="football-icon"),
    SportCreate(name="Basketball", icon="basketball-icon"),
    SportCreate(name="Tennis", icon="tennis-icon"),
    SportCreate(name="Ice Hockey", icon="hockey-icon"),
    SportCreate(name="Baseball", icon="baseball-icon"),
]

# (event_id, market, bookmaker1_id, bookmaker2_id, odds1, odds2, profit %, investment, active)
OPPORTUNITIES = [
    (1, "Match Result", 1, 3, 2.10, 1.92, 8.4, 1000, True),
    (2, "Total Points", 2, 5, 1.85, 2.20, 7.2, 500, True),
    (3, "Match Winner", 4, 1, 2.40, 1.75, 5.8, 750, True),
    (4, "Over/Under 2.5", 2, 3, 1.95, 2.05, 4.6, 800, True),
    (7, "First Goal", 1, 4, 2.00, 2.10, 3.5, 600, False),
]

ACTIVITY_LOGS = [
    ActivityLogCreate(type="new_opportunity", message="New arbitrage opportunity found", related_opportunity_id=1),
    ActivityLogCreate(type="odds_change", message="Odds changing rapidly", related_opportunity_id=2),
    ActivityLogCreate(type="opportunity_expired", message="Arbitrage opportunity expired", related_opportunity_id=5),
    ActivityLogCreate(type="system_update", message="System update completed"),
]


def _events() -> list[EventCreate]:
    now = utc_now()
    tomorrow = now + timedelta(days=1)

    return [
        EventCreate(name="Barcelona vs Real Madrid", sport_id=1, start_time=now, competition="La Liga"),
        EventCreate(name="Lakers vs Bulls", sport_id=2, start_time=now, competition="NBA"),
        EventCreate(name="Djokovic vs Nadal", sport_id=3, start_time=tomorrow, competition="Roland Garros"),
        EventCreate(name="Liverpool vs Manchester City", sport_id=1, start_time=tomorrow, competition="Premier League"),
        EventCreate(name="Warriors vs Suns", sport_id=2, start_time=now + timedelta(days=3), competition="NBA"),
        EventCreate(name="Bayern Munich vs Dortmund", sport_id=1, start_time=now + timedelta(days=4), competition="Bundesliga"),
        EventCreate(
            name="Arsenal vs Chelsea",
            sport_id=1,
            start_time=now - timedelta(hours=1),
            competition="Premier League",
            status="completed",
        ),
    ]


def seed_store(store: "Store") -> None:
    """Load the demo bookmakers, sports, events, opportunities and logs."""
    for bookmaker in BOOKMAKERS:
        store.create_bookmaker(bookmaker)

    for sport in SPORTS:
        store.create_sport(sport)

    events = _events()
    for event in events:
        store.create_event(event)

    for event_id, market, bm1, bm2, odds1, odds2, profit_pct, investment, active in OPPORTUNITIES:
        store.create_opportunity(OpportunityCreate(
            event_id=event_id,
            market=market,
            bookmaker1_id=bm1,
            bookmaker2_id=bm2,
            odds1=odds1,
            odds2=odds2,
            profit_percent=profit_pct,
            recommended_investment=investment,
            is_active=active,
        ))

    for log in ACTIVITY_LOGS:
        store.create_activity_log(log)

    logger.info(
        "Seeded demo data: %d bookmakers, %d sports, %d events, %d opportunities",
        len(BOOKMAKERS), len(SPORTS), len(events), len(OPPORTUNITIES)
    )
