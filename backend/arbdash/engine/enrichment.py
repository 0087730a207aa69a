"""Batch joins of stored records with the records they reference.

Each call loads every referenced event, sport and bookmaker with one
batch lookup per entity type and joins in memory. A reference that
does not resolve becomes None instead of failing the whole response.
"""

from dataclasses import dataclass

from ..core.models import ActivityLog, Bookmaker, Event, Opportunity, Sport
from ..store.base import Store


@dataclass
class EnrichedOpportunity:
    """Opportunity with its event, sport and both bookmakers."""
    opportunity: Opportunity
    event: Event | None = None
    sport: Sport | None = None
    bookmaker1: Bookmaker | None = None
    bookmaker2: Bookmaker | None = None


@dataclass
class EnrichedEvent:
    event: Event
    sport: Sport | None = None


@dataclass
class EnrichedActivityLog:
    log: ActivityLog
    opportunity: EnrichedOpportunity | None = None


def enrich_opportunities(
    store: Store,
    opportunities: list[Opportunity]
) -> list[EnrichedOpportunity]:
    """Attach event, sport and bookmakers to each opportunity, keeping order."""
    if not opportunities:
        return []

    events = store.get_events(o.event_id for o in opportunities)
    sports = store.get_sports(e.sport_id for e in events.values())
    bookmakers = store.get_bookmakers(
        [o.bookmaker1_id for o in opportunities] + [o.bookmaker2_id for o in opportunities]
    )

    enriched = []
    for opp in opportunities:
        event = events.get(opp.event_id)
        enriched.append(EnrichedOpportunity(
            opportunity=opp,
            event=event,
            sport=sports.get(event.sport_id) if event else None,
            bookmaker1=bookmakers.get(opp.bookmaker1_id),
            bookmaker2=bookmakers.get(opp.bookmaker2_id),
        ))

    return enriched


def enrich_events(store: Store, events: list[Event]) -> list[EnrichedEvent]:
    """Attach each event's sport."""
    sports = store.get_sports(e.sport_id for e in events)
    return [EnrichedEvent(event=e, sport=sports.get(e.sport_id)) for e in events]


def enrich_activity_logs(
    store: Store,
    logs: list[ActivityLog]
) -> list[EnrichedActivityLog]:
    """
    Attach each log's related opportunity (itself enriched).

    Logs without a related id, or pointing at an opportunity that no
    longer exists, are returned without one.
    """
    related_ids = [log.related_opportunity_id for log in logs if log.related_opportunity_id is not None]
    opportunities = store.get_opportunities(related_ids)
    enriched_by_id = {
        e.opportunity.id: e
        for e in enrich_opportunities(store, list(opportunities.values()))
    }

    return [
        EnrichedActivityLog(
            log=log,
            opportunity=enriched_by_id.get(log.related_opportunity_id)
            if log.related_opportunity_id is not None else None,
        )
        for log in logs
    ]
