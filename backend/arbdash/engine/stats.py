"""Dashboard aggregates.

Recomputed on every call from active opportunities; nothing is cached.
"""

from ..core.models import DashboardStats, Event, Opportunity, Sport, SportCount
from ..store.base import Store
from .filters import build_event_sport_index


def summarize_opportunities(active: list[Opportunity]) -> DashboardStats:
    """
    Count, mean profit percent and best opportunity.

    An empty list gives zeros and no highest_profit_opportunity_id.
    """
    if not active:
        return DashboardStats()

    average = sum(o.profit_percent for o in active) / len(active)
    best = max(active, key=lambda o: o.profit_percent)  # first one wins ties

    return DashboardStats(
        active_opportunities_count=len(active),
        average_profit_percent=round(average, 2),
        highest_profit_percent=best.profit_percent,
        highest_profit_opportunity_id=best.id,
    )


def count_by_sport(
    sports: list[Sport],
    events: list[Event],
    active: list[Opportunity]
) -> list[SportCount]:
    """
    Active opportunity count per sport, highest count first.

    Every sport gets an entry, including those with no opportunities.
    Equal counts keep the order of `sports`. Opportunities whose event
    or sport is unknown are not counted.
    """
    counts = {s.id: 0 for s in sports}
    sport_by_event = build_event_sport_index(events)

    for opp in active:
        sport_id = sport_by_event.get(opp.event_id)
        if sport_id in counts:
            counts[sport_id] += 1

    distribution = [
        SportCount(sport_id=s.id, sport_name=s.name, count=counts[s.id])
        for s in sports
    ]
    return sorted(distribution, key=lambda d: d.count, reverse=True)


def get_dashboard_stats(store: Store) -> DashboardStats:
    return summarize_opportunities(store.list_active_opportunities())


def get_sports_distribution(store: Store) -> list[SportCount]:
    return count_by_sport(
        store.list_sports(),
        store.list_events(),
        store.list_active_opportunities(),
    )
