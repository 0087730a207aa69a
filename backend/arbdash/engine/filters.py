"""Opportunity filtering and sorting.

Filters are AND'ed together:
- sport_id: the opportunity's event belongs to the sport
- min_profit: profit_percent >= min_profit (inclusive)
- bookmaker_ids: either leg is placed with one of the bookmakers
"""

from dataclasses import dataclass, field
from math import isfinite
from typing import Callable

from ..core.errors import ValidationError
from ..core.models import Event, Opportunity
from ..utils.display import format_bookmaker_pair
from .enrichment import EnrichedOpportunity


SORT_FIELDS: tuple[str, ...] = ("event", "market", "bookmakers", "profitPercent", "investment")
SORT_DIRECTIONS: tuple[str, ...] = ("asc", "desc")
DEFAULT_SORT_FIELD = "profitPercent"
DEFAULT_SORT_DIRECTION = "desc"


@dataclass
class OpportunityFilters:
    """Optional filters for listing opportunities."""
    sport_id: int | None = None
    min_profit: float | None = None
    bookmaker_ids: list[int] = field(default_factory=list)

    def __post_init__(self):
        if self.min_profit is not None and not isfinite(self.min_profit):
            raise ValidationError("Invalid input data", {"minProfit": "must be a finite number"})


def parse_bookmaker_ids(raw: str | None) -> list[int]:
    """
    Parse a comma-separated id list such as "1, 3".

    Blank entries are ignored; anything else that is not an integer
    raises ValidationError.
    """
    if not raw:
        return []

    ids = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise ValidationError(
                "Invalid input data",
                {"bookmakerIds": f"'{part}' is not an integer id"}
            ) from None
    return ids


def parse_min_profit(raw: str | None) -> float | None:
    """Parse the minProfit query value. Blank means no filter."""
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(
            "Invalid input data",
            {"minProfit": f"'{raw.strip()}' is not a number"}
        ) from None


def build_event_sport_index(events: list[Event]) -> dict[int, int]:
    """Map event id -> sport id."""
    return {e.id: e.sport_id for e in events}


def filter_opportunities(
    opportunities: list[Opportunity],
    events: list[Event],
    filters: OpportunityFilters
) -> list[Opportunity]:
    """Return the opportunities matching every supplied filter, in input order."""
    result = list(opportunities)

    if filters.sport_id is not None:
        sport_by_event = build_event_sport_index(events)
        result = [o for o in result if sport_by_event.get(o.event_id) == filters.sport_id]

    if filters.min_profit is not None:
        result = [o for o in result if o.profit_percent >= filters.min_profit]

    if filters.bookmaker_ids:
        wanted = set(filters.bookmaker_ids)
        result = [
            o for o in result
            if o.bookmaker1_id in wanted or o.bookmaker2_id in wanted
        ]

    return result


def _sort_key(sort_field: str) -> Callable[[EnrichedOpportunity], str | float]:
    if sort_field == "event":
        return lambda e: e.event.name if e.event else ""
    if sort_field == "market":
        return lambda e: e.opportunity.market
    if sort_field == "bookmakers":
        return lambda e: format_bookmaker_pair(
            e.bookmaker1.name if e.bookmaker1 else None,
            e.bookmaker2.name if e.bookmaker2 else None,
        )
    if sort_field == "investment":
        return lambda e: e.opportunity.recommended_investment
    return lambda e: e.opportunity.profit_percent


def validate_sort(sort_field: str, direction: str) -> None:
    invalid = {}
    if sort_field not in SORT_FIELDS:
        invalid["sort"] = f"must be one of {', '.join(SORT_FIELDS)}"
    if direction not in SORT_DIRECTIONS:
        invalid["direction"] = "must be 'asc' or 'desc'"
    if invalid:
        raise ValidationError("Invalid input data", invalid)


def sort_opportunities(
    opportunities: list[EnrichedOpportunity],
    sort_field: str = DEFAULT_SORT_FIELD,
    direction: str = DEFAULT_SORT_DIRECTION
) -> list[EnrichedOpportunity]:
    """Stable sort; records with equal keys keep their relative order."""
    validate_sort(sort_field, direction)
    return sorted(opportunities, key=_sort_key(sort_field), reverse=direction == "desc")
