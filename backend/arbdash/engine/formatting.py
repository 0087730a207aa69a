"""JSON and text rendering of query results.

JSON keys are camelCase. Joined records are nested under `event`,
`sport`, `bookmaker1` and `bookmaker2`; a reference that did not
resolve renders as null.
"""

from ..core.models import ApiModel
from ..core.sizing import CalculationResult
from ..utils.display import format_bookmaker_pair, format_currency, format_odds, format_percentage
from .enrichment import EnrichedActivityLog, EnrichedEvent, EnrichedOpportunity


def _json_or_none(record: ApiModel | None) -> dict | None:
    return record.to_json() if record is not None else None


def format_opportunity_json(enriched: EnrichedOpportunity) -> dict:
    """
    Format an enriched opportunity as a JSON-serializable dict.

    The stored fields come first, followed by the joined records.
    """
    return {
        **enriched.opportunity.to_json(),
        "event": _json_or_none(enriched.event),
        "sport": _json_or_none(enriched.sport),
        "bookmaker1": _json_or_none(enriched.bookmaker1),
        "bookmaker2": _json_or_none(enriched.bookmaker2),
    }


def format_event_json(enriched: EnrichedEvent) -> dict:
    return {
        **enriched.event.to_json(),
        "sport": _json_or_none(enriched.sport),
    }


def format_activity_log_json(enriched: EnrichedActivityLog) -> dict:
    """Activity log; `opportunity` is only present when it resolved."""
    data = enriched.log.to_json()
    if enriched.opportunity is not None:
        data["opportunity"] = format_opportunity_json(enriched.opportunity)
    return data


def format_calculation_json(result: CalculationResult) -> dict:
    return {
        "profit": result.profit,
        "profitPercent": result.profit_percent,
        "stake1": result.stake1,
        "stake2": result.stake2,
        "isArbitrageOpportunity": result.is_arbitrage_opportunity,
    }


def format_opportunity_short(enriched: EnrichedOpportunity) -> str:
    """
    Format opportunity as single-line summary.

    Example: "+8.4% | Barcelona vs Real Madrid | Match Result | Bet365 | Betfair"
    """
    opp = enriched.opportunity
    event = enriched.event.name if enriched.event else "Unknown event"
    bookmakers = format_bookmaker_pair(
        enriched.bookmaker1.name if enriched.bookmaker1 else None,
        enriched.bookmaker2.name if enriched.bookmaker2 else None,
    )
    return f"{opp.profit_percent:+.1f}% | {event} | {opp.market} | {bookmakers}"


def format_opportunities_table(opportunities: list[EnrichedOpportunity]) -> str:
    """
    Format multiple opportunities as ASCII table.

    For CLI and plain-text output.
    """
    if not opportunities:
        return "No opportunities found."

    lines = []
    header = (
        f"{'Profit':>7} {'Event':<30} {'Market':<16} "
        f"{'Odds':<28} {'Invest':>12} {'Bookmakers'}"
    )
    lines.append(header)
    lines.append("-" * len(header))

    for enriched in opportunities:
        opp = enriched.opportunity
        name = enriched.event.name if enriched.event else "Unknown event"
        event = name[:28] + ".." if len(name) > 30 else name
        odds = f"{format_odds(opp.odds1)} / {format_odds(opp.odds2)}"
        bookmakers = format_bookmaker_pair(
            enriched.bookmaker1.name if enriched.bookmaker1 else None,
            enriched.bookmaker2.name if enriched.bookmaker2 else None,
        )
        lines.append(
            f"{format_percentage(opp.profit_percent):>7} {event:<30} {opp.market[:16]:<16} "
            f"{odds:<28} {format_currency(opp.recommended_investment):>12} {bookmakers}"
        )

    return "\n".join(lines)
