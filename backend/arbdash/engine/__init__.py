from .enrichment import (
    EnrichedOpportunity,
    EnrichedEvent,
    EnrichedActivityLog,
    enrich_opportunities,
    enrich_events,
    enrich_activity_logs,
)
from .filters import (
    OpportunityFilters,
    parse_bookmaker_ids,
    parse_min_profit,
    filter_opportunities,
    sort_opportunities,
    SORT_FIELDS,
    DEFAULT_SORT_FIELD,
    DEFAULT_SORT_DIRECTION,
)
from .queries import (
    list_opportunities,
    list_high_profit_opportunities,
    get_opportunity_detail,
    validate_opportunity_references,
    list_upcoming_events,
    list_activity_logs,
)
from .stats import get_dashboard_stats, get_sports_distribution
from .formatting import (
    format_opportunity_json,
    format_event_json,
    format_activity_log_json,
    format_calculation_json,
    format_opportunity_short,
    format_opportunities_table,
)

__all__ = [
    "EnrichedOpportunity",
    "EnrichedEvent",
    "EnrichedActivityLog",
    "enrich_opportunities",
    "enrich_events",
    "enrich_activity_logs",
    "OpportunityFilters",
    "parse_bookmaker_ids",
    "parse_min_profit",
    "filter_opportunities",
    "sort_opportunities",
    "SORT_FIELDS",
    "DEFAULT_SORT_FIELD",
    "DEFAULT_SORT_DIRECTION",
    "list_opportunities",
    "list_high_profit_opportunities",
    "get_opportunity_detail",
    "validate_opportunity_references",
    "list_upcoming_events",
    "list_activity_logs",
    "get_dashboard_stats",
    "get_sports_distribution",
    "format_opportunity_json",
    "format_event_json",
    "format_activity_log_json",
    "format_calculation_json",
    "format_opportunity_short",
    "format_opportunities_table",
]
