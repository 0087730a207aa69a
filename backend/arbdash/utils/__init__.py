from .display import (
    format_currency,
    format_percentage,
    format_bookmaker_pair,
    decimal_to_american,
    format_american_odds,
    format_odds,
)
from .time import utc_now, Timer

__all__ = [
    "format_currency",
    "format_percentage",
    "format_bookmaker_pair",
    "decimal_to_american",
    "format_american_odds",
    "format_odds",
    "utc_now",
    "Timer",
]
