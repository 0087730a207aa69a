"""Display helpers for amounts, percentages and odds."""

from ..config import DEFAULT_CURRENCY


def format_currency(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """
    Format an amount with two decimals and thousands separators.

    Examples:
        1234.5 → €1,234.50
        -2.5 → -€2.50
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):,.2f}"


def format_percentage(percent: float) -> str:
    """Format a percentage with one decimal, e.g. 8.44 → 8.4%."""
    return f"{percent:.1f}%"


def format_bookmaker_pair(name1: str | None, name2: str | None) -> str:
    """Display string for the two bookmakers of an opportunity: 'A | B'."""
    return f"{name1 or ''} | {name2 or ''}"


def decimal_to_american(decimal_odds: float) -> int:
    """
    Convert Decimal odds to American odds.

    Decimal → American:
    - If decimal >= 2.0: american = (decimal - 1) * 100
    - If decimal < 2.0: american = -100 / (decimal - 1)

    Examples:
        2.10 → +110
        1.909 → -110
        3.00 → +200
        1.50 → -200
    """
    if decimal_odds <= 1.0:
        raise ValueError(f"Decimal odds must be > 1.0, got {decimal_odds}")
    if decimal_odds >= 2.0:
        return int(round((decimal_odds - 1) * 100))
    return int(round(-100 / (decimal_odds - 1)))


def format_american_odds(american_odds: int) -> str:
    """Format American odds with + or - prefix."""
    if american_odds > 0:
        return f"+{american_odds}"
    return str(american_odds)


def format_odds(decimal_odds: float) -> str:
    """Decimal odds with their American equivalent, e.g. '2.10 (+110)'."""
    if decimal_odds <= 1.0:
        return f"{decimal_odds:.2f}"
    return f"{decimal_odds:.2f} ({format_american_odds(decimal_to_american(decimal_odds))})"
