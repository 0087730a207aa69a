"""Core mathematical functions for arbitrage detection.

All functions are pure and have no side effects.

Key Formulas:
- Implied Probability: P = 1 / decimal_odds
- Arbitrage Condition: P1 + P2 < 1
- Arbitrage Margin %: (1 - (P1 + P2)) * 100
"""

from typing import NamedTuple


class ArbitrageResult(NamedTuple):
    """Result of arbitrage detection."""
    is_arbitrage: bool
    implied_prob_sum: float
    margin_pct: float  # Positive below 1, negative for an overround book


def calculate_implied_probability(decimal_odds: float) -> float:
    """
    Calculate implied probability from decimal odds.

    Formula: P = 1 / decimal_odds

    Examples:
        2.00 → 0.50 (50%)
        1.50 → 0.667 (66.7%)
        3.00 → 0.333 (33.3%)
    """
    if decimal_odds <= 0:
        raise ValueError(f"Decimal odds must be > 0, got {decimal_odds}")
    return 1.0 / decimal_odds


def detect_arbitrage(decimal_odds: list[float]) -> ArbitrageResult:
    """
    Detect if arbitrage exists for a set of outcomes.

    The book is covered when the implied probabilities of all
    outcomes sum to less than 1.

    Args:
        decimal_odds: List of decimal odds for each outcome

    Returns:
        ArbitrageResult with detection results
    """
    if len(decimal_odds) < 2:
        raise ValueError("Need at least 2 outcomes to check arbitrage")

    prob_sum = sum(calculate_implied_probability(odds) for odds in decimal_odds)

    return ArbitrageResult(
        is_arbitrage=prob_sum < 1.0,
        implied_prob_sum=prob_sum,
        margin_pct=(1.0 - prob_sum) * 100,
    )
