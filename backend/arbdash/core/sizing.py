"""Stake sizing and profit calculation for two-way arbitrage.

Key Formulas:
    Pn = 1 / decimal_odds_n
    stake1 = C * P1 / (P1 + P2)
    stake2 = C * P2 / (P1 + P2)

    Payout = stake1 * decimal1 = stake2 * decimal2
    Profit = payout - C
"""

from math import isfinite
from typing import NamedTuple

from .errors import ValidationError
from .math import calculate_implied_probability, detect_arbitrage


class CalculationResult(NamedTuple):
    """Result of a what-if profit calculation. Never persisted."""
    stake1: float
    stake2: float
    profit: float
    profit_percent: float
    is_arbitrage_opportunity: bool


def _validate_positive(values: dict[str, float]) -> None:
    """Raise ValidationError listing every non-positive or non-numeric value."""
    invalid: dict[str, str] = {}
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            invalid[name] = "must be a number"
        elif not isfinite(value):
            invalid[name] = "must be a finite number"
        elif value <= 0:
            invalid[name] = "must be greater than 0"

    if invalid:
        raise ValidationError("Invalid input data", invalid)


def calculate_profit(
    odds1: float,
    odds2: float,
    total_stake: float
) -> CalculationResult:
    """
    Split a total stake across two outcomes so both pay out the same.

    The calculation runs even when the odds do not form an arbitrage;
    in that case profit and profit_percent come back negative.

    Args:
        odds1: Decimal odds for outcome 1
        odds2: Decimal odds for outcome 2
        total_stake: Amount to split between both outcomes

    Returns:
        CalculationResult with every amount rounded to 2 decimals

    Raises:
        ValidationError: if any input is not a positive number
    """
    _validate_positive({"odds1": odds1, "odds2": odds2, "totalStake": total_stake})

    arb = detect_arbitrage([odds1, odds2])

    stake1 = total_stake * calculate_implied_probability(odds1) / arb.implied_prob_sum
    stake2 = total_stake * calculate_implied_probability(odds2) / arb.implied_prob_sum

    # Payouts are equal by construction, so leg 1 alone gives the profit
    profit = stake1 * odds1 - total_stake
    profit_percent = profit / total_stake * 100

    return CalculationResult(
        stake1=round(stake1, 2),
        stake2=round(stake2, 2),
        profit=round(profit, 2),
        profit_percent=round(profit_percent, 2),
        is_arbitrage_opportunity=arb.is_arbitrage,
    )
