"""Tests for display helpers and text formatting."""

import pytest

from arbdash.core.models import OpportunityUpdate
from arbdash.engine.enrichment import enrich_opportunities
from arbdash.engine.formatting import (
    format_opportunities_table,
    format_opportunity_json,
    format_opportunity_short,
)
from arbdash.utils.display import (
    decimal_to_american,
    format_american_odds,
    format_bookmaker_pair,
    format_currency,
    format_odds,
    format_percentage,
)


def test_format_currency():
    assert format_currency(1234.5) == "€1,234.50"
    assert format_currency(-2.5, "$") == "-$2.50"
    assert format_currency(0) == "€0.00"


def test_format_percentage():
    assert format_percentage(8.44) == "8.4%"
    assert format_percentage(-0.3) == "-0.3%"


def test_format_bookmaker_pair():
    assert format_bookmaker_pair("Bet365", "Betfair") == "Bet365 | Betfair"
    assert format_bookmaker_pair(None, "Betfair") == " | Betfair"


@pytest.mark.parametrize("decimal, american", [(2.10, 110), (3.00, 200), (1.50, -200), (1.909, -110)])
def test_decimal_to_american(decimal, american):
    assert decimal_to_american(decimal) == american


def test_decimal_to_american_rejects_even_money_or_less():
    with pytest.raises(ValueError):
        decimal_to_american(1.0)


def test_format_odds():
    assert format_american_odds(110) == "+110"
    assert format_american_odds(-200) == "-200"
    assert format_odds(2.10) == "2.10 (+110)"
    assert format_odds(0.9) == "0.90"


def test_opportunity_json_shape(seeded_store):
    enriched = enrich_opportunities(seeded_store, [seeded_store.get_opportunity(1)])[0]
    data = format_opportunity_json(enriched)

    assert data["id"] == 1
    assert data["eventId"] == 1
    assert data["bookmaker1Id"] == 1
    assert data["profitPercent"] == 8.4
    assert data["recommendedInvestment"] == 1000
    assert data["isActive"] is True
    assert "createdAt" in data
    assert data["event"]["sportId"] == 1
    assert data["sport"]["name"] == "Football"
    assert data["bookmaker2"]["name"] == "Betfair"


def test_short_summary(seeded_store):
    enriched = enrich_opportunities(seeded_store, [seeded_store.get_opportunity(1)])[0]
    assert format_opportunity_short(enriched) == (
        "+8.4% | Barcelona vs Real Madrid | Match Result | Bet365 | Betfair"
    )


def test_short_summary_negative_profit(seeded_store):
    opportunity = seeded_store.update_opportunity(1, OpportunityUpdate(profit_percent=-1.2))
    enriched = enrich_opportunities(seeded_store, [opportunity])[0]
    assert format_opportunity_short(enriched).startswith("-1.2% | Barcelona vs Real Madrid")


def test_table(seeded_store):
    enriched = enrich_opportunities(seeded_store, seeded_store.list_active_opportunities())
    table = format_opportunities_table(enriched).splitlines()

    assert len(table) == 2 + 4
    assert "Barcelona vs Real Madrid" in table[2]
    assert "€1,000.00" in table[2]
    assert "2.10 (+110) / 1.92 (-109)" in table[2]


def test_empty_table():
    assert format_opportunities_table([]) == "No opportunities found."
