"""Tests for opportunity filtering and sorting."""

import math
from datetime import datetime, timezone

import pytest

from arbdash.core.errors import ValidationError
from arbdash.core.models import Event, Opportunity
from arbdash.engine.enrichment import enrich_opportunities
from arbdash.engine.filters import (
    OpportunityFilters,
    filter_opportunities,
    parse_bookmaker_ids,
    parse_min_profit,
    sort_opportunities,
)

START = datetime(2026, 5, 15, 18, 0, tzinfo=timezone.utc)


def event(event_id: int, sport_id: int) -> Event:
    return Event(id=event_id, name=f"Event {event_id}", sport_id=sport_id, start_time=START)


def opportunity(opp_id: int, event_id: int, profit: float, bm1: int = 1, bm2: int = 2) -> Opportunity:
    return Opportunity(
        id=opp_id,
        event_id=event_id,
        market="Match Result",
        bookmaker1_id=bm1,
        bookmaker2_id=bm2,
        odds1=2.0,
        odds2=2.1,
        profit_percent=profit,
        recommended_investment=500,
    )


EVENTS = [event(1, 1), event(2, 2), event(3, 1)]
OPPORTUNITIES = [
    opportunity(1, 1, 8.4, bm1=1, bm2=3),
    opportunity(2, 2, 7.2, bm1=2, bm2=5),
    opportunity(3, 3, 4.6, bm1=4, bm2=1),
    opportunity(4, 99, 6.0, bm1=2, bm2=3),  # event no longer exists
]


def ids(records):
    return [r.id for r in records]


class TestFilterOpportunities:
    def test_no_filters_keeps_everything(self):
        assert ids(filter_opportunities(OPPORTUNITIES, EVENTS, OpportunityFilters())) == [1, 2, 3, 4]

    def test_sport_filter_uses_event_index(self):
        result = filter_opportunities(OPPORTUNITIES, EVENTS, OpportunityFilters(sport_id=1))
        assert ids(result) == [1, 3]

    def test_sport_without_events_is_empty(self):
        assert filter_opportunities(OPPORTUNITIES, EVENTS, OpportunityFilters(sport_id=9)) == []

    def test_min_profit_is_inclusive(self):
        result = filter_opportunities(OPPORTUNITIES, EVENTS, OpportunityFilters(min_profit=7.2))
        assert ids(result) == [1, 2]

    def test_bookmaker_filter_matches_either_leg(self):
        result = filter_opportunities(OPPORTUNITIES, EVENTS, OpportunityFilters(bookmaker_ids=[1]))
        assert ids(result) == [1, 3]

        result = filter_opportunities(OPPORTUNITIES, EVENTS, OpportunityFilters(bookmaker_ids=[5, 4]))
        assert ids(result) == [2, 3]

    def test_filters_are_combined(self):
        filters = OpportunityFilters(sport_id=1, min_profit=5, bookmaker_ids=[3])
        assert ids(filter_opportunities(OPPORTUNITIES, EVENTS, filters)) == [1]

    def test_nan_min_profit_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            OpportunityFilters(min_profit=math.nan)
        assert "minProfit" in exc_info.value.fields


class TestParseBookmakerIds:
    def test_parses_and_strips(self):
        assert parse_bookmaker_ids(" 1, 3,,5 ") == [1, 3, 5]

    def test_empty_means_no_filter(self):
        assert parse_bookmaker_ids(None) == []
        assert parse_bookmaker_ids("") == []

    def test_rejects_non_integer(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_bookmaker_ids("1,abc")
        assert "bookmakerIds" in exc_info.value.fields


class TestParseMinProfit:
    def test_parses_number(self):
        assert parse_min_profit("5.8") == 5.8

    def test_blank_means_no_filter(self):
        assert parse_min_profit(None) is None
        assert parse_min_profit("") is None
        assert parse_min_profit("  ") is None

    def test_rejects_non_number(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_min_profit("lots")
        assert "minProfit" in exc_info.value.fields


class TestSortOpportunities:
    @pytest.fixture
    def enriched(self, seeded_store):
        return enrich_opportunities(seeded_store, seeded_store.list_active_opportunities())

    def test_default_is_profit_descending(self, enriched):
        assert [e.opportunity.id for e in sort_opportunities(enriched)] == [1, 2, 3, 4]

    def test_profit_ascending(self, enriched):
        result = sort_opportunities(enriched, "profitPercent", "asc")
        assert [e.opportunity.id for e in result] == [4, 3, 2, 1]

    def test_event_name(self, enriched):
        result = sort_opportunities(enriched, "event", "asc")
        assert [e.event.name for e in result] == [
            "Barcelona vs Real Madrid",
            "Djokovic vs Nadal",
            "Lakers vs Bulls",
            "Liverpool vs Manchester City",
        ]

    def test_market(self, enriched):
        result = sort_opportunities(enriched, "market", "desc")
        assert [e.opportunity.market for e in result] == [
            "Total Points",
            "Over/Under 2.5",
            "Match Winner",
            "Match Result",
        ]

    def test_bookmaker_pair(self, enriched):
        result = sort_opportunities(enriched, "bookmakers", "asc")
        assert [e.opportunity.id for e in result] == [1, 3, 2, 4]

    def test_investment(self, enriched):
        result = sort_opportunities(enriched, "investment", "asc")
        assert [e.opportunity.recommended_investment for e in result] == [500, 750, 800, 1000]

    def test_ties_keep_input_order(self, seeded_store):
        same = [opportunity(i, 1, 5.0) for i in (3, 1, 2)]
        enriched = enrich_opportunities(seeded_store, same)

        for direction in ("asc", "desc"):
            result = sort_opportunities(enriched, "profitPercent", direction)
            assert [e.opportunity.id for e in result] == [3, 1, 2]

    def test_missing_event_sorts_first_ascending(self, seeded_store):
        enriched = enrich_opportunities(seeded_store, [opportunity(1, 1, 5.0), opportunity(2, 99, 5.0)])
        result = sort_opportunities(enriched, "event", "asc")
        assert [e.opportunity.id for e in result] == [2, 1]

    def test_unknown_sort_field(self, enriched):
        with pytest.raises(ValidationError) as exc_info:
            sort_opportunities(enriched, "odds", "up")
        assert set(exc_info.value.fields) == {"sort", "direction"}
