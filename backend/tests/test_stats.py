"""Tests for dashboard aggregates."""

from datetime import datetime, timezone

from arbdash.core.models import Event, Opportunity, Sport
from arbdash.engine.stats import (
    count_by_sport,
    get_dashboard_stats,
    get_sports_distribution,
    summarize_opportunities,
)

START = datetime(2026, 5, 15, 18, 0, tzinfo=timezone.utc)


def opportunity(opp_id: int, event_id: int, profit: float) -> Opportunity:
    return Opportunity(
        id=opp_id,
        event_id=event_id,
        market="Match Result",
        bookmaker1_id=1,
        bookmaker2_id=2,
        odds1=2.0,
        odds2=2.1,
        profit_percent=profit,
        recommended_investment=100,
    )


class TestSummarize:
    def test_empty(self):
        stats = summarize_opportunities([])

        assert stats.active_opportunities_count == 0
        assert stats.average_profit_percent == 0
        assert stats.highest_profit_percent == 0
        assert stats.highest_profit_opportunity_id is None
        assert stats.to_json() == {
            "activeOpportunitiesCount": 0,
            "averageProfitPercent": 0,
            "highestProfitPercent": 0,
        }

    def test_average_is_rounded(self):
        stats = summarize_opportunities([
            opportunity(1, 1, 1.0),
            opportunity(2, 1, 2.0),
            opportunity(3, 1, 2.0),
        ])
        assert stats.average_profit_percent == 1.67

    def test_first_maximum_wins(self):
        stats = summarize_opportunities([
            opportunity(1, 1, 3.0),
            opportunity(2, 1, 9.5),
            opportunity(3, 1, 9.5),
        ])
        assert stats.highest_profit_percent == 9.5
        assert stats.highest_profit_opportunity_id == 2

    def test_seeded_dashboard(self, seeded_store):
        stats = get_dashboard_stats(seeded_store)

        assert stats.active_opportunities_count == 4
        assert stats.average_profit_percent == 6.5
        assert stats.highest_profit_percent == 8.4
        assert stats.highest_profit_opportunity_id == 1


class TestSportsDistribution:
    def test_every_sport_listed_with_zero_counts(self):
        sports = [Sport(id=1, name="Football"), Sport(id=2, name="Tennis"), Sport(id=3, name="Golf")]
        events = [Event(id=10, name="A vs B", sport_id=2, start_time=START)]

        result = count_by_sport(sports, events, [opportunity(1, 10, 5.0)])

        assert [(d.sport_name, d.count) for d in result] == [
            ("Tennis", 1),
            ("Football", 0),
            ("Golf", 0),
        ]

    def test_unknown_event_not_counted(self):
        sports = [Sport(id=1, name="Football")]
        result = count_by_sport(sports, [], [opportunity(1, 77, 5.0)])
        assert result[0].count == 0

    def test_seeded_distribution(self, seeded_store):
        result = get_sports_distribution(seeded_store)

        assert [entry.to_json() for entry in result] == [
            {"sportId": 1, "sportName": "Football", "count": 2},
            {"sportId": 2, "sportName": "Basketball", "count": 1},
            {"sportId": 3, "sportName": "Tennis", "count": 1},
            {"sportId": 4, "sportName": "Ice Hockey", "count": 0},
            {"sportId": 5, "sportName": "Baseball", "count": 0},
        ]
