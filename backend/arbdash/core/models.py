from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..config import MIN_DECIMAL_ODDS
from ..utils.time import utc_now


ActivityType = Literal["new_opportunity", "odds_change", "opportunity_expired", "system_update"]


class ApiModel(BaseModel):
    """Base model: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# Bookmakers

class BookmakerCreate(ApiModel):
    name: str = Field(min_length=1)
    logo: str | None = None
    active: bool = True


class BookmakerUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=1)
    logo: str | None = None
    active: bool | None = None


class Bookmaker(BookmakerCreate):
    id: int


# Sports

class SportCreate(ApiModel):
    name: str = Field(min_length=1)
    icon: str | None = None
    active: bool = True


class SportUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=1)
    icon: str | None = None
    active: bool | None = None


class Sport(SportCreate):
    id: int


# Events

def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC so all start times compare."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class EventCreate(ApiModel):
    name: str = Field(min_length=1)
    sport_id: int
    start_time: datetime
    competition: str | None = None
    status: str = "upcoming"

    @field_validator("start_time")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


class EventUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=1)
    sport_id: int | None = None
    start_time: datetime | None = None
    competition: str | None = None
    status: str | None = None

    @field_validator("start_time")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value) if value is not None else None


class Event(EventCreate):
    id: int


# Opportunities

class OpportunityCreate(ApiModel):
    """
    Stored arbitrage opportunity.

    profit_percent and recommended_investment are taken as given;
    they are never recomputed from the odds.
    """
    event_id: int
    market: str = Field(min_length=1)
    bookmaker1_id: int
    bookmaker2_id: int
    odds1: float = Field(gt=0)
    odds2: float = Field(gt=0)
    profit_percent: float
    recommended_investment: float = Field(ge=0)
    is_active: bool = True


class OpportunityUpdate(ApiModel):
    event_id: int | None = None
    market: str | None = Field(default=None, min_length=1)
    bookmaker1_id: int | None = None
    bookmaker2_id: int | None = None
    odds1: float | None = Field(default=None, gt=0)
    odds2: float | None = Field(default=None, gt=0)
    profit_percent: float | None = None
    recommended_investment: float | None = Field(default=None, ge=0)
    is_active: bool | None = None


class Opportunity(OpportunityCreate):
    id: int
    created_at: datetime = Field(default_factory=utc_now)


# Activity logs

class ActivityLogCreate(ApiModel):
    type: ActivityType
    message: str
    related_opportunity_id: int | None = None


class ActivityLog(ActivityLogCreate):
    id: int
    created_at: datetime = Field(default_factory=utc_now)


# Calculator and aggregates

class CalculatorRequest(ApiModel):
    """What-if calculator input. Odds below MIN_DECIMAL_ODDS are rejected."""
    odds1: float = Field(ge=MIN_DECIMAL_ODDS, allow_inf_nan=False)
    odds2: float = Field(ge=MIN_DECIMAL_ODDS, allow_inf_nan=False)
    total_stake: float = Field(gt=0, allow_inf_nan=False)


class DashboardStats(ApiModel):
    active_opportunities_count: int = 0
    average_profit_percent: float = 0.0
    highest_profit_percent: float = 0.0
    highest_profit_opportunity_id: int | None = None

    def to_json(self) -> dict:
        # The id is omitted entirely when there is no active opportunity
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SportCount(ApiModel):
    sport_id: int
    sport_name: str
    count: int
