from .models import (
    Bookmaker,
    BookmakerCreate,
    BookmakerUpdate,
    Sport,
    SportCreate,
    SportUpdate,
    Event,
    EventCreate,
    EventUpdate,
    Opportunity,
    OpportunityCreate,
    OpportunityUpdate,
    ActivityLog,
    ActivityLogCreate,
    CalculatorRequest,
    DashboardStats,
    SportCount,
)
from .errors import ArbDashError, ValidationError, NotFoundError, StoreError
from .math import calculate_implied_probability, detect_arbitrage
from .sizing import CalculationResult, calculate_profit

__all__ = [
    "Bookmaker",
    "BookmakerCreate",
    "BookmakerUpdate",
    "Sport",
    "SportCreate",
    "SportUpdate",
    "Event",
    "EventCreate",
    "EventUpdate",
    "Opportunity",
    "OpportunityCreate",
    "OpportunityUpdate",
    "ActivityLog",
    "ActivityLogCreate",
    "CalculatorRequest",
    "DashboardStats",
    "SportCount",
    "ArbDashError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
    "calculate_implied_probability",
    "detect_arbitrage",
    "CalculationResult",
    "calculate_profit",
]
