"""Application configuration.

Values come from the environment (optionally a `.env` file at the
repository root) and fall back to the defaults below.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[2]
env_path = ROOT_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


APP_NAME = os.getenv("ARBDASH_APP_NAME", "Arbitrage Dashboard")
APP_VERSION = "1.0.0"

# Server
API_HOST = os.getenv("ARBDASH_HOST", "0.0.0.0")
API_PORT = int(os.getenv("ARBDASH_PORT", "8000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("ARBDASH_CORS_ORIGINS", "*").split(",") if o.strip()]

# Logging
LOG_LEVEL = os.getenv("ARBDASH_LOG_LEVEL", "INFO").upper()

# Store
SEED_DEMO_DATA = _env_bool("ARBDASH_SEED_DEMO_DATA", True)

# Calculator
MIN_DECIMAL_ODDS = 1.01  # Lowest odds a bookmaker realistically offers

# List endpoints
DEFAULT_HIGH_PROFIT_LIMIT = 4
DEFAULT_EVENTS_LIMIT = 10
DEFAULT_ACTIVITY_LIMIT = 10
MAX_LIST_LIMIT = 100

# Display
DEFAULT_CURRENCY = os.getenv("ARBDASH_CURRENCY", "€")
