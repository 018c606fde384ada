import os
from dotenv import load_dotenv

# Load the .env file into environment variables
load_dotenv()


def get_env(name: str, default: str | None = None) -> str | None:
    """Read an environment variable, treating blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_int_env(name: str, default: int) -> int:
    try:
        return int(get_env(name, str(default)))
    except (TypeError, ValueError):
        return default


def get_float_env(name: str, default: float) -> float:
    try:
        value = float(get_env(name, str(default)))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


# Core configuration for The Odds API
# Missing key is not fatal: upstream rejects the call and the route failure policy applies.
ODDS_API_KEY = get_env("ODDS_API_KEY", "")
ODDS_API_BASE = get_env("ODDS_API_BASE", "https://api.the-odds-api.com/v4")
ODDS_API_TIMEOUT = get_float_env("ODDS_API_TIMEOUT", 15.0)

ODDS_REGIONS = get_env("ODDS_REGIONS", "us")
ODDS_ODDS_FORMAT = get_env("ODDS_ODDS_FORMAT", "american")
ODDS_BOOKMAKERS = get_env("ODDS_BOOKMAKERS", "draftkings,fanduel,betmgm,caesars,bet365,thescore")
ODDS_CORE_MARKETS = get_env("ODDS_CORE_MARKETS", "h2h,spreads,totals")
ODDS_PROP_MARKETS = get_env(
    "ODDS_PROP_MARKETS",
    ",".join([
        "player_pass_yds",
        "player_pass_tds",
        "player_rush_yds",
        "player_recv_yds",
        "player_receptions",
        "player_anytime_td",
    ]),
)

# Cache-Control max-age for successful responses and for the props fallback
ODDS_CACHE_MAX_AGE = get_int_env("ODDS_CACHE_MAX_AGE", 60)
ODDS_FALLBACK_CACHE_MAX_AGE = get_int_env("ODDS_FALLBACK_CACHE_MAX_AGE", 10)

# When on, hard-failure bodies carry the (redacted) upstream error text
ODDS_EXPOSE_ERROR_DETAILS = get_env("ODDS_EXPOSE_ERROR_DETAILS", "0") == "1"

PORT = get_int_env("PORT", 3000)
TZ = get_env("TZ", "UTC")
