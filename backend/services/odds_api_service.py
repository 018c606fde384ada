# backend/services/odds_api_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from agents.odds_agent.models import UpstreamParams
from common.api_headers import get_json_with_headers
from common.config_loader import ODDS_API_BASE, ODDS_API_TIMEOUT

logger = logging.getLogger(__name__)

NFL = "americanfootball_nfl"

# Friendly path segments -> The Odds API sport keys. Anything else is passed through.
SPORT_ALIASES = {
    "nfl": NFL,
    "ncaaf": "americanfootball_ncaaf",
    "cfb": "americanfootball_ncaaf",
    "nba": "basketball_nba",
    "ncaab": "basketball_ncaab",
    "wnba": "basketball_wnba",
    "mlb": "baseball_mlb",
    "nhl": "icehockey_nhl",
    "epl": "soccer_epl",
    "mls": "soccer_usa_mls",
}

# Default player-prop markets per sport, used by /props/{sport}
PROP_MARKETS_BY_SPORT = {
    "americanfootball_ncaaf": "player_pass_yds,player_pass_tds,player_rush_yds,player_reception_yds,player_receptions",
    "basketball_nba": "player_points,player_rebounds,player_assists,player_threes",
    "basketball_ncaab": "player_points,player_rebounds,player_assists",
    "basketball_wnba": "player_points,player_rebounds,player_assists",
    "baseball_mlb": "batter_hits,batter_total_bases,batter_home_runs,pitcher_strikeouts",
    "icehockey_nhl": "player_points,player_goals,player_shots_on_goal",
}


def resolve_sport(sport: str) -> str:
    """Map a short code like 'nba' to its provider key; unknown values pass through."""
    key = str(sport or "").strip().lower()
    return SPORT_ALIASES.get(key, key)


def odds_url(sport: str) -> str:
    return f"{ODDS_API_BASE.rstrip('/')}/sports/{sport}/odds"


def get_odds(params: UpstreamParams) -> Tuple[Any, Dict[str, str]]:
    """
    Single upstream call for one sport. No retries.
    Returns (payload, headers); raises ApiError on failure.
    """
    url = odds_url(params.sport)
    logger.info(
        f"[OddsAPI] GET {url} regions={params.regions} markets={params.markets} "
        f"oddsFormat={params.oddsFormat} bookmakers={params.bookmakers}"
    )
    data, headers = get_json_with_headers(url, params.query(), timeout=ODDS_API_TIMEOUT)
    logger.info(f"[OddsAPI] OK remaining={headers.get('x-requests-remaining')}")
    return data, headers
