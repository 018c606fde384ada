import logging
from typing import Any, Mapping, Optional

# ✅ Absolute imports — stable for direct testing & FastAPI
from common import config_loader
from common.api_headers import ApiError, redact
from common.odds_filters import filter_games
from common.odds_params import build_upstream_params
from services import odds_api_service
from services.odds_api_service import NFL, PROP_MARKETS_BY_SPORT
from agents.odds_agent.models import OddsResult, RouteConfig

logger = logging.getLogger(__name__)


# Core markets (moneyline/spreads/totals): failures are loud
NFL_ODDS = RouteConfig(
    name="NFL odds",
    sport=NFL,
    default_markets=config_loader.ODDS_CORE_MARKETS,
    default_bookmakers=config_loader.ODDS_BOOKMAKERS,
    default_regions=config_loader.ODDS_REGIONS,
    default_odds_format=config_loader.ODDS_ODDS_FORMAT,
    failure_policy="hard_error",
    error_message="Failed to fetch NFL odds.",
)

SPORT_ODDS = NFL_ODDS.model_copy(update={
    "name": "odds",
    "sport": None,
    "error_message": "Failed to fetch odds.",
})

NFL_TEAM_ODDS = NFL_ODDS.model_copy(update={
    "name": "NFL team odds",
    "error_message": "Failed to fetch NFL team odds.",
})

# Player props: plan-gated upstream, so failures degrade to an empty list
NFL_PROPS = RouteConfig(
    name="NFL props",
    sport=NFL,
    default_markets=config_loader.ODDS_PROP_MARKETS,
    default_bookmakers=config_loader.ODDS_BOOKMAKERS,
    default_regions=config_loader.ODDS_REGIONS,
    default_odds_format=config_loader.ODDS_ODDS_FORMAT,
    failure_policy="soft_empty",
    error_message="Failed to fetch NFL props.",
)

SPORT_PROPS = NFL_PROPS.model_copy(update={
    "name": "props",
    "sport": None,
    "sport_default_markets": dict(PROP_MARKETS_BY_SPORT),
    "error_message": "Failed to fetch props.",
})


def _failure(config: RouteConfig, detail: str) -> OddsResult:
    logger.error(f"Error fetching {config.name}: {detail}")
    if config.failure_policy == "soft_empty":
        return OddsResult(status="soft_failure", games=[])
    return OddsResult(status="hard_failure", error=config.error_message, details=detail)


def fetch_route_odds(
    config: RouteConfig,
    query: Mapping[str, Optional[str]],
    sport: Optional[str] = None,
    team_override: Optional[str] = None,
) -> OddsResult:
    """
    Normalize the query, make the single upstream call, then filter.

    Never raises for upstream problems: transport errors, timeouts, non-200
    responses and non-list payloads all become a soft or hard failure
    depending on `config.failure_policy`.
    """
    sport_key = config.sport or odds_api_service.resolve_sport(sport or "")
    api_key = config_loader.ODDS_API_KEY or ""
    params = build_upstream_params(sport_key, query, config, api_key=api_key)

    try:
        data, headers = odds_api_service.get_odds(params)
    except ApiError as e:
        return _failure(config, redact(str(e), [api_key]))

    if not isinstance(data, list):
        detail: Any = data.get("message", data) if isinstance(data, dict) else data
        return _failure(config, redact(f"Unexpected upstream payload: {detail!r}"[:300], [api_key]))

    team = team_override if team_override is not None else query.get("team")
    games = filter_games(data, team, query.get("windowHours"))

    return OddsResult(
        status="ok",
        games=games,
        requests_remaining=headers.get("x-requests-remaining"),
    )
