# backend/routes/odds.py
from __future__ import annotations

from typing import Dict, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from agents.odds_agent import fetch_odds
from agents.odds_agent.fetch_odds import fetch_route_odds
from agents.odds_agent.models import OddsResult, RouteConfig
from common import config_loader

router = APIRouter(tags=["Odds"])


def _query(
    books: Optional[str],
    book: Optional[str],
    regions: Optional[str],
    markets: Optional[str],
    oddsFormat: Optional[str],
    team: Optional[str],
    windowHours: Optional[str],
) -> Dict[str, Optional[str]]:
    return {
        "books": books,
        "book": book,
        "regions": regions,
        "markets": markets,
        "oddsFormat": oddsFormat,
        "team": team,
        "windowHours": windowHours,
    }


def _to_response(result: OddsResult) -> JSONResponse:
    """Turn a pipeline result into the HTTP contract: 200 list, 200 [] (short TTL) or 500."""
    if result.status == "hard_failure":
        body = {"error": result.error}
        if config_loader.ODDS_EXPOSE_ERROR_DETAILS and result.details:
            body["details"] = result.details
        return JSONResponse(status_code=500, content=body)

    if result.status == "soft_failure":
        return JSONResponse(
            content=[],
            headers={"Cache-Control": f"public, max-age={config_loader.ODDS_FALLBACK_CACHE_MAX_AGE}"},
        )

    headers = {"Cache-Control": f"public, max-age={config_loader.ODDS_CACHE_MAX_AGE}"}
    if result.requests_remaining:
        headers["X-OddsAPI-Requests-Remaining"] = str(result.requests_remaining)
    return JSONResponse(content=result.games, headers=headers)


def _proxy(
    config: RouteConfig,
    query: Dict[str, Optional[str]],
    sport: Optional[str] = None,
    team_override: Optional[str] = None,
) -> JSONResponse:
    return _to_response(fetch_route_odds(config, query, sport=sport, team_override=team_override))


# Handlers are plain `def`: FastAPI runs them in its threadpool, so the
# blocking upstream call does not stall the event loop.

@router.get("/nfl-odds")
def nfl_odds(
    books: Optional[str] = Query(None, description="Comma-separated bookmakers"),
    book: Optional[str] = Query(None, description="Single bookmaker (legacy)"),
    regions: Optional[str] = None,
    markets: Optional[str] = None,
    oddsFormat: Optional[str] = None,
    team: Optional[str] = Query(None, description='e.g. "Philadelphia Eagles,Dallas Cowboys"'),
    windowHours: Optional[str] = Query(None, description="Only games starting within N hours"),
) -> JSONResponse:
    q = _query(books, book, regions, markets, oddsFormat, team, windowHours)
    return _proxy(fetch_odds.NFL_ODDS, q)


@router.get("/odds/{sport}")
def sport_odds(
    sport: str,
    books: Optional[str] = None,
    book: Optional[str] = None,
    regions: Optional[str] = None,
    markets: Optional[str] = None,
    oddsFormat: Optional[str] = None,
    team: Optional[str] = None,
    windowHours: Optional[str] = None,
) -> JSONResponse:
    q = _query(books, book, regions, markets, oddsFormat, team, windowHours)
    return _proxy(fetch_odds.SPORT_ODDS, q, sport=sport)


@router.get("/nfl-props")
def nfl_props(
    books: Optional[str] = None,
    book: Optional[str] = None,
    regions: Optional[str] = None,
    markets: Optional[str] = Query(None, description="Override the default NFL prop markets"),
    oddsFormat: Optional[str] = None,
    team: Optional[str] = None,
    windowHours: Optional[str] = None,
) -> JSONResponse:
    q = _query(books, book, regions, markets, oddsFormat, team, windowHours)
    return _proxy(fetch_odds.NFL_PROPS, q)


@router.get("/props/{sport}")
def sport_props(
    sport: str,
    books: Optional[str] = None,
    book: Optional[str] = None,
    regions: Optional[str] = None,
    markets: Optional[str] = None,
    oddsFormat: Optional[str] = None,
    team: Optional[str] = None,
    windowHours: Optional[str] = None,
) -> JSONResponse:
    q = _query(books, book, regions, markets, oddsFormat, team, windowHours)
    return _proxy(fetch_odds.SPORT_PROPS, q, sport=sport)


@router.get("/nfl/team/{team_name}")
def nfl_team_odds(
    team_name: str,
    books: Optional[str] = None,
    book: Optional[str] = None,
    regions: Optional[str] = None,
    markets: Optional[str] = None,
    oddsFormat: Optional[str] = None,
    windowHours: Optional[str] = None,
) -> JSONResponse:
    # Path team replaces any ?team= value
    q = _query(books, book, regions, markets, oddsFormat, None, windowHours)
    return _proxy(fetch_odds.NFL_TEAM_ODDS, q, team_override=team_name)
