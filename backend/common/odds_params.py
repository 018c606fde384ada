# backend/common/odds_params.py
from __future__ import annotations

"""
Request normalization for the odds proxy.

Client query strings are never rejected here: blank or malformed values fall
back to the route defaults, and unknown sports/markets/regions are forwarded
as-is so the provider stays the source of truth on validity.
"""

from typing import Mapping, Optional

from agents.odds_agent.models import RouteConfig, UpstreamParams


def _split_csv(raw: Optional[str]) -> list[str]:
    return [s.strip().lower() for s in str(raw or "").split(",") if s.strip()]


def _param(query: Mapping[str, Optional[str]], name: str) -> Optional[str]:
    value = query.get(name)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def normalize_bookmakers(
    books_param: Optional[str],
    book_param: Optional[str],
    default_list: str,
) -> str:
    """
    Canonical bookmaker list: `books` wins over legacy `book`, which wins over
    the default. Tokens are trimmed and lowercased, empty tokens dropped.
    Duplicates are left for the provider to collapse.

    >>> normalize_bookmakers(" DraftKings , ,FanDuel", None, "x")
    'draftkings,fanduel'
    """
    chosen = next((p for p in (books_param, book_param) if p and str(p).strip()), None)
    tokens = _split_csv(chosen)
    if not tokens:
        tokens = _split_csv(default_list)
    return ",".join(tokens)


def build_upstream_params(
    sport: str,
    query: Mapping[str, Optional[str]],
    config: RouteConfig,
    api_key: str = "",
) -> UpstreamParams:
    return UpstreamParams(
        sport=sport,
        apiKey=api_key or "",
        regions=_param(query, "regions") or config.default_regions,
        markets=_param(query, "markets") or config.markets_for(sport),
        oddsFormat=_param(query, "oddsFormat") or config.default_odds_format,
        bookmakers=normalize_bookmakers(
            query.get("books"),
            query.get("book"),
            config.default_bookmakers,
        ),
    )
