# backend/common/odds_filters.py
from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import Any, List, Optional

import pytz

logger = logging.getLogger(__name__)


def _team_needles(team_param: Optional[str]) -> List[str]:
    return [s.strip().lower() for s in str(team_param or "").split(",") if s.strip()]


def _window_hours(window_hours_param: Any) -> Optional[float]:
    """
    Parse windowHours. Absent, blank, non-numeric, NaN or infinite values
    disable the window filter (None). 0 and negatives are returned as-is.
    """
    if window_hours_param is None or not str(window_hours_param).strip():
        return None
    try:
        hours = float(str(window_hours_param).strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric windowHours={window_hours_param!r}")
        return None
    if not math.isfinite(hours):
        logger.debug(f"Ignoring non-finite windowHours={window_hours_param!r}")
        return None
    return hours


def parse_commence_time(value: Any) -> Optional[datetime]:
    """ISO-8601 -> aware UTC datetime, or None. Offset-less values are read as UTC."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


def _matches_team(game: Any, needles: List[str]) -> bool:
    if not isinstance(game, dict):
        return False
    home = game.get("home_team")
    away = game.get("away_team")
    home = home.lower() if isinstance(home, str) else ""
    away = away.lower() if isinstance(away, str) else ""
    return any(n in home or n in away for n in needles)


def _in_window(game: Any, now: datetime, horizon: Optional[datetime]) -> bool:
    if not isinstance(game, dict):
        return False
    t = parse_commence_time(game.get("commence_time"))
    if t is None or t < now:
        return False
    return horizon is None or t <= horizon


def filter_games(
    games: Any,
    team_param: Optional[str] = None,
    window_hours_param: Any = None,
    now: Optional[datetime] = None,
) -> List[Any]:
    """
    Narrow an upstream game list by team substring and/or forward time window.

    - Non-list input (e.g. an upstream error object) yields [].
    - Team: comma-separated, case-insensitive substrings matched against
      home_team or away_team. All-blank needles apply no restriction.
    - Window: keep games with now <= commence_time <= now + windowHours.
      `now` is the filter's own invocation time unless given.
    Upstream order is preserved. Never raises.
    """
    out = list(games) if isinstance(games, list) else []

    needles = _team_needles(team_param)
    if needles:
        out = [g for g in out if _matches_team(g, needles)]

    hours = _window_hours(window_hours_param)
    if hours is not None and hours < 0:
        out = []
    elif hours is not None:
        now = now or datetime.now(pytz.utc)
        if now.tzinfo is None:
            now = pytz.utc.localize(now)
        try:
            horizon: Optional[datetime] = now + timedelta(hours=hours)
        except OverflowError:
            # Past datetime.max: the window has no upper bound
            horizon = None
        out = [g for g in out if _in_window(g, now, horizon)]

    return out
