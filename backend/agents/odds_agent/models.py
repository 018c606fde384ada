from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional

FailurePolicy = Literal["hard_error", "soft_empty"]
ResultStatus = Literal["ok", "soft_failure", "hard_failure"]


class RouteConfig(BaseModel):
    """Defaults and failure policy for one exposed proxy route."""
    name: str
    sport: Optional[str] = None           # Fixed provider sport key; None = taken from the path
    default_markets: str
    sport_default_markets: Dict[str, str] = Field(default_factory=dict)
    default_bookmakers: str
    default_regions: str = "us"
    default_odds_format: str = "american"
    failure_policy: FailurePolicy = "hard_error"
    error_message: str = "Failed to fetch odds."

    def markets_for(self, sport: str) -> str:
        return self.sport_default_markets.get(sport, self.default_markets)


class UpstreamParams(BaseModel):
    """Query parameters sent to The Odds API, plus the sport used in the URL."""
    sport: str
    apiKey: str = Field(default="", repr=False)  # Never logged or echoed
    regions: str
    markets: str
    oddsFormat: str
    bookmakers: str

    def query(self) -> Dict[str, str]:
        return self.model_dump(exclude={"sport"})


class OddsResult(BaseModel):
    """Outcome of one proxied request, before it is turned into an HTTP response."""
    status: ResultStatus
    games: List[Any] = Field(default_factory=list)
    error: Optional[str] = None
    details: Optional[str] = None
    requests_remaining: Optional[str] = None
