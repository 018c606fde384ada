# backend/main.py
from __future__ import annotations
import logging
import os
from datetime import datetime, timezone
from typing import List

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse

# -------------------------------------------------
# 🌍 Load environment variables on every reload
# -------------------------------------------------
load_dotenv()

# -------------------------------------------------
# 🧠 Logging setup
# -------------------------------------------------
logger = logging.getLogger("main")
logger.setLevel(logging.INFO)
logger.propagate = False
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
if not logger.handlers:
    logger.addHandler(_handler)

# Module loggers (routes/agents/services/common) share one handler on the root
logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

# -------------------------------------------------
# ⚙️ Config helpers
# -------------------------------------------------
def _parse_allowed_origins() -> List[str]:
    """
    Returns a list of allowed frontend origins for CORS.
    The proxy exists to serve browser clients, so an unset value means "*".
    """
    origins_env = os.getenv("ALLOWED_ORIGINS", "")
    if not origins_env.strip():
        return ["*"]
    return [origin.strip() for origin in origins_env.split(",") if origin.strip()]


from common import config_loader  # noqa: E402

ODDS_OK = bool(config_loader.ODDS_API_KEY)
TZ = config_loader.TZ
ALLOWED_ORIGINS = _parse_allowed_origins()

logger.info("🔐 Environment variables loaded:")
logger.info(f"  ODDS_API_KEY: {'✅ Loaded' if ODDS_OK else '❌ Missing'}")
logger.info(f"  TZ: {TZ}")
logger.info(f"  ALLOWED_ORIGINS: {ALLOWED_ORIGINS}")
if not ODDS_OK:
    logger.warning("ODDS_API_KEY is not set; upstream calls will be rejected by the provider.")

# -------------------------------------------------
# ⚙️ FastAPI app setup
# -------------------------------------------------
app = FastAPI(
    title="Odds Proxy API",
    version="1.0.0",
    description="Read-only proxy for The Odds API: odds and player props with team/time filters.",
)

# -------------------------------------------------
# 🌐 CORS + compression
# -------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-OddsAPI-Requests-Remaining"],
)
app.add_middleware(GZipMiddleware, minimum_size=500)

# -------------------------------------------------
# 📂 Import route modules after app is initialized
# -------------------------------------------------
from routes import odds  # noqa: E402

# -------------------------------------------------
# 🛤️ Register route modules
# -------------------------------------------------
app.include_router(odds.router)

# -------------------------------------------------
# 🏠 Root endpoint
# -------------------------------------------------
@app.get("/", response_class=PlainTextResponse)
async def root():
    return (
        "Odds Proxy API is running. Endpoints: /nfl-odds, /nfl-props, "
        "/odds/{sport}, /props/{sport}, /nfl/team/{teamName}"
    )

# -------------------------------------------------
# 🧪 Health check endpoint
# -------------------------------------------------
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": {
            "odds_configured": ODDS_OK,
            "timezone": TZ,
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config_loader.PORT)
