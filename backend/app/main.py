"""golf-intel API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GolfIntelError → structured JSON responses
    - One shared httpx.AsyncClient and one Agent per process, created in the lifespan
    - Port read from settings (env PORT, default 3000)

Design Decisions:
    - Lifespan over @app.on_event: the upstream client is closed on shutdown
    - The payment tracker is an external collaborator; none is wired here, so the
      analytics entrypoints answer with empty outputs until one is supplied
"""

import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import entrypoints, health, well_known
from app.config import get_settings
from app.infrastructure.espn_client import EspnClient
from app.infrastructure.observability import setup_logging
from app.services.agent import build_agent

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    async with httpx.AsyncClient(follow_redirects=True) as http:
        client = EspnClient(
            http, base_url=settings.espn_base_url, user_agent=settings.user_agent,
        )
        app.state.agent = build_agent(settings, client)
        logger.info(f"Golf Intel agent running on port {settings.port}")
        yield
    logger.info("Golf Intel agent shutting down")


app = FastAPI(title="golf-intel", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(entrypoints.router)
app.include_router(well_known.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app on settings.port."""
    uvicorn.run("app.main:app", host="0.0.0.0", port=get_settings().port)
