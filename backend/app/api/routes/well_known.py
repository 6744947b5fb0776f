"""Static & Discovery Routes — icon, ERC-8004 registration file, agent card.

Invariants:
    - /icon.png serves the configured file as image/png, or 404 "Icon not found"
    - Discovery documents are built from settings.base_url (env BASE_URL, with fallback)
"""

import os

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, PlainTextResponse

from app.api.dependencies import get_agent
from app.config import Settings, get_settings
from app.services.agent import Agent

router = APIRouter(tags=["discovery"])

REGISTRATION_TYPE = "https://eips.ethereum.org/EIPS/eip-8004#registration-v1"
REGISTRATION_DESCRIPTION = (
    "Real-time golf data: PGA and LPGA leaderboards, player scorecards, "
    "tournament schedules. 1 free + 5 paid endpoints via x402."
)


@router.get("/icon.png")
async def icon(settings: Settings = Depends(get_settings)):
    if not os.path.isfile(settings.icon_path):
        return PlainTextResponse("Icon not found", status_code=404)
    return FileResponse(settings.icon_path, media_type="image/png")


@router.get("/.well-known/erc8004.json")
async def erc8004_registration(settings: Settings = Depends(get_settings)):
    """ERC-8004 registration-v1 descriptor."""
    base_url = settings.base_url
    return {
        "type": REGISTRATION_TYPE,
        "name": settings.agent_name,
        "description": REGISTRATION_DESCRIPTION,
        "image": f"{base_url}/icon.png",
        "services": [
            {"name": "web", "endpoint": base_url},
            {
                "name": "A2A",
                "endpoint": f"{base_url}/.well-known/agent.json",
                "version": "0.3.0",
            },
        ],
        "x402Support": True,
        "active": True,
        "registrations": [],
        "supportedTrust": ["reputation"],
    }


@router.get("/.well-known/agent.json")
async def agent_card(
    agent: Agent = Depends(get_agent),
    settings: Settings = Depends(get_settings),
):
    return agent.card(settings.base_url)
