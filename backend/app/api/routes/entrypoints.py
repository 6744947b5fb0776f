"""Entrypoint Routes — manifest listing and invocation.

Invariants:
    - POST /entrypoints/{key}/invoke returns {"output": ...} with 200, including
      "no tournament" / "player not found" outputs
    - Unknown key -> 404, invalid input -> 400, upstream failure -> 502 (global handlers)

Design Decisions:
    - Routes hold no golf logic: they delegate to the agent's EntrypointRegistry
"""

import logging

from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_agent
from app.schemas.entrypoints import InvokeRequest
from app.services.agent import Agent

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/entrypoints", tags=["entrypoints"])


@router.get("")
async def list_entrypoints(agent: Agent = Depends(get_agent)):
    """All entrypoints with description, price and input schema."""
    return {"items": agent.entrypoints.manifest()}


@router.post("/{key}/invoke")
async def invoke_entrypoint(
    key: str,
    body: InvokeRequest | None = Body(None),
    agent: Agent = Depends(get_agent),
):
    """Run one entrypoint. Body is optional for entrypoints without input."""
    raw_input = body.input if body else {}
    return await agent.entrypoints.invoke(key, raw_input)
