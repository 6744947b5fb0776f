"""Route Dependencies — access to the singleton agent built in the lifespan."""

from fastapi import Request

from app.services.agent import Agent


def get_agent(request: Request) -> Agent:
    """The Agent stored on app.state at startup. Overridden in tests."""
    return request.app.state.agent
