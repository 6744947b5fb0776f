"""Agent — the process-wide service instance, built once at startup.

Invariants:
    - build_agent() is called exactly once, from the app lifespan
    - The agent is passed by reference to routes (app.state + dependency), never re-created
    - payment_tracker is None unless an external tracker is supplied
"""

from dataclasses import dataclass

from app.config import Settings
from app.core.payment_protocols import PaymentTracker
from app.infrastructure.espn_client import EspnClient
from app.services.entrypoint_registry import EntrypointRegistry, build_entrypoints


@dataclass
class Agent:
    name: str
    version: str
    description: str
    entrypoints: EntrypointRegistry
    payment_tracker: PaymentTracker | None = None

    def card(self, base_url: str) -> dict:
        """A2A-style agent card served at /.well-known/agent.json."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "url": base_url,
            "capabilities": {"payments": True, "analytics": self.payment_tracker is not None},
            "entrypoints": {
                e.key: {
                    "description": e.description,
                    "price": {"amount": e.price},
                    "invoke": f"{base_url}/entrypoints/{e.key}/invoke",
                }
                for e in self.entrypoints
            },
        }


def build_agent(
    settings: Settings,
    client: EspnClient,
    payment_tracker: PaymentTracker | None = None,
) -> Agent:
    """Compose the agent from settings, the upstream client and an optional tracker."""
    return Agent(
        name=settings.agent_name,
        version=settings.agent_version,
        description=settings.agent_description,
        entrypoints=build_entrypoints(client, payment_tracker),
        payment_tracker=payment_tracker,
    )
