"""Boundary Protocols — contract for the external payment-tracking collaborator.

Invariants:
    - The tracker is supplied from outside (payments/analytics layer); nothing here records payments
    - Core never imports a concrete tracker — only this Protocol
    - window_ms=None means "all recorded history"

Design Decisions:
    - Protocol over ABC: structural subtyping, any object with these coroutines qualifies
    - Monetary totals are ints or Decimals in minor units; callers stringify them
"""

from typing import Any, Protocol


class PaymentTracker(Protocol):
    """Read side of the payment tracker consumed by the analytics entrypoints."""

    async def get_summary(self, window_ms: int | None = None) -> dict[str, Any]:
        """Aggregate view. Must include outgoingTotal, incomingTotal, netTotal."""
        ...

    async def get_all_transactions(
        self, window_ms: int | None = None,
    ) -> list[dict[str, Any]]:
        """Transactions, most recent first."""
        ...

    async def export_csv(self, window_ms: int | None = None) -> str: ...
