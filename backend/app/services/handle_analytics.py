"""Analytics Handlers — pass-through to the external payment tracker.

Invariants:
    - Without a tracker every handler returns an empty/zeroed output, never raises
    - outgoingTotal, incomingTotal and netTotal are always decimal strings
"""

from app.core.payment_protocols import PaymentTracker
from app.schemas.entrypoints import AnalyticsInput, AnalyticsTransactionsInput

_MONETARY_TOTALS = ("outgoingTotal", "incomingTotal", "netTotal")


class AnalyticsHandlers:
    """analytics, analytics-transactions and analytics-csv entrypoints."""

    def __init__(self, tracker: PaymentTracker | None):
        self.tracker = tracker

    async def summary(self, input_data: AnalyticsInput) -> dict:
        if self.tracker is None:
            return {"error": "Analytics not available", "payments": []}
        summary = await self.tracker.get_summary(input_data.window_ms)
        return {
            **summary,
            **{key: str(summary.get(key, 0)) for key in _MONETARY_TOTALS},
        }

    async def transactions(self, input_data: AnalyticsTransactionsInput) -> dict:
        if self.tracker is None:
            return {"transactions": []}
        txs = await self.tracker.get_all_transactions(input_data.window_ms)
        return {"transactions": txs[:input_data.limit]}

    async def csv(self, input_data: AnalyticsInput) -> dict:
        if self.tracker is None:
            return {"csv": ""}
        return {"csv": await self.tracker.export_csv(input_data.window_ms)}
