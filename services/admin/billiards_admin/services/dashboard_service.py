"""Dashboard counters."""

from __future__ import annotations

from typing import Any, Dict

from billiards_admin.clients.pos_client import PosApiClient
from billiards_admin.schemas.dashboard import DashboardStats


def _count(payload: Dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class DashboardService:
    def __init__(self, client: PosApiClient) -> None:
        self._client = client

    async def get_stats(self) -> DashboardStats:
        payload = await self._client.get_dashboard()
        return DashboardStats(
            tables=_count(payload, "tableCount"),
            products=_count(payload, "productCount"),
            employees=_count(payload, "employeeCount"),
            bills_today=_count(payload, "todayInvoiceCount"),
        )


__all__ = ["DashboardService"]
