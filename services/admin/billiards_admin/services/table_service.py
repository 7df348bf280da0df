"""Create and edit tables, then reload the tracked table list."""

from __future__ import annotations

import logging
from typing import List

from billiards_admin.clients.pos_client import PosApiClient
from billiards_admin.schemas.table import TableForm, TableView
from billiards_admin.services.table_session_service import TableSessionService

logger = logging.getLogger(__name__)


class TableService:
    def __init__(self, client: PosApiClient, sessions: TableSessionService) -> None:
        self._client = client
        self._sessions = sessions

    async def create_table(self, form: TableForm) -> List[TableView]:
        """New tables always start out AVAILABLE."""

        record = await self._client.create_table(form)
        logger.info("Created table %s (%s)", record.id, record.name)
        return await self._sessions.refresh()

    async def update_table(self, table_id: int, form: TableForm) -> List[TableView]:
        """Edit a table's details while keeping its current status."""

        current = self._sessions.get_table(table_id)
        await self._client.update_table(table_id, form, status=current.status)
        logger.info("Updated table %s", table_id)
        return await self._sessions.refresh()


__all__ = ["TableService"]
