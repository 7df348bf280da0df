"""Invoice history backed by the POS API."""

from __future__ import annotations

import logging
from typing import Optional

from billiards_admin.clients.pos_client import PosApiClient
from billiards_admin.core.config import settings
from billiards_admin.schemas.invoice import InvoiceDetail, InvoicePage

logger = logging.getLogger(__name__)


class InvoiceService:
    def __init__(self, client: PosApiClient, *, page_size: Optional[int] = None) -> None:
        self._client = client
        self._page_size = page_size or settings.INVOICE_PAGE_SIZE

    async def list_invoices(self, page: int = 1) -> InvoicePage:
        """Return invoice history; ``page`` is 1-based here and 0-based on the wire."""

        result = await self._client.list_invoices(max(page, 1) - 1, self._page_size)
        return InvoicePage(
            items=result["items"],
            page=result["number"] + 1,
            total_pages=result["total_pages"],
        )

    async def get_invoice(self, invoice_id: int) -> InvoiceDetail:
        return await self._client.get_invoice(invoice_id)

    async def delete_invoice(self, invoice_id: int) -> None:
        await self._client.delete_invoice(invoice_id)
        logger.info("Deleted invoice %s", invoice_id)


__all__ = ["InvoiceService"]
