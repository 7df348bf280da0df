"""Shared dependencies for the billiards admin service."""

from functools import lru_cache

from fastapi import Depends

from billiards_admin.clients.pos_client import PosApiClient
from billiards_admin.services import (
    DashboardService,
    InvoiceService,
    ProductCatalogService,
    TableService,
    TableSessionService,
)


@lru_cache()
def get_pos_client() -> PosApiClient:
    return PosApiClient()


@lru_cache()
def get_table_sessions() -> TableSessionService:
    """The tracked table list is process-wide state shared by every request."""

    return TableSessionService(get_pos_client())


def get_table_service(
    client: PosApiClient = Depends(get_pos_client),
    sessions: TableSessionService = Depends(get_table_sessions),
) -> TableService:
    return TableService(client, sessions)


def get_product_catalog(client: PosApiClient = Depends(get_pos_client)) -> ProductCatalogService:
    return ProductCatalogService(client)


def get_invoice_service(client: PosApiClient = Depends(get_pos_client)) -> InvoiceService:
    return InvoiceService(client)


def get_dashboard_service(client: PosApiClient = Depends(get_pos_client)) -> DashboardService:
    return DashboardService(client)
