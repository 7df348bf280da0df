"""Pydantic schemas for the billiards admin service."""

from billiards_admin.schemas.dashboard import DashboardStats
from billiards_admin.schemas.invoice import (
    InvoiceDetail,
    InvoiceItem,
    InvoicePage,
    InvoiceSummary,
)
from billiards_admin.schemas.product import ProductCatalogPage, ProductForm, ProductRecord
from billiards_admin.schemas.session import SessionInvoice, SessionRecord, StopSummary
from billiards_admin.schemas.table import TableForm, TableRecord, TableStatus, TableView

__all__ = [
    "DashboardStats",
    "InvoiceDetail",
    "InvoiceItem",
    "InvoicePage",
    "InvoiceSummary",
    "ProductCatalogPage",
    "ProductForm",
    "ProductRecord",
    "SessionInvoice",
    "SessionRecord",
    "StopSummary",
    "TableForm",
    "TableRecord",
    "TableStatus",
    "TableView",
]
