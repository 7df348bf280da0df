from .dashboard_service import DashboardService
from .invoice_service import InvoiceService
from .product_catalog import ProductCatalogService
from .table_service import TableService
from .table_session_service import TableSessionService

__all__ = [
    "DashboardService",
    "InvoiceService",
    "ProductCatalogService",
    "TableService",
    "TableSessionService",
]
