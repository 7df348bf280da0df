from fastapi import APIRouter

from .dashboard_routes import router as dashboard_router
from .invoice_routes import router as invoice_router
from .product_routes import router as product_router
from .table_routes import router as table_router

router = APIRouter()
router.include_router(dashboard_router)
router.include_router(invoice_router)
router.include_router(product_router)
router.include_router(table_router)

__all__ = [
    "router",
    "dashboard_router",
    "invoice_router",
    "product_router",
    "table_router",
]
