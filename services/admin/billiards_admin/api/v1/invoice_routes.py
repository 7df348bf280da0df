"""API routes for invoice history."""

from fastapi import APIRouter, Depends, Query, status

from billiards_admin.dependencies import get_invoice_service
from billiards_admin.schemas.invoice import InvoiceDetail, InvoicePage
from billiards_admin.services.invoice_service import InvoiceService

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=InvoicePage)
async def list_invoices(
    *,
    service: InvoiceService = Depends(get_invoice_service),
    page: int = Query(1, ge=1, description="1-based page number"),
) -> InvoicePage:
    return await service.list_invoices(page)


@router.get("/{invoice_id}", response_model=InvoiceDetail)
async def get_invoice(
    invoice_id: int,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceDetail:
    return await service.get_invoice(invoice_id)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: int,
    service: InvoiceService = Depends(get_invoice_service),
) -> None:
    await service.delete_invoice(invoice_id)


__all__ = ["router"]
