"""Pydantic schemas for invoices."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from billiards_admin.schemas.base import Amount, CamelModel


class InvoiceSummary(CamelModel):
    id: int
    customer_name: Optional[str] = None
    created_at: Optional[datetime] = None
    subtotal: Amount = Decimal(0)
    discount_amount: Amount = Decimal(0)
    tax_amount: Amount = Decimal(0)
    total: Amount = Decimal(0)


class ProductRef(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None


class SessionRef(CamelModel):
    id: Optional[int] = None


class InvoiceItem(CamelModel):
    id: int
    product: Optional[ProductRef] = None
    quantity: int = 0
    unit_price: Amount = Decimal(0)
    line_total: Amount = Decimal(0)


class InvoiceDetail(InvoiceSummary):
    session: Optional[SessionRef] = None
    items: List[InvoiceItem] = Field(default_factory=list)


class InvoicePage(CamelModel):
    """Invoice history page; ``page`` is 1-based."""

    items: List[InvoiceSummary]
    page: int
    total_pages: int
