"""Pydantic schemas for bar products."""

from typing import List, Optional

from pydantic import Field, field_validator

from billiards_admin.schemas.base import Amount, CamelModel


class ProductRecord(CamelModel):
    id: int
    name: str
    price: Amount = Field(..., ge=0)
    description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None


class ProductForm(CamelModel):
    name: str
    price: Amount = Field(..., ge=0)
    description: str = ""
    category: str = ""
    image_url: str = ""

    @field_validator("name", "description", "category", "image_url", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Product name must not be empty")
        return value


class ProductCatalogPage(CamelModel):
    """One client-side page of the product list, after category filtering."""

    items: List[ProductRecord]
    categories: List[str]
    category: str
    page: int
    page_size: int
    total_pages: int
    total_items: int
