"""API routes for the product catalog."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from billiards_admin.dependencies import get_product_catalog
from billiards_admin.schemas.product import ProductCatalogPage, ProductForm, ProductRecord
from billiards_admin.services.product_catalog import ProductCatalogService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductCatalogPage)
async def browse_products(
    *,
    catalog: ProductCatalogService = Depends(get_product_catalog),
    category: Optional[str] = Query(
        None, description="Category to filter by, 'all' for every product"
    ),
    page: int = Query(1, ge=1),
) -> ProductCatalogPage:
    """Retrieve one page of products, optionally filtered by category."""

    return await catalog.browse(category=category, page=page)


@router.post("", response_model=ProductRecord, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductForm,
    catalog: ProductCatalogService = Depends(get_product_catalog),
) -> ProductRecord:
    return await catalog.create_product(payload)


@router.put("/{product_id}", response_model=ProductRecord)
async def update_product(
    product_id: int,
    payload: ProductForm,
    catalog: ProductCatalogService = Depends(get_product_catalog),
) -> ProductRecord:
    return await catalog.update_product(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    catalog: ProductCatalogService = Depends(get_product_catalog),
) -> None:
    await catalog.delete_product(product_id)


__all__ = ["router"]
