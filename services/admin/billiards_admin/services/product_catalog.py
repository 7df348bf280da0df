"""Product listing with client-side category filtering and pagination."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from billiards_admin.clients.pos_client import PosApiClient
from billiards_admin.core.config import settings
from billiards_admin.schemas.product import ProductCatalogPage, ProductForm, ProductRecord

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


def collect_categories(products: Iterable[ProductRecord]) -> List[str]:
    """Distinct trimmed categories in first-seen order, preceded by ``"all"``."""

    categories = [ALL_CATEGORIES]
    for product in products:
        normalized = (product.category or "").strip()
        if normalized and normalized not in categories:
            categories.append(normalized)
    return categories


def filter_by_category(
    products: List[ProductRecord],
    category: Optional[str],
) -> List[ProductRecord]:
    if not category or category == ALL_CATEGORIES:
        return list(products)
    return [product for product in products if product.category == category]


def total_pages(item_count: int, page_size: int) -> int:
    return max(1, math.ceil(item_count / page_size))


def paginate(items: List[ProductRecord], page: int, page_size: int) -> List[ProductRecord]:
    start = (page - 1) * page_size
    return items[start : start + page_size]


class ProductCatalogService:
    def __init__(
        self,
        client: PosApiClient,
        *,
        page_size: Optional[int] = None,
        fetch_size: Optional[int] = None,
    ) -> None:
        self._client = client
        self._page_size = page_size or settings.PRODUCT_PAGE_SIZE
        self._fetch_size = fetch_size or settings.PRODUCT_FETCH_SIZE

    async def fetch_all(self) -> List[ProductRecord]:
        """Walk the POS API's product pages until the last one."""

        products: List[ProductRecord] = []
        server_page = 0
        while True:
            chunk = await self._client.list_products_page(server_page, self._fetch_size)
            products.extend(chunk["items"])
            # An empty page ends the walk even if the server never sets "last".
            if chunk["last"] or not chunk["items"]:
                break
            server_page += 1

        logger.debug("Fetched %s products in %s pages", len(products), server_page + 1)
        return products

    async def browse(
        self,
        *,
        category: Optional[str] = None,
        page: int = 1,
    ) -> ProductCatalogPage:
        products = await self.fetch_all()
        selected = category or ALL_CATEGORIES
        filtered = filter_by_category(products, selected)

        pages = total_pages(len(filtered), self._page_size)
        current = min(max(page, 1), pages)

        return ProductCatalogPage(
            items=paginate(filtered, current, self._page_size),
            categories=collect_categories(products),
            category=selected,
            page=current,
            page_size=self._page_size,
            total_pages=pages,
            total_items=len(filtered),
        )

    async def create_product(self, form: ProductForm) -> ProductRecord:
        product = await self._client.create_product(form)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    async def update_product(self, product_id: int, form: ProductForm) -> ProductRecord:
        product = await self._client.update_product(product_id, form)
        logger.info("Updated product %s", product_id)
        return product

    async def delete_product(self, product_id: int) -> None:
        await self._client.delete_product(product_id)
        logger.info("Deleted product %s", product_id)


__all__ = [
    "ALL_CATEGORIES",
    "ProductCatalogService",
    "collect_categories",
    "filter_by_category",
    "paginate",
    "total_pages",
]
