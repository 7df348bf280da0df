"""Async client for the point-of-sale REST backend."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from billiards_admin.core.config import settings
from billiards_admin.domain.errors import UpstreamRequestFailed
from billiards_admin.schemas.invoice import InvoiceDetail, InvoiceSummary
from billiards_admin.schemas.product import ProductForm, ProductRecord
from billiards_admin.schemas.session import SessionRecord
from billiards_admin.schemas.table import TableForm, TableRecord, TableStatus

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _extract_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict):
        for key in ("message", "detail", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return response.text


class PosApiClient:
    """Thin wrapper around the POS API endpoints used by the admin service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        configured_base = base_url or settings.POS_API_URL
        self._base_url = configured_base.rstrip("/")
        self._token = token if token is not None else settings.POS_API_TOKEN
        self._timeout = timeout or settings.POS_API_TIMEOUT
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=self._headers(),
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = _extract_detail(exc.response)
            logger.warning(
                "POS API returned HTTP %s for %s %s: %s",
                exc.response.status_code,
                method,
                path,
                detail,
            )
            raise UpstreamRequestFailed(
                f"POS API request {method} {path} failed",
                status_code=exc.response.status_code,
                detail=detail,
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("Failed to reach POS API for %s %s: %s", method, path, exc)
            raise UpstreamRequestFailed(
                f"POS API is unreachable ({method} {path})",
                detail=str(exc),
            ) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamRequestFailed(
                f"POS API returned a non-JSON body for {method} {path}",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _parse(model: Type[ModelT], payload: Any, *, source: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Malformed %s payload from POS API: %s", source, exc)
            raise UpstreamRequestFailed(
                f"POS API returned a malformed {source}",
                detail=str(exc),
            ) from exc

    def _parse_list(self, model: Type[ModelT], payload: Any, *, source: str) -> List[ModelT]:
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise UpstreamRequestFailed(f"POS API returned a malformed {source} list")
        return [self._parse(model, item, source=source) for item in payload]

    # Tables

    async def list_tables(self) -> List[TableRecord]:
        payload = await self._request("GET", "/tables")
        return self._parse_list(TableRecord, payload, source="table")

    async def create_table(self, form: TableForm) -> TableRecord:
        body = form.model_dump(mode="json", by_alias=True)
        body["status"] = TableStatus.AVAILABLE.value
        payload = await self._request("POST", "/tables", json=body)
        return self._parse(TableRecord, payload, source="table")

    async def update_table(
        self,
        table_id: int,
        form: TableForm,
        *,
        status: TableStatus,
    ) -> TableRecord:
        body = form.model_dump(mode="json", by_alias=True)
        body["status"] = status.value
        payload = await self._request("PUT", f"/tables/{table_id}", json=body)
        return self._parse(TableRecord, payload, source="table")

    # Sessions

    async def start_session(self, table_id: int) -> SessionRecord:
        payload = await self._request("POST", f"/invoices/sessions/{table_id}/start")
        return self._parse(SessionRecord, payload, source="session")

    async def end_session(self, table_id: int) -> SessionRecord:
        payload = await self._request("POST", f"/invoices/sessions/{table_id}/end")
        return self._parse(SessionRecord, payload, source="session")

    async def get_active_session(self, table_id: int) -> Optional[SessionRecord]:
        payload = await self._request("GET", f"/invoices/sessions/{table_id}")
        if payload is None:
            return None
        return self._parse(SessionRecord, payload, source="session")

    async def create_invoice_from_session(self, session_id: int) -> InvoiceSummary:
        payload = await self._request(
            "POST", f"/invoices/sessions/{session_id}/create-invoice"
        )
        return self._parse(InvoiceSummary, payload, source="invoice")

    # Products

    async def list_products_page(self, page: int, size: int) -> Dict[str, Any]:
        """Return one server page of products.

        The POS API answers either with a bare array or with a Spring page
        (``content`` plus ``last``); both are normalized to
        ``{"items": [...], "last": bool}``.
        """

        payload = await self._request(
            "GET",
            "/products",
            params={"page": page, "size": size, "sort": "name,asc"},
        )
        if isinstance(payload, list):
            items = self._parse_list(ProductRecord, payload, source="product")
            return {"items": items, "last": True}
        if not payload:
            return {"items": [], "last": True}
        if not isinstance(payload, dict):
            raise UpstreamRequestFailed("POS API returned a malformed product page")

        items = self._parse_list(
            ProductRecord, payload.get("content") or [], source="product"
        )
        last = payload.get("last")
        if last is None:
            last = len(items) < size
        return {"items": items, "last": bool(last)}

    async def create_product(self, form: ProductForm) -> ProductRecord:
        payload = await self._request(
            "POST", "/products", json=form.model_dump(mode="json", by_alias=True)
        )
        return self._parse(ProductRecord, payload, source="product")

    async def update_product(self, product_id: int, form: ProductForm) -> ProductRecord:
        payload = await self._request(
            "PUT",
            f"/products/{product_id}",
            json=form.model_dump(mode="json", by_alias=True),
        )
        return self._parse(ProductRecord, payload, source="product")

    async def delete_product(self, product_id: int) -> None:
        await self._request("DELETE", f"/products/{product_id}")

    # Invoices

    async def list_invoices(self, page: int, size: int) -> Dict[str, Any]:
        """Return a page of invoices; ``page`` is 0-based as the POS API expects."""

        payload = await self._request(
            "GET", "/invoices", params={"page": page, "size": size}
        ) or {}
        if not isinstance(payload, dict):
            raise UpstreamRequestFailed("POS API returned a malformed invoice page")

        return {
            "items": self._parse_list(
                InvoiceSummary, payload.get("content") or [], source="invoice"
            ),
            "total_pages": int(payload.get("totalPages") or 0),
            "number": int(payload.get("number") or 0),
        }

    async def get_invoice(self, invoice_id: int) -> InvoiceDetail:
        payload = await self._request("GET", f"/invoices/{invoice_id}")
        return self._parse(InvoiceDetail, payload, source="invoice")

    async def delete_invoice(self, invoice_id: int) -> None:
        await self._request("DELETE", f"/invoices/{invoice_id}")

    # Dashboard

    async def get_dashboard(self) -> Dict[str, Any]:
        payload = await self._request("GET", "/admin/dashboard")
        return payload if isinstance(payload, dict) else {}


__all__ = ["PosApiClient"]
