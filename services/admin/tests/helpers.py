"""Fake POS API and payload builders shared by the tests."""

from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

POS_BASE_URL = "http://pos.test/api"

Handler = Callable[[httpx.Request], Any]


class FakePosApi:
    """In-memory stand-in for the POS API, routed by method and path."""

    def __init__(self) -> None:
        self._routes: Dict[Tuple[str, str], Handler] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        status_code: int = 200,
        handler: Optional[Handler] = None,
    ) -> None:
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                if json is None:
                    return httpx.Response(status_code)
                return httpx.Response(status_code, json=json)

        self._routes[(method, f"/api{path}")] = handler

    def count(self, method: str, path: str) -> int:
        target = f"/api{path}"
        return sum(
            1
            for request in self.requests
            if request.method == method and request.url.path == target
        )

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not found"})
        return handler(request)


def table_json(
    table_id: int,
    *,
    status: str = "AVAILABLE",
    price_per_hour: Any = 50000,
    name: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "id": table_id,
        "name": name or f"Table {table_id}",
        "pricePerHour": price_per_hour,
        "status": status,
        "description": None,
        "imageUrl": None,
        "reservationTime": None,
    }


def session_json(
    session_id: int,
    table_id: int,
    *,
    start: str = "2024-01-01T10:00:00Z",
    end: Optional[str] = None,
    total: Any = None,
) -> Dict[str, Any]:
    return {
        "id": session_id,
        "tableId": table_id,
        "startTime": start,
        "endTime": end,
        "total": total,
    }


