"""HTTP tests for the admin API routes."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from billiards_admin.dependencies import get_pos_client, get_table_sessions
from billiards_admin.main import app
from tests.helpers import session_json, table_json

PREFIX = "/api/admin/v1"


@pytest.fixture
def api_client(pos_client, sessions):
    app.dependency_overrides[get_pos_client] = lambda: pos_client
    app.dependency_overrides[get_table_sessions] = lambda: sessions
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


class TestTableRoutes:
    def test_list_tables_uses_camel_case(self, api_client, pos_api):
        pos_api.add("GET", "/tables", json=[table_json(2, status="OCCUPIED")])
        pos_api.add("GET", "/invoices/sessions/2", json=session_json(20, 2))

        response = api_client.get(f"{PREFIX}/tables")

        assert response.status_code == 200
        body = response.json()
        assert body[0]["pricePerHour"] == 50000
        assert body[0]["currentSession"]["id"] == 20
        assert body[0]["sessionError"] is None

    def test_start_and_stop(self, api_client, pos_api):
        pos_api.add("GET", "/tables", json=[table_json(5)])
        pos_api.add("POST", "/invoices/sessions/5/start", json=session_json(11, 5))
        pos_api.add(
            "POST",
            "/invoices/sessions/5/end",
            json=session_json(11, 5, end="2024-01-01T11:30:00Z", total=75000),
        )
        api_client.get(f"{PREFIX}/tables")

        started = api_client.post(f"{PREFIX}/tables/5/start")
        stopped = api_client.post(f"{PREFIX}/tables/5/stop")

        assert started.status_code == 200
        assert started.json()["status"] == "OCCUPIED"
        assert stopped.status_code == 200
        summary = stopped.json()
        assert summary["durationDisplay"] == "1h 30m"
        assert Decimal(str(summary["total"])) == Decimal("75000")
        assert summary["totalDisplay"] == "75,000 đ"

    def test_stop_without_session_is_not_found(self, api_client, pos_api):
        pos_api.add("GET", "/tables", json=[table_json(7)])
        api_client.get(f"{PREFIX}/tables")

        response = api_client.post(f"{PREFIX}/tables/7/stop")

        assert response.status_code == 404
        assert response.json()["code"] == "SESSION_NOT_FOUND"

    def test_upstream_failure_maps_to_bad_gateway(self, api_client, pos_api):
        pos_api.add("GET", "/tables", status_code=500, json={"message": "down"})

        response = api_client.get(f"{PREFIX}/tables")

        assert response.status_code == 502
        assert response.json()["code"] == "UPSTREAM_REQUEST_FAILED"

    def test_create_table_rejects_blank_name(self, api_client, pos_api):
        response = api_client.post(
            f"{PREFIX}/tables", json={"name": "   ", "pricePerHour": 50000}
        )

        assert response.status_code == 422
        assert pos_api.count("POST", "/tables") == 0

    def test_create_table_rejects_negative_price(self, api_client, pos_api):
        response = api_client.post(
            f"{PREFIX}/tables", json={"name": "Pool 1", "pricePerHour": -5}
        )

        assert response.status_code == 422

    def test_update_table_keeps_status(self, api_client, pos_api):
        pos_api.add("GET", "/tables", json=[table_json(3, status="RESERVED")])
        pos_api.add("PUT", "/tables/3", json=table_json(3, status="RESERVED", name="VIP"))
        api_client.get(f"{PREFIX}/tables")

        response = api_client.put(
            f"{PREFIX}/tables/3", json={"name": "VIP", "pricePerHour": 80000}
        )

        assert response.status_code == 200
        sent = [r for r in pos_api.requests if r.method == "PUT"][0]
        assert b"RESERVED" in sent.read()


class TestOtherRoutes:
    def test_dashboard_defaults_missing_counters(self, api_client, pos_api):
        pos_api.add("GET", "/admin/dashboard", json={"tableCount": 8, "productCount": None})

        response = api_client.get(f"{PREFIX}/dashboard")

        assert response.json() == {
            "tables": 8,
            "products": 0,
            "employees": 0,
            "billsToday": 0,
        }

    def test_invoice_pages_are_one_based(self, api_client, pos_api):
        pos_api.add(
            "GET",
            "/invoices",
            json={"content": [{"id": 1, "total": 75000}], "totalPages": 3, "number": 0},
        )

        response = api_client.get(f"{PREFIX}/invoices", params={"page": 1})

        assert response.status_code == 200
        assert response.json()["page"] == 1
        assert response.json()["totalPages"] == 3
        request = [r for r in pos_api.requests if r.url.path == "/api/invoices"][0]
        assert request.url.params["page"] == "0"

    def test_products_by_category(self, api_client, pos_api):
        pos_api.add(
            "GET",
            "/products",
            json=[
                {"id": 1, "name": "Cola", "price": 15000, "category": "Drinks"},
                {"id": 2, "name": "Chips", "price": 12000, "category": "Snacks"},
            ],
        )

        response = api_client.get(f"{PREFIX}/products", params={"category": "Snacks"})

        body = response.json()
        assert [item["name"] for item in body["items"]] == ["Chips"]
        assert body["categories"] == ["all", "Drinks", "Snacks"]

    def test_delete_product(self, api_client, pos_api):
        pos_api.add("DELETE", "/products/4", status_code=204)

        response = api_client.delete(f"{PREFIX}/products/4")

        assert response.status_code == 204
        assert pos_api.count("DELETE", "/products/4") == 1

    def test_unknown_route_uses_error_payload(self, api_client):
        response = api_client.get(f"{PREFIX}/nope")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found", "code": "NOT_FOUND"}

    def test_wrong_method_keeps_allow_header(self, api_client):
        response = api_client.delete(f"{PREFIX}/dashboard")

        assert response.status_code == 405
        assert response.json()["code"] == "METHOD_NOT_ALLOWED"
        assert "GET" in response.headers["allow"]
