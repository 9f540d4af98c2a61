"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

import json
from pathlib import Path

from fastapi.testclient import TestClient


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check reports the loaded catalog."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["catalog"] == "healthy"
        assert data["details"]["products_loaded"] == 5
        assert data["details"]["load_error"] is None

    def test_health_degraded_without_catalog(self, make_client, tmp_path: Path):
        """Test a missing catalog file degrades instead of failing."""
        client = make_client(tmp_path / "missing.json")
        data = client.get("/api/v1/health").json()
        assert data["status"] == "degraded"
        assert data["components"]["catalog"] == "not_loaded"
        assert "not found" in data["details"]["load_error"]

    def test_readiness_probe(self, client: TestClient):
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True

    def test_root_banner(self, client: TestClient):
        """Test the banner reports version and environment."""
        data = client.get("/").json()
        assert data["version"] == "1.0.0"
        assert data["environment"] == "development"
        assert data["docs"] == "/docs"


class TestToolEndpoints:
    """Tests for the tool listing and tool call endpoints."""

    def test_list_tools(self, client: TestClient):
        response = client.get("/api/v1/tools")
        assert response.status_code == 200
        tools = response.json()["tools"]
        assert [t["name"] for t in tools] == [
            "search_products",
            "get_product_by_model",
            "list_categories",
            "get_category_products",
        ]
        assert tools[0]["inputSchema"]["required"] == ["keyword"]

    def test_call_tool(self, client: TestClient):
        response = client.post(
            "/api/v1/tools/call",
            json={"name": "search_products", "arguments": {"keyword": "i5"}}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["isError"] is False
        payload = json.loads(data["content"][0]["text"])
        assert [r["model"] for r in payload["results"]] == ["i5-13400", "PRIME B760M-A"]

    def test_call_tool_without_arguments(self, client: TestClient):
        response = client.post("/api/v1/tools/call", json={"name": "list_categories"})
        assert response.status_code == 200
        payload = json.loads(response.json()["content"][0]["text"])
        assert payload["total_categories"] == 3

    def test_unknown_tool(self, client: TestClient):
        response = client.post("/api/v1/tools/call", json={"name": "drop_catalog"})
        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "UNKNOWN_TOOL"

    def test_missing_required_argument(self, client: TestClient):
        response = client.post(
            "/api/v1/tools/call",
            json={"name": "get_product_by_model", "arguments": {}}
        )
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVALID_ARGUMENTS"


class TestProductEndpoints:
    """Tests for REST catalog views."""

    def test_search(self, client: TestClient):
        response = client.get(
            "/api/v1/products/search",
            params={"keyword": "intel", "min_price": 5000, "max_price": 7000}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total_found"] == 1
        assert data["results"][0]["model"] == "i5-13400"

    def test_search_rejects_negative_price(self, client: TestClient):
        response = client.get(
            "/api/v1/products/search",
            params={"keyword": "intel", "min_price": -5}
        )
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVALID_ARGUMENTS"

    def test_get_by_model(self, client: TestClient):
        data = client.get("/api/v1/products/model/I5-13400").json()
        assert data["found"] is True
        assert data["product"]["raw_text"] == "Intel i5-13400 10核16緒 盒裝"

    def test_get_by_model_not_found(self, client: TestClient):
        response = client.get("/api/v1/products/model/unknown-1")
        assert response.status_code == 200
        assert response.json()["found"] is False

    def test_list_categories(self, client: TestClient):
        data = client.get("/api/v1/categories").json()
        assert data["total_categories"] == 3
        assert data["categories"][1]["category_name"] == "Motherboard"

    def test_category_products(self, client: TestClient):
        data = client.get(
            "/api/v1/categories/C1/products",
            params={"subcategory_name": "intel", "limit": 1}
        ).json()
        assert data["subcategory_filter"] == "Intel"
        assert data["total_products"] == 2
        assert data["showing"] == 1

    def test_category_not_found(self, client: TestClient):
        data = client.get("/api/v1/categories/C9/products").json()
        assert data["found"] is False
        assert data["category_id"] == "C9"
