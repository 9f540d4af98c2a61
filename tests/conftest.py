"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides sample catalog documents, catalog services and a test client.

==============================================================================
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List

import pytest
from fastapi.testclient import TestClient

from hwcatalog.catalog import Catalog, CatalogStore
from hwcatalog.config import Settings
from hwcatalog.main import Application
from hwcatalog.services import QueryEngine, ToolDispatcher


# ============================================================================
# DOCUMENT FIXTURES
# ============================================================================

def _product(index: str, brand: str, model: str, price: int, raw_text: str, **extra) -> Dict[str, Any]:
    product = {
        "index": index,
        "group": extra.pop("group", None),
        "brand": brand,
        "model": model,
        "specs": extra.pop("specs", []),
        "price": price,
        "original_price": extra.pop("original_price", None),
        "discount_amount": extra.pop("discount_amount", None),
        "markers": extra.pop("markers", []),
        "raw_text": raw_text,
    }
    product.update(extra)
    return product


@pytest.fixture
def catalog_document() -> List[Dict[str, Any]]:
    """Three categories in a fixed source order."""
    return [
        {
            "category_id": "C1",
            "category_name": "CPU",
            "summary": "Desktop processors",
            "stats": {
                "total_items": 3,
                "hot_items": 1,
                "with_images": 2,
                "with_discussions": 0,
                "price_changes": 1,
                "time_limited": 1,
            },
            "crawled_at": "2025-06-01T10:00:00",
            "subcategories": [
                {
                    "name": "Intel",
                    "products": [
                        _product(
                            "1", "Intel", "i5-13400", 6000,
                            "Intel i5-13400 10核16緒 盒裝",
                            group="LGA1700",
                            specs=["10C/16T", "2.5GHz"],
                            original_price=6500,
                            discount_amount=500,
                            markers=["hot"],
                        ),
                        _product(
                            "2", "Intel", "i7-13700", 11500,
                            "Intel i7-13700 16核24緒",
                            group="LGA1700",
                            specs=["16C/24T"],
                        ),
                    ],
                },
                {
                    "name": "AMD",
                    "products": [
                        _product(
                            "3", "AMD", "Ryzen 5 7600", 5800,
                            "AMD Ryzen 5 7600 6核12緒 限時",
                            specs=["6C/12T", "AM5"],
                            markers=["time-limited"],
                        ),
                    ],
                },
            ],
        },
        {
            "category_id": "C2",
            "category_name": "Motherboard",
            "summary": "Mainboards",
            "stats": {"total_items": 1},
            "subcategories": [
                {
                    "name": "Intel B760",
                    "products": [
                        _product(
                            "4", "ASUS", "PRIME B760M-A", 3990,
                            "華碩 PRIME B760M-A D5 (mATX) for Intel i5",
                            specs=["mATX", "DDR5"],
                        ),
                    ],
                },
            ],
        },
        {
            "category_id": "C3",
            "category_name": "Graphics Card",
            "summary": "Discrete GPUs",
            "stats": {"total_items": 1, "hot_items": 1},
            "subcategories": [
                {
                    "name": "NVIDIA",
                    "products": [
                        _product(
                            "5", "MSI", "RTX 4060 VENTUS 2X", 9990,
                            "MSI RTX 4060 VENTUS 2X BLACK 8G OC",
                            specs=["8GB GDDR6"],
                            markers=["hot"],
                        ),
                    ],
                },
                {"name": "Empty", "products": []},
            ],
        },
    ]


@pytest.fixture
def boundary_document() -> List[Dict[str, Any]]:
    """Single category, single product."""
    return [
        {
            "category_id": "C1",
            "category_name": "CPU",
            "summary": "",
            "stats": {},
            "subcategories": [
                {
                    "name": "Intel",
                    "products": [
                        _product("1", "Intel", "i5-13400", 6000, "Intel i5-13400"),
                    ],
                },
            ],
        },
    ]


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_document) -> Path:
    """Catalog document written to disk."""
    path = tmp_path / "product.json"
    path.write_text(json.dumps(catalog_document, ensure_ascii=False), encoding="utf-8")
    return path


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def catalog(catalog_document) -> Catalog:
    return Catalog.from_document(catalog_document)


@pytest.fixture
def store(catalog_document) -> CatalogStore:
    store = CatalogStore()
    store.load(catalog_document)
    return store


@pytest.fixture
def engine(store: CatalogStore) -> QueryEngine:
    return QueryEngine(store)


@pytest.fixture
def dispatcher(engine: QueryEngine) -> ToolDispatcher:
    return ToolDispatcher(engine)


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def make_client() -> Generator[Callable[[Path], TestClient], None, None]:
    """Factory for test clients serving a given catalog file."""
    clients = []

    def factory(path: Path) -> TestClient:
        app = Application(Settings(catalog_file=str(path))).app
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, catalog_file: Path) -> TestClient:
    """Test client serving the sample catalog."""
    return make_client(catalog_file)
