"""
==============================================================================
Catalog Store Tests
==============================================================================

Loading, ordering, validation and degrade-to-empty behaviour.

==============================================================================
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from hwcatalog.catalog import Catalog, CatalogStore
from hwcatalog.services import QueryEngine


class TestLoading:
    """Tests for successful document ingest."""

    def test_preserves_source_order(self, store: CatalogStore):
        """Test categories, subcategories and products keep document order."""
        catalog = store.get()
        assert [c.category_id for c in catalog.categories] == ["C1", "C2", "C3"]
        cpu = catalog.categories[0]
        assert [s.name for s in cpu.subcategories] == ["Intel", "AMD"]
        assert [p.model for p in cpu.subcategories[0].products] == ["i5-13400", "i7-13700"]

    def test_accepts_raw_bytes_and_str(self, catalog_document):
        """Test raw JSON text and bytes load to the same catalog."""
        raw = json.dumps(catalog_document, ensure_ascii=False)

        from_str = CatalogStore().load(raw)
        from_bytes = CatalogStore().load(raw.encode("utf-8"))

        assert from_str == from_bytes
        assert from_bytes.product_count == 5

    def test_load_file(self, catalog_file: Path):
        """Test loading a catalog from disk."""
        store = CatalogStore()
        catalog = store.load_file(catalog_file)

        assert store.is_loaded
        assert store.load_error is None
        assert store.source == str(catalog_file)
        assert len(catalog.categories) == 3

    def test_unknown_fields_ignored(self, catalog_document):
        """Test extra product fields are dropped on ingest."""
        catalog_document[0]["subcategories"][0]["products"][0]["image_url"] = "x.jpg"
        catalog = CatalogStore().load(catalog_document)

        assert catalog.product_count == 5
        assert not hasattr(catalog.categories[0].subcategories[0].products[0], "image_url")

    def test_missing_markers_and_specs_default_to_empty(self):
        """Test optional product fields get their defaults."""
        document = [{
            "category_id": "X",
            "category_name": "Misc",
            "subcategories": [{
                "name": "Cables",
                "products": [{"index": 7, "brand": "Generic", "model": "USB-C", "price": 99}],
            }],
        }]
        product = CatalogStore().load(document).categories[0].subcategories[0].products[0]

        assert product.markers == ()
        assert product.specs == ()
        assert product.index == "7"
        assert product.group is None
        assert product.raw_text == ""

    def test_stats_carried_as_is(self, store: CatalogStore):
        """Test category stats are kept as given."""
        stats = store.get().categories[0].stats
        assert stats.total_items == 3
        assert stats.time_limited == 1
        assert store.get().categories[1].stats.hot_items == 0

    def test_integral_prices_stay_integers(self, store: CatalogStore):
        """Test whole-number prices are not turned into floats."""
        product = store.get().categories[0].subcategories[0].products[0]
        assert product.price == 6000
        assert isinstance(product.price, int)

    def test_catalog_is_immutable(self, store: CatalogStore):
        """Test loaded products cannot be modified."""
        product = store.get().categories[0].subcategories[0].products[0]
        with pytest.raises(ValidationError):
            product.price = 1


class TestDegradeToEmpty:
    """Malformed input leaves a working, empty catalog."""

    @pytest.mark.parametrize("document", [
        b"{not json",
        "",
        {"category_id": "C1"},
        [{"category_name": "no id"}],
        [{"category_id": "C1", "category_name": "CPU", "subcategories": "Intel"}],
    ])
    def test_malformed_document(self, document):
        """Test malformed documents leave an empty catalog and an error."""
        store = CatalogStore()
        catalog = store.load(document)

        assert catalog == Catalog.empty()
        assert not store.is_loaded
        assert store.load_error

    def test_deeply_nested_document(self):
        """Test nesting past the decoder's recursion limit degrades to empty."""
        store = CatalogStore()
        catalog = store.load("[" * 100000 + "]" * 100000)

        assert catalog == Catalog.empty()
        assert not store.is_loaded
        assert store.load_error.startswith("Invalid JSON")

    def test_duplicate_category_id(self, catalog_document):
        """Test a repeated category id rejects the document."""
        catalog_document[1]["category_id"] = "C1"
        store = CatalogStore()

        assert store.load(catalog_document).categories == ()
        assert "category_id" in store.load_error

    def test_duplicate_subcategory_name(self, catalog_document):
        """Test a repeated subcategory name rejects the document."""
        catalog_document[0]["subcategories"][1]["name"] = "Intel"
        store = CatalogStore()

        assert store.load(catalog_document).categories == ()

    def test_negative_price(self, catalog_document):
        """Test a negative price rejects the document."""
        catalog_document[0]["subcategories"][0]["products"][0]["price"] = -1
        store = CatalogStore()

        assert store.load(catalog_document).categories == ()

    def test_missing_file(self, tmp_path: Path):
        """Test a missing file is reported, not raised."""
        store = CatalogStore()
        catalog = store.load_file(tmp_path / "missing.json")

        assert catalog.categories == ()
        assert "not found" in store.load_error
        assert store.status()["status"] == "not_loaded"

    def test_failed_load_replaces_previous_snapshot(self, store: CatalogStore):
        """Test a failed reload drops the earlier catalog."""
        store.load(b"[")
        assert store.get().categories == ()

    def test_queries_still_work_on_empty_catalog(self):
        """Test every query answers against an empty catalog."""
        store = CatalogStore()
        store.load(b"garbage")
        engine = QueryEngine(store)

        assert engine.search("i5").results == []
        assert engine.get_by_model("i5-13400").found is False
        assert engine.list_categories().total_categories == 0
        assert engine.get_category_products("C1").found is False


class TestStatus:

    def test_status_after_load(self, store: CatalogStore):
        """Test status counts for a loaded catalog."""
        status = store.status()
        assert status["status"] == "healthy"
        assert status["categories"] == 3
        assert status["products"] == 5
        assert status["error"] is None
