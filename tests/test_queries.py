"""Sorgu motoru unit testleri."""

from datetime import date, timedelta

import pytest

from data_layer.generators.seed import PRODUCTS, WAREHOUSES, generate_all_kpi_series
from src.dashboard.mutations import ProductNotFoundError
from src.dashboard.queries import QueryEngine
from src.dashboard.status import product_status
from src.dashboard.store import InventoryStore
from src.models.inventory import Product, ProductFilter, ProductStatus

TODAY = date(2026, 3, 15)


def _create_engine(products=None) -> QueryEngine:
    store = InventoryStore(
        WAREHOUSES,
        PRODUCTS if products is None else products,
        generate_all_kpi_series(seed=7, today=TODAY),
    )
    return QueryEngine(store)


def _ids(products) -> list[str]:
    return [p.id for p in products]


class TestListWarehouses:

    def test_returns_all_in_insertion_order(self):
        engine = _create_engine()
        assert [w.code for w in engine.list_warehouses()] == ["BLR-A", "PNQ-C", "DEL-B", "MUM-D"]


class TestListProducts:
    """Filtreler VE ile birleşir, sıra depo sırasıdır."""

    def test_no_filter_returns_all_in_store_order(self):
        engine = _create_engine()
        assert _ids(engine.list_products()) == [p.id for p in PRODUCTS]

    def test_all_values_disable_filters(self):
        engine = _create_engine()
        result = engine.list_products(ProductFilter(search="", status="all", warehouse="all"))
        assert len(result) == len(PRODUCTS)

    def test_warehouse_filter(self):
        engine = _create_engine()
        result = engine.list_products(ProductFilter(warehouse="BLR-A"))
        assert _ids(result) == ["P-1001", "P-1002", "P-1006", "P-1010"]

    def test_search_matches_name_case_insensitive(self):
        engine = _create_engine()
        result = engine.list_products(ProductFilter(search="nut"))
        assert _ids(result) == ["P-1003"]

    def test_search_matches_sku_and_id(self):
        products = PRODUCTS + [Product("NUT-77", "Widget", "WID-77", "MUM-D", 5, 5)]
        engine = _create_engine(products)
        assert _ids(engine.list_products(ProductFilter(search="NUT"))) == ["P-1003", "NUT-77"]
        assert _ids(engine.list_products(ProductFilter(search="brg-608"))) == ["P-1004"]
        assert _ids(engine.list_products(ProductFilter(search="p-1010"))) == ["P-1010"]

    def test_status_filter(self):
        engine = _create_engine()
        result = engine.list_products(ProductFilter(status="Low"))
        assert _ids(result) == ["P-1003", "P-1009"]

    def test_status_filter_lowercase(self):
        engine = _create_engine()
        result = engine.list_products(ProductFilter(status="healthy"))
        assert _ids(result) == ["P-1001", "P-1005", "P-1007"]

    def test_uppercase_all_is_not_a_wildcard(self):
        """Yalnızca küçük harfli "all" filtreyi kapatır."""
        engine = _create_engine()
        assert engine.list_products(ProductFilter(warehouse="ALL")) == []
        assert engine.list_products(ProductFilter(status="ALL")) == []

    def test_unknown_status_matches_nothing(self):
        engine = _create_engine()
        assert engine.list_products(ProductFilter(status="overstocked")) == []

    def test_filters_are_conjunctive(self):
        """Depo=W ve durum=Critical kesişimi dönmeli."""
        engine = _create_engine()
        result = engine.list_products(ProductFilter(status="Critical", warehouse="BLR-A"))
        expected = [
            p.id for p in PRODUCTS
            if p.warehouse == "BLR-A" and product_status(p) == ProductStatus.CRITICAL
        ]
        assert _ids(result) == expected == ["P-1002", "P-1006", "P-1010"]

    def test_combined_search_and_warehouse(self):
        engine = _create_engine()
        result = engine.list_products(ProductFilter(search="bolt", warehouse="BLR-A"))
        assert _ids(result) == ["P-1001", "P-1010"]


class TestProductLookup:

    def test_get_product(self):
        engine = _create_engine()
        assert engine.get_product("P-1004").name == "Bearing 608ZZ"

    def test_get_unknown_product_raises(self):
        engine = _create_engine()
        with pytest.raises(ProductNotFoundError):
            engine.get_product("P-9999")

    def test_transfer_targets_exclude_current_warehouse(self):
        engine = _create_engine()
        targets = engine.list_transfer_targets("P-1004")
        assert [w.code for w in targets] == ["BLR-A", "PNQ-C", "MUM-D"]


class TestKPISeries:

    def test_14d_has_14_ascending_points_ending_today(self):
        engine = _create_engine()
        series = engine.get_kpi_series("14d")
        assert len(series) == 14
        dates = [p.date for p in series]
        assert dates == sorted(dates)
        assert dates[-1] == TODAY.isoformat()
        assert dates[0] == (TODAY - timedelta(days=13)).isoformat()

    @pytest.mark.parametrize("kpi_range,length", [("7d", 7), ("14d", 14), ("30d", 30)])
    def test_series_lengths(self, kpi_range, length):
        engine = _create_engine()
        assert len(engine.get_kpi_series(kpi_range)) == length

    def test_unknown_range_falls_back_to_7d(self):
        engine = _create_engine()
        assert engine.get_kpi_series("bogus") == engine.get_kpi_series("7d")
        assert engine.get_kpi_series("") == engine.get_kpi_series("7d")
