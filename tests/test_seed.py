"""Başlangıç verisi ve KPI üretimi unit testleri."""

import random
from datetime import date, timedelta

import pytest

from data_layer.generators.seed import (
    PRODUCTS,
    WAREHOUSES,
    generate_all_kpi_series,
    generate_kpi_series,
    round_half_up,
)
from src.models.inventory import KPIRange

TODAY = date(2026, 1, 3)


class TestSeedData:

    def test_product_warehouses_exist(self):
        codes = {w.code for w in WAREHOUSES}
        assert all(p.warehouse in codes for p in PRODUCTS)

    def test_ids_unique(self):
        assert len({p.id for p in PRODUCTS}) == len(PRODUCTS)
        assert len({w.code for w in WAREHOUSES}) == len(WAREHOUSES)

    def test_known_product(self):
        bearing = [p for p in PRODUCTS if p.id == "P-1004"][0]
        assert (bearing.warehouse, bearing.stock, bearing.demand) == ("DEL-B", 24, 120)


class TestKPIGeneration:

    def test_one_point_per_day_ending_today(self):
        series = generate_kpi_series(30, rng=random.Random(3), today=TODAY)
        assert len(series) == 30
        expected = [(TODAY - timedelta(days=i)).isoformat() for i in range(29, -1, -1)]
        assert [p.date for p in series] == expected

    def test_values_stay_near_baseline(self):
        series = generate_kpi_series(30, rng=random.Random(3), today=TODAY)
        for point in series:
            # sin genliği 100, gürültü +-25
            assert 725 <= point.stock <= 975
            assert 600 <= point.demand <= 800

    def test_same_seed_is_reproducible(self):
        assert generate_all_kpi_series(seed=11, today=TODAY) == generate_all_kpi_series(seed=11, today=TODAY)

    def test_all_ranges_generated(self):
        series = generate_all_kpi_series(seed=1, today=TODAY)
        assert set(series) == set(KPIRange)
        assert {r: len(v) for r, v in series.items()} == {
            KPIRange.DAYS_7: 7, KPIRange.DAYS_14: 14, KPIRange.DAYS_30: 30,
        }

    def test_default_today(self):
        series = generate_kpi_series(7, rng=random.Random(0))
        assert series[-1].date == date.today().isoformat()

    def test_non_positive_days_raises(self):
        with pytest.raises(ValueError):
            generate_kpi_series(0)


class TestRounding:

    @pytest.mark.parametrize("value,expected", [(2.5, 3), (-2.5, -2), (0.49, 0), (849.5, 850), (7.0, 7)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected
