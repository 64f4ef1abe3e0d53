"""Başlangıç verisi üretim modülü.

4 depo, 10 ürün ve 7/14/30 günlük sentetik KPI serileri üretir.
KPI serileri sinüs dalgası + rastgele gürültü ile simüle edilir; her seri
bugünle biten, eskiden yeniye sıralı, günde bir nokta içerir.
"""
import math
import random
from datetime import date, timedelta
from typing import Dict, List, Optional

from src.models.inventory import KPIPoint, KPIRange, Product, Warehouse


# --- SABİTLER ---

WAREHOUSES = [
    Warehouse("BLR-A", "Bangalore Warehouse A", "Bangalore", "India"),
    Warehouse("PNQ-C", "Pune Warehouse C", "Pune", "India"),
    Warehouse("DEL-B", "Delhi Warehouse B", "Delhi", "India"),
    Warehouse("MUM-D", "Mumbai Warehouse D", "Mumbai", "India"),
]

PRODUCTS = [
    Product("P-1001", "12mm Hex Bolt", "HEX-12-100", "BLR-A", 180, 120),
    Product("P-1002", "Steel Washer", "WSR-08-500", "BLR-A", 50, 80),
    Product("P-1003", "M8 Nut", "NUT-08-200", "PNQ-C", 80, 80),
    Product("P-1004", "Bearing 608ZZ", "BRG-608-50", "DEL-B", 24, 120),
    Product("P-1005", "Allen Key 6mm", "ALN-06-25", "MUM-D", 200, 150),
    Product("P-1006", "Spring Steel Strip", "SPR-12-100", "BLR-A", 30, 45),
    Product("P-1007", "O-Ring 25mm", "ORG-25-200", "PNQ-C", 150, 100),
    Product("P-1008", "Copper Wire 2.5mm", "CWR-25-500", "DEL-B", 75, 90),
    Product("P-1009", "Rubber Gasket", "RGS-40-150", "MUM-D", 100, 100),
    Product("P-1010", "Stainless Bolt M10", "SSB-10-200", "BLR-A", 45, 200),
]

BASE_STOCK = 850
BASE_DEMAND = 700
VARIATION_AMPLITUDE = 100
NOISE_SPAN = 50


def round_half_up(value: float) -> int:
    """Yarımları yukarı yuvarlar (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def generate_kpi_series(
    days: int,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> List[KPIPoint]:
    """Belirtilen gün sayısı için KPI serisi üretir."""
    if days <= 0:
        raise ValueError("Gün sayısı pozitif olmalı")
    rng = rng or random.Random()
    today = today or date.today()

    series: List[KPIPoint] = []
    for i in range(days - 1, -1, -1):
        day = today - timedelta(days=i)
        variation = math.sin(i / 5) * VARIATION_AMPLITUDE
        noise = (rng.random() - 0.5) * NOISE_SPAN
        series.append(
            KPIPoint(
                date=day.isoformat(),
                stock=round_half_up(BASE_STOCK + variation + noise),
                demand=round_half_up(BASE_DEMAND + variation * 0.8 + noise * 0.7),
            )
        )
    return series


def generate_all_kpi_series(
    seed: Optional[int] = None, today: Optional[date] = None
) -> Dict[KPIRange, List[KPIPoint]]:
    """Desteklenen tüm aralıklar için serileri bağımsız olarak üretir."""
    rng = random.Random(seed)
    return {r: generate_kpi_series(r.days, rng=rng, today=today) for r in KPIRange}
