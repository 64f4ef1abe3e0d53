"""Panel seviyesinde türetilmiş metrikler ve sayfalama."""

from __future__ import annotations

import math
from typing import Iterable

from data_layer.generators.seed import round_half_up
from src.models.inventory import PAGE_SIZE, DashboardSummary, Product, ProductPage


def fill_rate(total_fulfilled: int, total_demand: int) -> float:
    """Karşılanan talep yüzdesi, tek ondalığa yukarı yuvarlanmış.

    Toplam talep 0 ise 0 döner.
    """
    if total_demand <= 0:
        return 0.0
    return round_half_up(total_fulfilled / total_demand * 100 * 10) / 10


def summarize(products: Iterable[Product]) -> DashboardSummary:
    """Verilen ürün kümesi üzerinden toplam stok, talep ve doluluk oranını hesaplar."""
    total_stock = 0
    total_demand = 0
    total_fulfilled = 0
    for p in products:
        total_stock += p.stock
        total_demand += p.demand
        total_fulfilled += min(p.stock, p.demand)

    return DashboardSummary(
        total_stock=total_stock,
        total_demand=total_demand,
        total_fulfilled=total_fulfilled,
        fill_rate=fill_rate(total_fulfilled, total_demand),
    )


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def paginate(products: list[Product], page: int = 1, page_size: int = PAGE_SIZE) -> ProductPage:
    """1 tabanlı sayfa dilimi döndürür; son sayfadan sonrası boş dilimdir."""
    if page < 1:
        raise ValueError(f"Sayfa numarası 1 veya daha büyük olmalı: {page}")
    if page_size < 1:
        raise ValueError(f"Sayfa boyutu pozitif olmalı: {page_size}")

    start = (page - 1) * page_size
    return ProductPage(
        items=products[start:start + page_size],
        page=page,
        total_pages=total_pages(len(products), page_size),
        total_count=len(products),
        page_size=page_size,
    )
